"""
Repository wiring.

Repositories builds one repository per registered entity interface, all
sharing a store, a cache and a populator. Entity types with extra operations
get their specialised repository class.
"""

import asyncio
import logging
from typing import Dict, Optional, Type

from campus_backend.cache import ExpiringCache, get_cache
from campus_backend.interfaces import InterfaceRegistry, default_registry
from campus_backend.store.base import DocumentStore

from .approval import ApprovalRepository
from .base import EntityRepository
from .membership import ChatRepository, ClubRepository
from .message import MessageRepository
from .population import Populator

logger = logging.getLogger(__name__)

REPOSITORY_CLASSES: Dict[str, Type[EntityRepository]] = {
    "Message": MessageRepository,
    "Blackboard": ApprovalRepository,
    "Event": ApprovalRepository,
    "Club": ClubRepository,
    "Chat": ChatRepository,
}


class Repositories:
    """
    Lazily built repositories, looked up by entity type name.

    Example:
        >>> repos = Repositories(MemoryDocumentStore())
        >>> users = await repos["User"].get_all()
        >>> await repos.messages.add_reaction(message_id, "👍")
    """

    def __init__(
        self,
        store: DocumentStore,
        cache: Optional[ExpiringCache] = None,
        registry: Optional[InterfaceRegistry] = None,
        depth: Optional[int] = None,
    ):
        self.store = store
        self.cache = cache if cache is not None else get_cache()
        self.registry = registry if registry is not None else default_registry
        self.populator = Populator(store, self.registry, depth)
        self._repositories: Dict[str, EntityRepository] = {}

    def get(self, name: str) -> EntityRepository:
        """
        Raises:
            ConfigurationException: name is not a registered entity type
        """
        repository = self._repositories.get(name)
        if repository is None:
            interface = self.registry.get(name)
            repository_class = REPOSITORY_CLASSES.get(name, EntityRepository)
            repository = repository_class(
                interface,
                self.store,
                cache=self.cache,
                registry=self.registry,
                populator=self.populator,
            )
            self._repositories[name] = repository
        return repository

    __getitem__ = get

    @property
    def users(self) -> EntityRepository:
        return self.get("User")

    @property
    def clubs(self) -> ClubRepository:
        return self.get("Club")

    @property
    def events(self) -> ApprovalRepository:
        return self.get("Event")

    @property
    def blackboards(self) -> ApprovalRepository:
        return self.get("Blackboard")

    @property
    def chats(self) -> ChatRepository:
        return self.get("Chat")

    @property
    def messages(self) -> MessageRepository:
        return self.get("Message")

    async def reload_all(self) -> int:
        """
        Fill the cache for every registered entity type.

        Returns:
            Total number of cached records
        """
        results = await asyncio.gather(*(self.get(i.name).reload() for i in self.registry))
        total = sum(len(records) for records in results)
        logger.info(f"Cache initialized with {total} record(s) across {len(results)} collection(s)")
        return total

    def invalidate_all(self) -> None:
        for interface in self.registry:
            self.cache.delete(interface.cache_key)
