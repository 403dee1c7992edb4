"""
Population of relation fields.

Store documents hold bare ids in their relation fields. Population replaces
every such id with the referenced document, itself populated one level less
deep, so with the default depth of 2 a user carries its classes and each
class carries its members, but those members keep their relation ids.
"""

import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional, Tuple, Type

from campus_types.base import reference_id

from campus_backend.exceptions import CampusException, DatabaseException
from campus_backend.interfaces.base import BackendEntityInterface, InterfaceRegistry, Relation
from campus_backend.settings import settings
from campus_backend.store.base import Document, DocumentStore

logger = logging.getLogger(__name__)


async def _gather(awaitables) -> List[Any]:
    """Await all of awaitables, then raise the first failure if any."""
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


def _container(document: Dict[str, Any], path: str) -> Tuple[Optional[Dict[str, Any]], str]:
    """Return the dict holding the last segment of a dotted path, and that segment."""
    *parents, leaf = path.split(".")
    container = document
    for part in parents:
        container = container.get(part) if isinstance(container, dict) else None
        if container is None:
            return None, leaf
    if not isinstance(container, dict):
        return None, leaf
    return container, leaf


def dehydrate(data: Dict[str, Any], interface: Type[BackendEntityInterface]) -> Dict[str, Any]:
    """
    Collapse populated relation values back to ids.

    Returns a copy of data that is safe to hand to the document store.
    """
    result = copy.deepcopy(data)
    for relation in interface.relations:
        container, leaf = _container(result, relation.field)
        if container is None or leaf not in container:
            continue
        value = container[leaf]
        if relation.many:
            container[leaf] = [reference_id(item) for item in (value or [])]
        else:
            container[leaf] = reference_id(value)
    return result


class Populator:
    """
    Joins relation fields of store documents.

    Referenced documents are read through store.get_document; all reads of
    one level run concurrently.
    """

    def __init__(
        self,
        store: DocumentStore,
        registry: InterfaceRegistry,
        depth: Optional[int] = None,
    ):
        self.store = store
        self.registry = registry
        self.depth = settings.POPULATION_DEPTH if depth is None else depth

    async def populate(
        self,
        document: Document,
        interface: Type[BackendEntityInterface],
        depth: Optional[int] = None,
    ) -> Document:
        """
        Return a copy of document with its relation fields populated.

        Raises:
            DatabaseException: DB_005 if a referenced document cannot be read
        """
        depth = self.depth if depth is None else depth
        populated = copy.deepcopy(document)
        if depth <= 0 or not interface.relations:
            return populated

        try:
            await _gather(
                self._populate_relation(populated, interface, relation, depth)
                for relation in interface.relations
            )
        except CampusException:
            raise
        except Exception as e:
            raise DatabaseException(
                error_code="DB_005",
                detail=f"Failed to populate {interface.name} '{populated.get('id')}': {e}",
                entity_type=interface.name,
                identifier=populated.get("id"),
            ) from e
        return populated

    async def _populate_relation(
        self,
        document: Document,
        interface: Type[BackendEntityInterface],
        relation: Relation,
        depth: int,
    ) -> None:
        container, leaf = _container(document, relation.field)
        if container is None or container.get(leaf) is None:
            return

        target = self.registry.get(relation.target)
        value = container[leaf]
        if relation.many:
            container[leaf] = await _gather(
                self._fetch(interface, document, target, reference_id(item), depth)
                for item in value
            )
        else:
            container[leaf] = await self._fetch(interface, document, target, reference_id(value), depth)

    async def _fetch(
        self,
        interface: Type[BackendEntityInterface],
        owner: Document,
        target: Type[BackendEntityInterface],
        target_id: str,
        depth: int,
    ) -> Document:
        referenced = await self.store.get_document(target.collection, target_id)
        if referenced is None:
            logger.error(f"{interface.name} {owner.get('id')} references missing {target.name} {target_id}")
            raise DatabaseException(
                error_code="DB_005",
                detail=f"Failed to populate {interface.name} '{owner.get('id')}': "
                       f"{target.name} '{target_id}' does not exist",
                entity_type=interface.name,
                identifier=owner.get("id"),
                context={"target": target.name, "target_id": target_id},
            )
        return await self.populate(referenced, target, depth - 1)

    async def populate_many(
        self,
        documents: List[Document],
        interface: Type[BackendEntityInterface],
    ) -> List[Document]:
        """Populate documents concurrently, keeping their order."""
        return await _gather(self.populate(d, interface) for d in documents)
