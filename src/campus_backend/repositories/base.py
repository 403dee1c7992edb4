"""
Generic entity repository with write-through caching.

One EntityRepository serves every entity type; the entity interface supplies
the model, collection, cache key, TTL and relations. The whole populated
collection is cached under the interface's cache key:

- Reads serve the cached list and reload it from the store on a miss.
- Writes go to the store first, then the cached list is patched, put back
  and re-read to verify the patch landed.

There is no isolation between the store write and the cache patch; a reader
in between sees the previous list until the patch is put.
"""

import logging
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from campus_backend.cache import ExpiringCache, get_cache
from campus_backend.exceptions import CacheException, DatabaseException, NotFoundException
from campus_backend.interfaces import BackendEntityInterface, InterfaceRegistry, default_registry
from campus_backend.repositories.population import Populator, dehydrate
from campus_backend.repositories.validation import validate_record, validation_exception
from campus_backend.settings import settings
from campus_backend.store.base import RESERVED_FIELDS, Document, DocumentStore, Rule
from campus_backend.utils.rules import describe_rule, find_by_rule

logger = logging.getLogger(__name__)

# Type variable for the entity model
T = TypeVar("T", bound=BaseModel)


class EntityRepository(Generic[T]):
    """
    Cache-aside repository for one entity type.

    Records are returned as instances of the interface's model with their
    relation fields populated (nested records as plain dicts). Every returned
    record is a deep copy; the cached instances are never handed out.
    """

    def __init__(
        self,
        interface: Type[BackendEntityInterface],
        store: DocumentStore,
        cache: Optional[ExpiringCache] = None,
        registry: Optional[InterfaceRegistry] = None,
        populator: Optional[Populator] = None,
        ttl: Optional[float] = None,
    ):
        """
        Initialize repository.

        Args:
            interface: Entity interface configuring this repository
            store: Document store holding the collection
            cache: Shared cache (default: process-wide instance)
            registry: Interfaces used to resolve relation targets
            populator: Populator to share between repositories
            ttl: Cache TTL in seconds (default: settings, then interface)
        """
        self.interface = interface
        self.store = store
        self.cache = cache if cache is not None else get_cache()
        if populator is None:
            populator = Populator(store, registry if registry is not None else default_registry)
        self.populator = populator
        self.ttl = ttl if ttl is not None else settings.cache_ttl_for(interface.cache_key, interface.cache_ttl)

    @property
    def entity_type(self) -> str:
        return self.interface.name

    @property
    def cache_key(self) -> str:
        return self.interface.cache_key

    # ========================================================================
    # Reads
    # ========================================================================

    async def get_all(self) -> List[T]:
        """Return every record, served from the cache while it is fresh."""
        cached = self.cache.get(self.cache_key)
        if cached is not None:
            return self._detach(cached)
        return await self.reload()

    async def reload(self) -> List[T]:
        """
        Read the whole collection from the store and replace the cache entry.

        Raises:
            DatabaseException: DB_001 if the store returns no list
            DatabaseException: DB_005 if a relation cannot be populated
        """
        documents = await self.store.get_all_documents(self.interface.collection)
        if not isinstance(documents, list):
            logger.error(f"Reading {self.interface.collection} returned {type(documents).__name__}")
            raise DatabaseException(
                error_code="DB_001",
                detail=f"Failed to read {self.entity_type} records from the database",
                entity_type=self.entity_type,
                identifier=self.interface.collection,
            )

        populated = await self.populator.populate_many(documents, self.interface)
        entities = [self._from_document(d) for d in populated]
        self.cache.put(self.cache_key, entities, self.ttl)
        logger.debug(f"Reloaded {len(entities)} {self.entity_type} record(s) into '{self.cache_key}'")
        return self._detach(entities)

    async def get_by_id(self, entity_id: str) -> T:
        """
        Raises:
            NotFoundException: NF_001 if no record has this id
        """
        for entity in await self.get_all():
            if entity.id == entity_id:
                return entity
        raise NotFoundException(
            error_code="NF_001",
            detail=f"{self.entity_type} with id '{entity_id}' not found",
            entity_type=self.entity_type,
            identifier=entity_id,
        )

    async def get_all_by_rule(self, rule: Rule) -> List[T]:
        """
        Return the records matching rule, in cache order.

        Raises:
            NotFoundException: NF_002 if nothing matches
        """
        matches = await self.find_all_by_rule(rule)
        if not matches:
            raise NotFoundException(
                error_code="NF_002",
                detail=f"No {self.entity_type} matches {describe_rule(rule)}",
                entity_type=self.entity_type,
                identifier=rule,
            )
        return matches

    async def find_all_by_rule(self, rule: Rule) -> List[T]:
        """Like get_all_by_rule, but an empty list when nothing matches."""
        return find_by_rule(await self.get_all(), rule)

    def verify_in_cache(self, entity_id: str) -> bool:
        """True if the cached list holds a record with this id."""
        cached = self.cache.get(self.cache_key)
        return cached is not None and any(entity.id == entity_id for entity in cached)

    def invalidate(self) -> None:
        """Drop the cached list; the next read reloads it."""
        self.cache.delete(self.cache_key)

    # ========================================================================
    # Writes
    # ========================================================================

    async def create(self, record: Union[T, dict]) -> T:
        """
        Store a new record and append it to the cached list.

        Returns:
            The populated record including its new id

        Raises:
            ValidationException: record does not fit the model
            DatabaseException: DB_002 if the store rejects the write
            CacheException: the record is missing from the cache afterwards
        """
        entity = self.validate(record)
        data = self._to_document(entity)

        document = await self.store.create_document(self.interface.collection, data)
        if not document:
            raise DatabaseException(
                error_code="DB_002",
                detail=f"Failed to create {self.entity_type}",
                entity_type=self.entity_type,
                context={"data": data},
            )

        entity = await self._to_entity(document)
        entities = await self._cached_or_reload()
        self._replace_or_append(entities, entity)
        self.cache.put(self.cache_key, entities, self.ttl)

        if not self.verify_in_cache(entity.id):
            self._raise_divergence("create", entity.id)

        logger.info(f"{self.entity_type} created: {entity.id}")
        return entity.model_copy(deep=True)

    async def update(self, entity_id: str, record: Union[T, dict]) -> T:
        """
        Replace a stored record and its entry in the cached list.

        Raises:
            ValidationException: record does not fit the model
            DatabaseException: DB_003 if the store rejects the write
            CacheException: the cache does not hold the new record afterwards
        """
        entity = self.validate(record, entity_id)
        data = self._to_document(entity)

        document = await self.store.update_document(self.interface.collection, entity_id, data)
        if not document:
            raise DatabaseException(
                error_code="DB_003",
                detail=f"Failed to update {self.entity_type} '{entity_id}'",
                entity_type=self.entity_type,
                identifier=entity_id,
            )

        entity = await self._to_entity(document)
        entities = await self._cached_or_reload()
        self._replace_or_append(entities, entity)
        self.cache.put(self.cache_key, entities, self.ttl)

        cached = self.cache.get(self.cache_key)
        if cached is None or entity not in cached:
            self._raise_divergence("update", entity_id)

        logger.info(f"{self.entity_type} updated: {entity_id}")
        return entity.model_copy(deep=True)

    async def delete(self, entity_id: str) -> bool:
        """
        Delete a record from the store, then from the cached list.

        Raises:
            DatabaseException: DB_004 if the store rejects the delete; the
                cache is left untouched
            CacheException: the record is still cached afterwards
        """
        deleted = await self.store.delete_document(self.interface.collection, entity_id)
        if not deleted:
            raise DatabaseException(
                error_code="DB_004",
                detail=f"Failed to delete {self.entity_type} '{entity_id}'",
                entity_type=self.entity_type,
                identifier=entity_id,
            )

        entities = await self._cached_or_reload()
        for index, entity in enumerate(entities):
            if entity.id == entity_id:
                del entities[index]
                break
        self.cache.put(self.cache_key, entities, self.ttl)

        if self.verify_in_cache(entity_id):
            self._raise_divergence("delete", entity_id)

        logger.info(f"{self.entity_type} deleted: {entity_id}")
        return True

    async def modify(self, entity_id: str, mutation: Callable[[T], Any]) -> T:
        """
        Apply mutation to a detached copy of the record and persist it through update().

        Errors raised by the model while mutating become ValidationException.
        """
        entity = await self.get_by_id(entity_id)
        try:
            mutation(entity)
        except (ValidationError, ValueError) as e:
            raise validation_exception(e, self.entity_type, entity_id) from e
        return await self.update(entity_id, entity)

    # ========================================================================
    # Helpers
    # ========================================================================

    def validate(self, record: Union[T, dict], entity_id: Optional[str] = None) -> T:
        return validate_record(self.interface.model, record, self.entity_type, entity_id)

    async def populate(self, document: Document, depth: Optional[int] = None) -> Document:
        """Populate the relation fields of a store document."""
        return await self.populator.populate(document, self.interface, depth)

    async def _to_entity(self, document: Document) -> T:
        return self._from_document(await self.populate(document))

    def _from_document(self, populated: Document) -> T:
        try:
            return self.interface.model.model_validate(populated)
        except ValidationError as e:
            raise DatabaseException(
                error_code="DB_001",
                detail=f"Stored {self.entity_type} '{populated.get('id')}' does not match its model",
                entity_type=self.entity_type,
                identifier=populated.get("id"),
                context={"errors": [err["msg"] for err in e.errors()]},
            ) from e

    @staticmethod
    def _detach(entities: List[T]) -> List[T]:
        return [entity.model_copy(deep=True) for entity in entities]

    def _to_document(self, entity: T) -> Document:
        data = entity.model_dump(mode="json", exclude=set(RESERVED_FIELDS))
        return dehydrate(data, self.interface)

    async def _cached_or_reload(self) -> List[T]:
        cached = self.cache.get(self.cache_key)
        if cached is None:
            return await self.reload()
        return list(cached)

    @staticmethod
    def _replace_or_append(entities: List[T], entity: T) -> None:
        for index, existing in enumerate(entities):
            if existing.id == entity.id:
                entities[index] = entity
                return
        entities.append(entity)

    def _raise_divergence(self, operation: str, entity_id: str) -> None:
        logger.error(f"Cache '{self.cache_key}' out of sync after {operation} of {self.entity_type} {entity_id}")
        raise CacheException(
            detail=f"Cache for {self.entity_type} not updated after {operation} of '{entity_id}'",
            entity_type=self.entity_type,
            identifier=entity_id,
        )
