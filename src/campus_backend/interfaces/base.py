"""
Backend-specific base interface that extends campus-types EntityInterface
with document store, cache and relation concerns.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple, Type

from campus_types.base import EntityInterface as EntityInterfaceBase

from campus_backend.exceptions import ConfigurationException


@dataclass(frozen=True)
class Relation:
    """
    Relation field declaration.

    Attributes:
        field: Field holding the reference(s); dotted for nested objects
               (e.g. "details.events")
        target: Name of the referenced entity interface (e.g. "User")
        many: True if the field holds a list of references
    """
    field: str
    target: str
    many: bool = False


class BackendEntityInterface(EntityInterfaceBase):
    """
    Configuration of one entity type for the generic repository.

    Attributes:
        name: Entity type name used in errors and relation targets
        model: Pydantic model of the entity record
        collection: Document store collection name
        cache_key: Key of the collection's entry in the shared cache
        cache_ttl: Cache time-to-live in seconds
        relations: Relation fields, joined in declaration order
    """

    collection: str = None
    cache_key: str = None
    cache_ttl: float = 600
    relations: Tuple[Relation, ...] = ()

    @classmethod
    def relation_fields(cls) -> Tuple[str, ...]:
        return tuple(relation.field for relation in cls.relations)


class InterfaceRegistry:
    """
    Lookup of entity interfaces by name.

    Guarantees that no two interfaces share a cache key, since all
    repositories share one cache.
    """

    def __init__(self, interfaces: Iterable[Type[BackendEntityInterface]] = ()):
        self._interfaces: Dict[str, Type[BackendEntityInterface]] = {}
        for interface in interfaces:
            self.register(interface)

    def register(self, interface: Type[BackendEntityInterface]) -> None:
        if not interface.name or not interface.cache_key or not interface.collection:
            raise ConfigurationException(
                detail=f"Interface {interface.__name__} needs name, collection and cache_key",
                entity_type=interface.name,
            )
        if interface.name in self._interfaces:
            raise ConfigurationException(
                detail=f"Entity type '{interface.name}' registered twice",
                entity_type=interface.name,
            )
        for other in self._interfaces.values():
            if other.cache_key == interface.cache_key:
                raise ConfigurationException(
                    detail=f"Cache key '{interface.cache_key}' used by both {other.name} and {interface.name}",
                    entity_type=interface.name,
                    identifier=interface.cache_key,
                )
        self._interfaces[interface.name] = interface

    def get(self, name: str) -> Type[BackendEntityInterface]:
        try:
            return self._interfaces[name]
        except KeyError:
            raise ConfigurationException(
                detail=f"Unknown entity type '{name}'",
                entity_type=name,
            ) from None

    def find(self, name: str) -> Optional[Type[BackendEntityInterface]]:
        return self._interfaces.get(name)

    def validate(self) -> None:
        """Check that every relation points to a registered entity type."""
        for interface in self._interfaces.values():
            for relation in interface.relations:
                if relation.target not in self._interfaces:
                    raise ConfigurationException(
                        detail=f"{interface.name}.{relation.field} references unknown entity '{relation.target}'",
                        entity_type=interface.name,
                        identifier=relation.field,
                    )

    def __iter__(self) -> Iterator[Type[BackendEntityInterface]]:
        return iter(self._interfaces.values())

    def __contains__(self, name: str) -> bool:
        return name in self._interfaces

    def __len__(self) -> int:
        return len(self._interfaces)
