"""Backend blackboard interface with document store and relation configuration."""

from campus_types.blackboards import BlackboardInterface as BlackboardInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class BlackboardInterface(BlackboardInterfaceBase, BackendEntityInterface):
    collection = "blackboards"
    cache_key = "blackboards"
    cache_ttl = 600
    relations = (
        Relation("author", "User"),
    )
