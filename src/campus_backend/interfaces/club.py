"""Backend club interface with document store and relation configuration."""

from campus_types.clubs import ClubInterface as ClubInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class ClubInterface(ClubInterfaceBase, BackendEntityInterface):
    """Backend-specific club interface."""

    collection = "clubs"
    cache_key = "clubs"
    cache_ttl = 300
    relations = (
        Relation("leaders", "User", many=True),
        Relation("members", "User", many=True),
        Relation("chat", "Chat"),
        Relation("details.events", "Event", many=True),  # nested in ClubDetails
    )
