"""Backend event interface with document store and relation configuration."""

from campus_types.events import EventInterface as EventInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class EventInterface(EventInterfaceBase, BackendEntityInterface):
    """Backend-specific event interface."""

    collection = "events"
    cache_key = "events"
    cache_ttl = 300
    relations = (
        Relation("clubs", "Club", many=True),
        Relation("tickets.sold", "EventTicket", many=True),
        Relation("subscribers", "User", many=True),
    )
