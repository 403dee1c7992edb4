"""Backend event ticket interface with document store and relation configuration."""

from campus_types.events import EventTicketInterface as EventTicketInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class EventTicketInterface(EventTicketInterfaceBase, BackendEntityInterface):
    """Backend-specific event ticket interface."""

    collection = "event_tickets"
    cache_key = "event_tickets"
    cache_ttl = 900
    relations = (
        Relation("event", "Event"),
        Relation("buyer", "User"),
    )
