"""Backend message interface with document store and relation configuration."""

from campus_types.messages import MessageInterface as MessageInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class MessageInterface(MessageInterfaceBase, BackendEntityInterface):
    """Backend-specific message interface."""

    collection = "messages"
    cache_key = "messages"
    cache_ttl = 120
    relations = (
        Relation("chat", "Chat"),
        Relation("author", "User"),
        # Replies reference the message they answer
        Relation("answer", "Message"),
    )
