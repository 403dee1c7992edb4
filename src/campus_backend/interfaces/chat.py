"""Backend chat interface with document store and relation configuration."""

from campus_types.chats import ChatInterface as ChatInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class ChatInterface(ChatInterfaceBase, BackendEntityInterface):
    collection = "chats"
    cache_key = "chats"
    cache_ttl = 120
    relations = (
        Relation("targets", "User", many=True),
        Relation("courses", "Course", many=True),
        Relation("clubs", "Club", many=True),
    )
