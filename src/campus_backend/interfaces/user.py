"""Backend user interface with document store and relation configuration."""

from campus_types.users import UserInterface as UserInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class UserInterface(UserInterfaceBase, BackendEntityInterface):
    """Backend-specific user interface."""

    collection = "users"
    cache_key = "users"
    cache_ttl = 180
    relations = (
        Relation("classes", "Class", many=True),
        Relation("extra_courses", "Course", many=True),
        Relation("blackboards", "Blackboard", many=True),
        Relation("clubs", "Club", many=True),
        Relation("chats", "Chat", many=True),
    )
