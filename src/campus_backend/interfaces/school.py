"""Backend school interface with document store and relation configuration."""

from campus_types.schools import SchoolInterface as SchoolInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class SchoolInterface(SchoolInterfaceBase, BackendEntityInterface):
    """Backend-specific school interface."""

    collection = "schools"
    cache_key = "schools"
    cache_ttl = 900
    relations = (
        Relation("grades", "Grade", many=True),
        Relation("courses", "Course", many=True),
        Relation("members", "User", many=True),
        Relation("classes", "Class", many=True),
        Relation("messages", "Message", many=True),
        Relation("subjects", "Subject", many=True),
        Relation("clubs", "Club", many=True),
        Relation("events", "Event", many=True),
        Relation("blackboards", "Blackboard", many=True),
    )
