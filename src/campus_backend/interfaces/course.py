"""Backend course interface with document store and relation configuration."""

from campus_types.courses import CourseInterface as CourseInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class CourseInterface(CourseInterfaceBase, BackendEntityInterface):
    collection = "courses"
    cache_key = "courses"
    cache_ttl = 300
    relations = (
        Relation("members", "User", many=True),
        Relation("classes", "Class", many=True),
        Relation("teacher", "User"),
        Relation("chat", "Chat"),
        Relation("subject", "Subject"),
    )
