"""Backend class interface with document store and relation configuration."""

from campus_types.school_classes import SchoolClassInterface as SchoolClassInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class SchoolClassInterface(SchoolClassInterfaceBase, BackendEntityInterface):
    collection = "classes"
    cache_key = "classes"
    cache_ttl = 300
    relations = (
        Relation("grade", "Grade"),
        Relation("courses", "Course", many=True),
        Relation("members", "User", many=True),
    )
