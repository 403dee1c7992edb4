"""Backend subject interface with document store and relation configuration."""

from campus_types.subjects import SubjectInterface as SubjectInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class SubjectInterface(SubjectInterfaceBase, BackendEntityInterface):
    collection = "subjects"
    cache_key = "subjects"
    cache_ttl = 600
    relations = (
        Relation("courses", "Course", many=True),
    )
