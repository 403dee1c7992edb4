"""Backend grade interface with document store and relation configuration."""

from campus_types.grades import GradeInterface as GradeInterfaceBase
from campus_backend.interfaces.base import BackendEntityInterface, Relation


class GradeInterface(GradeInterfaceBase, BackendEntityInterface):
    collection = "grades"
    cache_key = "grades"
    cache_ttl = 600
    relations = (
        Relation("classes", "Class", many=True),
    )
