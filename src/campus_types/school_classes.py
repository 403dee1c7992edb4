from typing import List, Optional
from pydantic import Field

from campus_types.base import BaseEntity, EntityInterface, Reference


class SchoolClass(BaseEntity):
    """A class of pupils within one grade, e.g. 7b."""

    specified_grade: str = Field(..., min_length=1, description="Class letter within the grade")
    grade: Optional[Reference] = None
    courses: List[Reference] = Field(default_factory=list)
    members: List[Reference] = Field(default_factory=list)


class SchoolClassInterface(EntityInterface):
    name = "Class"
    model = SchoolClass
