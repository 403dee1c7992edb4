from typing import List
from pydantic import Field

from campus_types.base import BaseEntity, EntityInterface, Reference


class Grade(BaseEntity):
    level: int = Field(..., ge=1, description="School year, unique per school")
    classes: List[Reference] = Field(default_factory=list)


class GradeInterface(EntityInterface):
    name = "Grade"
    model = Grade
