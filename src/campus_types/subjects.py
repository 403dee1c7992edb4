from typing import List
from pydantic import Field

from campus_types.base import BaseEntity, EntityInterface, Reference


class Subject(BaseEntity):
    type: str = Field(..., min_length=1, description="Subject name, e.g. Mathematics")
    short_name: str = Field(..., min_length=1, description="Abbreviation, e.g. MA")
    courses: List[Reference] = Field(default_factory=list)


class SubjectInterface(EntityInterface):
    name = "Subject"
    model = Subject
