from typing import List, Optional
from pydantic import Field

from campus_types.base import BaseEntity, EntityInterface, Reference


class Course(BaseEntity):
    members: List[Reference] = Field(default_factory=list)
    classes: List[Reference] = Field(default_factory=list)
    teacher: Optional[Reference] = None
    chat: Optional[Reference] = None
    subject: Optional[Reference] = None


class CourseInterface(EntityInterface):
    name = "Course"
    model = Course
