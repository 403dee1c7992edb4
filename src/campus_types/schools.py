from typing import List, Optional
from pydantic import Field

from campus_types.base import BaseEntity, EntityInterface, Reference


class School(BaseEntity):
    grades: List[Reference] = Field(default_factory=list)
    courses: List[Reference] = Field(default_factory=list)
    members: List[Reference] = Field(default_factory=list)
    classes: List[Reference] = Field(default_factory=list)
    messages: List[Reference] = Field(default_factory=list)
    subjects: List[Reference] = Field(default_factory=list)
    clubs: List[Reference] = Field(default_factory=list)
    events: List[Reference] = Field(default_factory=list)
    blackboards: List[Reference] = Field(default_factory=list)


class SetupAccount(BaseEntity):
    """Account used once to set up a school instance."""

    school_name: str = Field(..., min_length=1)
    school: Optional[Reference] = None


class SchoolInterface(EntityInterface):
    name = "School"
    model = School


class SetupAccountInterface(EntityInterface):
    name = "SetupAccount"
    model = SetupAccount
