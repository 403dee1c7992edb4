from typing import List, Optional
from pydantic import BaseModel, Field

from campus_types.base import (
    BaseEntity,
    EntityInterface,
    Reference,
    add_reference,
    remove_reference,
)


class ClubRequirement(BaseModel):
    emoji: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class ClubDetails(BaseModel):
    description: str = Field("Club description", min_length=1)
    location: str = Field("Club location", min_length=1)
    meeting_time: str = Field("13:00", min_length=1)
    meeting_day: str = Field("Monday", min_length=1)
    requirements: List[ClubRequirement] = Field(default_factory=list)
    events: List[Reference] = Field(default_factory=list)


class Club(BaseEntity):
    name: str = Field("New club", min_length=1)
    details: ClubDetails = Field(default_factory=ClubDetails)
    leaders: List[Reference] = Field(default_factory=list)
    members: List[Reference] = Field(default_factory=list)
    chat: Optional[Reference] = None

    def add_member(self, user: Reference) -> bool:
        return add_reference(self.members, user)

    def remove_member(self, user: Reference) -> bool:
        return remove_reference(self.members, user)


class ClubInterface(EntityInterface):
    name = "Club"
    model = Club
