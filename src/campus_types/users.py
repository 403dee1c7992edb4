from typing import List, Literal, Optional
from pydantic import Field

from campus_types.base import BaseEntity, EntityInterface, Reference

UserType = Literal["STUDENT", "TEACHER", "ADMIN"]


class User(BaseEntity):
    first_name: str = Field(..., min_length=1, description="User's first name")
    last_name: str = Field(..., min_length=1, description="User's last name")
    avatar: Optional[str] = Field(None, min_length=1, description="Avatar URL")
    type: UserType = "STUDENT"

    classes: List[Reference] = Field(default_factory=list)
    extra_courses: List[Reference] = Field(default_factory=list)
    blackboards: List[Reference] = Field(default_factory=list)
    clubs: List[Reference] = Field(default_factory=list)
    chats: List[Reference] = Field(default_factory=list)


class UserInterface(EntityInterface):
    name = "User"
    model = User
