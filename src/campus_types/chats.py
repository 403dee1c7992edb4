from typing import List, Literal, Optional
from pydantic import Field

from campus_types.base import (
    BaseEntity,
    EntityInterface,
    Reference,
    add_reference,
    remove_reference,
)

ChatType = Literal["PRIVATE", "GROUP", "COURSE", "CLUB"]


class Chat(BaseEntity):
    type: ChatType
    name: str = Field("New chat", min_length=1)
    avatar: Optional[str] = None
    targets: List[Reference] = Field(default_factory=list)
    courses: List[Reference] = Field(default_factory=list)
    clubs: List[Reference] = Field(default_factory=list)

    def add_target(self, user: Reference) -> bool:
        return add_reference(self.targets, user)

    def remove_target(self, user: Reference) -> bool:
        return remove_reference(self.targets, user)


class ChatInterface(EntityInterface):
    name = "Chat"
    model = Chat
