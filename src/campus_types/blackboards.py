from typing import Any, Dict, List, Optional
from pydantic import Field

from campus_types.base import ApprovalState, BaseEntity, EntityInterface, Reference


class Blackboard(BaseEntity):
    title: str = Field(..., min_length=1)
    author: Optional[Reference] = None
    cover_image: str = Field(..., min_length=1, description="Cover image URL")
    text: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    expiration_date: Optional[int] = Field(None, description="Unix timestamp in milliseconds")
    state: ApprovalState = "SUGGESTED"
    edit_history: List[Dict[str, Any]] = Field(default_factory=list)

    def set_state(self, state: str) -> None:
        self.state = state


class BlackboardInterface(EntityInterface):
    name = "Blackboard"
    model = Blackboard
