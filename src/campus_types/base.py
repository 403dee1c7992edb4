from abc import ABC
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# A relation field holds the bare id of the referenced document until it is
# populated, afterwards the nested record as a plain dict.
Reference = Union[str, Dict[str, Any]]

ApprovalState = Literal[
    "SUGGESTED", "REJECTED", "APPROVED",
    "EDIT_SUGGESTED", "EDIT_REJECTED", "EDIT_APPROVED",
    "DELETE_SUGGESTED", "DELETE_REJECTED", "DELETE_APPROVED",
]

APPROVAL_STATES = (
    "SUGGESTED", "REJECTED", "APPROVED",
    "EDIT_SUGGESTED", "EDIT_REJECTED", "EDIT_APPROVED",
    "DELETE_SUGGESTED", "DELETE_REJECTED", "DELETE_APPROVED",
)


def reference_id(value: Any) -> Optional[str]:
    """Return the id behind a relation value, populated or not."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        return getattr(value, "id", None)
    if isinstance(value, dict):
        return value.get("id")
    return str(value)


class EntityInterface(ABC):
    """
    Pure DTO interface - defines data structure only.

    Backend-specific concerns (collection, caching, relations) are handled
    by BackendEntityInterface in campus_backend.interfaces.base.
    """
    name: str = None
    model: type = None


class BaseEntity(BaseModel):
    id: Optional[str] = Field(None, description="Identifier assigned by the document store")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Update timestamp")

    model_config = ConfigDict(validate_assignment=True, extra="ignore")


def add_reference(references: List[Reference], value: Reference) -> bool:
    """Append value unless an entry with the same id is already present."""
    ref_id = reference_id(value)
    if any(reference_id(r) == ref_id for r in references):
        return False
    references.append(value)
    return True


def remove_reference(references: List[Reference], value: Reference) -> bool:
    ref_id = reference_id(value)
    for index, existing in enumerate(references):
        if reference_id(existing) == ref_id:
            del references[index]
            return True
    return False
