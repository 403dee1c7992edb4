"""
Document store contract consumed by the entity repositories.

A document is a plain dict carrying its store-assigned "id" plus the
"created_at"/"updated_at" timestamps (ISO 8601 strings). Every method
signals failure by returning None; the repositories turn that into a
DatabaseException.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

Document = Dict[str, Any]
Rule = Union[Mapping[str, Any], Callable[[Any], bool]]

RESERVED_FIELDS = ("id", "created_at", "updated_at")


def strip_reserved(data: Mapping[str, Any]) -> Document:
    """Drop the fields the store owns from user supplied data."""
    return {key: value for key, value in data.items() if key not in RESERVED_FIELDS}


class DocumentStore(ABC):
    """Asynchronous CRUD access to named document collections."""

    @abstractmethod
    async def create_document(self, collection: str, data: Document) -> Optional[Document]:
        """Insert data, assigning a new id. Returns the stored document."""

    @abstractmethod
    async def get_document(self, collection: str, document_id: str) -> Optional[Document]:
        """Return one document by id."""

    @abstractmethod
    async def get_all_documents(self, collection: str) -> Optional[List[Document]]:
        """Return all documents of a collection in insertion order."""

    @abstractmethod
    async def get_documents_by_rule(self, collection: str, rule: Rule) -> Optional[List[Document]]:
        """Return the documents matching rule."""

    @abstractmethod
    async def update_document(self, collection: str, document_id: str, data: Document) -> Optional[Document]:
        """Replace the document's fields with data. Returns the new document."""

    @abstractmethod
    async def delete_document(self, collection: str, document_id: str) -> Optional[Document]:
        """Delete a document. Returns the deleted document."""

    async def close(self) -> None:
        """Release resources held by the store."""
