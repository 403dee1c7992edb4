"""
Document store implementations used by the entity repositories.

- DocumentStore: asynchronous CRUD contract
- MemoryDocumentStore: process memory, for tests and development
- SqlDocumentStore: JSON documents in a SQLAlchemy table
"""

from campus_backend.store.base import Document, DocumentStore, Rule
from campus_backend.store.memory import MemoryDocumentStore
from campus_backend.store.sql import SqlDocumentStore

__all__ = [
    "Document",
    "DocumentStore",
    "Rule",
    "MemoryDocumentStore",
    "SqlDocumentStore",
]
