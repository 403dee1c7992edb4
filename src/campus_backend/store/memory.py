import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from campus_backend.utils.rules import find_by_rule
from campus_backend.store.base import Document, DocumentStore, Rule, strip_reserved

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MemoryDocumentStore(DocumentStore):
    """
    Document store keeping collections in process memory.

    Used by the test-suite and for local development. Documents are copied
    on the way in and out so callers never share state with the store.
    """

    def __init__(self, id_factory: Optional[Callable[[str], str]] = None):
        """
        Args:
            id_factory: Called with the collection name to produce a new id
                        (default: random UUID4 strings)
        """
        self.id_factory = id_factory or (lambda collection: str(uuid.uuid4()))
        self._collections: Dict[str, Dict[str, Document]] = {}

    def _collection(self, name: str) -> Dict[str, Document]:
        return self._collections.setdefault(name, {})

    def seed(self, collection: str, documents: List[Document]) -> None:
        """Insert documents as given, keeping their ids."""
        target = self._collection(collection)
        for document in documents:
            stored = copy.deepcopy(document)
            stored.setdefault("created_at", _now())
            stored.setdefault("updated_at", stored["created_at"])
            target[stored["id"]] = stored

    async def create_document(self, collection: str, data: Document) -> Optional[Document]:
        target = self._collection(collection)
        document_id = self.id_factory(collection)
        if document_id in target:
            logger.error(f"{collection}: id {document_id} already taken")
            return None

        timestamp = _now()
        document = {
            **copy.deepcopy(strip_reserved(data)),
            "id": document_id,
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        target[document_id] = document
        logger.info(f"{collection} created: {document_id}")
        return copy.deepcopy(document)

    async def get_document(self, collection: str, document_id: str) -> Optional[Document]:
        document = self._collection(collection).get(document_id)
        return copy.deepcopy(document) if document is not None else None

    async def get_all_documents(self, collection: str) -> Optional[List[Document]]:
        return [copy.deepcopy(d) for d in self._collection(collection).values()]

    async def get_documents_by_rule(self, collection: str, rule: Rule) -> Optional[List[Document]]:
        documents = await self.get_all_documents(collection)
        return find_by_rule(documents, rule)

    async def update_document(self, collection: str, document_id: str, data: Document) -> Optional[Document]:
        target = self._collection(collection)
        existing = target.get(document_id)
        if existing is None:
            logger.warning(f"{collection} update failed: no document {document_id}")
            return None

        document = {
            **copy.deepcopy(strip_reserved(data)),
            "id": document_id,
            "created_at": existing["created_at"],
            "updated_at": _now(),
        }
        target[document_id] = document
        logger.info(f"{collection} updated: {document_id}")
        return copy.deepcopy(document)

    async def delete_document(self, collection: str, document_id: str) -> Optional[Document]:
        deleted = self._collection(collection).pop(document_id, None)
        if deleted is None:
            logger.warning(f"{collection} delete failed: no document {document_id}")
            return None
        logger.info(f"{collection} deleted: {document_id}")
        return deleted
