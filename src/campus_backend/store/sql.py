"""
Document store persisting documents as JSON rows through SQLAlchemy.

SQLAlchemy sessions are synchronous; every operation runs in a worker
thread via asyncio.to_thread so the event loop is never blocked.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_backend.database import create_session_factory, get_engine, session_scope
from campus_backend.model.document import Base, Document as DocumentRow
from campus_backend.store.base import Document, DocumentStore, Rule, strip_reserved
from campus_backend.utils.rules import find_by_rule

logger = logging.getLogger(__name__)


def _iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _to_document(row: DocumentRow) -> Document:
    return {
        **(row.data or {}),
        "id": row.id,
        "created_at": _iso(row.created_at),
        "updated_at": _iso(row.updated_at),
    }


class SqlDocumentStore(DocumentStore):
    """
    Document store backed by a single "document" table.

    Database errors are logged and reported as None, the store's failure
    signal, so the repositories raise their DatabaseException.
    """

    def __init__(
        self,
        engine: Optional[Engine] = None,
        id_factory: Optional[Callable[[str], str]] = None,
        create_tables: bool = True,
    ):
        self.engine = engine or get_engine()
        self.session_factory = create_session_factory(self.engine)
        self.id_factory = id_factory or (lambda collection: uuid.uuid4().hex)
        if create_tables:
            Base.metadata.create_all(self.engine)

    async def _run(self, operation: str, fn: Callable[[Session], object]):
        def work():
            with session_scope(self.session_factory) as db:
                return fn(db)

        try:
            return await asyncio.to_thread(work)
        except SQLAlchemyError as e:
            logger.error(f"Document {operation} failed: {e}")
            return None

    async def create_document(self, collection: str, data: Document) -> Optional[Document]:
        document_id = self.id_factory(collection)

        def create(db: Session) -> Document:
            position = db.execute(
                select(func.coalesce(func.max(DocumentRow.position), 0))
                .where(DocumentRow.collection == collection)
            ).scalar_one()
            now = datetime.now(timezone.utc)
            row = DocumentRow(
                collection=collection,
                id=document_id,
                data=strip_reserved(data),
                created_at=now,
                updated_at=now,
                position=position + 1,
            )
            db.add(row)
            db.flush()
            return _to_document(row)

        document = await self._run("create", create)
        if document is not None:
            logger.info(f"{collection} created: {document_id}")
        return document

    async def get_document(self, collection: str, document_id: str) -> Optional[Document]:
        def get(db: Session) -> Optional[Document]:
            row = db.get(DocumentRow, (collection, document_id))
            return _to_document(row) if row is not None else None

        return await self._run("read", get)

    async def get_all_documents(self, collection: str) -> Optional[List[Document]]:
        def get_all(db: Session) -> List[Document]:
            rows = db.execute(
                select(DocumentRow)
                .where(DocumentRow.collection == collection)
                .order_by(DocumentRow.position)
            ).scalars().all()
            return [_to_document(row) for row in rows]

        return await self._run("query", get_all)

    async def get_documents_by_rule(self, collection: str, rule: Rule) -> Optional[List[Document]]:
        documents = await self.get_all_documents(collection)
        if documents is None:
            return None
        return find_by_rule(documents, rule)

    async def update_document(self, collection: str, document_id: str, data: Document) -> Optional[Document]:
        def update(db: Session) -> Optional[Document]:
            row = db.get(DocumentRow, (collection, document_id))
            if row is None:
                return None
            row.data = strip_reserved(data)
            row.updated_at = datetime.now(timezone.utc)
            db.flush()
            return _to_document(row)

        document = await self._run("update", update)
        if document is None:
            logger.warning(f"{collection} update failed: {document_id}")
        else:
            logger.info(f"{collection} updated: {document_id}")
        return document

    async def delete_document(self, collection: str, document_id: str) -> Optional[Document]:
        def delete(db: Session) -> Optional[Document]:
            row = db.get(DocumentRow, (collection, document_id))
            if row is None:
                return None
            document = _to_document(row)
            db.delete(row)
            return document

        document = await self._run("delete", delete)
        if document is None:
            logger.warning(f"{collection} delete failed: {document_id}")
        else:
            logger.info(f"{collection} deleted: {document_id}")
        return document

    async def close(self) -> None:
        self.engine.dispose()
