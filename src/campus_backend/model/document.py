from sqlalchemy import JSON, Column, DateTime, Index, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Document(Base):
    """One stored document; the collection name partitions the table."""

    __tablename__ = "document"

    collection = Column(String(255), primary_key=True)
    id = Column(String(64), primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    # Insertion sequence within the collection, keeps store order stable
    position = Column(Integer, nullable=False)

    __table_args__ = (
        Index("document_collection_position_key", "collection", "position"),
    )
