from campus_backend.model.document import Base, Document

__all__ = ["Base", "Document"]
