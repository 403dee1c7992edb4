"""Data-access layer of the campus backend: cached entity repositories over a document store."""

__version__ = "0.1.0"
