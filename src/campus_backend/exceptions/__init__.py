"""
Error handling package for the campus backend.

This package provides:
- Custom exception classes with error codes
- Error registry management

Usage:
    from campus_backend.exceptions import (
        NotFoundException,
        DatabaseException,
    )
"""

from campus_backend.exceptions.exceptions import (
    CampusException,
    ValidationException,
    NotFoundException,
    DatabaseException,
    CacheException,
    ConfigurationException,
)
from campus_backend.exceptions.error_registry import (
    load_error_registry,
    get_error_definition,
)

__all__ = [
    "CampusException",
    "ValidationException",
    "NotFoundException",
    "DatabaseException",
    "CacheException",
    "ConfigurationException",
    "load_error_registry",
    "get_error_definition",
]
