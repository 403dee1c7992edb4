"""
Exception classes for the campus data-access layer.

Each exception carries an error code from the error registry plus the entity
type and the identifying value (id or rule) involved. They derive from
FastAPI's HTTPException so the transport layer can answer with the matching
status code without translating them again.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status
import inspect
from datetime import datetime, timezone

from campus_types.errors import ErrorDebugInfo, ErrorResponse


class CampusException(HTTPException):
    """
    Base exception class for all campus exceptions.

    Provides:
    - Unique error codes from registry
    - Entity type and identifier of the failing operation
    - Structured error responses
    - Caller information for debugging
    """

    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        error_code: str,
        detail: Any = None,
        entity_type: Optional[str] = None,
        identifier: Any = None,
        context: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize exception with error code and metadata.

        Args:
            error_code: Error code from error registry (e.g., "DB_001")
            detail: Message (overrides the registry message if provided)
            entity_type: Entity type name, e.g. "User"
            identifier: Id or rule that was looked up or written
            context: Additional context for debugging
            headers: HTTP response headers
        """
        self.error_code = error_code
        self.entity_type = entity_type
        self.identifier = identifier
        self.context = context or {}

        # Skip this __init__ and the subclass __init__
        frame = inspect.currentframe()
        caller_frame = frame.f_back.f_back if frame and frame.f_back else None
        if caller_frame:
            self.function_name = caller_frame.f_code.co_name
            self.file_name = caller_frame.f_code.co_filename
            self.line_number = caller_frame.f_lineno
        else:
            self.function_name = None
            self.file_name = None
            self.line_number = None

        # HTTPException would fill in the bare status phrase
        if detail is None:
            from campus_backend.exceptions.error_registry import get_error_definition
            detail = get_error_definition(error_code).message

        super().__init__(status_code=self.default_status, detail=detail, headers=headers)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def message(self) -> str:
        if isinstance(self.detail, str) and self.detail:
            return self.detail
        from campus_backend.exceptions.error_registry import get_error_definition
        return get_error_definition(self.error_code).message

    def to_error_response(self, include_debug: Optional[bool] = None) -> ErrorResponse:
        """
        Convert exception to structured ErrorResponse.

        Args:
            include_debug: Whether to include debug information
                (default: settings.include_debug_info, i.e. development mode)
        """
        from campus_backend.exceptions.error_registry import get_error_definition
        from campus_backend.settings import settings

        if include_debug is None:
            include_debug = settings.include_debug_info

        error_def = get_error_definition(self.error_code)

        debug_info = None
        if include_debug:
            debug_info = ErrorDebugInfo(
                timestamp=datetime.now(timezone.utc).isoformat(),
                function=self.function_name,
                file=self.file_name,
                line=self.line_number,
                additional_context=self.context,
            )

        identifier = self.identifier
        if callable(identifier):
            identifier = getattr(identifier, "__name__", repr(identifier))

        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            entity_type=self.entity_type,
            identifier=identifier,
            details=self.context or None,
            severity=error_def.severity,
            category=error_def.category,
            debug=debug_info,
        )


# ============================================================================
# VALIDATION EXCEPTIONS (400)
# ============================================================================


class ValidationException(CampusException):
    """A field value lies outside its allowed domain - 400"""

    default_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, error_code: str = "VAL_001", detail: Any = None, **kwargs):
        super().__init__(error_code=error_code, detail=detail, **kwargs)


# ============================================================================
# NOT FOUND EXCEPTIONS (404)
# ============================================================================


class NotFoundException(CampusException):
    """Lookup by id or rule matched nothing - 404"""

    default_status = status.HTTP_404_NOT_FOUND

    def __init__(self, error_code: str = "NF_001", detail: Any = None, **kwargs):
        super().__init__(error_code=error_code, detail=detail, **kwargs)


# ============================================================================
# DATABASE EXCEPTIONS (500)
# ============================================================================


class DatabaseException(CampusException):
    """The document store rejected an operation or returned a malformed result - 500"""

    def __init__(self, error_code: str = "DB_001", detail: Any = None, **kwargs):
        super().__init__(error_code=error_code, detail=detail, **kwargs)


# ============================================================================
# CACHE EXCEPTIONS (500)
# ============================================================================


class CacheException(CampusException):
    """
    A store write committed but the cache patch could not be verified - 500

    The store and the cache have diverged; the write itself is not rolled back.
    """

    def __init__(self, error_code: str = "CACHE_001", detail: Any = None, **kwargs):
        super().__init__(error_code=error_code, detail=detail, **kwargs)


# ============================================================================
# CONFIGURATION EXCEPTIONS (500)
# ============================================================================


class ConfigurationException(CampusException):
    """Missing or inconsistent configuration - 500"""

    def __init__(self, error_code: str = "CONFIG_001", detail: Any = None, **kwargs):
        super().__init__(error_code=error_code, detail=detail, **kwargs)
