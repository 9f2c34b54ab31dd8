"""
NoteShelf Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the three failure kinds the API
       distinguishes.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by managers; caught by global handlers.

Exception Hierarchy:
    NoteShelfError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (storage fault)
"""

from typing import Any, Dict, Optional


class NoteShelfError(Exception):
    """
    Base exception for all NoteShelf application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteShelfError):
    """
    Raised when client input fails a business rule.

    When:    Blank category name, or a category reference rejected by the
             strict reference policy.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "category_name must not be empty",
            "details": {"field": "category_name"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteShelfError):
    """
    Raised when a requested record does not exist.

    SQLAlchemy returns None for missing rows; the `get_*` manager methods
    convert that None into this exception so routes answer 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NoteShelfError):
    """
    Raised when a store operation fails (connection lost, constraint
    violation, deadlock).

    HTTP:    500 Internal Server Error

    The message names the failed operation only. Driver text, SQL and
    constraint names go into `context`, which is logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
