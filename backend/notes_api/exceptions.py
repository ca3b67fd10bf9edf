"""
Notes API - Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the three error kinds the API
       surfaces to clients.
How:   Each exception carries a client-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and JSON bodies of the form {"error": message}.
Who:   Raised by the note service; caught by the global handlers.

Exception Hierarchy:
    NotesApiError (base)
    ├── ValidationError  → 400 Bad Request (malformed id, missing fields)
    ├── NotFoundError    → 404 Not Found
    └── StoreError       → 500 Internal Server Error (store failures)
"""

from typing import Any, Dict, Optional


class NotesApiError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  Client-facing error text (returned as the "error" field)
        context:  Additional debug info (logged, never returned to the client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesApiError):
    """
    Raised when client input fails validation.

    Detected before any store access and never retried.
    """

    status_code = 400

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


class NotFoundError(NotesApiError):
    """Raised when a well-formed id matches no stored note."""

    status_code = 404

    def __init__(
        self,
        message: str = "Note not found",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(NotesApiError):
    """
    Raised when the notes store fails (connectivity, timeout, internal fault).

    The message is generic and operation specific. `details` carries the
    underlying failure text; it is only put in the response when the caller
    opts in (note creation does).
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        details: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.details = details
