"""
Nainaland Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios the API reports.
Why:   Services raise typed errors; global handlers in main.py turn them into
       consistent JSON bodies with the right HTTP status code.
How:   Each exception carries a user-facing message and an optional context dict.

Exception Hierarchy:
    NainalandError (base)        → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── AuthenticationError      → 401 Unauthorized
    └── NotFoundError            → 404 Not Found

The storage layer never raises: it returns None/False for unknown ids and the
service layer converts that into NotFoundError.
"""

from typing import Any, Dict, Optional


class NainalandError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; returned only by the 400 handler)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NainalandError):
    """
    Raised when client input fails a business rule that the schema cannot express.

    HTTP:  400 Bad Request
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


class AuthenticationError(NainalandError):
    """
    Raised when an admin-only route is called without a valid bearer token,
    or when login credentials do not match.

    HTTP:  401 Unauthorized (with `WWW-Authenticate: Bearer`)
    """

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NainalandError):
    """
    Raised when a requested record does not exist.

    HTTP:  404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
