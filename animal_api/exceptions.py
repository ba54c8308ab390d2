"""
Animal API: Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the error scenarios of the service.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the store and AnimalService; caught by global handlers.

Exception Hierarchy:
    AnimalAPIError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    ├── ConflictError     → 409 Conflict
    └── StoreError        → 500 Internal Server Error

Request parsing failures (non-integer path id, malformed or incomplete JSON
body) are raised by FastAPI as RequestValidationError and are mapped to the
same 400 response as ValidationError.
"""

from typing import Any, Dict, Optional


class AnimalAPIError(Exception):
    """
    Base exception for all Animal API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only for client errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AnimalAPIError):
    """
    Raised when client input passes schema parsing but breaks a business rule.

    When:    POST /v1/animals with a missing or zero id.
    HTTP:    400 Bad Request
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


class NotFoundError(AnimalAPIError):
    """
    Raised when a requested record does not exist, or the store is empty.

    When:    GET/DELETE /v1/animals/{id} with an unknown id, update of an
             absent id, GET /v1/animals against an empty store.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(AnimalAPIError):
    """
    Raised when creating a record whose id is already taken.

    HTTP:    409 Conflict
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} already exists"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' already exists"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(AnimalAPIError):
    """
    Raised when a store operation fails although its pre-check passed.

    What:    The service checked existence first, so the follow-up store call
             should not fail. If it does, the store changed underneath the
             request (or is broken) and the client gets a generic 500.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic; the original
        store error is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A storage error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
