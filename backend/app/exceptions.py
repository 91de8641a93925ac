"""
Booklist Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for every way a request can fail.
Why:   Services raise; global handlers (registered in main.py) translate each
       type into a status code and a structured JSON body. Routes never build
       error responses by hand.
Who:   Raised by routes, services and the store; caught by global handlers.

Exception Hierarchy:
    BooklistError (base)
    ├── MalformedRequestError   → 400 Bad Request (invalid JSON, bad filter value)
    ├── NotFoundError           → 404 Not Found
    ├── RecordInvalidError      → 422 Unprocessable Entity (record + errors)
    ├── ConflictError           → 409 Conflict (unique index violated)
    └── StoreUnavailableError   → 500 Internal Server Error

All errors are terminal for the request: the session dependency rolls the
transaction back, so a write is either fully applied or not at all.
"""

from typing import Any, Dict, List, Optional


class BooklistError(Exception):
    """
    Base exception for all Booklist application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the
                  handler chooses to)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class MalformedRequestError(BooklistError):
    """
    Raised when the request itself cannot be interpreted.

    When:    Body is not valid JSON, body is not a JSON object, or a filter
             query parameter cannot be converted to the field's type.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid JSON",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BooklistError):
    """
    Raised when a single-resource lookup finds nothing.

    When:    GET/PATCH /api/v1/{resource}/{id} with an unknown id.
    HTTP:    404 Not Found

    The message follows the "<Label> Not Found" form, e.g. "Book Not Found".
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} Not Found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class RecordInvalidError(BooklistError):
    """
    Raised when a create or update fails presence/type validation.

    What:    Carries the serialized would-be record (including its `errors`
             mapping) so the handler can return it as the response body.
    HTTP:    422 Unprocessable Entity

    Example body:
        {"id": "…", "title": "", "author": "Herbert", …,
         "errors": {"title": ["can't be blank"]}}
    """

    def __init__(
        self,
        payload: Dict[str, Any],
        errors: Dict[str, List[str]],
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["fields"] = sorted(errors)
        super().__init__(message="Validation failed", context=ctx)
        self.payload = payload
        self.errors = errors


class ConflictError(BooklistError):
    """
    Raised when a write violates a unique index (Book.isbn).

    What:    The store rejected the write; nothing was persisted.
    HTTP:    409 Conflict

    The store raises this with only `field`; the service re-raises it with the
    serialized record attached, mirroring RecordInvalidError's body.
    """

    def __init__(
        self,
        field: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        message = f"{field} is already taken" if field else "Record conflicts with an existing record"
        super().__init__(message=message, context=ctx)
        self.field = field
        self.payload = payload


class StoreUnavailableError(BooklistError):
    """
    Raised when the persistence collaborator fails.

    When:    Connection lost, query failed, schema missing, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver details are
    kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "The data store is unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
