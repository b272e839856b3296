"""
Custom Exceptions

Every error a service raises on purpose derives from BooknotesException and
carries its HTTP status and machine-readable code. The API's exception
handler serializes them with to_dict(); nothing else needs to know HTTP.

Exception Hierarchy:
====================
    BooknotesException (500 INTERNAL_ERROR)
       │
       ├── AuthenticationError (401)      ← bad credentials, bad or stale token
       ├── AuthorizationError (403)       ← editing someone else's book
       ├── NotFoundError (404)
       │      ├── UserNotFoundError
       │      ├── BookNotFoundError
       │      └── CommentNotFoundError
       ├── ValidationError (400)          ← empty title/body/comment, bad genres
       ├── ConflictError (409)
       │      └── DuplicateResourceError  ← email already registered
       └── ServiceUnavailableError (503)  ← database unreachable

Usage:
======
    raise BookNotFoundError(str(book_id))
    # {"error": {"code": "NOT_FOUND", "message": "Book with id '...' not found", "details": {}}}

    raise ValidationError("Comment content is required", details={"field": "content"})
"""

from typing import Any, Optional


class BooknotesException(Exception):
    """
    Base application error.

    Subclasses set ``status_code``, ``error_code`` and ``default_message``
    as class attributes.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Error envelope returned as the response body."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# 401 / 403
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(BooknotesException):
    status_code = 401
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"


class AuthorizationError(BooknotesException):
    status_code = 403
    error_code = "AUTHORIZATION_ERROR"
    default_message = "Access denied"


# ═══════════════════════════════════════════════════════════════════════════════
# 404
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(BooknotesException):
    """
    A referenced row does not exist.

    Subclasses name the resource; the id, when given, goes in the message.
    """

    status_code = 404
    error_code = "NOT_FOUND"
    resource = "Resource"

    def __init__(self, resource_id: Optional[str] = None) -> None:
        if resource_id:
            message = f"{self.resource} with id '{resource_id}' not found"
        else:
            message = f"{self.resource} not found"
        super().__init__(message)


class UserNotFoundError(NotFoundError):
    resource = "User"


class BookNotFoundError(NotFoundError):
    resource = "Book"


class CommentNotFoundError(NotFoundError):
    resource = "Comment"


# ═══════════════════════════════════════════════════════════════════════════════
# 400 / 409 / 503
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(BooknotesException):
    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class ConflictError(BooknotesException):
    status_code = 409
    error_code = "CONFLICT"
    default_message = "Resource conflict"


class DuplicateResourceError(ConflictError):
    default_message = "Resource already exists"


class ServiceUnavailableError(BooknotesException):
    status_code = 503
    error_code = "SERVICE_UNAVAILABLE"
    default_message = "Service temporarily unavailable"
