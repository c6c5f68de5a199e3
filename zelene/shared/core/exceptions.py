"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    ZeleneException (base)
       │
       ├── AuthenticationError (401)    ← Invalid credentials, token expired
       ├── AuthorizationError (403)     ← Insufficient role for the operation
       ├── NotFoundError (404)          ← Resource not found
       │      ├── UserNotFoundError
       │      ├── PostNotFoundError
       │      ├── TagNotFoundError
       │      └── QueryNotFoundError
       ├── ValidationError (400)        ← Invalid input data
       ├── ConflictError (409)          ← Resource already exists
       │      └── DuplicateResourceError
       └── ServiceUnavailableError (503) ← External service down
              └── ExternalServiceError  ← Captcha / storage provider failure

Usage:
======
    from zelene.shared.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Feedback", feedback_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Feedback with id 'abc' not found"}}

    raise ValidationError("Invalid captcha", details={"field": "captchaToken"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Feedback with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class ZeleneException(Exception):
    """
    Base exception for all Zelene application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ZeleneException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid credentials
    - Token expired or malformed
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(ZeleneException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but their role does not allow
    the operation (admin-only routes, foreign posts, official tags).
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ZeleneException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("User", user_id)
        # Message: "User with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class PostNotFoundError(NotFoundError):
    """Post not found error."""

    def __init__(self, post_id: str) -> None:
        super().__init__(resource="Post", resource_id=post_id)


class TagNotFoundError(NotFoundError):
    """Tag not found error."""

    def __init__(self, tag_id: str) -> None:
        super().__init__(resource="Tag", resource_id=tag_id)


class QueryNotFoundError(NotFoundError):
    """Contact query, feedback, support request or technical issue not found."""

    def __init__(self, label: str, query_id: str) -> None:
        super().__init__(resource=label, resource_id=query_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(ZeleneException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation. Field-level problems are
    carried in ``details["errors"]`` as ``{"field", "message"}`` pairs.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(ZeleneException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Tag already exists")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(ZeleneException):
    """
    Service temporarily unavailable error (503).

    Raised when external services (captcha, object storage) are down.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    More specific error for external API failures.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)
