"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from zelene.shared.core.logging import logger, get_logger
    from zelene.shared.core.exceptions import ZeleneException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from zelene.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from zelene.shared.core.exceptions import (
    ZeleneException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    PostNotFoundError,
    TagNotFoundError,
    QueryNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "ZeleneException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "PostNotFoundError",
    "TagNotFoundError",
    "QueryNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
    "ExternalServiceError",
]
