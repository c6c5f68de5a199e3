"""
API Handlers

Route handlers for the Zelene API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from zelene.api.handlers import (
    admin_query_handler,
    admin_stats_handler,
    admin_user_handler,
    auth_handler,
    health_handler,
    post_handler,
    profile_handler,
    query_handler,
    tag_handler,
)

__all__ = [
    "admin_query_handler",
    "admin_stats_handler",
    "admin_user_handler",
    "auth_handler",
    "health_handler",
    "post_handler",
    "profile_handler",
    "query_handler",
    "tag_handler",
]
