"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health checks
    /auth                   → Registration and login
    /queries                → Public query submissions and lookup
    /admin/queries          → Admin query views and status updates
    /admin/stats            → Dashboard statistics
    /admin/users            → User management
    /admin/admins           → Admin account management (tenant admin)
    /profile                → Profiles and settings
    /posts                  → Blog posts
    /tags                   → Tags

Usage:
======
    from zelene.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

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


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(health_handler.router, tags=["Health"])

    app.include_router(auth_handler.router, prefix="/auth", tags=["Authentication"])

    app.include_router(query_handler.router, prefix="/queries", tags=["Queries"])

    # Admin endpoints
    app.include_router(admin_query_handler.router, prefix="/admin/queries", tags=["Admin Queries"])
    app.include_router(admin_stats_handler.router, prefix="/admin/stats", tags=["Admin Stats"])
    app.include_router(admin_user_handler.router, prefix="/admin/users", tags=["Admin Users"])
    app.include_router(admin_user_handler.admins_router, prefix="/admin/admins", tags=["Admin Users"])

    app.include_router(profile_handler.router, prefix="/profile", tags=["Profile"])

    app.include_router(post_handler.router, prefix="/posts", tags=["Posts"])
    app.include_router(tag_handler.router, prefix="/tags", tags=["Tags"])
