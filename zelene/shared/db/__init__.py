"""
Database Module

Database connectivity and session management for Zelene.

    FastAPI Route
        │  Depends(get_db)
        ▼
    AsyncSession  (commit on success, rollback on error)
        │
        ▼
    Repositories  (UserRepository, PostRepository, TagRepository, QueryRepository)
        │
        ▼
    PostgreSQL / SQLite

Usage:
======
    from zelene.shared.db import get_db
"""

from zelene.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
