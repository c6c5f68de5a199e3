"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing, JWT management and role checks
- constants: Application constants

Usage:
======
    from zelene.shared.utils.security import SecurityUtils, ensure_role
    from zelene.shared.utils.constants import STORAGE_FOLDERS
"""

from zelene.shared.utils.security import (
    SecurityUtils,
    ADMIN_ROLES,
    TENANT_ADMIN_ROLES,
    ensure_role,
    has_role,
)
from zelene.shared.utils.constants import (
    STORAGE_FOLDERS,
    DEFAULT_STORAGE_FOLDER,
    UNKNOWN_EXTENSION,
    TAG_SEARCH_LIMIT,
)

__all__ = [
    "SecurityUtils",
    "ADMIN_ROLES",
    "TENANT_ADMIN_ROLES",
    "ensure_role",
    "has_role",
    "STORAGE_FOLDERS",
    "DEFAULT_STORAGE_FOLDER",
    "UNKNOWN_EXTENSION",
    "TAG_SEARCH_LIMIT",
]
