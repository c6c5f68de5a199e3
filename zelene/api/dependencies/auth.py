"""
Authentication Dependencies

FastAPI dependencies for user authentication and role gating.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Build the user dict from the token
           │
           ▼
    require_roles(...)        ← ensure_role() against the allowed roles

    get_optional_user()       ← Same as get_current_user, None when anonymous

Type Aliases:
=============
    CurrentUser      - Any signed-in user (member routes)
    OptionalUser     - Signed-in user or None (public routes with role-aware output)
    AdminUser        - ADMIN or TENANT_ADMIN
    TenantAdminUser  - TENANT_ADMIN only

Usage:
======
    from zelene.api.dependencies.auth import AdminUser

    @router.get("/contacts")
    async def get_contacts(admin: AdminUser):
        ...

The user dict carries ``user_id`` (UUID), ``username``, ``email`` and ``role``.
"""

from typing import Annotated, Any, Callable, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from zelene.config.settings import settings
from zelene.shared.core.exceptions import AuthenticationError
from zelene.shared.core.logging import log_context
from zelene.shared.models.enums import UserRole
from zelene.shared.utils.security import ADMIN_ROLES, TENANT_ADMIN_ROLES, SecurityUtils, ensure_role


# Missing credentials are reported as AuthenticationError, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def _user_from_payload(payload: dict) -> dict[str, Any]:
    user_id = payload.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        parsed_id = UUID(str(user_id))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    user = {
        "user_id": parsed_id,
        "username": payload.get("username"),
        "email": payload.get("email"),
        "role": payload.get("role") or UserRole.MEMBER.value,
    }
    log_context(user_id=str(parsed_id))
    return user


def _decode(token: str) -> dict:
    try:
        return SecurityUtils.decode_access_token(
            token,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")
    return _decode(credentials.credentials)


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict[str, Any]:
    """
    Get current authenticated user from token.

    Raises:
        AuthenticationError: If user_id is missing from the token
    """
    return _user_from_payload(token)


async def get_optional_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[dict[str, Any]]:
    """
    Current user when a token is sent, None for anonymous requests.

    A token that is sent but invalid is still rejected.
    """
    if not credentials:
        return None
    return _user_from_payload(_decode(credentials.credentials))


def require_roles(*roles: UserRole) -> Callable:
    """
    Dependency factory gating a route to the given roles.

    Example:
        @router.delete("/{tag_id}", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """

    async def dependency(
        user: Annotated[dict, Depends(get_current_user)],
    ) -> dict[str, Any]:
        ensure_role(user["role"], roles)
        return user

    return dependency


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]

OptionalUser = Annotated[Optional[dict], Depends(get_optional_user)]

AdminUser = Annotated[dict, Depends(require_roles(*ADMIN_ROLES))]

TenantAdminUser = Annotated[dict, Depends(require_roles(*TENANT_ADMIN_ROLES))]
