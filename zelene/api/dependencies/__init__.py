"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser, OptionalUser
- Role gating: require_roles(), AdminUser, TenantAdminUser
- Pagination: get_pagination(), get_post_list_params(), get_tag_list_params()
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: dict = Depends(require_roles(UserRole.ADMIN, UserRole.TENANT_ADMIN))
    ):

    # Write this:
    async def handler(db: DbSession, admin: AdminUser):
"""

from zelene.api.dependencies.database import (
    get_db,
    DbSession,
)
from zelene.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    get_optional_user,
    require_roles,
    CurrentUser,
    OptionalUser,
    AdminUser,
    TenantAdminUser,
)
from zelene.api.dependencies.pagination import (
    get_pagination,
    get_post_list_params,
    get_tag_list_params,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "get_optional_user",
    "require_roles",
    "CurrentUser",
    "OptionalUser",
    "AdminUser",
    "TenantAdminUser",
    # Pagination
    "get_pagination",
    "get_post_list_params",
    "get_tag_list_params",
]
