"""
Admin User Handler

Account management for administrators.

Routes:
=======
    GET    /admin/users              page of users (admin)
    POST   /admin/users              create user with role (admin)
    PATCH  /admin/users/{user_id}    partial update (admin)
    DELETE /admin/users/{user_id}    delete user (admin)

    GET    /admin/admins             list ADMIN accounts (tenant admin)
    POST   /admin/admins             create ADMIN account (tenant admin)
    DELETE /admin/admins/{user_id}   delete ADMIN account (tenant admin)

Rules about TENANT_ADMIN accounts are applied by UserAdminService.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from zelene.api.dependencies import AdminUser, TenantAdminUser, get_pagination
from zelene.api.dependencies.services import get_user_admin_service
from zelene.shared.schemas.common import PaginatedResponse, PaginationParams, SuccessResponse
from zelene.shared.schemas.user import (
    AdminCreate,
    CreatedUserResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from zelene.shared.services.user_admin_service import UserAdminService


router = APIRouter()
admins_router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# USERS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    _admin: AdminUser,
    params: PaginationParams = Depends(get_pagination),
    service: UserAdminService = Depends(get_user_admin_service),
):
    """All users, newest first."""
    return await service.list_users(page=params.page, limit=params.limit)


@router.post("", response_model=CreatedUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    admin: AdminUser,
    service: UserAdminService = Depends(get_user_admin_service),
):
    """
    Create an account with an explicit role.

    Raises:
        403: A non tenant admin asked for a TENANT_ADMIN account
        409: Username or email already exists
    """
    user = await service.create_user(admin["role"], data)
    return CreatedUserResponse(user=UserResponse.model_validate(user))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    data: UserUpdate,
    admin: AdminUser,
    service: UserAdminService = Depends(get_user_admin_service),
):
    """Partially update an account. Absent fields are untouched."""
    user = await service.update_user(admin["role"], user_id, data)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=SuccessResponse)
async def delete_user(
    user_id: UUID,
    admin: AdminUser,
    service: UserAdminService = Depends(get_user_admin_service),
):
    """Delete an account together with its profile and posts."""
    await service.delete_user(admin["role"], user_id)
    return SuccessResponse()


# ═══════════════════════════════════════════════════════════════════════════════
# ADMINS
# ═══════════════════════════════════════════════════════════════════════════════


@admins_router.get("", response_model=list[UserResponse])
async def list_admins(
    _tenant_admin: TenantAdminUser,
    service: UserAdminService = Depends(get_user_admin_service),
):
    """All ADMIN accounts, newest first."""
    return [UserResponse.model_validate(user) for user in await service.list_admins()]


@admins_router.post("", response_model=CreatedUserResponse, status_code=status.HTTP_201_CREATED)
async def create_admin(
    data: AdminCreate,
    _tenant_admin: TenantAdminUser,
    service: UserAdminService = Depends(get_user_admin_service),
):
    """Create an ADMIN account."""
    user = await service.create_admin(data)
    return CreatedUserResponse(user=UserResponse.model_validate(user))


@admins_router.delete("/{user_id}", response_model=SuccessResponse)
async def remove_admin(
    user_id: UUID,
    _tenant_admin: TenantAdminUser,
    service: UserAdminService = Depends(get_user_admin_service),
):
    """
    Delete an ADMIN account.

    Raises:
        404: The id is unknown or is not an ADMIN
    """
    await service.remove_admin(user_id)
    return SuccessResponse()
