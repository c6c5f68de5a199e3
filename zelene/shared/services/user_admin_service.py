"""
User Admin Service

Account management for administrators.

Role Rules:
===========
- Any ADMIN or TENANT_ADMIN may list, create, update and delete users.
- Only a TENANT_ADMIN may create a TENANT_ADMIN, change a TENANT_ADMIN
  (or promote someone to it), or delete a TENANT_ADMIN.
- Admin management (list/create/remove ADMIN accounts) is reserved to
  TENANT_ADMIN; the route enforces that.

Username and email uniqueness is checked on create and on update.
"""

from typing import Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.core.exceptions import ConflictError, NotFoundError, UserNotFoundError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.enums import UserRole
from zelene.shared.models.user import User
from zelene.shared.repositories.user_repository import UserRepository
from zelene.shared.schemas.common import PaginatedResponse
from zelene.shared.schemas.user import AdminCreate, UserCreate, UserResponse, UserUpdate
from zelene.shared.services.auth_service import DUPLICATE_ACCOUNT_MESSAGE
from zelene.shared.utils.security import TENANT_ADMIN_ROLES, SecurityUtils, ensure_role


logger = get_logger("admin.users")


class UserAdminService:
    """Service for admin user and admin-account management."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def _create(self, data: AdminCreate, role: UserRole) -> User:
        if await self.repo.find_conflicting(username=data.username, email=data.email):
            raise ConflictError(DUPLICATE_ACCOUNT_MESSAGE)

        user = await self.repo.create(
            username=data.username,
            email=data.email,
            name=data.name,
            password_hash=SecurityUtils.hash_password(data.password),
            role=role,
        )
        logger.info("User created by admin", user_id=str(user.id), role=role.value)
        return user

    # ═══════════════════════════════════════════════════════════════════════════
    # USERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_users(self, *, page: int, limit: int) -> PaginatedResponse[UserResponse]:
        """One page of all users, newest first."""
        users = await self.repo.list_page(page=page, limit=limit)
        total = await self.repo.count()
        return PaginatedResponse[UserResponse].create(
            [UserResponse.model_validate(user) for user in users],
            total=total,
            page=page,
            limit=limit,
        )

    async def create_user(self, actor_role: Union[UserRole, str], data: UserCreate) -> User:
        """
        Create an account with an explicit role.

        Raises:
            AuthorizationError: If a non tenant admin asks for TENANT_ADMIN
            ConflictError: If the username or email is taken
        """
        if data.role == UserRole.TENANT_ADMIN:
            ensure_role(actor_role, TENANT_ADMIN_ROLES, "Only TENANT_ADMIN can create other TENANT_ADMIN users")
        return await self._create(data, data.role)

    async def update_user(
        self,
        actor_role: Union[UserRole, str],
        user_id: UUID,
        data: UserUpdate,
    ) -> User:
        """
        Partially update another account.

        Raises:
            UserNotFoundError: If the user does not exist
            AuthorizationError: If a TENANT_ADMIN is involved and the actor is not one
            ConflictError: If the new username or email is taken
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if user.role == UserRole.TENANT_ADMIN or data.role == UserRole.TENANT_ADMIN:
            ensure_role(actor_role, TENANT_ADMIN_ROLES, "Only TENANT_ADMIN can modify TENANT_ADMIN users")

        changes = {key: value for key, value in data.model_dump(exclude_unset=True).items() if value is not None}
        if "username" in changes or "email" in changes:
            conflict = await self.repo.find_conflicting(
                username=changes.get("username"),
                email=changes.get("email"),
                exclude_id=user.id,
            )
            if conflict:
                raise ConflictError(DUPLICATE_ACCOUNT_MESSAGE)

        updated = await self.repo.update(user.id, **changes)
        logger.info("User updated by admin", user_id=str(user_id), fields=sorted(changes))
        return updated

    async def delete_user(self, actor_role: Union[UserRole, str], user_id: UUID) -> None:
        """
        Delete an account and everything it owns.

        Raises:
            UserNotFoundError: If the user does not exist
            AuthorizationError: If the target is a TENANT_ADMIN and the actor is not
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if user.role == UserRole.TENANT_ADMIN:
            ensure_role(actor_role, TENANT_ADMIN_ROLES, "Only TENANT_ADMIN can delete TENANT_ADMIN users")

        await self.repo.delete(user.id)
        logger.info("User deleted by admin", user_id=str(user_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # ADMINS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_admins(self) -> list[User]:
        """All ADMIN accounts, newest first."""
        return await self.repo.list_by_role(UserRole.ADMIN)

    async def create_admin(self, data: AdminCreate) -> User:
        """Create an ADMIN account."""
        return await self._create(data, UserRole.ADMIN)

    async def remove_admin(self, user_id: UUID) -> None:
        """
        Delete an ADMIN account.

        Raises:
            NotFoundError: If the id is unknown or not an ADMIN
        """
        user = await self.repo.get(user_id)
        if user is None or user.role != UserRole.ADMIN:
            raise NotFoundError("Admin")

        await self.repo.delete(user.id)
        logger.info("Admin removed", user_id=str(user_id))
