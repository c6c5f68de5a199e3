"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_username()        → Login lookup
- get_by_email()           → Find user by email address
- find_conflicting()       → Username/email uniqueness check
- get_with_profile()       → User plus profile and social sections
- list_by_role()           → Admin listings

Usage Example:
==============
    repo = UserRepository(db)
    if await repo.find_conflicting(username="ada", email="ada@example.com"):
        raise ConflictError("Username or email already exists")
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from zelene.shared.repositories.base import BaseRepository
from zelene.shared.models.enums import UserRole
from zelene.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        SQL Generated:
            SELECT * FROM users WHERE email = 'ada@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def find_conflicting(
        self,
        *,
        username: Optional[str] = None,
        email: Optional[str] = None,
        exclude_id: Optional[UUID] = None,
    ) -> Optional[User]:
        """
        Find another user already holding the username or email.

        Args:
            username: Candidate username (ignored when None)
            email: Candidate email (ignored when None)
            exclude_id: User being updated, never counted as a conflict

        Returns:
            The first conflicting user, or None when both are free

        SQL Generated:
            SELECT * FROM users
            WHERE (username = 'ada' OR email = 'ada@example.com') AND id != '...'
            LIMIT 1
        """
        conditions = []
        if username is not None:
            conditions.append(User.username == username)
        if email is not None:
            conditions.append(User.email == email)
        if not conditions:
            return None

        query = select(User).where(or_(*conditions))
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)

        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def get_with_profile(self, user_id: UUID) -> Optional[User]:
        """
        Get a user with profile and social sections eagerly loaded.

        populate_existing() makes sure sections written earlier in the same
        session are re-read instead of served stale from the identity map.
        """
        result = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.profile), selectinload(User.social))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_by_role(self, role: UserRole) -> list[User]:
        """List all users holding a role, newest first."""
        result = await self.session.execute(
            select(User).where(User.role == role).order_by(User.joined.desc())
        )
        return list(result.scalars().all())

    async def list_page(self, *, page: int, limit: int) -> list[User]:
        """One page of all users, newest first."""
        return await self.list(
            offset=(page - 1) * limit,
            limit=limit,
            order_by="joined",
            order_desc=True,
        )
