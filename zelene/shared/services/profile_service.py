"""
Profile Service

Public profile pages and the member settings update.

Partial Upsert:
===============
``update_profile`` only writes keys present in the request. A missing
profile or social row is created on first write:

    request.profile = {"bio": "Hi"}    profile row absent → created with bio
                                       profile row present → bio replaced
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.core.exceptions import ConflictError, UserNotFoundError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.profile import Profile, Social
from zelene.shared.models.user import User
from zelene.shared.repositories.user_repository import UserRepository
from zelene.shared.schemas.profile import ProfileResponse, ProfileUpdateRequest
from zelene.shared.services.auth_service import DUPLICATE_ACCOUNT_MESSAGE


logger = get_logger("profile")


def _apply(target: Any, changes: dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(target, field, value)


class ProfileService:
    """Service for reading and updating user profiles."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def _load(self, user_id: UUID) -> User:
        user = await self.repo.get_with_profile(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def get_profile(self, user_id: UUID) -> ProfileResponse:
        """
        Public profile of a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return ProfileResponse.model_validate(await self._load(user_id))

    async def get_current_profile(self, user_id: UUID) -> ProfileResponse:
        """Profile of the signed-in member, same shape as the public one."""
        return await self.get_profile(user_id)

    async def update_profile(self, user_id: UUID, data: ProfileUpdateRequest) -> ProfileResponse:
        """
        Apply a partial settings update.

        Args:
            user_id: Signed-in member
            data: Any subset of the user, profile and social sections

        Returns:
            The profile after the update

        Raises:
            UserNotFoundError: If the member no longer exists
            ConflictError: If a new username or email is taken
        """
        user = await self._load(user_id)

        account: Optional[dict[str, Any]] = (
            data.user.model_dump(exclude_unset=True) if data.user is not None else None
        )
        if account:
            if account.get("username") is not None or account.get("email") is not None:
                conflict = await self.repo.find_conflicting(
                    username=account.get("username"),
                    email=account.get("email"),
                    exclude_id=user.id,
                )
                if conflict:
                    raise ConflictError(DUPLICATE_ACCOUNT_MESSAGE)
            _apply(user, account)

        if data.profile is not None:
            changes = data.profile.model_dump(exclude_unset=True)
            if user.profile is None:
                user.profile = Profile(**changes)
            else:
                _apply(user.profile, changes)

        if data.social is not None:
            changes = data.social.model_dump(exclude_unset=True)
            if user.social is None:
                user.social = Social(**changes)
            else:
                _apply(user.social, changes)

        await self.repo.save()
        logger.info(
            "Profile updated",
            user_id=str(user_id),
            sections=[name for name in ("user", "profile", "social") if getattr(data, name) is not None],
        )
        return await self.get_profile(user_id)
