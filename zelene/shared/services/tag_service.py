"""
Tag Service

Business logic for tags.

Visibility:
===========
Official tags are curated by administrators. Search and listing hide them
from everyone else; ``get_by_id`` returns any tag.

Permissions:
============
    create   member (official tags: admin only)
    update   admin
    delete   admin, refused while any post carries the tag
"""

from typing import Union

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.core.exceptions import AuthorizationError, ConflictError, TagNotFoundError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.enums import UserRole
from zelene.shared.models.tag import Tag
from zelene.shared.repositories.tag_repository import TagRepository
from zelene.shared.schemas.common import CursorPage
from zelene.shared.schemas.tag import TagCreate, TagListParams, TagResponse, TagUpdate
from zelene.shared.utils.constants import TAG_SEARCH_LIMIT
from zelene.shared.utils.security import ADMIN_ROLES, has_role


logger = get_logger("tags")

Role = Union[UserRole, str, None]


class TagService:
    """Service for tag search, listing and administration."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = TagRepository(session)

    async def _get(self, tag_id: int) -> Tag:
        tag = await self.repo.get(tag_id)
        if tag is None:
            raise TagNotFoundError(str(tag_id))
        return tag

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def search(self, query: str, role: Role = None) -> list[TagResponse]:
        """
        Autocomplete by substring of the normalized name.

        Args:
            query: Normalized search text ('#' already stripped)
            role: Role of the caller, None for anonymous
        """
        tags = await self.repo.search(
            query,
            include_official=has_role(role, ADMIN_ROLES),
            limit=TAG_SEARCH_LIMIT,
        )
        return [TagResponse.model_validate(tag) for tag in tags]

    async def get_all(self, params: TagListParams, role: Role = None) -> CursorPage[TagResponse]:
        """One cursor page of tags with their post counts."""
        tags, next_cursor = await self.repo.list_page(
            limit=params.limit,
            cursor=params.cursor,
            query=params.query,
            is_official=params.is_official,
            include_official=has_role(role, ADMIN_ROLES),
        )
        return CursorPage[TagResponse](
            items=[TagResponse.model_validate(tag) for tag in tags],
            next_cursor=next_cursor,
        )

    async def get_by_id(self, tag_id: int) -> TagResponse:
        """
        Raises:
            TagNotFoundError: If the tag does not exist
        """
        return TagResponse.model_validate(await self._get(tag_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, data: TagCreate, role: Role) -> TagResponse:
        """
        Create a tag from an already normalized name.

        Raises:
            AuthorizationError: If a non admin asks for an official tag
            ConflictError: If the name is taken
        """
        if data.is_official and not has_role(role, ADMIN_ROLES):
            raise AuthorizationError("Only administrators can create official tags")

        if await self.repo.get_by_name(data.name):
            raise ConflictError("Tag already exists")

        tag = await self.repo.create(name=data.name, is_official=data.is_official)
        logger.info("Tag created", tag_id=tag.id, name=tag.name, is_official=tag.is_official)
        return TagResponse.model_validate(tag)

    async def update(self, tag_id: int, data: TagUpdate) -> TagResponse:
        """
        Rename a tag or change its official flag.

        Raises:
            TagNotFoundError: If the tag does not exist
            ConflictError: If the new name belongs to another tag
        """
        tag = await self._get(tag_id)

        changes = {key: value for key, value in data.model_dump(exclude_unset=True).items() if value is not None}
        if "name" in changes and changes["name"] != tag.name:
            if await self.repo.get_by_name(changes["name"]):
                raise ConflictError("Tag name already exists")

        updated = await self.repo.update(tag.id, **changes)
        logger.info("Tag updated", tag_id=tag_id, fields=sorted(changes))
        return TagResponse.model_validate(updated)

    async def delete(self, tag_id: int) -> None:
        """
        Delete an unused tag.

        Raises:
            TagNotFoundError: If the tag does not exist
            ConflictError: If any post still carries the tag
        """
        tag = await self._get(tag_id)
        if await self.repo.is_in_use(tag.id):
            raise ConflictError("Cannot delete tag that is in use")

        await self.repo.delete(tag.id)
        logger.info("Tag deleted", tag_id=tag_id, name=tag.name)
