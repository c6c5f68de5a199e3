"""
Tag Repository

Database operations for tags.

Visibility:
===========
Official tags are curated by administrators. Search and listing callers
pass ``include_official=False`` for non-admin users so those only see
community tags.

Ordering:
=========
Official tags first, then alphabetical by name. Listing cursors are the id
of the last tag seen; a cursor that no longer exists yields an empty page.
"""

from typing import Any, Optional

from sqlalchemy import and_, false, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.repositories.base import BaseRepository
from zelene.shared.models.post_links import TagsOnPosts
from zelene.shared.models.tag import Tag


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize TagRepository.

        Args:
            session: Async database session
        """
        super().__init__(Tag, session)

    @staticmethod
    def _conditions(
        query: Optional[str],
        is_official: Optional[bool],
        include_official: bool,
    ) -> list[Any]:
        conditions = []
        if query:
            conditions.append(Tag.name.contains(query, autoescape=True))
        if not include_official:
            conditions.append(Tag.is_official.is_(False))
        if is_official is not None:
            conditions.append(Tag.is_official == is_official)
        return conditions

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_name(self, name: str) -> Optional[Tag]:
        """
        Get tag by its normalized name.

        SQL Generated:
            SELECT * FROM tags WHERE name = 'python'
        """
        result = await self.session.execute(select(Tag).where(Tag.name == name))
        return result.scalar_one_or_none()

    async def is_in_use(self, tag_id: int) -> bool:
        """Check whether any post carries the tag."""
        result = await self.session.execute(
            select(TagsOnPosts.post_id).where(TagsOnPosts.tag_id == tag_id).limit(1)
        )
        return result.first() is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # SEARCH & LISTING
    # ═══════════════════════════════════════════════════════════════════════════

    async def search(self, query: str, *, include_official: bool, limit: int = 5) -> list[Tag]:
        """
        Substring search on normalized names.

        SQL Generated:
            SELECT * FROM tags
            WHERE name LIKE '%' || 'py' || '%' AND is_official IS false
            ORDER BY is_official DESC, name ASC
            LIMIT 5
        """
        result = await self.session.execute(
            select(Tag)
            .where(*self._conditions(query, None, include_official))
            .order_by(Tag.is_official.desc(), Tag.name.asc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_page(
        self,
        *,
        limit: int,
        cursor: Optional[int] = None,
        query: Optional[str] = None,
        is_official: Optional[bool] = None,
        include_official: bool = False,
    ) -> tuple[list[Tag], Optional[int]]:
        """
        Fetch one cursor page of tags.

        Returns:
            Tuple of (tags, next cursor or None on the last page)
        """
        statement = select(Tag).where(*self._conditions(query, is_official, include_official))

        if cursor is not None:
            cursor_row = await self.get(cursor)
            if cursor_row is None:
                return [], None
            # Keyset for (is_official DESC, name ASC)
            official_after = Tag.is_official.is_(False) if cursor_row.is_official else false()
            statement = statement.where(
                or_(
                    official_after,
                    and_(Tag.is_official == cursor_row.is_official, Tag.name > cursor_row.name),
                )
            )

        statement = statement.order_by(Tag.is_official.desc(), Tag.name.asc()).limit(limit + 1)
        result = await self.session.execute(statement)
        tags = list(result.scalars().all())

        next_cursor = None
        if len(tags) > limit:
            tags = tags[:limit]
            next_cursor = tags[-1].id
        return tags, next_cursor
