"""
Post Repository

Database operations for posts and their tag/related-post links.

Cursor Pagination:
==================
Listings are keyed by the id of the last post the client has seen. The
cursor row is loaded, and the next page holds the rows that sort strictly
after it under the requested order:

    latest    published_at DESC, id DESC
    popular   like_count DESC, view_count DESC, id DESC
    official  is_official DESC, published_at DESC, id DESC

For keys (k1, k2, id) all descending, "after the cursor" expands to:

    k1 < c1
    OR (k1 = c1 AND k2 < c2)
    OR (k1 = c1 AND k2 = c2 AND id < c_id)

A cursor id that no longer exists yields an empty page.

One extra row is fetched to decide whether a next cursor exists.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import and_, delete, false, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from zelene.shared.repositories.base import BaseRepository
from zelene.shared.models.enums import PostOrder
from zelene.shared.models.post import Post
from zelene.shared.models.post_links import RelatedPosts, TagsOnPosts


def _order_columns(order: PostOrder) -> list[Any]:
    """Sort keys for an order, most significant first. All sort descending."""
    if order == PostOrder.POPULAR:
        return [Post.like_count, Post.view_count, Post.id]
    if order == PostOrder.OFFICIAL:
        return [Post.is_official, Post.published_at, Post.id]
    return [Post.published_at, Post.id]


def _sorts_before(column: Any, value: Any) -> Any:
    """Rows whose key is strictly lower than value. Booleans only support IS."""
    if isinstance(value, bool):
        return column.is_(False) if value else false()
    return column < value


def _after_cursor(columns: list[Any], cursor_row: Post) -> Any:
    """Build the keyset predicate selecting rows that sort after cursor_row."""
    clauses = []
    for index, column in enumerate(columns):
        equal_prefix = [
            previous == getattr(cursor_row, previous.key) for previous in columns[:index]
        ]
        after = _sorts_before(column, getattr(cursor_row, column.key))
        clauses.append(and_(*equal_prefix, after))
    return or_(*clauses)


class PostRepository(BaseRepository[Post]):
    """Repository for Post database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize PostRepository.

        Args:
            session: Async database session
        """
        super().__init__(Post, session)

    @staticmethod
    def _with_relations(detail: bool = False) -> list[Any]:
        """
        Loader options for serializing posts.

        Listings need author and tags. The detail view also needs related
        posts together with their tags.
        """
        options = [
            selectinload(Post.created_by),
            selectinload(Post.tags).selectinload(TagsOnPosts.tag),
        ]
        if detail:
            options.append(
                selectinload(Post.related_to)
                .selectinload(RelatedPosts.related_post)
                .selectinload(Post.tags)
                .selectinload(TagsOnPosts.tag)
            )
        return options

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_detail(self, post_id: int) -> Optional[Post]:
        """
        Get a post with author, tags and related posts loaded.

        Always re-reads from the database so links replaced earlier in the
        request are reflected.
        """
        result = await self.session.execute(
            select(Post)
            .where(Post.id == post_id)
            .options(*self._with_relations(detail=True))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_owner_id(self, post_id: int) -> Optional[UUID]:
        """Author id of a post, or None when the post does not exist."""
        result = await self.session.execute(select(Post.created_by_id).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def list_page(
        self,
        *,
        limit: int,
        cursor: Optional[int] = None,
        tag_ids: Optional[list[int]] = None,
        is_official: Optional[bool] = None,
        order: PostOrder = PostOrder.LATEST,
    ) -> tuple[list[Post], Optional[int]]:
        """
        Fetch one cursor page of posts.

        Args:
            limit: Page size
            cursor: Id of the last post already seen
            tag_ids: Only posts carrying at least one of these tags
            is_official: Only official (True) or community (False) posts
            order: Sort order

        Returns:
            Tuple of (posts, next cursor or None on the last page)
        """
        columns = _order_columns(order)
        query = select(Post).options(*self._with_relations())

        if tag_ids:
            query = query.where(
                Post.id.in_(select(TagsOnPosts.post_id).where(TagsOnPosts.tag_id.in_(tag_ids)))
            )
        if is_official is not None:
            query = query.where(Post.is_official == is_official)

        if cursor is not None:
            cursor_row = await self.get(cursor)
            if cursor_row is None:
                return [], None
            query = query.where(_after_cursor(columns, cursor_row))

        query = query.order_by(*[column.desc() for column in columns]).limit(limit + 1)
        result = await self.session.execute(query)
        posts = list(result.scalars().all())

        next_cursor = None
        if len(posts) > limit:
            posts = posts[:limit]
            next_cursor = posts[-1].id
        return posts, next_cursor

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def increment_views(self, post_id: int) -> None:
        """
        Atomically add one to a post's view counter.

        SQL Generated:
            UPDATE posts SET view_count = view_count + 1 WHERE id = 42
        """
        await self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(view_count=Post.view_count + 1)
            .execution_options(synchronize_session=False)
        )

    async def replace_tags(self, post_id: int, tag_ids: list[int]) -> None:
        """Replace every tag link of a post. Duplicate ids are collapsed."""
        await self.session.execute(delete(TagsOnPosts).where(TagsOnPosts.post_id == post_id))
        for tag_id in dict.fromkeys(tag_ids):
            self.session.add(TagsOnPosts(post_id=post_id, tag_id=tag_id))
        await self._flush()

    async def replace_related(self, post_id: int, related_ids: list[int]) -> None:
        """Replace every outgoing related-post link of a post."""
        await self.session.execute(delete(RelatedPosts).where(RelatedPosts.post_id == post_id))
        for related_id in dict.fromkeys(related_ids):
            self.session.add(RelatedPosts(post_id=post_id, related_post_id=related_id))
        await self._flush()
