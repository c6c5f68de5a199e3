"""
Post Service

Business logic for blog posts.

Ownership:
==========
Any member may create posts. Only the author may update or delete one.
``is_official`` is honoured on create only when the author is an
administrator; for members it is silently stored as false.

Links:
======
Tags and related posts are given as ids. Unknown ids are rejected with a
ValidationError before anything is written. On update, a given list
replaces the existing links; an absent list leaves them as they are.

Usage:
======
    service = PostService(db)
    post = await service.create(author_id, author_role, PostCreate(...))
    page = await service.get_all(PostListParams(limit=10, order_by="popular"))
"""

from typing import Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.core.exceptions import AuthorizationError, PostNotFoundError, ValidationError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.enums import UserRole
from zelene.shared.models.post import Post
from zelene.shared.repositories.post_repository import PostRepository
from zelene.shared.repositories.tag_repository import TagRepository
from zelene.shared.schemas.common import CursorPage
from zelene.shared.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostListParams,
    PostResponse,
    PostUpdate,
    RelatedPostResponse,
)
from zelene.shared.utils.security import ADMIN_ROLES, has_role


logger = get_logger("posts")

LINK_FIELDS = {"tags", "related_posts"}


def to_detail(post: Post) -> PostDetailResponse:
    """Serialize a post loaded with get_detail()."""
    detail = PostDetailResponse.model_validate(post)
    detail.related_posts = [RelatedPostResponse.model_validate(link.related_post) for link in post.related_to]
    return detail


class PostService:
    """Service for post creation, listing and maintenance."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = PostRepository(session)
        self.tags = TagRepository(session)

    async def _check_links(self, tag_ids: list[int], related_ids: list[int]) -> None:
        errors = []
        if tag_ids:
            found = {tag.id for tag in await self.tags.get_by_ids(list(set(tag_ids)))}
            missing = sorted(set(tag_ids) - found)
            if missing:
                errors.append({"field": "tags", "message": f"Unknown tag ids: {missing}"})
        if related_ids:
            found = {post.id for post in await self.repo.get_by_ids(list(set(related_ids)))}
            missing = sorted(set(related_ids) - found)
            if missing:
                errors.append({"field": "relatedPosts", "message": f"Unknown post ids: {missing}"})
        if errors:
            raise ValidationError("Validation failed", details={"errors": errors})

    async def _owned(self, post_id: int, user_id: UUID, action: str) -> None:
        owner_id = await self.repo.get_owner_id(post_id)
        if owner_id is None:
            raise PostNotFoundError(str(post_id))
        if owner_id != user_id:
            raise AuthorizationError(f"Not authorized to {action} this post")

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(
        self,
        author_id: UUID,
        author_role: Union[UserRole, str],
        data: PostCreate,
    ) -> PostDetailResponse:
        """
        Create a post with its tag and related-post links.

        Raises:
            ValidationError: If a tag or related post id is unknown
        """
        await self._check_links(data.tags, data.related_posts)

        post = await self.repo.create(
            title=data.title,
            excerpt=data.excerpt,
            content=data.content,
            is_official=data.is_official and has_role(author_role, ADMIN_ROLES),
            created_by_id=author_id,
        )
        if data.tags:
            await self.repo.replace_tags(post.id, data.tags)
        if data.related_posts:
            await self.repo.replace_related(post.id, data.related_posts)

        logger.info("Post created", post_id=post.id, author_id=str(author_id), is_official=post.is_official)
        return to_detail(await self.repo.get_detail(post.id))

    async def update(self, user_id: UUID, post_id: int, data: PostUpdate) -> PostDetailResponse:
        """
        Patch a post owned by user_id.

        Raises:
            PostNotFoundError: If the post does not exist
            AuthorizationError: If the user is not the author
            ValidationError: If a tag or related post id is unknown
        """
        await self._owned(post_id, user_id, "update")

        changes = data.model_dump(exclude_unset=True)
        await self._check_links(changes.get("tags") or [], changes.get("related_posts") or [])

        fields = {key: value for key, value in changes.items() if key not in LINK_FIELDS and value is not None}
        if fields:
            await self.repo.update(post_id, **fields)
        if changes.get("tags") is not None:
            await self.repo.replace_tags(post_id, changes["tags"])
        if changes.get("related_posts") is not None:
            await self.repo.replace_related(post_id, changes["related_posts"])

        logger.info("Post updated", post_id=post_id, fields=sorted(changes))
        return to_detail(await self.repo.get_detail(post_id))

    async def delete(self, user_id: UUID, post_id: int) -> None:
        """
        Delete a post owned by user_id together with its links.

        Raises:
            PostNotFoundError: If the post does not exist
            AuthorizationError: If the user is not the author
        """
        await self._owned(post_id, user_id, "delete")
        await self.repo.delete(post_id)
        logger.info("Post deleted", post_id=post_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, post_id: int) -> PostDetailResponse:
        """
        Read a single post and count the view.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        if not await self.repo.exists(post_id):
            raise PostNotFoundError(str(post_id))

        await self.repo.increment_views(post_id)
        return to_detail(await self.repo.get_detail(post_id))

    async def get_all(self, params: PostListParams) -> CursorPage[PostResponse]:
        """One cursor page of posts."""
        posts, next_cursor = await self.repo.list_page(
            limit=params.limit,
            cursor=params.cursor,
            tag_ids=params.tags,
            is_official=params.is_official,
            order=params.order_by,
        )
        return CursorPage[PostResponse](
            items=[PostResponse.model_validate(post) for post in posts],
            next_cursor=next_cursor,
        )
