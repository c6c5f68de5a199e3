"""
Post Entity Model

Community or official article written by a user.

Model Hierarchy:
================
    Post
       ├── created_by (User)              - Author
       ├── tags (TagsOnPosts[])           - Tag assignments
       ├── related_to (RelatedPosts[])    - Posts this one links to
       └── related_from (RelatedPosts[])  - Posts linking to this one

Counters:
=========
view_count is incremented on every single-post read. like_count and
comment_count are maintained by interaction features outside this service
and only read here (popular ordering).
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zelene.shared.models.base import Base, utcnow


if TYPE_CHECKING:
    from zelene.shared.models.user import User
    from zelene.shared.models.post_links import RelatedPosts, TagsOnPosts


class Post(Base):
    """
    Post model.

    Attributes:
        id: Auto-increment identifier, also used as the pagination cursor
        title: Up to 255 characters
        excerpt: Teaser shown in listings
        content: Body
        published_at: Creation time, drives "latest" ordering
        updated_at: Last edit time
        view_count / like_count / comment_count: Engagement counters
        is_official: Authored on behalf of the platform
        created_by_id: Author
    """

    __tablename__ = "posts"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    published_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ENGAGEMENT
    # ═══════════════════════════════════════════════════════════════════════════

    view_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    like_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    comment_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)

    is_official: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=text("false"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    created_by_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    created_by: Mapped["User"] = relationship("User", back_populates="posts")

    tags: Mapped[list["TagsOnPosts"]] = relationship(
        "TagsOnPosts",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="TagsOnPosts.assigned_at",
    )

    related_to: Mapped[list["RelatedPosts"]] = relationship(
        "RelatedPosts",
        foreign_keys="RelatedPosts.post_id",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    related_from: Mapped[list["RelatedPosts"]] = relationship(
        "RelatedPosts",
        foreign_keys="RelatedPosts.related_post_id",
        back_populates="related_post",
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Post(id={self.id}, title={self.title!r})>"
