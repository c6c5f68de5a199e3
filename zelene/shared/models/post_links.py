"""
Post Link Models

Junction tables around posts.

    TagsOnPosts   ← post ⇄ tag (carries assignment time)
    RelatedPosts  ← post → related post (directed, no symmetry enforced)

SAMPLE TAGS_ON_POSTS RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ post_id          │ 42                                                        │
│ tag_id           │ 7                                                         │
│ assigned_at      │ 2026-03-01T09:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zelene.shared.models.base import Base, utcnow


if TYPE_CHECKING:
    from zelene.shared.models.post import Post
    from zelene.shared.models.tag import Tag


class TagsOnPosts(Base):
    """
    Assignment of a tag to a post.

    Attributes:
        post_id: Tagged post (part of composite PK)
        tag_id: Assigned tag (part of composite PK)
        assigned_at: When the tag was attached
    """

    __tablename__ = "tags_on_posts"

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id"),
        primary_key=True,
        index=True,
    )

    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    post: Mapped["Post"] = relationship("Post", back_populates="tags")
    tag: Mapped["Tag"] = relationship("Tag", back_populates="posts")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<TagsOnPosts(post_id={self.post_id}, tag_id={self.tag_id})>"


class RelatedPosts(Base):
    """Directed link from a post to a post it recommends reading next."""

    __tablename__ = "related_posts"

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    related_post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    post: Mapped["Post"] = relationship(
        "Post",
        foreign_keys=[post_id],
        back_populates="related_to",
    )

    related_post: Mapped["Post"] = relationship(
        "Post",
        foreign_keys=[related_post_id],
        back_populates="related_from",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<RelatedPosts(post_id={self.post_id}, related_post_id={self.related_post_id})>"
