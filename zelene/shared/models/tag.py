"""
Tag Entity Model

Normalized label attached to posts. Names are stored lowercase and only
contain letters, digits and hyphens (see schemas.validation.normalize_tag_name).

SAMPLE TAG RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ name             │ "machine-learning"                                        │
│ is_official      │ false                                                     │
│ post_count       │ 12   (derived)                                            │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from sqlalchemy import Boolean, Integer, String, func, select
from sqlalchemy.orm import Mapped, column_property, mapped_column, relationship

from zelene.shared.models.base import Base
from zelene.shared.models.post_links import TagsOnPosts


class Tag(Base):
    """
    Tag model.

    Attributes:
        id: Auto-increment identifier
        name: Normalized unique name
        is_official: Curated by administrators
        post_count: Number of posts carrying the tag, computed on load
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    is_official: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    post_count: Mapped[int] = column_property(
        select(func.count(TagsOnPosts.post_id))
        .where(TagsOnPosts.tag_id == id)
        .correlate_except(TagsOnPosts)
        .scalar_subquery()
    )

    posts: Mapped[list[TagsOnPosts]] = relationship(
        "TagsOnPosts",
        back_populates="tag",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Tag(id={self.id}, name={self.name}, official={self.is_official})>"
