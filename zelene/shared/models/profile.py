"""
Profile and Social Entity Models

Optional one-to-one extensions of a User. Every column is nullable so
profile settings can be filled in piece by piece.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zelene.shared.models.base import Base


if TYPE_CHECKING:
    from zelene.shared.models.user import User


class Profile(Base):
    """
    Biography section shown on a user's public profile page.

    Attributes:
        user_id: Owning user (primary key, one profile per user)
        bio: Free text, up to 500 characters
        location: Up to 100 characters
        pronouns: Whether pronouns are displayed
    """

    __tablename__ = "profiles"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    current_learning: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    available_for: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    skills: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    current_project: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    pronouns: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    work: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    education: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="profile")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Profile(user_id={self.user_id})>"


class Social(Base):
    """Links to a user's accounts elsewhere. Each value is a URL."""

    __tablename__ = "socials"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    website: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    twitter: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    github: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    linkedin: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    facebook: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="social")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Social(user_id={self.user_id})>"
