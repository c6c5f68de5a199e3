"""
User Entity Model

Represents a registered account: community members and administrators.

Model Hierarchy:
================
    User
       ├── profile (Profile)  - Optional biography section (one-to-one)
       ├── social (Social)    - Optional social links (one-to-one)
       └── posts (Post[])     - Posts authored by this user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "ada"                                                     │
│ email            │ "ada@example.com"                                         │
│ name             │ "Ada Lovelace"                                            │
│ password_hash    │ "$2b$10$..."                                              │
│ role             │ MEMBER                                                    │
│ joined           │ 2026-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import DateTime, String, Text, Uuid, text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from zelene.shared.models.base import Base, utcnow
from zelene.shared.models.enums import UserRole


if TYPE_CHECKING:
    from zelene.shared.models.profile import Profile, Social
    from zelene.shared.models.post import Post


class User(Base):
    """
    User model.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Public handle (unique)
        email: Login/contact email (unique)
        name: Display name
        image: Avatar URL
        password_hash: Bcrypt hash, NULL for accounts without credentials
        role: MEMBER, ADMIN or TENANT_ADMIN
        joined: Registration time

    Relationships:
        profile: Biography details
        social: Social links
        posts: Authored posts
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[Optional[str]] = mapped_column(
        String(50),
        unique=True,
        nullable=True,
        index=True,
    )

    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        unique=True,
        nullable=True,
        index=True,
    )

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    password_hash: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole, name="user_role"),
        default=UserRole.MEMBER,
        nullable=False,
    )

    joined: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    profile: Mapped[Optional["Profile"]] = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    social: Mapped[Optional["Social"]] = relationship(
        "Social",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    posts: Mapped[list["Post"]] = relationship(
        "Post",
        back_populates="created_by",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
