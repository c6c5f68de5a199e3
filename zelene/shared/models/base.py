"""
Base Model Classes

Foundational classes for every SQLAlchemy model in Zelene: the declarative
base, timestamp tracking, and the columns shared by the four query entities.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── TimestampMixin   ← Automatic created_at/updated_at
       │
       └── QueryMixin       ← UUID id + triage status + admin response

Usage:
======
    from zelene.shared.models.base import Base, TimestampMixin, QueryMixin

    class Feedback(Base, QueryMixin, TimestampMixin):
        __tablename__ = "feedback"
        improvements: Mapped[str] = mapped_column(Text)
"""

from datetime import datetime, timezone
from typing import Optional
import uuid

from sqlalchemy import JSON, DateTime, Text, Uuid, text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from zelene.shared.models.enums import QueryStatus


def utcnow() -> datetime:
    """Timezone-aware current time used for Python-side column defaults."""
    return datetime.now(timezone.utc)


# JSONB on PostgreSQL, plain JSON everywhere else (SQLite in tests)
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models inherit from this class either directly or together with
    one of the mixins below.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set when the record is first inserted
    - updated_at: Refreshed whenever the record is modified

    Both columns carry a server default for rows inserted outside the ORM and
    a Python default so freshly flushed objects are readable without a reload.
    """

    created_at: Mapped[datetime] = mapped_column(
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


class QueryMixin:
    """
    Columns shared by every public-submitted query entity.

    ContactQuery, Feedback, SupportRequest and TechnicalIssue all start as
    NEW and only change status through admin updates, which may also attach
    a free-text response.

    Attributes:
        id: Unique identifier (UUID v4)
        status: Triage state (NEW, IN_PROGRESS, RESOLVED, CANCELLED)
        response: Admin reply shown to the submitter, if any
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    status: Mapped[QueryStatus] = mapped_column(
        SQLEnum(QueryStatus, name="query_status"),
        default=QueryStatus.NEW,
        nullable=False,
        index=True,
    )

    response: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
