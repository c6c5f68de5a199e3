"""
SupportRequest Entity Model

A help request about an account, device or the platform.
"""

from sqlalchemy import String, Text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from zelene.shared.models.base import Base, QueryMixin, TimestampMixin
from zelene.shared.models.enums import SupportCategory, SupportPriority


class SupportRequest(Base, QueryMixin, TimestampMixin):
    """Support request. Admin listings show HIGH priority first."""

    __tablename__ = "support_requests"

    category: Mapped[SupportCategory] = mapped_column(
        SQLEnum(SupportCategory, name="support_category"),
        nullable=False,
    )

    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    priority: Mapped[SupportPriority] = mapped_column(
        SQLEnum(SupportPriority, name="support_priority"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<SupportRequest(id={self.id}, priority={self.priority}, status={self.status})>"
