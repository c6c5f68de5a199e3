"""
ContactQuery Entity Model

A message sent through the public contact form.

SAMPLE CONTACT_QUERY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Grace Hopper"                                            │
│ organization     │ "Navy Labs"                                               │
│ email            │ "grace@example.com"                                       │
│ phone            │ "+1 555 0100"                                             │
│ inquiry_type     │ PARTNERSHIP                                               │
│ message          │ "We would like to pilot the platform..."                  │
│ status           │ NEW                                                       │
│ response         │ NULL                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from sqlalchemy import String, Text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from zelene.shared.models.base import Base, QueryMixin, TimestampMixin
from zelene.shared.models.enums import InquiryType


class ContactQuery(Base, QueryMixin, TimestampMixin):
    """Contact form submission, triaged by admins and never hard-deleted."""

    __tablename__ = "contact_queries"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    organization: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)

    inquiry_type: Mapped[InquiryType] = mapped_column(
        SQLEnum(InquiryType, name="inquiry_type"),
        nullable=False,
    )

    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<ContactQuery(id={self.id}, email={self.email}, status={self.status})>"
