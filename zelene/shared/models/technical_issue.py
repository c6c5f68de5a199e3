"""
TechnicalIssue Entity Model

A bug report filed through the multi-step issue wizard.

Attachments:
============
Uploaded files live in object storage. The row keeps their storage paths
in upload order, e.g. ["images/3f2c....png", "pdfs/a81e....pdf"]; admin
views resolve them to time-limited URLs.
"""

from typing import Optional

from sqlalchemy import String, Text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from zelene.shared.models.base import Base, JSONList, QueryMixin, TimestampMixin
from zelene.shared.models.enums import IssueSeverity, IssueType


class TechnicalIssue(Base, QueryMixin, TimestampMixin):
    """
    TechnicalIssue model.

    Attributes:
        device_id: Affected device, when the issue is device-specific
        issue_type: Subsystem the issue was seen in
        severity: LOW, MEDIUM, HIGH or CRITICAL
        title: Short summary
        description: What went wrong
        steps_to_reproduce: How to trigger it
        expected_behavior: What should have happened
        attachments: Ordered storage paths of uploaded files
    """

    __tablename__ = "technical_issues"

    device_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    issue_type: Mapped[IssueType] = mapped_column(
        SQLEnum(IssueType, name="issue_type"),
        nullable=False,
    )

    severity: Mapped[IssueSeverity] = mapped_column(
        SQLEnum(IssueSeverity, name="issue_severity"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    steps_to_reproduce: Mapped[str] = mapped_column(Text, nullable=False)
    expected_behavior: Mapped[str] = mapped_column(Text, nullable=False)

    attachments: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<TechnicalIssue(id={self.id}, severity={self.severity}, status={self.status})>"
