"""
Feedback Entity Model

Product feedback with satisfaction scores and a list of liked features.
"""

from typing import Optional

from sqlalchemy import Boolean, Float, Text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from zelene.shared.models.base import Base, JSONList, QueryMixin, TimestampMixin
from zelene.shared.models.enums import FeedbackCategory


class Feedback(Base, QueryMixin, TimestampMixin):
    """
    Feedback model.

    Attributes:
        category: Product area the feedback is about
        satisfaction: Score between 0 and 5
        usability: Score between 0 and 5
        features: Names of the features the submitter uses
        improvements: Suggested improvements
        recommendation: Whether the submitter would recommend the product
        comments: Optional extra remarks
    """

    __tablename__ = "feedback"

    category: Mapped[FeedbackCategory] = mapped_column(
        SQLEnum(FeedbackCategory, name="feedback_category"),
        nullable=False,
    )

    satisfaction: Mapped[float] = mapped_column(Float, nullable=False)
    usability: Mapped[float] = mapped_column(Float, nullable=False)

    features: Mapped[list[str]] = mapped_column(JSONList, default=list, nullable=False)

    improvements: Mapped[str] = mapped_column(Text, nullable=False)
    recommendation: Mapped[bool] = mapped_column(Boolean, nullable=False)
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Feedback(id={self.id}, category={self.category}, status={self.status})>"
