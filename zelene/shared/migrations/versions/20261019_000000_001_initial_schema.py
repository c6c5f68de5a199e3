# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00

This migration creates all database tables for the Zelene application.

Tables created:
- users: Accounts (members, admins, tenant admins)
- profiles / socials: One-to-one account details
- contact_queries, feedback, support_requests, technical_issues: Public submissions
- posts: Blog posts
- tags: Post tags
- tags_on_posts: Post ↔ tag junction
- related_posts: Directed post → post links

Enums created:
- user_role: MEMBER, ADMIN, TENANT_ADMIN
- query_status: NEW, IN_PROGRESS, RESOLVED, CANCELLED
- inquiry_type, feedback_category, support_category, support_priority,
  issue_type, issue_severity
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types (created explicitly in upgrade)
ENUMS = {
    "user_role": ("MEMBER", "ADMIN", "TENANT_ADMIN"),
    "query_status": ("NEW", "IN_PROGRESS", "RESOLVED", "CANCELLED"),
    "inquiry_type": ("PARTNERSHIP", "SALES", "MEDIA", "GENERAL"),
    "feedback_category": ("UI", "FEATURES", "PERFORMANCE", "DOCUMENTATION", "GENERAL"),
    "support_category": ("ACCOUNT", "DEVICES", "PLATFORM", "OTHER"),
    "support_priority": ("LOW", "MEDIUM", "HIGH"),
    "issue_type": ("DEVICE", "PLATFORM", "CONNECTIVITY", "SECURITY", "OTHER"),
    "issue_severity": ("LOW", "MEDIUM", "HIGH", "CRITICAL"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _timestamp(name: str, index: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=index,
    )


def _query_columns() -> list[sa.Column]:
    """Columns shared by every query table."""
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("status", _enum("query_status"), nullable=False, index=True),
        sa.Column("response", sa.Text(), nullable=True),
        _timestamp("created_at", index=True),
        _timestamp("updated_at"),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    for name, values in ENUMS.items():
        quoted = ", ".join(f"'{value}'" for value in values)
        op.execute(f"CREATE TYPE {name} AS ENUM ({quoted})")

    # ═══════════════════════════════════════════════════════════════════════════
    # ACCOUNTS
    # ═══════════════════════════════════════════════════════════════════════════

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(50), nullable=True, unique=True, index=True),
        sa.Column("email", sa.String(255), nullable=True, unique=True, index=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("role", _enum("user_role"), nullable=False),
        _timestamp("joined", index=True),
    )

    op.create_table(
        "profiles",
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("current_learning", sa.String(200), nullable=True),
        sa.Column("available_for", sa.String(200), nullable=True),
        sa.Column("skills", sa.String(200), nullable=True),
        sa.Column("current_project", sa.String(200), nullable=True),
        sa.Column("pronouns", sa.Boolean(), nullable=True),
        sa.Column("work", sa.String(200), nullable=True),
        sa.Column("education", sa.String(200), nullable=True),
    )

    op.create_table(
        "socials",
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("twitter", sa.Text(), nullable=True),
        sa.Column("github", sa.Text(), nullable=True),
        sa.Column("linkedin", sa.Text(), nullable=True),
        sa.Column("facebook", sa.Text(), nullable=True),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    op.create_table(
        "contact_queries",
        *_query_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("organization", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("inquiry_type", _enum("inquiry_type"), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
    )

    op.create_table(
        "feedback",
        *_query_columns(),
        sa.Column("category", _enum("feedback_category"), nullable=False),
        sa.Column("satisfaction", sa.Float(), nullable=False),
        sa.Column("usability", sa.Float(), nullable=False),
        sa.Column("features", postgresql.JSONB(), nullable=False),
        sa.Column("improvements", sa.Text(), nullable=False),
        sa.Column("recommendation", sa.Boolean(), nullable=False),
        sa.Column("comments", sa.Text(), nullable=True),
    )

    op.create_table(
        "support_requests",
        *_query_columns(),
        sa.Column("category", _enum("support_category"), nullable=False),
        sa.Column("subject", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("priority", _enum("support_priority"), nullable=False),
    )

    op.create_table(
        "technical_issues",
        *_query_columns(),
        sa.Column("device_id", sa.String(255), nullable=True),
        sa.Column("issue_type", _enum("issue_type"), nullable=False),
        sa.Column("severity", _enum("issue_severity"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("steps_to_reproduce", sa.Text(), nullable=False),
        sa.Column("expected_behavior", sa.Text(), nullable=False),
        sa.Column("attachments", postgresql.JSONB(), nullable=False),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # POSTS AND TAGS
    # ═══════════════════════════════════════════════════════════════════════════

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("published_at", index=True),
        _timestamp("updated_at"),
        sa.Column("view_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("like_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("comment_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "is_official",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "created_by_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True, index=True),
        sa.Column("is_official", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "tags_on_posts",
        sa.Column(
            "post_id",
            sa.Integer(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("tag_id", sa.Integer(), sa.ForeignKey("tags.id"), primary_key=True, index=True),
        _timestamp("assigned_at"),
    )

    op.create_table(
        "related_posts",
        sa.Column(
            "post_id",
            sa.Integer(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "related_post_id",
            sa.Integer(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("related_posts")
    op.drop_table("tags_on_posts")
    op.drop_table("tags")
    op.drop_table("posts")
    op.drop_table("technical_issues")
    op.drop_table("support_requests")
    op.drop_table("feedback")
    op.drop_table("contact_queries")
    op.drop_table("socials")
    op.drop_table("profiles")
    op.drop_table("users")

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
