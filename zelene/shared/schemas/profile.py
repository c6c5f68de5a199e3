"""
Profile Schemas

Public profile view and the partial settings update.

Update Semantics:
=================
``updateProfile`` takes three optional sections. Inside each section only
the keys actually sent are written; everything else keeps its value:

    {"profile": {"bio": "Hello"}}          → only bio changes
    {"social": {"github": null}}           → github cleared, others kept
    {"user": {"username": "ada"}}          → uniqueness re-checked
"""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import AfterValidator

from zelene.shared.schemas.common import BaseSchema
from zelene.shared.schemas.user import DisplayName, Email, Username
from zelene.shared.schemas.validation import OptionalUrl, length


def _max(limit: int) -> AfterValidator:
    return length(max_length=limit, too_long=f"Cannot exceed {limit} characters")


Bio = Annotated[str, _max(500)]
Location = Annotated[str, _max(100)]
ShortText = Annotated[str, _max(200)]


class ProfileSection(BaseSchema):
    """Biography fields. All optional and nullable."""

    bio: Optional[Bio] = None
    location: Optional[Location] = None
    current_learning: Optional[ShortText] = None
    available_for: Optional[ShortText] = None
    skills: Optional[ShortText] = None
    current_project: Optional[ShortText] = None
    pronouns: Optional[bool] = None
    work: Optional[ShortText] = None
    education: Optional[ShortText] = None


class SocialSection(BaseSchema):
    """Social links. Each value must be an absolute URL when present."""

    website: OptionalUrl = None
    twitter: OptionalUrl = None
    github: OptionalUrl = None
    linkedin: OptionalUrl = None
    facebook: OptionalUrl = None


class AccountSection(BaseSchema):
    """Account fields a user may change on their own profile."""

    username: Optional[Username] = None
    email: Optional[Email] = None
    name: Optional[DisplayName] = None


class ProfileUpdateRequest(BaseSchema):
    """Partial settings update across the three sections."""

    user: Optional[AccountSection] = None
    profile: Optional[ProfileSection] = None
    social: Optional[SocialSection] = None


class ProfileResponse(BaseSchema):
    """User plus profile and social sections, as shown on profile pages."""

    id: UUID
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    joined: datetime
    profile: Optional[ProfileSection] = None
    social: Optional[SocialSection] = None
