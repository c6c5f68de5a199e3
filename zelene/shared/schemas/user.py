"""
User Schemas

Request/response models for registration, login and admin user management.
"""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import Field

from zelene.shared.models.enums import UserRole
from zelene.shared.schemas.common import BaseSchema
from zelene.shared.schemas.validation import email, length


# ═══════════════════════════════════════════════════════════════════════════════
# FIELD TYPES
# ═══════════════════════════════════════════════════════════════════════════════

Username = Annotated[
    str,
    length(
        3,
        20,
        too_short="Username must be at least 3 characters",
        too_long="Username cannot be longer than 20 characters",
    ),
]

Password = Annotated[str, length(6, too_short="Password must be at least 6 characters")]

Email = Annotated[str, email("Email is not valid")]

DisplayName = Annotated[str, length(2, too_short="Name must be at least 2 characters")]


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseSchema):
    """Schema for public self-registration."""

    username: Username
    email: Email
    password: Password
    name: Optional[DisplayName] = None
    image: Optional[str] = None
    captcha_token: Optional[str] = Field(
        default=None,
        description="Token returned by the captcha widget",
    )


class LoginRequest(BaseSchema):
    """Schema for username/password login."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(BaseSchema):
    """Public account fields. Never includes the password hash."""

    id: UUID
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    role: UserRole
    joined: datetime


class RegisterResponse(BaseSchema):
    """Result of a successful registration."""

    success: bool = True
    user: UserResponse


class AuthResponse(BaseSchema):
    """Schema for authentication response."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN USER MANAGEMENT
# ═══════════════════════════════════════════════════════════════════════════════


class AdminCreate(BaseSchema):
    """Tenant admin creating a new ADMIN account."""

    username: Username
    email: Email
    password: Password
    name: Optional[str] = None


class UserCreate(AdminCreate):
    """Admin creating an account with an explicit role."""

    role: UserRole = UserRole.MEMBER


class UserUpdate(BaseSchema):
    """Partial update of another user's account. Absent fields are untouched."""

    username: Optional[Username] = None
    email: Optional[Email] = None
    name: Optional[str] = None
    role: Optional[UserRole] = None


class CreatedUserResponse(BaseSchema):
    """Result of creating an admin account."""

    success: bool = True
    user: UserResponse
