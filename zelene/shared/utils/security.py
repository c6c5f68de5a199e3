"""
Security Utilities

Password hashing, JWT token management and role checks.

Password Hashing:
=================
Uses bcrypt through passlib with a cost factor of PASSWORD_HASH_ROUNDS
(10 by default). The salt is generated automatically and stored inside the
hash.

JWT Tokens:
===========
Uses PyJWT. Tokens carry the user id, username, email and role so role
checks need no database round trip.

Role Checks:
============
``ensure_role`` is the single place where a role is compared against the
roles an operation allows. Route dependencies and services both call it.

Usage:
======
    from zelene.shared.utils.security import SecurityUtils, ensure_role

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)  # True

    token = SecurityUtils.create_access_token(
        data={"user_id": "123", "role": "MEMBER"},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(hours=1),
    )
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)

    ensure_role(payload["role"], ADMIN_ROLES)  # raises AuthorizationError
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Union

import jwt
from passlib.context import CryptContext

from zelene.config.settings import settings
from zelene.shared.core.exceptions import AuthorizationError
from zelene.shared.models.enums import UserRole


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)

# Roles allowed on admin routes
ADMIN_ROLES = frozenset({UserRole.ADMIN, UserRole.TENANT_ADMIN})
TENANT_ADMIN_ROLES = frozenset({UserRole.TENANT_ADMIN})


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt and cost factor)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against bcrypt hash.

        Accounts created without credentials have no hash and never match.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        if not hashed_password:
            return False
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (user_id, role, ...)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(days=7))

        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid

        Example:
            try:
                payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
            except ValueError as e:
                raise AuthenticationError(str(e))
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")


# ═══════════════════════════════════════════════════════════════════════════════
# ROLE CHECKS
# ═══════════════════════════════════════════════════════════════════════════════


def has_role(role: Union[UserRole, str, None], allowed: Iterable[UserRole]) -> bool:
    """True when role is one of allowed. Unknown role strings never match."""
    if role is None:
        return False
    try:
        return UserRole(role) in set(allowed)
    except ValueError:
        return False


def ensure_role(
    role: Union[UserRole, str, None],
    allowed: Iterable[UserRole],
    message: str = "Access denied",
) -> None:
    """
    Raise unless role is one of allowed.

    Args:
        role: Role of the acting user
        allowed: Roles permitted to perform the operation
        message: Error message on denial

    Raises:
        AuthorizationError: If the role is not allowed
    """
    if not has_role(role, allowed):
        raise AuthorizationError(message)
