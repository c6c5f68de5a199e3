"""
Authentication Service

Business logic for registration and login.

Registration Flow:
==================
    1. Verify captcha token      → ValidationError "Invalid captcha"
    2. Check username / email    → ConflictError "Username or email already exists"
    3. Hash password (bcrypt, cost 10)
    4. Create MEMBER user

Usage:
======
    from zelene.shared.services.auth_service import AuthService

    service = AuthService(db, captcha)
    user = await service.register(request)
    user, token, expires = await service.login("ada", "secret1")
"""

from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.config.settings import settings
from zelene.shared.adapters.recaptcha_adapter import RecaptchaAdapter
from zelene.shared.core.exceptions import AuthenticationError, ConflictError, ValidationError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.enums import UserRole
from zelene.shared.models.user import User
from zelene.shared.repositories.user_repository import UserRepository
from zelene.shared.schemas.user import RegisterRequest
from zelene.shared.utils.security import SecurityUtils


logger = get_logger("auth")

DUPLICATE_ACCOUNT_MESSAGE = "Username or email already exists"


def issue_token(user: User) -> Tuple[str, int]:
    """
    Create an access token for user.

    Returns:
        Tuple of (access_token, expires_in_seconds)
    """
    access_token = SecurityUtils.create_access_token(
        data={
            "user_id": str(user.id),
            "username": user.username,
            "email": user.email,
            "role": UserRole(user.role).value,
        },
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )
    return access_token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60


class AuthService:
    """
    Service for authentication-related business logic.

    Attributes:
        session: Database session
        repo: UserRepository instance
        captcha: Captcha verifier
    """

    def __init__(self, session: AsyncSession, captcha: Optional[RecaptchaAdapter] = None) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            captcha: Captcha verifier (defaults to the reCAPTCHA adapter)
        """
        self.session = session
        self.repo = UserRepository(session)
        self.captcha = captcha or RecaptchaAdapter()

    async def register(self, data: RegisterRequest) -> User:
        """
        Register a new member.

        Args:
            data: Validated registration payload

        Returns:
            The created user

        Raises:
            ValidationError: If the captcha is missing or rejected
            ConflictError: If the username or email is taken
        """
        if not await self.captcha.verify(data.captcha_token):
            logger.info("Registration rejected by captcha", username=data.username)
            raise ValidationError("Invalid captcha")

        if await self.repo.find_conflicting(username=data.username, email=data.email):
            raise ConflictError(DUPLICATE_ACCOUNT_MESSAGE)

        user = await self.repo.create(
            username=data.username,
            email=data.email,
            name=data.name,
            image=data.image,
            password_hash=SecurityUtils.hash_password(data.password),
            role=UserRole.MEMBER,
        )

        logger.info("User registered", user_id=str(user.id), username=user.username)
        return user

    async def login(self, username: str, password: str) -> Tuple[User, str, int]:
        """
        Authenticate by username and password.

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_username(username)
        if user is None or not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Login failed", username=username)
            raise AuthenticationError("Invalid username or password")

        access_token, expires_in = issue_token(user)
        return user, access_token, expires_in
