"""
Authentication Handler

Handles registration and login endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Adapters ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service errors
(ValidationError, ConflictError, AuthenticationError) reach clients through
the global exception handlers.
"""

from fastapi import APIRouter, Depends, status

from zelene.api.dependencies.services import get_auth_service
from zelene.shared.schemas.user import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from zelene.shared.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new member.

    The captcha token is verified before anything else.

    Raises:
        400: Invalid input or captcha
        409: Username or email already exists
    """
    user = await auth_service.register(user_data)
    return RegisterResponse(success=True, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate by username and password and return a JWT.

    Raises:
        401: If credentials are invalid
    """
    user, access_token, expires_in = await auth_service.login(
        username=credentials.username,
        password=credentials.password,
    )
    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=expires_in,
    )
