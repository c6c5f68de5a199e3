"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request; they only hold the request's session.

External collaborators have their own providers so tests can swap them:

    app.dependency_overrides[get_captcha_verifier] = lambda: FakeCaptcha(ok=True)
    app.dependency_overrides[get_storage_service] = lambda: InMemoryStorage()

Usage:
======
    from zelene.api.dependencies.services import get_auth_service

    @router.post("/register")
    async def register(data: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
        return await auth_service.register(data)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zelene.api.dependencies.database import get_db
from zelene.shared.adapters.recaptcha_adapter import RecaptchaAdapter
from zelene.shared.services.admin_query_service import AdminQueryService
from zelene.shared.services.auth_service import AuthService
from zelene.shared.services.post_service import PostService
from zelene.shared.services.profile_service import ProfileService
from zelene.shared.services.query_service import QueryService
from zelene.shared.services.stats_service import StatsService
from zelene.shared.services.storage_service import StorageService
from zelene.shared.services.tag_service import TagService
from zelene.shared.services.user_admin_service import UserAdminService


# ═══════════════════════════════════════════════════════════════════════════════
# EXTERNAL COLLABORATORS
# ═══════════════════════════════════════════════════════════════════════════════


def get_captcha_verifier() -> RecaptchaAdapter:
    """Captcha verifier used at registration."""
    return RecaptchaAdapter()


def get_storage_service() -> StorageService:
    """Attachment storage gateway."""
    return StorageService()


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICES
# ═══════════════════════════════════════════════════════════════════════════════


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    captcha: RecaptchaAdapter = Depends(get_captcha_verifier),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db, captcha)


async def get_query_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
) -> QueryService:
    """Dependency to get QueryService instance."""
    return QueryService(db, storage)


async def get_admin_query_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
) -> AdminQueryService:
    """Dependency to get AdminQueryService instance."""
    return AdminQueryService(db, storage)


async def get_stats_service(db: AsyncSession = Depends(get_db)) -> StatsService:
    return StatsService(db)


async def get_user_admin_service(db: AsyncSession = Depends(get_db)) -> UserAdminService:
    return UserAdminService(db)


async def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


async def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


async def get_tag_service(db: AsyncSession = Depends(get_db)) -> TagService:
    return TagService(db)
