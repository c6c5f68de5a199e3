"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Adapters (storage, captcha)

Services should:
- Contain business logic and permission rules
- Coordinate multiple repositories if needed
- Raise ZeleneException subclasses, never HTTP errors

Available Services:
===================
- AuthService: Registration and login
- QueryService: Public query submissions and lookup
- AdminQueryService: Admin query listings, counts and status updates
- StatsService: Dashboard statistics
- UserAdminService: User and admin account management
- ProfileService: Profile pages and settings updates
- PostService / TagService: Blog posts and tags
- StorageService: Attachment upload and URL resolution

Usage:
======
    from zelene.shared.services import AuthService

    service = AuthService(db, captcha)
    user = await service.register(request)
"""

from zelene.shared.services.storage_service import StorageService
from zelene.shared.services.auth_service import AuthService
from zelene.shared.services.query_service import QueryService
from zelene.shared.services.admin_query_service import AdminQueryService
from zelene.shared.services.stats_service import StatsService
from zelene.shared.services.user_admin_service import UserAdminService
from zelene.shared.services.profile_service import ProfileService
from zelene.shared.services.post_service import PostService
from zelene.shared.services.tag_service import TagService

__all__ = [
    "StorageService",
    "AuthService",
    "QueryService",
    "AdminQueryService",
    "StatsService",
    "UserAdminService",
    "ProfileService",
    "PostService",
    "TagService",
]
