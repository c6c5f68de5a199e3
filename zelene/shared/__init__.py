"""
Shared Module

Domain code used by the API layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: External services (object storage, captcha)
- State: Reducers for multi-step client forms

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services
    ├── state/          ← Form state reducers
    └── utils/          ← Security helpers, constants

Usage:
======
    from zelene.shared.models import User, Post, Tag
    from zelene.shared.repositories import UserRepository
    from zelene.shared.services import AuthService
    from zelene.shared.core import logger, ZeleneException
"""
