"""
Zelene Backend

Platform API for contact/support queries, admin triage dashboards,
user accounts and community posts.

Package Structure:
==================
    zelene/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, schemas, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn zelene.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
