"""
Base Repository

Generic base repository with the CRUD operations every entity needs.
Entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)          → Fetch single record by primary key
- get_by_ids()     → Fetch multiple records by primary key
- list()           → List records with offset pagination and filtering
- count()          → Count records with equality filters
- count_where()    → Count records matching arbitrary SQL conditions
- create()         → Create new record
- update()         → Update existing record
- delete()         → Hard delete record
- exists()         → Check if record exists

Generic Type Pattern:
=====================
    class TagRepository(BaseRepository[Tag]):
        ...

    repo = TagRepository(db)
    tag = await repo.get(7)  # Returns Tag, not Any

Unique Constraints:
===================
create() and update() flush immediately. A unique-constraint violation
surfaces as ConflictError so callers never see driver exceptions; the
request-level session is rolled back by get_db().

flush() vs commit():
====================
Repository methods only flush. get_db() commits once the handler returns,
so a request is a single transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from zelene.shared.core.exceptions import DuplicateResourceError
from zelene.shared.core.logging import logger
from zelene.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Post, Feedback)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Get a single record by primary key.

        Args:
            record_id: UUID for users and query entities, int for posts and tags

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: list[Any]) -> list[ModelType]:
        """
        Get multiple records by primary key in a single IN query.

        Args:
            ids: Primary keys to fetch

        Returns:
            Found instances (may be fewer than requested)
        """
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        List records with pagination and optional equality filters.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return
            filters: Dict of field=value for WHERE clauses (None values skipped)
            order_by: Field name to order results by
            order_desc: If True, order descending

        Returns:
            List of model instances

        SQL Generated:
            SELECT * FROM users WHERE role = 'ADMIN'
            ORDER BY joined DESC
            OFFSET 0 LIMIT 100
        """
        query = self._apply_filters(select(self.model), filters)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            query = query.order_by(order_field.desc() if order_desc else order_field)

        query = query.offset(offset).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filters.

        Args:
            filters: Dict of field=value for WHERE clauses (None values skipped)

        Returns:
            Number of matching records
        """
        query = self._apply_filters(select(sql_count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def count_where(self, *conditions: Any) -> int:
        """
        Count records matching arbitrary SQL conditions.

        Example:
            await repo.count_where(Feedback.created_at <= end_of_day)
        """
        query = select(sql_count()).select_from(self.model)
        if conditions:
            query = query.where(*conditions)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def exists(self, record_id: Any) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: Primary key to check

        Returns:
            True if record exists, False otherwise
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        Raises:
            ConflictError: If a unique constraint is violated
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self._flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(self, record_id: Any, **kwargs: Any) -> Optional[ModelType]:
        """
        Update a record by primary key.

        Every given field is written, including explicit None values, so
        callers pass only the fields they mean to change (typically a
        pydantic ``model_dump(exclude_unset=True)``).

        Args:
            record_id: Primary key of the record to update
            **kwargs: Fields to update

        Returns:
            Updated model instance, or None if not found

        Raises:
            ConflictError: If a unique constraint is violated
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self._flush()
        await self.session.refresh(instance)
        return instance

    async def save(self) -> None:
        """
        Flush changes made directly on loaded instances.

        Raises:
            ConflictError: If a unique constraint is violated
        """
        await self._flush()

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: Any) -> bool:
        """
        Hard delete a record by primary key.

        ORM cascades (e.g. a user's profile, a post's tag links) are applied.

        Args:
            record_id: Primary key of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    def _apply_filters(self, query: Any, filters: Optional[dict[str, Any]]) -> Any:
        """Add WHERE field = value for each known, non-None filter."""
        if filters:
            for field, value in filters.items():
                if value is not None and hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)
        return query

    async def _flush(self) -> None:
        """Flush pending changes, translating unique violations to ConflictError."""
        try:
            await self.session.flush()
        except IntegrityError as e:
            logger.warning(
                "Integrity error on flush",
                model=self.model.__name__,
                error=str(e.orig),
            )
            raise DuplicateResourceError(f"{self.model.__name__} already exists") from e
