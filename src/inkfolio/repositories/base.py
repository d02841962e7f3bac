"""Base repository pattern for all data access."""

from typing import Generic, TypeVar, Type, Optional, List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    All repositories should inherit from this class. The session is owned by
    the caller; repositories only flush, the request scope commits.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def get(self, id: int) -> Optional[ModelType]:
        """Get single record by ID."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_multi(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        newest_first: bool = False,
        **filters
    ) -> List[ModelType]:
        """Get multiple records with filters."""
        query = select(self.model)

        # Apply filters
        for key, value in filters.items():
            if hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)

        if newest_first:
            query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        else:
            query = query.order_by(self.model.id)

        # Pagination
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(self, **data) -> ModelType:
        """Create new record."""
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: int, **data) -> Optional[ModelType]:
        """Update existing record."""
        instance = await self.get(id)
        if not instance:
            return None

        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: int) -> bool:
        """Delete record (hard delete)."""
        instance = await self.get(id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True

    async def delete_all(self) -> int:
        """Delete every record. Returns count deleted."""
        result = await self.session.execute(delete(self.model))
        return result.rowcount
