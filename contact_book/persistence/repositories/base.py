"""Base repository with common CRUD queries."""

from typing import Any, Generic, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository exposing get, list, insert and delete."""

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """Initialize repository with model and session."""
        self.model = model
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get entity by ID."""
        stmt = select(self.model).where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self, order_by: Sequence[Any] = (), **filters) -> list[ModelType]:
        """List entities filtered by column equality.

        Args:
            order_by: Columns or expressions to sort by
            **filters: Column name to required value

        Raises:
            AttributeError: If a filter names a column the model lacks
        """
        stmt = select(self.model)

        for key, value in filters.items():
            stmt = stmt.where(getattr(self.model, key) == value)

        if order_by:
            stmt = stmt.order_by(*order_by)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **data) -> ModelType:
        """Insert a new entity and commit.

        Raises:
            sqlalchemy.exc.IntegrityError: If a storage constraint rejects the row
        """
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Delete an entity and commit."""
        await self.session.delete(instance)
        await self.session.commit()
