"""Client repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from contact_book.persistence.models.client import Client
from contact_book.persistence.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """Repository for Client entities."""

    def __init__(self, session: AsyncSession):
        """Initialize client repository."""
        super().__init__(Client, session)

    async def get_with_contacts(self, id: UUID) -> Client | None:
        """Get client by ID with its contacts loaded.

        Args:
            id: Client ID

        Returns:
            Client with contacts or None if not found
        """
        stmt = (
            select(Client)
            .options(selectinload(Client.contacts))
            .where(Client.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_contacts(self) -> list[Client]:
        """List all clients, oldest first, with contacts loaded."""
        stmt = (
            select(Client)
            .options(selectinload(Client.contacts))
            .order_by(Client.date)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
