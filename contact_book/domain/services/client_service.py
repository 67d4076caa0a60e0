"""Client service for creating and listing clients."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.core.fields import parse_id
from contact_book.domain.errors import ClientNotFound
from contact_book.persistence.models.client import Client
from contact_book.persistence.repositories.client_repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Service for client management."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize client service."""
        self.session = session
        self.client_repo = ClientRepository(session)

    async def create_client(self, name: str) -> Client:
        """Create a new client.

        Args:
            name: Client name, already validated as non-empty

        Returns:
            Created client with generated id and creation date
        """
        client = await self.client_repo.create(name=name)
        logger.info("Client created", extra={"client_id": str(client.id)})
        return client

    async def list_clients(self) -> list[Client]:
        """List every client with its contacts, oldest first."""
        return await self.client_repo.list_with_contacts()

    async def get_client(self, client_id: UUID | str) -> Client:
        """Get a client with its contacts.

        Raises:
            ClientNotFound: If no client has this id
        """
        parsed = parse_id(client_id)
        client = await self.client_repo.get_with_contacts(parsed) if parsed else None
        if client is None:
            raise ClientNotFound()
        return client

    async def require_client(self, client_id: UUID | str) -> Client:
        """Get a client without loading its contacts.

        Raises:
            ClientNotFound: If no client has this id
        """
        parsed = parse_id(client_id)
        client = await self.client_repo.get_by_id(parsed) if parsed else None
        if client is None:
            raise ClientNotFound()
        return client
