"""Contact service for creating, listing and deleting a client's contacts."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.core.fields import normalize_channel, parse_id
from contact_book.domain.errors import ContactNotFound, DuplicateContactChannel, MissingContactChannel
from contact_book.domain.services.client_service import ClientService
from contact_book.persistence.models.contact import Contact
from contact_book.persistence.repositories.contact_repository import ContactRepository

logger = logging.getLogger(__name__)


class ContactService:
    """Service for contact management."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize contact service."""
        self.session = session
        self.clients = ClientService(session)
        self.contact_repo = ContactRepository(session)

    async def create_contact(
        self,
        client_id: UUID | str,
        type: str,
        email: str | None = None,
        phone: str | None = None,
    ) -> Contact:
        """Validate and create a contact for a client.

        Checks run in order: the client must exist, at least one channel
        must be given, and neither channel may already be registered for
        this client. The unique constraints on the contact table back up
        the last check when two requests race.

        Args:
            client_id: Owning client ID
            type: Free-text category label
            email: Optional email; empty means absent
            phone: Optional phone; empty means absent

        Returns:
            Created contact with its client loaded

        Raises:
            ClientNotFound: If the client does not exist
            MissingContactChannel: If both email and phone are empty
            DuplicateContactChannel: If the email or phone is already registered
        """
        client = await self.clients.require_client(client_id)

        email = normalize_channel(email)
        phone = normalize_channel(phone)
        if email is None and phone is None:
            raise MissingContactChannel()

        existing = await self.contact_repo.get_by_email_or_phone(client.id, email=email, phone=phone)
        if existing is not None:
            raise DuplicateContactChannel()

        owner_id = client.id
        try:
            contact = await self.contact_repo.create(
                client_id=owner_id,
                type=type,
                email=email,
                phone=phone,
            )
        except IntegrityError:
            # Lost the race against a concurrent insert of the same channel
            await self.session.rollback()
            logger.warning(
                "Contact insert rejected by unique constraint",
                extra={"client_id": str(owner_id)},
            )
            raise DuplicateContactChannel()

        logger.info(
            "Contact created",
            extra={"client_id": str(owner_id), "contact_id": str(contact.id)},
        )
        return contact

    async def list_contacts(self, client_id: UUID | str) -> list[Contact]:
        """List a client's contacts in creation order.

        Raises:
            ClientNotFound: If the client does not exist
        """
        client = await self.clients.require_client(client_id)
        return await self.contact_repo.list_for_client(client.id)

    async def delete_contact(self, client_id: UUID | str, contact_id: UUID | str) -> None:
        """Permanently delete one of a client's contacts.

        Raises:
            ClientNotFound: If the client does not exist
            ContactNotFound: If the contact does not exist for this client
        """
        client = await self.clients.require_client(client_id)

        parsed = parse_id(contact_id)
        contact = await self.contact_repo.get_for_client(client.id, parsed) if parsed else None
        if contact is None:
            raise ContactNotFound()

        await self.contact_repo.delete(contact)
        logger.info(
            "Contact deleted",
            extra={"client_id": str(client.id), "contact_id": str(parsed)},
        )
