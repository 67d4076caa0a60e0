"""Contact repository."""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.persistence.models.contact import Contact
from contact_book.persistence.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact entities."""

    def __init__(self, session: AsyncSession):
        """Initialize contact repository."""
        super().__init__(Contact, session)

    async def create(self, **data) -> Contact:
        """Insert a contact and load its owning client.

        Raises:
            sqlalchemy.exc.IntegrityError: If the email or phone is already
                registered for the client
        """
        instance = await super().create(**data)
        await self.session.refresh(instance, attribute_names=["client"])
        return instance

    async def get_for_client(self, client_id: UUID, id: UUID) -> Contact | None:
        """Get contact by ID, scoped to its owning client.

        Args:
            client_id: Client ID
            id: Contact ID

        Returns:
            Contact or None if not found for this client
        """
        stmt = select(Contact).where(
            Contact.id == id,
            Contact.client_id == client_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_client(self, client_id: UUID) -> list[Contact]:
        """List a client's contacts in creation order."""
        return await self.list(order_by=(Contact.created_at,), client_id=client_id)

    async def get_by_email_or_phone(
        self, client_id: UUID, email: str | None = None, phone: str | None = None
    ) -> Contact | None:
        """Get a client's contact matching the email or the phone.

        Empty values are never matched.

        Args:
            client_id: Client ID
            email: Optional email to search
            phone: Optional phone to search

        Returns:
            First matching contact or None
        """
        conditions = []
        if email:
            conditions.append(Contact.email == email)
        if phone:
            conditions.append(Contact.phone == phone)
        if not conditions:
            return None

        stmt = (
            select(Contact)
            .where(Contact.client_id == client_id, or_(*conditions))
            .order_by(Contact.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
