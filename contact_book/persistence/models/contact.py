"""Contact model."""

from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from contact_book.persistence.database import Base
from contact_book.persistence.models.client import utcnow

if TYPE_CHECKING:
    from contact_book.persistence.models.client import Client


class Contact(Base):
    """Contact model: an email and/or phone record owned by one client."""

    __tablename__ = "contact"
    # Empty channels are stored as NULL, and NULLs never collide
    __table_args__ = (
        UniqueConstraint("client_id", "email", name="uq_contact_client_email"),
        UniqueConstraint("client_id", "phone", name="uq_contact_client_phone"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    client_id = Column(Uuid, ForeignKey("client.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="contacts")

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, client_id={self.client_id}, email={self.email}, phone={self.phone})>"
