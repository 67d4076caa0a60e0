"""Client model."""

import threading
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from contact_book.persistence.database import Base

if TYPE_CHECKING:
    from contact_book.persistence.models.contact import Contact


_clock_lock = threading.Lock()
_last_timestamp: datetime | None = None


def utcnow() -> datetime:
    """Current UTC time, strictly increasing within the process.

    Creation order is read back from these timestamps, so two rows stamped
    within one clock tick are pushed apart by a microsecond.
    """
    global _last_timestamp
    now = datetime.now(timezone.utc)
    with _clock_lock:
        if _last_timestamp is not None and now <= _last_timestamp:
            now = _last_timestamp + timedelta(microseconds=1)
        _last_timestamp = now
    return now


class Client(Base):
    """Client model: the owner of zero or more contacts."""

    __tablename__ = "client"

    id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Relationships
    contacts = relationship(
        "Contact",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="Contact.created_at",
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name={self.name})>"
