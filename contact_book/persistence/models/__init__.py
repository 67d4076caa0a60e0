"""Database models."""

from contact_book.persistence.models.client import Client
from contact_book.persistence.models.contact import Contact

__all__ = [
    "Client",
    "Contact",
]
