"""Repositories."""

from contact_book.persistence.repositories.client_repository import ClientRepository
from contact_book.persistence.repositories.contact_repository import ContactRepository

__all__ = [
    "ClientRepository",
    "ContactRepository",
]
