"""Tests for contact validation, creation and deletion."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from contact_book.domain.errors import (
    ClientNotFound,
    ContactNotFound,
    DuplicateContactChannel,
    MissingContactChannel,
)
from contact_book.domain.services.client_service import ClientService
from contact_book.domain.services.contact_service import ContactService


@pytest.fixture
async def owner(db_session):
    """A client to attach contacts to."""
    return await ClientService(db_session).create_client("A")


@pytest.mark.asyncio
async def test_create_contact_returns_contact_with_client_summary(db_session, owner):
    """Test the happy path returns the contact and its owning client."""
    service = ContactService(db_session)

    contact = await service.create_contact(owner.id, "Personal", "a@x.com", "111")

    assert contact.id is not None
    assert contact.type == "Personal"
    assert contact.email == "a@x.com"
    assert contact.phone == "111"
    assert contact.client.id == owner.id
    assert contact.client.name == "A"
    assert contact.client.date is not None


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(db_session, owner):
    """Test a second contact reusing an email fails."""
    service = ContactService(db_session)
    await service.create_contact(owner.id, "Personal", "a@x.com", "111")

    with pytest.raises(DuplicateContactChannel) as exc_info:
        await service.create_contact(owner.id, "Work", "a@x.com", "222")

    assert exc_info.value.message == "O email do usuário já foi cadastrado"


@pytest.mark.asyncio
async def test_duplicate_phone_is_rejected(db_session, owner):
    """Test a second contact reusing a phone fails."""
    service = ContactService(db_session)
    await service.create_contact(owner.id, "Personal", "a@x.com", "111")

    with pytest.raises(DuplicateContactChannel):
        await service.create_contact(owner.id, "Work", "b@x.com", "111")


@pytest.mark.asyncio
async def test_both_channels_empty_is_rejected(db_session, owner):
    """Test a contact without email and phone fails."""
    service = ContactService(db_session)

    with pytest.raises(MissingContactChannel) as exc_info:
        await service.create_contact(owner.id, "Invalid", "", "")
    assert exc_info.value.message == "Insira pelo menos um telefone ou email"

    # Whitespace counts as empty
    with pytest.raises(MissingContactChannel):
        await service.create_contact(owner.id, "Invalid", "  ", None)


@pytest.mark.asyncio
async def test_empty_channels_never_collide(db_session, owner):
    """Test two contacts both lacking an email are not duplicates."""
    service = ContactService(db_session)

    first = await service.create_contact(owner.id, "Home", "", "111")
    second = await service.create_contact(owner.id, "Office", "", "222")

    assert first.email is None
    assert second.email is None
    assert len(await service.list_contacts(owner.id)) == 2


@pytest.mark.asyncio
async def test_channels_are_stripped_before_duplicate_check(db_session, owner):
    """Test surrounding whitespace does not sneak a duplicate past the check."""
    service = ContactService(db_session)
    await service.create_contact(owner.id, "Personal", "a@x.com", None)

    with pytest.raises(DuplicateContactChannel):
        await service.create_contact(owner.id, "Work", "  a@x.com ", None)


@pytest.mark.asyncio
async def test_uniqueness_is_scoped_per_client(db_session, owner):
    """Test another client may register the same email and phone."""
    other = await ClientService(db_session).create_client("B")
    service = ContactService(db_session)

    await service.create_contact(owner.id, "Personal", "a@x.com", "111")
    contact = await service.create_contact(other.id, "Personal", "a@x.com", "111")

    assert contact.client.id == other.id


@pytest.mark.asyncio
async def test_unknown_client_wins_over_payload_validation(db_session):
    """Test a missing client is reported even when the payload is invalid."""
    service = ContactService(db_session)

    with pytest.raises(ClientNotFound):
        await service.create_contact(uuid4(), "Personal", "a@x.com", "111")
    with pytest.raises(ClientNotFound):
        await service.create_contact(uuid4(), "Invalid", "", "")
    with pytest.raises(ClientNotFound):
        await service.create_contact("not-a-uuid", "Personal", "a@x.com", "111")


@pytest.mark.asyncio
async def test_storage_constraint_catches_racing_duplicate(db_session, owner):
    """Test a duplicate that slips past the pre-check is still rejected."""
    owner_id = owner.id
    service = ContactService(db_session)
    await service.create_contact(owner_id, "Personal", "a@x.com", "111")

    # Simulate a concurrent insert landing between the check and the write
    service.contact_repo.get_by_email_or_phone = AsyncMock(return_value=None)

    with pytest.raises(DuplicateContactChannel):
        await service.create_contact(owner_id, "Work", "a@x.com", "222")

    contacts = await ContactService(db_session).list_contacts(owner_id)
    assert [c.phone for c in contacts] == ["111"]


@pytest.mark.asyncio
async def test_contacts_listed_in_creation_order(db_session):
    """Test three contacts come back in the order they were created."""
    owner = await ClientService(db_session).create_client("B")
    service = ContactService(db_session)

    await service.create_contact(owner.id, "Personal", "pessoal@mail.com", "21999908501")
    await service.create_contact(owner.id, "Work", "trabalho@mail.com", "21999908551")
    await service.create_contact(owner.id, "Messages", "recados@mail.com", "21999999999")

    contacts = await service.list_contacts(owner.id)

    assert len(contacts) == 3
    assert [c.email for c in contacts] == [
        "pessoal@mail.com",
        "trabalho@mail.com",
        "recados@mail.com",
    ]
    assert [c.phone for c in contacts] == ["21999908501", "21999908551", "21999999999"]


@pytest.mark.asyncio
async def test_delete_contact_removes_it(db_session, owner):
    """Test deleting a contact removes it from later listings."""
    service = ContactService(db_session)
    keep = await service.create_contact(owner.id, "Personal", "a@x.com", None)
    drop = await service.create_contact(owner.id, "Work", "b@x.com", None)

    await service.delete_contact(owner.id, drop.id)

    contacts = await service.list_contacts(owner.id)
    assert [c.id for c in contacts] == [keep.id]


@pytest.mark.asyncio
async def test_delete_contact_unknown_client(db_session, owner):
    """Test deleting under a missing client fails with ClientNotFound."""
    service = ContactService(db_session)
    contact = await service.create_contact(owner.id, "Personal", "a@x.com", None)

    with pytest.raises(ClientNotFound):
        await service.delete_contact(uuid4(), contact.id)


@pytest.mark.asyncio
async def test_delete_contact_scoped_to_client(db_session, owner):
    """Test a contact cannot be deleted through another client."""
    other = await ClientService(db_session).create_client("B")
    service = ContactService(db_session)
    contact = await service.create_contact(owner.id, "Personal", "a@x.com", None)

    with pytest.raises(ContactNotFound):
        await service.delete_contact(other.id, contact.id)
    with pytest.raises(ContactNotFound):
        await service.delete_contact(owner.id, uuid4())

    assert len(await service.list_contacts(owner.id)) == 1
