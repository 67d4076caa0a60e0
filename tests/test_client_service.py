"""Tests for client creation and listing."""

from uuid import uuid4

import pytest

from contact_book.domain.errors import ClientNotFound
from contact_book.domain.services.client_service import ClientService
from contact_book.domain.services.contact_service import ContactService


@pytest.mark.asyncio
async def test_created_clients_are_listed(db_session):
    """Test every created client shows up with an id, name and date."""
    service = ClientService(db_session)

    first = await service.create_client("Client test 1")
    second = await service.create_client("Client test 2")

    clients = await service.list_clients()

    assert [c.id for c in clients] == [first.id, second.id]
    for client in clients:
        assert client.id is not None
        assert client.name
        assert client.date is not None
        assert client.contacts == []


@pytest.mark.asyncio
async def test_list_clients_includes_contacts(db_session):
    """Test listed clients carry their contacts in creation order."""
    client = await ClientService(db_session).create_client("B")
    contacts = ContactService(db_session)
    await contacts.create_contact(client.id, "Personal", "a@x.com", "111")
    await contacts.create_contact(client.id, "Work", "b@x.com", "222")

    clients = await ClientService(db_session).list_clients()

    assert len(clients) == 1
    assert [c.type for c in clients[0].contacts] == ["Personal", "Work"]


@pytest.mark.asyncio
async def test_get_client(db_session):
    """Test fetching one client by id."""
    service = ClientService(db_session)
    created = await service.create_client("A")

    fetched = await service.get_client(str(created.id))

    assert fetched.id == created.id
    assert fetched.name == "A"


@pytest.mark.asyncio
async def test_get_unknown_client(db_session):
    """Test unknown and malformed ids both raise ClientNotFound."""
    service = ClientService(db_session)

    with pytest.raises(ClientNotFound):
        await service.get_client(uuid4())
    with pytest.raises(ClientNotFound):
        await service.get_client("a9aa99a9-999a-99a9-999a-9aa999aaaaaz")
