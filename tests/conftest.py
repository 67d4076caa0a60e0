"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from contact_book.persistence.database import Database, get_db


@pytest.fixture
async def database():
    """Create an in-memory test database with all tables."""
    # StaticPool keeps a single connection so the in-memory database survives
    database = Database("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await database.create_all()

    yield database

    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def db_session(database):
    """Create a test database session."""
    async with database.session_factory() as session:
        yield session


@pytest.fixture
async def client(db_session):
    """Create a test HTTP client bound to the test session."""
    from contact_book.main import app

    app.dependency_overrides[get_db] = lambda: db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()
