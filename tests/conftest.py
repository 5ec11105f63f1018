"""
Shared pytest fixtures: a fresh SQLite database per test and an in-process HTTP client.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from contact_backend.core.database import DatabaseSessionManager
from contact_backend.main import app
from contact_backend.services.ContactStore import ContactStore, get_contact_store


@pytest_asyncio.fixture
async def sessions(tmp_path):
    """Session manager bound to a throwaway database file."""
    manager = DatabaseSessionManager()
    await manager.init(f"sqlite+aiosqlite:///{tmp_path / 'contacts.db'}")
    yield manager
    await manager.close()


@pytest.fixture
def store(sessions):
    return ContactStore(sessions)


@pytest_asyncio.fixture
async def client(store):
    """HTTP client talking to the app with the test store injected."""
    app.dependency_overrides[get_contact_store] = lambda: store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def alice():
    return {
        "fullName": "Alice",
        "email": "a@x.com",
        "subject": "Hi",
        "message": "Test",
    }
