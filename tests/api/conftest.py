"""API test fixtures: FastAPI app over in-memory SQLite.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bookmanager.infrastructure.database import get_db, DatabaseSessionManager
import bookmanager.infrastructure.database as db_module
from bookmanager.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def create_author(client):
    async def _create(name="Jane Doe", birthdate="1990-01-01") -> dict:
        res = await client.post(
            "/api/v1/authors", json={"name": name, "birthdate": birthdate},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
async def create_book(client):
    async def _create(
        author_ids, title="Go in Action", price=1500, status="PUBLISHED",
    ) -> dict:
        res = await client.post("/api/v1/books", json={
            "title": title, "price": price,
            "publishedStatus": status, "authorIds": author_ids,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _create
