"""
Pytest configuration and fixtures.
Every test runs against a fresh SQLite file and backup directory in tmp_path.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from kappaplan.main import app
from kappaplan.core.config import settings
from kappaplan.db.session import init_db, close_db


@pytest.fixture(scope="function")
async def test_db(tmp_path, monkeypatch):
    """
    Point the application at a temporary database and create its tables.
    """
    monkeypatch.setattr(settings, "DATABASE_PATH", str(tmp_path / "test.db"))
    monkeypatch.setattr(settings, "BACKUP_DIR", str(tmp_path / "backups"))

    await close_db()
    await init_db()
    yield tmp_path
    await close_db()


@pytest.fixture(scope="function")
async def test_client(test_db):
    """
    Create a test HTTP client bound to the ASGI app.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(scope="function")
async def planning_refs(test_client):
    """Create one customer, type, part and test."""
    for resource, item_id, name in (
        ("customers", "c1", "Acme"),
        ("types", "t1", "Housing"),
        ("parts", "p1", "Bracket"),
        ("tests", "x1", "Leak test"),
    ):
        response = await test_client.post(f"/api/{resource}", json={"id": item_id, "name": name})
        assert response.status_code == 201
    return test_client
