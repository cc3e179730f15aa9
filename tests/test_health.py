"""
Health endpoint tests using pytest-asyncio and httpx.AsyncClient.
"""

import pytest


@pytest.mark.asyncio
async def test_health_endpoint(test_client):
    """Test the health check endpoint returns expected structure."""
    response = await test_client.get("/api/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "ok"
    assert data["uptime"].startswith("PT")
    assert data["checks"] == {"database": "ok"}
    assert "version" in data


@pytest.mark.asyncio
async def test_root_health_endpoint(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_payload(test_client):
    response = await test_client.get("/api/nothing-here")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["path"] == "/api/nothing-here"
    assert error["status_code"] == 404


@pytest.mark.asyncio
async def test_not_found_keeps_its_status(test_client):
    response = await test_client.get("/api/customers/missing")

    assert response.status_code == 404
    assert response.json() == {
        "error": {
            "message": "Customer not found",
            "status_code": 404,
            "path": "/api/customers/missing",
        }
    }


@pytest.mark.asyncio
async def test_bad_request_keeps_its_status(test_client):
    response = await test_client.delete("/api/data/clear/sqlite_master")

    assert response.status_code == 400
    assert response.json()["error"]["status_code"] == 400
