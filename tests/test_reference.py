"""
Reference list endpoint tests (customers, types, parts, tests).
"""

import pytest


@pytest.mark.asyncio
@pytest.mark.parametrize("resource", ["customers", "types", "parts", "tests"])
async def test_create_then_get(test_client, resource):
    response = await test_client.post(f"/api/{resource}", json={"id": "r1", "name": "First"})
    assert response.status_code == 201
    created = response.json()
    assert created["id"] == "r1"
    assert created["name"] == "First"
    assert isinstance(created["created_at"], int)

    response = await test_client.get(f"/api/{resource}/r1")
    assert response.status_code == 200
    assert response.json()["name"] == "First"


@pytest.mark.asyncio
async def test_post_existing_id_updates_instead_of_duplicating(test_client):
    first = await test_client.post("/api/customers", json={"id": "c1", "name": "Acme", "created_at": 1000})
    second = await test_client.post("/api/customers", json={"id": "c1", "name": "Acme GmbH", "created_at": 2000})

    assert second.status_code == 201
    assert second.json()["name"] == "Acme GmbH"
    # created_at of an existing row is kept
    assert second.json()["created_at"] == first.json()["created_at"] == 1000

    response = await test_client.get("/api/customers")
    assert [item["name"] for item in response.json()] == ["Acme GmbH"]


@pytest.mark.asyncio
async def test_list_is_ordered_by_name(test_client):
    for item_id, name in (("b", "Zeta"), ("a", "Alpha"), ("c", "Mid")):
        await test_client.post("/api/parts", json={"id": item_id, "name": name})

    response = await test_client.get("/api/parts")
    assert [item["name"] for item in response.json()] == ["Alpha", "Mid", "Zeta"]


@pytest.mark.asyncio
async def test_put_renames_and_missing_id_is_noop(test_client):
    await test_client.post("/api/types", json={"id": "t1", "name": "Old"})

    response = await test_client.put("/api/types/t1", json={"name": "New"})
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert (await test_client.get("/api/types/t1")).json()["name"] == "New"

    response = await test_client.put("/api/types/missing", json={"name": "Ghost"})
    assert response.status_code == 200
    assert (await test_client.get("/api/types/missing")).status_code == 404


@pytest.mark.asyncio
async def test_delete_and_not_found(test_client):
    await test_client.post("/api/tests", json={"id": "x1", "name": "Leak"})

    response = await test_client.delete("/api/tests/x1")
    assert response.json() == {"success": True}

    response = await test_client.get("/api/tests/x1")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Test not found"


@pytest.mark.asyncio
async def test_create_requires_name(test_client):
    response = await test_client.post("/api/customers", json={"id": "c1"})

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"
