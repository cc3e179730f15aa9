"""
API client and planning store tests, run against the in-process app.
"""

import json

import pytest
from httpx import ASGITransport

from kappaplan.main import app
from kappaplan.client.api_client import ApiClient, ApiError
from kappaplan.client.store import PlanningStore


@pytest.fixture
async def api_client(test_db):
    client = ApiClient(base_url="http://test", transport=ASGITransport(app=app))
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_health_check(api_client):
    assert await api_client.health_check() is True


@pytest.mark.asyncio
async def test_client_raises_api_error(api_client):
    with pytest.raises(ApiError) as excinfo:
        await api_client.get_project("missing")

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Project not found"


@pytest.mark.asyncio
async def test_client_filters_and_bulk_calls(api_client):
    await api_client.save_employee({"id": "e1", "firstName": "Anna", "lastName": "Nowak"})
    await api_client.set_absence_limits("e1", 2026, [{"absenceTypeId": "vacation", "totalDays": 20}])
    created = await api_client.create_absence({
        "id": "a1",
        "employeeId": "e1",
        "absenceTypeId": "vacation",
        "startDate": "2026-02-02",
        "endDate": "2026-02-03",
    })
    assert created["workDays"] == 2

    limits = await api_client.list_absence_limits(employee_id="e1", year=2026)
    assert limits[0]["usedDays"] == 2
    assert await api_client.list_absences(month=3) == []

    await api_client.save_assignment({"id": "s1", "employeeId": "e1", "projectId": "pr1", "week": "2026-KW06"})
    assert len(await api_client.list_assignments(week="2026-KW06", employee_id="e1")) == 1


@pytest.mark.asyncio
async def test_client_database_round_trip(api_client):
    await api_client.save_reference("customers", {"id": "c1", "name": "Acme"})
    snapshot = await api_client.download_database()

    await api_client.delete_reference("customers", "c1")
    result = await api_client.upload_database(snapshot)

    assert result["size"] == len(snapshot)
    assert [c["id"] for c in await api_client.list_reference("customers")] == ["c1"]


@pytest.mark.asyncio
async def test_store_planning_flow(api_client):
    store = PlanningStore(api_client)
    await store.load()
    assert store.customers == []
    assert store.settings["language"] == "en"

    await store.add_item("customers", {"id": "c1", "name": "Acme"})
    await store.add_item("types", {"id": "t1", "name": "Housing"})
    await store.add_item("parts", {"id": "p1", "name": "Bracket"})
    await store.add_item("tests", {"id": "x1", "name": "Leak test"})
    await store.rename_item("customers", "c1", "Acme GmbH")
    assert store.customers[0]["name"] == "Acme GmbH"

    await store.add_project({
        "id": "pr1",
        "customer_id": "c1",
        "type_id": "t1",
        "part_id": "p1",
        "test_id": "x1",
    })
    await store.set_week("pr1", "2026-KW01", 10, 20)
    assert store.find_project("pr1")["weeks"]["2026-KW01"]["soll"] == 20

    exported = await store.export_data()
    await store.clear_all()
    assert store.projects == []
    assert await api_client.list_projects() == []

    await store.import_data(exported)
    assert store.find_project("pr1")["weeks"]["2026-KW01"]["ist"] == 10
    assert json.loads(exported)["version"] == "2.0"

    await store.delete_project("pr1")
    assert store.find_project("pr1") is None
    assert await api_client.list_projects() == []


@pytest.mark.asyncio
async def test_store_settings(api_client):
    store = PlanningStore(api_client)

    await store.update_settings({"language": "pl"})

    assert store.settings == {"language": "pl"}
    assert await api_client.get_settings() == {"language": "pl"}
