"""
Project endpoint tests, including the nested week map.
"""

import pytest

from kappaplan.db import session as db_session
from kappaplan.db.repositories.project_repository import ProjectRepository


def project_body(project_id: str = "pr1", **overrides) -> dict:
    body = {
        "id": project_id,
        "customer_id": "c1",
        "type_id": "t1",
        "part_id": "p1",
        "test_id": "x1",
        "timePerUnit": 12.5,
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_planning_scenario(test_client):
    response = await test_client.post("/api/customers", json={"id": "c1", "name": "Acme"})
    assert response.status_code == 201

    response = await test_client.post("/api/projects", json=project_body())
    assert response.status_code == 201

    response = await test_client.get("/api/projects/pr1")
    assert response.status_code == 200
    assert response.json()["customer_id"] == "c1"

    response = await test_client.patch(
        "/api/projects/pr1/weeks/2026-KW01",
        json={"ist": 10, "soll": 20},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    project = (await test_client.get("/api/projects/pr1")).json()
    week = project["weeks"]["2026-KW01"]
    assert week["ist"] == 10
    assert week["soll"] == 20
    assert week["stoppage"] is False
    assert week["productionLack"] is False


@pytest.mark.asyncio
async def test_project_wire_format(planning_refs):
    client = planning_refs
    response = await client.post("/api/projects", json=project_body(hidden=True))
    data = response.json()

    assert data["timePerUnit"] == 12.5
    assert data["hidden"] is True
    assert data["weeks"] == {}
    assert data["created_at"] == data["updated_at"]


@pytest.mark.asyncio
async def test_post_weeks_map_replaces_weeks(planning_refs):
    client = planning_refs
    body = project_body(weeks={
        "2026-KW01": {"ist": 1, "soll": 2},
        "2026-KW02": {"ist": 3, "soll": 4, "stoppage": True, "productionLack": True, "comment": "line down"},
    })
    await client.post("/api/projects", json=body)

    body = project_body(weeks={"2026-KW03": {"ist": 5, "soll": 6}})
    response = await client.post("/api/projects", json=body)
    assert list(response.json()["weeks"]) == ["2026-KW03"]

    projects = (await client.get("/api/projects")).json()
    assert len(projects) == 1


@pytest.mark.asyncio
async def test_week_flags_round_trip(planning_refs):
    client = planning_refs
    await client.post("/api/projects", json=project_body())
    await client.patch(
        "/api/projects/pr1/weeks/2026-KW10",
        json={"ist": 7, "soll": 9, "stoppage": True, "productionLack": True, "comment": "waiting"},
    )
    # A later patch without flags keeps the stored flags
    await client.patch("/api/projects/pr1/weeks/2026-KW10", json={"ist": 8, "soll": 9})

    week = (await client.get("/api/projects/pr1")).json()["weeks"]["2026-KW10"]
    assert week == {"ist": 8, "soll": 9, "stoppage": True, "productionLack": True, "comment": "waiting"}


@pytest.mark.asyncio
async def test_patch_week_bumps_updated_at(planning_refs):
    client = planning_refs
    await client.post("/api/projects", json=project_body(created_at=1000, updated_at=1000))

    await client.patch("/api/projects/pr1/weeks/2026-KW05", json={"ist": 1, "soll": 1})

    project = (await client.get("/api/projects/pr1")).json()
    assert project["created_at"] == 1000
    assert project["updated_at"] > 1000


@pytest.mark.asyncio
async def test_patch_week_errors(planning_refs):
    client = planning_refs
    response = await client.patch("/api/projects/missing/weeks/2026-KW01", json={"ist": 1, "soll": 1})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Project not found"

    await client.post("/api/projects", json=project_body())
    response = await client.patch("/api/projects/pr1/weeks/week-one", json={"ist": 1, "soll": 1})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_patch_week_stores_canonical_key(planning_refs):
    client = planning_refs
    await client.post("/api/projects", json=project_body())

    await client.patch("/api/projects/pr1/weeks/2026-W3", json={"ist": 1, "soll": 2})
    await client.patch("/api/projects/pr1/weeks/2026-KW3", json={"ist": 4, "soll": 5})

    weeks = (await client.get("/api/projects/pr1")).json()["weeks"]
    assert list(weeks) == ["2026-KW03"]
    assert weeks["2026-KW03"]["ist"] == 4


@pytest.mark.asyncio
async def test_put_updates_fields_and_weeks(planning_refs):
    client = planning_refs
    await client.post("/api/projects", json=project_body(weeks={"2026-KW01": {"ist": 1, "soll": 1}}))

    response = await client.put(
        "/api/projects/pr1",
        json={"timePerUnit": 30, "weeks": {"2026-KW20": {"ist": 2, "soll": 3}}},
    )
    assert response.json() == {"success": True}

    project = (await client.get("/api/projects/pr1")).json()
    assert project["timePerUnit"] == 30
    assert project["customer_id"] == "c1"
    assert list(project["weeks"]) == ["2026-KW20"]

    response = await client.put("/api/projects/missing", json={"hidden": True})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_list_newest_first(planning_refs):
    client = planning_refs
    await client.post("/api/projects", json=project_body("old", created_at=1000))
    await client.post("/api/projects", json=project_body("new", created_at=2000))

    projects = (await client.get("/api/projects")).json()
    assert [project["id"] for project in projects] == ["new", "old"]


@pytest.mark.asyncio
async def test_delete_project_removes_weeks(planning_refs):
    client = planning_refs
    await client.post("/api/projects", json=project_body(weeks={
        "2026-KW01": {"ist": 1, "soll": 2},
        "2026-KW02": {"ist": 3, "soll": 4},
    }))

    response = await client.delete("/api/projects/pr1")
    assert response.json() == {"success": True}
    assert (await client.get("/api/projects/pr1")).status_code == 404

    async with db_session.async_session_maker() as session:
        weeks = await ProjectRepository(session).list_weeks("pr1")
    assert weeks == []
