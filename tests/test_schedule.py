"""
Shift assignment, template and extra task endpoint tests.
"""

import pytest


def assignment(assignment_id: str, week: str = "2026-KW05", **overrides) -> dict:
    body = {"id": assignment_id, "employeeId": "e1", "projectId": "pr1", "week": week}
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_assignment_defaults(test_client):
    response = await test_client.post("/api/schedule-assignments", json=assignment("a1"))
    assert response.status_code == 201
    data = response.json()

    assert data["shift"] == 1
    assert data["scope"] == "project"
    assert data["employeeId"] == "e1"
    assert isinstance(data["createdAt"], int)
    assert data["updatedAt"] is None


@pytest.mark.asyncio
async def test_assignment_upsert_sets_updated_at(test_client):
    await test_client.post("/api/schedule-assignments", json=assignment("a1"))
    response = await test_client.post("/api/schedule-assignments", json=assignment("a1", shift=3, scope="audit"))

    data = response.json()
    assert data["shift"] == 3
    assert data["scope"] == "audit"
    assert data["updatedAt"] is not None
    assert len((await test_client.get("/api/schedule-assignments")).json()) == 1


@pytest.mark.asyncio
async def test_assignment_filters_and_order(test_client):
    await test_client.post("/api/schedule-assignments", json=assignment("a3", "2026-KW06", shift=1))
    await test_client.post("/api/schedule-assignments", json=assignment("a2", "2026-KW05", shift=2))
    await test_client.post("/api/schedule-assignments", json=assignment("a1", "2026-KW05", shift=1))
    await test_client.post("/api/schedule-assignments", json=assignment("b1", "2026-KW05", employeeId="e2"))

    everything = (await test_client.get("/api/schedule-assignments")).json()
    assert [a["week"] for a in everything] == ["2026-KW05"] * 3 + ["2026-KW06"]

    week = (await test_client.get("/api/schedule-assignments", params={"week": "2026-KW05"})).json()
    assert {a["id"] for a in week} == {"a1", "a2", "b1"}

    both = await test_client.get(
        "/api/schedule-assignments",
        params={"week": "2026-KW05", "employeeId": "e1"},
    )
    assert [a["id"] for a in both.json()] == ["a1", "a2"]


@pytest.mark.asyncio
async def test_assignment_rejects_bad_week_and_scope(test_client):
    response = await test_client.post("/api/schedule-assignments", json=assignment("a1", week="KW5"))
    assert response.status_code == 422

    response = await test_client.post("/api/schedule-assignments", json=assignment("a1", scope="team"))
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_templates(test_client):
    await test_client.post("/api/templates", json={"id": "old", "name": "Old", "createdAt": 1000, "data": {}})
    response = await test_client.post(
        "/api/templates",
        json={"id": "new", "name": "Early shift", "createdAt": 2000, "data": {"e1": [1, 2]}},
    )
    assert response.status_code == 201

    templates = (await test_client.get("/api/templates")).json()
    assert [t["id"] for t in templates] == ["new", "old"]
    assert templates[0]["data"] == {"e1": [1, 2]}

    await test_client.delete("/api/templates/old")
    assert [t["id"] for t in (await test_client.get("/api/templates")).json()] == ["new"]


@pytest.mark.asyncio
async def test_extra_task_defaults_and_update(test_client):
    response = await test_client.post(
        "/api/extra-tasks",
        json={"id": "t1", "name": "Cleaning", "week": "2026-KW05"},
    )
    assert response.status_code == 201
    task = response.json()
    assert task["timePerUnit"] == 15
    assert task["units"] == 1
    assert "created_at" in task

    await test_client.put("/api/extra-tasks/t1", json={"units": 4})
    tasks = (await test_client.get("/api/extra-tasks", params={"week": "2026-KW05"})).json()
    assert tasks[0]["units"] == 4
    assert tasks[0]["name"] == "Cleaning"

    assert (await test_client.get("/api/extra-tasks", params={"week": "2026-KW06"})).json() == []


@pytest.mark.asyncio
async def test_delete_extra_task_removes_its_assignments(test_client):
    await test_client.post("/api/extra-tasks", json={"id": "t1", "name": "Cleaning", "week": "2026-KW05"})
    await test_client.post("/api/schedule-assignments", json=assignment("a1", projectId="extra-t1"))
    await test_client.post("/api/schedule-assignments", json=assignment("a2", projectId="pr1"))

    response = await test_client.delete("/api/extra-tasks/t1")
    assert response.json() == {"success": True}

    assert (await test_client.get("/api/extra-tasks")).json() == []
    remaining = (await test_client.get("/api/schedule-assignments")).json()
    assert [a["id"] for a in remaining] == ["a2"]
