"""
Comment, activity log, preference and settings endpoint tests.
"""

import io

import pytest
from openpyxl import load_workbook

from kappaplan.core.config import settings


@pytest.mark.asyncio
async def test_comments_upsert_only_changes_text(test_client):
    body = {"id": "k1", "projectId": "pr1", "week": "2026-KW01", "text": "first", "createdAt": 1000}
    response = await test_client.post("/api/comments", json=body)
    assert response.status_code == 201

    body.update(projectId="pr2", week="2026-KW02", text="second", createdAt=5000)
    await test_client.post("/api/comments", json=body)
    await test_client.post(
        "/api/comments",
        json={"id": "k2", "projectId": "pr1", "week": "2026-KW03", "text": "later", "createdAt": 2000},
    )

    comments = (await test_client.get("/api/comments")).json()
    assert [c["id"] for c in comments] == ["k2", "k1"]
    first = comments[1]
    assert (first["projectId"], first["week"], first["text"], first["createdAt"]) == (
        "pr1", "2026-KW01", "second", 1000,
    )

    await test_client.delete("/api/comments/k1")
    assert [c["id"] for c in (await test_client.get("/api/comments")).json()] == ["k2"]


@pytest.mark.asyncio
async def test_logs_latest_first_and_limited(test_client, monkeypatch):
    monkeypatch.setattr(settings, "LOG_LIST_LIMIT", 3)
    for index in range(5):
        response = await test_client.post(
            "/api/logs",
            json={"id": f"l{index}", "action": "update", "userName": "Anna", "timestamp": 1000 + index},
        )
        assert response.status_code == 201

    logs = (await test_client.get("/api/logs")).json()
    assert [entry["id"] for entry in logs] == ["l4", "l3", "l2"]
    assert logs[0]["userName"] == "Anna"

    response = await test_client.delete("/api/logs/clear")
    assert response.json() == {"success": True}
    assert (await test_client.get("/api/logs")).json() == []


@pytest.mark.asyncio
async def test_logs_export_excel(test_client):
    await test_client.post(
        "/api/logs",
        json={"id": "l1", "action": "create", "entityType": "project", "entityName": "pr1", "timestamp": 0},
    )

    response = await test_client.get("/api/logs/export-excel")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "attachment" in response.headers["content-disposition"]

    workbook = load_workbook(io.BytesIO(response.content))
    sheet = workbook["Activity Logs"]
    values = [cell for row in sheet.iter_rows(values_only=True) for cell in row]
    assert "create" in values
    assert "pr1" in values


@pytest.mark.asyncio
async def test_preferences(test_client):
    assert (await test_client.get("/api/preferences")).json() == {}
    assert (await test_client.get("/api/preferences/theme")).json() is None

    response = await test_client.put("/api/preferences/theme", json={"value": "dark"})
    assert response.json() == {"key": "theme", "value": "dark"}
    await test_client.put("/api/preferences/columns", json={"value": {"KW01": True, "width": 3}})

    assert (await test_client.get("/api/preferences/theme")).json() == "dark"
    assert (await test_client.get("/api/preferences")).json() == {
        "theme": "dark",
        "columns": {"KW01": True, "width": 3},
    }

    await test_client.delete("/api/preferences/theme")
    assert (await test_client.get("/api/preferences/theme")).json() is None


@pytest.mark.asyncio
async def test_settings_defaults_and_replace(test_client):
    defaults = (await test_client.get("/api/settings")).json()
    assert defaults == {
        "language": "en",
        "darkMode": True,
        "animations": True,
        "highlightMissing": True,
        "blinkAlerts": True,
    }

    response = await test_client.put("/api/settings", json={"language": "pl", "darkMode": False})
    assert response.json() == {"success": True}
    assert (await test_client.get("/api/settings")).json() == {"language": "pl", "darkMode": False}
