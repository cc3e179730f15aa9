"""
Export/import, clearing, backup and database transfer endpoint tests.
"""

import io

import pytest
from openpyxl import load_workbook

from kappaplan.core.config import settings
from kappaplan.db.session import init_db, close_db


async def seed_everything(client) -> None:
    for resource, item_id, name in (
        ("customers", "c1", "Acme"),
        ("types", "t1", "Housing"),
        ("parts", "p1", "Bracket"),
        ("tests", "x1", "Leak test"),
    ):
        await client.post(f"/api/{resource}", json={"id": item_id, "name": name})
    await client.post("/api/projects", json={
        "id": "pr1",
        "customer_id": "c1",
        "type_id": "t1",
        "part_id": "p1",
        "test_id": "x1",
        "timePerUnit": 4,
        "weeks": {
            "2026-KW01": {"ist": 10, "soll": 20},
            "2026-KW02": {"ist": 5, "soll": 5, "stoppage": True, "productionLack": True, "comment": "press broken"},
        },
    })
    await client.post("/api/comments", json={"id": "k1", "projectId": "pr1", "week": "2026-KW01", "text": "late"})
    await client.post("/api/employees", json={"id": "e1", "firstName": "Anna", "lastName": "Nowak"})
    await client.put("/api/employee-details/e1", json={"position": "Operator"})
    await client.post("/api/qualifications", json={"employeeId": "e1", "testId": "x1", "level": 3})
    await client.post(
        "/api/schedule-assignments",
        json={"id": "a1", "employeeId": "e1", "projectId": "pr1", "week": "2026-KW01", "shift": 2},
    )
    await client.post("/api/templates", json={"id": "tp1", "name": "Default", "data": {"e1": 1}})
    await client.post("/api/extra-tasks", json={"id": "xt1", "name": "Cleaning", "week": "2026-KW01"})
    await client.post("/api/holidays", json={"date": "2026-01-06", "name": "Epiphany"})
    await client.post(
        "/api/absence-limits",
        json={"employeeId": "e1", "absenceTypeId": "vacation", "year": 2026, "totalDays": 26},
    )
    await client.post("/api/absences", json={
        "id": "ab1",
        "employeeId": "e1",
        "absenceTypeId": "vacation",
        "startDate": "2026-01-05",
        "endDate": "2026-01-09",
    })
    await client.post("/api/logs", json={"id": "l1", "action": "create", "entityType": "project"})
    await client.put("/api/preferences/theme", json={"value": "dark"})
    await client.put("/api/settings", json={"language": "de", "darkMode": False})


def without_export_date(data: dict) -> dict:
    return {key: value for key, value in data.items() if key != "exportDate"}


@pytest.mark.asyncio
async def test_export_shape(test_client):
    await seed_everything(test_client)

    data = (await test_client.get("/api/data/export")).json()

    assert data["version"] == "2.0"
    assert "exportDate" in data
    assert data["settings"] == {"language": "de", "darkMode": False}
    project = data["projects"][0]
    assert project["weeks"]["2026-KW02"]["productionLack"] is True
    assert project["weeks"]["2026-KW02"]["stoppage"] is True
    assert data["scheduleAssignments"][0]["shift"] == 2
    assert data["employeeDetails"][0]["employeeId"] == "e1"
    # Five weekdays minus the holiday
    assert data["absences"][0]["workDays"] == 4
    assert data["absenceLimits"][0]["usedDays"] == 4


@pytest.mark.asyncio
async def test_export_import_round_trip_into_fresh_database(test_client, test_db, monkeypatch):
    await seed_everything(test_client)
    exported = (await test_client.get("/api/data/export")).json()

    await close_db()
    monkeypatch.setattr(settings, "DATABASE_PATH", str(test_db / "fresh.db"))
    await init_db()
    assert (await test_client.get("/api/projects")).json() == []

    response = await test_client.post("/api/data/import", json=exported)
    assert response.status_code == 200
    result = response.json()
    assert result["success"] is True
    assert result["imported"]["projects"] == 1
    assert result["imported"]["settings"] == 1

    reimported = (await test_client.get("/api/data/export")).json()
    assert without_export_date(reimported) == without_export_date(exported)


@pytest.mark.asyncio
async def test_import_leaves_absent_sections_untouched(test_client):
    await seed_everything(test_client)

    response = await test_client.post("/api/data/import", json={"customers": [{"id": "c9", "name": "Beta"}]})
    assert response.json()["imported"] == {"customers": 1}

    customers = (await test_client.get("/api/customers")).json()
    assert [c["id"] for c in customers] == ["c9"]
    assert len((await test_client.get("/api/employees")).json()) == 1
    assert len((await test_client.get("/api/projects")).json()) == 1


@pytest.mark.asyncio
async def test_failed_import_rolls_back(test_client):
    await seed_everything(test_client)

    # Duplicate primary keys make the insert fail after the table was cleared
    response = await test_client.post(
        "/api/data/import",
        json={"customers": [{"id": "dup", "name": "A"}, {"id": "dup", "name": "B"}]},
    )
    assert response.status_code == 500

    customers = (await test_client.get("/api/customers")).json()
    assert [c["id"] for c in customers] == ["c1"]


@pytest.mark.asyncio
async def test_module_export_and_import(test_client):
    await seed_everything(test_client)

    data = (await test_client.get("/api/data/export/schedule")).json()
    assert data["module"] == "schedule"
    assert set(data) == {"scheduleAssignments", "templates", "exportDate", "version", "module"}

    response = await test_client.post("/api/data/import/schedule", json={"templates": data["templates"]})
    assert response.json()["imported"] == {"scheduleAssignments": 0, "templates": 1}
    assert (await test_client.get("/api/schedule-assignments")).json() == []
    assert len((await test_client.get("/api/extra-tasks")).json()) == 1
    assert len((await test_client.get("/api/templates")).json()) == 1

    planning = (await test_client.get("/api/data/export/planning")).json()
    assert {"customers", "types", "parts", "tests", "projects", "comments"} <= set(planning)


@pytest.mark.asyncio
async def test_unknown_module_is_rejected(test_client):
    response = await test_client.get("/api/data/export/payroll")
    assert response.status_code == 400
    assert "payroll" in response.json()["error"]["message"]

    response = await test_client.post("/api/data/import/payroll", json={})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_clear_planning_keeps_workforce(test_client):
    await seed_everything(test_client)

    response = await test_client.delete("/api/data/clear")
    assert response.json()["deleted"]["projects"] == 1

    for resource in ("customers", "types", "parts", "tests", "projects"):
        assert (await test_client.get(f"/api/{resource}")).json() == []
    assert len((await test_client.get("/api/employees")).json()) == 1


@pytest.mark.asyncio
async def test_clear_single_table(test_client):
    await seed_everything(test_client)

    response = await test_client.delete("/api/data/clear/employees")
    assert response.json() == {"success": True, "table": "employees", "deleted": {"employees": 1}}
    assert (await test_client.get("/api/employees")).json() == []

    response = await test_client.delete("/api/data/clear/sqlite_master")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_backup_list_and_restore(test_client, test_db):
    await seed_everything(test_client)

    response = await test_client.post("/api/data/backup")
    assert response.status_code == 200
    backup = response.json()
    assert backup["filename"].startswith("kappa-backup-")
    assert backup["filename"].endswith(".json")
    assert backup["size"] > 0
    assert (test_db / "backups" / backup["filename"]).is_file()

    listing = (await test_client.get("/api/data/backups")).json()
    assert [item["filename"] for item in listing["backups"]] == [backup["filename"]]

    await test_client.delete("/api/data/clear")
    response = await test_client.post("/api/data/backup/restore", json={"filename": backup["filename"]})
    assert response.status_code == 200
    assert [c["name"] for c in (await test_client.get("/api/customers")).json()] == ["Acme"]


@pytest.mark.asyncio
async def test_backup_to_custom_path(test_client, test_db):
    target = test_db / "elsewhere"

    response = await test_client.post("/api/data/backup", json={"path": str(target)})
    filename = response.json()["filename"]

    listing = (await test_client.get("/api/data/backups", params={"path": str(target)})).json()
    assert [item["filename"] for item in listing["backups"]] == [filename]
    assert (await test_client.get("/api/data/backups")).json()["backups"] == []

    response = await test_client.post(
        "/api/data/backup/restore",
        json={"filename": filename, "backupPath": str(target)},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_restore_errors(test_client):
    response = await test_client.post("/api/data/backup/restore", json={"filename": "../test.db"})
    assert response.status_code == 400

    response = await test_client.post(
        "/api/data/backup/restore",
        json={"filename": "kappa-backup-2020-01-01T00-00-00.json"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_download_database(test_client):
    response = await test_client.get("/api/data/download-db")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/x-sqlite3"
    assert "kappa-database-" in response.headers["content-disposition"]
    assert response.content.startswith(b"SQLite format 3\x00")


@pytest.mark.asyncio
async def test_upload_rejects_non_sqlite_file(test_client):
    await seed_everything(test_client)

    response = await test_client.post(
        "/api/data/upload-db",
        files={"file": ("kappa.db", b"definitely not a database file", "application/octet-stream")},
    )
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["message"] == "Invalid SQLite database file"
    assert error["details"] == {"size": 30}

    customers = (await test_client.get("/api/customers")).json()
    assert [c["id"] for c in customers] == ["c1"]


@pytest.mark.asyncio
async def test_upload_replaces_database(test_client):
    await seed_everything(test_client)
    snapshot = (await test_client.get("/api/data/download-db")).content

    await test_client.delete("/api/data/clear")
    assert (await test_client.get("/api/customers")).json() == []

    response = await test_client.post(
        "/api/data/upload-db",
        files={"file": ("kappa.db", snapshot, "application/x-sqlite3")},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "size": len(snapshot)}

    customers = (await test_client.get("/api/customers")).json()
    assert [c["id"] for c in customers] == ["c1"]


@pytest.mark.asyncio
async def test_planning_excel_export(test_client):
    await seed_everything(test_client)
    await test_client.post("/api/projects", json={
        "id": "hidden",
        "customer_id": "c1",
        "type_id": "t1",
        "part_id": "p1",
        "test_id": "x1",
        "hidden": True,
    })

    response = await test_client.get("/api/data/export-excel", params={"year": 2026})
    assert response.status_code == 200
    assert 'filename="kappa-planning-2026.xlsx"' in response.headers["content-disposition"]

    workbook = load_workbook(io.BytesIO(response.content))
    assert workbook.sheetnames == ["Kappa Planning", "Comments"]

    sheet = workbook["Kappa Planning"]
    headers = [cell.value for cell in sheet[4]]
    assert headers[:7] == ["Customer", "Type", "Part", "Test", "Status", "KW01 IST", "KW01 SOLL"]
    assert len(headers) == 5 + 2 * 52

    rows = list(sheet.iter_rows(min_row=5, values_only=True))
    assert len(rows) == 1
    assert rows[0][:9] == ("Acme", "Housing", "Bracket", "Leak test", "60%", 10, 20, 5, 5)

    comments = workbook["Comments"]
    assert comments.cell(row=4, column=3).value == "2026-KW01"
    assert comments.cell(row=4, column=4).value == "late"


@pytest.mark.asyncio
async def test_schedule_import_keeps_extra_tasks(test_client):
    await test_client.post("/api/extra-tasks", json={"id": "xt1", "name": "Cleaning", "week": "2026-KW01"})

    response = await test_client.post(
        "/api/data/import/schedule",
        json={"scheduleAssignments": [], "templates": []},
    )
    assert response.status_code == 200

    tasks = (await test_client.get("/api/extra-tasks")).json()
    assert [task["id"] for task in tasks] == ["xt1"]
