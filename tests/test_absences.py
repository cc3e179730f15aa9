"""
Absence type, limit, absence and holiday endpoint tests.
"""

import pytest


async def create_employee_with_limit(client, total_days: float = 26) -> None:
    await client.post("/api/employees", json={"id": "e1", "firstName": "Anna", "lastName": "Nowak"})
    response = await client.post(
        "/api/absence-limits",
        json={"employeeId": "e1", "absenceTypeId": "vacation", "year": 2026, "totalDays": total_days},
    )
    assert response.status_code == 201


async def used_days(client) -> float:
    limits = (await client.get("/api/absence-limits", params={"employeeId": "e1", "year": 2026})).json()
    assert len(limits) == 1
    return limits[0]["usedDays"]


def absence(absence_id: str = "a1", **overrides) -> dict:
    # 2026-01-05 is a Monday
    body = {
        "id": absence_id,
        "employeeId": "e1",
        "absenceTypeId": "vacation",
        "startDate": "2026-01-05",
        "endDate": "2026-01-09",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_default_absence_types_are_seeded(test_client):
    types = (await test_client.get("/api/absence-types")).json()

    assert [t["id"] for t in types][:2] == ["vacation", "sick"]
    assert types[0]["defaultDays"] == 26
    assert types[0]["isActive"] is True


@pytest.mark.asyncio
async def test_inactive_types_only_in_all(test_client):
    await test_client.put("/api/absence-types/training", json={"isActive": False})
    response = await test_client.post(
        "/api/absence-types",
        json={"id": "home", "name": "Home office", "sortOrder": 0},
    )
    assert response.status_code == 201

    active = [t["id"] for t in (await test_client.get("/api/absence-types")).json()]
    assert active[0] == "home"
    assert "training" not in active

    everything = [t["id"] for t in (await test_client.get("/api/absence-types/all")).json()]
    assert "training" in everything


@pytest.mark.asyncio
async def test_limit_upsert_and_bulk(test_client):
    await create_employee_with_limit(test_client)

    response = await test_client.post(
        "/api/absence-limits",
        json={"employeeId": "e1", "absenceTypeId": "vacation", "year": 2026, "totalDays": 30, "usedDays": 2},
    )
    assert response.json()["id"] == "e1-vacation-2026"
    assert response.json()["totalDays"] == 30

    response = await test_client.post(
        "/api/absence-limits/bulk",
        json={
            "employeeId": "e1",
            "year": 2026,
            "limits": [
                {"absenceTypeId": "vacation", "totalDays": 28},
                {"absenceTypeId": "special", "totalDays": 2},
            ],
        },
    )
    assert response.json() == {"success": True}

    limits = (await test_client.get("/api/absence-limits", params={"employeeId": "e1"})).json()
    by_type = {limit["absenceTypeId"]: limit for limit in limits}
    assert by_type["vacation"]["totalDays"] == 28
    assert by_type["vacation"]["usedDays"] == 2
    assert by_type["special"]["usedDays"] == 0


@pytest.mark.asyncio
async def test_absence_moves_used_days(test_client):
    await create_employee_with_limit(test_client)

    response = await test_client.post("/api/absences", json=absence(workDays=3))
    assert response.status_code == 201
    assert response.json()["status"] == "approved"
    assert await used_days(test_client) == 3

    # Editing N -> M moves the counter by M - N
    response = await test_client.put("/api/absences/a1", json=absence(workDays=5))
    assert response.json() == {"success": True}
    assert await used_days(test_client) == 5

    response = await test_client.delete("/api/absences/a1")
    assert response.json() == {"success": True}
    assert await used_days(test_client) == 0


@pytest.mark.asyncio
async def test_work_days_computed_without_holidays(test_client):
    await create_employee_with_limit(test_client)
    await test_client.post("/api/holidays", json={"date": "2026-01-06", "name": "Epiphany"})

    # Monday to the next Monday, with one holiday in between
    response = await test_client.post("/api/absences", json=absence(endDate="2026-01-12"))
    assert response.json()["workDays"] == 5
    assert await used_days(test_client) == 5


@pytest.mark.asyncio
async def test_absence_end_before_start_rejected(test_client):
    response = await test_client.post(
        "/api/absences",
        json=absence(startDate="2026-01-09", endDate="2026-01-05"),
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_absences_with_details_and_filters(test_client):
    await create_employee_with_limit(test_client)
    await test_client.post("/api/absences", json=absence("a1", workDays=5))
    await test_client.post(
        "/api/absences",
        json=absence("a2", startDate="2026-03-02", endDate="2026-03-03", status="pending"),
    )

    rows = (await test_client.get("/api/absences")).json()
    assert [row["id"] for row in rows] == ["a2", "a1"]
    assert rows[0]["typeName"] == "Vacation"
    assert rows[0]["firstName"] == "Anna"

    january = (await test_client.get("/api/absences", params={"year": 2026, "month": 1})).json()
    assert [row["id"] for row in january] == ["a1"]

    pending = (await test_client.get("/api/absences", params={"status": "pending"})).json()
    assert [row["id"] for row in pending] == ["a2"]

    other = (await test_client.get("/api/absences", params={"employeeId": "e2"})).json()
    assert other == []


@pytest.mark.asyncio
async def test_approving_sets_approved_at(test_client):
    await create_employee_with_limit(test_client)
    await test_client.post("/api/absences", json=absence(status="pending", workDays=2))

    await test_client.put("/api/absences/a1", json=absence(status="approved", workDays=2))

    row = (await test_client.get("/api/absences")).json()[0]
    assert row["status"] == "approved"
    assert row["approvedAt"] is not None


@pytest.mark.asyncio
async def test_holidays_replace_by_date(test_client):
    await test_client.post("/api/holidays", json={"date": "2026-12-25", "name": "Christmas"})
    response = await test_client.post(
        "/api/holidays",
        json={"date": "2026-12-25", "name": "Christmas Day", "isMovable": False},
    )
    assert response.status_code == 201
    assert response.json()["id"] == "2026-12-25"
    await test_client.post("/api/holidays", json={"date": "2025-12-25", "name": "Christmas"})

    holidays = (await test_client.get("/api/holidays", params={"year": 2026})).json()
    assert [(h["date"], h["name"]) for h in holidays] == [("2026-12-25", "Christmas Day")]

    await test_client.delete("/api/holidays/2026-12-25")
    assert (await test_client.get("/api/holidays", params={"year": 2026})).json() == []
    assert len((await test_client.get("/api/holidays")).json()) == 1
