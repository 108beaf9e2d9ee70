from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from assettrack.main import app


def _client():
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_incident_lifecycle_and_analytics():
    async with _client() as ac:
        r = await ac.post("/incidents/", json={"title": "Printer jam", "description": "Floor 2 printer"})
        assert r.status_code == 201
        incident = r.json()
        assert incident["status"] == "Open"
        assert incident["date"] == date.today().isoformat()

        await ac.post("/incidents/", json={"title": "VPN down", "status": "Resolved", "date": "2024-05-01"})

        r = await ac.get("/incidents/", params={"q": "floor"})
        assert [i["title"] for i in r.json()] == ["Printer jam"]
        r = await ac.get("/incidents/", params={"date": "2024-05-01"})
        assert [i["title"] for i in r.json()] == ["VPN down"]

        r = await ac.patch(f"/incidents/{incident['id']}", json={"status": "Closed"})
        assert r.json()["status"] == "Closed"

        counts = {row["status"]: row["count"] for row in (await ac.get("/incidents/analytics")).json()}
        assert counts == {"Open": 0, "In Progress": 0, "Resolved": 1, "Closed": 1}

        r = await ac.post("/incidents/", json={"title": "Bad", "status": "Exploded"})
        assert r.status_code == 422

        xlsx = await ac.get("/incidents/export.xlsx")
        assert xlsx.status_code == 200
        assert xlsx.content[:2] == b"PK"

        assert (await ac.delete(f"/incidents/{incident['id']}")).status_code == 204
        assert (await ac.delete(f"/incidents/{incident['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_projects_and_activities():
    async with _client() as ac:
        r = await ac.post("/projects/", json={"name": "Network refresh", "startDate": "2024-06-01"})
        assert r.status_code == 201
        assert r.json()["status"] == "Planned"
        counts = {row["status"]: row["count"] for row in (await ac.get("/projects/analytics")).json()}
        assert counts["Planned"] == 1

        await ac.post("/activities/", json={"title": "Inventory audit", "priority": "High"})
        r = await ac.post("/activities/", json={"title": "Assign laptops", "status": "In Progress", "assignedTo": "Mary"})
        activity = r.json()
        assert activity["priority"] == "Medium"

        board = (await ac.get("/activities/board")).json()
        assert [col["status"] for col in board] == ["Pending", "In Progress", "Completed"]
        assert [a["title"] for a in board[1]["items"]] == ["Assign laptops"]

        r = await ac.get("/activities/", params={"priority": "High"})
        assert [a["title"] for a in r.json()] == ["Inventory audit"]

        r = await ac.patch(f"/activities/{activity['id']}", json={"status": "Completed"})
        assert r.json()["status"] == "Completed"


@pytest.mark.asyncio
async def test_null_on_required_tracker_fields_is_rejected():
    async with _client() as ac:
        incident = (await ac.post("/incidents/", json={"title": "Disk full"})).json()
        r = await ac.patch(f"/incidents/{incident['id']}", json={"status": None})
        assert r.status_code == 422
        r = await ac.patch(f"/incidents/{incident['id']}", json={"description": None})
        assert r.status_code == 422
        assert [i["status"] for i in (await ac.get("/incidents/")).json()] == ["Open"]

        project = (await ac.post("/projects/", json={"name": "Migration"})).json()
        r = await ac.patch(f"/projects/{project['id']}", json={"status": None})
        assert r.status_code == 422

        activity = (await ac.post("/activities/", json={"title": "Label cables"})).json()
        r = await ac.patch(f"/activities/{activity['id']}", json={"priority": None})
        assert r.status_code == 422

        r = await ac.patch(f"/activities/{activity['id']}", json={"assignedTo": None})
        assert r.status_code == 200
        assert r.json()["assignedTo"] is None
