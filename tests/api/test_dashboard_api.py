"""Tests for the dashboard API."""

import pytest
from httpx import AsyncClient


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestDashboardApi:
    """Tests for GET /dashboard."""

    @pytest.mark.asyncio
    async def test_greeting(self, client: AsyncClient, staff_token: str) -> None:
        """The greeting uses the profile name and the request language."""
        response = await client.get("/dashboard", headers=_auth(staff_token))
        assert response.status_code == 200
        assert response.json()["greeting"] == "Selamat Datang, Siti Aminah"

        response = await client.get(
            "/dashboard",
            params={"lang": "en"},
            headers=_auth(staff_token),
        )
        assert response.json()["greeting"] == "Welcome, Siti Aminah"

    @pytest.mark.asyncio
    async def test_cards_and_recent(
        self,
        client: AsyncClient,
        staff_token: str,
        admin_token: str,
    ) -> None:
        """Cards count everything; recent complaints follow visibility."""
        await client.post(
            "/meetings",
            json={
                "title": "Mesyuarat Jawatankuasa",
                "meeting_date": "2099-05-01T10:00:00Z",
            },
            headers=_auth(admin_token),
        )
        await client.post(
            "/decisions",
            json={
                "decision_number": "MBJ/01",
                "title": "Sumbangan kebajikan",
                "description": "Sumbangan kepada ahli yang ditimpa musibah.",
            },
            headers=_auth(admin_token),
        )
        complaint = {
            "category": "welfare",
            "subject": "Bantuan banjir",
            "description": "Mohon bantuan untuk ahli yang terjejas banjir.",
        }
        await client.post("/complaints", json=complaint, headers=_auth(staff_token))
        await client.post("/complaints", json=complaint, headers=_auth(admin_token))

        response = await client.get("/dashboard", headers=_auth(staff_token))
        data = response.json()
        cards = {card["key"]: card["value"] for card in data["cards"]}
        assert cards == {
            "totalStaff": 2,
            "pendingComplaints": 2,
            "upcomingMeetings": 1,
            "totalDecisions": 1,
        }
        assert data["recent_complaints"]["total"] == 1
        assert data["recent_announcements"]["empty_message"] == "Tiada data"

        response = await client.get("/dashboard", headers=_auth(admin_token))
        assert response.json()["recent_complaints"]["total"] == 2
