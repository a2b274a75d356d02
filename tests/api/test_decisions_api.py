"""Tests for the decisions API."""

import pytest
from httpx import AsyncClient


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _decision(number: str, **overrides) -> dict:
    body = {
        "decision_number": number,
        "title": "Naik taraf surau",
        "title_en": "Upgrade the prayer room",
        "description": "Surau tingkat 3 dinaik taraf.",
        "responsible_party": "Unit Pentadbiran",
    }
    body.update(overrides)
    return body


class TestDecisionsApi:
    """Tests for /decisions."""

    @pytest.mark.asyncio
    async def test_overdue_is_displayed(
        self,
        client: AsyncClient,
        admin_token: str,
        staff_token: str,
    ) -> None:
        """Pending decisions past their due date show as overdue."""
        response = await client.post(
            "/decisions",
            json=_decision("MBJ/01", due_date="2020-01-01"),
            headers=_auth(admin_token),
        )
        assert response.status_code == 201
        created = response.json()["data"]
        assert created["status"] == "pending"
        assert created["display_status"] == "overdue"
        assert created["is_overdue"] is True
        assert created["status_label"] == "Terlewat"
        assert created["due_date_display"] == "01 Jan 2020"

        await client.post(
            "/decisions",
            json=_decision("MBJ/02", due_date="2099-01-01"),
            headers=_auth(admin_token),
        )

        response = await client.get(
            "/decisions",
            params={"status": "overdue"},
            headers=_auth(staff_token),
        )
        assert [d["decision_number"] for d in response.json()["items"]] == ["MBJ/01"]

        response = await client.get(
            "/decisions",
            params={"status": "pending"},
            headers=_auth(staff_token),
        )
        assert [d["decision_number"] for d in response.json()["items"]] == ["MBJ/02"]

    @pytest.mark.asyncio
    async def test_overdue_cannot_be_submitted(
        self,
        client: AsyncClient,
        admin_token: str,
    ) -> None:
        """Overdue is derived and never accepted as input."""
        response = await client.post(
            "/decisions",
            json=_decision("MBJ/01", status="overdue"),
            headers=_auth(admin_token),
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_search_matches_english_title(
        self,
        client: AsyncClient,
        admin_token: str,
    ) -> None:
        """Search also matches the English title."""
        await client.post(
            "/decisions", json=_decision("MBJ/01"), headers=_auth(admin_token)
        )

        response = await client.get(
            "/decisions",
            params={"search": "prayer", "lang": "en"},
            headers=_auth(admin_token),
        )
        items = response.json()["items"]
        assert [d["display_title"] for d in items] == ["Upgrade the prayer room"]

    @pytest.mark.asyncio
    async def test_complete_and_delete(
        self,
        client: AsyncClient,
        admin_token: str,
    ) -> None:
        """Completing clears overdue; deleted decisions answer 404."""
        response = await client.post(
            "/decisions",
            json=_decision("MBJ/01", due_date="2020-01-01"),
            headers=_auth(admin_token),
        )
        decision_id = response.json()["data"]["id"]

        response = await client.put(
            f"/decisions/{decision_id}",
            json=_decision("MBJ/01", due_date="2020-01-01", status="completed"),
            headers=_auth(admin_token),
        )
        assert response.status_code == 200
        assert response.json()["data"]["display_status"] == "completed"
        assert response.json()["data"]["is_overdue"] is False

        response = await client.delete(
            f"/decisions/{decision_id}", headers=_auth(admin_token)
        )
        assert response.status_code == 200
        response = await client.get(
            f"/decisions/{decision_id}", headers=_auth(admin_token)
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_staff_cannot_edit(
        self,
        client: AsyncClient,
        staff_token: str,
    ) -> None:
        """Recording decisions is for administrators."""
        response = await client.post(
            "/decisions", json=_decision("MBJ/01"), headers=_auth(staff_token)
        )
        assert response.status_code == 403
