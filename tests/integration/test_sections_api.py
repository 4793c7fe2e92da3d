"""
Integration tests for the accounts, goals and companies sections.
"""

import pytest
from httpx import AsyncClient

from finyx.domain.interfaces import ACCOUNTS, GOALS


class TestAccounts:
    """Tests for /v1/accounts."""

    @pytest.mark.asyncio
    async def test_create_and_list_account(self, client: AsyncClient, mock_store):
        response = await client.post("/v1/accounts", json={
            "name": "Conta corrente",
            "type": "checking",
            "balance": 2500,
        })

        assert response.status_code == 201
        created = response.json()
        assert created["id"] == "new-1"
        assert created["currency"] == "BRL"
        assert created["formatted_balance"] == "R$ 2.500,00"
        assert mock_store.tables[ACCOUNTS][0]["name"] == "Conta corrente"

        listing = await client.get("/v1/accounts")

        assert listing.status_code == 200
        assert [a["name"] for a in listing.json()] == ["Conta corrente"]

    @pytest.mark.asyncio
    async def test_negative_credit_balance(self, client: AsyncClient):
        response = await client.post("/v1/accounts", json={
            "name": "Cartão",
            "type": "credit",
            "balance": -600,
        })

        assert response.json()["formatted_balance"] == "-R$ 600,00"

    @pytest.mark.asyncio
    async def test_unknown_account_type(self, client: AsyncClient, mock_store):
        response = await client.post("/v1/accounts", json={
            "name": "Cofre",
            "type": "safe",
        })

        assert response.status_code == 422
        assert mock_store.insert_calls == 0


class TestGoals:
    """Tests for /v1/goals."""

    @pytest.mark.asyncio
    async def test_create_goal_with_progress(self, client: AsyncClient, mock_store):
        response = await client.post("/v1/goals", json={
            "name": "Reserva de emergência",
            "target_amount": 1000,
            "current_amount": 250,
            "deadline": "2027-06-30",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["progress"] == 0.25
        assert data["status"] == "active"
        assert mock_store.tables[GOALS][0]["deadline"] == "2027-06-30"

    @pytest.mark.asyncio
    async def test_goal_invalid_deadline(self, client: AsyncClient):
        response = await client.post("/v1/goals", json={
            "name": "Viagem",
            "target_amount": 1000,
            "deadline": "2027-02-30",
        })

        assert response.status_code == 422


class TestCompanies:
    """Tests for /v1/companies."""

    @pytest.mark.asyncio
    async def test_create_and_list_company(self, client: AsyncClient):
        response = await client.post("/v1/companies", json={
            "name": "Padaria Central",
            "category": "alimentacao",
        })

        assert response.status_code == 201
        assert response.json()["contact"] == ""

        listing = await client.get("/v1/companies")

        assert [c["name"] for c in listing.json()] == ["Padaria Central"]

    @pytest.mark.asyncio
    async def test_blank_company_name_rejected(self, client: AsyncClient):
        response = await client.post("/v1/companies", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_RECORD"
        assert response.json()["errors"] == ["name is required"]
