"""Tests for progression API endpoints."""

from httpx import AsyncClient


class TestHighestLevelEndpoint:
    async def test_highest_level(self, client: AsyncClient) -> None:
        """Banked duplicates are spent greedily from the current level."""
        response = await client.post(
            "/progression/highest-level",
            json={"rarity": 2, "level": 0, "card_count": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["highest_level"] == 3
        assert data["max_level"] == 9
        assert data["cards_spent"] == 15
        assert data["cards_to_next_level"] == 20

    async def test_at_max_level(self, client: AsyncClient) -> None:
        response = await client.post(
            "/progression/highest-level",
            json={"rarity": 4, "level": 0, "card_count": 100000},
        )

        data = response.json()
        assert data["highest_level"] == 7
        assert data["cards_to_next_level"] is None

    async def test_unknown_rarity(self, client: AsyncClient) -> None:
        response = await client.post(
            "/progression/highest-level",
            json={"rarity": 8, "level": 0, "card_count": 1},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_rarity"

    async def test_negative_card_count(self, client: AsyncClient) -> None:
        response = await client.post(
            "/progression/highest-level",
            json={"rarity": 2, "level": 0, "card_count": -1},
        )

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_input"

    async def test_missing_field(self, client: AsyncClient) -> None:
        response = await client.post("/progression/highest-level", json={"rarity": 2})
        assert response.status_code == 422
