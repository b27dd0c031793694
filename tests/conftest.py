from collections.abc import Callable

import pytest
from httpx import ASGITransport, AsyncClient

from gridledger.main import app
from gridledger.models.catalog import CarPartType, CatalogEntry
from gridledger.models.rarity import Rarity, max_level_for
from gridledger.models.stats import EntryKind

EntryFactory = Callable[..., CatalogEntry]


def _table(rarity: Rarity, base: dict[str, float], step: float) -> tuple[dict[str, float], ...]:
    """One stat map per level; every stat grows by `step` per level."""
    return tuple(
        {stat: value + step * index for stat, value in base.items()}
        for index in range(max_level_for(rarity))
    )


@pytest.fixture
def make_driver() -> EntryFactory:
    """Factory for driver entries with linearly growing stats."""

    def factory(
        entry_id: str,
        name: str | None = None,
        rarity: Rarity = Rarity.EPIC,
        series: int = 1,
        step: float = 1,
        **base: float,
    ) -> CatalogEntry:
        return CatalogEntry(
            id=entry_id,
            name=name or entry_id,
            rarity=rarity,
            series=series,
            kind=EntryKind.DRIVER,
            stats_per_level=_table(rarity, base, step),
        )

    return factory


@pytest.fixture
def make_part() -> EntryFactory:
    """Factory for car part entries with linearly growing stats."""

    def factory(
        entry_id: str,
        part_type: CarPartType = CarPartType.ENGINE,
        rarity: Rarity = Rarity.RARE,
        series: int = 1,
        step: float = 1,
        **base: float,
    ) -> CatalogEntry:
        return CatalogEntry(
            id=entry_id,
            name=entry_id,
            rarity=rarity,
            series=series,
            kind=EntryKind.CAR_PART,
            part_type=part_type,
            stats_per_level=_table(rarity, base, step),
        )

    return factory


@pytest.fixture
def make_boost() -> EntryFactory:
    """Factory for boost entries whose tiers are the same at every level."""

    def factory(
        entry_id: str,
        name: str | None = None,
        custom_name: str | None = None,
        icon: str | None = None,
        **tiers: float,
    ) -> CatalogEntry:
        return CatalogEntry(
            id=entry_id,
            name=name or entry_id,
            rarity=Rarity.LEGENDARY,
            series=1,
            kind=EntryKind.BOOST,
            stats_per_level=_table(Rarity.LEGENDARY, tiers, 0),
            custom_name=custom_name,
            icon=icon,
        )

    return factory


@pytest.fixture
async def client():
    """Provide an async test client for the API."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
