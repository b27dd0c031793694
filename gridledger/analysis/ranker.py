"""
Track recommendation ranking.

Orders boosts (or drivers) for a track by the track's two governing
attributes:

1. primary stat (the driver-facing attribute), highest first
2. secondary stat (the car-facing attribute), highest first
3. display name, ascending code-point order (case-sensitive: "Z" < "a")

Missing stats count as 0; candidates are never dropped. The order is total
and deterministic, and stable for candidates with identical keys.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from gridledger.analysis.aliases import resolve_stat
from gridledger.analysis.progression import display_level
from gridledger.analysis.projection import project_entry
from gridledger.models.catalog import BonusModifier, CatalogEntry, OwnershipRecord, Track
from gridledger.models.failure import InvalidInputError
from gridledger.models.stats import EntryKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """Something to rank: a name and its stat values."""

    name: str
    stats: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class Recommendation:
    """A ranked catalog entry with the values it was ranked by."""

    entry: CatalogEntry
    name: str
    level: int
    primary_value: float
    secondary_value: float
    stats: Mapping[str, float]


def rank_candidates(
    candidates: Sequence[Candidate],
    primary_stat: str,
    secondary_stat: str,
) -> list[Candidate]:
    """
    Order candidates by primary stat, secondary stat, then name.

    Args:
        candidates: Candidates to order (not modified)
        primary_stat: Primary attribute, in any known spelling
        secondary_stat: Secondary attribute, in any known spelling

    Returns:
        New list, best candidate first
    """
    primary = resolve_stat(primary_stat)
    secondary = resolve_stat(secondary_stat)
    return sorted(candidates, key=lambda c: _rank_key(c, primary, secondary))


def _rank_key(candidate: Candidate, primary: str, secondary: str) -> tuple[float, float, str]:
    stats = candidate.stats
    return (-stats.get(primary, 0), -stats.get(secondary, 0), candidate.name)


def _rank_entries(
    projected: list[tuple[CatalogEntry, int, dict[str, float]]],
    track: Track,
    limit: int | None,
) -> list[Recommendation]:
    primary = resolve_stat(track.driver_stat)
    secondary = resolve_stat(track.car_stat)

    # Candidates travel with their own projection; ids need not be unique
    ranked = sorted(
        (
            (Candidate(name=entry.display_name, stats=stats), entry, level)
            for entry, level, stats in projected
        ),
        key=lambda item: _rank_key(item[0], primary, secondary),
    )
    if limit is not None:
        ranked = ranked[:limit]

    logger.debug(
        "Ranked %d candidates for %s by %s/%s", len(projected), track.name, primary, secondary
    )

    recommendations: list[Recommendation] = []
    for candidate, entry, level in ranked:
        stats = candidate.stats
        recommendations.append(
            Recommendation(
                entry=entry,
                name=candidate.name,
                level=level,
                primary_value=stats.get(primary, 0),
                secondary_value=stats.get(secondary, 0),
                stats=stats,
            )
        )
    return recommendations


def _require_kind(entries: Sequence[CatalogEntry], kind: EntryKind) -> None:
    for entry in entries:
        if entry.kind != kind:
            raise InvalidInputError(
                f"Expected {kind.value} entries, '{entry.name}' is a {entry.kind.value}"
            )


def recommend_boosts(
    boosts: Sequence[CatalogEntry],
    track: Track,
    ownership: Mapping[str, OwnershipRecord] | None = None,
    limit: int | None = None,
) -> list[Recommendation]:
    """
    Recommend boosts for a track.

    Boosts are ranked by their tier values at the player's level, or at
    level 1 for boosts the player has not unlocked, so the whole catalog
    stays rankable.

    Raises:
        InvalidInputError: If a non-boost entry is passed, or an ownership
            record is out of range
    """
    _require_kind(boosts, EntryKind.BOOST)
    ownership = ownership or {}

    projected = []
    for boost in boosts:
        # Locked boosts rank at level 1
        level = display_level(boost, ownership.get(boost.id)) or 1
        projected.append((boost, level, project_entry(boost, level)))

    return _rank_entries(projected, track, limit)


def recommend_drivers(
    drivers: Sequence[CatalogEntry],
    track: Track,
    ownership: Mapping[str, OwnershipRecord],
    show_highest: bool = False,
    bonus: BonusModifier | None = None,
    limit: int | None = None,
) -> list[Recommendation]:
    """
    Recommend drivers for a track.

    Drivers are projected at their display level (current or highest
    fundable), bonus-adjusted. Locked drivers rank with all-zero stats.

    Raises:
        InvalidInputError: If a non-driver entry is passed
    """
    _require_kind(drivers, EntryKind.DRIVER)

    projected = []
    for driver in drivers:
        level = display_level(driver, ownership.get(driver.id), show_highest)
        projected.append((driver, level, project_entry(driver, level, bonus)))

    return _rank_entries(projected, track, limit)
