"""
Stat projection.

Turns a catalog entry's per-level stat table into the value a grid cell
shows at a chosen level, optionally adjusted by the player's bonus.

Rules:
- Level 0 is the locked sentinel and always projects to 0
- A stat missing from one level's map projects to 0
- A stat outside the entry kind's vocabulary is a caller error
- Bonus raises higher-is-better stats (rounded up to an integer) and lowers
  car part pit stop time (rounded to 2 decimal places)
"""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

from gridledger.models.catalog import BonusModifier, CatalogEntry
from gridledger.models.failure import InvalidInputError, UnknownStatError
from gridledger.models.stats import (
    STAT_VOCABULARY,
    TOTAL_VALUE,
    is_lower_better,
    total_stats_for,
)

# Boost tables store tiers (1-5); the game shows tier * 5
BOOST_TIER_MULTIPLIER = 5

_HUNDREDTHS = Decimal("0.01")


def _decimal(value: float) -> Decimal:
    # str() keeps 8.4 as 8.4 instead of its binary expansion
    return Decimal(str(value))


def apply_bonus(value: float, percentage: float, lower_is_better: bool = False) -> float:
    """
    Apply a percentage bonus to a raw stat value.

    Non-positive percentages leave the value unchanged.

    Examples:
        apply_bonus(7, 20) -> 9                          (ceil(8.4))
        apply_bonus(5.0, 20, lower_is_better=True) -> 4.0
    """
    if percentage <= 0:
        return value

    factor = _decimal(percentage) / 100
    if lower_is_better:
        reduced = _decimal(value) * (1 - factor)
        return float(reduced.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))

    raised = _decimal(value) * (1 + factor)
    return int(raised.to_integral_value(rounding=ROUND_CEILING))


def _check_level(entry: CatalogEntry, level: int) -> None:
    if level < 0:
        raise InvalidInputError(f"Level must not be negative, got {level}")
    if level > entry.max_level:
        raise InvalidInputError(
            f"Level {level} exceeds the maximum level {entry.max_level} of '{entry.name}'"
        )


def project_stat(
    entry: CatalogEntry,
    level: int,
    stat_name: str,
    bonus: BonusModifier | None = None,
) -> float:
    """
    Effective value of one stat at a level.

    Args:
        entry: Catalog entry supplying the per-level stat table
        level: Level to project at (0 = locked)
        stat_name: Canonical stat key, or "total_value"
        bonus: Optional bonus; applied only if it covers this entry

    Returns:
        The projected value; 0 for a locked level

    Raises:
        UnknownStatError: If stat_name is outside the entry kind's vocabulary
        InvalidInputError: If level is negative or above the entry's max level
    """
    _check_level(entry, level)
    if stat_name == TOTAL_VALUE:
        return project_total(entry, level, bonus)

    # Unknown names fail at every level, locked included
    vocabulary = STAT_VOCABULARY[entry.kind]
    if stat_name not in vocabulary:
        raise UnknownStatError(stat_name, entry.kind.value, vocabulary)
    if level == 0:
        return 0

    value = entry.stats_per_level[level - 1].get(stat_name, 0)
    if bonus is not None and bonus.applies(entry.id):
        value = apply_bonus(
            value,
            bonus.percentage,
            lower_is_better=is_lower_better(stat_name, entry.kind),
        )
    return value


def project_entry(
    entry: CatalogEntry,
    level: int,
    bonus: BonusModifier | None = None,
) -> dict[str, float]:
    """Project every stat of the entry's kind at a level."""
    return {
        stat_name: project_stat(entry, level, stat_name, bonus)
        for stat_name in STAT_VOCABULARY[entry.kind]
    }


def project_total(
    entry: CatalogEntry,
    level: int,
    bonus: BonusModifier | None = None,
) -> float:
    """
    Sum of the entry's higher-is-better stats at a level.

    Each stat is bonus-adjusted before summing, as the compare grid shows it.
    """
    _check_level(entry, level)
    if level == 0:
        return 0
    return sum(project_stat(entry, level, s, bonus) for s in total_stats_for(entry.kind))


def boost_display_value(tier: float) -> float:
    """Value the game shows for a boost tier."""
    return tier * BOOST_TIER_MULTIPLIER
