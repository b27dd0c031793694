"""
Rarity table.

Static lookup from rarity tier to maximum level and duplicate-card upgrade
schedule. The schedule is shared by every rarity; higher rarities simply stop
earlier.

A missing tier is a configuration error, not a runtime condition.
"""

from dataclasses import dataclass
from enum import IntEnum

from gridledger.models.failure import InvalidRarityError


class Rarity(IntEnum):
    """Card rarity tiers, as stored by the game."""

    BASIC = 0
    COMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4
    SPECIAL_EDITION = 5

    @property
    def label(self) -> str:
        """Human-readable tier name."""
        return self.name.replace("_", " ").title()


# Cards needed to go from locked (level 0) to level 1
UNLOCK_COST = 1

# Cards needed to go from level n to n+1, for n = 1, 2, ...
# Cumulative: 4, 14, 34, 84, 184, 384, 784, 1784, 3784, 7784
UPGRADE_SCHEDULE: tuple[int, ...] = (4, 10, 20, 50, 100, 200, 400, 1000, 2000, 4000)


@dataclass(frozen=True, slots=True)
class RarityTier:
    """
    Progression limits of one rarity.

    Attributes:
        max_level: Highest level a card of this rarity can reach
        upgrade_cost: upgrade_cost[n - 1] is the duplicate cost from level n to n + 1
        unlock_cost: Duplicate cost from level 0 (locked) to level 1
    """

    max_level: int
    upgrade_cost: tuple[int, ...]
    unlock_cost: int = UNLOCK_COST

    def __post_init__(self) -> None:
        if len(self.upgrade_cost) != self.max_level - 1:
            raise ValueError(
                f"upgrade_cost must have {self.max_level - 1} steps, "
                f"got {len(self.upgrade_cost)}"
            )
        if any(a > b for a, b in zip(self.upgrade_cost, self.upgrade_cost[1:], strict=False)):
            raise ValueError("upgrade_cost must be non-decreasing")

    def step_cost(self, level: int) -> int | None:
        """Cost to advance from `level` to `level + 1`, or None at max level."""
        if level >= self.max_level:
            return None
        if level == 0:
            return self.unlock_cost
        return self.upgrade_cost[level - 1]


def _tier(max_level: int) -> RarityTier:
    return RarityTier(max_level=max_level, upgrade_cost=UPGRADE_SCHEDULE[: max_level - 1])


RARITY_TABLE: dict[Rarity, RarityTier] = {
    Rarity.BASIC: _tier(11),
    Rarity.COMMON: _tier(11),
    Rarity.RARE: _tier(9),
    Rarity.EPIC: _tier(8),
    Rarity.LEGENDARY: _tier(7),
    Rarity.SPECIAL_EDITION: _tier(7),
}


def get_rarity(value: object) -> Rarity:
    """
    Coerce a raw rarity value to a Rarity.

    Raises:
        InvalidRarityError: If the value is not a known tier
    """
    if isinstance(value, Rarity):
        return value
    # bool is an int subclass; True is not a rarity
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRarityError(value)
    try:
        return Rarity(value)
    except ValueError as e:
        raise InvalidRarityError(value) from e


def get_tier(rarity: object) -> RarityTier:
    """
    Look up the progression tier of a rarity.

    Raises:
        InvalidRarityError: If the rarity is not in the table
    """
    key = get_rarity(rarity)
    tier = RARITY_TABLE.get(key)
    if tier is None:
        raise InvalidRarityError(rarity)
    return tier


def max_level_for(rarity: object) -> int:
    """Maximum level for a rarity."""
    return get_tier(rarity).max_level
