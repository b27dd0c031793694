"""
Card progression.

Calculates how far a player's banked duplicates can carry a card, and what
the next upgrades cost.

Levels are spent greedily in order. There are no partial levels: duplicates
left over below the next threshold do not advance the card.
"""

from gridledger.models.catalog import UNOWNED, CatalogEntry, OwnershipRecord
from gridledger.models.failure import InvalidInputError
from gridledger.models.rarity import RarityTier, get_tier


def _validate(tier: RarityTier, level: int, card_count: int = 0) -> None:
    if level < 0:
        raise InvalidInputError(f"Level must not be negative, got {level}")
    if card_count < 0:
        raise InvalidInputError(f"Card count must not be negative, got {card_count}")
    if level > tier.max_level:
        raise InvalidInputError(
            f"Level {level} exceeds the maximum level {tier.max_level} for this rarity"
        )


def highest_fundable_level(rarity: object, current_level: int, card_count: int) -> int:
    """
    Highest level reachable by spending banked duplicates.

    Args:
        rarity: Rarity tier of the card
        current_level: Current level (0 = locked)
        card_count: Duplicates available to spend

    Returns:
        A level in [current_level, max_level]. Surplus duplicates beyond
        max level are ignored.

    Raises:
        InvalidRarityError: If rarity is not in the rarity table
        InvalidInputError: If level or count is negative, or level > max level
    """
    tier = get_tier(rarity)
    _validate(tier, current_level, card_count)

    level = current_level
    remaining = card_count
    while True:
        cost = tier.step_cost(level)
        if cost is None or cost > remaining:
            return level
        remaining -= cost
        level += 1


def cards_to_next_level(rarity: object, level: int) -> int | None:
    """
    Duplicates needed for the next level.

    Returns:
        The cost of the next step, or None if the card is at max level
    """
    tier = get_tier(rarity)
    _validate(tier, level)
    return tier.step_cost(level)


def cards_to_reach(rarity: object, current_level: int, target_level: int) -> int:
    """
    Total duplicates needed to go from one level to another.

    Returns 0 when the target is at or below the current level.
    """
    tier = get_tier(rarity)
    _validate(tier, current_level)
    _validate(tier, target_level)

    total = 0
    for level in range(current_level, target_level):
        # step_cost is never None below max level
        total += tier.step_cost(level) or 0
    return total


def clamp_level(rarity: object, level: int) -> int:
    """Cap a level to the rarity's max level (used when a rarity is switched)."""
    if level < 0:
        raise InvalidInputError(f"Level must not be negative, got {level}")
    return min(level, get_tier(rarity).max_level)


def display_level(
    entry: CatalogEntry,
    record: OwnershipRecord | None = None,
    show_highest: bool = False,
) -> int:
    """
    Level at which a grid shows an entry.

    Args:
        entry: The catalog entry
        record: Player's ownership record; None means never acquired
        show_highest: Use the highest fundable level instead of the current one

    Returns:
        Current level, or highest fundable level in "highest level" mode
    """
    record = record or UNOWNED
    if show_highest:
        return highest_fundable_level(entry.rarity, record.level, record.card_count)
    _validate(get_tier(entry.rarity), record.level, record.card_count)
    return record.level
