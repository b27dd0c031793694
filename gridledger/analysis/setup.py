"""
Car setup totals.

A setup fills each car part slot with at most one part. The setup's stats
are the per-slot sums of each part's projected stats at the player's current
level, with the bonus applied to flagged parts.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from gridledger.analysis.projection import project_entry
from gridledger.models.catalog import (
    UNOWNED,
    BonusModifier,
    CarPartType,
    CatalogEntry,
    OwnershipRecord,
)
from gridledger.models.failure import InvalidInputError
from gridledger.models.stats import CAR_PART_STATS, PIT_STOP_TIME, EntryKind


@dataclass
class SetupSummary:
    """Totals of a car setup."""

    totals: dict[str, float] = field(default_factory=dict)
    levels: dict[CarPartType, int] = field(default_factory=dict)

    @property
    def empty_slots(self) -> list[CarPartType]:
        """Slots with no part selected."""
        return [slot for slot in CarPartType if slot not in self.levels]


def summarize_setup(
    parts: Mapping[CarPartType, CatalogEntry | None],
    ownership: Mapping[str, OwnershipRecord],
    bonus: BonusModifier | None = None,
) -> SetupSummary:
    """
    Sum the stats of a car setup.

    Args:
        parts: Part selected for each slot; missing or None slots are empty
        ownership: Ownership records by entry id
        bonus: Optional bonus selection

    Returns:
        SetupSummary with one total per car part stat. Pit stop time is
        rounded to 2 decimal places.

    Raises:
        InvalidInputError: If an entry is not a car part or sits in the wrong slot
    """
    totals: dict[str, float] = dict.fromkeys(CAR_PART_STATS, 0)
    levels: dict[CarPartType, int] = {}

    for slot, part in parts.items():
        if part is None:
            continue
        if part.kind != EntryKind.CAR_PART:
            raise InvalidInputError(f"'{part.name}' is a {part.kind.value}, not a car part")
        if part.part_type != slot:
            raise InvalidInputError(
                f"'{part.name}' is a {part.part_type.key} part, not a {slot.key} part"
            )

        level = (ownership.get(part.id) or UNOWNED).level
        if not 0 <= level <= part.max_level:
            raise InvalidInputError(f"Level {level} is out of range for '{part.name}'")
        levels[slot] = level

        for stat_name, value in project_entry(part, level, bonus).items():
            totals[stat_name] += value

    totals[PIT_STOP_TIME] = round(totals[PIT_STOP_TIME], 2)
    return SetupSummary(totals=totals, levels=levels)
