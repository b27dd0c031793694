"""
Request models shared by the API routers.

Every request carries its own snapshot of catalog entries and ownership
records; nothing is stored between calls. Raw stat keys are normalised to
canonical keys on the way in.
"""

from pydantic import BaseModel, Field

from gridledger.analysis.aliases import normalize_stats
from gridledger.config import settings
from gridledger.models.catalog import (
    BonusModifier,
    CarPartType,
    CatalogEntry,
    OwnershipRecord,
)
from gridledger.models.failure import InvalidInputError
from gridledger.models.stats import EntryKind


class CatalogEntryPayload(BaseModel):
    """A catalog entry as sent by a client."""

    id: str
    name: str
    rarity: int = Field(..., description="Rarity tier, 0 (Basic) to 5 (Special Edition)")
    series: int = 0
    kind: EntryKind
    part_type: str | None = Field(
        default=None,
        description="Car part slot (e.g. 'engine', 'front_wing'); car parts only",
    )
    stats_per_level: list[dict[str, float]] = Field(
        ...,
        description="One stat map per level; keys may use any known spelling",
        examples=[[{"overtaking": 10, "tyre_use": 8}]],
    )
    custom_name: str | None = None
    icon: str | None = None

    def to_entry(self) -> CatalogEntry:
        """Build the validated engine model."""
        return CatalogEntry(
            id=self.id,
            name=self.name,
            rarity=self.rarity,
            series=self.series,
            kind=self.kind,
            stats_per_level=tuple(normalize_stats(stats) for stats in self.stats_per_level),
            part_type=parse_part_type(self.part_type) if self.part_type is not None else None,
            custom_name=self.custom_name,
            icon=self.icon,
        )


class OwnershipPayload(BaseModel):
    """A player's level and banked duplicates for one entry."""

    level: int = 0
    card_count: int = 0

    def to_record(self) -> OwnershipRecord:
        return OwnershipRecord(level=self.level, card_count=self.card_count)


class BonusPayload(BaseModel):
    """Bonus percentage and the entries it applies to."""

    percentage: float = Field(default=0.0, le=settings.max_bonus_percentage)
    applies_to: list[str] = Field(default_factory=list)

    def to_modifier(self) -> BonusModifier:
        return BonusModifier(percentage=self.percentage, applies_to=frozenset(self.applies_to))


def parse_part_type(key: str) -> CarPartType:
    """Parse a slot key such as 'front_wing' or 'Front Wing'."""
    normalized = key.strip().upper().replace(" ", "_")
    try:
        return CarPartType[normalized]
    except KeyError as e:
        valid = ", ".join(slot.key for slot in CarPartType)
        raise InvalidInputError(f"Unknown car part type '{key}'", detail=f"Valid: {valid}") from e


def to_entries(payloads: list[CatalogEntryPayload]) -> list[CatalogEntry]:
    return [payload.to_entry() for payload in payloads]


def to_ownership(payloads: dict[str, OwnershipPayload]) -> dict[str, OwnershipRecord]:
    return {entry_id: payload.to_record() for entry_id, payload in payloads.items()}


def to_bonus(payload: BonusPayload | None) -> BonusModifier | None:
    return payload.to_modifier() if payload is not None else None
