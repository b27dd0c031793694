"""
Catalog and ownership models.

INVARIANTS:
- CatalogEntry is immutable reference data; its stat table has exactly one
  map per unlockable level of its rarity
- Stat keys are canonical (see gridledger.models.stats)
- OwnershipRecord level is 0 (locked) up to the rarity's max level
- The engine only reads these models, it never mutates them
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType

from gridledger.models.failure import InvalidInputError, UnknownStatError
from gridledger.models.rarity import Rarity, get_rarity, max_level_for
from gridledger.models.stats import STAT_VOCABULARY, EntryKind

BOOST_ICON_PREFIX = "BoostIcon_"

# Partition used for kinds without a part type
ALL_PARTITION = "all"


class CarPartType(IntEnum):
    """Car part slots, as stored by the game."""

    GEARBOX = 0
    BRAKE = 1
    ENGINE = 2
    SUSPENSION = 3
    FRONT_WING = 4
    REAR_WING = 5

    @property
    def key(self) -> str:
        """Lower-case slot key (e.g., "front_wing")."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """
    One drivable, part or boost variant.

    Attributes:
        id: Opaque catalog identifier
        name: Catalog name
        rarity: Rarity tier
        series: Ordinal grouping used for visibility filters
        kind: Driver, car part or boost
        stats_per_level: One read-only canonical stat map per level (index 0 = level 1)
        part_type: Slot of a car part; None for drivers and boosts
        custom_name: Player-chosen boost name (boosts only)
        icon: Boost icon identifier, e.g. "BoostIcon_Slipstream"
    """

    id: str
    name: str
    rarity: Rarity
    series: int
    kind: EntryKind
    stats_per_level: tuple[Mapping[str, float], ...] = field(hash=False)
    part_type: CarPartType | None = None
    custom_name: str | None = None
    icon: str | None = None

    def __post_init__(self) -> None:
        """Validate the stat table against the rarity and kind."""
        object.__setattr__(self, "rarity", get_rarity(self.rarity))
        object.__setattr__(
            self,
            "stats_per_level",
            tuple(MappingProxyType(dict(level_stats)) for level_stats in self.stats_per_level),
        )

        if self.kind == EntryKind.CAR_PART and self.part_type is None:
            raise InvalidInputError(f"Car part '{self.name}' has no part type")
        if self.kind != EntryKind.CAR_PART and self.part_type is not None:
            raise InvalidInputError(
                f"Only car parts have a part type, '{self.name}' is a {self.kind.value}"
            )

        max_level = max_level_for(self.rarity)
        if len(self.stats_per_level) != max_level:
            raise InvalidInputError(
                f"'{self.name}' needs {max_level} stat levels for rarity {self.rarity.label}",
                detail=f"got {len(self.stats_per_level)}",
            )

        vocabulary = STAT_VOCABULARY[self.kind]
        for level_stats in self.stats_per_level:
            for stat_name in level_stats:
                if stat_name not in vocabulary:
                    raise UnknownStatError(stat_name, self.kind.value, vocabulary)

    @property
    def max_level(self) -> int:
        """Highest level of this entry's rarity."""
        return len(self.stats_per_level)

    @property
    def partition_key(self) -> str:
        """Group within which column statistics are computed."""
        if self.part_type is not None:
            return self.part_type.key
        return ALL_PARTITION

    @property
    def display_name(self) -> str:
        """
        Name shown to the player.

        Boosts prefer the player's custom name, then the icon name without
        its prefix, then the catalog name.
        """
        if self.kind == EntryKind.BOOST:
            if self.custom_name:
                return self.custom_name
            if self.icon:
                return self.icon.replace(BOOST_ICON_PREFIX, "")
        return self.name


@dataclass(frozen=True, slots=True)
class OwnershipRecord:
    """
    A player's progress on one catalog entry.

    Attributes:
        level: Current unlocked level (0 = not yet unlocked)
        card_count: Duplicate cards banked
    """

    level: int = 0
    card_count: int = 0


# Record used for entries the player has never interacted with
UNOWNED = OwnershipRecord()


@dataclass(frozen=True, slots=True)
class BonusModifier:
    """
    Temporary percentage adjustment chosen by the player.

    Attributes:
        percentage: Signed percentage; only positive values have an effect
        applies_to: Ids of entries flagged as bonus-eligible
    """

    percentage: float = 0.0
    applies_to: frozenset[str] = field(default_factory=frozenset)

    def applies(self, entry_id: str) -> bool:
        """True if this bonus changes the given entry's stats."""
        return self.percentage > 0 and entry_id in self.applies_to


@dataclass(frozen=True, slots=True)
class Track:
    """
    A circuit and the two attributes that govern it.

    Attributes:
        name: Track name
        driver_stat: Driver-facing attribute, in any known spelling
        car_stat: Car-facing attribute, in any known spelling
    """

    name: str
    driver_stat: str = "block"
    car_stat: str = "speed"
