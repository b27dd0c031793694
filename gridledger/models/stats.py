"""
Canonical stat vocabulary.

Each entry kind has a closed set of canonical stat keys. External spellings
(track attributes, boost data columns, UI headers) are mapped onto these keys
by gridledger.analysis.aliases; nothing else in the engine tolerates synonyms.
"""

from enum import Enum


class EntryKind(str, Enum):
    """Kind of catalog entry."""

    DRIVER = "driver"
    CAR_PART = "car_part"
    BOOST = "boost"


# Canonical stat keys
OVERTAKING = "overtaking"
BLOCKING = "blocking"
QUALIFYING = "qualifying"
RACE_START = "raceStart"
TYRE_USE = "tyreUse"
SPEED = "speed"
CORNERING = "cornering"
POWER_UNIT = "powerUnit"
DRS = "drs"
PIT_STOP_TIME = "pitStopTime"

# Derived column: sum of a kind's higher-is-better stats
TOTAL_VALUE = "total_value"

DRIVER_STATS: tuple[str, ...] = (OVERTAKING, BLOCKING, QUALIFYING, RACE_START, TYRE_USE)
CAR_PART_STATS: tuple[str, ...] = (SPEED, CORNERING, POWER_UNIT, QUALIFYING, DRS, PIT_STOP_TIME)
BOOST_STATS: tuple[str, ...] = (
    OVERTAKING,
    BLOCKING,
    CORNERING,
    TYRE_USE,
    POWER_UNIT,
    SPEED,
    PIT_STOP_TIME,
    RACE_START,
)

STAT_VOCABULARY: dict[EntryKind, tuple[str, ...]] = {
    EntryKind.DRIVER: DRIVER_STATS,
    EntryKind.CAR_PART: CAR_PART_STATS,
    EntryKind.BOOST: BOOST_STATS,
}

# Stats where a smaller number is the better result, per kind.
# Boost pit stop values are tiers, so higher is stronger there.
LOWER_IS_BETTER: dict[EntryKind, frozenset[str]] = {
    EntryKind.DRIVER: frozenset(),
    EntryKind.CAR_PART: frozenset({PIT_STOP_TIME}),
    EntryKind.BOOST: frozenset(),
}


def is_lower_better(stat_name: str, kind: EntryKind) -> bool:
    """True for stats where a smaller value is better for this kind."""
    return stat_name in LOWER_IS_BETTER[kind]


def total_stats_for(kind: EntryKind) -> tuple[str, ...]:
    """Stats summed into the total_value column for a kind."""
    return tuple(s for s in STAT_VOCABULARY[kind] if not is_lower_better(s, kind))
