"""
Stat alias resolution.

Maps loosely-specified external stat vocabulary (track attributes, boost data
columns, UI column keys) onto canonical stat keys.

Resolution is total: names with no alias pass through unchanged, so keys that
are already canonical keep working and ranking proceeds best-effort.
"""

import logging
from collections.abc import Mapping

from gridledger.models.stats import (
    BLOCKING,
    CORNERING,
    DRS,
    OVERTAKING,
    PIT_STOP_TIME,
    POWER_UNIT,
    QUALIFYING,
    RACE_START,
    SPEED,
    TYRE_USE,
)

logger = logging.getLogger(__name__)

# Canonical key -> every known external spelling (lower-case)
_SYNONYMS: dict[str, tuple[str, ...]] = {
    OVERTAKING: ("overtaking", "overtake", "overtakes"),
    BLOCKING: ("blocking", "block", "defending", "defend", "defense", "defence"),
    QUALIFYING: ("qualifying", "qualify", "quali"),
    RACE_START: ("racestart", "race_start", "race start", "race-start", "start"),
    TYRE_USE: (
        "tyreuse",
        "tyre_use",
        "tyre use",
        "tyre-use",
        "tyre",
        "tyres",
        "tireuse",
        "tire_use",
        "tire use",
        "tire",
        "tires",
    ),
    SPEED: ("speed", "top speed", "top_speed"),
    CORNERING: ("cornering", "corners", "corner"),
    POWER_UNIT: ("powerunit", "power_unit", "power unit", "power-unit", "power"),
    DRS: ("drs",),
    PIT_STOP_TIME: (
        "pitstoptime",
        "pit_stop_time",
        "pit stop time",
        "pitstop",
        "pit_stop",
        "pit stop",
        "pit-stop",
    ),
}

STAT_ALIASES: dict[str, str] = {
    alias: canonical for canonical, aliases in _SYNONYMS.items() for alias in aliases
}


def resolve_stat(external_name: str) -> str:
    """
    Resolve an external stat name to its canonical key.

    Lookup is case-insensitive and ignores surrounding whitespace. Unknown
    names are returned unchanged.
    """
    canonical = STAT_ALIASES.get(external_name.strip().lower())
    if canonical is None:
        logger.debug("No alias for stat name %r, passing through", external_name)
        return external_name
    return canonical


def normalize_stats(raw_stats: Mapping[str, float]) -> dict[str, float]:
    """
    Rename every key of a raw stat map to its canonical key.

    Values are copied as-is; the input mapping is not modified.
    """
    return {resolve_stat(name): value for name, value in raw_stats.items()}
