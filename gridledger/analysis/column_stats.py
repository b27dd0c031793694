"""
Column statistics for heatmap colouring.

For one stat within one partition (a car part type, or all drivers), the
visible values are reduced to {min, max, median}. Grids band every cell
against that triple:

    exact max     -> strongest positive band
    exact median  -> neutral
    exact min     -> strongest negative band
    in between    -> quartile bands scaled by (value - lower) / (upper - lower)

Locked entries (level 0) are left out entirely so an unacquired card never
drags the gradient toward the low end. Zero values are left out as well.
"""

import statistics
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True, slots=True)
class ColumnStatistic:
    """Spread of the visible, unlocked values of one column."""

    min: float
    max: float
    median: float


class HeatBand(IntEnum):
    """
    Relative standing of a cell within its column.

    Negative bands sit below the median, positive bands above it.
    """

    STRONG_NEGATIVE = -4
    NEGATIVE = -3
    MILD_NEGATIVE = -2
    SLIGHT_NEGATIVE = -1
    NEUTRAL = 0
    SLIGHT_POSITIVE = 1
    MILD_POSITIVE = 2
    POSITIVE = 3
    STRONG_POSITIVE = 4


def compute_column_statistic(cells: Iterable[tuple[float, int]]) -> ColumnStatistic | None:
    """
    Reduce one column to {min, max, median}.

    Args:
        cells: (projected value, level) pairs. The level is the current level,
            or the highest fundable level in "highest level" mode.

    Returns:
        The column statistic, or None if no unlocked, non-zero value remains
    """
    values = sorted(value for value, level in cells if level != 0 and value != 0)
    if not values:
        return None

    return ColumnStatistic(
        min=values[0],
        max=values[-1],
        # Even-sized: mean of the two middle values
        median=statistics.median(values),
    )


def _quartile(value: float, lower: float, upper: float) -> int:
    """Quartile (1-4) of value strictly inside (lower, upper)."""
    ratio = (value - lower) / (upper - lower)
    if ratio < 0.25:
        return 1
    if ratio < 0.5:
        return 2
    if ratio < 0.75:
        return 3
    return 4


def heat_band(
    value: float,
    statistic: ColumnStatistic,
    lower_is_better: bool = False,
) -> HeatBand:
    """
    Band a cell against its column statistic.

    Args:
        value: The cell's projected value
        statistic: The column's {min, max, median}
        lower_is_better: Mirror the bands for stats like pit stop time

    Returns:
        HeatBand from STRONG_NEGATIVE (-4) to STRONG_POSITIVE (+4)
    """
    if value >= statistic.max:
        band = 4
    elif value == statistic.median:
        band = 0
    elif value <= statistic.min:
        # Includes values below min, e.g. a locked cell
        band = -4
    elif value < statistic.median:
        # Closest to min is most negative
        band = _quartile(value, statistic.min, statistic.median) - 5
    else:
        band = _quartile(value, statistic.median, statistic.max)

    if lower_is_better:
        band = -band
    return HeatBand(band)
