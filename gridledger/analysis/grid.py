"""
Grid projection.

The single shared path every table uses to turn catalog entries plus a
player's ownership snapshot into cell values, column statistics and heat
bands. Callers pass their view settings (highest-level mode, bonus, series
filter) explicitly on every call.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from gridledger.analysis.column_stats import (
    ColumnStatistic,
    HeatBand,
    compute_column_statistic,
    heat_band,
)
from gridledger.analysis.progression import display_level
from gridledger.analysis.projection import project_stat
from gridledger.models.catalog import BonusModifier, CatalogEntry, OwnershipRecord
from gridledger.models.stats import STAT_VOCABULARY, TOTAL_VALUE, is_lower_better

logger = logging.getLogger(__name__)

StatisticKey = tuple[str, str]  # (partition_key, stat_name)


@dataclass
class GridRow:
    """One entry as a grid shows it."""

    entry: CatalogEntry
    level: int
    values: dict[str, float] = field(default_factory=dict)
    bands: dict[str, HeatBand | None] = field(default_factory=dict)

    @property
    def is_locked(self) -> bool:
        """True if the entry is shown at level 0."""
        return self.level == 0


@dataclass
class GridProjection:
    """Projected rows plus the column statistics used to colour them."""

    rows: list[GridRow]
    statistics: dict[StatisticKey, ColumnStatistic]


def visible_entries(
    entries: Sequence[CatalogEntry],
    max_series: int | None = None,
) -> list[CatalogEntry]:
    """Entries at or below the series filter, in input order."""
    if max_series is None:
        return list(entries)
    return [entry for entry in entries if entry.series <= max_series]


def default_columns(entries: Sequence[CatalogEntry]) -> tuple[str, ...]:
    """
    Stat columns shared by every entry, plus total_value.

    Mixed kinds only share the stats common to all of them.
    """
    if not entries:
        return ()
    columns = list(STAT_VOCABULARY[entries[0].kind])
    for entry in entries[1:]:
        vocabulary = STAT_VOCABULARY[entry.kind]
        columns = [c for c in columns if c in vocabulary]
    return (*columns, TOTAL_VALUE)


def build_column_statistics(
    rows: Sequence[GridRow],
    columns: Sequence[str],
) -> dict[StatisticKey, ColumnStatistic]:
    """
    Compute {min, max, median} per (partition, stat) over projected rows.

    Partitions or columns with no unlocked, non-zero value are absent from
    the result.
    """
    partitions: dict[str, list[GridRow]] = {}
    for row in rows:
        partitions.setdefault(row.entry.partition_key, []).append(row)

    result: dict[StatisticKey, ColumnStatistic] = {}
    for partition_key, partition_rows in partitions.items():
        for column in columns:
            statistic = compute_column_statistic(
                (row.values[column], row.level) for row in partition_rows
            )
            if statistic is None:
                logger.debug("No colouring for %s/%s: no unlocked values", partition_key, column)
                continue
            result[(partition_key, column)] = statistic
    return result


def project_grid(
    entries: Sequence[CatalogEntry],
    ownership: Mapping[str, OwnershipRecord],
    columns: Sequence[str] | None = None,
    show_highest: bool = False,
    bonus: BonusModifier | None = None,
    max_series: int | None = None,
) -> GridProjection:
    """
    Project a grid of entries.

    Args:
        entries: Catalog entries to show
        ownership: Ownership records by entry id; missing ids are locked
        columns: Stat columns to project (default: shared stats + total_value)
        show_highest: Show each entry at its highest fundable level
        bonus: Optional bonus selection
        max_series: Hide entries above this series

    Returns:
        GridProjection with one row per visible entry, in input order

    Raises:
        UnknownStatError: If a column is outside an entry's vocabulary
        InvalidInputError / InvalidRarityError: For malformed ownership records
    """
    shown = visible_entries(entries, max_series)
    columns = tuple(columns) if columns is not None else default_columns(shown)

    rows: list[GridRow] = []
    for entry in shown:
        level = display_level(entry, ownership.get(entry.id), show_highest)
        values = {column: project_stat(entry, level, column, bonus) for column in columns}
        rows.append(GridRow(entry=entry, level=level, values=values))

    stats = build_column_statistics(rows, columns)

    for row in rows:
        for column in columns:
            statistic = stats.get((row.entry.partition_key, column))
            if statistic is None or row.is_locked:
                row.bands[column] = None
                continue
            row.bands[column] = heat_band(
                row.values[column],
                statistic,
                lower_is_better=is_lower_better(column, row.entry.kind),
            )

    return GridProjection(rows=rows, statistics=stats)
