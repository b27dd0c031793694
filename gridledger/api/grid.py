"""
Grid API endpoint.

Projects a table of catalog entries for one player: cell values, heat bands
and the column statistics behind them.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from gridledger.analysis.aliases import resolve_stat
from gridledger.analysis.grid import project_grid
from gridledger.api.common import (
    BonusPayload,
    CatalogEntryPayload,
    OwnershipPayload,
    to_bonus,
    to_entries,
    to_ownership,
)
from gridledger.config import settings
from gridledger.models.stats import TOTAL_VALUE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grid", tags=["grid"])


class GridRequest(BaseModel):
    """Request model for grid projection."""

    entries: list[CatalogEntryPayload]
    ownership: dict[str, OwnershipPayload] = Field(
        default_factory=dict,
        description="Ownership by entry id; entries without a record are locked",
    )
    columns: list[str] | None = Field(
        default=None,
        description="Stat columns in any known spelling; default is every shared stat",
    )
    show_highest: bool = False
    bonus: BonusPayload | None = None
    max_series: int | None = Field(
        default=None,
        description="Hide entries above this series (default from settings)",
    )


class GridRowResponse(BaseModel):
    """One projected row."""

    id: str
    name: str
    partition: str
    level: int
    locked: bool
    values: dict[str, float]
    bands: dict[str, int | None]


class ColumnStatisticResponse(BaseModel):
    """Statistic of one (partition, stat) column."""

    partition: str
    stat: str
    min: float
    max: float
    median: float


class GridResponse(BaseModel):
    """Response model for grid projection."""

    rows: list[GridRowResponse] = Field(default_factory=list)
    statistics: list[ColumnStatisticResponse] = Field(default_factory=list)


def _resolve_column(column: str) -> str:
    if column.strip().lower() in (TOTAL_VALUE, "total value", "total"):
        return TOTAL_VALUE
    return resolve_stat(column)


@router.post("/project", response_model=GridResponse)
async def project(request: GridRequest) -> GridResponse:
    """
    Project every visible entry and colour it against its partition.

    Locked rows (level 0) carry null bands and are left out of the
    statistics.
    """
    columns = None
    if request.columns is not None:
        columns = [_resolve_column(c) for c in request.columns]
    max_series = request.max_series
    if max_series is None:
        max_series = settings.default_max_series

    projection = project_grid(
        to_entries(request.entries),
        to_ownership(request.ownership),
        columns=columns,
        show_highest=request.show_highest,
        bonus=to_bonus(request.bonus),
        max_series=max_series,
    )
    logger.info(
        "Projected %d of %d entries (%d coloured columns)",
        len(projection.rows),
        len(request.entries),
        len(projection.statistics),
    )

    return GridResponse(
        rows=[
            GridRowResponse(
                id=row.entry.id,
                name=row.entry.display_name,
                partition=row.entry.partition_key,
                level=row.level,
                locked=row.is_locked,
                values=row.values,
                bands={
                    stat: (int(band) if band is not None else None)
                    for stat, band in row.bands.items()
                },
            )
            for row in projection.rows
        ],
        statistics=[
            ColumnStatisticResponse(
                partition=partition,
                stat=stat,
                min=statistic.min,
                max=statistic.max,
                median=statistic.median,
            )
            for (partition, stat), statistic in projection.statistics.items()
        ],
    )
