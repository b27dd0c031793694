"""
Setup API endpoint.

Totals the stats of a car setup (one part per slot).
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from gridledger.analysis.setup import summarize_setup
from gridledger.api.common import (
    BonusPayload,
    CatalogEntryPayload,
    OwnershipPayload,
    parse_part_type,
    to_bonus,
    to_ownership,
)

router = APIRouter(prefix="/setups", tags=["setups"])


class SetupRequest(BaseModel):
    """Request model for setup totals."""

    parts: dict[str, CatalogEntryPayload | None] = Field(
        ...,
        description="Part per slot key (e.g. 'engine', 'rear_wing'); null for an empty slot",
    )
    ownership: dict[str, OwnershipPayload] = Field(default_factory=dict)
    bonus: BonusPayload | None = None


class SetupResponse(BaseModel):
    """Response model for setup totals."""

    totals: dict[str, float]
    levels: dict[str, int] = Field(default_factory=dict)
    empty_slots: list[str] = Field(default_factory=list)


@router.post("/summary", response_model=SetupResponse)
async def setup_summary(request: SetupRequest) -> SetupResponse:
    """Sum each car part stat across the setup's slots."""
    parts = {
        parse_part_type(slot): (payload.to_entry() if payload is not None else None)
        for slot, payload in request.parts.items()
    }
    summary = summarize_setup(parts, to_ownership(request.ownership), to_bonus(request.bonus))

    return SetupResponse(
        totals=summary.totals,
        levels={slot.key: level for slot, level in summary.levels.items()},
        empty_slots=[slot.key for slot in summary.empty_slots],
    )
