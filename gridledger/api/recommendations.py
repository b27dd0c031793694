"""
Recommendation API endpoints.

Ranks boosts and drivers for a track's driver-facing and car-facing
attributes.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from gridledger.analysis.projection import boost_display_value
from gridledger.analysis.ranker import Recommendation, recommend_boosts, recommend_drivers
from gridledger.api.common import (
    BonusPayload,
    CatalogEntryPayload,
    OwnershipPayload,
    to_bonus,
    to_entries,
    to_ownership,
)
from gridledger.models.catalog import Track

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


class TrackPayload(BaseModel):
    """Track and its governing attributes, in any known spelling."""

    name: str
    driver_stat: str = "block"
    car_stat: str = "speed"

    def to_track(self) -> Track:
        return Track(name=self.name, driver_stat=self.driver_stat, car_stat=self.car_stat)


class BoostRecommendationRequest(BaseModel):
    """Request model for boost recommendations."""

    track: TrackPayload
    boosts: list[CatalogEntryPayload]
    ownership: dict[str, OwnershipPayload] = Field(default_factory=dict)
    limit: int | None = Field(default=None, ge=1)


class DriverRecommendationRequest(BaseModel):
    """Request model for driver recommendations."""

    track: TrackPayload
    drivers: list[CatalogEntryPayload]
    ownership: dict[str, OwnershipPayload] = Field(default_factory=dict)
    show_highest: bool = False
    bonus: BonusPayload | None = None
    limit: int | None = Field(default=None, ge=1)


class RecommendationResponse(BaseModel):
    """A ranked entry."""

    rank: int
    id: str
    name: str
    level: int
    primary_value: float
    secondary_value: float
    stats: dict[str, float]
    display_stats: dict[str, float] = Field(
        default_factory=dict,
        description="Values as the game shows them (boost tiers x5)",
    )


def _to_response(
    recommendations: list[Recommendation],
    boosts: bool,
) -> list[RecommendationResponse]:
    responses: list[RecommendationResponse] = []
    for rank, rec in enumerate(recommendations, start=1):
        stats = dict(rec.stats)
        display = {k: boost_display_value(v) for k, v in stats.items()} if boosts else stats
        responses.append(
            RecommendationResponse(
                rank=rank,
                id=rec.entry.id,
                name=rec.name,
                level=rec.level,
                primary_value=rec.primary_value,
                secondary_value=rec.secondary_value,
                stats=stats,
                display_stats=display,
            )
        )
    return responses


@router.post("/boosts", response_model=list[RecommendationResponse])
async def boosts_for_track(request: BoostRecommendationRequest) -> list[RecommendationResponse]:
    """Rank boosts for a track, best first."""
    ranked = recommend_boosts(
        to_entries(request.boosts),
        request.track.to_track(),
        ownership=to_ownership(request.ownership),
        limit=request.limit,
    )
    return _to_response(ranked, boosts=True)


@router.post("/drivers", response_model=list[RecommendationResponse])
async def drivers_for_track(request: DriverRecommendationRequest) -> list[RecommendationResponse]:
    """Rank drivers for a track at their current (or highest fundable) level."""
    ranked = recommend_drivers(
        to_entries(request.drivers),
        request.track.to_track(),
        to_ownership(request.ownership),
        show_highest=request.show_highest,
        bonus=to_bonus(request.bonus),
        limit=request.limit,
    )
    return _to_response(ranked, boosts=False)
