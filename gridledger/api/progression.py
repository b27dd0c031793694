"""
Progression API endpoint.

Calculates the highest level a card's banked duplicates can fund.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from gridledger.analysis.progression import (
    cards_to_next_level,
    cards_to_reach,
    highest_fundable_level,
)
from gridledger.models.rarity import max_level_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progression", tags=["progression"])


class HighestLevelRequest(BaseModel):
    """Request model for the highest fundable level."""

    rarity: int
    level: int
    card_count: int


class HighestLevelResponse(BaseModel):
    """Response model for the highest fundable level."""

    rarity: int
    level: int
    card_count: int
    highest_level: int
    max_level: int
    cards_spent: int
    cards_to_next_level: int | None = None


@router.post("/highest-level", response_model=HighestLevelResponse)
async def highest_level(request: HighestLevelRequest) -> HighestLevelResponse:
    """
    Highest level reachable with the banked duplicates.

    Also reports the duplicates the upgrades consume and the cost of the
    level after that (null at max level).
    """
    highest = highest_fundable_level(request.rarity, request.level, request.card_count)
    logger.info(
        "Rarity %d level %d with %d cards can reach level %d",
        request.rarity,
        request.level,
        request.card_count,
        highest,
    )

    return HighestLevelResponse(
        rarity=request.rarity,
        level=request.level,
        card_count=request.card_count,
        highest_level=highest,
        max_level=max_level_for(request.rarity),
        cards_spent=cards_to_reach(request.rarity, request.level, highest),
        cards_to_next_level=cards_to_next_level(request.rarity, highest),
    )
