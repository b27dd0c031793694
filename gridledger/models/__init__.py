from gridledger.models.catalog import (
    ALL_PARTITION,
    UNOWNED,
    BonusModifier,
    CarPartType,
    CatalogEntry,
    OwnershipRecord,
    Track,
)
from gridledger.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    InvalidInputError,
    InvalidRarityError,
    KnownError,
    OutcomeType,
    UnknownStatError,
)
from gridledger.models.rarity import (
    RARITY_TABLE,
    Rarity,
    RarityTier,
    get_rarity,
    get_tier,
    max_level_for,
)
from gridledger.models.stats import (
    LOWER_IS_BETTER,
    STAT_VOCABULARY,
    TOTAL_VALUE,
    EntryKind,
    is_lower_better,
)

__all__ = [
    "ALL_PARTITION",
    "ApiResponse",
    "BonusModifier",
    "CarPartType",
    "CatalogEntry",
    "EntryKind",
    "FailureDetail",
    "FailureKind",
    "InvalidInputError",
    "InvalidRarityError",
    "KnownError",
    "LOWER_IS_BETTER",
    "OutcomeType",
    "OwnershipRecord",
    "RARITY_TABLE",
    "Rarity",
    "RarityTier",
    "STAT_VOCABULARY",
    "TOTAL_VALUE",
    "Track",
    "UNOWNED",
    "UnknownStatError",
    "get_rarity",
    "get_tier",
    "is_lower_better",
    "max_level_for",
]
