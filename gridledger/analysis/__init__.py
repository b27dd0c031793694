from gridledger.analysis.aliases import STAT_ALIASES, normalize_stats, resolve_stat
from gridledger.analysis.column_stats import (
    ColumnStatistic,
    HeatBand,
    compute_column_statistic,
    heat_band,
)
from gridledger.analysis.grid import (
    GridProjection,
    GridRow,
    build_column_statistics,
    default_columns,
    project_grid,
    visible_entries,
)
from gridledger.analysis.progression import (
    cards_to_next_level,
    cards_to_reach,
    clamp_level,
    display_level,
    highest_fundable_level,
)
from gridledger.analysis.projection import (
    apply_bonus,
    boost_display_value,
    project_entry,
    project_stat,
    project_total,
)
from gridledger.analysis.ranker import (
    Candidate,
    Recommendation,
    rank_candidates,
    recommend_boosts,
    recommend_drivers,
)
from gridledger.analysis.setup import SetupSummary, summarize_setup

__all__ = [
    "Candidate",
    "ColumnStatistic",
    "GridProjection",
    "GridRow",
    "HeatBand",
    "Recommendation",
    "STAT_ALIASES",
    "SetupSummary",
    "apply_bonus",
    "boost_display_value",
    "build_column_statistics",
    "cards_to_next_level",
    "cards_to_reach",
    "clamp_level",
    "compute_column_statistic",
    "default_columns",
    "display_level",
    "heat_band",
    "highest_fundable_level",
    "normalize_stats",
    "project_entry",
    "project_grid",
    "project_stat",
    "project_total",
    "rank_candidates",
    "recommend_boosts",
    "recommend_drivers",
    "resolve_stat",
    "summarize_setup",
    "visible_entries",
]
