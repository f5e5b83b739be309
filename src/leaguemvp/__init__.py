"""Season aggregation and position-weighted MVP rankings for an amateur football league."""

from leaguemvp.engine import RankedEntry, RankingResult, build_ranking, rank_players
from leaguemvp.models import ALL_SEASONS, SeasonDataStore, SeasonStatRecord

__all__ = [
    "ALL_SEASONS",
    "RankedEntry",
    "RankingResult",
    "SeasonDataStore",
    "SeasonStatRecord",
    "build_ranking",
    "rank_players",
]
