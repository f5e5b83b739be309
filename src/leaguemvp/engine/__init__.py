"""Aggregation and position-weighted MVP ranking."""

from .aggregate import (
    DEFAULT_MIN_MATCHES,
    AggregatedPlayerStats,
    PositionSpan,
    aggregate_contributions,
    aggregate_player_records,
    is_eligible,
)
from .attendance import max_matches, normalize_attendance
from .contribution import SeasonContribution, compute_contribution
from .positions import resolve_position_weight, split_position_label
from .ranking import DEFAULT_TOP_N, RankedEntry, RankingResult, RankingSummary, ScoredPlayer, produce_ranking
from .scoring import MVPScoreBreakdown, compute_mvp_score, score_player
from .service import LeagueRanker, build_ranking, is_trackable_player, rank_players

__all__ = [
    "DEFAULT_MIN_MATCHES",
    "DEFAULT_TOP_N",
    "AggregatedPlayerStats",
    "LeagueRanker",
    "MVPScoreBreakdown",
    "PositionSpan",
    "RankedEntry",
    "RankingResult",
    "RankingSummary",
    "ScoredPlayer",
    "SeasonContribution",
    "aggregate_contributions",
    "aggregate_player_records",
    "build_ranking",
    "compute_contribution",
    "compute_mvp_score",
    "is_eligible",
    "is_trackable_player",
    "max_matches",
    "normalize_attendance",
    "produce_ranking",
    "rank_players",
    "resolve_position_weight",
    "score_player",
    "split_position_label",
]
