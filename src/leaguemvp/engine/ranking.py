"""Sort scored players into the final ranked list."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, median, pstdev
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from .aggregate import AggregatedPlayerStats
from .attendance import max_matches
from .scoring import MVPScoreBreakdown

DEFAULT_TOP_N = 20

# Scores are compared at this precision so float noise does not split ties.
_SCORE_PRECISION = 9


@dataclass(frozen=True)
class ScoredPlayer:
    stats: AggregatedPlayerStats
    breakdown: MVPScoreBreakdown

    @property
    def mvp_score(self) -> float:
        return self.breakdown.total


@dataclass(frozen=True)
class RankedEntry:
    """Player returned from a ranking, ready for display or export."""

    stats: AggregatedPlayerStats
    breakdown: MVPScoreBreakdown
    mvp_score: float
    rank: int

    @property
    def player_name(self) -> str:
        return self.stats.player_name

    def to_row(self) -> Dict[str, Any]:
        stats = self.stats
        return {
            "rank": self.rank,
            "player_name": stats.player_name,
            "mvp_score": self.mvp_score,
            "display_position": stats.display_position,
            "is_multi_position": stats.is_multi_position,
            "position_details": stats.position_details,
            "seasons_played": stats.seasons_played,
            "matches": stats.matches,
            "wins": stats.wins,
            "draws": stats.draws,
            "losses": stats.losses,
            "goals": stats.goals,
            "weighted_goals": stats.weighted_goals,
            "effective_multiplier": stats.effective_multiplier,
            "clean_sheets": stats.clean_sheets,
            "hat_tricks": stats.hat_tricks,
            "own_goals": stats.own_goals,
            "win_pct": stats.win_pct,
            "goals_per_match": stats.goals_per_match,
            "weighted_goals_per_match": stats.weighted_goals_per_match,
            "clean_sheet_pct": stats.clean_sheet_pct,
            "attendance_pct": stats.attendance_pct,
        }


@dataclass(frozen=True)
class RankingSummary:
    """Aggregate stats for a ranking selection."""

    available_players: int
    selected_players: int
    max_matches: int
    score_mean: float | None
    score_median: float | None
    score_std: float | None


@dataclass(frozen=True)
class RankingResult:
    entries: Tuple[RankedEntry, ...]
    summary: RankingSummary
    scope_label: str = ""
    total_players: int = 0
    eligible_players: int = 0


def ranking_sort_key(candidate: ScoredPlayer) -> tuple[float, int, str, str]:
    """Score descending, then matches descending, then name."""

    name = candidate.stats.player_name
    return (
        -round(candidate.mvp_score, _SCORE_PRECISION),
        -candidate.stats.matches,
        name.casefold(),
        name,
    )


def _build_summary(
    *,
    available: Sequence[ScoredPlayer],
    selected: Sequence[ScoredPlayer],
) -> RankingSummary:
    scores = [candidate.mvp_score for candidate in selected]
    if scores:
        mean: float | None = fmean(scores)
        med: float | None = median(scores)
        std: float | None = pstdev(scores) if len(scores) > 1 else 0.0
    else:
        mean = med = std = None
    return RankingSummary(
        available_players=len(available),
        selected_players=len(selected),
        max_matches=max_matches(candidate.stats for candidate in available),
        score_mean=mean,
        score_median=med,
        score_std=std,
    )


def produce_ranking(
    scored: Iterable[ScoredPlayer],
    *,
    top_n: Optional[int] = DEFAULT_TOP_N,
) -> RankingResult:
    """Order scored players by MVP score and keep the first ``top_n``."""

    candidates = sorted(scored, key=ranking_sort_key)
    limit = top_n if top_n is not None and top_n > 0 else None
    selected = candidates[:limit] if limit is not None else candidates

    entries = tuple(
        RankedEntry(
            stats=candidate.stats,
            breakdown=candidate.breakdown,
            mvp_score=candidate.mvp_score,
            rank=index,
        )
        for index, candidate in enumerate(selected, start=1)
    )
    return RankingResult(
        entries=entries,
        summary=_build_summary(available=candidates, selected=selected),
        total_players=len(candidates),
        eligible_players=len(candidates),
    )


__all__ = [
    "DEFAULT_TOP_N",
    "RankedEntry",
    "RankingResult",
    "RankingSummary",
    "ScoredPlayer",
    "produce_ranking",
    "ranking_sort_key",
]
