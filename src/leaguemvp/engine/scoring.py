"""MVP score computation."""

from __future__ import annotations

from dataclasses import dataclass

from leaguemvp.config.formula import DEFAULT_FORMULA, MVPFormula

from .aggregate import AggregatedPlayerStats


@dataclass(frozen=True)
class MVPScoreBreakdown:
    """Each term of the MVP formula, kept for display next to the total."""

    normalized_goals: float
    win_component: float
    goals_component: float
    attendance_component: float
    clean_sheet_bonus: float
    hat_trick_bonus: float
    own_goal_penalty: float

    @property
    def total(self) -> float:
        return (
            self.win_component
            + self.goals_component
            + self.attendance_component
            + self.clean_sheet_bonus
            + self.hat_trick_bonus
            - self.own_goal_penalty
        )


def normalized_goals(stats: AggregatedPlayerStats, formula: MVPFormula = DEFAULT_FORMULA) -> float:
    """Goals per match mapped onto 0-100, capped at ``formula.goals_cap``."""

    rate = stats.weighted_goals_per_match if formula.use_position_weights else stats.goals_per_match
    return min(rate / formula.goals_cap * 100, 100.0)


def score_player(
    stats: AggregatedPlayerStats,
    formula: MVPFormula = DEFAULT_FORMULA,
) -> MVPScoreBreakdown:
    attendance_pct = stats.attendance_pct or 0.0
    goals_score = normalized_goals(stats, formula)
    return MVPScoreBreakdown(
        normalized_goals=goals_score,
        win_component=stats.win_pct * formula.win_weight,
        goals_component=goals_score * formula.goals_weight,
        attendance_component=attendance_pct * formula.attendance_weight,
        clean_sheet_bonus=stats.clean_sheets * formula.clean_sheet_bonus,
        hat_trick_bonus=stats.hat_tricks * formula.hat_trick_bonus,
        own_goal_penalty=stats.own_goals * formula.own_goal_penalty,
    )


def compute_mvp_score(stats: AggregatedPlayerStats, formula: MVPFormula = DEFAULT_FORMULA) -> float:
    return score_player(stats, formula).total
