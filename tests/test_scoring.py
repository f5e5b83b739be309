from dataclasses import replace

import pytest

from leaguemvp.config import (
    DEFAULT_FORMULA,
    LEGACY_FORMULA,
    POSITION_WEIGHTED_FORMULA,
    MVPFormula,
    get_formula,
    iter_formulas,
)
from leaguemvp.engine import aggregate_player_records, compute_mvp_score, score_player
from leaguemvp.models import SeasonStatRecord


def _scenario_stats(attendance_pct: float | None = 100.0):
    stats = aggregate_player_records(
        [
            SeasonStatRecord(player_name="X", season="2024", position="FWD", matches=10, wins=5, goals=5),
            SeasonStatRecord(player_name="X", season="2025", position="DEF", matches=10, wins=6, goals=2),
        ]
    )
    assert stats is not None
    return replace(stats, attendance_pct=attendance_pct)


def test_position_weighted_formula_score():
    breakdown = score_player(_scenario_stats(), POSITION_WEIGHTED_FORMULA)

    # 0.5 weighted goals per match against a 4.0 ceiling.
    assert breakdown.normalized_goals == pytest.approx(12.5)
    assert breakdown.win_component == pytest.approx(22.0)
    assert breakdown.goals_component == pytest.approx(3.75)
    assert breakdown.attendance_component == pytest.approx(30.0)
    assert breakdown.total == pytest.approx(55.75)


def test_legacy_formula_uses_raw_goals_and_lower_cap():
    score = compute_mvp_score(_scenario_stats(), LEGACY_FORMULA)

    # 0.35 raw goals per match against a 2.0 ceiling -> 17.5.
    assert score == pytest.approx(22.0 + 17.5 * 0.30 + 30.0)


def test_normalized_goals_are_capped():
    stats = aggregate_player_records(
        [SeasonStatRecord(player_name="GK", season="2025", position="GK", matches=10, goals=20)]
    )
    assert stats is not None

    breakdown = score_player(replace(stats, attendance_pct=0.0))

    assert stats.weighted_goals_per_match == pytest.approx(8.0)
    assert breakdown.normalized_goals == 100.0


def test_bonuses_and_penalty_are_flat_points():
    stats = aggregate_player_records(
        [
            SeasonStatRecord(
                player_name="Y",
                season="2025",
                position="CB",
                matches=10,
                clean_sheets=3,
                hat_tricks=1,
                own_goals=2,
            )
        ]
    )
    assert stats is not None
    breakdown = score_player(replace(stats, attendance_pct=0.0), DEFAULT_FORMULA)

    assert breakdown.clean_sheet_bonus == pytest.approx(15.0)
    assert breakdown.hat_trick_bonus == pytest.approx(2.0)
    assert breakdown.own_goal_penalty == pytest.approx(2.0)
    assert breakdown.total == pytest.approx(15.0)


def test_missing_attendance_scores_as_zero():
    breakdown = score_player(_scenario_stats(attendance_pct=None))

    assert breakdown.attendance_component == 0


def test_custom_formula_swaps_weights():
    heavy_wins = POSITION_WEIGHTED_FORMULA.with_overrides(
        name="wins_only", goals_weight=0.0, attendance_weight=0.0, win_weight=1.0
    )

    assert compute_mvp_score(_scenario_stats(), heavy_wins) == pytest.approx(55.0)
    assert POSITION_WEIGHTED_FORMULA.win_weight == 0.40


def test_formula_validation():
    with pytest.raises(ValueError):
        POSITION_WEIGHTED_FORMULA.with_overrides(goals_cap=0)
    with pytest.raises(ValueError):
        MVPFormula(
            name="bad",
            win_weight=-1,
            goals_weight=0,
            attendance_weight=0,
            goals_cap=1,
            clean_sheet_bonus=0,
            hat_trick_bonus=0,
            own_goal_penalty=0,
        )


def test_formula_registry():
    assert get_formula("Position-Weighted") is POSITION_WEIGHTED_FORMULA
    assert get_formula("legacy") is LEGACY_FORMULA
    assert {formula.name for formula in iter_formulas()} == {"position_weighted", "legacy"}
    with pytest.raises(KeyError):
        get_formula("fantasy")
