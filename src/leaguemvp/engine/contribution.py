"""Per-season derived metrics."""

from __future__ import annotations

from dataclasses import dataclass

from leaguemvp.config.positions import DEFAULT_POSITION_WEIGHTS, PositionWeightTable
from leaguemvp.models import SeasonStatRecord

from .positions import resolve_position_weight


def _per_match(value: float, matches: int) -> float:
    return value / matches if matches > 0 else 0.0


def _percent(value: float, matches: int) -> float:
    return value / matches * 100 if matches > 0 else 0.0


@dataclass(frozen=True)
class SeasonContribution:
    """One player's season record with position-weighted rates attached."""

    record: SeasonStatRecord
    pos_weight: float
    weighted_goals: float
    goals_per_match: float
    weighted_goals_per_match: float
    win_pct: float
    clean_sheet_pct: float

    @property
    def player_name(self) -> str:
        return self.record.player_name

    @property
    def season(self) -> str:
        return self.record.season

    @property
    def position(self) -> str:
        return self.record.position

    @property
    def matches(self) -> int:
        return self.record.matches


def compute_contribution(
    record: SeasonStatRecord,
    table: PositionWeightTable = DEFAULT_POSITION_WEIGHTS,
) -> SeasonContribution:
    pos_weight = resolve_position_weight(record.position, table)
    weighted_goals = record.goals * pos_weight
    matches = record.matches
    return SeasonContribution(
        record=record,
        pos_weight=pos_weight,
        weighted_goals=weighted_goals,
        goals_per_match=_per_match(record.goals, matches),
        weighted_goals_per_match=_per_match(weighted_goals, matches),
        win_pct=_percent(record.wins, matches),
        clean_sheet_pct=_percent(record.clean_sheets, matches),
    )
