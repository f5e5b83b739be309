"""Merge a player's season contributions into one set of totals and rates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from leaguemvp.config.positions import DEFAULT_POSITION_WEIGHTS, PositionWeightTable
from leaguemvp.models import SeasonStatRecord, season_sort_key

from .contribution import SeasonContribution, _per_match, _percent, compute_contribution


POSITION_EVOLUTION_SEPARATOR = " → "
UNKNOWN_POSITION_LABEL = "N/A"
DEFAULT_MIN_MATCHES = 10


@dataclass(frozen=True)
class PositionSpan:
    """Position played in one season and its share of the player's matches."""

    season: str
    position: str
    matches: int
    weight: float
    share: float


@dataclass(frozen=True)
class AggregatedPlayerStats:
    player_name: str
    seasons_played: int
    matches: int
    wins: int
    draws: int
    losses: int
    goals: int
    weighted_goals: float
    clean_sheets: int
    hat_tricks: int
    own_goals: int
    win_pct: float
    goals_per_match: float
    weighted_goals_per_match: float
    clean_sheet_pct: float
    effective_multiplier: float
    display_position: str
    is_multi_position: bool
    position_breakdown: tuple[PositionSpan, ...]
    contributions: tuple[SeasonContribution, ...]
    attendance_pct: Optional[float] = None

    @property
    def position_details(self) -> Optional[str]:
        """Season-by-season position summary, only for players who moved around."""

        if not self.is_multi_position:
            return None
        return " | ".join(
            f"{span.season}: {span.position} ({span.matches}G, {span.weight:.1f}x)"
            for span in self.position_breakdown
        )


def _chronological(contributions: Iterable[SeasonContribution]) -> list[SeasonContribution]:
    return sorted(contributions, key=lambda c: season_sort_key(c.season))


def _display_position(ordered: Sequence[SeasonContribution]) -> tuple[str, bool]:
    labels: list[str] = []
    for contribution in ordered:
        label = contribution.position.strip()
        if label and label not in labels:
            labels.append(label)
    if not labels:
        return UNKNOWN_POSITION_LABEL, False
    if len(labels) == 1:
        return labels[0], False
    return POSITION_EVOLUTION_SEPARATOR.join(labels), True


def aggregate_contributions(
    contributions: Sequence[SeasonContribution],
) -> Optional[AggregatedPlayerStats]:
    """Sum a player's contributions and recompute rates from the totals.

    Rates are never averaged across seasons, so a short season does not count
    as much as a full one. Returns ``None`` when there is nothing to merge.
    """

    if not contributions:
        return None

    names = {contribution.player_name for contribution in contributions}
    if len(names) != 1:
        raise ValueError(f"contributions span several players: {sorted(names)}")

    ordered = _chronological(contributions)
    records = [contribution.record for contribution in ordered]

    matches = sum(record.matches for record in records)
    wins = sum(record.wins for record in records)
    goals = sum(record.goals for record in records)
    clean_sheets = sum(record.clean_sheets for record in records)
    weighted_goals = math.fsum(contribution.weighted_goals for contribution in ordered)

    display_position, is_multi = _display_position(ordered)
    breakdown = tuple(
        PositionSpan(
            season=contribution.season,
            position=contribution.position,
            matches=contribution.matches,
            weight=contribution.pos_weight,
            share=contribution.matches / matches,
        )
        for contribution in ordered
        if contribution.matches > 0
    )

    return AggregatedPlayerStats(
        player_name=ordered[0].player_name,
        seasons_played=len(ordered),
        matches=matches,
        wins=wins,
        draws=sum(record.draws for record in records),
        losses=sum(record.losses for record in records),
        goals=goals,
        weighted_goals=weighted_goals,
        clean_sheets=clean_sheets,
        hat_tricks=sum(record.hat_tricks for record in records),
        own_goals=sum(record.own_goals for record in records),
        win_pct=_percent(wins, matches),
        goals_per_match=_per_match(goals, matches),
        weighted_goals_per_match=_per_match(weighted_goals, matches),
        clean_sheet_pct=_percent(clean_sheets, matches),
        effective_multiplier=weighted_goals / goals if goals > 0 else 1.0,
        display_position=display_position,
        is_multi_position=is_multi,
        position_breakdown=breakdown,
        contributions=tuple(ordered),
    )


def aggregate_player_records(
    records: Sequence[SeasonStatRecord],
    table: PositionWeightTable = DEFAULT_POSITION_WEIGHTS,
) -> Optional[AggregatedPlayerStats]:
    return aggregate_contributions([compute_contribution(record, table) for record in records])


def is_eligible(stats: AggregatedPlayerStats, min_matches: int = DEFAULT_MIN_MATCHES) -> bool:
    """Eligibility is judged on the aggregated match count, not any one season."""

    return stats.matches >= min_matches
