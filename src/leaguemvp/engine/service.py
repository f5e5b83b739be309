"""End-to-end MVP ranking over a season data store."""

from __future__ import annotations

from dataclasses import replace
import logging
import os
import re
from typing import Dict, List, Optional, Tuple

from leaguemvp.config.formula import DEFAULT_FORMULA, MVPFormula, get_formula
from leaguemvp.config.positions import DEFAULT_POSITION_WEIGHTS, PositionWeightTable
from leaguemvp.models import ALL_SEASONS, SeasonDataStore

from .aggregate import DEFAULT_MIN_MATCHES, AggregatedPlayerStats, aggregate_player_records, is_eligible
from .attendance import max_matches, normalize_attendance
from .ranking import DEFAULT_TOP_N, RankedEntry, RankingResult, ScoredPlayer, produce_ranking
from .scoring import score_player


logger = logging.getLogger(__name__)

_MIN_MATCHES_ENV = "LEAGUEMVP_MIN_MATCHES"
_TOP_N_ENV = "LEAGUEMVP_TOP_N"
_FORMULA_ENV = "LEAGUEMVP_FORMULA"

SYNTHETIC_PLAYER_NAMES = frozenset({"Others"})
_GUEST_NAME_PATTERN = re.compile(r"\+\d+$")


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def default_min_matches() -> int:
    return _env_int(_MIN_MATCHES_ENV, DEFAULT_MIN_MATCHES, min_value=0)


def default_top_n() -> int:
    return _env_int(_TOP_N_ENV, DEFAULT_TOP_N, min_value=0)


def default_formula() -> MVPFormula:
    raw = os.getenv(_FORMULA_ENV)
    if not raw:
        return DEFAULT_FORMULA
    try:
        return get_formula(raw)
    except KeyError:
        logger.warning("Unknown formula for %s: %s; using %s", _FORMULA_ENV, raw, DEFAULT_FORMULA.name)
        return DEFAULT_FORMULA


def is_trackable_player(name: str) -> bool:
    """False for aggregate rows like ``Others`` and guest labels like ``David+1``."""

    text = name.strip()
    if not text or text in SYNTHETIC_PLAYER_NAMES:
        return False
    return not _GUEST_NAME_PATTERN.search(text)


def aggregate_scope(
    store: SeasonDataStore,
    scope: str = ALL_SEASONS,
    *,
    weights: PositionWeightTable = DEFAULT_POSITION_WEIGHTS,
) -> List[AggregatedPlayerStats]:
    """Aggregate every trackable player seen in ``scope``."""

    aggregated: List[AggregatedPlayerStats] = []
    for player_name, records in store.records_by_player(scope).items():
        if not is_trackable_player(player_name):
            logger.debug("Skipping non-player row %r", player_name)
            continue
        stats = aggregate_player_records(records, weights)
        if stats is not None:
            aggregated.append(stats)
    return aggregated


def build_ranking(
    store: SeasonDataStore,
    scope: str = ALL_SEASONS,
    formula: Optional[MVPFormula] = None,
    min_matches: Optional[int] = None,
    top_n: Optional[int] = None,
    *,
    weights: Optional[PositionWeightTable] = None,
) -> RankingResult:
    """Rank players in ``scope`` and return entries with summary information.

    Attendance is normalized against the most active player *after* the
    minimum-matches filter, so players who did not qualify never set the
    denominator.
    """

    formula = formula or default_formula()
    min_matches = default_min_matches() if min_matches is None else min_matches
    top_n = default_top_n() if top_n is None else top_n
    weights = weights or DEFAULT_POSITION_WEIGHTS

    aggregated = aggregate_scope(store, scope, weights=weights)
    eligible = [stats for stats in aggregated if is_eligible(stats, min_matches)]

    scored = [
        ScoredPlayer(stats=stats, breakdown=score_player(stats, formula))
        for stats in normalize_attendance(eligible, denominator=max_matches(eligible))
    ]
    result = produce_ranking(scored, top_n=top_n)
    logger.debug(
        "Ranked %d of %d players for %s with formula %s (min_matches=%d)",
        len(result.entries),
        len(aggregated),
        scope,
        formula.name,
        min_matches,
    )
    return replace(
        result,
        scope_label=store.scope_label(scope),
        total_players=len(aggregated),
        eligible_players=len(eligible),
    )


def rank_players(
    store: SeasonDataStore,
    scope: str = ALL_SEASONS,
    formula: Optional[MVPFormula] = None,
    min_matches: Optional[int] = None,
    top_n: Optional[int] = None,
    *,
    weights: Optional[PositionWeightTable] = None,
) -> List[RankedEntry]:
    return list(build_ranking(store, scope, formula, min_matches, top_n, weights=weights).entries)


_CacheKey = Tuple[str, MVPFormula, int, int]


class LeagueRanker:
    """Memoizes rankings for one store and weight table."""

    def __init__(
        self,
        store: SeasonDataStore,
        weights: PositionWeightTable = DEFAULT_POSITION_WEIGHTS,
    ) -> None:
        self.store = store
        self.weights = weights
        self._cache: Dict[_CacheKey, RankingResult] = {}

    def ranking(
        self,
        scope: str = ALL_SEASONS,
        formula: Optional[MVPFormula] = None,
        min_matches: Optional[int] = None,
        top_n: Optional[int] = None,
    ) -> RankingResult:
        formula = formula or default_formula()
        min_matches = default_min_matches() if min_matches is None else min_matches
        top_n = default_top_n() if top_n is None else top_n
        key = (scope, formula, min_matches, top_n)
        if key not in self._cache:
            self._cache[key] = build_ranking(
                self.store,
                scope,
                formula,
                min_matches,
                top_n,
                weights=self.weights,
            )
        return self._cache[key]

    def rank_players(
        self,
        scope: str = ALL_SEASONS,
        formula: Optional[MVPFormula] = None,
        min_matches: Optional[int] = None,
        top_n: Optional[int] = None,
    ) -> List[RankedEntry]:
        return list(self.ranking(scope, formula, min_matches, top_n).entries)

    def clear(self) -> None:
        self._cache.clear()
