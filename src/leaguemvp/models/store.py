"""In-memory, season-keyed collection of season records."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Tuple

from .season import SeasonStatRecord


logger = logging.getLogger(__name__)

ALL_SEASONS = "all"
ALL_SEASONS_LABEL = "All Time"


def season_sort_key(season: str) -> Tuple[int, int, str]:
    """Order numeric season labels numerically, anything else after them."""

    text = season.strip()
    if text.isdigit():
        return (0, int(text), text)
    return (1, 0, text)


class SeasonDataStore:
    """Read-only view over season records.

    A player appears at most once per season; when the input repeats a
    ``(player, season)`` pair the last row wins.
    """

    def __init__(self, records: Iterable[SeasonStatRecord] = ()) -> None:
        by_season: Dict[str, Dict[str, SeasonStatRecord]] = {}
        for record in records:
            season_rows = by_season.setdefault(record.season, {})
            if record.player_name in season_rows:
                logger.warning(
                    "Duplicate row for %s in season %s; keeping the last one",
                    record.player_name,
                    record.season,
                )
            season_rows[record.player_name] = record
        self._by_season: Dict[str, Tuple[SeasonStatRecord, ...]] = {
            season: tuple(rows.values())
            for season, rows in sorted(by_season.items(), key=lambda item: season_sort_key(item[0]))
        }

    @classmethod
    def from_seasons(cls, seasons: Mapping[str, Iterable[SeasonStatRecord]]) -> "SeasonDataStore":
        records: List[SeasonStatRecord] = []
        for season, rows in seasons.items():
            for row in rows:
                if row.season != season:
                    row = row.model_copy(update={"season": season})
                records.append(row)
        return cls(records)

    def __len__(self) -> int:
        return sum(len(rows) for rows in self._by_season.values())

    def seasons(self) -> List[str]:
        """Known seasons in chronological order."""

        return list(self._by_season.keys())

    def has_season(self, season: str) -> bool:
        return season in self._by_season

    def scope_seasons(self, scope: str) -> List[str]:
        if scope == ALL_SEASONS:
            return self.seasons()
        if scope in self._by_season:
            return [scope]
        logger.debug("Season scope %r not found; known seasons: %s", scope, self.seasons())
        return []

    def records_for(self, scope: str) -> List[SeasonStatRecord]:
        """Records for one season, or every season when scope is ``ALL_SEASONS``."""

        records: List[SeasonStatRecord] = []
        for season in self.scope_seasons(scope):
            records.extend(self._by_season[season])
        return records

    def records_by_player(self, scope: str) -> Dict[str, List[SeasonStatRecord]]:
        grouped: Dict[str, List[SeasonStatRecord]] = {}
        for record in self.records_for(scope):
            grouped.setdefault(record.player_name, []).append(record)
        return grouped

    @staticmethod
    def scope_label(scope: str) -> str:
        return ALL_SEASONS_LABEL if scope == ALL_SEASONS else scope
