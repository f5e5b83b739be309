"""Season data models."""

from .season import AttendanceSummary, SeasonStatRecord
from .store import ALL_SEASONS, ALL_SEASONS_LABEL, SeasonDataStore, season_sort_key

__all__ = [
    "ALL_SEASONS",
    "ALL_SEASONS_LABEL",
    "AttendanceSummary",
    "SeasonDataStore",
    "SeasonStatRecord",
    "season_sort_key",
]
