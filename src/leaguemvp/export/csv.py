"""CSV export helpers for MVP rankings."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Any, Sequence

from leaguemvp.engine.ranking import RankedEntry


class RankingExportError(RuntimeError):
    """Raised when a ranking cannot be exported with the requested columns."""


DEFAULT_EXPORT_COLUMNS: tuple[str, ...] = (
    "rank",
    "player_name",
    "display_position",
    "mvp_score",
    "matches",
    "wins",
    "draws",
    "losses",
    "goals",
    "weighted_goals",
    "effective_multiplier",
    "clean_sheets",
    "hat_tricks",
    "own_goals",
    "win_pct",
    "attendance_pct",
    "goals_per_match",
    "weighted_goals_per_match",
    "clean_sheet_pct",
)

# Display precision, matching what the leaderboard shows.
_DECIMALS = {
    "mvp_score": 1,
    "weighted_goals": 1,
    "effective_multiplier": 2,
    "win_pct": 1,
    "attendance_pct": 1,
    "goals_per_match": 2,
    "weighted_goals_per_match": 2,
    "clean_sheet_pct": 1,
}


def _format_cell(column: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if column in _DECIMALS and isinstance(value, (int, float)):
        return f"{value:.{_DECIMALS[column]}f}"
    return str(value)


def export_rankings_to_csv(
    entries: Sequence[RankedEntry],
    *,
    columns: Sequence[str] = DEFAULT_EXPORT_COLUMNS,
) -> str:
    """Convert ranked entries to CSV text with one header row."""

    if not columns:
        raise RankingExportError("at least one column is required")

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(columns)

    for entry in entries:
        row = entry.to_row()
        unknown = [column for column in columns if column not in row]
        if unknown:
            raise RankingExportError(f"Unknown export columns: {', '.join(unknown)}")
        writer.writerow([_format_cell(column, row[column]) for column in columns])

    return buffer.getvalue()


__all__ = [
    "DEFAULT_EXPORT_COLUMNS",
    "RankingExportError",
    "export_rankings_to_csv",
]
