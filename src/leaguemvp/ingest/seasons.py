"""Helpers to load season files and emit canonical season records."""

from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from leaguemvp.models import AttendanceSummary, SeasonDataStore, SeasonStatRecord


logger = logging.getLogger(__name__)

# Record field -> column name in the league's season exports.
DEFAULT_SEASON_MAPPING: Mapping[str, str] = {
    "player_name": "name",
    "position": "position",
    "matches": "matches",
    "wins": "wins",
    "draws": "draws",
    "losses": "losses",
    "goals": "goals",
    "clean_sheets": "cleanSheets",
    "hat_tricks": "hatTricks",
    "own_goals": "ownGoals",
}

_COUNT_FIELDS = (
    "matches",
    "wins",
    "draws",
    "losses",
    "goals",
    "clean_sheets",
    "hat_tricks",
    "own_goals",
)

_SEASON_IN_FILENAME = re.compile(r"(\d{4})")
_SEASON_FILENAME = re.compile(r"\d{4}")
_SEASON_FILE_SUFFIXES = {".json", ".csv"}


def _parse_count(raw: Any, *, field: str) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise ValueError(f"{field} '{raw}' is not numeric")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"{field} '{raw}' is not a whole number")
        return int(raw)
    text = str(raw).strip().replace(",", "")
    if not text:
        return 0
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"{field} '{raw}' is not numeric") from None
    if not value.is_integer():
        raise ValueError(f"{field} '{raw}' is not a whole number")
    return int(value)


def _parse_position(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, (list, tuple)):
        return "/".join(str(part).strip() for part in raw if str(part).strip())
    return str(raw).strip()


def season_from_path(path: Path) -> Optional[str]:
    match = _SEASON_IN_FILENAME.search(path.stem)
    return match.group(1) if match else None


def row_to_record(
    row: Mapping[str, Any],
    *,
    season: str,
    mapping: Mapping[str, str] | None = None,
) -> SeasonStatRecord:
    mapping = {**DEFAULT_SEASON_MAPPING, **(mapping or {})}
    name = str(row.get(mapping["player_name"]) or "").strip()
    data: dict[str, Any] = {
        "player_name": name,
        "season": season,
        "position": _parse_position(row.get(mapping["position"])),
    }
    for field in _COUNT_FIELDS:
        data[field] = _parse_count(row.get(mapping[field]), field=field)
    return SeasonStatRecord(**data)


def rows_to_records(
    rows: Iterable[Mapping[str, Any]],
    *,
    season: str,
    mapping: Mapping[str, str] | None = None,
) -> List[SeasonStatRecord]:
    return [row_to_record(row, season=season, mapping=mapping) for row in rows]


def _require_season(path: Path, season: Optional[str]) -> str:
    resolved = season or season_from_path(path)
    if not resolved:
        raise ValueError(f"Cannot infer season from {path.name}; pass season explicitly")
    return resolved


def load_season_json(
    path: Path,
    *,
    season: Optional[str] = None,
    mapping: Mapping[str, str] | None = None,
) -> List[SeasonStatRecord]:
    """Load a season file holding a list of player objects (or ``{"players": [...]}``)."""

    resolved = _require_season(path, season)
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, Mapping):
        payload = payload.get("players", [])
    if not isinstance(payload, list):
        raise ValueError(f"{path.name} must contain a list of players")
    return rows_to_records(payload, season=resolved, mapping=mapping)


def load_season_csv(
    path: Path,
    *,
    season: Optional[str] = None,
    mapping: Mapping[str, str] | None = None,
) -> List[SeasonStatRecord]:
    resolved = _require_season(path, season)
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [row for row in reader if any(str(value or "").strip() for value in row.values())]
    return rows_to_records(rows, season=resolved, mapping=mapping)


def load_season_file(
    path: Path,
    *,
    season: Optional[str] = None,
    mapping: Mapping[str, str] | None = None,
) -> List[SeasonStatRecord]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_season_json(path, season=season, mapping=mapping)
    if suffix == ".csv":
        return load_season_csv(path, season=season, mapping=mapping)
    raise ValueError(f"Unsupported season file type: {path.name}")


def load_season_directory(
    directory: Path,
    *,
    mapping: Mapping[str, str] | None = None,
) -> SeasonDataStore:
    """Load every ``<year>.json``/``<year>.csv`` file in ``directory`` into a store."""

    if not directory.is_dir():
        raise FileNotFoundError(f"Season directory not found: {directory}")

    records: List[SeasonStatRecord] = []
    for path in sorted(directory.iterdir()):
        if path.suffix.lower() not in _SEASON_FILE_SUFFIXES:
            continue
        if not _SEASON_FILENAME.fullmatch(path.stem):
            logger.debug("Skipping %s: filename is not a season year", path.name)
            continue
        season = path.stem
        loaded = load_season_file(path, season=season, mapping=mapping)
        logger.debug("Loaded %d rows for season %s from %s", len(loaded), season, path.name)
        records.extend(loaded)
    return SeasonDataStore(records)


def load_attendance_summary(path: Path) -> AttendanceSummary:
    """Read the ``summary`` block of an attendance leaderboard file."""

    payload = json.loads(path.read_text(encoding="utf-8"))
    summary = payload.get("summary") if isinstance(payload, Mapping) else None
    if not isinstance(summary, Mapping):
        raise ValueError(f"{path.name} has no attendance summary")
    return AttendanceSummary(
        midweek_games=_parse_count(summary.get("midweekGames"), field="midweekGames"),
        weekend_games=_parse_count(summary.get("weekendGames"), field="weekendGames"),
        total_games=_parse_count(summary.get("totalGames"), field="totalGames"),
    )
