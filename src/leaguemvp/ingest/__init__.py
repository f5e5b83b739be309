"""Input adapters that normalize raw season data."""

from .seasons import (
    DEFAULT_SEASON_MAPPING,
    load_attendance_summary,
    load_season_csv,
    load_season_directory,
    load_season_file,
    load_season_json,
    row_to_record,
    rows_to_records,
    season_from_path,
)

__all__ = [
    "DEFAULT_SEASON_MAPPING",
    "load_attendance_summary",
    "load_season_csv",
    "load_season_directory",
    "load_season_file",
    "load_season_json",
    "row_to_record",
    "rows_to_records",
    "season_from_path",
]
