import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from leaguemvp.ingest import (
    load_attendance_summary,
    load_season_csv,
    load_season_directory,
    load_season_json,
    row_to_record,
    season_from_path,
)


def _write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_json_season_file_with_position_lists(tmp_path: Path):
    path = _write_json(
        tmp_path / "2025.json",
        [
            {
                "name": "Priya",
                "position": ["LW", "LB"],
                "matches": 14,
                "wins": 8,
                "draws": 2,
                "losses": 4,
                "goals": 9,
                "cleanSheets": 1,
                "hatTricks": 1,
                "ownGoals": 0,
            },
            {"name": "Others", "matches": 20, "goals": 11},
        ],
    )

    records = load_season_json(path)

    assert [record.player_name for record in records] == ["Priya", "Others"]
    assert records[0].season == "2025"
    assert records[0].position == "LW/LB"
    assert records[0].clean_sheets == 1
    assert records[1].position == ""
    assert records[1].wins == 0


def test_json_players_wrapper_and_explicit_season(tmp_path: Path):
    path = _write_json(tmp_path / "latest.json", {"players": [{"name": "Sam", "matches": 3}]})

    records = load_season_json(path, season="2026")

    assert records[0].season == "2026"


def test_season_required_when_filename_has_no_year(tmp_path: Path):
    path = _write_json(tmp_path / "latest.json", [])

    with pytest.raises(ValueError):
        load_season_json(path)


def test_csv_season_file_with_custom_mapping(tmp_path: Path):
    path = tmp_path / "season-2024.csv"
    path.write_text(
        "Player,Pos,GP,W,D,L,G,CS,HT,OG\n"
        "Jane Doe,GK,14,10,0,4,2,10,0,0\n"
        ",,,,,,,,,\n"
        "John Smith,FWD,20,10,5,5,18,0,2,1\n",
        encoding="utf-8",
    )
    mapping = {
        "player_name": "Player",
        "position": "Pos",
        "matches": "GP",
        "wins": "W",
        "draws": "D",
        "losses": "L",
        "goals": "G",
        "clean_sheets": "CS",
        "hat_tricks": "HT",
        "own_goals": "OG",
    }

    records = load_season_csv(path, mapping=mapping)

    assert len(records) == 2
    assert records[0].season == "2024"
    assert records[0].clean_sheets == 10
    assert records[1].own_goals == 1


def test_non_numeric_counts_raise():
    with pytest.raises(ValueError, match="goals"):
        row_to_record({"name": "Sam", "goals": "many"}, season="2025")
    with pytest.raises(ValueError):
        row_to_record({"name": "Sam", "matches": "2.5"}, season="2025")


def test_boolean_counts_raise():
    with pytest.raises(ValueError, match="hat_tricks"):
        row_to_record({"name": "Sam", "hatTricks": True}, season="2025")
    with pytest.raises(ValueError, match="matches"):
        row_to_record({"name": "Sam", "matches": False}, season="2025")


def test_negative_counts_and_missing_names_rejected():
    with pytest.raises(ValidationError):
        row_to_record({"name": "Sam", "matches": -1}, season="2025")
    with pytest.raises(ValidationError):
        row_to_record({"name": "", "matches": 1}, season="2025")


def test_numeric_strings_and_floats_accepted():
    record = row_to_record({"name": "Sam", "matches": "1,024", "goals": 3.0}, season="2025")

    assert record.matches == 1024
    assert record.goals == 3


def test_load_directory_builds_store(tmp_path: Path, caplog):
    _write_json(tmp_path / "2025.json", [{"name": "Ana", "matches": 5}, {"name": "Ana", "matches": 7}])
    _write_json(tmp_path / "2024.json", [{"name": "Ana", "matches": 4}])
    (tmp_path / "notes.txt").write_text("ignore me", encoding="utf-8")
    _write_json(tmp_path / "summary.json", {"summary": {}})

    with caplog.at_level(logging.WARNING):
        store = load_season_directory(tmp_path)

    assert store.seasons() == ["2024", "2025"]
    assert [record.matches for record in store.records_for("2025")] == [7]
    assert "Duplicate row" in caplog.text


def test_load_directory_ignores_files_that_are_not_named_by_year(tmp_path: Path):
    _write_json(tmp_path / "2025.json", [{"name": "Ana", "matches": 10}])
    _write_json(tmp_path / "2025_backup.json", [{"name": "Ana", "matches": 99}])
    _write_json(tmp_path / "2025_match_data.json", [{"name": "Ana", "matches": 42}])
    _write_json(tmp_path / "attendance-2024.json", {"summary": {"totalGames": 50}})

    store = load_season_directory(tmp_path)

    assert store.seasons() == ["2025"]
    assert [(record.player_name, record.matches) for record in store.records_for("2025")] == [("Ana", 10)]


def test_load_directory_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_season_directory(tmp_path / "nope")


def test_attendance_summary(tmp_path: Path):
    path = _write_json(
        tmp_path / "attendance-2025.json",
        {"summary": {"midweekGames": 20, "weekendGames": 30, "totalGames": 50}, "players": []},
    )

    summary = load_attendance_summary(path)

    assert summary.total_games == 50
    assert summary.percent_of_total(25) == pytest.approx(50.0)
    assert summary.percent_of_total(10, "midweek") == pytest.approx(50.0)


def test_attendance_summary_requires_block(tmp_path: Path):
    path = _write_json(tmp_path / "2025.json", [])

    with pytest.raises(ValueError):
        load_attendance_summary(path)


def test_season_from_path():
    assert season_from_path(Path("data/2026.json")) == "2026"
    assert season_from_path(Path("data/latest.json")) is None
