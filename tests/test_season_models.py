import pytest
from pydantic import ValidationError

from leaguemvp.models import ALL_SEASONS, AttendanceSummary, SeasonDataStore, SeasonStatRecord, season_sort_key


def test_season_record_is_frozen():
    record = SeasonStatRecord(player_name="Ana", season="2025", matches=3)

    assert record.goals == 0
    assert record.position == ""
    with pytest.raises((TypeError, ValidationError)):
        record.matches = 4  # type: ignore[misc]


def test_store_orders_seasons_chronologically():
    store = SeasonDataStore(
        [
            SeasonStatRecord(player_name="Ana", season="2026"),
            SeasonStatRecord(player_name="Ana", season="2024"),
            SeasonStatRecord(player_name="Ben", season="2025"),
        ]
    )

    assert store.seasons() == ["2024", "2025", "2026"]
    assert len(store) == 3
    assert [r.season for r in store.records_for(ALL_SEASONS)] == ["2024", "2025", "2026"]
    assert set(store.records_by_player(ALL_SEASONS)) == {"Ana", "Ben"}


def test_store_unknown_scope_is_empty():
    store = SeasonDataStore([SeasonStatRecord(player_name="Ana", season="2025")])

    assert store.records_for("2019") == []
    assert store.scope_label("2019") == "2019"
    assert store.scope_label(ALL_SEASONS) == "All Time"


def test_from_seasons_relabels_rows():
    store = SeasonDataStore.from_seasons(
        {"2025": [SeasonStatRecord(player_name="Ana", season="draft", matches=2)]}
    )

    assert store.records_for("2025")[0].season == "2025"


def test_season_sort_key_puts_named_seasons_last():
    labels = ["Spring", "2025", "2024", "Autumn"]

    assert sorted(labels, key=season_sort_key) == ["2024", "2025", "Autumn", "Spring"]


def test_attendance_summary_guards_zero_total():
    assert AttendanceSummary().percent_of_total(5) == 0.0
