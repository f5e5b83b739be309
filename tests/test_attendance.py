import pytest

from leaguemvp.engine import aggregate_player_records, max_matches, normalize_attendance
from leaguemvp.models import SeasonStatRecord


def _stats(name: str, matches: int):
    stats = aggregate_player_records(
        [SeasonStatRecord(player_name=name, season="2025", position="MID", matches=matches)]
    )
    assert stats is not None
    return stats


def test_most_active_players_reach_full_attendance():
    pool = [_stats("A", 30), _stats("B", 30), _stats("C", 15), _stats("D", 10)]

    normalized = normalize_attendance(pool)

    by_name = {stats.player_name: stats.attendance_pct for stats in normalized}
    assert by_name == pytest.approx({"A": 100.0, "B": 100.0, "C": 50.0, "D": 100 / 3})
    assert all(pct <= 100 for pct in by_name.values())


def test_normalize_returns_new_values():
    original = _stats("A", 12)

    normalized = normalize_attendance([original])

    assert original.attendance_pct is None
    assert normalized[0].attendance_pct == pytest.approx(100.0)
    assert normalized[0] is not original


def test_explicit_denominator_is_floored_at_one():
    normalized = normalize_attendance([_stats("A", 0)], denominator=0)

    assert normalized[0].attendance_pct == 0


def test_max_matches_floors_empty_sets():
    assert max_matches([]) == 1
    assert max_matches([_stats("A", 0)]) == 1
    assert max_matches([_stats("A", 7), _stats("B", 9)]) == 9
    assert normalize_attendance([]) == []
