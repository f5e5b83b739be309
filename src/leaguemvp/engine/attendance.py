"""Scale match counts against the most active player in scope."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from .aggregate import AggregatedPlayerStats


def max_matches(stats: Iterable[AggregatedPlayerStats]) -> int:
    """Highest match count, floored at 1 so an empty set never divides by zero."""

    return max((entry.matches for entry in stats), default=0) or 1


def normalize_attendance(
    stats: Sequence[AggregatedPlayerStats],
    *,
    denominator: Optional[int] = None,
) -> List[AggregatedPlayerStats]:
    """Return copies of ``stats`` with ``attendance_pct`` attached.

    ``denominator`` defaults to the maximum of ``stats`` itself, so callers
    should pass the already-filtered eligible set.
    """

    ceiling = max(denominator, 1) if denominator is not None else max_matches(stats)
    return [
        replace(entry, attendance_pct=entry.matches / ceiling * 100)
        for entry in stats
    ]
