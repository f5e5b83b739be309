"""Resolve position labels into a single scarcity weight."""

from __future__ import annotations

import re
from typing import List, Optional

from leaguemvp.config.positions import DEFAULT_POSITION_WEIGHTS, PositionWeightTable


_POSITION_SPLIT = re.compile(r"[/,\s]+")


def split_position_label(label: Optional[str]) -> List[str]:
    """Split ``"LW/LB"``, ``"mid, def"`` and similar into uppercase codes."""

    if not label:
        return []
    return [token.strip().upper() for token in _POSITION_SPLIT.split(label) if token.strip()]


def resolve_position_weight(
    label: Optional[str],
    table: PositionWeightTable = DEFAULT_POSITION_WEIGHTS,
) -> float:
    """Return the mean multiplier of every code in ``label``.

    Empty labels and unknown codes count as the table default (1.0).
    """

    tokens = split_position_label(label)
    if not tokens:
        return table.default
    weights = [table.weight_for(token) for token in tokens]
    return sum(weights) / len(weights)
