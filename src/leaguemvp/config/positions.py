"""Position scarcity multipliers used to weight goals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class PositionWeightTable:
    """Immutable position code -> multiplier table.

    Higher multipliers mean goals from that position are rarer and count for
    more. Unknown codes resolve to ``default``.
    """

    name: str
    weights: Tuple[Tuple[str, float], ...]
    default: float = 1.0
    _lookup: Dict[str, float] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        for code, multiplier in self.weights:
            if multiplier <= 0:
                raise ValueError(f"multiplier for {code!r} must be positive, got {multiplier!r}")
        if self.default <= 0:
            raise ValueError(f"default multiplier must be positive, got {self.default!r}")
        object.__setattr__(self, "_lookup", dict(self.weights))

    @classmethod
    def from_mapping(
        cls,
        weights: Mapping[str, float],
        *,
        name: str = "custom",
        default: float = 1.0,
    ) -> "PositionWeightTable":
        normalized: Dict[str, float] = {}
        for code, multiplier in weights.items():
            key = str(code).strip().upper()
            if key:
                normalized[key] = float(multiplier)
        return cls(name=name, weights=tuple(sorted(normalized.items())), default=default)

    def weight_for(self, code: str | None) -> float:
        if not code:
            return self.default
        return self._lookup.get(code.strip().upper(), self.default)

    def as_dict(self) -> Dict[str, float]:
        return dict(self._lookup)

    def with_overrides(self, overrides: Mapping[str, float], *, name: str | None = None) -> "PositionWeightTable":
        merged = self.as_dict()
        merged.update({str(code).strip().upper(): float(value) for code, value in overrides.items()})
        return PositionWeightTable.from_mapping(merged, name=name or self.name, default=self.default)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._lookup


DEFAULT_POSITION_WEIGHTS = PositionWeightTable.from_mapping(
    {
        # Goalkeepers
        "GK": 4.0,
        # Defenders
        "DEF": 2.5,
        "CB": 2.5,
        "LB": 2.0,
        "RB": 2.0,
        # Midfielders
        "MID": 1.5,
        "CM": 1.5,
        "CDM": 1.8,
        "CAM": 1.2,
        "LM": 1.3,
        "RM": 1.3,
        # Forwards and wingers
        "FWD": 1.0,
        "ST": 1.0,
        "LW": 1.1,
        "RW": 1.1,
        # Plays anywhere
        "ALL": 1.5,
    },
    name="default",
)

FLAT_POSITION_WEIGHTS = PositionWeightTable.from_mapping(
    {code: 1.0 for code, _ in DEFAULT_POSITION_WEIGHTS.weights},
    name="flat",
)


_WEIGHT_TABLES: Dict[str, PositionWeightTable] = {
    DEFAULT_POSITION_WEIGHTS.name: DEFAULT_POSITION_WEIGHTS,
    FLAT_POSITION_WEIGHTS.name: FLAT_POSITION_WEIGHTS,
}


def iter_weight_tables() -> Iterable[PositionWeightTable]:
    """Return an iterator of all configured weight tables."""

    return _WEIGHT_TABLES.values()


def get_weight_table(name: str) -> PositionWeightTable:
    """Fetch a weight table by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _WEIGHT_TABLES:
        raise KeyError(f"No position weight table named {name!r}")
    return _WEIGHT_TABLES[key]
