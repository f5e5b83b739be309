"""MVP score formula configurations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable


@dataclass(frozen=True)
class MVPFormula:
    """Weights and flat bonuses combined into a single MVP score.

    The three percentage weights are applied to 0-100 metrics and do not have
    to sum to one. Bonuses and the penalty are flat points per occurrence.
    """

    name: str
    win_weight: float
    goals_weight: float
    attendance_weight: float
    goals_cap: float
    clean_sheet_bonus: float
    hat_trick_bonus: float
    own_goal_penalty: float
    use_position_weights: bool = True

    def __post_init__(self) -> None:
        if self.goals_cap <= 0:
            raise ValueError(f"goals_cap must be positive, got {self.goals_cap!r}")
        for attr in (
            "win_weight",
            "goals_weight",
            "attendance_weight",
            "clean_sheet_bonus",
            "hat_trick_bonus",
            "own_goal_penalty",
        ):
            if getattr(self, attr) < 0:
                raise ValueError(f"{attr} must be non-negative, got {getattr(self, attr)!r}")

    def with_overrides(self, **changes: Any) -> "MVPFormula":
        return replace(self, **changes)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "win_weight": self.win_weight,
            "goals_weight": self.goals_weight,
            "attendance_weight": self.attendance_weight,
            "goals_cap": self.goals_cap,
            "clean_sheet_bonus": self.clean_sheet_bonus,
            "hat_trick_bonus": self.hat_trick_bonus,
            "own_goal_penalty": self.own_goal_penalty,
            "use_position_weights": self.use_position_weights,
        }


POSITION_WEIGHTED_FORMULA = MVPFormula(
    name="position_weighted",
    win_weight=0.40,
    goals_weight=0.30,
    attendance_weight=0.30,
    goals_cap=4.0,
    clean_sheet_bonus=5.0,
    hat_trick_bonus=2.0,
    own_goal_penalty=1.0,
    use_position_weights=True,
)

# Raw goals per match against a lower ceiling, as the first leaderboard did.
LEGACY_FORMULA = MVPFormula(
    name="legacy",
    win_weight=0.40,
    goals_weight=0.30,
    attendance_weight=0.30,
    goals_cap=2.0,
    clean_sheet_bonus=5.0,
    hat_trick_bonus=2.0,
    own_goal_penalty=1.0,
    use_position_weights=False,
)

DEFAULT_FORMULA = POSITION_WEIGHTED_FORMULA

_FORMULAS: Dict[str, MVPFormula] = {
    POSITION_WEIGHTED_FORMULA.name: POSITION_WEIGHTED_FORMULA,
    LEGACY_FORMULA.name: LEGACY_FORMULA,
}


def iter_formulas() -> Iterable[MVPFormula]:
    """Return an iterator of all named formula presets."""

    return _FORMULAS.values()


def get_formula(name: str) -> MVPFormula:
    """Fetch a formula preset by name, raising KeyError if missing."""

    key = name.strip().lower().replace("-", "_")
    if key not in _FORMULAS:
        raise KeyError(f"No MVP formula named {name!r}")
    return _FORMULAS[key]
