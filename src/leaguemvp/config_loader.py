"""Persist and load ranking profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from leaguemvp.config import MVPFormula, PositionWeightTable, get_formula, get_weight_table


@dataclass
class RankingProfile:
    formula: str = "position_weighted"
    formula_overrides: Dict[str, Any] = field(default_factory=dict)
    position_table: str = "default"
    position_weights: Dict[str, float] = field(default_factory=dict)
    min_matches: Optional[int] = None
    top_n: Optional[int] = None

    @classmethod
    def load(cls, path: Path) -> "RankingProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            formula=data.get("formula", "position_weighted"),
            formula_overrides=data.get("formula_overrides", {}),
            position_table=data.get("position_table", "default"),
            position_weights=data.get("position_weights", {}),
            min_matches=data.get("min_matches"),
            top_n=data.get("top_n"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "formula": self.formula,
            "formula_overrides": self.formula_overrides,
            "position_table": self.position_table,
            "position_weights": self.position_weights,
            "min_matches": self.min_matches,
            "top_n": self.top_n,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def resolve_formula(self) -> MVPFormula:
        base = get_formula(self.formula)
        if not self.formula_overrides:
            return base
        overrides = dict(self.formula_overrides)
        overrides.setdefault("name", f"{base.name}_custom")
        return base.with_overrides(**overrides)

    def resolve_weights(self) -> PositionWeightTable:
        base = get_weight_table(self.position_table)
        if not self.position_weights:
            return base
        return base.with_overrides(self.position_weights, name="profile")
