"""Configuration presets for position weights and MVP formulas."""

from .formula import (
    DEFAULT_FORMULA,
    LEGACY_FORMULA,
    POSITION_WEIGHTED_FORMULA,
    MVPFormula,
    get_formula,
    iter_formulas,
)
from .positions import (
    DEFAULT_POSITION_WEIGHTS,
    FLAT_POSITION_WEIGHTS,
    PositionWeightTable,
    get_weight_table,
    iter_weight_tables,
)

__all__ = [
    "DEFAULT_FORMULA",
    "DEFAULT_POSITION_WEIGHTS",
    "FLAT_POSITION_WEIGHTS",
    "LEGACY_FORMULA",
    "MVPFormula",
    "POSITION_WEIGHTED_FORMULA",
    "PositionWeightTable",
    "get_formula",
    "get_weight_table",
    "iter_formulas",
    "iter_weight_tables",
]
