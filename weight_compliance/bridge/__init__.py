"""Bridge formula evaluation."""

from .bridge_formula import (
    NOT_APPLICABLE,
    BridgeFormulaEvaluator,
    BridgeFormulaResult,
    max_group_weight,
)

__all__ = [
    "NOT_APPLICABLE",
    "BridgeFormulaEvaluator",
    "BridgeFormulaResult",
    "max_group_weight",
]
