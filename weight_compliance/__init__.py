"""Federal and state vehicle weight compliance evaluation."""

from .bridge.bridge_formula import NOT_APPLICABLE, BridgeFormulaEvaluator, max_group_weight
from .classification.classifier import (
    ComplianceClassifier,
    classify,
    classify_with_state_override,
)
from .errors import ComplianceError, InvalidAxleCount, InvalidSpacing, InvalidWeight
from .limits.limit_table import LimitTable, limit_for, weight_limit_for
from .models.schema import (
    AxleClass,
    BridgeFormulaInput,
    ComplianceStatus,
    ComplianceVerdict,
    VehicleComplianceReport,
    VehicleConfiguration,
    WeightLimit,
)
from .normalization.normalizer import WeightNormalizer
from .validation.vehicle_validator import VehicleValidator

__version__ = "1.0.0"

__all__ = [
    "NOT_APPLICABLE",
    "AxleClass",
    "BridgeFormulaEvaluator",
    "BridgeFormulaInput",
    "ComplianceClassifier",
    "ComplianceError",
    "ComplianceStatus",
    "ComplianceVerdict",
    "InvalidAxleCount",
    "InvalidSpacing",
    "InvalidWeight",
    "LimitTable",
    "VehicleComplianceReport",
    "VehicleConfiguration",
    "VehicleValidator",
    "WeightLimit",
    "WeightNormalizer",
    "classify",
    "classify_with_state_override",
    "limit_for",
    "max_group_weight",
    "weight_limit_for",
]
