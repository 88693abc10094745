"""Compliance classification."""

from .classifier import (
    ComplianceClassifier,
    classify,
    classify_with_state_override,
    determine_status,
    validate_weight,
)

__all__ = [
    "ComplianceClassifier",
    "classify",
    "classify_with_state_override",
    "determine_status",
    "validate_weight",
]
