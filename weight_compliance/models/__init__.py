"""Data models for weight compliance evaluation."""

from .schema import (
    AxleClass,
    BridgeFormulaInput,
    ComplianceIssue,
    ComplianceStatus,
    ComplianceVerdict,
    IssueSeverity,
    VehicleComplianceReport,
    VehicleConfiguration,
    WeightLimit,
)

__all__ = [
    "AxleClass",
    "BridgeFormulaInput",
    "ComplianceIssue",
    "ComplianceStatus",
    "ComplianceVerdict",
    "IssueSeverity",
    "VehicleComplianceReport",
    "VehicleConfiguration",
    "WeightLimit",
]
