"""Pydantic models for weight compliance evaluation.

This module defines the structured data models shared by the limit table,
the bridge formula evaluator and the classifiers, ensuring type safety
throughout the evaluation pipeline.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


class AxleClass(str, Enum):
    """Axle grouping (or whole-vehicle measure) that selects a ceiling."""

    SINGLE_AXLE = "SINGLE_AXLE"
    TANDEM_AXLE = "TANDEM_AXLE"
    TRIDEM_AXLE = "TRIDEM_AXLE"
    GROSS_VEHICLE_WEIGHT = "GROSS_VEHICLE_WEIGHT"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'gross vehicle weight'."""
        return self.value.replace('_', ' ').lower()


class ComplianceStatus(str, Enum):
    """Three-state verdict, ordered by severity."""

    COMPLIANT = "Compliant"
    WARNING = "Warning"
    NON_COMPLIANT = "Non-Compliant"

    @property
    def severity(self) -> int:
        return _STATUS_SEVERITY[self]

    @classmethod
    def worst(cls, statuses) -> "ComplianceStatus":
        """Most severe status of an iterable (Compliant when empty)."""
        return max(statuses, key=lambda s: s.severity, default=cls.COMPLIANT)


_STATUS_SEVERITY = {
    ComplianceStatus.COMPLIANT: 0,
    ComplianceStatus.WARNING: 1,
    ComplianceStatus.NON_COMPLIANT: 2,
}


class IssueSeverity(str, Enum):
    """Severity attached to an individual vehicle issue."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class WeightLimit(BaseModel):
    """
    Legal weight ceilings of one jurisdiction, in pounds.

    Attributes:
        jurisdiction: Two-letter code ('US' for the federal baseline)
        single_axle: Ceiling for a single axle
        tandem_axle: Ceiling for a tandem axle group
        tridem_axle: Ceiling for a tridem axle group
        gross_vehicle_weight: Ceiling for the whole vehicle
    """

    jurisdiction: str = Field(..., min_length=2, max_length=2)
    single_axle: int = Field(..., gt=0, description="Single axle ceiling in lbs")
    tandem_axle: int = Field(..., gt=0, description="Tandem axle ceiling in lbs")
    tridem_axle: int = Field(..., gt=0, description="Tridem axle ceiling in lbs")
    gross_vehicle_weight: int = Field(..., gt=0, description="Gross vehicle weight ceiling in lbs")

    def ceiling(self, axle_class: AxleClass) -> int:
        """Return the ceiling for the given axle class."""
        columns = {
            AxleClass.SINGLE_AXLE: self.single_axle,
            AxleClass.TANDEM_AXLE: self.tandem_axle,
            AxleClass.TRIDEM_AXLE: self.tridem_axle,
            AxleClass.GROSS_VEHICLE_WEIGHT: self.gross_vehicle_weight,
        }
        return columns[AxleClass(axle_class)]

    class Config:
        """Pydantic configuration."""
        frozen = True


class BridgeFormulaInput(BaseModel):
    """
    Consecutive axle group fed to the bridge formula.

    Attributes:
        axle_count: Number of axles in the group
        spacing_feet: Distance between the outer axles of the group
    """

    axle_count: int = Field(..., ge=1, description="Axles in the group")
    spacing_feet: float = Field(0.0, ge=0.0, allow_inf_nan=False, description="Outer-to-outer spacing in feet")

    class Config:
        """Pydantic configuration."""
        frozen = True


class ComplianceVerdict(BaseModel):
    """
    Result of classifying one weight against one ceiling.

    Attributes:
        status: Compliant, Warning or Non-Compliant
        weight_pounds: Observed weight
        applicable_limit: Ceiling the weight was graded against
        percent_of_limit: weight_pounds / applicable_limit * 100
        message: Human-readable explanation
        axle_class: Axle class that selected the ceiling
        jurisdiction: Jurisdiction code as requested (normalized)
        federal_limit: Federal ceiling for the same axle class
        state_limit: State ceiling, when one applied
        bridge_limit: Floored bridge formula ceiling, when one applied
    """

    status: ComplianceStatus
    weight_pounds: float
    applicable_limit: int
    percent_of_limit: float
    message: str
    axle_class: AxleClass
    jurisdiction: str
    federal_limit: int
    state_limit: Optional[int] = None
    bridge_limit: Optional[int] = None

    @property
    def is_compliant(self) -> bool:
        return self.status is not ComplianceStatus.NON_COMPLIANT

    class Config:
        """Pydantic configuration."""
        frozen = True


class VehicleConfiguration(BaseModel):
    """
    Axle layout and measured weights of one vehicle.

    Attributes:
        axle_weights: Weight on each axle, front to back (lbs)
        axle_spacings: Distance between consecutive axles (feet)
        gross_weight: Scale gross weight; defaults to the axle sum
    """

    axle_weights: List[float] = Field(..., min_length=1)
    axle_spacings: List[float] = Field(default_factory=list)
    gross_weight: Optional[float] = Field(None, allow_inf_nan=False, description="Gross weight in lbs")

    @field_validator('axle_weights', 'axle_spacings', mode='after')
    @classmethod
    def validate_non_negative(cls, v):
        """Ensure axle weights and spacings are finite and non-negative."""
        if any(not math.isfinite(value) or value < 0 for value in v):
            raise ValueError("Axle weights and spacings must be finite and non-negative")
        return v

    @field_validator('gross_weight', mode='after')
    @classmethod
    def validate_gross_weight(cls, v):
        """Ensure gross weight is non-negative if present."""
        if v is not None and v < 0:
            raise ValueError("Weight cannot be negative")
        return v

    @property
    def axle_count(self) -> int:
        return len(self.axle_weights)

    @property
    def effective_gross_weight(self) -> float:
        if self.gross_weight is not None:
            return self.gross_weight
        return sum(self.axle_weights)

    @property
    def outer_spacing(self) -> float:
        """Distance between the first and last axle, summed in decimal."""
        return float(sum(Decimal(str(spacing)) for spacing in self.axle_spacings))


class ComplianceIssue(BaseModel):
    """
    A single warning or violation found on a vehicle.

    Attributes:
        type: Machine-readable issue type, e.g. 'tandem_axle_weight_exceeded'
        description: Human-readable description
        severity: Medium for warnings, High for violations
        actual: Measured weight
        limit: Ceiling it was compared to
        over_weight: Pounds above the ceiling (0 for warnings)
        axle_index: First axle involved, when the issue is axle-specific
        recommendation: Suggested corrective action
    """

    type: str
    description: str
    severity: IssueSeverity
    actual: float
    limit: float
    over_weight: float = 0.0
    axle_index: Optional[int] = None
    recommendation: Optional[str] = None


class VehicleComplianceReport(BaseModel):
    """
    Outcome of checking a whole vehicle configuration.

    Attributes:
        status: Most severe status across all checks
        jurisdiction: Jurisdiction the limits came from
        gross_weight: Gross weight that was checked
        max_allowed_weight: Lower of the GVW and bridge formula ceilings
        over_weight: Pounds above max_allowed_weight (0 when within)
        issues: Every warning and violation found
    """

    status: ComplianceStatus
    jurisdiction: str
    gross_weight: float
    max_allowed_weight: int
    over_weight: float
    issues: List[ComplianceIssue] = Field(default_factory=list)

    @property
    def violations(self) -> List[ComplianceIssue]:
        return [
            issue for issue in self.issues
            if issue.severity in (IssueSeverity.HIGH, IssueSeverity.CRITICAL)
        ]
