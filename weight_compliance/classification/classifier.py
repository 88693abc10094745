"""Weight compliance classification.

This module grades a single weight reading against the applicable legal
ceiling and produces a ComplianceVerdict:

- Non-Compliant when the weight is strictly above the ceiling
- Warning when it is at or above 95% of the ceiling
- Compliant otherwise
"""

import logging
import math
from decimal import Decimal
from numbers import Integral, Real
from typing import Optional, Union

from ..bridge.bridge_formula import NOT_APPLICABLE, BridgeFormulaEvaluator
from ..config import Config
from ..errors import InvalidWeight
from ..limits.limit_table import LimitTable, normalize_code
from ..models.schema import AxleClass, ComplianceStatus, ComplianceVerdict, WeightLimit

logger = logging.getLogger(__name__)


def validate_weight(weight_pounds) -> float:
    """
    Check that a weight is a finite, non-negative number.

    Args:
        weight_pounds: Weight reading

    Returns:
        The weight as a float

    Raises:
        InvalidWeight: If the weight is not a number, negative, NaN or infinite
    """
    if isinstance(weight_pounds, bool) or not isinstance(weight_pounds, (Real, Decimal)):
        raise InvalidWeight(f"Weight must be a number, got {weight_pounds!r}")

    try:
        value = float(weight_pounds)
    except (OverflowError, ValueError):
        raise InvalidWeight(f"Weight is out of range: {weight_pounds!r}")
    if not math.isfinite(value):
        raise InvalidWeight(f"Weight must be finite, got {weight_pounds!r}")
    if value < 0:
        raise InvalidWeight(f"Weight cannot be negative, got {weight_pounds!r}")

    return value


def whole_pounds(limit) -> int:
    """
    Check that a ceiling is a positive whole number of pounds.

    Raises:
        ValueError: If the limit is not a number, not positive or has a
            fractional part
    """
    if isinstance(limit, bool) or not isinstance(limit, Real):
        raise ValueError(f"State limit must be a positive number, got {limit!r}")
    if not isinstance(limit, Integral):
        if not math.isfinite(limit) or not float(limit).is_integer():
            raise ValueError(f"State limit must be a whole number of pounds, got {limit!r}")
    pounds = int(limit)
    if pounds <= 0:
        raise ValueError(f"State limit must be a positive number, got {limit!r}")
    return pounds


def determine_status(
    weight_pounds: float,
    limit: float,
    warning_threshold: float = Config.WARNING_THRESHOLD
) -> ComplianceStatus:
    """Grade a weight against a ceiling."""
    if weight_pounds > limit:
        return ComplianceStatus.NON_COMPLIANT
    if weight_pounds >= limit * warning_threshold:
        return ComplianceStatus.WARNING
    return ComplianceStatus.COMPLIANT


def format_pounds(value: float) -> str:
    """Format a pound value with thousands separators, e.g. '80,000 lbs'."""
    if float(value).is_integer():
        return f"{int(value):,} lbs"
    return f"{value:,.1f} lbs"


class ComplianceClassifier:
    """
    Classifies weights against federal, state and bridge formula limits.

    The classifier keeps no mutable state; a single instance can be
    shared freely.
    """

    def __init__(
        self,
        limit_table: Optional[LimitTable] = None,
        bridge_evaluator: Optional[BridgeFormulaEvaluator] = None,
        warning_threshold: float = Config.WARNING_THRESHOLD
    ):
        """
        Initialize the classifier.

        Args:
            limit_table: Limit lookup (default: built-in federal/state table)
            bridge_evaluator: Bridge formula evaluator
            warning_threshold: Fraction of the limit at which Warning starts
        """
        self.limit_table = limit_table or LimitTable()
        self.bridge_evaluator = bridge_evaluator or BridgeFormulaEvaluator()
        self.warning_threshold = warning_threshold
        self.logger = logging.getLogger(self.__class__.__name__)

    def classify(
        self,
        weight_pounds: float,
        axle_class: AxleClass,
        jurisdiction_code: Optional[str],
        axle_count: Optional[int] = None,
        spacing_feet: Optional[float] = None
    ) -> ComplianceVerdict:
        """
        Classify a weight for an axle class in a jurisdiction.

        When axle_count is given, the bridge formula ceiling for that axle
        group also applies and the lower of the two ceilings governs. A
        single-axle group adds no bridge constraint.

        Args:
            weight_pounds: Measured weight in pounds
            axle_class: Axle class selecting the ceiling column
            jurisdiction_code: Two-letter code; unknown codes use federal limits
            axle_count: Optional number of axles in the group
            spacing_feet: Outer-to-outer spacing of the group, in feet

        Returns:
            ComplianceVerdict

        Raises:
            InvalidWeight: If the weight is not a finite, non-negative number
            InvalidAxleCount: If axle_count is below one
            InvalidSpacing: If a bridge check needs a spacing that is missing or invalid
        """
        weight = validate_weight(weight_pounds)
        axle_class = AxleClass(axle_class)
        code = normalize_code(jurisdiction_code)

        table_limit = self.limit_table.limit_for(code, axle_class)
        state_entry = self.limit_table.state_limit_for(code)
        state_limit = state_entry.ceiling(axle_class) if state_entry else None

        bridge_limit = None
        if axle_count is not None:
            bridge = self.bridge_evaluator.max_group_weight_pounds(axle_count, spacing_feet)
            if bridge is not NOT_APPLICABLE:
                bridge_limit = bridge

        applicable_limit = table_limit
        if bridge_limit is not None and bridge_limit < table_limit:
            applicable_limit = bridge_limit

        return self._build_verdict(
            weight=weight,
            axle_class=axle_class,
            jurisdiction=code,
            applicable_limit=applicable_limit,
            state_limit=state_limit,
            bridge_limit=bridge_limit,
            governed_by_bridge=applicable_limit != table_limit,
        )

    def classify_with_state_override(
        self,
        weight_pounds: float,
        axle_class: AxleClass,
        jurisdiction_code: Optional[str],
        state_limit: Optional[Union[int, WeightLimit]] = None
    ) -> ComplianceVerdict:
        """
        Classify a weight, letting a state limit replace the federal one.

        A state limit, when supplied or present in the table, is used
        outright even when it is more permissive than the federal
        ceiling. Without one the federal ceiling applies.

        Args:
            weight_pounds: Measured weight in pounds
            axle_class: Axle class selecting the ceiling column
            jurisdiction_code: Two-letter code
            state_limit: Ceiling in pounds or a WeightLimit record; looked
                up from the table when omitted

        Returns:
            ComplianceVerdict

        Raises:
            InvalidWeight: If the weight is not a finite, non-negative number
            ValueError: If an explicit state limit is not a positive whole number
        """
        weight = validate_weight(weight_pounds)
        axle_class = AxleClass(axle_class)
        code = normalize_code(jurisdiction_code)

        if isinstance(state_limit, WeightLimit):
            override = state_limit.ceiling(axle_class)
        elif state_limit is not None:
            override = whole_pounds(state_limit)
        else:
            state_entry = self.limit_table.state_limit_for(code)
            override = state_entry.ceiling(axle_class) if state_entry else None

        federal_limit = self.limit_table.federal_ceiling(axle_class)
        applicable_limit = override if override is not None else federal_limit

        return self._build_verdict(
            weight=weight,
            axle_class=axle_class,
            jurisdiction=code,
            applicable_limit=applicable_limit,
            state_limit=override,
        )

    def _build_verdict(
        self,
        weight: float,
        axle_class: AxleClass,
        jurisdiction: str,
        applicable_limit: int,
        state_limit: Optional[int] = None,
        bridge_limit: Optional[int] = None,
        governed_by_bridge: bool = False
    ) -> ComplianceVerdict:
        status = determine_status(weight, applicable_limit, self.warning_threshold)
        percent = weight / applicable_limit * 100

        if governed_by_bridge:
            limit_name = "bridge formula"
        else:
            limit_name = axle_class.label
        source = jurisdiction if state_limit is not None else "federal"

        message = self._format_message(status, weight, applicable_limit, percent, limit_name, source)

        verdict = ComplianceVerdict(
            status=status,
            weight_pounds=weight,
            applicable_limit=applicable_limit,
            percent_of_limit=percent,
            message=message,
            axle_class=axle_class,
            jurisdiction=jurisdiction,
            federal_limit=self.limit_table.federal_ceiling(axle_class),
            state_limit=state_limit,
            bridge_limit=bridge_limit,
        )

        self.logger.debug(f"{jurisdiction or '--'} {axle_class.value}: {message}")
        return verdict

    def _format_message(
        self,
        status: ComplianceStatus,
        weight: float,
        limit: int,
        percent: float,
        limit_name: str,
        source: str
    ) -> str:
        limit_text = f"{source} {limit_name} limit of {format_pounds(limit)}"

        if status is ComplianceStatus.NON_COMPLIANT:
            return (
                f"{status.value}: {format_pounds(weight)} exceeds the {limit_text} "
                f"by {format_pounds(weight - limit)} ({percent:.1f}% of limit)"
            )
        if status is ComplianceStatus.WARNING:
            return (
                f"{status.value}: {format_pounds(weight)} is approaching the {limit_text} "
                f"({percent:.1f}% of limit)"
            )
        return (
            f"{status.value}: {format_pounds(weight)} is within the {limit_text} "
            f"({percent:.1f}% of limit)"
        )


_default_classifier = ComplianceClassifier()


def classify(
    weight_pounds: float,
    axle_class: AxleClass,
    jurisdiction_code: Optional[str],
    axle_count: Optional[int] = None,
    spacing_feet: Optional[float] = None
) -> ComplianceVerdict:
    """Module-level shortcut for ComplianceClassifier().classify."""
    return _default_classifier.classify(
        weight_pounds, axle_class, jurisdiction_code, axle_count, spacing_feet
    )


def classify_with_state_override(
    weight_pounds: float,
    axle_class: AxleClass,
    jurisdiction_code: Optional[str],
    state_limit: Optional[Union[int, WeightLimit]] = None
) -> ComplianceVerdict:
    """Module-level shortcut for ComplianceClassifier().classify_with_state_override."""
    return _default_classifier.classify_with_state_override(
        weight_pounds, axle_class, jurisdiction_code, state_limit
    )
