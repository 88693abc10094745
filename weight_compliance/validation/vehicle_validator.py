"""Whole-vehicle compliance validation.

This module checks a full axle configuration against a jurisdiction's
limits and collects every warning and violation:

- each axle against the single axle ceiling
- closely spaced axle pairs against the tandem ceiling
- closely spaced axle triples against the tridem ceiling
- the gross weight against the gross vehicle weight ceiling
- the gross weight against the bridge formula over all axles
"""

import logging
from typing import List, Optional

from ..bridge.bridge_formula import NOT_APPLICABLE, BridgeFormulaEvaluator
from ..classification.classifier import determine_status, format_pounds
from ..config import Config
from ..errors import InvalidSpacing
from ..limits.limit_table import LimitTable, normalize_code
from ..models.schema import (
    AxleClass,
    ComplianceIssue,
    ComplianceStatus,
    IssueSeverity,
    VehicleComplianceReport,
    VehicleConfiguration,
)

logger = logging.getLogger(__name__)


class VehicleValidator:
    """
    Validates a vehicle's axle weights and spacings.

    Performs:
    - Single, tandem and tridem axle checks
    - Gross vehicle weight check
    - Bridge formula check
    """

    def __init__(
        self,
        limit_table: Optional[LimitTable] = None,
        bridge_evaluator: Optional[BridgeFormulaEvaluator] = None,
        warning_threshold: float = Config.WARNING_THRESHOLD,
        tandem_max_spacing_ft: float = Config.TANDEM_MAX_SPACING_FT,
        tridem_max_spacing_ft: float = Config.TRIDEM_MAX_SPACING_FT
    ):
        """
        Initialize the validator.

        Args:
            limit_table: Limit lookup (default: built-in federal/state table)
            bridge_evaluator: Bridge formula evaluator
            warning_threshold: Fraction of a limit at which a warning is raised
            tandem_max_spacing_ft: Widest spacing at which two axles form a tandem
            tridem_max_spacing_ft: Widest total spread at which three axles form a tridem
        """
        self.limit_table = limit_table or LimitTable()
        self.bridge_evaluator = bridge_evaluator or BridgeFormulaEvaluator()
        self.warning_threshold = warning_threshold
        self.tandem_max_spacing_ft = tandem_max_spacing_ft
        self.tridem_max_spacing_ft = tridem_max_spacing_ft
        self.logger = logging.getLogger(self.__class__.__name__)

    def validate(
        self,
        vehicle: VehicleConfiguration,
        jurisdiction: Optional[str] = None
    ) -> VehicleComplianceReport:
        """
        Validate a vehicle configuration.

        Args:
            vehicle: Axle weights, spacings and optional gross weight
            jurisdiction: Two-letter code; unknown codes use federal limits

        Returns:
            VehicleComplianceReport with every issue found

        Raises:
            InvalidSpacing: If the spacing list does not have one entry
                between each pair of consecutive axles
        """
        weights = vehicle.axle_weights
        spacings = vehicle.axle_spacings

        if len(spacings) != len(weights) - 1:
            raise InvalidSpacing(
                f"Expected {len(weights) - 1} axle spacing(s) for {len(weights)} axle(s), "
                f"got {len(spacings)}"
            )

        code = normalize_code(jurisdiction)
        limits = self.limit_table.weight_limit_for(code)
        gross = vehicle.effective_gross_weight
        issues: List[ComplianceIssue] = []

        self.logger.debug(f"Validating {len(weights)}-axle vehicle in {code or '--'}")

        # Single axle weights
        for index, weight in enumerate(weights):
            issue = self._check(
                kind='single_axle_weight',
                subject=f"Axle {index + 1}",
                actual=weight,
                limit=limits.ceiling(AxleClass.SINGLE_AXLE),
                limit_name='single axle limit',
                axle_index=index,
                recommendation='redistribute load to reduce weight on this axle',
            )
            if issue:
                issues.append(issue)

        # Tandem pairs (two consecutive axles spaced closely)
        for index in range(len(weights) - 1):
            if spacings[index] <= self.tandem_max_spacing_ft:
                issue = self._check(
                    kind='tandem_axle_weight',
                    subject=f"Tandem axles {index + 1}-{index + 2}",
                    actual=weights[index] + weights[index + 1],
                    limit=limits.ceiling(AxleClass.TANDEM_AXLE),
                    limit_name='tandem axle limit',
                    axle_index=index,
                    recommendation='redistribute load to reduce weight on these axles',
                )
                if issue:
                    issues.append(issue)

        # Tridem groups (three consecutive axles)
        for index in range(len(weights) - 2):
            if spacings[index] + spacings[index + 1] <= self.tridem_max_spacing_ft:
                issue = self._check(
                    kind='tridem_axle_weight',
                    subject=f"Tridem axles {index + 1}-{index + 3}",
                    actual=sum(weights[index:index + 3]),
                    limit=limits.ceiling(AxleClass.TRIDEM_AXLE),
                    limit_name='tridem axle limit',
                    axle_index=index,
                    recommendation='redistribute load to reduce weight on these axles',
                )
                if issue:
                    issues.append(issue)

        # Gross vehicle weight
        gross_limit = limits.ceiling(AxleClass.GROSS_VEHICLE_WEIGHT)
        issue = self._check(
            kind='gross_weight',
            subject='Gross weight',
            actual=gross,
            limit=gross_limit,
            limit_name='gross vehicle weight limit',
            recommendation='reduce load to comply with the gross weight limit',
        )
        if issue:
            issues.append(issue)

        # Bridge formula over the whole axle set
        max_allowed = gross_limit
        bridge_limit = self.bridge_evaluator.max_group_weight_pounds(
            vehicle.axle_count, vehicle.outer_spacing
        )
        if bridge_limit is not NOT_APPLICABLE:
            issue = self._check(
                kind='bridge_formula',
                subject=(
                    f"Gross weight over {vehicle.axle_count} axles "
                    f"spanning {vehicle.outer_spacing:.1f} ft"
                ),
                actual=gross,
                limit=bridge_limit,
                limit_name='bridge formula limit',
                recommendation='increase axle spacing or reduce total weight',
            )
            if issue:
                issues.append(issue)
            max_allowed = min(gross_limit, bridge_limit)

        status = ComplianceStatus.worst(
            ComplianceStatus.NON_COMPLIANT if i.severity == IssueSeverity.HIGH
            else ComplianceStatus.WARNING
            for i in issues
        )

        report = VehicleComplianceReport(
            status=status,
            jurisdiction=code,
            gross_weight=gross,
            max_allowed_weight=max_allowed,
            over_weight=max(0.0, gross - max_allowed),
            issues=issues,
        )

        # Log validation summary
        self.logger.info(
            f"Vehicle validation complete: status={status.value}, "
            f"issues={len(issues)}, max_allowed={max_allowed}"
        )

        for item in issues:
            if item.severity == IssueSeverity.HIGH:
                self.logger.warning(f"Compliance violation: {item.description}")

        return report

    def _check(
        self,
        kind: str,
        subject: str,
        actual: float,
        limit: int,
        recommendation: str,
        limit_name: str,
        axle_index: Optional[int] = None
    ) -> Optional[ComplianceIssue]:
        """Grade one measurement; return an issue unless it is Compliant."""
        status = determine_status(actual, limit, self.warning_threshold)

        if status is ComplianceStatus.NON_COMPLIANT:
            return ComplianceIssue(
                type=f"{kind}_exceeded",
                description=(
                    f"{subject} of {format_pounds(actual)} exceeds "
                    f"the {limit_name} of {format_pounds(limit)}"
                ),
                severity=IssueSeverity.HIGH,
                actual=actual,
                limit=limit,
                over_weight=actual - limit,
                axle_index=axle_index,
                recommendation=recommendation.capitalize(),
            )

        if status is ComplianceStatus.WARNING:
            return ComplianceIssue(
                type=f"{kind}_warning",
                description=(
                    f"{subject} of {format_pounds(actual)} is approaching "
                    f"the {limit_name} of {format_pounds(limit)}"
                ),
                severity=IssueSeverity.MEDIUM,
                actual=actual,
                limit=limit,
                axle_index=axle_index,
                recommendation=f"To stay compliant, {recommendation}",
            )

        return None
