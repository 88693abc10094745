"""Federal bridge formula.

W = 500 * (L*N / (N-1) + 12*N + 36)

where W is the maximum weight in pounds carried by a group of N
consecutive axles whose outer axles are L feet apart. A single axle has
no bridge constraint; that case is returned as NOT_APPLICABLE rather
than as a number.
"""

import logging
import math
from enum import Enum
from fractions import Fraction
from numbers import Integral, Real
from typing import Union

from ..errors import InvalidAxleCount, InvalidSpacing
from ..models.schema import BridgeFormulaInput

logger = logging.getLogger(__name__)


class BridgeFormulaResult(Enum):
    """Non-numeric outcome of the bridge formula."""

    NOT_APPLICABLE = "not_applicable"

    def __repr__(self) -> str:
        return self.name


NOT_APPLICABLE = BridgeFormulaResult.NOT_APPLICABLE


class BridgeFormulaEvaluator:
    """
    Computes the maximum legal weight of a consecutive axle group.
    """

    def __init__(self):
        """Initialize the evaluator."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def max_group_weight(
        self,
        axle_count: int,
        spacing_feet: float
    ) -> Union[float, BridgeFormulaResult]:
        """
        Maximum weight allowed on an axle group.

        Args:
            axle_count: Number of consecutive axles (>= 1)
            spacing_feet: Distance between the outer axles, in feet

        Returns:
            Maximum weight in pounds, or NOT_APPLICABLE for a single axle

        Raises:
            InvalidAxleCount: If axle_count is not a whole number >= 1
            InvalidSpacing: If spacing_feet is negative or non-finite
        """
        if isinstance(axle_count, bool) or not isinstance(axle_count, Integral) or axle_count < 1:
            raise InvalidAxleCount(f"Axle count must be a whole number >= 1, got {axle_count!r}")

        if axle_count == 1:
            return NOT_APPLICABLE

        if (
            isinstance(spacing_feet, bool)
            or not isinstance(spacing_feet, Real)
            or not math.isfinite(spacing_feet)
            or spacing_feet < 0
        ):
            raise InvalidSpacing(f"Axle spacing must be a finite number >= 0, got {spacing_feet!r}")

        n = int(axle_count)
        length = float(spacing_feet)
        weight = 500 * ((length * n) / (n - 1) + 12 * n + 36)

        self.logger.debug(f"Bridge formula: N={n}, L={length} ft -> {weight} lbs")
        return weight

    def max_group_weight_pounds(
        self,
        axle_count: int,
        spacing_feet: float
    ) -> Union[int, BridgeFormulaResult]:
        """
        Whole-pound bridge ceiling (floored).

        Legal limits are enforced as whole-pound ceilings, so the formula
        result is rounded down before it is compared to a scale reading.
        The floor is taken on the exact decimal value of the spacing, so
        2.3 ft on two axles gives 32300 lbs, not 32299.
        """
        weight = self.max_group_weight(axle_count, spacing_feet)
        if weight is NOT_APPLICABLE:
            return NOT_APPLICABLE

        n = int(axle_count)
        exact = 500 * (Fraction(str(spacing_feet)) * n / (n - 1) + 12 * n + 36)
        return math.floor(exact)

    def evaluate(self, group: BridgeFormulaInput) -> Union[float, BridgeFormulaResult]:
        """Apply the formula to a BridgeFormulaInput."""
        return self.max_group_weight(group.axle_count, group.spacing_feet)


_default_evaluator = BridgeFormulaEvaluator()


def max_group_weight(axle_count: int, spacing_feet: float) -> Union[float, BridgeFormulaResult]:
    """Module-level shortcut for BridgeFormulaEvaluator().max_group_weight."""
    return _default_evaluator.max_group_weight(axle_count, spacing_feet)
