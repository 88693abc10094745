"""Jurisdiction weight limit lookup.

This module resolves the legal ceiling for a jurisdiction and axle class
from the static rule data in state_limits.py. Unknown jurisdictions are
not an error: they resolve to the federal baseline.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..models.schema import AxleClass, WeightLimit
from .state_limits import FEDERAL_CODE, FEDERAL_WEIGHT_LIMIT, STATE_WEIGHT_LIMITS

logger = logging.getLogger(__name__)


def normalize_code(jurisdiction: Optional[Any]) -> str:
    """Strip and upper-case a jurisdiction code ('' for None)."""
    if jurisdiction is None:
        return ''
    return str(jurisdiction).strip().upper()


class LimitTable:
    """
    Read-only view over federal and state weight ceilings.

    The table is shared immutable data, so one instance can serve any
    number of callers.
    """

    def __init__(
        self,
        state_limits: Mapping[str, WeightLimit] = STATE_WEIGHT_LIMITS,
        federal_limit: WeightLimit = FEDERAL_WEIGHT_LIMIT
    ):
        """
        Initialize the limit table.

        Args:
            state_limits: Mapping of state code to WeightLimit
            federal_limit: Baseline used for any code not in state_limits
        """
        self.state_limits = state_limits
        self.federal_limit = federal_limit
        self.logger = logging.getLogger(self.__class__.__name__)

    def has_jurisdiction(self, jurisdiction: Optional[str]) -> bool:
        """Whether the code has its own entry in the table."""
        return normalize_code(jurisdiction) in self.state_limits

    def state_limit_for(self, jurisdiction: Optional[str]) -> Optional[WeightLimit]:
        """Return the state's own WeightLimit, or None when it has no entry."""
        return self.state_limits.get(normalize_code(jurisdiction))

    def weight_limit_for(self, jurisdiction: Optional[str]) -> WeightLimit:
        """
        Resolve the WeightLimit record for a jurisdiction.

        Args:
            jurisdiction: Two-letter code, case-insensitive

        Returns:
            The state's record, or the federal baseline when the code is
            federal, empty or unknown
        """
        code = normalize_code(jurisdiction)
        if code == FEDERAL_CODE:
            return self.federal_limit

        limit = self.state_limits.get(code)
        if limit is None:
            self.logger.debug(f"No entry for jurisdiction '{code}', using federal limits")
            return self.federal_limit

        return limit

    def limit_for(self, jurisdiction: Optional[str], axle_class: AxleClass) -> int:
        """
        Resolve the ceiling in pounds for a jurisdiction and axle class.

        Args:
            jurisdiction: Two-letter code, case-insensitive
            axle_class: Axle class selecting the ceiling column

        Returns:
            Ceiling in pounds
        """
        return self.weight_limit_for(jurisdiction).ceiling(axle_class)

    def federal_ceiling(self, axle_class: AxleClass) -> int:
        """Federal ceiling for an axle class."""
        return self.federal_limit.ceiling(axle_class)

    def jurisdictions(self) -> List[str]:
        """Sorted list of jurisdictions with their own entry."""
        return sorted(self.state_limits)


_default_table = LimitTable()


def limit_for(jurisdiction: Optional[str], axle_class: AxleClass) -> int:
    """Module-level shortcut for LimitTable().limit_for."""
    return _default_table.limit_for(jurisdiction, axle_class)


def weight_limit_for(jurisdiction: Optional[str]) -> WeightLimit:
    """Module-level shortcut for LimitTable().weight_limit_for."""
    return _default_table.weight_limit_for(jurisdiction)
