"""Federal and state weight limit tables."""

from .limit_table import LimitTable, limit_for, weight_limit_for
from .state_limits import FEDERAL_CODE, FEDERAL_WEIGHT_LIMIT, STATE_WEIGHT_LIMITS

__all__ = [
    "LimitTable",
    "limit_for",
    "weight_limit_for",
    "FEDERAL_CODE",
    "FEDERAL_WEIGHT_LIMIT",
    "STATE_WEIGHT_LIMITS",
]
