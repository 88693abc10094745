"""Static weight ceilings for the federal baseline and each state.

This module holds the raw rule data consulted by the limit table. Values
are in pounds and ordered as (single axle, tandem axle, tridem axle,
gross vehicle weight). States that simply adopt the federal ceilings are
listed anyway so the table covers all 50 states plus the District of
Columbia.
"""

from types import MappingProxyType
from typing import Dict, Tuple

from ..models.schema import WeightLimit

FEDERAL_CODE = "US"

# Federal baseline (23 CFR 658.17)
FEDERAL_CEILINGS: Tuple[int, int, int, int] = (20000, 34000, 42000, 80000)

# Per-state ceilings: single, tandem, tridem, gross
STATE_CEILINGS: Dict[str, Tuple[int, int, int, int]] = {
    'AL': (20000, 34000, 42000, 80000),
    'AK': (20000, 38000, 42000, 80000),
    'AZ': (20000, 34000, 42000, 80000),
    'AR': (20000, 34000, 42000, 80000),
    'CA': (20000, 34000, 42000, 80000),
    'CO': (20000, 36000, 42000, 85000),
    'CT': (22400, 36000, 42000, 80000),
    'DE': (20000, 34000, 42000, 80000),
    'DC': (21000, 37000, 42000, 80000),
    'FL': (22000, 44000, 66000, 80000),
    'GA': (20340, 34000, 42000, 80000),
    'HI': (22500, 34000, 42000, 88000),
    'ID': (20000, 34000, 42000, 105500),
    'IL': (20000, 34000, 42000, 80000),
    'IN': (20000, 34000, 42000, 80000),
    'IA': (20000, 34000, 42000, 80000),
    'KS': (20000, 34000, 42000, 85500),
    'KY': (20000, 34000, 42000, 80000),
    'LA': (20000, 34000, 42000, 80000),
    'ME': (20000, 34000, 42000, 100000),
    'MD': (22400, 34000, 42000, 80000),
    'MA': (22400, 36000, 42000, 80000),
    'MI': (20000, 34000, 42000, 164000),
    'MN': (20000, 34000, 42000, 80000),
    'MS': (20000, 34000, 42000, 80000),
    'MO': (20000, 34000, 42000, 80000),
    'MT': (20000, 34000, 42000, 131060),
    'NE': (20000, 34000, 42000, 95000),
    'NV': (20000, 34000, 42000, 129000),
    'NH': (22400, 36000, 42000, 80000),
    'NJ': (22400, 34000, 42000, 80000),
    'NM': (21600, 34320, 42000, 86400),
    'NY': (22400, 36000, 42000, 80000),
    'NC': (20000, 38000, 42000, 80000),
    'ND': (20000, 34000, 48000, 105500),
    'OH': (20000, 34000, 42000, 80000),
    'OK': (20000, 34000, 42000, 90000),
    'OR': (20000, 34000, 42000, 105500),
    'PA': (20000, 34000, 42000, 80000),
    'RI': (22400, 36000, 42000, 80000),
    'SC': (20000, 35200, 42000, 80000),
    'SD': (20000, 34000, 42000, 129000),
    'TN': (20000, 34000, 42000, 80000),
    'TX': (20000, 34000, 42000, 80000),
    'UT': (20000, 34000, 42000, 129000),
    'VT': (20000, 34000, 42000, 80000),
    'VA': (20000, 34000, 42000, 80000),
    'WA': (20000, 34000, 42000, 105500),
    'WV': (20000, 34000, 42000, 80000),
    'WI': (20000, 34000, 42000, 80000),
    'WY': (20000, 36000, 42000, 117000),
}


def _build_limit(code: str, ceilings: Tuple[int, int, int, int]) -> WeightLimit:
    single, tandem, tridem, gross = ceilings
    return WeightLimit(
        jurisdiction=code,
        single_axle=single,
        tandem_axle=tandem,
        tridem_axle=tridem,
        gross_vehicle_weight=gross,
    )


# Built once at import time
FEDERAL_WEIGHT_LIMIT = _build_limit(FEDERAL_CODE, FEDERAL_CEILINGS)

STATE_WEIGHT_LIMITS = MappingProxyType({
    code: _build_limit(code, ceilings)
    for code, ceilings in STATE_CEILINGS.items()
})
