"""Input normalization utilities.

This module turns raw inputs (scale read-outs, form fields, stored
records) into the strict values the classifier expects: weights in
pounds, AxleClass members and upper-case jurisdiction codes.
"""

import re
import math
import logging
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Optional, Any

from ..config import Config
from ..errors import InvalidAxleCount, InvalidWeight
from ..models.schema import AxleClass

logger = logging.getLogger(__name__)

# Unit suffix at the end of a weight string
UNIT_PATTERN = re.compile(r'(?i)\s*(lbs?|pounds?|kgs?|kilograms?|#)\.?\s*$')

AXLE_CLASS_ALIASES = {
    'single': AxleClass.SINGLE_AXLE,
    'single axle': AxleClass.SINGLE_AXLE,
    'steering': AxleClass.SINGLE_AXLE,
    'tandem': AxleClass.TANDEM_AXLE,
    'tandem axle': AxleClass.TANDEM_AXLE,
    'tridem': AxleClass.TRIDEM_AXLE,
    'tridem axle': AxleClass.TRIDEM_AXLE,
    'gross': AxleClass.GROSS_VEHICLE_WEIGHT,
    'gvw': AxleClass.GROSS_VEHICLE_WEIGHT,
    'gross vehicle weight': AxleClass.GROSS_VEHICLE_WEIGHT,
    'gross weight': AxleClass.GROSS_VEHICLE_WEIGHT,
}


class WeightNormalizer:
    """
    Normalizes raw compliance inputs.

    Handles:
    - Weight strings with separators and units ("32,500 lbs", "14 740 kg")
    - Kilogram to pound conversion
    - Loose axle class spellings ("tandem", "GVW")
    - Jurisdiction code cleanup
    """

    def __init__(self, kg_to_lbs: float = Config.KG_TO_LBS):
        """
        Initialize the normalizer.

        Args:
            kg_to_lbs: Conversion factor from kilograms to pounds
        """
        self.kg_to_lbs = kg_to_lbs
        self.logger = logging.getLogger(self.__class__.__name__)

    def normalize_weight(self, value: Any, unit: Optional[str] = None) -> Optional[float]:
        """
        Normalize a weight to pounds, leniently.

        Handles:
        - Comma removal (32,500 -> 32500)
        - Space removal (32 500 -> 32500)
        - Unit suffixes (lbs, lb, kg, kgs)

        Args:
            value: Raw weight (number or string)
            unit: Unit of a bare number ('lbs' or 'kg'); a suffix in the
                string takes precedence

        Returns:
            Weight in pounds, or None if empty, invalid or negative
        """
        try:
            return self.parse_weight(value, unit)
        except InvalidWeight as e:
            self.logger.warning(f"Could not normalize weight {value!r}: {e}")
            return None

    def parse_weight(self, value: Any, unit: Optional[str] = None) -> float:
        """
        Parse a weight to pounds, strictly.

        Args:
            value: Raw weight (number or string)
            unit: Unit of a bare number ('lbs' or 'kg')

        Returns:
            Weight in pounds

        Raises:
            InvalidWeight: If the value is empty, unparseable, negative or non-finite
        """
        if value is None or isinstance(value, bool):
            raise InvalidWeight(f"Weight must be a number, got {value!r}")

        if isinstance(value, (Real, Decimal)):
            try:
                number = float(value)
            except (OverflowError, ValueError):
                raise InvalidWeight(f"Weight is out of range: {value!r}")
        else:
            text = str(value).strip()
            if not text:
                raise InvalidWeight("Weight is empty")

            unit_match = UNIT_PATTERN.search(text)
            if unit_match:
                unit = unit_match.group(1)
                text = text[:unit_match.start()]

            cleaned = re.sub(r'[,\s]', '', text)
            try:
                number = float(Decimal(cleaned))
            except (InvalidOperation, ValueError):
                raise InvalidWeight(f"Weight is not a number: {value!r}")

        if not math.isfinite(number):
            raise InvalidWeight(f"Weight must be finite, got {value!r}")
        if number < 0:
            raise InvalidWeight(f"Weight cannot be negative, got {value!r}")

        if unit and unit.lower().startswith('k'):
            pounds = number * self.kg_to_lbs
            self.logger.debug(f"Converted {number} kg -> {pounds:.1f} lbs")
            return pounds

        return number

    def normalize_axle_class(self, value: Any) -> AxleClass:
        """
        Normalize an axle class.

        Accepts AxleClass members, their values ('TANDEM_AXLE') and common
        spellings ('tandem', 'GVW', 'gross vehicle weight').

        Raises:
            ValueError: If the value names no known axle class
        """
        if isinstance(value, AxleClass):
            return value
        if value is None:
            raise ValueError("Axle class is required")

        text = str(value).strip()
        try:
            return AxleClass(text.upper())
        except ValueError:
            pass

        key = re.sub(r'[_\-\s]+', ' ', text.lower()).strip()
        if key in AXLE_CLASS_ALIASES:
            return AXLE_CLASS_ALIASES[key]

        raise ValueError(f"Unknown axle class: {value!r}")

    def normalize_jurisdiction(self, value: Any) -> str:
        """
        Normalize a jurisdiction code.

        Returns:
            Upper-case code, or the federal code when empty
        """
        if value is None:
            return Config.FEDERAL_JURISDICTION

        normalized = re.sub(r'\s+', '', str(value)).upper()
        return normalized if normalized else Config.FEDERAL_JURISDICTION

    def normalize_axle_count(self, value: Any) -> Optional[int]:
        """
        Normalize an optional axle count ("3", 3.0 -> 3).

        Raises:
            InvalidAxleCount: If the value is present but not a whole number
        """
        try:
            number = self.normalize_optional_number(value)
        except ValueError:
            raise InvalidAxleCount(f"Axle count must be a whole number, got {value!r}")

        if number is None:
            return None
        if not math.isfinite(number) or not number.is_integer():
            raise InvalidAxleCount(f"Axle count must be a whole number, got {value!r}")
        return int(number)

    def normalize_optional_number(self, value: Any) -> Optional[float]:
        """Normalize an optional numeric field (None/'' -> None)."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            if isinstance(value, (Real, Decimal)) and not isinstance(value, bool):
                return float(value)
            return float(Decimal(re.sub(r'[,\s]', '', str(value))))
        except (InvalidOperation, OverflowError, ValueError):
            raise ValueError(f"Not a number: {value!r}")
