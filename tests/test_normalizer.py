"""Tests for input normalization module."""

import math
import pytest
from decimal import Decimal
from weight_compliance.errors import InvalidAxleCount, InvalidWeight
from weight_compliance.models.schema import AxleClass
from weight_compliance.normalization.normalizer import WeightNormalizer


class TestWeightNormalizer:
    """Test suite for WeightNormalizer class."""

    @pytest.fixture
    def normalizer(self):
        """Fixture to provide WeightNormalizer instance."""
        return WeightNormalizer()

    def test_parse_weight_with_separators(self, normalizer):
        """Test weight parsing with comma and space separators."""
        test_cases = [
            ("32,500", 32500.0),
            ("79 000", 79000.0),
            ("80000", 80000.0),
            ("12,480.5", 12480.5),
        ]

        for input_str, expected in test_cases:
            assert normalizer.parse_weight(input_str) == expected

    def test_parse_weight_with_pound_units(self, normalizer):
        """Test weight parsing with pound unit suffixes."""
        test_cases = [
            ("32,500 lbs", 32500.0),
            ("32500lb", 32500.0),
            ("20,000 LBS.", 20000.0),
            ("34000 pounds", 34000.0),
            ("1500#", 1500.0),
        ]

        for input_str, expected in test_cases:
            assert normalizer.parse_weight(input_str) == expected

    def test_parse_weight_kilograms(self, normalizer):
        """Test kilogram conversion from suffix and explicit unit."""
        assert normalizer.parse_weight("1000 kg") == pytest.approx(2204.62262185)
        assert normalizer.parse_weight("14 740 kgs") == pytest.approx(14740 * 2.20462262185)
        assert normalizer.parse_weight(1000, unit="kg") == pytest.approx(2204.62262185)

    def test_parse_weight_numbers(self, normalizer):
        """Test numeric inputs pass through as floats."""
        assert normalizer.parse_weight(79000) == 79000.0
        assert normalizer.parse_weight(Decimal("81000.5")) == 81000.5
        assert normalizer.parse_weight(0) == 0.0

    def test_parse_weight_invalid(self, normalizer):
        """Test strict parsing of invalid input."""
        invalid_inputs = [None, "", "   ", "abc", "12,abc", "-500", -1, "NaN", math.inf, True, "lbs"]

        for invalid_input in invalid_inputs:
            with pytest.raises(InvalidWeight):
                normalizer.parse_weight(invalid_input)

    def test_parse_weight_out_of_range(self, normalizer):
        """Test numbers too large for a float, and signaling NaN."""
        for invalid_input in (10 ** 400, Decimal("sNaN"), "sNaN"):
            with pytest.raises(InvalidWeight):
                normalizer.parse_weight(invalid_input)

        assert normalizer.normalize_weight(10 ** 400) is None

    def test_normalize_weight_lenient(self, normalizer):
        """Test lenient normalization returns None for invalid input."""
        invalid_inputs = [None, "", "abc", "12,abc", "-500"]

        for invalid_input in invalid_inputs:
            assert normalizer.normalize_weight(invalid_input) is None

        assert normalizer.normalize_weight("32,500 lbs") == 32500.0

    def test_normalize_axle_class(self, normalizer):
        """Test axle class spellings."""
        test_cases = [
            ("SINGLE_AXLE", AxleClass.SINGLE_AXLE),
            ("single", AxleClass.SINGLE_AXLE),
            ("Steering", AxleClass.SINGLE_AXLE),
            ("tandem axle", AxleClass.TANDEM_AXLE),
            ("tandem-axle", AxleClass.TANDEM_AXLE),
            ("TRIDEM", AxleClass.TRIDEM_AXLE),
            ("gross_vehicle_weight", AxleClass.GROSS_VEHICLE_WEIGHT),
            ("GVW", AxleClass.GROSS_VEHICLE_WEIGHT),
            (AxleClass.TANDEM_AXLE, AxleClass.TANDEM_AXLE),
        ]

        for input_value, expected in test_cases:
            assert normalizer.normalize_axle_class(input_value) is expected

    def test_normalize_axle_class_invalid(self, normalizer):
        """Test unknown axle classes are rejected."""
        for invalid_input in [None, "", "quad", "steer axle group"]:
            with pytest.raises(ValueError):
                normalizer.normalize_axle_class(invalid_input)

    def test_normalize_jurisdiction(self, normalizer):
        """Test jurisdiction code cleanup."""
        test_cases = [
            ("tx", "TX"),
            (" co ", "CO"),
            ("", "US"),
            (None, "US"),
            ("zz", "ZZ"),
        ]

        for input_value, expected in test_cases:
            assert normalizer.normalize_jurisdiction(input_value) == expected

    def test_normalize_axle_count(self, normalizer):
        """Test axle count normalization."""
        assert normalizer.normalize_axle_count("3") == 3
        assert normalizer.normalize_axle_count(5.0) == 5
        assert normalizer.normalize_axle_count(None) is None
        assert normalizer.normalize_axle_count("") is None

        for invalid_input in ["2.5", "three", 1.5]:
            with pytest.raises(InvalidAxleCount):
                normalizer.normalize_axle_count(invalid_input)

    def test_normalize_optional_number(self, normalizer):
        """Test optional numeric fields."""
        assert normalizer.normalize_optional_number("30") == 30.0
        assert normalizer.normalize_optional_number("1,200") == 1200.0
        assert normalizer.normalize_optional_number(None) is None

        with pytest.raises(ValueError):
            normalizer.normalize_optional_number("thirty")

        with pytest.raises(ValueError):
            normalizer.normalize_optional_number(10 ** 400)
