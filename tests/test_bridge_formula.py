"""Tests for the bridge formula evaluator."""

import math

import pytest
from weight_compliance.bridge.bridge_formula import (
    NOT_APPLICABLE,
    BridgeFormulaEvaluator,
    max_group_weight,
)
from weight_compliance.errors import InvalidAxleCount, InvalidSpacing
from weight_compliance.models.schema import BridgeFormulaInput


class TestBridgeFormulaEvaluator:
    """Test suite for BridgeFormulaEvaluator class."""

    @pytest.fixture
    def evaluator(self):
        """Fixture to provide BridgeFormulaEvaluator instance."""
        return BridgeFormulaEvaluator()

    def test_three_axles_thirty_feet(self, evaluator):
        """Test W = 500 * (30*3/2 + 36 + 36) = 58500."""
        assert evaluator.max_group_weight(3, 30) == pytest.approx(58500)

    def test_known_values(self, evaluator):
        """Test the formula against hand-computed values."""
        test_cases = [
            # (axles, spacing, expected)
            (2, 4, 34000),   # 500 * (8 + 24 + 36)
            (2, 0, 30000),   # 500 * (0 + 24 + 36)
            (5, 51, 79875),  # 500 * (63.75 + 60 + 36)
        ]

        for axles, spacing, expected in test_cases:
            assert evaluator.max_group_weight(axles, spacing) == pytest.approx(expected)

    def test_single_axle_not_applicable(self, evaluator):
        """Test that one axle yields the sentinel, never a number."""
        for spacing in (0, 4.5, 100, None):
            result = evaluator.max_group_weight(1, spacing)
            assert result is NOT_APPLICABLE

    def test_sentinel_does_not_compare_as_number(self, evaluator):
        """Test that the sentinel cannot be mistaken for a weight."""
        result = evaluator.max_group_weight(1, 10)

        with pytest.raises(TypeError):
            _ = 50000 > result

    def test_invalid_axle_count(self, evaluator):
        """Test rejection of axle counts below one or non-integers."""
        for bad_count in (0, -2, 2.5, None, True):
            with pytest.raises(InvalidAxleCount):
                evaluator.max_group_weight(bad_count, 10)

    def test_invalid_spacing(self, evaluator):
        """Test rejection of negative, missing or non-finite spacing."""
        for bad_spacing in (-1, math.nan, math.inf, None):
            with pytest.raises(InvalidSpacing):
                evaluator.max_group_weight(2, bad_spacing)

    def test_pounds_are_floored(self, evaluator):
        """Test whole-pound ceiling rounds down."""
        # 500 * (10.15*3/2 + 36 + 36) = 43612.5
        assert evaluator.max_group_weight_pounds(3, 10.15) == 43612
        assert evaluator.max_group_weight_pounds(1, 10) is NOT_APPLICABLE

    def test_pounds_exact_for_decimal_spacings(self, evaluator):
        """Test that whole-pound results are not lost to float rounding."""
        test_cases = [
            # (axles, spacing, expected)
            (2, 2.3, 32300),   # 500 * (4.6 + 24 + 36)
            (2, 34.1, 64100),  # 500 * (68.2 + 24 + 36)
            (2, 34.6, 64600),  # 500 * (69.2 + 24 + 36)
            (4, 10.5, 49000),  # 500 * (14 + 48 + 36)
        ]

        for axles, spacing, expected in test_cases:
            assert evaluator.max_group_weight_pounds(axles, spacing) == expected

    def test_evaluate_input_model(self, evaluator):
        """Test evaluation of a BridgeFormulaInput."""
        group = BridgeFormulaInput(axle_count=3, spacing_feet=30)

        assert evaluator.evaluate(group) == pytest.approx(58500)
        assert evaluator.evaluate(BridgeFormulaInput(axle_count=1)) is NOT_APPLICABLE

    def test_module_shortcut(self):
        """Test the module-level max_group_weight function."""
        assert max_group_weight(3, 30) == pytest.approx(58500)
