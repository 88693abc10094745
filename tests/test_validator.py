"""Tests for whole-vehicle validation module."""

import pytest
from pydantic import ValidationError
from weight_compliance.errors import InvalidSpacing
from weight_compliance.models.schema import (
    ComplianceStatus,
    IssueSeverity,
    VehicleConfiguration,
)
from weight_compliance.validation.vehicle_validator import VehicleValidator

# Steer axle, drive tandem, trailer tandem
TRACTOR_TRAILER_SPACINGS = [14, 4.5, 30, 4.5]


class TestVehicleValidator:
    """Test suite for VehicleValidator class."""

    @pytest.fixture
    def validator(self):
        """Fixture to provide VehicleValidator instance."""
        return VehicleValidator()

    def test_validate_compliant_tractor_trailer(self, validator):
        """Test a five-axle vehicle well within every limit."""
        vehicle = VehicleConfiguration(
            axle_weights=[12000, 15500, 15500, 15500, 15500],
            axle_spacings=TRACTOR_TRAILER_SPACINGS,
        )

        report = validator.validate(vehicle, "TX")

        assert report.status is ComplianceStatus.COMPLIANT
        assert report.issues == []
        assert report.gross_weight == 74000
        # Bridge: 500 * (53*5/4 + 60 + 36) = 81125, so GVW governs
        assert report.max_allowed_weight == 80000
        assert report.over_weight == 0

    def test_validate_overweight_vehicle(self, validator):
        """Test a vehicle that breaks axle, tandem, gross and bridge limits."""
        vehicle = VehicleConfiguration(
            axle_weights=[12000, 21000, 17000, 17000, 17000],
            axle_spacings=TRACTOR_TRAILER_SPACINGS,
        )

        report = validator.validate(vehicle, "TX")
        types = {issue.type for issue in report.issues}

        assert report.status is ComplianceStatus.NON_COMPLIANT
        assert types == {
            'single_axle_weight_exceeded',
            'tandem_axle_weight_exceeded',
            'tandem_axle_weight_warning',
            'gross_weight_exceeded',
            'bridge_formula_exceeded',
        }
        assert report.over_weight == 4000
        assert len(report.violations) == 4

    def test_axle_violation_details(self, validator):
        """Test the single axle violation record."""
        vehicle = VehicleConfiguration(
            axle_weights=[12000, 21000, 17000, 17000, 17000],
            axle_spacings=TRACTOR_TRAILER_SPACINGS,
        )

        report = validator.validate(vehicle, "TX")
        axle_issue = next(i for i in report.issues if i.type == 'single_axle_weight_exceeded')

        assert axle_issue.axle_index == 1
        assert axle_issue.actual == 21000
        assert axle_issue.limit == 20000
        assert axle_issue.over_weight == 1000
        assert axle_issue.severity is IssueSeverity.HIGH
        assert axle_issue.recommendation

    def test_bridge_formula_governs_tight_group(self, validator):
        """Test a closely spaced three-axle group held to its bridge limit."""
        vehicle = VehicleConfiguration(
            axle_weights=[15000, 15000, 15000],
            axle_spacings=[4, 4],
        )

        report = validator.validate(vehicle, "TX")
        types = {issue.type for issue in report.issues}

        # Bridge: 500 * (8*3/2 + 36 + 36) = 42000
        assert report.max_allowed_weight == 42000
        assert report.over_weight == 3000
        assert 'bridge_formula_exceeded' in types
        assert 'tridem_axle_weight_exceeded' in types
        assert report.status is ComplianceStatus.NON_COMPLIANT

    def test_bridge_limit_with_decimal_spacings(self, validator):
        """Test a vehicle loaded exactly to its bridge limit."""
        vehicle = VehicleConfiguration(
            axle_weights=[17075, 17075, 17075],
            axle_spacings=[10.1, 10.2],
        )

        report = validator.validate(vehicle, "TX")

        # Bridge: 500 * (20.3*3/2 + 36 + 36) = 51225
        assert vehicle.outer_spacing == 20.3
        assert report.max_allowed_weight == 51225
        assert report.over_weight == 0
        assert [issue.type for issue in report.issues] == ['bridge_formula_warning']
        assert report.status is ComplianceStatus.WARNING

    def test_state_limits_applied(self, validator):
        """Test the same vehicle in Texas and in Colorado."""
        vehicle = VehicleConfiguration(
            axle_weights=[12000, 17000, 17000, 17000, 17000],
            axle_spacings=[20, 4.5, 35, 4.5],
        )

        texas = validator.validate(vehicle, "TX")
        colorado = validator.validate(vehicle, "co")

        assert texas.status is ComplianceStatus.WARNING
        assert all(i.severity is IssueSeverity.MEDIUM for i in texas.issues)
        assert colorado.status is ComplianceStatus.COMPLIANT
        assert colorado.max_allowed_weight == 85000
        assert colorado.jurisdiction == "CO"

    def test_unknown_jurisdiction_uses_federal(self, validator):
        """Test validation against federal limits for an unknown code."""
        vehicle = VehicleConfiguration(axle_weights=[21000])

        report = validator.validate(vehicle, "ZZ")

        assert report.status is ComplianceStatus.NON_COMPLIANT
        assert report.max_allowed_weight == 80000

    def test_single_axle_vehicle_has_no_bridge_check(self, validator):
        """Test that a one-axle vehicle skips the bridge formula."""
        vehicle = VehicleConfiguration(axle_weights=[15000])

        report = validator.validate(vehicle)

        assert report.status is ComplianceStatus.COMPLIANT
        assert not any(i.type.startswith('bridge') for i in report.issues)

    def test_explicit_gross_weight(self, validator):
        """Test that a scale gross weight replaces the axle sum."""
        vehicle = VehicleConfiguration(
            axle_weights=[12000, 15500, 15500, 15500, 15500],
            axle_spacings=TRACTOR_TRAILER_SPACINGS,
            gross_weight=81000,
        )

        report = validator.validate(vehicle, "TX")

        assert report.gross_weight == 81000
        assert report.over_weight == 1000
        assert any(i.type == 'gross_weight_exceeded' for i in report.issues)

    def test_spacing_count_mismatch(self, validator):
        """Test that spacings must match the axle count."""
        vehicle = VehicleConfiguration(axle_weights=[12000, 17000, 17000], axle_spacings=[14])

        with pytest.raises(InvalidSpacing):
            validator.validate(vehicle, "TX")

    def test_negative_axle_weight_rejected(self):
        """Test model validation of axle weights."""
        with pytest.raises(ValidationError):
            VehicleConfiguration(axle_weights=[12000, -5])

        with pytest.raises(ValidationError):
            VehicleConfiguration(axle_weights=[])
