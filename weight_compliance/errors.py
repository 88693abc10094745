"""Error types raised by the compliance engine.

All of them derive from ``ValueError`` so callers that already guard
input parsing with ``except ValueError`` keep working.
"""


class ComplianceError(ValueError):
    """Base class for invalid compliance inputs."""


class InvalidWeight(ComplianceError):
    """Weight is negative, NaN, infinite or not a number."""


class InvalidAxleCount(ComplianceError):
    """Axle count is below one or not a whole number."""


class InvalidSpacing(ComplianceError):
    """Axle spacing is negative, non-finite, or does not match the axle list."""
