"""Whole-vehicle validation."""

from .vehicle_validator import VehicleValidator

__all__ = ["VehicleValidator"]
