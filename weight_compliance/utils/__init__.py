"""Utility modules."""

from .logger import setup_logger
from .io_handler import IOHandler

__all__ = ["setup_logger", "IOHandler"]
