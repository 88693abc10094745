"""Configuration settings for the compliance engine.

This module centralizes thresholds, unit conversions and output
settings so rule changes happen in one place.
"""

from pathlib import Path


class Config:
    """Application configuration."""

    # Application info
    APP_NAME = "Weight Compliance Engine"
    VERSION = "1.0.0"

    # Logging
    LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Compliance rules
    WARNING_THRESHOLD = 0.95  # Fraction of the limit at which a Warning starts
    FEDERAL_JURISDICTION = "US"
    TANDEM_MAX_SPACING_FT = 8.0  # Two axles this close are weighed as a tandem
    TRIDEM_MAX_SPACING_FT = 8.0  # Three axles whose total spread fits count as a tridem

    # Units
    KG_TO_LBS = 2.20462262185

    # Output settings
    OUTPUT_DIR = Path("output")
    JSON_INDENT = 2

    # Paths
    PROJECT_ROOT = Path(__file__).parent.parent

    @classmethod
    def get_output_dir(cls) -> Path:
        """Get output directory, creating if it doesn't exist."""
        output_dir = cls.PROJECT_ROOT / cls.OUTPUT_DIR
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir
