"""Input normalization."""

from .normalizer import WeightNormalizer

__all__ = ["WeightNormalizer"]
