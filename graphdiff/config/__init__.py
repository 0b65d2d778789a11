"""Configuration schema and validation for graphdiff."""

from .schema import CloneStrategyName, SymmetricDifferenceConfig

__all__ = [
    "CloneStrategyName",
    "SymmetricDifferenceConfig",
]
