"""
Result models for scoring passes.

Immutable value objects for regimes, factor weights, composite scores and
pair signals. Every pass builds new instances; nothing is patched in place.
"""

from .regime import FactorWeights, MarketRegime
from .scores import (
    BiasDirection,
    CompositeCurrencyScore,
    ConfidenceTier,
    PairSignal,
    ScoringResult,
    StrengthTier,
)

__all__ = [
    "BiasDirection",
    "CompositeCurrencyScore",
    "ConfidenceTier",
    "FactorWeights",
    "MarketRegime",
    "PairSignal",
    "ScoringResult",
    "StrengthTier",
]
