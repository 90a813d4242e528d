"""
FX Macro - Currency Strength Scoring Engine

Scores currency strength from macro indicators (rate policy, growth momentum,
real interest rates, risk appetite and positioning) under a detected market
regime, and derives pairwise trading bias signals from the composite scores.
"""

from .data.models import (
    CrossAssetReturn,
    CurrencyInputs,
    EmploymentReading,
    GrowthMomentumInput,
    MarketSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityObservation,
)
from .engine import MacroScoringEngine
from .metrics.percentile import percentile_rank
from .models import (
    BiasDirection,
    CompositeCurrencyScore,
    ConfidenceTier,
    FactorWeights,
    MarketRegime,
    PairSignal,
    ScoringResult,
    StrengthTier,
)
from .regime import detect_regime, get_weights
from .scoring import score_currency
from .signals import generate_signal

__version__ = "0.1.0"
__author__ = "FX Macro Team"

__all__ = [
    "BiasDirection",
    "CompositeCurrencyScore",
    "ConfidenceTier",
    "CrossAssetReturn",
    "CurrencyInputs",
    "EmploymentReading",
    "FactorWeights",
    "GrowthMomentumInput",
    "MacroScoringEngine",
    "MarketRegime",
    "MarketSnapshot",
    "PairSignal",
    "PositioningInput",
    "RatePolicyInput",
    "RealRateInput",
    "ScoringResult",
    "StrengthTier",
    "VolatilityObservation",
    "detect_regime",
    "generate_signal",
    "get_weights",
    "percentile_rank",
    "score_currency",
]
