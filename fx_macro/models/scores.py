"""Composite currency scores, pair signals and the result of a scoring pass."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional

from .regime import FactorWeights, MarketRegime


class BiasDirection(str, Enum):
    """Which side of a pair the differential favours."""
    BUY_A = "BUY_A"                     # Buy first currency, sell second
    BUY_B = "BUY_B"                     # Buy second currency, sell first
    NEUTRAL = "NEUTRAL"


class StrengthTier(str, Enum):
    """Signal strength by absolute score differential."""
    VERY_STRONG = "VERY_STRONG"
    STRONG = "STRONG"
    MODERATE = "MODERATE"
    WEAK = "WEAK"
    NEUTRAL = "NEUTRAL"


class ConfidenceTier(str, Enum):
    """Confidence paired one-to-one with StrengthTier."""
    HIGH = "HIGH"
    MEDIUM_HIGH = "MEDIUM_HIGH"
    MEDIUM = "MEDIUM"
    LOW_MEDIUM = "LOW_MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class CompositeCurrencyScore:
    """Per-currency factor scores and their weighted total."""
    currency_code: str
    rate_policy: float
    growth_momentum: float
    real_rate_edge: float
    risk_appetite: float
    positioning: float
    total_score: float
    regime: Optional[MarketRegime] = None
    weights: Optional[FactorWeights] = None

    def weighted_components(self) -> dict[str, float]:
        """Each factor's contribution to total_score (requires weights)."""
        if self.weights is None:
            return {}
        return {
            "rate_policy": self.rate_policy * self.weights.rate_policy,
            "growth_momentum": self.growth_momentum * self.weights.growth_momentum,
            "real_rate_edge": self.real_rate_edge * self.weights.real_rate_edge,
            "risk_appetite": self.risk_appetite * self.weights.risk_appetite,
            "positioning": self.positioning * self.weights.positioning,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "currency": self.currency_code,
            "rate_policy": self.rate_policy,
            "growth_momentum": self.growth_momentum,
            "real_rate_edge": self.real_rate_edge,
            "risk_appetite": self.risk_appetite,
            "positioning": self.positioning,
            "total_score": self.total_score,
            "regime": self.regime.value if self.regime else None,
        }


@dataclass(frozen=True)
class PairSignal:
    """Directional bias for a currency pair, ordered as the pair was compared."""
    currency_a: str
    currency_b: str
    score_differential: float
    bias_direction: BiasDirection
    strength_tier: StrengthTier
    confidence_tier: ConfidenceTier

    @property
    def pair(self) -> str:
        return f"{self.currency_a}/{self.currency_b}"

    @property
    def bias_label(self) -> str:
        """Bias in trade-ticket form, e.g. ``BUY_EUR_SELL_USD``."""
        if self.bias_direction == BiasDirection.BUY_A:
            return f"BUY_{self.currency_a}_SELL_{self.currency_b}"
        if self.bias_direction == BiasDirection.BUY_B:
            return f"BUY_{self.currency_b}_SELL_{self.currency_a}"
        return BiasDirection.NEUTRAL.value

    @property
    def magnitude(self) -> float:
        return abs(self.score_differential)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pair": self.pair,
            "score_differential": self.score_differential,
            "bias": self.bias_label,
            "strength": self.strength_tier.value,
            "confidence": self.confidence_tier.value,
        }


@dataclass(frozen=True)
class ScoringResult:
    """Everything one recalculation produces. Replaced wholesale on the next pass."""
    regime: MarketRegime
    weights: FactorWeights
    scores: Mapping[str, CompositeCurrencyScore]
    signals: tuple[PairSignal, ...]
    volatility_percentile: float
    top_count: int = 5                  # Default size of top_signals(), from SignalParams
    calculated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def get_score(self, currency_code: str) -> Optional[CompositeCurrencyScore]:
        return self.scores.get(currency_code)

    def top_signals(self, count: Optional[int] = None) -> tuple[PairSignal, ...]:
        """Strongest signals; ``signals`` is already ranked."""
        return self.signals[:self.top_count if count is None else count]

    def ranked_currencies(self) -> list[CompositeCurrencyScore]:
        """Currencies from strongest to weakest total score."""
        return sorted(self.scores.values(), key=lambda s: s.total_score, reverse=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "regime": self.regime.value,
            "weights": self.weights.to_dict(),
            "volatility_percentile": self.volatility_percentile,
            "scores": {code: score.to_dict() for code, score in self.scores.items()},
            "signals": [signal.to_dict() for signal in self.signals],
            "calculated_at": self.calculated_at.isoformat(),
        }
