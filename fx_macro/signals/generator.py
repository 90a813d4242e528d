"""Pairwise trading bias from composite currency scores"""

from typing import Iterable, Mapping, Optional, Union

from ..config.defaults import SignalParams
from ..logging.config import get_scoring_logger, log_signal
from ..models.scores import (
    BiasDirection,
    CompositeCurrencyScore,
    ConfidenceTier,
    PairSignal,
    StrengthTier,
)

logger = get_scoring_logger(__name__)

ScoreCollection = Union[Mapping[str, CompositeCurrencyScore], Iterable[CompositeCurrencyScore]]


class SignalGenerator:
    """
    Derives a PairSignal from two composite scores.

    Strength and confidence depend only on |differential|, so they are the
    same for (A, B) and (B, A); the differential and bias flip sign.
    """

    def __init__(self, params: Optional[SignalParams] = None):
        self.params = params or SignalParams()
        self.logger = logger

    def classify(self, differential: float) -> tuple[StrengthTier, ConfidenceTier]:
        """Strength and confidence tiers for a score differential."""
        magnitude = abs(differential)

        if magnitude >= self.params.very_strong:
            return StrengthTier.VERY_STRONG, ConfidenceTier.HIGH
        elif magnitude >= self.params.strong:
            return StrengthTier.STRONG, ConfidenceTier.MEDIUM_HIGH
        elif magnitude >= self.params.moderate:
            return StrengthTier.MODERATE, ConfidenceTier.MEDIUM
        elif magnitude >= self.params.weak:
            return StrengthTier.WEAK, ConfidenceTier.LOW_MEDIUM
        else:
            return StrengthTier.NEUTRAL, ConfidenceTier.LOW

    def bias(self, differential: float) -> BiasDirection:
        # Strictly beyond the threshold; exactly 0.5 is WEAK but still NEUTRAL bias
        if differential > self.params.bias_threshold:
            return BiasDirection.BUY_A
        if differential < -self.params.bias_threshold:
            return BiasDirection.BUY_B
        return BiasDirection.NEUTRAL

    def generate(self, score_a: CompositeCurrencyScore, score_b: CompositeCurrencyScore) -> PairSignal:
        """
        Compare two currencies in the given order.

        Args:
            score_a: First (base) currency score
            score_b: Second (quote) currency score

        Returns:
            PairSignal labelled "A/B"
        """
        differential = score_a.total_score - score_b.total_score
        strength, confidence = self.classify(differential)

        signal = PairSignal(
            currency_a=score_a.currency_code,
            currency_b=score_b.currency_code,
            score_differential=differential,
            bias_direction=self.bias(differential),
            strength_tier=strength,
            confidence_tier=confidence,
        )

        log_signal(self.logger, signal.pair, differential, signal.bias_label,
                   strength.value, confidence.value)
        return signal

    def generate_all(self, scores: ScoreCollection) -> tuple[PairSignal, ...]:
        """
        One signal per unordered pair, in iteration order (i < j).

        The result is unsorted; use rank_signals to order by strength.
        """
        ordered = list(scores.values()) if isinstance(scores, Mapping) else list(scores)

        signals = []
        for i in range(len(ordered)):
            for j in range(i + 1, len(ordered)):
                signals.append(self.generate(ordered[i], ordered[j]))

        return tuple(signals)


def rank_signals(signals: Iterable[PairSignal]) -> tuple[PairSignal, ...]:
    """Signals sorted by |score_differential| descending. Ties keep input order."""
    return tuple(sorted(signals, key=lambda s: abs(s.score_differential), reverse=True))


def top_signals(signals: Iterable[PairSignal], count: Optional[int] = None) -> tuple[PairSignal, ...]:
    """The ``count`` strongest signals (default ``SignalParams.top_count``)."""
    if count is None:
        count = _default_generator.params.top_count
    return rank_signals(signals)[:count]


def rank_currencies(scores: ScoreCollection) -> list[CompositeCurrencyScore]:
    """Currency scores from strongest to weakest total."""
    values = scores.values() if isinstance(scores, Mapping) else scores
    return sorted(values, key=lambda s: s.total_score, reverse=True)


_default_generator = SignalGenerator()


def generate_signal(score_a: CompositeCurrencyScore, score_b: CompositeCurrencyScore) -> PairSignal:
    """Pair signal for ``score_a`` vs ``score_b`` with default thresholds."""
    return _default_generator.generate(score_a, score_b)


def generate_all_signals(scores: ScoreCollection) -> tuple[PairSignal, ...]:
    """Unsorted signals for every unordered pair with default thresholds."""
    return _default_generator.generate_all(scores)
