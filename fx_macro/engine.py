"""
Main scoring engine coordinator.

Runs a full recalculation pass: regime detection, weight resolution,
per-currency composite scores and all-pairs signal generation. The engine
holds configuration only; every pass takes the complete input set and returns
a new ScoringResult.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import CurrencyInputs, MarketSnapshot
from .data.validators import InputValidator
from .errors import (
    DataQualityError,
    MalformedDataError,
    SystemFailureError,
)
from .logging.config import get_scoring_logger
from .metrics.percentile import volatility_percentile
from .models.scores import CompositeCurrencyScore, ScoringResult
from .regime.detector import RegimeDetector
from .regime.weights import WeightTable
from .scoring.aggregator import CurrencyScoreAggregator
from .signals.generator import SignalGenerator, rank_signals

logger = structlog.get_logger(__name__)
scoring_logger = get_scoring_logger(__name__)


class MacroScoringEngine:
    """
    Coordinator for the macro currency scoring model.

    Pipeline:
    Inputs → Validation → Regime → Weights → Composite Scores → Pair Signals → Ranking
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the scoring engine.

        Args:
            config: Ready-made configuration (skips the loader when given)
            config_dir: Directory holding an optional currencies.yaml
            overrides: Call-time configuration overrides

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger
        self.scoring_logger = scoring_logger

        if config is None:
            loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
            config = loader.build_config(overrides)
        self.config = config

        self.validator = InputValidator()
        self.regime_detector = RegimeDetector(config.regime)
        self.weight_table = WeightTable(config.weights)
        self.aggregator = CurrencyScoreAggregator(config)
        self.signal_generator = SignalGenerator(config.signals)

        self.logger.debug("Macro scoring engine initialized")

    def recalculate(
        self,
        market: MarketSnapshot,
        currencies: Iterable[CurrencyInputs],
    ) -> ScoringResult:
        """
        Run a full scoring pass.

        Args:
            market: Market-wide volatility and cross-asset inputs
            currencies: Complete per-currency input set, in display order

        Returns:
            New ScoringResult with scores in input order and signals ranked
            by absolute score differential

        Raises:
            InvalidInputError: If any input fails validation
            ScoreCalculationError: If scoring fails for otherwise valid inputs
        """
        currency_inputs = list(currencies)

        try:
            self._validate_inputs(market, currency_inputs)

            percentile = volatility_percentile(market.volatility)
            regime = self.regime_detector.detect(
                market.volatility, market.cross_asset, market.is_central_bank_week
            )
            weights = self.weight_table.get(regime)

            scores: dict[str, CompositeCurrencyScore] = {}
            for inputs in currency_inputs:
                scores[inputs.currency_code] = self.aggregator.score_inputs(inputs, market, regime)

            signals = rank_signals(self.signal_generator.generate_all(scores))

        except DataQualityError as e:
            self.logger.warning(
                "Invalid input for scoring pass",
                error=str(e),
                error_type=type(e).__name__,
                field=getattr(e, 'field', None),
                market_label=market.label,
            )
            raise

        except SystemFailureError as e:
            self.logger.error(
                "Scoring pass failed",
                error=str(e),
                error_type=type(e).__name__,
                market_label=market.label,
            )
            raise

        result = ScoringResult(
            regime=regime,
            weights=weights,
            scores=MappingProxyType(scores),
            signals=signals,
            volatility_percentile=percentile,
            top_count=self.config.signals.top_count,
        )

        strongest = signals[0] if signals else None
        self.scoring_logger.info(
            "Scoring pass complete",
            market_label=market.label,
            regime=regime.value,
            volatility_percentile=percentile,
            currency_count=len(scores),
            signal_count=len(signals),
            strongest_pair=strongest.pair if strongest else None,
            strongest_differential=strongest.score_differential if strongest else None,
        )

        return result

    def _validate_inputs(self, market: MarketSnapshot, currency_inputs: list[CurrencyInputs]) -> None:
        """Validate the whole input set before computing anything."""
        self.validator.validate_market(market)

        seen: set[str] = set()
        for inputs in currency_inputs:
            self.validator.validate_currency(inputs)
            if inputs.currency_code in seen:
                raise MalformedDataError(
                    f"Duplicate currency in scoring pass: {inputs.currency_code}",
                    field="currency_code",
                    raw_data=inputs.currency_code,
                )
            seen.add(inputs.currency_code)

    def score_pair(
        self,
        market: MarketSnapshot,
        currency_a: CurrencyInputs,
        currency_b: CurrencyInputs,
    ) -> ScoringResult:
        """Recalculate for two currencies only; the single signal keeps A/B order."""
        return self.recalculate(market, [currency_a, currency_b])

