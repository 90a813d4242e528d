"""Composite currency scoring from the five macro factors"""

import math
from typing import Optional

import structlog

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import (
    CrossAssetReturn,
    CurrencyInputs,
    GrowthMomentumInput,
    MarketSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityObservation,
)
from ..errors import DataQualityError, ScoreCalculationError
from ..factors.growth import score_growth_momentum
from ..factors.positioning import score_positioning
from ..factors.rate_policy import score_rate_policy
from ..factors.real_rate import score_real_rate_edge
from ..factors.risk_appetite import score_risk_appetite
from ..models.regime import MarketRegime
from ..models.scores import CompositeCurrencyScore
from ..regime.weights import WeightTable

logger = structlog.get_logger(__name__)


class CurrencyScoreAggregator:
    """
    Combines factor scores into a composite score per currency.

    total = rate * w.rate + growth * w.growth + real_rate * w.real_rate
            + risk * w.risk + positioning * w.positioning

    Every component is kept on the result so callers can show the breakdown.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.weight_table = WeightTable(self.config.weights)

    def score_currency(
        self,
        currency_code: str,
        rate_policy: RatePolicyInput,
        growth_momentum: GrowthMomentumInput,
        real_rate: RealRateInput,
        volatility: VolatilityObservation,
        cross_asset: CrossAssetReturn,
        positioning: PositioningInput,
        regime: MarketRegime,
    ) -> CompositeCurrencyScore:
        """
        Score one currency under ``regime``.

        Returns:
            CompositeCurrencyScore with all five components and the total

        Raises:
            InsufficientDataError: If the trailing volatility window is empty
            ScoreCalculationError: If a score is not finite or scoring fails unexpectedly
        """
        weights = self.weight_table.get(regime)
        config = self.config

        try:
            components = {
                "rate_policy": score_rate_policy(rate_policy, config.rate_policy, config.currencies),
                "growth_momentum": score_growth_momentum(growth_momentum, config.growth, config.currencies),
                "real_rate_edge": score_real_rate_edge(real_rate, config.real_rate),
                "risk_appetite": score_risk_appetite(
                    volatility, cross_asset, currency_code, config.risk_appetite, config.currencies
                ),
                "positioning": score_positioning(positioning),
            }
        except DataQualityError:
            raise
        except (TypeError, ValueError, ArithmeticError, AttributeError) as e:
            raise ScoreCalculationError(
                f"Factor scoring failed for {currency_code}: {e}",
                factor_name="unknown",
                calculation_input={"currency": currency_code},
            ) from e

        for factor_name, value in components.items():
            self._validate_score(currency_code, factor_name, value)

        total_score = (
            components["rate_policy"] * weights.rate_policy
            + components["growth_momentum"] * weights.growth_momentum
            + components["real_rate_edge"] * weights.real_rate_edge
            + components["risk_appetite"] * weights.risk_appetite
            + components["positioning"] * weights.positioning
        )
        self._validate_score(currency_code, "total_score", total_score)

        logger.debug(
            "Currency scored",
            currency=currency_code,
            regime=regime.value,
            total_score=total_score,
            **components
        )

        return CompositeCurrencyScore(
            currency_code=currency_code,
            total_score=total_score,
            regime=regime,
            weights=weights,
            **components
        )

    def score_inputs(self, inputs: CurrencyInputs, market: MarketSnapshot,
                     regime: MarketRegime) -> CompositeCurrencyScore:
        """Score a CurrencyInputs bundle against a market snapshot."""
        return self.score_currency(
            inputs.currency_code,
            inputs.rate_policy,
            inputs.growth_momentum,
            inputs.real_rate,
            market.volatility,
            market.cross_asset,
            inputs.positioning,
            regime,
        )

    def _validate_score(self, currency_code: str, factor_name: str, value: float) -> None:
        """Reject NaN and infinite scores."""
        if math.isnan(value) or math.isinf(value):
            raise ScoreCalculationError(
                f"Invalid {factor_name} score for {currency_code}: {value}",
                factor_name=factor_name,
                calculation_input={"currency": currency_code},
            )


_default_aggregator = CurrencyScoreAggregator()


def score_currency(
    currency_code: str,
    rate_policy: RatePolicyInput,
    growth_momentum: GrowthMomentumInput,
    real_rate: RealRateInput,
    volatility: VolatilityObservation,
    cross_asset: CrossAssetReturn,
    positioning: PositioningInput,
    regime: MarketRegime,
) -> CompositeCurrencyScore:
    """Score one currency with the default configuration."""
    return _default_aggregator.score_currency(
        currency_code, rate_policy, growth_momentum, real_rate,
        volatility, cross_asset, positioning, regime,
    )
