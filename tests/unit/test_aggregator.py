"""Tests for composite currency scoring."""

import math

import pytest

from fx_macro.data.models import RatePolicyInput, VolatilityObservation
from fx_macro.data.samples import default_currency_inputs, sample_market_snapshot
from fx_macro.errors import InsufficientDataError, ScoreCalculationError
from fx_macro.models.regime import MarketRegime
from fx_macro.regime.weights import get_weights
from fx_macro.scoring.aggregator import CurrencyScoreAggregator, score_currency


class TestCurrencyScoreAggregator:
    """Test suite for CurrencyScoreAggregator."""

    def setup_method(self):
        self.aggregator = CurrencyScoreAggregator()

    def test_all_zero_factors(self, make_currency, neutral_market):
        score = self.aggregator.score_inputs(make_currency("XXX"), neutral_market, MarketRegime.NEUTRAL)

        assert score.rate_policy == 0.0
        assert score.growth_momentum == 0.0
        assert score.real_rate_edge == 0.0
        assert score.risk_appetite == 0.0
        assert score.positioning == 0.0
        assert score.total_score == 0.0

    @pytest.mark.parametrize("regime", list(MarketRegime))
    def test_total_is_weighted_sum(self, regime):
        market = sample_market_snapshot()
        score = self.aggregator.score_inputs(default_currency_inputs("EUR"), market, regime)

        assert score.weights == get_weights(regime)
        assert score.regime == regime
        assert sum(score.weighted_components().values()) == pytest.approx(score.total_score, abs=1e-9)

    def test_sample_usd_components(self):
        score = self.aggregator.score_inputs(
            default_currency_inputs("USD"), sample_market_snapshot(), MarketRegime.NEUTRAL
        )

        assert score.rate_policy == pytest.approx(0.10)
        assert score.growth_momentum == pytest.approx(0.65)
        assert score.real_rate_edge == pytest.approx(3.45)
        assert score.risk_appetite == pytest.approx(-0.3)
        assert score.positioning == 0.0
        assert score.total_score == pytest.approx(1.2025)

    def test_positioning_weight_applied(self, make_currency, neutral_market):
        score = self.aggregator.score_inputs(
            make_currency("XXX", positioning=95.0), neutral_market, MarketRegime.NEUTRAL
        )
        assert score.positioning == 1.0
        assert score.total_score == pytest.approx(0.05)

    def test_regime_changes_total(self, make_currency, neutral_market):
        inputs = make_currency("XXX", current_rate=1.0, terminal_rate=2.0)
        neutral = self.aggregator.score_inputs(inputs, neutral_market, MarketRegime.NEUTRAL)
        cb_week = self.aggregator.score_inputs(inputs, neutral_market, MarketRegime.CENTRAL_BANK_WEEK)

        assert neutral.rate_policy == cb_week.rate_policy
        assert cb_week.total_score > neutral.total_score

    def test_non_finite_score_raises(self, make_currency, neutral_market):
        inputs = make_currency("USD")
        rate_policy = RatePolicyInput("USD", current_rate=math.inf, terminal_rate=math.inf)

        with pytest.raises(ScoreCalculationError) as exc_info:
            self.aggregator.score_currency(
                "USD", rate_policy, inputs.growth_momentum, inputs.real_rate,
                neutral_market.volatility, neutral_market.cross_asset, inputs.positioning,
                MarketRegime.NEUTRAL,
            )

        assert exc_info.value.factor_name == "rate_policy"
        assert exc_info.value.recoverable is False

    def test_empty_window_propagates(self, make_currency, risk_on_cross_asset):
        inputs = make_currency("USD")

        with pytest.raises(InsufficientDataError):
            self.aggregator.score_currency(
                "USD", inputs.rate_policy, inputs.growth_momentum, inputs.real_rate,
                VolatilityObservation(current=20.0, trailing_window=[]), risk_on_cross_asset,
                inputs.positioning, MarketRegime.NEUTRAL,
            )

    def test_module_level_helper(self, make_currency, neutral_market):
        inputs = make_currency("XXX")
        score = score_currency(
            "XXX", inputs.rate_policy, inputs.growth_momentum, inputs.real_rate,
            neutral_market.volatility, neutral_market.cross_asset, inputs.positioning,
            MarketRegime.NEUTRAL,
        )
        assert score.total_score == 0.0

    def test_to_dict(self, make_currency, neutral_market):
        score = self.aggregator.score_inputs(make_currency("XXX"), neutral_market, MarketRegime.NEUTRAL)
        data = score.to_dict()

        assert data["currency"] == "XXX"
        assert data["regime"] == "NEUTRAL"
        assert data["total_score"] == 0.0
