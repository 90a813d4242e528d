"""Integration tests for the full scoring pipeline."""

from dataclasses import FrozenInstanceError

import pytest

from fx_macro import MacroScoringEngine
from fx_macro.data.parsers import parse_currency_inputs, parse_market_snapshot
from fx_macro.data.samples import DEFAULT_CURRENCIES, sample_currency_set, sample_market_snapshot
from fx_macro.models.regime import MarketRegime
from fx_macro.models.scores import BiasDirection, StrengthTier


@pytest.mark.integration
class TestFullPipeline:
    """Integration tests for the complete scoring pipeline."""

    def setup_method(self):
        self.engine = MacroScoringEngine(config_dir="/nonexistent-config-dir")

    def test_sample_scenario(self) -> None:
        result = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())

        assert result.regime == MarketRegime.NEUTRAL
        assert result.volatility_percentile == 65.0
        assert list(result.scores) == list(DEFAULT_CURRENCIES)
        assert len(result.signals) == 21

    def test_sample_scores(self) -> None:
        result = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())
        totals = {code: score.total_score for code, score in result.scores.items()}

        assert totals == pytest.approx({
            "USD": 1.2025,
            "EUR": 1.249,
            "GBP": 1.034,
            "JPY": 1.257,
            "AUD": 1.255,
            "CAD": 1.22,
            "CHF": 1.143,
        })
        assert [s.currency_code for s in result.ranked_currencies()] == [
            "JPY", "AUD", "EUR", "CAD", "USD", "CHF", "GBP",
        ]

    def test_sample_signals_ranked(self) -> None:
        result = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())

        magnitudes = [signal.magnitude for signal in result.signals]
        assert magnitudes == sorted(magnitudes, reverse=True)

        top = result.top_signals()
        assert len(top) == 5
        assert top[0].pair == "GBP/JPY"
        assert top[0].score_differential == pytest.approx(-0.223)
        # Placeholder inputs are too similar to take a side
        assert all(s.bias_direction == BiasDirection.NEUTRAL for s in result.signals)
        assert all(s.strength_tier == StrengthTier.NEUTRAL for s in result.signals)

    def test_central_bank_week_reweights(self) -> None:
        normal = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())
        cb_week = self.engine.recalculate(
            sample_market_snapshot(is_central_bank_week=True), sample_currency_set()
        )

        assert cb_week.regime == MarketRegime.CENTRAL_BANK_WEEK
        assert cb_week.scores["JPY"].rate_policy == normal.scores["JPY"].rate_policy
        assert cb_week.scores["JPY"].total_score != normal.scores["JPY"].total_score

    def test_recalculation_is_deterministic(self) -> None:
        first = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())
        second = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())

        assert first.regime == second.regime
        assert dict(first.scores) == dict(second.scores)
        assert first.signals == second.signals

    def test_result_is_immutable(self) -> None:
        result = self.engine.recalculate(sample_market_snapshot(), sample_currency_set())

        with pytest.raises(FrozenInstanceError):
            result.regime = MarketRegime.RISK_ON  # type: ignore[misc]
        with pytest.raises(FrozenInstanceError):
            result.scores["USD"].total_score = 0.0  # type: ignore[misc]

    def test_parsed_payload(self, sample_payload) -> None:
        market = parse_market_snapshot(sample_payload)
        usd = parse_currency_inputs("USD", sample_payload["usd"])

        result = self.engine.recalculate(market, [usd])
        score = result.scores["USD"]

        assert result.regime == MarketRegime.RISK_OFF
        assert score.rate_policy == pytest.approx(0.12)
        assert score.growth_momentum == pytest.approx(0.35)
        assert score.real_rate_edge == pytest.approx(3.6)
        assert score.risk_appetite == pytest.approx(-0.48)
        assert score.total_score == pytest.approx(0.9345)
        assert result.signals == ()

    def test_to_dict(self) -> None:
        data = self.engine.recalculate(sample_market_snapshot(), sample_currency_set()).to_dict()

        assert data["regime"] == "NEUTRAL"
        assert data["weights"]["positioning"] == 0.05
        assert set(data["scores"]) == set(DEFAULT_CURRENCIES)
        assert len(data["signals"]) == 21
        assert data["signals"][0]["pair"] == "GBP/JPY"
        assert data["signals"][0]["bias"] == "NEUTRAL"
