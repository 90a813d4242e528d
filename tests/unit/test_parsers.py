"""Tests for mapping-to-model parsers."""

import pytest

from fx_macro.data.parsers import (
    parse_currency_inputs,
    parse_currency_set,
    parse_market_snapshot,
)
from fx_macro.errors import InvalidInputError, MalformedDataError, MissingDataError


class TestMarketSnapshotParser:
    """Test suite for parse_market_snapshot."""

    def test_camel_case_payload(self, sample_payload):
        market = parse_market_snapshot(sample_payload)

        assert market.volatility.current == 35.0
        assert len(market.volatility.trailing_window) == 20
        assert market.cross_asset.equity_return == -2.5
        assert market.cross_asset.safe_haven_return == 1.5
        assert market.cross_asset.equity_moving_average_20 == 450.0
        assert market.is_central_bank_week is False
        assert market.label is None

    def test_snake_case_payload(self):
        market = parse_market_snapshot({
            "volatility": {"current": 18, "trailing_window": [20, 21, 22]},
            "cross_asset": {
                "equity_return": 0.4,
                "safe_haven_return": 0.1,
                "equity_price": 101,
                "equity_moving_average_20": 100,
            },
            "is_central_bank_week": True,
            "label": "fomc",
        })

        assert market.volatility.trailing_window == (20.0, 21.0, 22.0)
        assert market.is_central_bank_week is True
        assert market.label == "fomc"

    def test_missing_section(self, sample_payload):
        del sample_payload["market"]

        with pytest.raises(MissingDataError) as exc_info:
            parse_market_snapshot(sample_payload)

        assert exc_info.value.field == "cross_asset"

    def test_non_numeric_value(self, sample_payload):
        sample_payload["vix"]["current"] = "high"

        with pytest.raises(MalformedDataError) as exc_info:
            parse_market_snapshot(sample_payload)

        assert exc_info.value.field == "current"

    def test_window_must_be_sequence(self, sample_payload):
        sample_payload["vix"]["last20Days"] = "20,21,22"

        with pytest.raises(MalformedDataError):
            parse_market_snapshot(sample_payload)

    def test_section_must_be_mapping(self, sample_payload):
        sample_payload["vix"] = [1, 2, 3]

        with pytest.raises(MalformedDataError):
            parse_market_snapshot(sample_payload)

    @pytest.mark.parametrize("flag,expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("false", False),
        (" False ", False),
        ("TRUE", True),
    ])
    def test_central_bank_week_flag(self, sample_payload, flag, expected):
        sample_payload["isCentralBankWeek"] = flag
        assert parse_market_snapshot(sample_payload).is_central_bank_week is expected

    @pytest.mark.parametrize("flag", ["0", "yes", "", 1, 0, 1.0])
    def test_central_bank_week_flag_rejects_non_boolean(self, sample_payload, flag):
        sample_payload["is_central_bank_week"] = flag

        with pytest.raises(MalformedDataError) as exc_info:
            parse_market_snapshot(sample_payload)

        assert exc_info.value.field == "is_central_bank_week"


class TestCurrencyInputsParser:
    """Test suite for parse_currency_inputs."""

    def test_camel_case_payload(self, sample_payload):
        inputs = parse_currency_inputs("usd", sample_payload["usd"])

        assert inputs.currency_code == "USD"
        assert inputs.rate_policy.currency_code == "USD"
        assert inputs.rate_policy.rate_gap == pytest.approx(0.25)
        assert inputs.rate_policy.hawkish_mentions == 3
        assert inputs.rate_policy.dovish_mentions == 1
        assert inputs.growth_momentum.employment.value == 175.0
        assert inputs.growth_momentum.purchasing_managers_index == 48.5
        assert inputs.real_rate.real_rate == pytest.approx(2.4)
        assert inputs.positioning.percentile_rank == 50.0

    def test_snake_case_payload_with_bare_employment(self):
        inputs = parse_currency_inputs("GBP", {
            "rate_policy": {"current_rate": 5.25, "terminal_rate": 5.0},
            "growth_momentum": {
                "employment": 12.5,
                "purchasing_managers_index": 49.0,
                "gdp_quarter_over_quarter": 0.3,
            },
            "real_rate": {"two_year_yield": 4.1, "five_year_five_year_breakeven": 3.2},
            "positioning": {"percentile_rank": 35},
        })

        assert inputs.growth_momentum.employment.value == 12.5
        assert inputs.rate_policy.hawkish_mentions == 0
        assert inputs.rate_policy.dovish_mentions == 0

    def test_missing_field(self, sample_payload):
        del sample_payload["usd"]["realInterestEdge"]["twoYearYield"]

        with pytest.raises(MissingDataError) as exc_info:
            parse_currency_inputs("USD", sample_payload["usd"])

        assert exc_info.value.field == "two_year_yield"
        assert isinstance(exc_info.value, InvalidInputError)

    def test_fractional_mentions_rejected(self, sample_payload):
        sample_payload["usd"]["ratePolicy"]["hawkishWords"] = 2.5

        with pytest.raises(MalformedDataError):
            parse_currency_inputs("USD", sample_payload["usd"])

    def test_boolean_rejected(self, sample_payload):
        sample_payload["usd"]["growthMomentum"]["pmi"] = True

        with pytest.raises(MalformedDataError):
            parse_currency_inputs("USD", sample_payload["usd"])

    def test_currency_set_keeps_order(self, sample_payload):
        currencies = parse_currency_set({"jpy": sample_payload["usd"], "usd": sample_payload["usd"]})
        assert [c.currency_code for c in currencies] == ["JPY", "USD"]

    @pytest.mark.parametrize("code", [None, 840, "  "])
    def test_currency_code_must_be_string(self, sample_payload, code):
        with pytest.raises(MalformedDataError) as exc_info:
            parse_currency_inputs(code, sample_payload["usd"])

        assert exc_info.value.field == "currency_code"
