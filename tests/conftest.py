"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Dict

import pytest

from fx_macro.data.models import (
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
from fx_macro.data.samples import SAMPLE_VOLATILITY_WINDOW
from fx_macro.models.scores import CompositeCurrencyScore


@pytest.fixture
def sample_volatility() -> VolatilityObservation:
    """Sample 20-day volatility window; 22.5 sits at the 65th percentile."""
    return VolatilityObservation(current=22.5, trailing_window=SAMPLE_VOLATILITY_WINDOW)


@pytest.fixture
def stressed_volatility() -> VolatilityObservation:
    """Current reading above every value in the window (100th percentile)."""
    return VolatilityObservation(current=35.0, trailing_window=[20 + i * 0.5 for i in range(20)])


@pytest.fixture
def calm_volatility() -> VolatilityObservation:
    """Current reading below every value in the window (0th percentile)."""
    return VolatilityObservation(current=12.0, trailing_window=[20 + i * 0.5 for i in range(20)])


@pytest.fixture
def risk_on_cross_asset() -> CrossAssetReturn:
    """Equities beating gold and trading above their 20-day average."""
    return CrossAssetReturn(
        equity_return=1.2,
        safe_haven_return=-0.5,
        equity_price=455.0,
        equity_moving_average_20=450.0,
    )


@pytest.fixture
def risk_off_cross_asset() -> CrossAssetReturn:
    """Gold beating equities, equities below their 20-day average."""
    return CrossAssetReturn(
        equity_return=-2.5,
        safe_haven_return=1.5,
        equity_price=440.0,
        equity_moving_average_20=450.0,
    )


@pytest.fixture
def make_currency() -> Callable[..., CurrencyInputs]:
    """Factory for CurrencyInputs with neutral defaults that can be overridden per field."""

    def _make(
        code: str,
        current_rate: float = 2.0,
        terminal_rate: float = 2.0,
        hawkish: int = 0,
        dovish: int = 0,
        employment: float = 0.0,
        pmi: float = 49.0,
        gdp: float = 1.5,
        two_year: float = 2.0,
        breakeven: float = 2.0,
        positioning: float = 50.0,
    ) -> CurrencyInputs:
        return CurrencyInputs(
            currency_code=code,
            rate_policy=RatePolicyInput(
                currency_code=code,
                current_rate=current_rate,
                terminal_rate=terminal_rate,
                hawkish_mentions=hawkish,
                dovish_mentions=dovish,
            ),
            growth_momentum=GrowthMomentumInput(
                employment=EmploymentReading(currency_code=code, value=employment),
                purchasing_managers_index=pmi,
                gdp_quarter_over_quarter=gdp,
            ),
            real_rate=RealRateInput(
                currency_code=code,
                two_year_yield=two_year,
                five_year_five_year_breakeven=breakeven,
            ),
            positioning=PositioningInput(currency_code=code, percentile_rank=positioning),
        )

    return _make


@pytest.fixture
def neutral_market() -> MarketSnapshot:
    """Volatility at the 50th percentile and flat cross-asset returns."""
    return MarketSnapshot(
        volatility=VolatilityObservation(current=5.0, trailing_window=[float(v) for v in range(1, 11)]),
        cross_asset=CrossAssetReturn(
            equity_return=0.0,
            safe_haven_return=0.0,
            equity_price=100.0,
            equity_moving_average_20=100.0,
        ),
        label="neutral",
    )


@pytest.fixture
def make_score() -> Callable[..., CompositeCurrencyScore]:
    """Factory for composite scores where only the total matters."""

    def _make(code: str, total: float) -> CompositeCurrencyScore:
        return CompositeCurrencyScore(
            currency_code=code,
            rate_policy=0.0,
            growth_momentum=0.0,
            real_rate_edge=0.0,
            risk_appetite=0.0,
            positioning=0.0,
            total_score=total,
        )

    return _make


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """Raw mapping in the dashboard's camelCase layout."""
    return {
        "vix": {
            "current": 35,
            "last20Days": [20 + i * 0.5 for i in range(20)],
        },
        "market": {
            "spyReturn": -2.5,
            "gldReturn": 1.5,
            "spyMA20": 450,
            "spyPrice": 440,
        },
        "usd": {
            "ratePolicy": {
                "currentRate": 5.25,
                "terminalRate": 5.50,
                "currency": "USD",
                "hawkishWords": 3,
                "dovishWords": 1,
            },
            "growthMomentum": {
                "employment": {"currency": "USD", "value": 175},
                "pmi": 48.5,
                "gdpQoQ": 1.5,
            },
            "realInterestEdge": {
                "currency": "USD",
                "twoYearYield": 4.7,
                "breakeven5Y5Y": 2.3,
            },
            "positioning": {"currency": "USD", "percentile": 50},
        },
    }
