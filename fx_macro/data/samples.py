"""
Sample scenario used by examples and integration tests.

Mirrors the default currency set and market data the dashboard starts with.
"""

from .models import (
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

DEFAULT_CURRENCIES = ("USD", "EUR", "GBP", "JPY", "AUD", "CAD", "CHF")

SAMPLE_VOLATILITY_WINDOW = (
    18.2, 19.1, 20.3, 21.5, 22.1, 23.0, 24.2, 25.1, 26.0, 24.8,
    23.5, 22.7, 21.9, 20.8, 19.6, 18.9, 17.8, 18.4, 19.2, 20.1,
)


def sample_market_snapshot(is_central_bank_week: bool = False) -> MarketSnapshot:
    """Market snapshot with the sample volatility window and equity/gold returns."""
    return MarketSnapshot(
        volatility=VolatilityObservation(current=22.5, trailing_window=SAMPLE_VOLATILITY_WINDOW),
        cross_asset=CrossAssetReturn(
            equity_return=1.2,
            safe_haven_return=-0.5,
            equity_price=455.0,
            equity_moving_average_20=450.0,
        ),
        is_central_bank_week=is_central_bank_week,
        label="sample",
    )


def default_currency_inputs(currency_code: str) -> CurrencyInputs:
    """Placeholder inputs for a currency before the caller supplies real readings."""
    return CurrencyInputs(
        currency_code=currency_code,
        rate_policy=RatePolicyInput(
            currency_code=currency_code,
            current_rate=5.0,
            terminal_rate=5.25,
            hawkish_mentions=2,
            dovish_mentions=1,
        ),
        growth_momentum=GrowthMomentumInput(
            employment=EmploymentReading(currency_code=currency_code, value=175.0),
            purchasing_managers_index=51.2,
            gdp_quarter_over_quarter=2.1,
        ),
        real_rate=RealRateInput(
            currency_code=currency_code,
            two_year_yield=4.5,
            five_year_five_year_breakeven=2.2,
        ),
        positioning=PositioningInput(currency_code=currency_code, percentile_rank=50.0),
    )


def sample_currency_set() -> list[CurrencyInputs]:
    """Default inputs for every currency in DEFAULT_CURRENCIES, in order."""
    return [default_currency_inputs(code) for code in DEFAULT_CURRENCIES]
