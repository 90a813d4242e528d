"""
Input validation for scoring passes.

Checks caller-supplied models before any score is computed so that bad inputs
surface as named errors instead of NaN or Infinity in the results.
"""

import math
from typing import Any, Iterable

from ..errors import InsufficientDataError, MalformedDataError
from .models import (
    CrossAssetReturn,
    CurrencyInputs,
    GrowthMomentumInput,
    MarketSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityObservation,
)


def ensure_finite(value: Any, field: str) -> float:
    """Return ``value`` as a float, raising MalformedDataError if it isn't a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDataError(
            f"{field} must be a number, got {type(value).__name__}",
            field=field,
            raw_data=str(value)[:100],
            expected_format="finite number",
        )
    if math.isnan(value) or math.isinf(value):
        raise MalformedDataError(
            f"{field} must be finite, got {value}",
            field=field,
            raw_data=str(value),
            expected_format="finite number",
        )
    return float(value)


def ensure_non_empty(series: Iterable[float], field: str) -> list[float]:
    """Return ``series`` as a list of finite floats; raise InsufficientDataError if empty."""
    values = list(series)
    if not values:
        raise InsufficientDataError(
            f"{field} must contain at least one observation",
            field=field,
            required_count=1,
            available_count=0,
        )
    return [ensure_finite(v, f"{field}[{i}]") for i, v in enumerate(values)]


class InputValidator:
    """Validates scoring inputs against data quality rules."""

    def validate_volatility(self, volatility: VolatilityObservation) -> None:
        ensure_finite(volatility.current, "volatility.current")
        ensure_non_empty(volatility.trailing_window, "volatility.trailing_window")

    def validate_cross_asset(self, cross_asset: CrossAssetReturn) -> None:
        ensure_finite(cross_asset.equity_return, "cross_asset.equity_return")
        ensure_finite(cross_asset.safe_haven_return, "cross_asset.safe_haven_return")
        ensure_finite(cross_asset.equity_price, "cross_asset.equity_price")
        ensure_finite(cross_asset.equity_moving_average_20, "cross_asset.equity_moving_average_20")

    def validate_market(self, market: MarketSnapshot) -> None:
        """
        Validate market-wide inputs.

        Raises:
            InsufficientDataError: If the trailing volatility window is empty
            MalformedDataError: If any value is not a finite number
        """
        self.validate_volatility(market.volatility)
        self.validate_cross_asset(market.cross_asset)

    def validate_rate_policy(self, rate_policy: RatePolicyInput) -> None:
        prefix = f"{rate_policy.currency_code}.rate_policy"
        ensure_finite(rate_policy.current_rate, f"{prefix}.current_rate")
        ensure_finite(rate_policy.terminal_rate, f"{prefix}.terminal_rate")

        for name in ("hawkish_mentions", "dovish_mentions"):
            count = getattr(rate_policy, name)
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise MalformedDataError(
                    f"{prefix}.{name} must be a non-negative integer, got {count!r}",
                    field=f"{prefix}.{name}",
                    raw_data=str(count),
                    expected_format="int >= 0",
                )

    def validate_growth(self, currency_code: str, growth: GrowthMomentumInput) -> None:
        prefix = f"{currency_code}.growth_momentum"
        ensure_finite(growth.employment.value, f"{prefix}.employment.value")
        ensure_finite(growth.purchasing_managers_index, f"{prefix}.purchasing_managers_index")
        ensure_finite(growth.gdp_quarter_over_quarter, f"{prefix}.gdp_quarter_over_quarter")

    def validate_real_rate(self, real_rate: RealRateInput) -> None:
        prefix = f"{real_rate.currency_code}.real_rate"
        ensure_finite(real_rate.two_year_yield, f"{prefix}.two_year_yield")
        ensure_finite(real_rate.five_year_five_year_breakeven, f"{prefix}.five_year_five_year_breakeven")

    def validate_positioning(self, positioning: PositioningInput) -> None:
        field = f"{positioning.currency_code}.positioning.percentile_rank"
        value = ensure_finite(positioning.percentile_rank, field)
        if value < 0 or value > 100:
            raise MalformedDataError(
                f"{field} must be between 0 and 100, got {value}",
                field=field,
                raw_data=str(value),
                expected_format="0 <= percentile <= 100",
            )

    def validate_currency(self, inputs: CurrencyInputs) -> None:
        """
        Validate one currency's inputs.

        Raises:
            MalformedDataError: If a value is non-finite, out of range or of the wrong
                type, or a nested currency code disagrees with ``currency_code``
        """
        if not inputs.currency_code or not isinstance(inputs.currency_code, str):
            raise MalformedDataError(
                "currency_code must be a non-empty string",
                field="currency_code",
                raw_data=str(inputs.currency_code),
            )

        # Factor lookups use the nested codes, so they must agree with the bundle
        nested_codes = {
            "rate_policy.currency_code": inputs.rate_policy.currency_code,
            "growth_momentum.employment.currency_code": inputs.growth_momentum.employment.currency_code,
            "real_rate.currency_code": inputs.real_rate.currency_code,
            "positioning.currency_code": inputs.positioning.currency_code,
        }
        for name, code in nested_codes.items():
            if code != inputs.currency_code:
                raise MalformedDataError(
                    f"{inputs.currency_code}.{name} is {code!r}, expected {inputs.currency_code!r}",
                    field=f"{inputs.currency_code}.{name}",
                    raw_data=str(code),
                    expected_format=inputs.currency_code,
                )

        self.validate_rate_policy(inputs.rate_policy)
        self.validate_growth(inputs.currency_code, inputs.growth_momentum)
        self.validate_real_rate(inputs.real_rate)
        self.validate_positioning(inputs.positioning)
