"""
Parsers for converting plain mappings into scoring input models.

Callers typically hold their inputs as dictionaries (loaded from YAML, JSON or
a form). Keys are accepted in snake_case and in the camelCase names used by
dashboard payloads.
"""

from typing import Any, Mapping

from ..errors import MalformedDataError, MissingDataError
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

_MISSING = object()


def _lookup(payload: Mapping[str, Any], *keys: str, default: Any = _MISSING) -> Any:
    """Return the first key present in ``payload``."""
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    if default is not _MISSING:
        return default
    raise MissingDataError(
        f"Missing required field '{keys[0]}'",
        field=keys[0],
        data_type="field",
        context={"accepted_keys": list(keys), "available_keys": sorted(payload)},
    )


def _section(payload: Mapping[str, Any], *keys: str) -> Mapping[str, Any]:
    value = _lookup(payload, *keys)
    if not isinstance(value, Mapping):
        raise MalformedDataError(
            f"'{keys[0]}' must be a mapping, got {type(value).__name__}",
            field=keys[0],
            raw_data=str(value)[:100],
            expected_format="mapping",
        )
    return value


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise MalformedDataError(f"'{field}' must be numeric, got bool", field=field, raw_data=str(value))
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"'{field}' must be numeric: {e}",
            field=field,
            raw_data=str(value)[:100],
            expected_format="number",
        ) from e


def _as_count(value: Any, field: str) -> int:
    number = _as_float(value, field)
    if not number.is_integer() or number < 0:
        raise MalformedDataError(
            f"'{field}' must be a non-negative whole number, got {value!r}",
            field=field,
            raw_data=str(value),
            expected_format="int >= 0",
        )
    return int(number)


def _as_flag(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise MalformedDataError(
        f"'{field}' must be a boolean, got {value!r}",
        field=field,
        raw_data=str(value)[:100],
        expected_format="bool or 'true'/'false'",
    )


def parse_volatility(payload: Mapping[str, Any]) -> VolatilityObservation:
    window = _lookup(payload, "trailing_window", "last20Days", "last_20_days")
    if isinstance(window, (str, bytes)) or not hasattr(window, "__iter__"):
        raise MalformedDataError(
            "'trailing_window' must be a sequence of numbers",
            field="trailing_window",
            raw_data=str(window)[:100],
            expected_format="list[float]",
        )
    return VolatilityObservation(
        current=_as_float(_lookup(payload, "current"), "current"),
        trailing_window=tuple(_as_float(v, "trailing_window") for v in window),
    )


def parse_cross_asset(payload: Mapping[str, Any]) -> CrossAssetReturn:
    return CrossAssetReturn(
        equity_return=_as_float(_lookup(payload, "equity_return", "spyReturn"), "equity_return"),
        safe_haven_return=_as_float(
            _lookup(payload, "safe_haven_return", "gldReturn"), "safe_haven_return"
        ),
        equity_price=_as_float(_lookup(payload, "equity_price", "spyPrice"), "equity_price"),
        equity_moving_average_20=_as_float(
            _lookup(payload, "equity_moving_average_20", "spyMA20"), "equity_moving_average_20"
        ),
    )


def parse_market_snapshot(payload: Mapping[str, Any]) -> MarketSnapshot:
    """
    Build a MarketSnapshot from a mapping.

    Expected layout::

        {"volatility": {"current": 22.5, "trailing_window": [...]},
         "cross_asset": {"equity_return": 1.2, ...},
         "is_central_bank_week": false}

    Raises:
        MissingDataError: If a required section or field is absent
        MalformedDataError: If a value is not numeric, or the central bank
            flag is neither a bool nor the string "true"/"false"
    """
    return MarketSnapshot(
        volatility=parse_volatility(_section(payload, "volatility", "vix", "vixData")),
        cross_asset=parse_cross_asset(_section(payload, "cross_asset", "market", "marketData")),
        is_central_bank_week=_as_flag(
            _lookup(payload, "is_central_bank_week", "isCentralBankWeek", default=False),
            "is_central_bank_week",
        ),
        label=_lookup(payload, "label", default=None),
    )


def parse_currency_inputs(currency_code: str, payload: Mapping[str, Any]) -> CurrencyInputs:
    """
    Build CurrencyInputs for ``currency_code`` from a mapping.

    Sections: ``rate_policy``, ``growth_momentum``, ``real_rate`` and
    ``positioning``. Mention counts default to 0 when absent.

    Raises:
        MissingDataError: If a required section or field is absent
        MalformedDataError: If a value is not numeric or the code is not a string
    """
    if not isinstance(currency_code, str) or not currency_code.strip():
        raise MalformedDataError(
            f"Currency code must be a non-empty string, got {currency_code!r}",
            field="currency_code",
            raw_data=str(currency_code)[:100],
            expected_format="ISO currency code",
        )
    code = currency_code.strip().upper()

    rate = _section(payload, "rate_policy", "ratePolicy")
    growth = _section(payload, "growth_momentum", "growthMomentum")
    real = _section(payload, "real_rate", "realInterestEdge")
    positioning = _section(payload, "positioning")

    employment_raw = _lookup(growth, "employment")
    if isinstance(employment_raw, Mapping):
        employment_value = _as_float(_lookup(employment_raw, "value"), "employment.value")
    else:
        employment_value = _as_float(employment_raw, "employment")

    return CurrencyInputs(
        currency_code=code,
        rate_policy=RatePolicyInput(
            currency_code=code,
            current_rate=_as_float(_lookup(rate, "current_rate", "currentRate"), "current_rate"),
            terminal_rate=_as_float(_lookup(rate, "terminal_rate", "terminalRate"), "terminal_rate"),
            hawkish_mentions=_as_count(
                _lookup(rate, "hawkish_mentions", "hawkishWords", default=0), "hawkish_mentions"
            ),
            dovish_mentions=_as_count(
                _lookup(rate, "dovish_mentions", "dovishWords", default=0), "dovish_mentions"
            ),
        ),
        growth_momentum=GrowthMomentumInput(
            employment=EmploymentReading(currency_code=code, value=employment_value),
            purchasing_managers_index=_as_float(
                _lookup(growth, "purchasing_managers_index", "pmi"), "purchasing_managers_index"
            ),
            gdp_quarter_over_quarter=_as_float(
                _lookup(growth, "gdp_quarter_over_quarter", "gdpQoQ"), "gdp_quarter_over_quarter"
            ),
        ),
        real_rate=RealRateInput(
            currency_code=code,
            two_year_yield=_as_float(_lookup(real, "two_year_yield", "twoYearYield"), "two_year_yield"),
            five_year_five_year_breakeven=_as_float(
                _lookup(real, "five_year_five_year_breakeven", "breakeven5Y5Y"),
                "five_year_five_year_breakeven",
            ),
        ),
        positioning=PositioningInput(
            currency_code=code,
            percentile_rank=_as_float(
                _lookup(positioning, "percentile_rank", "percentile"), "percentile_rank"
            ),
        ),
    )


def parse_currency_set(payload: Mapping[str, Any]) -> list[CurrencyInputs]:
    """Parse a ``{currency_code: {...}}`` mapping, preserving key order."""
    return [parse_currency_inputs(code, entry) for code, entry in payload.items()]
