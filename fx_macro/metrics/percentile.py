"""Percentile rank calculations"""

from typing import Iterable

from ..data.models import VolatilityObservation
from ..data.validators import ensure_finite, ensure_non_empty


def _rank(value: float, observations: list[float]) -> float:
    at_or_below = sum(1 for v in observations if v <= value)
    return at_or_below / len(observations) * 100.0


def percentile_rank(value: float, series: Iterable[float]) -> float:
    """
    Percentile rank of ``value`` within ``series`` (inclusive)

    rank = count(v <= value) / len(series) * 100

    Args:
        value: Observation to rank
        series: Reference observations (any order)

    Returns:
        Percentile in [0, 100]

    Raises:
        InsufficientDataError: If ``series`` is empty
        MalformedDataError: If ``value`` or any observation is not finite
    """
    observations = ensure_non_empty(series, "series")
    return _rank(ensure_finite(value, "value"), observations)


def volatility_percentile(volatility: VolatilityObservation) -> float:
    """Percentile of the current volatility reading within its trailing window"""
    observations = ensure_non_empty(volatility.trailing_window, "volatility.trailing_window")
    return _rank(ensure_finite(volatility.current, "volatility.current"), observations)
