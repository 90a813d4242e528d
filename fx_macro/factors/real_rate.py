"""Real interest rate edge"""

from typing import Optional

from ..config.defaults import RealRateParams
from ..data.models import RealRateInput


def score_real_rate_edge(data: RealRateInput, params: Optional[RealRateParams] = None) -> float:
    """
    Real rate edge score

    real_rate = two_year_yield - 5y5y_breakeven
    score = real_rate * 1.5

    Unbounded; only meaningful relative to other currencies.
    """
    params = params or RealRateParams()
    return data.real_rate * params.multiplier


def real_rate_differential(
    currency_a: RealRateInput,
    currency_b: RealRateInput,
    params: Optional[RealRateParams] = None,
) -> float:
    """
    Real rate edge of ``currency_a`` over ``currency_b``

    differential = (real_rate_a - real_rate_b) * 1.5
    """
    params = params or RealRateParams()
    return (currency_a.real_rate - currency_b.real_rate) * params.multiplier
