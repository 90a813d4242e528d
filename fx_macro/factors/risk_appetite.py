"""Risk appetite factor: volatility regime and cross-asset sentiment"""

from typing import Optional

from ..config.defaults import CurrencyTables, RiskAppetiteParams
from ..data.models import CrossAssetReturn, VolatilityObservation
from ..metrics.percentile import volatility_percentile
from ..utils.numeric import clamp


def score_volatility_percentile(percentile: float) -> float:
    """
    Volatility regime score from a percentile

    <20 -> 1.0, <40 -> 0.5, <60 -> 0.0, <80 -> -0.5, else -1.0
    """
    if percentile < 20:
        return 1.0
    elif percentile < 40:
        return 0.5
    elif percentile < 60:
        return 0.0
    elif percentile < 80:
        return -0.5
    else:
        return -1.0


def score_cross_asset(
    cross_asset: CrossAssetReturn,
    currency_code: str,
    params: Optional[RiskAppetiteParams] = None,
    tables: Optional[CurrencyTables] = None,
) -> float:
    """
    Currency-adjusted cross-asset sentiment

    sentiment = clamp((equity_return - safe_haven_return) * 2, -1, 1)
    risk-on  (sentiment > 0):  sentiment * affinity.risk_on
    risk-off (sentiment <= 0): |sentiment| * affinity.safe_haven

    Currencies without an affinity entry score 0.
    """
    params = params or RiskAppetiteParams()
    tables = tables or CurrencyTables()

    sentiment = clamp((cross_asset.equity_return - cross_asset.safe_haven_return)
                      * params.cross_asset_multiplier)
    affinity = tables.risk_affinity_for(currency_code)

    if sentiment > 0:
        return sentiment * affinity.risk_on
    return abs(sentiment) * affinity.safe_haven


def score_risk_appetite(
    volatility: VolatilityObservation,
    cross_asset: CrossAssetReturn,
    currency_code: str,
    params: Optional[RiskAppetiteParams] = None,
    tables: Optional[CurrencyTables] = None,
) -> float:
    """
    Risk appetite factor score

    score = 0.6 * volatility_score + 0.4 * currency_adjusted_cross_asset

    A currency without a risk affinity entry still takes the volatility
    component; only its cross-asset term is 0. The factor is not zeroed
    as a whole.

    Raises:
        InsufficientDataError: If the trailing volatility window is empty
    """
    params = params or RiskAppetiteParams()

    volatility_score = score_volatility_percentile(volatility_percentile(volatility))
    cross_asset_score = score_cross_asset(cross_asset, currency_code, params, tables)

    return (volatility_score * params.volatility_weight
            + cross_asset_score * params.cross_asset_weight)
