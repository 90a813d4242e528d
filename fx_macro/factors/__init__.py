"""Per-factor currency scoring functions"""

from .growth import score_employment, score_gdp, score_growth_momentum, score_manufacturing
from .positioning import score_positioning
from .rate_policy import score_rate_policy, score_tone
from .real_rate import real_rate_differential, score_real_rate_edge
from .risk_appetite import score_cross_asset, score_risk_appetite, score_volatility_percentile

__all__ = [
    "real_rate_differential",
    "score_cross_asset",
    "score_employment",
    "score_gdp",
    "score_growth_momentum",
    "score_manufacturing",
    "score_positioning",
    "score_rate_policy",
    "score_real_rate_edge",
    "score_risk_appetite",
    "score_tone",
    "score_volatility_percentile",
]
