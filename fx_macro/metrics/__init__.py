"""Statistical helpers shared by regime detection and factor scoring"""

from .percentile import percentile_rank, volatility_percentile

__all__ = [
    "percentile_rank",
    "volatility_percentile",
]
