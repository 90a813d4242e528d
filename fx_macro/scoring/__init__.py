"""Composite currency scoring"""

from .aggregator import CurrencyScoreAggregator, score_currency

__all__ = ["CurrencyScoreAggregator", "score_currency"]
