"""
Pair signal generation and ranking.

Compares composite currency scores pairwise and derives a directional bias,
strength tier and confidence tier for each pair.
"""

from .generator import (
    SignalGenerator,
    generate_all_signals,
    generate_signal,
    rank_currencies,
    rank_signals,
    top_signals,
)

__all__ = [
    "SignalGenerator",
    "generate_all_signals",
    "generate_signal",
    "rank_currencies",
    "rank_signals",
    "top_signals",
]
