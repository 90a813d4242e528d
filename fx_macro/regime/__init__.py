"""Regime detection and regime-dependent factor weights"""

from .detector import RegimeDetector, detect_regime
from .weights import WeightTable, get_weights

__all__ = [
    "RegimeDetector",
    "WeightTable",
    "detect_regime",
    "get_weights",
]
