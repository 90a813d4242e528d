"""Numeric helpers."""


def clamp(value: float, lower: float = -1.0, upper: float = 1.0) -> float:
    """Limit ``value`` to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))
