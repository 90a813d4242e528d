"""Positioning factor"""

from typing import Union

from ..data.models import PositioningInput


def score_positioning(positioning: Union[PositioningInput, float]) -> float:
    """
    Map a positioning percentile (0-100) to a score

    >90 -> 1.0, >70 -> 0.5, >30 -> 0.0, >10 -> -0.5, else -1.0
    """
    if isinstance(positioning, PositioningInput):
        percentile = positioning.percentile_rank
    else:
        percentile = positioning

    if percentile > 90:
        return 1.0
    elif percentile > 70:
        return 0.5
    elif percentile > 30:
        return 0.0
    elif percentile > 10:
        return -0.5
    else:
        return -1.0
