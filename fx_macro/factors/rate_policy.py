"""Rate policy factor: expected rate path plus central bank tone"""

from typing import Optional

from ..config.defaults import CurrencyTables, RatePolicyParams
from ..data.models import RatePolicyInput
from ..utils.numeric import clamp


def score_tone(hawkish_mentions: int = 0, dovish_mentions: int = 0,
               per_mention: float = 0.1) -> float:
    """
    Central bank tone score

    tone = clamp((hawkish - dovish) * per_mention, -1, 1)
    """
    return clamp((hawkish_mentions - dovish_mentions) * per_mention)


def score_rate_policy(
    data: RatePolicyInput,
    params: Optional[RatePolicyParams] = None,
    tables: Optional[CurrencyTables] = None,
) -> float:
    """
    Calculate the rate policy factor score

    differential = (terminal_rate - current_rate) * sensitivity[currency]
    score = 0.8 * differential + 0.2 * tone

    The differential term is not clamped, so the score is unbounded.

    Args:
        data: Rate path and tone inputs for one currency
        params: Factor weights (defaults if None)
        tables: Per-currency sensitivities (defaults if None)

    Returns:
        Rate policy score
    """
    params = params or RatePolicyParams()
    tables = tables or CurrencyTables()

    sensitivity = tables.sensitivity_for(data.currency_code)
    differential_score = data.rate_gap * sensitivity
    tone_score = score_tone(data.hawkish_mentions, data.dovish_mentions, params.tone_per_mention)

    return differential_score * params.differential_weight + tone_score * params.tone_weight
