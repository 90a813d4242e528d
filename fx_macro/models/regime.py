"""Market regime classification and the factor weights it selects."""

from dataclasses import dataclass
from enum import Enum


class MarketRegime(str, Enum):
    """Qualitative market state driving factor-weight selection."""
    RISK_OFF = "RISK_OFF"
    RISK_ON = "RISK_ON"
    NEUTRAL = "NEUTRAL"
    CENTRAL_BANK_WEEK = "CENTRAL_BANK_WEEK"


@dataclass(frozen=True)
class FactorWeights:
    """
    Factor weights resolved for a regime.

    The four adjustable weights sum to 1.00 in every default regime; the fixed
    positioning weight is applied on top, so the grand total is 1.05 and
    is not normalized.
    """
    rate_policy: float
    growth_momentum: float
    real_rate_edge: float
    risk_appetite: float
    positioning: float = 0.05

    @property
    def adjustable_total(self) -> float:
        return self.rate_policy + self.growth_momentum + self.real_rate_edge + self.risk_appetite

    @property
    def grand_total(self) -> float:
        return self.adjustable_total + self.positioning

    def to_dict(self) -> dict[str, float]:
        return {
            "rate_policy": self.rate_policy,
            "growth_momentum": self.growth_momentum,
            "real_rate_edge": self.real_rate_edge,
            "risk_appetite": self.risk_appetite,
            "positioning": self.positioning,
        }
