"""Regime-dependent factor weight lookup"""

from typing import Optional

from ..config.defaults import RegimeWeightParams, WeightSet
from ..models.regime import FactorWeights, MarketRegime


class WeightTable:
    """Maps a regime to its factor weights. Unlisted regimes use the NEUTRAL set."""

    def __init__(self, params: Optional[RegimeWeightParams] = None):
        self.params = params or RegimeWeightParams()

    def _weight_set(self, regime: MarketRegime) -> WeightSet:
        if regime == MarketRegime.RISK_OFF:
            return self.params.risk_off
        if regime == MarketRegime.RISK_ON:
            return self.params.risk_on
        if regime == MarketRegime.CENTRAL_BANK_WEEK:
            return self.params.central_bank_week
        return self.params.neutral

    def get(self, regime: MarketRegime) -> FactorWeights:
        weight_set = self._weight_set(regime)
        return FactorWeights(
            rate_policy=weight_set.rate_policy,
            growth_momentum=weight_set.growth_momentum,
            real_rate_edge=weight_set.real_rate_edge,
            risk_appetite=weight_set.risk_appetite,
            positioning=self.params.positioning,
        )


_default_table = WeightTable()


def get_weights(regime: MarketRegime) -> FactorWeights:
    """Factor weights for ``regime`` from the default table."""
    return _default_table.get(regime)
