"""Market regime detection from volatility and cross-asset performance"""

from typing import Optional

from ..config.defaults import RegimeParams
from ..data.models import CrossAssetReturn, VolatilityObservation
from ..logging.config import get_scoring_logger, log_regime_decision
from ..metrics.percentile import volatility_percentile
from ..models.regime import MarketRegime

logger = get_scoring_logger(__name__)


class RegimeDetector:
    """
    Classifies the current market regime.

    Order of precedence:
    1. Central bank week short-circuits everything else
    2. RISK_OFF if volatility percentile > risk_off threshold, or the safe
       haven is outperforming equities
    3. RISK_ON if volatility percentile < risk_on threshold and equities trade
       above their 20-day average
    4. NEUTRAL otherwise
    """

    def __init__(self, params: Optional[RegimeParams] = None):
        self.params = params or RegimeParams()
        self.logger = logger

    def detect(
        self,
        volatility: VolatilityObservation,
        cross_asset: CrossAssetReturn,
        is_central_bank_week: bool = False,
    ) -> MarketRegime:
        """
        Detect the market regime.

        Args:
            volatility: Current volatility reading and trailing window
            cross_asset: Equity and safe-haven performance
            is_central_bank_week: Whether a major central bank meets this week

        Returns:
            MarketRegime for this pass

        Raises:
            InsufficientDataError: If the trailing window is empty
        """
        if is_central_bank_week:
            log_regime_decision(self.logger, MarketRegime.CENTRAL_BANK_WEEK.value, None,
                                reason="central_bank_week")
            return MarketRegime.CENTRAL_BANK_WEEK

        percentile = volatility_percentile(volatility)

        volatility_risk_off = percentile > self.params.risk_off_percentile
        if volatility_risk_off or cross_asset.safe_haven_outperforming:
            log_regime_decision(
                self.logger, MarketRegime.RISK_OFF.value, percentile,
                reason="volatility_elevated" if volatility_risk_off else "safe_haven_outperforming",
                context={"equity_return": cross_asset.equity_return,
                         "safe_haven_return": cross_asset.safe_haven_return},
            )
            return MarketRegime.RISK_OFF

        if percentile < self.params.risk_on_percentile and cross_asset.equity_above_average:
            log_regime_decision(
                self.logger, MarketRegime.RISK_ON.value, percentile,
                reason="volatility_subdued_equity_trending",
                context={"equity_price": cross_asset.equity_price,
                         "equity_moving_average_20": cross_asset.equity_moving_average_20},
            )
            return MarketRegime.RISK_ON

        log_regime_decision(self.logger, MarketRegime.NEUTRAL.value, percentile, reason="no_condition_met")
        return MarketRegime.NEUTRAL


_default_detector = RegimeDetector()


def detect_regime(
    volatility: VolatilityObservation,
    cross_asset: CrossAssetReturn,
    is_central_bank_week: bool = False,
) -> MarketRegime:
    """Detect the market regime with default thresholds."""
    return _default_detector.detect(volatility, cross_asset, is_central_bank_week)
