"""
Canonical input models for the macro scoring engine.

All inputs are caller-supplied, immutable value objects. A scoring pass reads
them and never mutates them.
"""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class VolatilityObservation:
    """Current volatility index reading and its trailing window (nominally 20 days)."""
    current: float
    trailing_window: Sequence[float]

    def __post_init__(self):
        # Store an immutable copy so the caller's list can't change a pass in flight
        object.__setattr__(self, "trailing_window", tuple(self.trailing_window))


@dataclass(frozen=True)
class CrossAssetReturn:
    """Equity vs safe-haven performance used for risk sentiment."""
    equity_return: float                # Percent
    safe_haven_return: float            # Percent
    equity_price: float
    equity_moving_average_20: float

    @property
    def safe_haven_outperforming(self) -> bool:
        return self.safe_haven_return > self.equity_return

    @property
    def equity_above_average(self) -> bool:
        return self.equity_price > self.equity_moving_average_20


@dataclass(frozen=True)
class RatePolicyInput:
    """Policy rate path and central bank tone for one currency."""
    currency_code: str
    current_rate: float                 # Percent
    terminal_rate: float                # Percent
    hawkish_mentions: int = 0
    dovish_mentions: int = 0

    @property
    def rate_gap(self) -> float:
        return self.terminal_rate - self.current_rate


@dataclass(frozen=True)
class EmploymentReading:
    """Headline employment print in the currency's own convention."""
    currency_code: str
    value: float


@dataclass(frozen=True)
class GrowthMomentumInput:
    """Employment, manufacturing and GDP readings for one currency."""
    employment: EmploymentReading
    purchasing_managers_index: float
    gdp_quarter_over_quarter: float     # Percent


@dataclass(frozen=True)
class RealRateInput:
    """Inputs for the real interest rate edge."""
    currency_code: str
    two_year_yield: float               # Percent
    five_year_five_year_breakeven: float  # Percent

    @property
    def real_rate(self) -> float:
        return self.two_year_yield - self.five_year_five_year_breakeven


@dataclass(frozen=True)
class PositioningInput:
    """Speculative positioning percentile (0-100) for one currency."""
    currency_code: str
    percentile_rank: float


@dataclass(frozen=True)
class CurrencyInputs:
    """Every per-currency input needed to score one currency."""
    currency_code: str
    rate_policy: RatePolicyInput
    growth_momentum: GrowthMomentumInput
    real_rate: RealRateInput
    positioning: PositioningInput


@dataclass(frozen=True)
class MarketSnapshot:
    """Market-wide inputs shared by every currency in a scoring pass."""
    volatility: VolatilityObservation
    cross_asset: CrossAssetReturn
    is_central_bank_week: bool = False
    label: Optional[str] = None         # Free-form tag carried into logs
