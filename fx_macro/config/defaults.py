"""Default configuration parameters for the macro scoring model."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RegimeParams:
    """Regime detection thresholds (volatility percentile, 0-100)."""
    risk_off_percentile: float = 75.0          # Above this -> RISK_OFF
    risk_on_percentile: float = 25.0           # Below this (and equity above MA) -> RISK_ON


@dataclass(frozen=True)
class WeightSet:
    """Adjustable factor weights for one regime."""
    rate_policy: float
    growth_momentum: float
    real_rate_edge: float
    risk_appetite: float


@dataclass(frozen=True)
class RegimeWeightParams:
    """Factor weights keyed by regime. Positioning is not part of the table."""
    risk_off: WeightSet = WeightSet(0.45, 0.15, 0.25, 0.15)
    risk_on: WeightSet = WeightSet(0.30, 0.35, 0.25, 0.10)
    central_bank_week: WeightSet = WeightSet(0.55, 0.15, 0.25, 0.05)
    neutral: WeightSet = WeightSet(0.35, 0.25, 0.30, 0.10)
    positioning: float = 0.05                  # Fixed, applied on top of the table


@dataclass(frozen=True)
class RatePolicyParams:
    """Rate policy factor parameters."""
    differential_weight: float = 0.8
    tone_weight: float = 0.2
    tone_per_mention: float = 0.1


@dataclass(frozen=True)
class GrowthParams:
    """Growth momentum factor parameters."""
    employment_weight: float = 0.4
    manufacturing_weight: float = 0.3
    gdp_weight: float = 0.3

    # PMI step thresholds
    pmi_expansion: float = 52.0                # Strictly above -> 1.0
    pmi_neutral: float = 50.0                  # At or above -> 0.5
    pmi_soft: float = 48.0                     # At or above -> 0.0
    pmi_contraction: float = 45.0              # At or above -> -0.5

    # GDP QoQ step thresholds (percent)
    gdp_strong: float = 3.0                    # Strictly above -> 1.0
    gdp_solid: float = 2.0                     # At or above -> 0.5
    gdp_moderate: float = 1.0                  # At or above -> 0.0
    gdp_flat: float = 0.0                      # At or above -> -0.5


@dataclass(frozen=True)
class RealRateParams:
    """Real interest edge parameters."""
    multiplier: float = 1.5


@dataclass(frozen=True)
class RiskAppetiteParams:
    """Risk appetite factor parameters."""
    volatility_weight: float = 0.6
    cross_asset_weight: float = 0.4
    cross_asset_multiplier: float = 2.0


@dataclass(frozen=True)
class EmploymentThreshold:
    """Currency-specific employment reading thresholds."""
    strong: float
    weak: float
    comparison: str                            # 'nfp', 'rate', 'ratio' or 'count'

    @property
    def lower_is_better(self) -> bool:
        return self.comparison == "count"


@dataclass(frozen=True)
class RiskAffinity:
    """How a currency responds to risk-on / risk-off moves."""
    risk_on: float = 0.0
    safe_haven: float = 0.0


def _default_rate_sensitivity() -> dict[str, float]:
    return {
        "USD": 0.4,
        "EUR": 0.6,
        "GBP": 0.5,
        "JPY": 1.0,
        "AUD": 0.4,
        "CAD": 0.3,
        "CHF": 0.8,
    }


def _default_employment_thresholds() -> dict[str, EmploymentThreshold]:
    return {
        "USD": EmploymentThreshold(strong=180.0, weak=100.0, comparison="nfp"),    # NFP, thousands
        "EUR": EmploymentThreshold(strong=0.3, weak=-0.1, comparison="rate"),      # Employment YoY %
        "GBP": EmploymentThreshold(strong=-20.0, weak=40.0, comparison="count"),   # Claimant count, thousands
        "JPY": EmploymentThreshold(strong=1.30, weak=1.25, comparison="ratio"),    # Jobs-to-applicants
        "AUD": EmploymentThreshold(strong=66.5, weak=66.0, comparison="rate"),     # Participation %
        "CAD": EmploymentThreshold(strong=62.5, weak=61.5, comparison="rate"),     # Employment rate %
    }


def _default_risk_affinities() -> dict[str, RiskAffinity]:
    return {
        "USD": RiskAffinity(risk_on=0.0, safe_haven=0.3),
        "EUR": RiskAffinity(risk_on=0.5, safe_haven=0.0),
        "GBP": RiskAffinity(risk_on=0.3, safe_haven=0.0),
        "JPY": RiskAffinity(risk_on=0.0, safe_haven=1.0),
        "AUD": RiskAffinity(risk_on=1.0, safe_haven=0.0),
        "CAD": RiskAffinity(risk_on=0.3, safe_haven=0.0),
        "CHF": RiskAffinity(risk_on=0.0, safe_haven=0.8),
    }


@dataclass(frozen=True)
class CurrencyTables:
    """
    Per-currency constants.

    Each table is a partial mapping. Currencies not listed fall back to
    ``default_rate_sensitivity``, an employment score of 0 and a neutral
    risk affinity, so a new currency never halts a scoring pass.
    """
    rate_sensitivity: dict[str, float] = field(default_factory=_default_rate_sensitivity)
    employment_thresholds: dict[str, EmploymentThreshold] = field(
        default_factory=_default_employment_thresholds
    )
    risk_affinities: dict[str, RiskAffinity] = field(default_factory=_default_risk_affinities)
    default_rate_sensitivity: float = 0.5

    def sensitivity_for(self, currency_code: str) -> float:
        return self.rate_sensitivity.get(currency_code, self.default_rate_sensitivity)

    def employment_threshold_for(self, currency_code: str) -> Optional[EmploymentThreshold]:
        return self.employment_thresholds.get(currency_code)

    def risk_affinity_for(self, currency_code: str) -> RiskAffinity:
        return self.risk_affinities.get(currency_code, RiskAffinity())


@dataclass(frozen=True)
class SignalParams:
    """Pair signal thresholds on the absolute score differential."""
    very_strong: float = 2.0
    strong: float = 1.5
    moderate: float = 1.0
    weak: float = 0.5
    bias_threshold: float = 0.5                # Differential must exceed this to take a side
    top_count: int = 5


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    regime: RegimeParams
    weights: RegimeWeightParams
    rate_policy: RatePolicyParams
    growth: GrowthParams
    real_rate: RealRateParams
    risk_appetite: RiskAppetiteParams
    currencies: CurrencyTables
    signals: SignalParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        regime=RegimeParams(),
        weights=RegimeWeightParams(),
        rate_policy=RatePolicyParams(),
        growth=GrowthParams(),
        real_rate=RealRateParams(),
        risk_appetite=RiskAppetiteParams(),
        currencies=CurrencyTables(),
        signals=SignalParams(),
    )
