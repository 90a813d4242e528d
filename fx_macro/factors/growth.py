"""Growth momentum factor: employment, manufacturing PMI and GDP"""

from typing import Optional

from ..config.defaults import CurrencyTables, GrowthParams
from ..data.models import EmploymentReading, GrowthMomentumInput


def score_employment(reading: EmploymentReading, tables: Optional[CurrencyTables] = None) -> float:
    """
    Employment sub-score in [-1, 1] using currency-specific thresholds

    Higher-is-better readings (nfp, rate, ratio):
        value >= strong -> 1.0, value <= weak -> -1.0,
        else (value - weak) / (strong - weak) * 2 - 1
    Lower-is-better readings (count, e.g. claimant count):
        value <= strong -> 1.0, value >= weak -> -1.0,
        else (strong - value) / (strong - weak) * 2 - 1

    Args:
        reading: Employment print for one currency
        tables: Per-currency thresholds (defaults if None)

    Returns:
        Employment score, 0.0 for currencies without thresholds
    """
    tables = tables or CurrencyTables()
    threshold = tables.employment_threshold_for(reading.currency_code)
    if threshold is None:
        return 0.0

    strong, weak, value = threshold.strong, threshold.weak, reading.value

    if threshold.lower_is_better:
        if value <= strong:
            return 1.0
        if value >= weak:
            return -1.0
        return (strong - value) / (strong - weak) * 2 - 1

    if value >= strong:
        return 1.0
    if value <= weak:
        return -1.0
    return (value - weak) / (strong - weak) * 2 - 1


def score_manufacturing(pmi: float, params: Optional[GrowthParams] = None) -> float:
    """
    Manufacturing PMI step score

    >52 -> 1.0, [50, 52] -> 0.5, [48, 50) -> 0.0, [45, 48) -> -0.5, <45 -> -1.0
    """
    params = params or GrowthParams()

    if pmi > params.pmi_expansion:
        return 1.0
    elif pmi >= params.pmi_neutral:
        return 0.5
    elif pmi >= params.pmi_soft:
        return 0.0
    elif pmi >= params.pmi_contraction:
        return -0.5
    else:
        return -1.0


def score_gdp(gdp_qoq: float, params: Optional[GrowthParams] = None) -> float:
    """
    GDP quarter-over-quarter step score

    >3.0 -> 1.0, [2.0, 3.0] -> 0.5, [1.0, 2.0) -> 0.0, [0, 1.0) -> -0.5, <0 -> -1.0
    """
    params = params or GrowthParams()

    if gdp_qoq > params.gdp_strong:
        return 1.0
    elif gdp_qoq >= params.gdp_solid:
        return 0.5
    elif gdp_qoq >= params.gdp_moderate:
        return 0.0
    elif gdp_qoq >= params.gdp_flat:
        return -0.5
    else:
        return -1.0


def score_growth_momentum(
    data: GrowthMomentumInput,
    params: Optional[GrowthParams] = None,
    tables: Optional[CurrencyTables] = None,
) -> float:
    """
    Growth momentum factor score

    score = 0.4 * employment + 0.3 * manufacturing + 0.3 * gdp
    """
    params = params or GrowthParams()

    employment = score_employment(data.employment, tables)
    manufacturing = score_manufacturing(data.purchasing_managers_index, params)
    gdp = score_gdp(data.gdp_quarter_over_quarter, params)

    return (employment * params.employment_weight
            + manufacturing * params.manufacturing_weight
            + gdp * params.gdp_weight)
