#!/usr/bin/env python3
"""
Basic Usage Example - FX Macro Scoring Engine

This script demonstrates the basic usage of the macro scoring engine with the
sample currency set. It shows how to:
- Initialize the engine
- Run a scoring pass over the default currencies
- Read composite scores and their factor breakdown
- Inspect the strongest pair signals
- Parse a raw payload into scoring inputs

Run: python examples/basic_usage.py
"""

from fx_macro import MacroScoringEngine
from fx_macro.data.parsers import parse_currency_set, parse_market_snapshot
from fx_macro.data.samples import sample_currency_set, sample_market_snapshot
from fx_macro.logging import configure_logging
from fx_macro.models.scores import CompositeCurrencyScore, PairSignal, ScoringResult

STRESSED_PAYLOAD = {
    "volatility": {
        "current": 35.0,
        "trailing_window": [20 + i * 0.5 for i in range(20)],
    },
    "cross_asset": {
        "equity_return": -2.5,
        "safe_haven_return": 1.5,
        "equity_price": 440.0,
        "equity_moving_average_20": 450.0,
    },
    "label": "stressed",
}

STRESSED_CURRENCIES = {
    "USD": {
        "rate_policy": {"current_rate": 5.25, "terminal_rate": 5.50, "hawkish_mentions": 3, "dovish_mentions": 1},
        "growth_momentum": {"employment": 175, "purchasing_managers_index": 48.5, "gdp_quarter_over_quarter": 1.5},
        "real_rate": {"two_year_yield": 4.7, "five_year_five_year_breakeven": 2.3},
        "positioning": {"percentile_rank": 50},
    },
    "JPY": {
        "rate_policy": {"current_rate": 0.25, "terminal_rate": 0.50, "hawkish_mentions": 2},
        "growth_momentum": {"employment": 1.28, "purchasing_managers_index": 49.5, "gdp_quarter_over_quarter": 0.4},
        "real_rate": {"two_year_yield": 0.4, "five_year_five_year_breakeven": 1.1},
        "positioning": {"percentile_rank": 15},
    },
    "AUD": {
        "rate_policy": {"current_rate": 4.35, "terminal_rate": 3.85, "dovish_mentions": 4},
        "growth_momentum": {"employment": 66.2, "purchasing_managers_index": 47.2, "gdp_quarter_over_quarter": 0.2},
        "real_rate": {"two_year_yield": 3.6, "five_year_five_year_breakeven": 2.6},
        "positioning": {"percentile_rank": 85},
    },
}


def print_score(score: CompositeCurrencyScore) -> None:
    """Print a currency's total score and its factor breakdown."""
    print(f"  {score.currency_code}: {score.total_score:+.4f}")
    for factor, contribution in score.weighted_components().items():
        print(f"      {factor:<16} {contribution:+.4f}")


def print_signal(signal: PairSignal) -> None:
    """Print one pair signal."""
    print(f"  {signal.pair:<8} diff={signal.score_differential:+.4f}  "
          f"{signal.bias_label:<18} {signal.strength_tier.value:<12} {signal.confidence_tier.value}")


def print_result(result: ScoringResult) -> None:
    """Print regime, ranked scores and the top signals of a scoring pass."""
    print(f"  Regime: {result.regime.value} (volatility percentile {result.volatility_percentile:.1f})")
    print(f"  Weights: {result.weights.to_dict()}")
    print()
    print("  Currencies, strongest first:")
    for score in result.ranked_currencies():
        print_score(score)
    print()
    print("  Top signals:")
    for signal in result.top_signals():
        print_signal(signal)
    print()


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("FX Macro Scoring Engine - Basic Usage Demo")
    print("=" * 60)

    print("1. Initializing the scoring engine...")
    engine = MacroScoringEngine()
    print("   Engine initialized successfully!")
    print()

    print("2. Scoring the sample currency set...")
    result = engine.recalculate(sample_market_snapshot(), sample_currency_set())
    print_result(result)

    print("3. Same inputs during a central bank week...")
    result = engine.recalculate(sample_market_snapshot(is_central_bank_week=True), sample_currency_set())
    print_result(result)

    print("4. Scoring a parsed payload in a stressed market...")
    market = parse_market_snapshot(STRESSED_PAYLOAD)
    currencies = parse_currency_set(STRESSED_CURRENCIES)
    result = engine.recalculate(market, currencies)
    print_result(result)

    print("Demo completed successfully!")


if __name__ == "__main__":
    main()
