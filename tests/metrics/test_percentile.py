"""Tests for percentile rank calculations."""

import math

import pytest

from fx_macro.data.models import VolatilityObservation
from fx_macro.errors import InsufficientDataError, MalformedDataError
from fx_macro.metrics.percentile import percentile_rank, volatility_percentile


class TestPercentileRank:
    """Test suite for percentile_rank."""

    def test_inclusive_count(self):
        # 1, 2 and 3 are at or below 3
        assert percentile_rank(3, [1, 2, 3, 4]) == 75.0

    def test_above_every_observation(self):
        assert percentile_rank(10, [1, 2, 3, 4]) == 100.0

    def test_below_every_observation(self):
        assert percentile_rank(0, [1, 2, 3, 4]) == 0.0

    def test_order_independent(self):
        assert percentile_rank(2.5, [4, 1, 3, 2]) == percentile_rank(2.5, [1, 2, 3, 4]) == 50.0

    def test_single_observation(self):
        assert percentile_rank(5, [5]) == 100.0
        assert percentile_rank(4, [5]) == 0.0

    def test_generator_input(self):
        assert percentile_rank(3, (v for v in [1, 2, 3, 4])) == 75.0

    def test_empty_series_raises(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            percentile_rank(1.0, [])

        assert exc_info.value.required_count == 1
        assert exc_info.value.available_count == 0

    def test_non_finite_value_raises(self):
        with pytest.raises(MalformedDataError):
            percentile_rank(math.nan, [1, 2, 3])

    def test_non_finite_observation_raises(self):
        with pytest.raises(MalformedDataError):
            percentile_rank(1.0, [1, math.inf, 3])


class TestVolatilityPercentile:
    """Test suite for volatility_percentile."""

    def test_sample_window(self, sample_volatility):
        # 13 of the 20 sample observations are at or below 22.5
        assert volatility_percentile(sample_volatility) == 65.0

    def test_stressed_reading(self, stressed_volatility):
        assert volatility_percentile(stressed_volatility) == 100.0

    def test_calm_reading(self, calm_volatility):
        assert volatility_percentile(calm_volatility) == 0.0

    def test_empty_window_raises(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            volatility_percentile(VolatilityObservation(current=20.0, trailing_window=[]))

        assert exc_info.value.field == "volatility.trailing_window"
