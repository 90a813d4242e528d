"""
Error classification for the macro scoring engine.

Invalid caller inputs are data quality errors and are surfaced by name;
failures inside the scoring pipeline are system failures.
"""

from .data_quality import (
    DataQualityError,
    InvalidInputError,
    InsufficientDataError,
    MalformedDataError,
    MissingDataError,
)
from .system_failures import (
    SystemFailureError,
    ScoreCalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidInputError",
    "InsufficientDataError",
    "MalformedDataError",
    "MissingDataError",
    # System Failures
    "SystemFailureError",
    "ScoreCalculationError",
    "ConfigurationError",
]
