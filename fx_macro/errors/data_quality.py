"""
Data quality error classifications for caller-supplied scoring inputs.

These exceptions describe inputs the engine cannot score. They carry enough
context for the caller to point at the offending field or currency.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for input data quality issues."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidInputError(DataQualityError):
    """Input cannot be scored as supplied."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InsufficientDataError(InvalidInputError):
    """Not enough observations for a calculation (e.g. empty volatility window)."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class MalformedDataError(InvalidInputError):
    """Data exists but is not a usable value (NaN, out of range, wrong type)."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class MissingDataError(InvalidInputError):
    """A required field is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type
