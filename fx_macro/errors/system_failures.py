"""
System failure error classifications.

These exceptions represent failures that valid inputs should never produce,
or configuration that prevents the engine from starting.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ScoreCalculationError(SystemFailureError):
    """A factor or composite score could not be produced as a finite number."""

    def __init__(self, message: str, factor_name: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.factor_name = factor_name
        self.calculation_input = calculation_input


class ConfigurationError(SystemFailureError):
    """Configuration overrides failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
