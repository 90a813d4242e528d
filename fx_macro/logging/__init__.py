"""
Logging configuration and utilities for the macro scoring engine.
"""
from .config import configure_logging, get_logger, get_scoring_logger

__all__ = ["configure_logging", "get_logger", "get_scoring_logger"]
