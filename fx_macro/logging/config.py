"""
Centralized logging configuration for the macro scoring engine.

This module provides standardized logging configuration using structlog
for all components. Scoring passes, regime decisions and pair signals are
logged as structured events so a caller can audit why a bias was produced.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    # Final rendering
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_scoring_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for scoring audit events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for regime and signal decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="scoring",
        audit_trail=True
    )


def log_regime_decision(
    logger: FilteringBoundLogger,
    regime: str,
    volatility_percentile: Optional[float],
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a regime classification with standardized format.

    Args:
        logger: Structlog logger instance
        regime: Regime value that was selected
        volatility_percentile: Percentile used for the decision (None if short-circuited)
        reason: Which condition decided the regime
        context: Additional context data
    """
    bound_logger = logger.bind(
        regime=regime,
        volatility_percentile=volatility_percentile,
        reason=reason,
        audit_event="regime_decision"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Market regime detected")


def log_signal(
    logger: FilteringBoundLogger,
    pair: str,
    score_differential: float,
    bias: str,
    strength: str,
    confidence: str
) -> None:
    """
    Log a pair signal with standardized format.

    Neutral signals are logged at DEBUG, directional ones at INFO.

    Args:
        logger: Structlog logger instance
        pair: Pair label, e.g. "EUR/USD"
        score_differential: Composite score of the first currency minus the second
        bias: Bias label
        strength: Strength tier
        confidence: Confidence tier
    """
    bound_logger = logger.bind(
        pair=pair,
        score_differential=round(score_differential, 6),
        bias=bias,
        strength=strength,
        confidence=confidence,
        audit_event="pair_signal"
    )

    if bias == "NEUTRAL":
        bound_logger.debug("Pair signal generated")
    else:
        bound_logger.info("Pair signal generated")
