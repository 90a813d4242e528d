"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_REGIME_KEYS = ("risk_off", "risk_on", "central_bank_week", "neutral")
_WEIGHT_KEYS = ("rate_policy", "growth_momentum", "real_rate_edge", "risk_appetite")
_EMPLOYMENT_COMPARISONS = ("nfp", "rate", "ratio", "count")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_weight_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the regime weight table."""
        errors = []

        for regime_key in _REGIME_KEYS:
            if regime_key not in params:
                continue
            weight_set = params[regime_key]
            if not isinstance(weight_set, dict):
                errors.append(ValidationError(
                    field=f"weights.{regime_key}",
                    message="Must be a mapping of factor weights",
                    value=weight_set
                ))
                continue

            for weight_key in _WEIGHT_KEYS:
                value = weight_set.get(weight_key)
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=f"weights.{regime_key}.{weight_key}",
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        if "positioning" in params:
            value = params["positioning"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="weights.positioning",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_regime_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate regime detection thresholds."""
        errors = []

        for key in ("risk_off_percentile", "risk_on_percentile"):
            if key in params:
                value = params[key]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=f"regime.{key}",
                        message="Must be a percentile between 0 and 100",
                        value=value
                    ))

        risk_off = params.get("risk_off_percentile")
        risk_on = params.get("risk_on_percentile")
        if _is_number(risk_off) and _is_number(risk_on) and risk_on > risk_off:
            errors.append(ValidationError(
                field="regime.risk_on_percentile",
                message="Must not exceed risk_off_percentile",
                value=risk_on
            ))

        return errors

    @staticmethod
    def validate_currency_tables(params: dict[str, Any]) -> list[ValidationError]:
        """Validate per-currency constant tables."""
        errors = []

        for code, value in (params.get("rate_sensitivity") or {}).items():
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field=f"currencies.rate_sensitivity.{code}",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "default_rate_sensitivity" in params:
            value = params["default_rate_sensitivity"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="currencies.default_rate_sensitivity",
                    message="Must be a non-negative number",
                    value=value
                ))

        for code, threshold in (params.get("employment_thresholds") or {}).items():
            if not isinstance(threshold, dict):
                errors.append(ValidationError(
                    field=f"currencies.employment_thresholds.{code}",
                    message="Must be a mapping with strong, weak and comparison",
                    value=threshold
                ))
                continue

            strong = threshold.get("strong")
            weak = threshold.get("weak")
            comparison = threshold.get("comparison")
            if not _is_number(strong) or not _is_number(weak):
                errors.append(ValidationError(
                    field=f"currencies.employment_thresholds.{code}",
                    message="strong and weak must be numbers",
                    value=threshold
                ))
            elif strong == weak:
                errors.append(ValidationError(
                    field=f"currencies.employment_thresholds.{code}",
                    message="strong and weak must differ",
                    value=threshold
                ))
            if comparison not in _EMPLOYMENT_COMPARISONS:
                errors.append(ValidationError(
                    field=f"currencies.employment_thresholds.{code}.comparison",
                    message=f"Must be one of {', '.join(_EMPLOYMENT_COMPARISONS)}",
                    value=comparison
                ))

        for code, affinity in (params.get("risk_affinities") or {}).items():
            if not isinstance(affinity, dict):
                errors.append(ValidationError(
                    field=f"currencies.risk_affinities.{code}",
                    message="Must be a mapping with risk_on and safe_haven",
                    value=affinity
                ))
                continue
            for key in ("risk_on", "safe_haven"):
                value = affinity.get(key, 0.0)
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=f"currencies.risk_affinities.{code}.{key}",
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate signal tier thresholds."""
        errors = []

        tiers = ("very_strong", "strong", "moderate", "weak")
        for key in tiers + ("bias_threshold",):
            if key in params:
                value = params[key]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=f"signals.{key}",
                        message="Must be a non-negative number",
                        value=value
                    ))

        values = [params.get(key) for key in tiers]
        if all(_is_number(v) for v in values) and values != sorted(values, reverse=True):
            errors.append(ValidationError(
                field="signals",
                message="Tier thresholds must be descending from very_strong to weak",
                value=values
            ))

        if "top_count" in params:
            value = params["top_count"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="signals.top_count",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "weights" in config:
            errors.extend(ConfigValidator.validate_weight_params(config["weights"]))

        if "regime" in config:
            errors.extend(ConfigValidator.validate_regime_params(config["regime"]))

        if "currencies" in config:
            errors.extend(ConfigValidator.validate_currency_tables(config["currencies"]))

        if "signals" in config:
            errors.extend(ConfigValidator.validate_signal_params(config["signals"]))

        # Validate real rate multiplier
        multiplier = (config.get("real_rate") or {}).get("multiplier")
        if multiplier is not None and (not _is_number(multiplier) or multiplier <= 0):
            errors.append(ValidationError(
                field="real_rate.multiplier",
                message="Must be a positive number",
                value=multiplier
            ))

        return errors
