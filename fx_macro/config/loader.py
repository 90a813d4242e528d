"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CurrencyTables,
    DefaultConfig,
    EmploymentThreshold,
    GrowthParams,
    RatePolicyParams,
    RealRateParams,
    RegimeParams,
    RegimeWeightParams,
    RiskAffinity,
    RiskAppetiteParams,
    SignalParams,
    WeightSet,
    get_default_config,
)
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_currency_config(self) -> dict[str, Any]:
        """Load per-currency overrides from ``currencies.yaml``."""
        currencies_file = self.config_dir / "currencies.yaml"

        if not currencies_file.exists():
            return {}

        with open(currencies_file) as f:
            currencies_config = yaml.safe_load(f) or {}

        return currencies_config.get("currencies", {}) or {}  # type: ignore[no-any-return]

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-time overrides (highest priority)
        2. Per-currency overrides from currencies.yaml
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply per-currency overrides
        currency_config = self.load_currency_config()
        if currency_config:
            config = self._deep_merge(config, self._currency_tables_from_yaml(currency_config))

        # Apply call-time overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and materialise a DefaultConfig."""
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            messages = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                "Configuration validation failed",
                errors=messages,
            )

        try:
            return self._dict_to_config(merged)
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Configuration could not be built: {e}") from e

    def _currency_tables_from_yaml(self, currency_config: dict[str, Any]) -> dict[str, Any]:
        """Translate the per-currency YAML layout into CurrencyTables fields."""
        tables: dict[str, dict[str, Any]] = {
            "rate_sensitivity": {},
            "employment_thresholds": {},
            "risk_affinities": {},
        }
        for code, entry in currency_config.items():
            entry = entry or {}
            code = str(code).upper()
            if "rate_sensitivity" in entry:
                tables["rate_sensitivity"][code] = entry["rate_sensitivity"]
            if "employment" in entry:
                tables["employment_thresholds"][code] = entry["employment"]
            if "risk_affinity" in entry:
                tables["risk_affinities"][code] = entry["risk_affinity"]

        return {"currencies": {name: table for name, table in tables.items() if table}}

    def _dict_to_config(self, config: dict[str, Any]) -> DefaultConfig:
        """Convert a merged dictionary back into frozen dataclasses."""
        weights = dict(config["weights"])
        for regime_key in ("risk_off", "risk_on", "central_bank_week", "neutral"):
            weights[regime_key] = WeightSet(**weights[regime_key])

        currencies = dict(config["currencies"])
        currencies["employment_thresholds"] = {
            code: EmploymentThreshold(**threshold)
            for code, threshold in currencies["employment_thresholds"].items()
        }
        currencies["risk_affinities"] = {
            code: RiskAffinity(**affinity)
            for code, affinity in currencies["risk_affinities"].items()
        }

        return DefaultConfig(
            regime=RegimeParams(**config["regime"]),
            weights=RegimeWeightParams(**weights),
            rate_policy=RatePolicyParams(**config["rate_policy"]),
            growth=GrowthParams(**config["growth"]),
            real_rate=RealRateParams(**config["real_rate"]),
            risk_appetite=RiskAppetiteParams(**config["risk_appetite"]),
            currencies=CurrencyTables(**currencies),
            signals=SignalParams(**config["signals"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> Any:
        """Convert nested dataclasses (and dicts of dataclasses) to dictionaries."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                result[field_name] = self._dataclass_to_dict(getattr(obj, field_name))
            return result
        if isinstance(obj, dict):
            return {key: self._dataclass_to_dict(value) for key, value in obj.items()}
        return obj

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
