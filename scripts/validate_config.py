#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fx_macro.config.loader import ConfigLoader
from fx_macro.config.validation import ConfigValidator, ValidationError
from fx_macro.errors import ConfigurationError


def validate_merged_config(loader: ConfigLoader,
                           overrides: Optional[Dict[str, Any]] = None) -> List[ValidationError]:
    """Validate the merged configuration for a set of overrides."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating FX Macro configuration in {loader.config_dir}...")

    currencies = loader.load_currency_config()
    if currencies:
        print(f"Found per-currency overrides for: {', '.join(sorted(currencies))}")
    else:
        print("No currencies.yaml found, using defaults only")

    all_valid = True

    errors = validate_merged_config(loader)
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("Merged configuration is valid")

    # A call-time override should still validate
    try:
        config = loader.build_config({"signals": {"bias_threshold": 0.75}})
        print(f"Override check passed (bias_threshold={config.signals.bias_threshold})")
    except ConfigurationError as e:
        print(f"Override check failed: {e}")
        for message in e.errors:
            print(f"  • {message}")
        all_valid = False

    if all_valid:
        print("\nAll configuration validation passed!")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
