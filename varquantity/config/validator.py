"""
varquantity Model File Validator

Usage:
    from varquantity.config.validator import ConfigurationError, validate_required

    # In load_config():
    validate_required(config, ['quantities'], 'model', config_path)
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from varquantity.errors import VarQuantityError


class ConfigurationError(VarQuantityError):
    """
    Raised when a model file is missing required keys or describes a
    quantity that cannot be built. The message names the offending keys.
    """
    pass


# Required fields per model file section
REQUIRED_FIELDS = {
    'model': [
        'quantities',
    ],
    'quantity': [
        'type',
        'value',
    ],
}


def validate_required(
    config: Dict[str, Any],
    required_keys: List[str],
    section: str,
    config_path: Optional[Path] = None,
) -> None:
    """
    Validate that all required keys are present.

    Args:
        config: Mapping to check
        required_keys: Keys that must be present and not None
        section: Section name (for error message)
        config_path: Path to model file (for error message)

    Raises:
        ConfigurationError: If any required key is missing or None
    """
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Section '{section}' must be a mapping, got {type(config).__name__}"
        )

    missing = [key for key in required_keys if config.get(key) is None]

    if missing:
        location = f"File: {config_path}\n" if config_path else ""
        raise ConfigurationError(
            f"\n{'='*60}\n"
            f"CONFIGURATION ERROR: Missing required keys\n"
            f"{'='*60}\n"
            f"{location}"
            f"Section: {section}\n\n"
            f"Missing keys:\n"
            f"{''.join(f'  - {k}' + chr(10) for k in missing)}\n"
            f"Add to your model file:\n"
            f"{''.join(f'  {k}: <value>' + chr(10) for k in missing)}"
            f"{'='*60}"
        )


def validate_section(config: Dict[str, Any], section: str, config_path: Optional[Path] = None) -> None:
    """
    Validate a model file section against REQUIRED_FIELDS.

    Raises:
        ConfigurationError: If section unknown or required keys missing
    """
    if section not in REQUIRED_FIELDS:
        raise ConfigurationError(f"Unknown model file section: {section}")

    validate_required(config, REQUIRED_FIELDS[section], section, config_path)


def require_key(config: Dict[str, Any], key: str, section: str = "") -> Any:
    """
    Get a required value. Never returns a default.

    Raises:
        ConfigurationError: If key is missing or None
    """
    if key not in config or config[key] is None:
        raise ConfigurationError(
            f"\n{'='*60}\n"
            f"CONFIGURATION ERROR: {key} not set\n"
            f"{'='*60}\n"
            f"Section: {section}\n\n"
            f"  {key}: <value>\n\n"
            f"{'='*60}"
        )

    return config[key]
