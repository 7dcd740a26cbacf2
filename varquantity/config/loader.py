"""
varquantity Model Files

A model file is YAML:

    factors:                      # optional default influencing factors
      - 1.2 T
      - 20 Hz
    quantities:
      core_losses:
        type: Power
        value:
          type: Polynomial
          coefficients: [1000 W/T^2, 0 W/T, 0 W]
      resistance:
        type: ElectricalResistance
        value: 2 mohm

Each quantity value is a number (SI), a quantity string or a quantity
function mapping, as accepted by varquantity.serialization.from_value.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from varquantity.config.validator import (
    ConfigurationError, REQUIRED_FIELDS, require_key, validate_required, validate_section,
)
from varquantity.quantities import get_quantity_type
from varquantity.serialization import from_value
from varquantity.units import DynQuantity, Q
from varquantity.var_quantity import VarQuantity

logger = logging.getLogger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and validate a model file.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML or lacks
            required keys
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Model file not found: {config_path}")

    with open(config_path) as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse model file {config_path}: {e}") from e

    validate_section(config, 'model', config_path)

    quantities = config['quantities']
    if not isinstance(quantities, dict):
        raise ConfigurationError(
            f"'quantities' in {config_path} must be a mapping of name -> definition"
        )
    for name, definition in quantities.items():
        validate_required(definition, REQUIRED_FIELDS['quantity'], f"quantities.{name}", config_path)

    logger.info(f"Loaded model file {config_path} ({len(quantities)} quantities)")
    return config


def build_quantity(name: str, definition: Dict[str, Any]) -> VarQuantity:
    """Build one VarQuantity from its definition mapping."""
    section = f"quantities.{name}"
    type_name = require_key(definition, 'type', section)
    value = require_key(definition, 'value', section)

    try:
        quantity_type = get_quantity_type(type_name)
    except KeyError as e:
        raise ConfigurationError(f"Quantity '{name}': {e.args[0]}") from e

    try:
        var_quantity = from_value(quantity_type, value)
    except (ValueError, KeyError, TypeError) as e:
        raise ConfigurationError(f"Quantity '{name}' ({type_name}) cannot be built: {e}") from e

    logger.debug(f"Built {name}: {type(var_quantity).__name__} {type_name}")
    return var_quantity


def build_quantities(config: Dict[str, Any]) -> Dict[str, VarQuantity]:
    """Build all quantities of a loaded model file, keyed by name."""
    quantities = require_key(config, 'quantities', 'model')
    return {name: build_quantity(name, definition) for name, definition in quantities.items()}


def parse_factors(values: Optional[Sequence[Any]]) -> List[DynQuantity]:
    """
    Parse influencing factors ("1.2 T", "20 Hz", 0.5).

    Raises:
        ConfigurationError: If values is not a list or a value is not a
            valid quantity
    """
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        raise ConfigurationError(
            f"Influencing factors must be a list of quantities, got {values!r}"
        )

    factors = []
    for value in values:
        try:
            factors.append(Q(value))
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid influencing factor {value!r}: {e}") from e
    return factors
