"""
varquantity Config Module

Model files (YAML) describing named variable quantities.
"""

from .validator import ConfigurationError, validate_required, require_key
from .loader import load_config, build_quantity, build_quantities, parse_factors

__all__ = [
    'ConfigurationError',
    'validate_required',
    'require_key',
    'load_config',
    'build_quantity',
    'build_quantities',
    'parse_factors',
]
