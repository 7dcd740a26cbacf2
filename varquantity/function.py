"""
varquantity Quantity Functions
==============================

The QuantityFunction interface, the registry of persistable function types
and helpers shared by function implementations.

A quantity function maps a list of influencing factors (DynQuantity) to a
DynQuantity. Implementations must be:

    - pure: the same factors always give the same result
    - total: never raise for an unexpected factor set, use a default when
      an expected factor is missing
    - unit-stable: the output unit does not depend on the factors

Usage:
    from varquantity.function import QuantityFunction, register_function

    @register_function
    class MyModel(QuantityFunction):
        def call(self, influencing_factors):
            b = filter_unary_function(influencing_factors, MAGNETIC_FIELD, Q(0, "T"))
            ...
"""

import logging
from typing import Dict, Optional, Sequence

import numpy as np

from varquantity.units import DynQuantity, Dimensions

logger = logging.getLogger(__name__)


# Registry of persistable function types, by type tag
FUNCTION_TYPES: Dict[str, type] = {}


class QuantityFunction:
    """
    Base class for quantity functions.

    Subclasses implement call(). To be persisted they also register with
    @register_function and implement to_dict() / from_dict().
    """

    def call(self, influencing_factors: Sequence[DynQuantity]) -> DynQuantity:
        raise NotImplementedError(f"{type(self).__name__} must implement call()")

    def to_dict(self) -> dict:
        """Parameters of this function, without the type tag."""
        raise NotImplementedError(f"{type(self).__name__} cannot be serialized")

    @classmethod
    def from_dict(cls, data: dict) -> 'QuantityFunction':
        return cls(**data)


def register_function(cls=None, *, tag: Optional[str] = None):
    """
    Register a QuantityFunction class under a type tag (default: class name).

    Can be used as @register_function or @register_function(tag="name").
    """
    def decorator(function_cls):
        name = tag or function_cls.__name__
        if name in FUNCTION_TYPES and FUNCTION_TYPES[name] is not function_cls:
            logger.warning(f"Quantity function type '{name}' re-registered by {function_cls!r}")
        FUNCTION_TYPES[name] = function_cls
        logger.debug(f"Registered quantity function type '{name}'")
        return function_cls

    if cls is None:
        return decorator
    return decorator(cls)


def get_type_tag(function: QuantityFunction) -> str:
    """Registered type tag of a function instance."""
    for tag, function_cls in FUNCTION_TYPES.items():
        if type(function) is function_cls:
            return tag
    raise KeyError(f"{type(function).__name__} is not a registered quantity function type")


def filter_unary_function(influencing_factors: Sequence[DynQuantity],
                          unit: Dimensions,
                          default: DynQuantity) -> DynQuantity:
    """
    Pick the influencing factor with the given unit.

    The last matching entry wins. Returns default if no entry matches.
    """
    selected = default
    for factor in influencing_factors:
        if factor.is_compatible(unit):
            selected = factor
    return selected


# =============================================================================
# CLAMPED QUANTITY
# =============================================================================

@register_function
class ClampedQuantity(QuantityFunction):
    """
    Limits the output of another quantity function to [lower_limit, upper_limit].

    Limits are SI values in the output unit of the wrapped function.
    """

    def __init__(self, function: QuantityFunction, lower_limit: float, upper_limit: float):
        if upper_limit < lower_limit:
            raise ValueError(
                f"Upper limit {upper_limit} must not be smaller than lower limit {lower_limit}"
            )
        self._function = function
        self._lower_limit = float(lower_limit)
        self._upper_limit = float(upper_limit)

    @property
    def function(self) -> QuantityFunction:
        return self._function

    @property
    def lower_limit(self) -> float:
        return self._lower_limit

    @property
    def upper_limit(self) -> float:
        return self._upper_limit

    def call(self, influencing_factors: Sequence[DynQuantity]) -> DynQuantity:
        result = self._function.call(influencing_factors)
        value = np.clip(result.value, self._lower_limit, self._upper_limit)
        return DynQuantity(float(value), result.unit)

    def to_dict(self) -> dict:
        from varquantity.serialization import function_to_dict
        return {
            'function': function_to_dict(self._function),
            'lower_limit': self._lower_limit,
            'upper_limit': self._upper_limit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ClampedQuantity':
        from varquantity.serialization import function_from_dict
        return cls(
            function=function_from_dict(data['function']),
            lower_limit=data['lower_limit'],
            upper_limit=data['upper_limit'],
        )

    def __repr__(self) -> str:
        return (f"ClampedQuantity({self._function!r}, "
                f"lower_limit={self._lower_limit}, upper_limit={self._upper_limit})")
