"""
varquantity Serialization
=========================

JSON-compatible forms of quantity functions and variable quantities.

    DynQuantity       "1000.0 m^2*kg^-1*s*A^2"  (any unit expression on input)
    QuantityFunction  {"type": "Polynomial", "coefficients": [...]}
    VarQuantity       0.002 | "2 mohm" | {"type": ..., ...}

A plain number is the SI value of a constant, a string is a constant in a
named unit, a mapping is a quantity function. Only registered function
types (see register_function) can be restored.

Usage:
    from varquantity.serialization import dumps, loads

    text = dumps(losses)
    losses = loads(Power, text)
"""

import json
from typing import Any, Dict

from varquantity.errors import UnknownFunctionType
from varquantity.function import FUNCTION_TYPES, QuantityFunction, get_type_tag
from varquantity.quantities import from_dynamic, to_dynamic, unit_of
from varquantity.units import DynQuantity, Q
from varquantity.var_quantity import Constant, Function, VarQuantity


def function_to_dict(function: QuantityFunction) -> Dict[str, Any]:
    """Serialize a registered quantity function as {"type": tag, **params}."""
    data = {'type': get_type_tag(function)}
    data.update(function.to_dict())
    return data


def function_from_dict(data: Dict[str, Any]) -> QuantityFunction:
    """
    Restore a quantity function from its mapping.

    Raises:
        UnknownFunctionType: If the type tag is not registered
        ValueError: If the mapping has no 'type' key
    """
    params = dict(data)
    tag = params.pop('type', None)
    if tag is None:
        raise ValueError(f"Quantity function mapping has no 'type' key: {data!r}")
    if tag not in FUNCTION_TYPES:
        raise UnknownFunctionType(tag, sorted(FUNCTION_TYPES))
    return FUNCTION_TYPES[tag].from_dict(params)


def to_value(var_quantity: VarQuantity) -> Any:
    """JSON-compatible value of a VarQuantity."""
    if isinstance(var_quantity, Constant):
        return to_dynamic(var_quantity.value).value
    if isinstance(var_quantity, Function):
        return function_to_dict(var_quantity.function)
    raise TypeError(f"Not a VarQuantity: {var_quantity!r}")


def from_value(quantity_type: type, value: Any) -> VarQuantity:
    """
    Build a VarQuantity of quantity_type from its JSON-compatible value.

    Raises:
        UnitMismatch: If a constant or the function output has the wrong unit
        UnknownFunctionType: If a function mapping names an unregistered type
    """
    if isinstance(value, bool):
        raise TypeError(f"Cannot build a {quantity_type.__name__} from {value!r}")
    if isinstance(value, (int, float)):
        return Constant(from_dynamic(quantity_type, DynQuantity(value, unit_of(quantity_type))))
    if isinstance(value, str):
        return Constant(from_dynamic(quantity_type, Q(value)))
    if isinstance(value, dict):
        return VarQuantity.from_function(quantity_type, function_from_dict(value))
    raise TypeError(f"Cannot build a {quantity_type.__name__} from {type(value).__name__}")


def dumps(var_quantity: VarQuantity, **kwargs) -> str:
    return json.dumps(to_value(var_quantity), **kwargs)


def loads(quantity_type: type, text: str) -> VarQuantity:
    return from_value(quantity_type, json.loads(text))
