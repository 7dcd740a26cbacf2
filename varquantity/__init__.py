"""
varquantity
===========

Physical quantities that are either constant or a function of influencing
factors (temperature, flux density, frequency, ...), with unit checks at
construction time and at every evaluation.

    from varquantity import VarQuantity, Constant, Polynomial, Q
    from varquantity.quantities import Power

    losses = VarQuantity.from_function(Power, Polynomial(["1000 W/T^2", "0 W/T", "0 W"]))
    losses.get([Q("1.2 T")])       # Power(value=1440.0)
"""

__version__ = "0.1.0"

from varquantity.errors import VarQuantityError, UnitMismatch, UnknownFunctionType
from varquantity.units import Dimensions, DynQuantity, Q
from varquantity.function import (
    QuantityFunction, ClampedQuantity, FUNCTION_TYPES, register_function, filter_unary_function,
)
from varquantity.wrapper import FunctionWrapper
from varquantity.var_quantity import VarQuantity, Constant, Function
from varquantity.unary import Polynomial, Linear, FirstOrderTaylor, Exponential, ExpTerm
from varquantity.serialization import dumps, loads

__all__ = [
    'VarQuantityError', 'UnitMismatch', 'UnknownFunctionType',
    'Dimensions', 'DynQuantity', 'Q',
    'QuantityFunction', 'ClampedQuantity', 'FUNCTION_TYPES', 'register_function',
    'filter_unary_function',
    'FunctionWrapper',
    'VarQuantity', 'Constant', 'Function',
    'Polynomial', 'Linear', 'FirstOrderTaylor', 'Exponential', 'ExpTerm',
    'dumps', 'loads',
]
