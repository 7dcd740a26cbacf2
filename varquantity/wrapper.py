"""
varquantity Function Wrapper
============================

Binds a QuantityFunction to a static quantity type.

At construction the function is called once with no influencing factors
(the probe call). If its output cannot be converted into the quantity type
the wrapper is never built. Every later call is checked again, so a
function that changes its output unit at runtime raises UnitMismatch
instead of returning a wrongly typed value.
"""

from typing import Sequence, Union

from varquantity.function import QuantityFunction
from varquantity.quantities import StaticQuantity, from_dynamic, unit_of
from varquantity.units import Dimensions, DynQuantity


class FunctionWrapper:
    """
    A QuantityFunction whose output is known to convert to quantity_type.

    Args:
        quantity_type: StaticQuantity subclass, or float for dimensionless
        function: The quantity function to wrap

    Raises:
        UnitMismatch: If the probe output does not convert to quantity_type
    """

    def __init__(self, quantity_type: type, function: QuantityFunction):
        expected = unit_of(quantity_type)

        # Probe call, always with an empty factor list
        from_dynamic(quantity_type, function.call([]))

        self._quantity_type = quantity_type
        self._output_unit = expected
        self._function = function

    @property
    def quantity_type(self) -> type:
        return self._quantity_type

    @property
    def output_unit(self) -> Dimensions:
        """Unit tag fixed by the probe call."""
        return self._output_unit

    @property
    def inner(self) -> QuantityFunction:
        """The wrapped quantity function."""
        return self._function

    def call(self, influencing_factors: Sequence[DynQuantity]) -> Union[StaticQuantity, float]:
        """
        Evaluate the function and convert the result to quantity_type.

        Raises:
            UnitMismatch: If the function returned a different unit than at
                construction time
        """
        return from_dynamic(self._quantity_type, self._function.call(influencing_factors))

    def __repr__(self) -> str:
        return f"FunctionWrapper({self._quantity_type.__name__}, {self._function!r})"
