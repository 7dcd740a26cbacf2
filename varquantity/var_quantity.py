"""
varquantity Variable Quantity
=============================

A quantity that is either a constant or a function of influencing factors.

Usage:
    >>> from varquantity import Constant, VarQuantity, Polynomial
    >>> from varquantity.quantities import ElectricalResistance, Power
    >>> from varquantity.units import Q

    >>> r = Constant(ElectricalResistance.new(2.0, "mohm"))
    >>> r.get([Q("20 K")])
    ElectricalResistance(value=0.002)

    >>> losses = VarQuantity.from_function(
    ...     Power, Polynomial(["1000 W/T^2", "0 W/T", "0 W"]))
    >>> losses.get([Q("1.2 T")])
    Power(value=1440.0)
"""

from dataclasses import dataclass
from typing import Any, Sequence

from varquantity.function import QuantityFunction
from varquantity.units import DynQuantity
from varquantity.wrapper import FunctionWrapper


class VarQuantity:
    """Base of the two variants Constant and Function."""

    def get(self, influencing_factors: Sequence[DynQuantity] = ()) -> Any:
        raise NotImplementedError

    @staticmethod
    def from_function(quantity_type: type, function: QuantityFunction) -> 'Function':
        """
        Wrap function for quantity_type.

        Raises:
            UnitMismatch: If the probe output does not convert to quantity_type
        """
        return Function(FunctionWrapper(quantity_type, function))


@dataclass(frozen=True)
class Constant(VarQuantity):
    """Always returns value, whatever the influencing factors are."""
    value: Any

    def get(self, influencing_factors: Sequence[DynQuantity] = ()) -> Any:
        return self.value


@dataclass(frozen=True)
class Function(VarQuantity):
    """Evaluates a wrapped quantity function on every get()."""
    wrapper: FunctionWrapper

    @property
    def quantity_type(self) -> type:
        return self.wrapper.quantity_type

    @property
    def function(self) -> QuantityFunction:
        return self.wrapper.inner

    def get(self, influencing_factors: Sequence[DynQuantity] = ()) -> Any:
        return self.wrapper.call(influencing_factors)
