"""
First order Taylor expansion
============================

    y = base_value * (1 + slope * (x - expansion_point))

Typical use is a temperature coefficient, e.g. the resistance of copper:

    >>> r = FirstOrderTaylor("1.7e-8 ohm*m", "0.0039 / K", "293.15 K")

slope * expansion_point must be dimensionless. Without a matching
influencing factor x is the expansion point, so the base value is returned.
"""

from typing import Sequence

from varquantity.errors import UnitMismatch
from varquantity.function import QuantityFunction, filter_unary_function, register_function
from varquantity.units import DIMENSIONLESS, Dimensions, DynQuantity, Q


@register_function
class FirstOrderTaylor(QuantityFunction):

    def __init__(self, base_value, slope, expansion_point):
        self._base_value = Q(base_value)
        self._slope = Q(slope)
        self._expansion_point = Q(expansion_point)

        product = self._slope.unit * self._expansion_point.unit
        if not product.is_dimensionless():
            raise UnitMismatch(
                DIMENSIONLESS, product,
                message=(
                    f"slope ({self._slope.unit!r}) times expansion point "
                    f"({self._expansion_point.unit!r}) must be dimensionless"
                ),
            )

    @property
    def base_value(self) -> DynQuantity:
        return self._base_value

    @property
    def slope(self) -> DynQuantity:
        return self._slope

    @property
    def expansion_point(self) -> DynQuantity:
        return self._expansion_point

    @property
    def influencing_factor_unit(self) -> Dimensions:
        return self._expansion_point.unit

    @property
    def output_unit(self) -> Dimensions:
        return self._base_value.unit

    def call(self, influencing_factors: Sequence[DynQuantity]) -> DynQuantity:
        x = filter_unary_function(
            influencing_factors, self._expansion_point.unit, self._expansion_point
        )
        return self._base_value * (1 + self._slope * (x - self._expansion_point))

    def to_dict(self) -> dict:
        return {
            'base_value': str(self._base_value),
            'slope': str(self._slope),
            'expansion_point': str(self._expansion_point),
        }

    def __repr__(self) -> str:
        return (f"FirstOrderTaylor(base_value='{self._base_value}', slope='{self._slope}', "
                f"expansion_point='{self._expansion_point}')")
