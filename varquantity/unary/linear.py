"""
Linear model:  y = slope * x + base_value

The unit of x is unit(base_value) / unit(slope). Without a matching
influencing factor the base value is returned.
"""

from typing import Sequence

from varquantity.function import QuantityFunction, filter_unary_function, register_function
from varquantity.units import Dimensions, DynQuantity, Q


@register_function
class Linear(QuantityFunction):

    def __init__(self, slope, base_value):
        self._slope = Q(slope)
        self._base_value = Q(base_value)
        self._factor_unit = self._base_value.unit / self._slope.unit

    @property
    def slope(self) -> DynQuantity:
        return self._slope

    @property
    def base_value(self) -> DynQuantity:
        return self._base_value

    @property
    def influencing_factor_unit(self) -> Dimensions:
        return self._factor_unit

    @property
    def output_unit(self) -> Dimensions:
        return self._base_value.unit

    def call(self, influencing_factors: Sequence[DynQuantity]) -> DynQuantity:
        x = filter_unary_function(
            influencing_factors, self._factor_unit, DynQuantity(0.0, self._factor_unit)
        )
        return self._slope * x + self._base_value

    def to_dict(self) -> dict:
        return {'slope': str(self._slope), 'base_value': str(self._base_value)}

    def __repr__(self) -> str:
        return f"Linear(slope='{self._slope}', base_value='{self._base_value}')"
