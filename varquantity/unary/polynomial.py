"""
Polynomial model
================

    y = c[0] * x^n + c[1] * x^(n-1) + ... + c[n]

Coefficients are ordered highest degree first, the constant term last.
All adjacent coefficient pairs must have the same unit ratio; that ratio is
the unit of the influencing factor x. Evaluated with Horner's scheme on
DynQuantity values, so every step is unit-tracked.

Usage:
    >>> p = Polynomial(["2 W/T^2", "0.5 W/T", "3 W"])
    >>> p.call([Q("3 T")])
    DynQuantity(22.5, 'm^2*kg*s^-3')
"""

from typing import Optional, Sequence

from varquantity.errors import UnitMismatch
from varquantity.function import QuantityFunction, filter_unary_function, register_function
from varquantity.units import Dimensions, DynQuantity, Q


@register_function
class Polynomial(QuantityFunction):
    """
    Polynomial in one influencing factor.

    Args:
        coefficients: DynQuantity values, quantity strings ("0.5 W/T") or
            plain numbers (dimensionless), highest degree first

    Raises:
        ValueError: If coefficients is empty
        UnitMismatch: If an adjacent pair has a different unit ratio than the
            first pair. index is the first coefficient of the offending pair.
    """

    def __init__(self, coefficients: Sequence):
        coefficients = tuple(Q(c) for c in coefficients)
        if not coefficients:
            raise ValueError("Polynomial needs at least one coefficient")

        factor_unit = None
        if len(coefficients) > 1:
            factor_unit = coefficients[1].unit / coefficients[0].unit
            for index in range(1, len(coefficients) - 1):
                ratio = coefficients[index + 1].unit / coefficients[index].unit
                if ratio != factor_unit:
                    raise UnitMismatch(
                        factor_unit, ratio, index=index,
                        message=(
                            f"Coefficients {index} and {index + 1} imply an input unit "
                            f"{ratio!r}, previous coefficients imply {factor_unit!r}"
                        ),
                    )

        self._coefficients = coefficients
        self._factor_unit = factor_unit

    @property
    def coefficients(self) -> tuple:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    @property
    def influencing_factor_unit(self) -> Optional[Dimensions]:
        """Unit of x, or None for a constant (degree 0) polynomial."""
        return self._factor_unit

    @property
    def output_unit(self) -> Dimensions:
        return self._coefficients[-1].unit

    def call(self, influencing_factors: Sequence[DynQuantity]) -> DynQuantity:
        if self._factor_unit is None:
            return self._coefficients[0]

        x = filter_unary_function(
            influencing_factors, self._factor_unit, DynQuantity(0.0, self._factor_unit)
        )

        # Horner: ((c0 * x + c1) * x + c2) ...
        result = self._coefficients[0]
        for coefficient in self._coefficients[1:]:
            result = result * x + coefficient
        return result

    def to_dict(self) -> dict:
        return {'coefficients': [str(c) for c in self._coefficients]}

    @classmethod
    def from_dict(cls, data: dict) -> 'Polynomial':
        return cls(data['coefficients'])

    def __repr__(self) -> str:
        return f"Polynomial([{', '.join(repr(str(c)) for c in self._coefficients)}])"
