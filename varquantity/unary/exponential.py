"""
Exponential model
=================

    y = sum(amplitude_n * exp(exponent_n * x))

All amplitudes share one unit (the output unit) and all exponents share
one unit, whose inverse is the unit of x. Without a matching influencing
factor x = 0 and the result is the sum of the amplitudes.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from varquantity.errors import UnitMismatch
from varquantity.function import QuantityFunction, filter_unary_function, register_function
from varquantity.units import Dimensions, DynQuantity, Q


@dataclass(frozen=True)
class ExpTerm:
    """One term amplitude * exp(exponent * x)."""
    amplitude: DynQuantity
    exponent: DynQuantity

    def __post_init__(self):
        object.__setattr__(self, 'amplitude', Q(self.amplitude))
        object.__setattr__(self, 'exponent', Q(self.exponent))

    def to_dict(self) -> dict:
        return {'amplitude': str(self.amplitude), 'exponent': str(self.exponent)}


def _as_term(term) -> ExpTerm:
    if isinstance(term, ExpTerm):
        return term
    if isinstance(term, dict):
        return ExpTerm(term['amplitude'], term['exponent'])
    amplitude, exponent = term
    return ExpTerm(amplitude, exponent)


@register_function
class Exponential(QuantityFunction):
    """
    Sum of exponential terms.

    Args:
        terms: ExpTerm instances, (amplitude, exponent) pairs or dicts with
            'amplitude' and 'exponent' keys

    Raises:
        ValueError: If terms is empty
        UnitMismatch: If amplitudes or exponents do not share one unit
    """

    def __init__(self, terms: Sequence):
        terms = tuple(_as_term(t) for t in terms)
        if not terms:
            raise ValueError("Exponential needs at least one term")

        amplitude_unit = terms[0].amplitude.unit
        exponent_unit = terms[0].exponent.unit
        for index, term in enumerate(terms[1:], start=1):
            if term.amplitude.unit != amplitude_unit:
                raise UnitMismatch(amplitude_unit, term.amplitude.unit, index=index,
                                   message=f"Amplitude of term {index} has unit "
                                           f"{term.amplitude.unit!r}, expected {amplitude_unit!r}")
            if term.exponent.unit != exponent_unit:
                raise UnitMismatch(exponent_unit, term.exponent.unit, index=index,
                                   message=f"Exponent of term {index} has unit "
                                           f"{term.exponent.unit!r}, expected {exponent_unit!r}")

        self._terms = terms
        self._output_unit = amplitude_unit
        self._factor_unit = exponent_unit ** -1
        self._amplitudes = np.array([t.amplitude.value for t in terms])
        self._exponents = np.array([t.exponent.value for t in terms])

    @property
    def terms(self) -> tuple:
        return self._terms

    @property
    def influencing_factor_unit(self) -> Dimensions:
        return self._factor_unit

    @property
    def output_unit(self) -> Dimensions:
        return self._output_unit

    def call(self, influencing_factors: Sequence[DynQuantity]) -> DynQuantity:
        x = filter_unary_function(
            influencing_factors, self._factor_unit, DynQuantity(0.0, self._factor_unit)
        )
        # exponent * x is dimensionless by construction
        value = np.sum(self._amplitudes * np.exp(self._exponents * x.value))
        return DynQuantity(float(value), self._output_unit)

    def to_dict(self) -> dict:
        return {'terms': [t.to_dict() for t in self._terms]}

    def __repr__(self) -> str:
        return f"Exponential({[t.to_dict() for t in self._terms]!r})"
