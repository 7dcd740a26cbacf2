"""
Shared quantity functions for the varquantity tests.
"""

import pytest

from varquantity.function import QuantityFunction, filter_unary_function, register_function
from varquantity.units import DynQuantity, FREQUENCY, MAGNETIC_FIELD, POWER, Q


@register_function
class IronLossModel(QuantityFunction):
    """p = a * B^2 + b * B + c"""

    def __init__(self, a, b, c):
        self.a = Q(a)
        self.b = Q(b)
        self.c = Q(c)

    def call(self, influencing_factors):
        b_field = filter_unary_function(influencing_factors, MAGNETIC_FIELD, Q(0.0, "T"))
        return self.a * b_field ** 2 + self.b * b_field + self.c

    def to_dict(self):
        return {'a': str(self.a), 'b': str(self.b), 'c': str(self.c)}


@register_function
class SteinmetzModel(QuantityFunction):
    """p = k * f^2 * B^2"""

    def __init__(self, k):
        self.k = Q(k)

    def call(self, influencing_factors):
        b_field = filter_unary_function(influencing_factors, MAGNETIC_FIELD, Q(0.0, "T"))
        frequency = filter_unary_function(influencing_factors, FREQUENCY, Q(0.0, "Hz"))
        return self.k * frequency ** 2 * b_field ** 2

    def to_dict(self):
        return {'k': str(self.k)}


class UnitSwitchingFunction(QuantityFunction):
    """Returns W for an empty factor list and J otherwise."""

    def call(self, influencing_factors):
        if influencing_factors:
            return Q(1.0, "J")
        return Q(1.0, "W")


class UnregisteredFunction(QuantityFunction):

    def call(self, influencing_factors):
        return DynQuantity(1.0, POWER)


@pytest.fixture
def model1():
    return IronLossModel("1000 W/T^2", "0 W/T", "0 W")


@pytest.fixture
def model2():
    return SteinmetzModel("2 W/(T^2*Hz^2)")


@pytest.fixture
def unit_switching_function():
    return UnitSwitchingFunction()


@pytest.fixture
def unregistered_function():
    return UnregisteredFunction()


@pytest.fixture
def factors():
    return [Q("1.2 T"), Q("20 Hz")]
