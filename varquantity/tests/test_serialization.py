"""
Test varquantity Serialization
==============================
"""

import json

import pytest


def test_polynomial_to_dict():
    """Functions serialize as a type tag plus parameters."""
    from varquantity.serialization import function_to_dict
    from varquantity.unary import Polynomial

    data = function_to_dict(Polynomial(["2 W/T^2", "0.5 W/T", "3 W"]))

    assert data['type'] == 'Polynomial'
    assert len(data['coefficients']) == 3
    assert data['coefficients'][2] == "3.0 m^2*kg*s^-3"


def test_function_round_trip():
    """Restored functions evaluate like the originals."""
    from varquantity.serialization import function_from_dict, function_to_dict
    from varquantity.unary import Exponential, FirstOrderTaylor, Linear, Polynomial
    from varquantity.units import Q

    factors = [Q("2 A"), Q("60 K"), Q("3 T"), Q("5 m")]
    functions = [
        Polynomial(["2 W/T^2", "0.5 W/T", "3 W"]),
        Linear("-1 N", "2 N*m"),
        FirstOrderTaylor("2 ohm*m", "0.5 / K", "30 K"),
        Exponential([("1 W", "0.5 / A"), ("2 W", "3 / A")]),
    ]
    for function in functions:
        restored = function_from_dict(json.loads(json.dumps(function_to_dict(function))))
        assert type(restored) is type(function)
        assert restored.call(factors) == function.call(factors)


def test_clamped_round_trip():
    """Nested functions are serialized recursively."""
    from varquantity.function import ClampedQuantity
    from varquantity.serialization import function_from_dict, function_to_dict
    from varquantity.unary import Linear
    from varquantity.units import Q

    clamped = ClampedQuantity(Linear("1 W/K", "0 W"), lower_limit=0.0, upper_limit=10.0)
    data = function_to_dict(clamped)

    assert data['type'] == 'ClampedQuantity'
    assert data['function']['type'] == 'Linear'

    restored = function_from_dict(data)
    assert restored.call([Q("50 K")]).value == pytest.approx(10.0)


def test_unknown_function_type():
    """Unregistered tags raise UnknownFunctionType."""
    from varquantity.errors import UnknownFunctionType
    from varquantity.serialization import function_from_dict

    with pytest.raises(UnknownFunctionType) as excinfo:
        function_from_dict({'type': 'Spline', 'knots': []})

    assert excinfo.value.tag == 'Spline'
    assert isinstance(excinfo.value, KeyError)

    with pytest.raises(ValueError):
        function_from_dict({'coefficients': [1]})


def test_unregistered_function_cannot_be_serialized(unregistered_function):
    """Only registered function types have a tag."""
    from varquantity.serialization import function_to_dict

    with pytest.raises(KeyError):
        function_to_dict(unregistered_function)


def test_custom_function_round_trip(model1, factors):
    """User functions registered with @register_function round-trip."""
    from varquantity.serialization import dumps, loads
    from varquantity.var_quantity import VarQuantity, Function
    from varquantity.quantities import Power

    losses = VarQuantity.from_function(Power, model1)
    restored = loads(Power, dumps(losses))

    assert isinstance(restored, Function)
    assert restored.get(factors).value == pytest.approx(1440.0)


def test_constant_from_number_and_string():
    """Numbers are SI values, strings carry a unit."""
    from varquantity.serialization import from_value, to_value
    from varquantity.var_quantity import Constant
    from varquantity.quantities import ElectricalResistance

    from_number = from_value(ElectricalResistance, 0.002)
    from_string = from_value(ElectricalResistance, "2 mohm")

    assert isinstance(from_number, Constant)
    assert from_number.get() == ElectricalResistance(0.002)
    assert from_string.get().value == pytest.approx(0.002)
    assert to_value(from_number) == 0.002


def test_constant_wrong_unit():
    """A constant string in the wrong unit is rejected."""
    from varquantity.errors import UnitMismatch
    from varquantity.serialization import from_value
    from varquantity.quantities import ElectricalResistance

    with pytest.raises(UnitMismatch):
        from_value(ElectricalResistance, "2 W")


def test_function_wrong_unit():
    """Deserialized functions are checked by the wrapper probe."""
    from varquantity.errors import UnitMismatch
    from varquantity.serialization import loads
    from varquantity.quantities import Energy

    text = '{"type": "Polynomial", "coefficients": ["1000 W/T^2", "0 W/T", "0 W"]}'
    with pytest.raises(UnitMismatch):
        loads(Energy, text)


def test_dimensionless_round_trip():
    """float quantities serialize as plain numbers."""
    from varquantity.serialization import dumps, loads
    from varquantity.var_quantity import Constant

    assert dumps(Constant(0.5)) == "0.5"
    assert loads(float, "0.5").get() == 0.5


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
