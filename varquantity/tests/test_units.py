"""
Test varquantity Units and Static Quantities
============================================
"""

import pytest


def test_parse_quantity_string():
    """Quantity strings convert to SI."""
    from varquantity.units import Q, MAGNETIC_FIELD, RESISTANCE

    b = Q("1 mT")
    assert b.value == pytest.approx(0.001)
    assert b.unit == MAGNETIC_FIELD

    r = Q("2 mohm")
    assert r.value == pytest.approx(0.002)
    assert r.unit == RESISTANCE


def test_parse_compound_units():
    """Compound expressions combine registered units."""
    from varquantity.units import Q, POWER, MAGNETIC_FIELD, TEMPERATURE, CURRENT, RESISTIVITY

    assert Q("1000 W/T^2").unit == POWER / MAGNETIC_FIELD ** 2
    assert Q("0.5 / K").unit == TEMPERATURE ** -1
    assert Q("3 1/A").unit == CURRENT ** -1
    assert Q("2 ohm*m").unit == RESISTIVITY

    rho = Q("1/(2.0e6) Ohm*m")
    assert rho.value == pytest.approx(5e-7)
    assert rho.unit == RESISTIVITY


def test_dimensionless_string():
    """A bare number is dimensionless."""
    from varquantity.units import Q

    x = Q("0.25")
    assert x.value == 0.25
    assert x.unit.is_dimensionless()


def test_unit_string_round_trip():
    """str() of a quantity parses back to an equal quantity."""
    from varquantity.units import Q

    for text in ["1000 W/T^2", "-3 V", "2 W/(T^2*Hz^2)", "1e-6 mm", "42"]:
        q = Q(text)
        assert Q(str(q)) == q


def test_offset_units():
    """degC converts with offset but is rejected inside expressions."""
    from varquantity.units import Q, TEMPERATURE

    t = Q("20 degC")
    assert t.value == pytest.approx(293.15)
    assert t.unit == TEMPERATURE
    assert t.to("degC") == pytest.approx(20.0)

    with pytest.raises(ValueError):
        Q("1 W/degC")


def test_unknown_unit():
    """Unknown unit symbols raise ValueError."""
    from varquantity.units import Q

    with pytest.raises(ValueError):
        Q("1 furlong")

    with pytest.raises(ValueError):
        Q("abc")


def test_prefixed_symbols_keep_case():
    """Case of a prefix symbol is significant, full names ignore case."""
    from varquantity.units import Q, RESISTANCE

    assert Q("1 Mohm").value == pytest.approx(1e6)
    assert Q("1 MOhm").value == pytest.approx(1e6)
    assert Q("1 MΩ").value == pytest.approx(1e6)
    assert Q("1 megohm").unit == RESISTANCE
    assert Q("1 mohm").value == pytest.approx(1e-3)
    assert Q("2 Watt").value == pytest.approx(2.0)

    with pytest.raises(ValueError):
        Q("1 MS")


def test_is_compatible():
    """Compatibility compares unit tags."""
    from varquantity.units import Q, POWER

    assert Q("1 W").is_compatible(Q("3 kW"))
    assert Q("1 W").is_compatible(POWER)
    assert not Q("1 W").is_compatible(Q("1 J"))


def test_addition_requires_same_unit():
    """Adding different units raises UnitMismatch."""
    from varquantity.errors import UnitMismatch
    from varquantity.units import Q

    assert (Q("1 W") + Q("2 W")).value == pytest.approx(3.0)
    assert (Q("1 W") - Q("2 W")).value == pytest.approx(-1.0)

    with pytest.raises(UnitMismatch):
        Q("1 W") + Q("1 J")

    with pytest.raises(UnitMismatch):
        Q("1 W") - 1.0

    assert (1 + Q("0.5")).value == pytest.approx(1.5)


def test_multiplication_tracks_units():
    """Multiplication and division combine unit tags."""
    from varquantity.units import Q, POWER, VOLTAGE, CURRENT, DIMENSIONLESS

    p = Q("2 V") * Q("3 A")
    assert p.unit == POWER
    assert p.value == pytest.approx(6.0)

    i = p / Q("2 V")
    assert i.unit == CURRENT

    inverse = 1 / Q("4 V")
    assert inverse.unit == VOLTAGE ** -1
    assert inverse.value == pytest.approx(0.25)

    assert (Q("2 V") / Q("4 V")).unit == DIMENSIONLESS
    assert (Q("3 V") ** 2).value == pytest.approx(9.0)


def test_convert_to_unit():
    """to() returns the value in another unit and checks dimensions."""
    from varquantity.errors import UnitMismatch
    from varquantity.units import Q

    assert Q("1.5 kW").to("W") == pytest.approx(1500.0)
    assert Q("1 T").to("mT") == pytest.approx(1000.0)

    with pytest.raises(UnitMismatch):
        Q("1 T").to("W")


def test_static_quantity_new():
    """Static quantities are created from named units."""
    from varquantity.errors import UnitMismatch
    from varquantity.quantities import Power, ElectricalResistance

    p = Power.new(1.5, "kW")
    assert p == Power(1500.0)
    assert p.get("W") == pytest.approx(1500.0)

    r = ElectricalResistance.new(2.0, "mohm")
    assert r.value == pytest.approx(0.002)

    with pytest.raises(UnitMismatch):
        Power.new(1.0, "J")


def test_from_dynamic():
    """Dynamic quantities convert to static types with a unit check."""
    from varquantity.errors import UnitMismatch
    from varquantity.quantities import Power, Energy, from_dynamic, to_dynamic
    from varquantity.units import Q, POWER

    assert from_dynamic(Power, Q("3 W")) == Power(3.0)
    assert from_dynamic(float, Q("0.5")) == 0.5

    with pytest.raises(UnitMismatch):
        from_dynamic(Energy, Q("3 W"))

    with pytest.raises(UnitMismatch):
        from_dynamic(float, Q("3 W"))

    dq = to_dynamic(Power(3.0))
    assert dq.unit == POWER
    assert dq.value == 3.0
    assert to_dynamic(2.0).unit.is_dimensionless()


def test_quantity_type_registry():
    """Static quantity types are registered by class name."""
    from varquantity.quantities import QUANTITY_TYPES, Power, MagneticFluxDensity, get_quantity_type

    assert QUANTITY_TYPES['Power'] is Power
    assert get_quantity_type('MagneticFluxDensity') is MagneticFluxDensity
    assert get_quantity_type('float') is float

    with pytest.raises(KeyError):
        get_quantity_type('Loudness')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
