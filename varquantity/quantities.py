"""
varquantity Static Quantities
=============================

Quantity types whose unit is fixed by the type. A VarQuantity is always
parametrized with one of these (or with plain ``float`` for dimensionless
values), and a FunctionWrapper converts function outputs into them.

Usage:
    >>> from varquantity.quantities import Power, from_dynamic
    >>> from varquantity.units import Q

    >>> Power.new(1.5, "kW")
    Power(value=1500.0)

    >>> from_dynamic(Power, Q("3 W")).get("mW")
    3000.0
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Union

from varquantity.errors import UnitMismatch
from varquantity.units import (
    DynQuantity, Dimensions, parse_unit,
    DIMENSIONLESS, LENGTH, AREA, VOLUME, MASS, TIME, FREQUENCY, CURRENT,
    TEMPERATURE, FORCE, PRESSURE, ENERGY, POWER, TORQUE, CHARGE, VOLTAGE,
    RESISTANCE, CONDUCTANCE, RESISTIVITY, MAGNETIC_FIELD, MAGNETIC_FLUX, VELOCITY,
)


# Registry of static quantity types by name (used by config files and the CLI)
QUANTITY_TYPES: Dict[str, type] = {'float': float}


@dataclass(frozen=True, order=True)
class StaticQuantity:
    """
    A value in SI units whose unit is given by the class attribute UNIT.

    Subclasses only set UNIT; they are registered in QUANTITY_TYPES under
    their class name.
    """
    value: float

    UNIT: ClassVar[Dimensions] = DIMENSIONLESS

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        QUANTITY_TYPES[cls.__name__] = cls

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    @classmethod
    def new(cls, value: float, unit: str) -> 'StaticQuantity':
        """
        Create from a value in a named unit.

        Raises:
            UnitMismatch: If the unit does not have the dimensions of this type
        """
        to_si, offset, dims = parse_unit(unit)
        if dims != cls.UNIT:
            raise UnitMismatch(cls.UNIT, dims,
                               message=f"{cls.__name__} cannot be given in '{unit}'")
        return cls(value * to_si + offset)

    @classmethod
    def from_dynamic(cls, quantity: DynQuantity) -> 'StaticQuantity':
        if quantity.unit != cls.UNIT:
            raise UnitMismatch(cls.UNIT, quantity.unit)
        return cls(quantity.value)

    def to_dynamic(self) -> DynQuantity:
        return DynQuantity(self.value, self.UNIT)

    def get(self, unit: str) -> float:
        """Numeric value in the given unit."""
        return self.to_dynamic().to(unit)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __mul__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return type(self)(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return type(self)(self.value / divisor)

    def __neg__(self):
        return type(self)(-self.value)

    def __str__(self) -> str:
        return str(self.to_dynamic())


# =============================================================================
# QUANTITY TYPES
# =============================================================================

class Length(StaticQuantity):
    UNIT = LENGTH


class Area(StaticQuantity):
    UNIT = AREA


class Volume(StaticQuantity):
    UNIT = VOLUME


class Mass(StaticQuantity):
    UNIT = MASS


class Time(StaticQuantity):
    UNIT = TIME


class Frequency(StaticQuantity):
    UNIT = FREQUENCY


class Velocity(StaticQuantity):
    UNIT = VELOCITY


class ElectricCurrent(StaticQuantity):
    UNIT = CURRENT


class ElectricCharge(StaticQuantity):
    UNIT = CHARGE


class ThermodynamicTemperature(StaticQuantity):
    UNIT = TEMPERATURE


class Force(StaticQuantity):
    UNIT = FORCE


class Pressure(StaticQuantity):
    UNIT = PRESSURE


class Energy(StaticQuantity):
    UNIT = ENERGY


class Power(StaticQuantity):
    UNIT = POWER


class Torque(StaticQuantity):
    UNIT = TORQUE


class ElectricPotential(StaticQuantity):
    UNIT = VOLTAGE


class ElectricalResistance(StaticQuantity):
    UNIT = RESISTANCE


class ElectricalConductance(StaticQuantity):
    UNIT = CONDUCTANCE


class ElectricalResistivity(StaticQuantity):
    UNIT = RESISTIVITY


class MagneticFluxDensity(StaticQuantity):
    UNIT = MAGNETIC_FIELD


class MagneticFlux(StaticQuantity):
    UNIT = MAGNETIC_FLUX


# =============================================================================
# CONVERSIONS
# =============================================================================

def unit_of(quantity_type: type) -> Dimensions:
    """Unit tag of a static quantity type (float is dimensionless)."""
    if quantity_type is float:
        return DIMENSIONLESS
    if isinstance(quantity_type, type) and issubclass(quantity_type, StaticQuantity):
        return quantity_type.UNIT
    raise TypeError(f"Not a static quantity type: {quantity_type!r}")


def to_dynamic(value: Union[StaticQuantity, DynQuantity, float]) -> DynQuantity:
    """Infallible conversion of a static value to a DynQuantity."""
    if isinstance(value, DynQuantity):
        return value
    if isinstance(value, StaticQuantity):
        return value.to_dynamic()
    if isinstance(value, (int, float)):
        return DynQuantity(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to DynQuantity")


def from_dynamic(quantity_type: type, quantity) -> Union[StaticQuantity, float]:
    """
    Convert a dynamic quantity into quantity_type.

    Raises:
        UnitMismatch: If the unit of quantity is not the unit of quantity_type
    """
    quantity = to_dynamic(quantity)
    if quantity_type is float:
        if not quantity.unit.is_dimensionless():
            raise UnitMismatch(DIMENSIONLESS, quantity.unit)
        return quantity.value
    return quantity_type.from_dynamic(quantity)


def get_quantity_type(name: str) -> type:
    """Look up a static quantity type by name."""
    if name not in QUANTITY_TYPES:
        raise KeyError(f"Unknown quantity type: '{name}'. Available: {sorted(QUANTITY_TYPES)}")
    return QUANTITY_TYPES[name]
