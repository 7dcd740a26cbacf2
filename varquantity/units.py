"""
varquantity Units: Dimensions and Dynamic Quantities
====================================================

Runtime unit tags and the dynamic quantity type used for influencing
factors, model coefficients and quantity function outputs.

All values are held in SI base units. A unit string is only needed when a
quantity enters the system ("1.2 T", "2 mohm", "1000 W/T^2") or when it is
read back out in a specific unit.

Usage:
    >>> from varquantity.units import Q, POWER

    >>> b = Q("1.2 T")
    >>> b.unit
    M * T^-2 * I^-1

    >>> p = Q(1000, "W/T^2") * b**2
    >>> p.unit == POWER
    True

    >>> Q("1 mT").to("T")
    0.001
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from varquantity.errors import UnitMismatch


# =============================================================================
# DIMENSIONS (unit tags)
# =============================================================================

# SI base unit symbols, in the field order of Dimensions
BASE_SYMBOLS = ('m', 'kg', 's', 'A', 'K', 'mol', 'cd')


@dataclass(frozen=True)
class Dimensions:
    """
    Unit tag of a dynamic quantity, as exponents of the 7 SI base quantities.

        velocity = length^1 * time^-1 -> Dimensions(length=1, time=-1)
        power = mass^1 * length^2 * time^-3 -> Dimensions(mass=1, length=2, time=-3)

    Two quantities are unit-compatible iff their Dimensions compare equal.
    """
    length: int = 0           # L (meter)
    mass: int = 0             # M (kilogram)
    time: int = 0             # T (second)
    current: int = 0          # I (ampere)
    temperature: int = 0      # Theta (kelvin)
    amount: int = 0           # N (mole)
    luminosity: int = 0       # J (candela)

    def exponents(self) -> Tuple[int, ...]:
        return (self.length, self.mass, self.time, self.current,
                self.temperature, self.amount, self.luminosity)

    def __mul__(self, other: Dimensions) -> Dimensions:
        """Multiply quantities -> add exponents"""
        return Dimensions(*(a + b for a, b in zip(self.exponents(), other.exponents())))

    def __truediv__(self, other: Dimensions) -> Dimensions:
        """Divide quantities -> subtract exponents"""
        return Dimensions(*(a - b for a, b in zip(self.exponents(), other.exponents())))

    def __pow__(self, exp: int) -> Dimensions:
        """Raise to power -> multiply all exponents"""
        if not isinstance(exp, int):
            raise TypeError(f"Unit exponent must be an integer, got {exp!r}")
        return Dimensions(*(a * exp for a in self.exponents()))

    def is_dimensionless(self) -> bool:
        return self == DIMENSIONLESS

    def __repr__(self) -> str:
        parts = []
        names = ['L', 'M', 'T', 'I', 'Theta', 'N', 'J']
        for name, val in zip(names, self.exponents()):
            if val == 1:
                parts.append(name)
            elif val != 0:
                parts.append(f"{name}^{val}")
        return ' * '.join(parts) if parts else '1'

    def __str__(self) -> str:
        """SI base unit expression, readable by parse_unit (e.g. 'm^2*kg*s^-3')."""
        parts = []
        for symbol, val in zip(BASE_SYMBOLS, self.exponents()):
            if val == 1:
                parts.append(symbol)
            elif val != 0:
                parts.append(f"{symbol}^{val}")
        return '*'.join(parts)


DIMENSIONLESS = Dimensions()
LENGTH = Dimensions(length=1)
MASS = Dimensions(mass=1)
TIME = Dimensions(time=1)
CURRENT = Dimensions(current=1)
TEMPERATURE = Dimensions(temperature=1)
AMOUNT = Dimensions(amount=1)
LUMINOSITY = Dimensions(luminosity=1)

# Derived dimensions
AREA = Dimensions(length=2)
VOLUME = Dimensions(length=3)
VELOCITY = Dimensions(length=1, time=-1)
FREQUENCY = Dimensions(time=-1)
FORCE = Dimensions(mass=1, length=1, time=-2)
PRESSURE = Dimensions(mass=1, length=-1, time=-2)
ENERGY = Dimensions(mass=1, length=2, time=-2)
POWER = Dimensions(mass=1, length=2, time=-3)
TORQUE = ENERGY  # N*m and J share dimensions
CHARGE = Dimensions(current=1, time=1)
VOLTAGE = Dimensions(mass=1, length=2, time=-3, current=-1)
RESISTANCE = Dimensions(mass=1, length=2, time=-3, current=-2)
CONDUCTANCE = RESISTANCE ** -1
RESISTIVITY = RESISTANCE * LENGTH
CAPACITANCE = Dimensions(mass=-1, length=-2, time=4, current=2)
INDUCTANCE = Dimensions(mass=1, length=2, time=-2, current=-2)
MAGNETIC_FLUX = Dimensions(mass=1, length=2, time=-2, current=-1)
MAGNETIC_FIELD = Dimensions(mass=1, time=-2, current=-1)


# =============================================================================
# UNIT DEFINITIONS
# =============================================================================

@dataclass
class UnitDef:
    """Definition of a single unit"""
    symbol: str                    # Primary symbol (e.g., "m")
    name: str                      # Full name (e.g., "meter")
    dimensions: Dimensions         # Physical dimensions
    to_si: float                   # Multiply by this to get SI
    offset: float = 0.0            # For temperature scales (degC, degF)
    aliases: List[str] = field(default_factory=list)


UNITS: Dict[str, UnitDef] = {}


def register_unit(symbol: str, name: str, dimensions: Dimensions,
                  to_si: float, offset: float = 0.0, aliases: Optional[List[str]] = None):
    """Register a unit in the global registry"""
    unit = UnitDef(symbol, name, dimensions, to_si, offset, aliases or [])
    UNITS[symbol] = unit
    for alias in unit.aliases:
        UNITS[alias] = unit


# Base units
register_unit("m", "meter", LENGTH, 1.0, aliases=["meter", "meters", "metre"])
register_unit("kg", "kilogram", MASS, 1.0, aliases=["kilogram", "kilograms"])
register_unit("s", "second", TIME, 1.0, aliases=["sec", "second", "seconds"])
register_unit("A", "ampere", CURRENT, 1.0, aliases=["amp", "ampere", "amperes"])
register_unit("K", "kelvin", TEMPERATURE, 1.0, aliases=["kelvin"])
register_unit("mol", "mole", AMOUNT, 1.0, aliases=["mole", "moles"])
register_unit("cd", "candela", LUMINOSITY, 1.0, aliases=["candela"])

# Length / area / volume
register_unit("km", "kilometer", LENGTH, 1000.0)
register_unit("cm", "centimeter", LENGTH, 0.01)
register_unit("mm", "millimeter", LENGTH, 0.001)
register_unit("um", "micrometer", LENGTH, 1e-6, aliases=["micron"])
register_unit("in", "inch", LENGTH, 0.0254, aliases=["inch", "inches"])
register_unit("ft", "foot", LENGTH, 0.3048, aliases=["foot", "feet"])
register_unit("m2", "square meter", AREA, 1.0)
register_unit("mm2", "square millimeter", AREA, 1e-6)
register_unit("m3", "cubic meter", VOLUME, 1.0)
register_unit("L", "liter", VOLUME, 0.001, aliases=["l", "liter", "litre"])

# Mass
register_unit("g", "gram", MASS, 0.001, aliases=["gram", "grams"])
register_unit("mg", "milligram", MASS, 1e-6)

# Time / frequency
register_unit("ms", "millisecond", TIME, 0.001)
register_unit("us", "microsecond", TIME, 1e-6)
register_unit("min", "minute", TIME, 60.0, aliases=["minute", "minutes"])
register_unit("h", "hour", TIME, 3600.0, aliases=["hr", "hour", "hours"])
register_unit("Hz", "hertz", FREQUENCY, 1.0, aliases=["hertz", "hz"])
register_unit("kHz", "kilohertz", FREQUENCY, 1000.0)
register_unit("MHz", "megahertz", FREQUENCY, 1e6)
register_unit("rpm", "revolutions per minute", FREQUENCY, 1 / 60, aliases=["RPM"])

# Temperature (with offsets). Offset units are only valid on their own,
# never inside a compound expression.
register_unit("degC", "celsius", TEMPERATURE, 1.0, 273.15, aliases=["celsius"])
register_unit("degF", "fahrenheit", TEMPERATURE, 5 / 9, 459.67 * 5 / 9, aliases=["fahrenheit"])

# Current
register_unit("mA", "milliampere", CURRENT, 0.001)
register_unit("kA", "kiloampere", CURRENT, 1000.0)

# Velocity
register_unit("m/s", "meter per second", VELOCITY, 1.0, aliases=["mps"])
register_unit("km/h", "kilometer per hour", VELOCITY, 1 / 3.6, aliases=["kph"])

# Force / pressure
register_unit("N", "newton", FORCE, 1.0, aliases=["newton", "newtons"])
register_unit("kN", "kilonewton", FORCE, 1000.0)
register_unit("Pa", "pascal", PRESSURE, 1.0, aliases=["pascal"])
register_unit("kPa", "kilopascal", PRESSURE, 1000.0)
register_unit("MPa", "megapascal", PRESSURE, 1e6)
register_unit("bar", "bar", PRESSURE, 1e5)

# Energy / power
register_unit("J", "joule", ENERGY, 1.0, aliases=["joule", "joules"])
register_unit("kJ", "kilojoule", ENERGY, 1000.0)
register_unit("Wh", "watt-hour", ENERGY, 3600.0)
register_unit("kWh", "kilowatt-hour", ENERGY, 3.6e6)
register_unit("W", "watt", POWER, 1.0, aliases=["watt", "watts"])
register_unit("mW", "milliwatt", POWER, 0.001)
register_unit("kW", "kilowatt", POWER, 1000.0)
register_unit("MW", "megawatt", POWER, 1e6)
register_unit("N*m", "newton-meter", TORQUE, 1.0, aliases=["Nm"])

# Electrical
register_unit("C", "coulomb", CHARGE, 1.0, aliases=["coulomb"])
register_unit("V", "volt", VOLTAGE, 1.0, aliases=["volt", "volts"])
register_unit("mV", "millivolt", VOLTAGE, 0.001)
register_unit("kV", "kilovolt", VOLTAGE, 1000.0)
register_unit("ohm", "ohm", RESISTANCE, 1.0, aliases=["ohms", "Ohm", "Ω"])
register_unit("mohm", "milliohm", RESISTANCE, 0.001, aliases=["mOhm", "mΩ"])
register_unit("kohm", "kilohm", RESISTANCE, 1000.0, aliases=["kOhm", "kΩ"])
register_unit("Mohm", "megohm", RESISTANCE, 1e6, aliases=["MOhm", "MΩ", "megohm"])
register_unit("S", "siemens", CONDUCTANCE, 1.0, aliases=["siemens"])
register_unit("F", "farad", CAPACITANCE, 1.0, aliases=["farad"])
register_unit("uF", "microfarad", CAPACITANCE, 1e-6)
register_unit("H", "henry", INDUCTANCE, 1.0, aliases=["henry"])
register_unit("mH", "millihenry", INDUCTANCE, 0.001)

# Magnetic
register_unit("T", "tesla", MAGNETIC_FIELD, 1.0, aliases=["tesla"])
register_unit("mT", "millitesla", MAGNETIC_FIELD, 0.001)
register_unit("Wb", "weber", MAGNETIC_FLUX, 1.0, aliases=["weber"])

# Dimensionless
register_unit("rad", "radian", DIMENSIONLESS, 1.0, aliases=["radian", "radians"])
register_unit("deg", "degree", DIMENSIONLESS, 3.141592653589793 / 180, aliases=["degree", "degrees"])
register_unit("%", "percent", DIMENSIONLESS, 0.01, aliases=["percent"])
register_unit("ppm", "parts per million", DIMENSIONLESS, 1e-6)


# =============================================================================
# UNIT EXPRESSION PARSING
# =============================================================================

_TOKEN_RE = re.compile(r"""
    \s*(?:
        (?P<pow>\^|\*\*)
      | (?P<mul>[*·])
      | (?P<div>/)
      | (?P<lparen>\()
      | (?P<rparen>\))
      | (?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
      | (?P<name>[A-Za-z_%Ω][A-Za-z0-9_%Ω]*)
    )""", re.VERBOSE)

# "<number> <unit expression>"; the unit part may be empty (dimensionless)
_QUANTITY_RE = re.compile(r'^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?inf|nan)\s*(.*)$')


def lookup_unit(symbol: str) -> Optional[UnitDef]:
    """
    Look up a unit definition, with fuzzy matching.

    Case is only ignored for full unit names ("Watt"), never for symbols,
    where it carries the prefix ("Mohm" vs "mohm", "MS" vs "ms").
    """
    if symbol in UNITS:
        return UNITS[symbol]

    for unit in UNITS.values():
        if unit.name == symbol.lower():
            return unit

    no_space = symbol.replace(" ", "")
    if no_space in UNITS:
        return UNITS[no_space]

    return None


def _tokenize(text: str) -> List[Tuple[str, str]]:
    tokens = []
    pos = 0
    while pos < len(text):
        if text[pos:].strip() == "":
            break
        match = _TOKEN_RE.match(text, pos)
        if not match:
            raise ValueError(f"Cannot parse unit expression: '{text}'")
        tokens.append((match.lastgroup, match.group(match.lastgroup)))
        pos = match.end()
    return tokens


class _UnitExpressionParser:
    """
    Recursive descent parser for unit expressions.

        expression := ['/'] power (('*' | '/' | <juxtaposition>) power)*
        power      := factor ['^' integer]
        factor     := unit symbol | number | '(' expression ')'

    Evaluates to (scale to SI, Dimensions).
    """

    def __init__(self, text: str):
        self.text = text
        self.tokens = _tokenize(text)
        self.pos = 0

    def parse(self) -> Tuple[float, Dimensions]:
        scale, dims = self._expression()
        if self.pos != len(self.tokens):
            raise ValueError(f"Cannot parse unit expression: '{self.text}'")
        return scale, dims

    def _peek(self) -> Tuple[Optional[str], Optional[str]]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None, None

    def _expression(self) -> Tuple[float, Dimensions]:
        kind, _ = self._peek()
        if kind == 'div':
            scale, dims = 1.0, DIMENSIONLESS
        else:
            scale, dims = self._power()

        while True:
            kind, _ = self._peek()
            if kind == 'mul':
                self.pos += 1
                s, d = self._power()
                scale, dims = scale * s, dims * d
            elif kind == 'div':
                self.pos += 1
                s, d = self._power()
                scale, dims = scale / s, dims / d
            elif kind in ('name', 'number', 'lparen'):
                s, d = self._power()
                scale, dims = scale * s, dims * d
            else:
                return scale, dims

    def _power(self) -> Tuple[float, Dimensions]:
        scale, dims = self._factor()
        kind, _ = self._peek()
        if kind != 'pow':
            return scale, dims

        self.pos += 1
        kind, text = self._peek()
        if kind != 'number' or not re.fullmatch(r'[+-]?\d+', text):
            raise ValueError(f"Unit exponent must be an integer in '{self.text}'")
        self.pos += 1
        exp = int(text)
        return scale ** exp, dims ** exp

    def _factor(self) -> Tuple[float, Dimensions]:
        kind, text = self._peek()
        if kind == 'number':
            self.pos += 1
            return float(text), DIMENSIONLESS

        if kind == 'name':
            self.pos += 1
            unit_def = lookup_unit(text)
            if unit_def is None:
                raise ValueError(f"Unknown unit: '{text}'")
            if unit_def.offset != 0.0:
                raise ValueError(
                    f"Unit '{text}' has an offset and cannot be used in "
                    f"the compound expression '{self.text}'"
                )
            return unit_def.to_si, unit_def.dimensions

        if kind == 'lparen':
            self.pos += 1
            scale, dims = self._expression()
            if self._peek()[0] != 'rparen':
                raise ValueError(f"Unbalanced parentheses in '{self.text}'")
            self.pos += 1
            return scale, dims

        raise ValueError(f"Cannot parse unit expression: '{self.text}'")


def parse_unit(expression: str) -> Tuple[float, float, Dimensions]:
    """
    Parse a unit expression.

    Args:
        expression: Registered unit ("kW", "degC") or compound expression
            ("W/T^2", "ohm*m", "1/K", "/ A"). Empty means dimensionless.

    Returns:
        Tuple of (to_si, offset, dimensions): SI value = value * to_si + offset

    Raises:
        ValueError: If the expression cannot be parsed or names an unknown unit
    """
    expression = expression.strip()
    if not expression:
        return 1.0, 0.0, DIMENSIONLESS

    unit_def = lookup_unit(expression)
    if unit_def is not None:
        return unit_def.to_si, unit_def.offset, unit_def.dimensions

    scale, dims = _UnitExpressionParser(expression).parse()
    return scale, 0.0, dims


def _parse_string(s: str) -> Tuple[float, str]:
    """Parse '1.2 T' or '1000 W/T^2' into (value, unit)"""
    s = s.strip()
    match = _QUANTITY_RE.match(s)
    if not match:
        raise ValueError(f"Cannot parse quantity string: '{s}'")
    return float(match.group(1)), match.group(2).strip()


# =============================================================================
# DYNAMIC QUANTITY
# =============================================================================

Number = (int, float)


@dataclass(frozen=True)
class DynQuantity:
    """
    A value in SI base units tagged with its Dimensions.

    The unit may be given as a Dimensions tag or as a unit string, in which
    case the value is converted to SI:

        >>> DynQuantity(2.0, "mohm").value
        0.002

    Arithmetic keeps track of the unit. Addition and subtraction require
    equal units and raise UnitMismatch otherwise.
    """
    value: float
    unit: Dimensions = DIMENSIONLESS

    def __post_init__(self):
        value = float(self.value)
        if isinstance(self.unit, str):
            to_si, offset, dims = parse_unit(self.unit)
            value = value * to_si + offset
            object.__setattr__(self, 'unit', dims)
        elif not isinstance(self.unit, Dimensions):
            raise TypeError(f"Unit must be Dimensions or str, got {type(self.unit)}")
        object.__setattr__(self, 'value', value)

    @classmethod
    def parse(cls, s: str) -> DynQuantity:
        """Parse '1.2 T', '2.0 / A' or '0.001' into a DynQuantity."""
        value, unit = _parse_string(s)
        return cls(value, unit)

    def is_compatible(self, other: Union[DynQuantity, Dimensions]) -> bool:
        """True if other has the same unit tag."""
        if isinstance(other, DynQuantity):
            other = other.unit
        return self.unit == other

    def to(self, target_unit: str) -> float:
        """
        Numeric value in target_unit.

        Raises:
            UnitMismatch: If the units have different dimensions
        """
        to_si, offset, dims = parse_unit(target_unit)
        if dims != self.unit:
            raise UnitMismatch(dims, self.unit,
                               message=f"Cannot convert {self} to {target_unit}")
        return (self.value - offset) / to_si

    # Arithmetic operations with dimensional tracking

    def _coerce(self, other, op: str) -> Optional[DynQuantity]:
        if isinstance(other, DynQuantity):
            pass
        elif isinstance(other, Number):
            other = DynQuantity(other)
        else:
            return None
        if other.unit != self.unit:
            raise UnitMismatch(self.unit, other.unit,
                               message=f"Cannot {op} {self.unit} and {other.unit}")
        return other

    def __add__(self, other) -> DynQuantity:
        other = self._coerce(other, "add")
        if other is None:
            return NotImplemented
        return DynQuantity(self.value + other.value, self.unit)

    def __radd__(self, other) -> DynQuantity:
        return self.__add__(other)

    def __sub__(self, other) -> DynQuantity:
        other = self._coerce(other, "subtract")
        if other is None:
            return NotImplemented
        return DynQuantity(self.value - other.value, self.unit)

    def __rsub__(self, other) -> DynQuantity:
        other = self._coerce(other, "subtract")
        if other is None:
            return NotImplemented
        return DynQuantity(other.value - self.value, self.unit)

    def __mul__(self, other) -> DynQuantity:
        if isinstance(other, Number):
            return DynQuantity(self.value * other, self.unit)
        if isinstance(other, DynQuantity):
            return DynQuantity(self.value * other.value, self.unit * other.unit)
        return NotImplemented

    def __rmul__(self, other) -> DynQuantity:
        return self.__mul__(other)

    def __truediv__(self, other) -> DynQuantity:
        if isinstance(other, Number):
            return DynQuantity(self.value / other, self.unit)
        if isinstance(other, DynQuantity):
            return DynQuantity(self.value / other.value, self.unit / other.unit)
        return NotImplemented

    def __rtruediv__(self, other) -> DynQuantity:
        if isinstance(other, Number):
            return DynQuantity(other / self.value, self.unit ** -1)
        return NotImplemented

    def __pow__(self, exp: int) -> DynQuantity:
        return DynQuantity(self.value ** exp, self.unit ** exp)

    def __neg__(self) -> DynQuantity:
        return DynQuantity(-self.value, self.unit)

    def __abs__(self) -> DynQuantity:
        return DynQuantity(abs(self.value), self.unit)

    def __repr__(self) -> str:
        return f"DynQuantity({self.value!r}, '{self.unit}')"

    def __str__(self) -> str:
        unit = str(self.unit)
        return f"{self.value!r} {unit}" if unit else repr(self.value)


def Q(value: Union[float, str, DynQuantity], unit: Optional[str] = None) -> DynQuantity:
    """
    Build a DynQuantity from user input.

        >>> Q("1.2 T") == Q(1.2, "T")
        True
        >>> Q("0.5").unit.is_dimensionless()
        True
    """
    if isinstance(value, DynQuantity):
        return value
    if isinstance(value, str) and unit is None:
        return DynQuantity.parse(value)
    return DynQuantity(value, unit if unit is not None else DIMENSIONLESS)


__all__ = [
    'Dimensions', 'DynQuantity', 'Q', 'UnitDef',
    'UNITS', 'register_unit', 'lookup_unit', 'parse_unit', 'BASE_SYMBOLS',

    'DIMENSIONLESS', 'LENGTH', 'MASS', 'TIME', 'CURRENT', 'TEMPERATURE', 'AMOUNT',
    'LUMINOSITY', 'AREA', 'VOLUME', 'VELOCITY', 'FREQUENCY', 'FORCE', 'PRESSURE',
    'ENERGY', 'POWER', 'TORQUE', 'CHARGE', 'VOLTAGE', 'RESISTANCE', 'CONDUCTANCE',
    'RESISTIVITY', 'CAPACITANCE', 'INDUCTANCE', 'MAGNETIC_FLUX', 'MAGNETIC_FIELD',
]
