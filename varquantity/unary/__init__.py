"""
varquantity Unary Models
========================

Ready-made quantity functions of a single influencing factor:

    Polynomial        c0 * x^n + ... + cn
    Linear            slope * x + base_value
    FirstOrderTaylor  base_value * (1 + slope * (x - expansion_point))
    Exponential       sum(a_n * exp(k_n * x))

Each validates coefficient units at construction and exposes
influencing_factor_unit and output_unit.
"""

from .polynomial import Polynomial
from .linear import Linear
from .first_order_taylor import FirstOrderTaylor
from .exponential import Exponential, ExpTerm

__all__ = ['Polynomial', 'Linear', 'FirstOrderTaylor', 'Exponential', 'ExpTerm']
