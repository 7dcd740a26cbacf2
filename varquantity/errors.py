"""
Exceptions raised by varquantity.

Usage:
    from varquantity.errors import UnitMismatch

    try:
        wrapper = FunctionWrapper(Power, model)
    except UnitMismatch as e:
        print(e.expected, e.found)
"""

from typing import Any, Optional


class VarQuantityError(Exception):
    """Base class for all varquantity errors."""
    pass


class UnitMismatch(VarQuantityError, ValueError):
    """
    Raised when a quantity does not have the unit that is expected.

    Attributes:
        expected: Unit tag that was expected
        found: Unit tag that was actually found
        index: Position of the offending item (coefficient, term), if any
    """

    def __init__(self, expected: Any, found: Any, index: Optional[int] = None,
                 message: Optional[str] = None):
        self.expected = expected
        self.found = found
        self.index = index

        if message is None:
            message = f"Expected unit {expected!r}, found {found!r}"
            if index is not None:
                message += f" (at index {index})"
        super().__init__(message)


class UnknownFunctionType(VarQuantityError, KeyError):
    """Raised when a serialized quantity function names an unregistered type."""

    def __init__(self, tag: str, available: Optional[list] = None):
        self.tag = tag
        self.available = available or []
        super().__init__(tag)

    def __str__(self) -> str:
        return f"Unknown quantity function type: '{self.tag}'. Available: {self.available}"
