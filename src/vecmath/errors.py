"""Exception types raised by vecmath.

Each class also derives from the closest builtin so callers can catch
either the library type or the standard one (``ValueError``, ``IndexError``,
``ZeroDivisionError``, ``RuntimeError``).
"""


class VecmathError(Exception):
    """Base class for all vecmath errors."""


class InvalidArgumentError(VecmathError, ValueError):
    """Raised for bad sizes, negative tolerances, missing or mismatched operands."""


class IndexOutOfRangeError(VecmathError, IndexError):
    """Raised when a component index falls outside ``[0, length)``."""


class DivisionByZeroError(VecmathError, ZeroDivisionError):
    """Raised when normalizing a zero vector or dividing by a zero ``w``."""


class IllegalStateError(VecmathError, RuntimeError):
    """Raised when an operation is not valid for the vector's current shape."""
