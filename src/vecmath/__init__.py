"""
Numerical primitives: tolerance-based float comparison and a dynamically sized vector.

Modules:
- mathutil: is_close and scalar helpers
- models: the Vector value type
- rng: per-thread random generators
- config / utils: configuration loading and logging
"""

from vecmath.errors import (
    DivisionByZeroError,
    IllegalStateError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    VecmathError,
)
from vecmath.mathutil import ABS_TOL, REL_TOL, clamp, is_close, to_degrees, to_radians
from vecmath.models import Vector

__version__ = "0.1.0"

__all__ = [
    "ABS_TOL",
    "REL_TOL",
    "DivisionByZeroError",
    "IllegalStateError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "VecmathError",
    "Vector",
    "clamp",
    "is_close",
    "to_degrees",
    "to_radians",
]
