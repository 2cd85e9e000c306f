"""Scalar numeric helpers: tolerance-based comparison and angle conversions.

``is_close`` follows the semantics of :func:`math.isclose`: a combined
relative/absolute tolerance test with NaN and infinities handled before
the general formula.
"""

from __future__ import annotations

import math

from vecmath.errors import InvalidArgumentError

# Default relative tolerance, same as math.isclose.
REL_TOL: float = 1e-9

# Default absolute tolerance, same as math.isclose.
ABS_TOL: float = 0.0


def is_close(a: float, b: float, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
    """
    Return True when ``a`` and ``b`` are numerically close.

    The values are close iff::

        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Special cases:
    - ``a == b`` (including ``inf == inf`` and ``-0.0 == 0.0``) is always close.
    - NaN is never close to anything, NaN included.
    - An infinity is only close to itself.

    Raises:
        InvalidArgumentError: if ``rel_tol`` or ``abs_tol`` is negative.
    """
    if rel_tol < 0.0 or abs_tol < 0.0:
        raise InvalidArgumentError(
            f"rel_tol and abs_tol must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}"
        )

    if a == b:
        return True

    if math.isnan(a) or math.isnan(b):
        return False

    # Unequal infinities (or an infinity against a finite value).
    if math.isinf(a) or math.isinf(b):
        return False

    diff = abs(a - b)
    threshold = max(rel_tol * max(abs(a), abs(b)), abs_tol)
    return diff <= threshold


def clamp(v: float, lo: float, hi: float) -> float:
    """Bound ``v`` to ``[lo, hi]``; a NaN value or bound yields NaN."""
    if math.isnan(v) or math.isnan(lo) or math.isnan(hi):
        return math.nan
    return max(lo, min(hi, v))


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi
