"""Arbitrary-length real vector backed by an owned float64 buffer.

Every algebraic operation comes in two forms: ``op_in_place`` mutates the
vector and returns None, ``op`` copies the vector, applies ``op_in_place`` to
the copy and returns it. When working in homogeneous coordinates the last
component is ``w`` by convention; nothing about that is stored.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

import numpy as np

from vecmath import rng as _rng
from vecmath.errors import (
    DivisionByZeroError,
    IllegalStateError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)
from vecmath.mathutil import ABS_TOL, REL_TOL, is_close


def _check_size(n: int) -> None:
    if n <= 0:
        raise InvalidArgumentError(f"Vector size must be positive, got {n}")


def _check_operand(other: Optional[Vector], op: str) -> Vector:
    if other is None:
        raise InvalidArgumentError(f"'{op}' requires another vector, got None")
    if not isinstance(other, Vector):
        raise InvalidArgumentError(f"'{op}' requires a Vector, got {type(other).__name__}")
    return other


def _ensure_same_length(a: Vector, b: Vector, op: str) -> None:
    if len(a._data) != len(b._data):
        raise InvalidArgumentError(
            f"Incompatible vector sizes for '{op}': {len(a._data)} vs {len(b._data)}"
        )


class Vector:
    """Mutable real-valued vector of length >= 1."""

    __slots__ = ("_data",)

    # Make numpy scalars defer to the reflected operators below.
    __array_ufunc__ = None

    def __init__(self, *components: float) -> None:
        if not components:
            raise InvalidArgumentError("Vector requires at least one component")
        self._data: np.ndarray = np.array(components, dtype=np.float64)
        if self._data.ndim != 1:
            raise InvalidArgumentError("Vector components must be scalars")

    # Construction

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Vector:
        # Takes ownership of ``data``; callers pass freshly allocated buffers only.
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def from_components(cls, coords: Optional[Iterable[float]]) -> Vector:
        """Build a vector from a sequence, copying it."""
        if coords is None:
            raise InvalidArgumentError("coords must not be None")
        return cls(*coords)

    @classmethod
    def from_size(cls, n: int) -> Vector:
        """Zero vector of size ``n``."""
        _check_size(n)
        return cls._wrap(np.zeros(n, dtype=np.float64))

    @classmethod
    def filled(cls, n: int, value: float) -> Vector:
        """Vector ``[value, ..., value]`` of size ``n``."""
        _check_size(n)
        return cls._wrap(np.full(n, value, dtype=np.float64))

    @classmethod
    def random_uniform(cls, n: int, rng: Optional[np.random.Generator] = None) -> Vector:
        """
        Vector of ``n`` independent samples from the uniform distribution on [0, 1).

        Args:
            n: Number of components.
            rng: Generator to draw from; defaults to the calling thread's generator.
        """
        _check_size(n)
        generator = rng if rng is not None else _rng.get_generator()
        return cls._wrap(generator.random(n, dtype=np.float64))

    @classmethod
    def random_normal(cls, n: int, rng: Optional[np.random.Generator] = None) -> Vector:
        """Vector of ``n`` independent standard normal samples (mean 0, variance 1)."""
        _check_size(n)
        generator = rng if rng is not None else _rng.get_generator()
        return cls._wrap(generator.standard_normal(n, dtype=np.float64))

    # Access

    def length(self) -> int:
        return len(self._data)

    def _range_check(self, i: int) -> None:
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise IndexOutOfRangeError(f"Index must be an integer, got {type(i).__name__}")
        if i < 0 or i >= len(self._data):
            raise IndexOutOfRangeError(f"Index {i} out of bounds for length {len(self._data)}")

    def get(self, i: int) -> float:
        self._range_check(i)
        return float(self._data[i])

    def set(self, i: int, value: float) -> None:
        self._range_check(i)
        self._data[i] = value

    def to_array(self) -> np.ndarray:
        """Copy of the components; changing it never affects the vector."""
        return self._data.copy()

    def to_list(self) -> List[float]:
        return self._data.tolist()

    def copy(self) -> Vector:
        return Vector._wrap(self._data.copy())

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, i: int) -> float:
        return self.get(i)

    def __setitem__(self, i: int, value: float) -> None:
        self.set(i, value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    # Homogeneous coordinates

    def to_homogeneous(self) -> Vector:
        out = self.copy()
        out.to_homogeneous_in_place()
        return out

    def to_homogeneous_in_place(self) -> None:
        """Append ``w = 1.0``."""
        self._data = np.append(self._data, 1.0)

    def from_homogeneous(self) -> Vector:
        out = self.copy()
        out.from_homogeneous_in_place()
        return out

    def from_homogeneous_in_place(self) -> None:
        """
        Divide the leading components by ``w`` and drop ``w``.

        Raises:
            IllegalStateError: if the vector only holds ``w``.
            DivisionByZeroError: if ``w == 0``.
        """
        if len(self._data) == 1:
            raise IllegalStateError("Cannot drop w from a 1D vector [w]")
        w = self._data[-1]
        if w == 0.0:
            raise DivisionByZeroError("Cannot convert from homogeneous: w == 0")
        self._data = self._data[:-1] / w

    def normalize_w(self) -> Vector:
        out = self.copy()
        out.normalize_w_in_place()
        return out

    def normalize_w_in_place(self) -> None:
        """
        Divide the leading components by ``w`` and set ``w`` to exactly 1.0.

        Raises:
            DivisionByZeroError: if ``w == 0``.
        """
        w = self._data[-1]
        if w == 0.0:
            raise DivisionByZeroError("Cannot normalize by w: w == 0")
        self._data[:-1] /= w
        self._data[-1] = 1.0

    # Linear algebra

    def add(self, other: Vector) -> Vector:
        out = self.copy()
        out.add_in_place(other)
        return out

    def add_in_place(self, other: Vector) -> None:
        other = _check_operand(other, "add_in_place")
        _ensure_same_length(self, other, "add_in_place")
        self._data += other._data

    def scale(self, s: float) -> Vector:
        out = self.copy()
        out.scale_in_place(s)
        return out

    def scale_in_place(self, s: float) -> None:
        self._data *= s

    def dot(self, other: Vector) -> float:
        """Dot product of this vector and ``other``."""
        other = _check_operand(other, "dot")
        _ensure_same_length(self, other, "dot")
        return float(np.dot(self._data, other._data))

    def norm(self) -> float:
        """Euclidean norm."""
        return float(np.linalg.norm(self._data))

    def normalize(self) -> Vector:
        """Return a unit-length copy of this vector."""
        out = self.copy()
        out.normalize_in_place()
        return out

    def normalize_in_place(self) -> None:
        n = self.norm()
        if n == 0.0:
            raise DivisionByZeroError("Cannot normalize zero-length vector")
        self.scale_in_place(1.0 / n)

    def is_close(self, other: Vector, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        """Component-wise :func:`vecmath.mathutil.is_close`."""
        other = _check_operand(other, "is_close")
        _ensure_same_length(self, other, "is_close")
        return all(
            is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self._data.tolist(), other._data.tolist())
        )

    # Operators

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __mul__(self, s: object) -> Vector:
        if not isinstance(s, (int, float, np.integer, np.floating)):
            return NotImplemented
        return self.scale(float(s))

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    # Utilities

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # hash(0.0) == hash(-0.0), matching array_equal.
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return f"Vector{self._data.tolist()}"
