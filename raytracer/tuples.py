"""Four-component tuples: points, vectors and colours."""

from __future__ import annotations

import math
from numbers import Real

FLOAT_EPSILON = 2.0**-23
"""Single-precision machine epsilon, the default comparison tolerance."""

_W_TOLERANCE = 0.00001


def almost_equals(a, b, epsilon=FLOAT_EPSILON):
    """Return True when ``a`` and ``b`` are identical or differ by at most ``epsilon``."""
    return a == b or abs(a - b) <= epsilon


def _result_type(w, *operands):
    """Pick the class of an arithmetic result from its operands and its w component."""
    if any(isinstance(operand, Color) for operand in operands):
        return Color
    if abs(w - 1.0) < _W_TOLERANCE:
        return Point
    if abs(w) < _W_TOLERANCE:
        return Vector
    return Tuple


class Tuple:
    """A homogeneous 4-tuple (x, y, z, w)."""

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def _build(cls, x, y, z, w):
        obj = object.__new__(cls)
        obj.x = x
        obj.y = y
        obj.z = z
        obj.w = w
        return obj

    @classmethod
    def _typed(cls_unused, x, y, z, w, *operands):
        return _result_type(w, *operands)._build(x, y, z, w)

    def is_point(self):
        return abs(self.w - 1.0) < _W_TOLERANCE

    def is_vector(self):
        return abs(self.w) < _W_TOLERANCE

    def magnitude(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self):
        """Return a copy scaled to unit length; a zero tuple yields NaN components."""
        magnitude = self.magnitude()
        if magnitude == 0:
            return type(self)._build(math.nan, math.nan, math.nan, math.nan)
        return type(self)._build(
            self.x / magnitude, self.y / magnitude, self.z / magnitude, self.w / magnitude
        )

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def __getitem__(self, index):
        return (self.x, self.y, self.z, self.w)[index]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return all(almost_equals(a, b) for a, b in zip(self, other))

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._typed(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w, self, other
        )

    def __sub__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._typed(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w, self, other
        )

    def __neg__(self):
        return self._typed(-self.x, -self.y, -self.z, -self.w, self)

    def __pos__(self):
        return self

    def __mul__(self, other):
        if isinstance(other, Tuple):
            return self._typed(
                self.x * other.x,
                self.y * other.y,
                self.z * other.z,
                self.w * other.w,
                self,
                other,
            )
        if isinstance(other, Real):
            return self._typed(
                other * self.x, other * self.y, other * self.z, other * self.w, self
            )
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._typed(
            self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar, self
        )

    def __str__(self):
        return " ".join(f"{value:g}" for value in self)

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"


class Point(Tuple):
    """A position in space (w = 1)."""

    __slots__ = ()

    def __init__(self, x=0.0, y=0.0, z=0.0):
        super().__init__(x, y, z, 1.0)


class Vector(Tuple):
    """A direction in space (w = 0)."""

    __slots__ = ()

    def __init__(self, x=0.0, y=0.0, z=0.0):
        super().__init__(x, y, z, 0.0)

    def cross(self, other):
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal):
        return self - normal * 2 * self.dot(normal)


class Color(Tuple):
    """An RGB colour stored in the first three components."""

    __slots__ = ()

    def __init__(self, red=0.0, green=0.0, blue=0.0):
        super().__init__(red, green, blue, 0.0)

    @property
    def red(self):
        return self.x

    @property
    def green(self):
        return self.y

    @property
    def blue(self):
        return self.z