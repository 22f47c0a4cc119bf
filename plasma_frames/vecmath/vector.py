"""
Small fixed-size float32 vectors (Vec2, Vec4).

Components are numpy float32 values. A component is either a float32 scalar
(one pixel) or a float32 ndarray (a band of pixels evaluated lane by lane).
Every operation is elementwise on the components, so both cases follow the
same single-precision arithmetic.

Vector-vector operators are elementwise only: `*` is the Hadamard product,
never a dot or cross product. Scalars broadcast to every component.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Tuple

import numpy as np

F32 = np.float32


def f32(value: Any):
    """Coerce a scalar or array to float32 without changing its shape"""
    if isinstance(value, np.ndarray):
        return value.astype(F32, copy=False)
    return F32(value)


class _Vector:
    # numpy scalars and arrays must hand binary ops back to us instead of
    # broadcasting over the vector object
    __array_ufunc__ = None

    def __post_init__(self):
        for f in fields(self):
            setattr(self, f.name, f32(getattr(self, f.name)))

    def components(self) -> Tuple:
        return tuple(getattr(self, f.name) for f in fields(self))

    def _map(self, func: Callable):
        return type(self)(*(func(c) for c in self.components()))

    def _zip(self, other, func: Callable):
        """Apply func per component against a same-sized vector or a broadcast scalar"""
        if isinstance(other, _Vector):
            if type(other) is not type(self):
                return NotImplemented
            pairs = zip(self.components(), other.components())
            return type(self)(*(func(a, b) for a, b in pairs))
        if not isinstance(other, (int, float, np.number, np.ndarray)):
            return NotImplemented
        s = f32(other)
        return type(self)(*(func(a, s) for a in self.components()))

    def __add__(self, other):
        return self._zip(other, lambda a, b: a + b)

    __radd__ = __add__

    def __sub__(self, other):
        return self._zip(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._zip(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._zip(other, lambda a, b: a * b)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._zip(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._zip(other, lambda a, b: b / a)

    def __iadd__(self, other):
        """Accumulate into the receiver"""
        result = self._zip(other, lambda a, b: a + b)
        if result is NotImplemented:
            return NotImplemented
        for f, value in zip(fields(self), result.components()):
            setattr(self, f.name, value)
        return self

    def __abs__(self):
        return self.abs()

    def abs(self):
        return self._map(np.abs)

    def cos(self):
        return self._map(np.cos)

    def sin(self):
        return self._map(np.sin)

    def exp(self):
        return self._map(np.exp)

    def tanh(self):
        return self._map(np.tanh)


@dataclass
class Vec2(_Vector):
    x: Any = 0.0
    y: Any = 0.0

    def yx(self) -> "Vec2":
        return Vec2(self.y, self.x)

    def xyyx(self) -> "Vec4":
        return Vec4(self.x, self.y, self.y, self.x)

    def dot(self, other: "Vec2"):
        return self.x * other.x + self.y * other.y


@dataclass
class Vec4(_Vector):
    x: Any = 0.0
    y: Any = 0.0
    z: Any = 0.0
    w: Any = 0.0


def dot(a: Vec2, b: Vec2):
    return a.dot(b)
