"""
Minimal 3-component vector math.
"""

import numpy as np

__all__ = ['Vec3', 'lerp']


def lerp(a, b, t):
    """
    Linear interpolation between ``a`` and ``b``.

    Written as ``a * (1 - t) + b * t`` so that ``t == 0`` yields exactly ``a``
    and ``t == 1`` yields exactly ``b``. Works on scalars, Vec3 and any
    broadcastable numpy arrays.
    """
    return a * (1 - t) + b * t


class Vec3:
    """A 3-component vector."""

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_iterable(cls, values):
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"Vec3 needs exactly 3 components, got {len(values)}")
        return cls(*values)

    def __repr__(self):
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, s):
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def as_array(self, dtype=np.float32):
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def lerp(self, other, t):
        return lerp(self, other, t)
