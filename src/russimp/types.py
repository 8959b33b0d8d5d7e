"""Plain geometric and color value types copied out of native memory."""

from dataclasses import dataclass, field

import numpy as np

# Geometric targets are numpy float32 arrays of these shapes.
Vec2 = np.ndarray  # (2,)
Vec3 = np.ndarray  # (3,)
Quat = np.ndarray  # (4,) as [x, y, z, w]
Mat4 = np.ndarray  # (4, 4)


def _zeros3() -> np.ndarray:
    return np.zeros(3, dtype=np.float32)


def read_only(array: np.ndarray) -> np.ndarray:
    """Mark a freshly converted array as immutable and return it."""
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class AABB:
    """Axis-aligned bounding box.

    ``min <= max`` is not checked; the box is passed through as the native
    library reported it. Boxes compare by value and are not hashable.
    """

    min: Vec3 = field(default_factory=_zeros3)
    max: Vec3 = field(default_factory=_zeros3)

    @classmethod
    def convert_from(cls, raw) -> "AABB":
        return cls(
            max=read_only(raw.mMax.convert_into()),
            min=read_only(raw.mMin.convert_into()),
        )

    def __eq__(self, other):
        if not isinstance(other, AABB):
            return NotImplemented
        return bool(
            np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max)
        )


@dataclass(frozen=True)
class Color3D:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def convert_from(cls, raw) -> "Color3D":
        return cls(r=raw.r, g=raw.g, b=raw.b)


@dataclass(frozen=True)
class Color4D:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def convert_from(cls, raw) -> "Color4D":
        return cls(r=raw.r, g=raw.g, b=raw.b, a=raw.a)


@dataclass(frozen=True)
class Vector2D:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def convert_from(cls, raw) -> "Vector2D":
        return cls(x=raw.x, y=raw.y)
