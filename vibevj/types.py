"""Basic value types: colours, transforms, rectangles and frame timing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from vibevj import linalg

__all__ = ["Color", "Transform", "Rect", "TimeInfo"]

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Color:
    """RGBA colour with float channels."""

    r: float
    g: float
    b: float
    a: float

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]

    def to_array(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    @classmethod
    def from_vec4(cls, v) -> Color:
        x, y, z, w = (float(c) for c in v)
        return cls(x, y, z, w)

    def to_vec4(self) -> np.ndarray:
        return np.array(self.to_array(), dtype=float)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)


@dataclass
class Transform:
    """Position, Euler rotation (radians, XYZ order) and scale."""

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def to_matrix(self) -> np.ndarray:
        rotation = linalg.euler_xyz(*self.rotation)
        return linalg.scale_rotation_translation(self.scale, rotation, self.position)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned 2D rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point) -> bool:
        px, py = point
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


@dataclass
class TimeInfo:
    """Timing of the current frame."""

    elapsed: float = 0.0
    delta: float = 0.0
    frame: int = field(default=0)