"""Perspective camera and its GPU uniform block."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from vibevj import linalg

__all__ = ["Camera", "CameraUniform"]

Vec3 = tuple[float, float, float]


@dataclass
class Camera:
    """Right-handed perspective camera looking at a target."""

    position: Vec3 = (0.0, 0.0, 3.0)
    target: Vec3 = (0.0, 0.0, 0.0)
    aspect: float = 16.0 / 9.0
    up: Vec3 = (0.0, 1.0, 0.0)
    fov: float = math.radians(45.0)
    near: float = 0.1
    far: float = 100.0

    def view_matrix(self) -> np.ndarray:
        return linalg.look_at_rh(self.position, self.target, self.up)

    def projection_matrix(self) -> np.ndarray:
        return linalg.perspective_rh(self.fov, self.aspect, self.near, self.far)

    def view_projection_matrix(self) -> np.ndarray:
        return self.projection_matrix() @ self.view_matrix()

    def update_aspect(self, aspect: float) -> None:
        self.aspect = aspect


@dataclass
class CameraUniform:
    """View-projection matrix laid out column by column for the GPU."""

    view_proj: list[list[float]] = field(
        default_factory=lambda: linalg.to_cols_array_2d(linalg.identity())
    )

    def update_view_proj(self, camera: Camera) -> None:
        self.view_proj = linalg.to_cols_array_2d(camera.view_projection_matrix())

    def to_bytes(self) -> bytes:
        """Return 64 bytes of little-endian f32 values in column-major order."""
        return np.asarray(self.view_proj, dtype="<f4").tobytes()