"""4x4 matrix helpers for right-handed 3D transforms.

Matrices are numpy arrays that act on column vectors (``m @ v``). The
GPU layout is column-major, which :func:`to_cols_array_2d` produces.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

__all__ = [
    "identity",
    "translation",
    "scaling",
    "euler_xyz",
    "scale_rotation_translation",
    "look_at_rh",
    "perspective_rh",
    "to_cols_array_2d",
]


def _vec3(value: Sequence[float]) -> np.ndarray:
    vec = np.asarray(value, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
    return vec


def _normalized(vec: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vec / length


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4)


def translation(offset: Sequence[float]) -> np.ndarray:
    """Return a matrix translating by ``offset``."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def scaling(factors: Sequence[float]) -> np.ndarray:
    """Return a matrix scaling each axis by ``factors``."""
    matrix = np.eye(4)
    matrix[:3, :3] = np.diag(_vec3(factors))
    return matrix


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def euler_xyz(x: float, y: float, z: float) -> np.ndarray:
    """Return the rotation for intrinsic X, then Y, then Z Euler angles (radians)."""
    matrix = np.eye(4)
    matrix[:3, :3] = _rotation_x(x) @ _rotation_y(y) @ _rotation_z(z)
    return matrix


def scale_rotation_translation(
    scale: Sequence[float], rotation: np.ndarray, position: Sequence[float]
) -> np.ndarray:
    """Compose scale, then a rotation matrix (3x3 or 4x4), then a translation."""
    rot = np.asarray(rotation, dtype=float)
    if rot.shape not in ((3, 3), (4, 4)):
        raise ValueError(f"rotation must be a 3x3 or 4x4 matrix, got shape {rot.shape}")
    matrix = np.eye(4)
    matrix[:3, :3] = rot[:3, :3] * _vec3(scale)
    matrix[:3, 3] = _vec3(position)
    return matrix


def look_at_rh(
    eye: Sequence[float], target: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = _vec3(eye)
    forward = _normalized(_vec3(target) - eye_v)
    side = _normalized(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(side @ eye_v)
    matrix[1, 3] = -float(true_up @ eye_v)
    matrix[2, 3] = float(forward @ eye_v)
    return matrix


def perspective_rh(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection with depth mapped to [0, 1]."""
    half = 0.5 * fov
    height = math.cos(half) / math.sin(half)
    width = height / aspect
    depth = far / (near - far)
    return np.array(
        [
            [width, 0.0, 0.0, 0.0],
            [0.0, height, 0.0, 0.0],
            [0.0, 0.0, depth, depth * near],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def to_cols_array_2d(matrix: np.ndarray) -> list[list[float]]:
    """Return the matrix as a list of its four columns."""
    mat = np.asarray(matrix, dtype=float)
    if mat.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {mat.shape}")
    return mat.T.tolist()