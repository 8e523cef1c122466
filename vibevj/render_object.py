"""Renderable objects and the descriptors they are built from."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Union

import numpy as np

from vibevj import linalg
from vibevj.errors import SerializationError
from vibevj.material import Material
from vibevj.mesh import Mesh
from vibevj.mesh_gen import create_cube, create_cylinder, create_plane, create_sphere

__all__ = [
    "ModelUniform",
    "RenderObject",
    "CubeMesh",
    "SphereMesh",
    "PlaneMesh",
    "CylinderMesh",
    "MeshType",
    "RenderObjectDescriptor",
]

_FIXED_POINT = 100.0


@dataclass
class ModelUniform:
    """Model matrix laid out column by column for the GPU."""

    model: list[list[float]] = field(
        default_factory=lambda: linalg.to_cols_array_2d(linalg.identity())
    )

    def to_bytes(self) -> bytes:
        """Return 64 bytes of little-endian f32 values in column-major order."""
        return np.asarray(self.model, dtype="<f4").tobytes()


def _matrix4(value: Any) -> np.ndarray:
    matrix = np.array(value, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    return matrix


@dataclass
class RenderObject:
    """Mesh, material and model transform drawn together."""

    mesh: Mesh
    material: Material
    transform: np.ndarray = field(default_factory=linalg.identity)

    def __post_init__(self) -> None:
        self.transform = _matrix4(self.transform)

    def update_transform(self, transform: np.ndarray) -> None:
        self.transform = _matrix4(transform)

    def model_uniform(self) -> ModelUniform:
        return ModelUniform(linalg.to_cols_array_2d(self.transform))


class _MeshSpec:
    """Procedural mesh parameters stored as unsigned fixed-point integers."""

    TAG: ClassVar[str]

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{item.name} must be an integer, got {value!r}")
            if not 0 <= value <= 0xFFFFFFFF:
                raise ValueError(f"{item.name} out of range: {value}")

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {self.TAG: {item.name: getattr(self, item.name) for item in fields(self)}}


@dataclass(frozen=True)
class CubeMesh(_MeshSpec):
    """Cube with edge ``size`` hundredths of a unit."""

    TAG: ClassVar[str] = "Cube"
    size: int

    def build(self) -> Mesh:
        return create_cube(self.size / _FIXED_POINT)


@dataclass(frozen=True)
class SphereMesh(_MeshSpec):
    """UV sphere; ``radius`` in hundredths of a unit."""

    TAG: ClassVar[str] = "Sphere"
    radius: int
    segments: int
    rings: int

    def build(self) -> Mesh:
        return create_sphere(self.radius / _FIXED_POINT, self.segments, self.rings)


@dataclass(frozen=True)
class PlaneMesh(_MeshSpec):
    """Subdivided plane; ``width`` and ``height`` in hundredths of a unit."""

    TAG: ClassVar[str] = "Plane"
    width: int
    height: int
    subdivisions_x: int
    subdivisions_y: int

    def build(self) -> Mesh:
        return create_plane(
            self.width / _FIXED_POINT,
            self.height / _FIXED_POINT,
            self.subdivisions_x,
            self.subdivisions_y,
        )


@dataclass(frozen=True)
class CylinderMesh(_MeshSpec):
    """Cylinder; ``radius`` and ``height`` in hundredths of a unit."""

    TAG: ClassVar[str] = "Cylinder"
    radius: int
    height: int
    segments: int

    def build(self) -> Mesh:
        return create_cylinder(
            self.radius / _FIXED_POINT, self.height / _FIXED_POINT, self.segments
        )


MeshType = Union[CubeMesh, SphereMesh, PlaneMesh, CylinderMesh]

_MESH_TYPES: dict[str, type] = {
    cls.TAG: cls for cls in (CubeMesh, SphereMesh, PlaneMesh, CylinderMesh)
}


def _mesh_type_from_dict(data: Any) -> MeshType:
    if not isinstance(data, dict) or len(data) != 1:
        raise SerializationError(f"invalid mesh type: {data!r}")
    (tag, params), = data.items()
    cls = _MESH_TYPES.get(tag)
    if cls is None:
        raise SerializationError(f"unknown mesh type: {tag!r}")
    try:
        return cls(**params)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"invalid {tag} parameters: {exc}") from exc


def _vec3(value: Sequence[float], name: str) -> tuple[float, float, float]:
    result = tuple(float(c) for c in value)
    if len(result) != 3:
        raise ValueError(f"{name} needs 3 components, got {len(result)}")
    return result  # type: ignore[return-value]


@dataclass
class RenderObjectDescriptor:
    """Serializable recipe for a render object."""

    mesh_type: MeshType
    material: Material = field(default_factory=Material)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        self.position = _vec3(self.position, "position")
        self.rotation = _vec3(self.rotation, "rotation")
        self.scale = _vec3(self.scale, "scale")

    def create_object(self) -> RenderObject:
        """Build the mesh and the translation * rotation * scale transform."""
        transform = (
            linalg.translation(self.position)
            @ linalg.euler_xyz(*self.rotation)
            @ linalg.scaling(self.scale)
        )
        return RenderObject(self.mesh_type.build(), Material.from_dict(self.material.to_dict()), transform)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mesh_type": self.mesh_type.to_dict(),
            "material": self.material.to_dict(),
            "position": list(self.position),
            "rotation": list(self.rotation),
            "scale": list(self.scale),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenderObjectDescriptor:
        try:
            mesh_type = _mesh_type_from_dict(data["mesh_type"])
            material = Material.from_dict(data["material"])
            return cls(
                mesh_type=mesh_type,
                material=material,
                position=data["position"],
                rotation=data["rotation"],
                scale=data["scale"],
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"invalid render object: {exc}") from exc