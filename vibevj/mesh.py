"""Vertices and indexed triangle meshes."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = ["Vertex", "Mesh", "VERTEX_ATTRIBUTES"]

_VERTEX_LAYOUT = struct.Struct("<11f")

# (shader location, byte offset, component count) of each vertex attribute.
VERTEX_ATTRIBUTES = (
    (0, 0, 3),  # position
    (1, 12, 3),  # normal
    (2, 24, 2),  # uv
    (3, 32, 3),  # color
)


def _floats(values: Sequence[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """Mesh vertex with position, normal, texture coordinate and colour."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    uv: tuple[float, float]
    color: tuple[float, float, float]

    SIZE = _VERTEX_LAYOUT.size

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(self, "normal", _floats(self.normal, 3, "normal"))
        object.__setattr__(self, "uv", _floats(self.uv, 2, "uv"))
        object.__setattr__(self, "color", _floats(self.color, 3, "color"))

    def to_bytes(self) -> bytes:
        """Return the vertex as packed little-endian f32 values."""
        return _VERTEX_LAYOUT.pack(*self.position, *self.normal, *self.uv, *self.color)


@dataclass
class Mesh:
    """Triangle list of vertices and 32-bit indices."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @classmethod
    def cube(cls) -> Mesh:
        """Return the front face of a unit cube."""
        vertices = [
            Vertex((-0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 0.0), (1.0, 0.0, 0.0)),
            Vertex((0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 0.0), (0.0, 1.0, 0.0)),
            Vertex((0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 1.0), (0.0, 0.0, 1.0)),
            Vertex((-0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 1.0), (1.0, 1.0, 0.0)),
        ]
        return cls(vertices, [0, 1, 2, 2, 3, 0])

    @classmethod
    def quad(cls) -> Mesh:
        """Return a full-screen quad in the XY plane."""
        white = (1.0, 1.0, 1.0)
        normal = (0.0, 0.0, 1.0)
        vertices = [
            Vertex((-1.0, -1.0, 0.0), normal, (0.0, 0.0), white),
            Vertex((1.0, -1.0, 0.0), normal, (1.0, 0.0), white),
            Vertex((1.0, 1.0, 0.0), normal, (1.0, 1.0), white),
            Vertex((-1.0, 1.0, 0.0), normal, (0.0, 1.0), white),
        ]
        return cls(vertices, [0, 1, 2, 2, 3, 0])

    def vertex_bytes(self) -> bytes:
        """Return the vertex buffer contents."""
        return b"".join(vertex.to_bytes() for vertex in self.vertices)

    def index_bytes(self) -> bytes:
        """Return the index buffer contents as little-endian u32 values."""
        for index in self.indices:
            if not 0 <= index <= 0xFFFFFFFF:
                raise ValueError(f"index {index} does not fit in 32 bits")
        return struct.pack(f"<{len(self.indices)}I", *self.indices)

    def copy(self) -> Mesh:
        """Return a mesh with its own vertex and index lists."""
        return Mesh(list(self.vertices), list(self.indices))