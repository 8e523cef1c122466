"""Procedural mesh generators."""

from __future__ import annotations

import math

from vibevj.mesh import Mesh, Vertex

__all__ = ["create_cube", "create_sphere", "create_plane", "create_cylinder"]


def _require_positive(**counts: int) -> None:
    for name, value in counts.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def create_cube(size: float) -> Mesh:
    """Return a cube of edge ``size`` with one colour per face."""
    s = size / 2.0
    faces = [
        # (normal, colour, corner positions)
        ((0.0, 0.0, 1.0), (1.0, 0.0, 0.0),
         [(-s, -s, s), (s, -s, s), (s, s, s), (-s, s, s)]),
        ((0.0, 0.0, -1.0), (0.0, 1.0, 0.0),
         [(s, -s, -s), (-s, -s, -s), (-s, s, -s), (s, s, -s)]),
        ((1.0, 0.0, 0.0), (0.0, 0.0, 1.0),
         [(s, -s, s), (s, -s, -s), (s, s, -s), (s, s, s)]),
        ((-1.0, 0.0, 0.0), (1.0, 1.0, 0.0),
         [(-s, -s, -s), (-s, -s, s), (-s, s, s), (-s, s, -s)]),
        ((0.0, 1.0, 0.0), (1.0, 0.0, 1.0),
         [(-s, s, s), (s, s, s), (s, s, -s), (-s, s, -s)]),
        ((0.0, -1.0, 0.0), (0.0, 1.0, 1.0),
         [(-s, -s, -s), (s, -s, -s), (s, -s, s), (-s, -s, s)]),
    ]
    corner_uvs = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]

    vertices = []
    indices = []
    for normal, color, corners in faces:
        base = len(vertices)
        vertices.extend(
            Vertex(position, normal, uv, color)
            for position, uv in zip(corners, corner_uvs)
        )
        indices.extend(base + i for i in (0, 1, 2, 2, 3, 0))
    return Mesh(vertices, indices)


def _grid_indices(columns: int, rows: int) -> list[int]:
    indices = []
    for row in range(rows):
        for column in range(columns):
            current = row * (columns + 1) + column
            below = current + columns + 1
            indices.extend(
                (current, below, current + 1, current + 1, below, below + 1)
            )
    return indices


def create_sphere(radius: float, segments: int, rings: int) -> Mesh:
    """Return a UV sphere coloured by normal direction."""
    _require_positive(segments=segments, rings=rings)
    vertices = []
    for ring in range(rings + 1):
        phi = math.pi * ring / rings
        sin_phi, cos_phi = math.sin(phi), math.cos(phi)
        for segment in range(segments + 1):
            theta = 2.0 * math.pi * segment / segments
            x = sin_phi * math.cos(theta)
            y = cos_phi
            z = sin_phi * math.sin(theta)
            vertices.append(
                Vertex(
                    (x * radius, y * radius, z * radius),
                    (x, y, z),
                    (segment / segments, ring / rings),
                    ((x + 1.0) * 0.5, (y + 1.0) * 0.5, (z + 1.0) * 0.5),
                )
            )
    return Mesh(vertices, _grid_indices(segments, rings))


def create_plane(
    width: float, height: float, subdivisions_x: int, subdivisions_y: int
) -> Mesh:
    """Return a white grid in the XY plane centred on the origin."""
    _require_positive(subdivisions_x=subdivisions_x, subdivisions_y=subdivisions_y)
    half_width = width / 2.0
    half_height = height / 2.0
    vertices = []
    for y in range(subdivisions_y + 1):
        v = y / subdivisions_y
        py = -half_height + height * v
        for x in range(subdivisions_x + 1):
            u = x / subdivisions_x
            px = -half_width + width * u
            vertices.append(
                Vertex((px, py, 0.0), (0.0, 0.0, 1.0), (u, v), (1.0, 1.0, 1.0))
            )
    return Mesh(vertices, _grid_indices(subdivisions_x, subdivisions_y))


def create_cylinder(radius: float, height: float, segments: int) -> Mesh:
    """Return an open cylinder along Y plus the two cap centre vertices."""
    _require_positive(segments=segments)
    half_height = height / 2.0
    white = (1.0, 1.0, 1.0)
    vertices = []
    for ring, y in enumerate((-half_height, half_height)):
        for segment in range(segments + 1):
            theta = 2.0 * math.pi * segment / segments
            x, z = math.cos(theta), math.sin(theta)
            vertices.append(
                Vertex(
                    (x * radius, y, z * radius),
                    (x, 0.0, z),
                    (segment / segments, float(ring)),
                    white,
                )
            )

    indices = []
    for segment in range(segments):
        base, nxt = segment, segment + 1
        top_base, top_next = base + segments + 1, nxt + segments + 1
        indices.extend((base, top_base, nxt, nxt, top_base, top_next))

    vertices.append(
        Vertex((0.0, -half_height, 0.0), (0.0, -1.0, 0.0), (0.5, 0.5), white)
    )
    vertices.append(
        Vertex((0.0, half_height, 0.0), (0.0, 1.0, 0.0), (0.5, 0.5), white)
    )
    return Mesh(vertices, indices)