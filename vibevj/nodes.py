"""Node graph model for the visual scene editor."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from vibevj.types import Rect

__all__ = [
    "canvas_to_screen",
    "bezier_points",
    "connection_curve",
    "SocketType",
    "Socket",
    "Connection",
    "Node",
    "NodeGraph",
]

Point = tuple[float, float]

SOCKET_RADIUS = 6.0
SOCKET_SPACING = 25.0
SOCKET_TOP_OFFSET = 35.0
SOCKET_HIT_RADIUS = 8.0
CURVE_SEGMENTS = 20
MIN_CONTROL_OFFSET = 30.0


def _point(value: Sequence[float]) -> Point:
    x, y = value
    return (float(x), float(y))


def canvas_to_screen(
    canvas_pos: Sequence[float],
    canvas_offset: Sequence[float],
    canvas_scale: float,
    canvas_rect: Rect,
) -> Point:
    """Map a canvas-space point to screen space."""
    cx, cy = canvas_pos
    ox, oy = canvas_offset
    return (
        cx * canvas_scale + ox + canvas_rect.x,
        cy * canvas_scale + oy + canvas_rect.y,
    )


def bezier_points(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    segments: int,
) -> list[Point]:
    """Return ``segments + 1`` points along a cubic Bezier curve."""
    if segments <= 0:
        raise ValueError(f"segments must be positive, got {segments}")
    points = []
    for i in range(segments + 1):
        t = i / segments
        mt = 1.0 - t
        a, b, c, d = mt**3, 3.0 * mt * mt * t, 3.0 * mt * t * t, t**3
        points.append(
            (
                a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
                a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
            )
        )
    return points


def connection_curve(start: Sequence[float], end: Sequence[float]) -> list[Point]:
    """Return the screen-space polyline drawn for a connection."""
    control_offset = max(abs(end[0] - start[0]) * 0.5, MIN_CONTROL_OFFSET)
    control1 = (start[0] + control_offset, start[1])
    control2 = (end[0] - control_offset, end[1])
    return bezier_points(start, control1, control2, end, CURVE_SEGMENTS)


class SocketType(Enum):
    INPUT = "input"
    OUTPUT = "output"


@dataclass
class Socket:
    """Connection point on a node; ``position`` is in canvas space."""

    id: int
    socket_type: SocketType
    name: str
    position: Point = (0.0, 0.0)


@dataclass(frozen=True)
class Connection:
    """Edge from an output socket to an input socket."""

    from_node: int
    from_socket: int
    to_node: int
    to_socket: int


@dataclass
class Node:
    """Box in the graph with input sockets on the left and outputs on the right."""

    id: int
    title: str
    position: Point
    size: Point = (150.0, 100.0)
    inputs: list[Socket] = field(default_factory=list)
    outputs: list[Socket] = field(default_factory=list)
    color: tuple[int, int, int] = (60, 60, 80)

    def __post_init__(self) -> None:
        self.position = _point(self.position)
        self.size = _point(self.size)

    def add_input(self, socket_id: int, name: str) -> None:
        self.inputs.append(Socket(socket_id, SocketType.INPUT, name))

    def add_output(self, socket_id: int, name: str) -> None:
        self.outputs.append(Socket(socket_id, SocketType.OUTPUT, name))

    def rect(self) -> Rect:
        return Rect(self.position[0], self.position[1], self.size[0], self.size[1])

    def update_socket_positions(self) -> None:
        """Place sockets along the node's left and right edges."""
        x, y = self.position
        start_y = y + SOCKET_TOP_OFFSET
        for i, socket in enumerate(self.inputs):
            socket.position = (x - SOCKET_RADIUS, start_y + i * SOCKET_SPACING)
        right = x + self.size[0] + SOCKET_RADIUS
        for i, socket in enumerate(self.outputs):
            socket.position = (right, start_y + i * SOCKET_SPACING)

    def _sockets(self):
        yield from self.inputs
        yield from self.outputs

    def get_socket(self, socket_id: int) -> Socket | None:
        return next((s for s in self._sockets() if s.id == socket_id), None)

    def socket_at_pos(self, pos: Sequence[float], canvas_scale: float) -> Socket | None:
        """Return the first socket within hit range of a canvas-space point."""
        radius = SOCKET_HIT_RADIUS / canvas_scale
        px, py = pos
        return next(
            (
                s
                for s in self._sockets()
                if math.hypot(s.position[0] - px, s.position[1] - py) < radius
            ),
            None,
        )


class NodeGraph:
    """Nodes, their connections and the editor's interaction state."""

    def __init__(self) -> None:
        self.nodes: dict[int, Node] = {}
        self.connections: list[Connection] = []
        self.selected_node: int | None = None
        self.drag_start_pos: Point | None = None
        # (node id, output socket id, screen-space end point)
        self.active_connection: tuple[int, int, Point] | None = None
        self._next_node_id = 1
        self._next_socket_id = 1

    def new_node_id(self) -> int:
        node_id = self._next_node_id
        self._next_node_id += 1
        return node_id

    def new_socket_id(self) -> int:
        socket_id = self._next_socket_id
        self._next_socket_id += 1
        return socket_id

    def add_node(self, node: Node) -> None:
        """Add a node, giving sockets with id 0 a fresh id."""
        for socket in node._sockets():
            if socket.id == 0:
                socket.id = self.new_socket_id()
        self.nodes[node.id] = node

    def remove_node(self, node_id: int) -> None:
        self.nodes.pop(node_id, None)
        self.connections = [
            c for c in self.connections if node_id not in (c.from_node, c.to_node)
        ]
        if self.selected_node == node_id:
            self.selected_node = None

    def add_connection(self, connection: Connection) -> bool:
        """Connect an output to an input, replacing any edge into that input."""
        from_node = self.nodes.get(connection.from_node)
        to_node = self.nodes.get(connection.to_node)
        if from_node is None or to_node is None:
            return False
        from_socket = from_node.get_socket(connection.from_socket)
        to_socket = to_node.get_socket(connection.to_socket)
        if from_socket is None or to_socket is None:
            return False
        if (
            from_socket.socket_type is not SocketType.OUTPUT
            or to_socket.socket_type is not SocketType.INPUT
        ):
            return False
        self.connections = [
            c
            for c in self.connections
            if not (
                c.to_node == connection.to_node and c.to_socket == connection.to_socket
            )
        ]
        self.connections.append(connection)
        return True

    def remove_connection(self, connection: Connection) -> None:
        self.connections = [c for c in self.connections if c != connection]

    def delete_selected(self) -> None:
        if self.selected_node is not None:
            self.remove_node(self.selected_node)

    def select(self, node_id: int) -> None:
        if node_id not in self.nodes:
            raise KeyError(node_id)
        self.selected_node = node_id

    def drag_node(
        self, node_id: int, delta: Sequence[float], canvas_scale: float
    ) -> None:
        """Move a node by a screen-space delta; the first drag selects it."""
        node = self.nodes[node_id]
        if self.drag_start_pos is None:
            self.drag_start_pos = node.position
            self.selected_node = node_id
        dx, dy = delta
        node.position = (
            node.position[0] + dx / canvas_scale,
            node.position[1] + dy / canvas_scale,
        )
        node.update_socket_positions()

    def end_drag(self) -> None:
        self.drag_start_pos = None

    def _refresh_sockets(self) -> None:
        for node in self.nodes.values():
            node.update_socket_positions()

    def press_pointer(
        self,
        cursor_pos: Sequence[float],
        canvas_offset: Sequence[float],
        canvas_scale: float,
        canvas_rect: Rect,
    ) -> None:
        """Start a connection from an output socket, or move the one in progress."""
        screen_pos = canvas_to_screen(cursor_pos, canvas_offset, canvas_scale, canvas_rect)
        if self.active_connection is not None:
            node_id, socket_id, _ = self.active_connection
            self.active_connection = (node_id, socket_id, screen_pos)
            return
        self._refresh_sockets()
        for node in self.nodes.values():
            socket = node.socket_at_pos(cursor_pos, canvas_scale)
            if socket is not None and socket.socket_type is SocketType.OUTPUT:
                self.active_connection = (node.id, socket.id, screen_pos)
                break

    def release_pointer(self, cursor_pos: Sequence[float], canvas_scale: float) -> bool:
        """Finish the connection in progress on an input socket under the cursor."""
        active, self.active_connection = self.active_connection, None
        if active is None:
            return False
        from_node, from_socket, _ = active
        self._refresh_sockets()
        for node in self.nodes.values():
            socket = node.socket_at_pos(cursor_pos, canvas_scale)
            if socket is not None and socket.socket_type is SocketType.INPUT:
                return self.add_connection(
                    Connection(from_node, from_socket, node.id, socket.id)
                )
        return False

    def connection_curves(
        self,
        canvas_offset: Sequence[float],
        canvas_scale: float,
        canvas_rect: Rect,
    ) -> list[list[Point]]:
        """Return screen-space polylines for all edges, then the one in progress."""
        self._refresh_sockets()
        curves = []
        for connection in self.connections:
            from_node = self.nodes.get(connection.from_node)
            to_node = self.nodes.get(connection.to_node)
            if from_node is None or to_node is None:
                continue
            start_socket = from_node.get_socket(connection.from_socket)
            end_socket = to_node.get_socket(connection.to_socket)
            if start_socket is None or end_socket is None:
                continue
            start = canvas_to_screen(
                start_socket.position, canvas_offset, canvas_scale, canvas_rect
            )
            end = canvas_to_screen(
                end_socket.position, canvas_offset, canvas_scale, canvas_rect
            )
            curves.append(connection_curve(start, end))
        if self.active_connection is not None:
            node_id, socket_id, end_pos = self.active_connection
            node = self.nodes.get(node_id)
            socket = node.get_socket(socket_id) if node is not None else None
            if socket is not None:
                start = canvas_to_screen(
                    socket.position, canvas_offset, canvas_scale, canvas_rect
                )
                curves.append(connection_curve(start, end_pos))
        return curves