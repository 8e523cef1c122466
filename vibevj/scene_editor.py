"""Canvas state of the node-based scene editor: view transform and grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from vibevj.nodes import Node, NodeGraph
from vibevj.types import Rect

__all__ = ["GridLines", "SceneEditor"]

Point = tuple[float, float]

MIN_SCALE = 0.25
MAX_SCALE = 2.0
ZOOM_SENSITIVITY = 0.001
GRID_SPACING = 50.0


@dataclass
class GridLines:
    """Screen-space grid line positions for a canvas rectangle."""

    vertical: list[float] = field(default_factory=list)
    horizontal: list[float] = field(default_factory=list)
    origin_x: float | None = None
    origin_y: float | None = None


class SceneEditor:
    """Node graph plus the pan and zoom of the canvas it is drawn on."""

    def __init__(self) -> None:
        self.node_graph = NodeGraph()
        self.canvas_offset: Point = (0.0, 0.0)
        self.canvas_scale = 1.0
        self.is_panning = False
        self._create_example_nodes()

    def _create_example_nodes(self) -> None:
        graph = self.node_graph

        shader = Node(graph.new_node_id(), "Shader", (100.0, 100.0))
        shader.add_input(graph.new_socket_id(), "UV")
        shader.add_input(graph.new_socket_id(), "Time")
        shader.add_output(graph.new_socket_id(), "Color")
        shader.color = (80, 60, 100)

        audio = Node(graph.new_node_id(), "Audio Analyzer", (100.0, 250.0))
        audio.add_output(graph.new_socket_id(), "Bass")
        audio.add_output(graph.new_socket_id(), "Mid")
        audio.add_output(graph.new_socket_id(), "Treble")
        audio.color = (60, 100, 80)

        output = Node(graph.new_node_id(), "Scene Output", (400.0, 150.0))
        output.add_input(graph.new_socket_id(), "Color")
        output.add_input(graph.new_socket_id(), "Transform")
        output.color = (100, 60, 60)

        for node in (shader, audio, output):
            node.update_socket_positions()
            graph.add_node(node)

    def reset_view(self) -> None:
        self.canvas_offset = (0.0, 0.0)
        self.canvas_scale = 1.0

    def pan(self, delta: Sequence[float]) -> None:
        """Shift the canvas by a screen-space delta."""
        dx, dy = delta
        self.is_panning = True
        self.canvas_offset = (self.canvas_offset[0] + dx, self.canvas_offset[1] + dy)

    def zoom(self, scroll_delta: float) -> None:
        """Scale the canvas by a mouse-wheel delta, within the allowed range."""
        if abs(scroll_delta) > 0.0:
            factor = 1.0 + scroll_delta * ZOOM_SENSITIVITY
            self.canvas_scale = min(
                max(self.canvas_scale * factor, MIN_SCALE), MAX_SCALE
            )

    def screen_to_canvas(self, screen_pos: Sequence[float], canvas_rect: Rect) -> Point:
        sx, sy = screen_pos
        ox, oy = self.canvas_offset
        return (
            (sx - canvas_rect.x - ox) / self.canvas_scale,
            (sy - canvas_rect.y - oy) / self.canvas_scale,
        )

    def canvas_to_screen(self, canvas_pos: Sequence[float], canvas_rect: Rect) -> Point:
        cx, cy = canvas_pos
        ox, oy = self.canvas_offset
        return (
            cx * self.canvas_scale + ox + canvas_rect.x,
            cy * self.canvas_scale + oy + canvas_rect.y,
        )

    def grid_lines(self, rect: Rect) -> GridLines:
        """Return the grid and origin lines to draw inside ``rect``."""
        spacing = GRID_SPACING * self.canvas_scale
        ox, oy = self.canvas_offset
        right = rect.x + rect.width
        bottom = rect.y + rect.height

        def positions(start: float, end: float, offset: float) -> list[float]:
            lines = []
            pos = start + math.fmod(start - offset, spacing)
            while pos < end:
                lines.append(pos)
                pos += spacing
            return lines

        origin_x = rect.x + ox
        origin_y = rect.y + oy
        return GridLines(
            vertical=positions(rect.x, right, ox),
            horizontal=positions(rect.y, bottom, oy),
            origin_x=origin_x if rect.x <= origin_x <= right else None,
            origin_y=origin_y if rect.y <= origin_y <= bottom else None,
        )

    def delete_selected(self) -> None:
        self.node_graph.delete_selected()