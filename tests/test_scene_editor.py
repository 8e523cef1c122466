import math

import pytest

from vibevj.nodes import SocketType
from vibevj.scene_editor import SceneEditor
from vibevj.types import Rect


@pytest.fixture
def editor():
    return SceneEditor()


def _by_title(editor, title):
    return next(n for n in editor.node_graph.nodes.values() if n.title == title)


def test_example_nodes(editor):
    titles = sorted(n.title for n in editor.node_graph.nodes.values())
    assert titles == ["Audio Analyzer", "Scene Output", "Shader"]
    shader = _by_title(editor, "Shader")
    assert [s.name for s in shader.inputs] == ["UV", "Time"]
    assert [s.name for s in shader.outputs] == ["Color"]
    assert shader.position == (100.0, 100.0)
    audio = _by_title(editor, "Audio Analyzer")
    assert [s.name for s in audio.outputs] == ["Bass", "Mid", "Treble"]
    assert all(s.socket_type is SocketType.OUTPUT for s in audio.outputs)


def test_example_socket_ids_unique(editor):
    ids = [s.id for n in editor.node_graph.nodes.values() for s in n.inputs + n.outputs]
    assert len(ids) == len(set(ids))


def test_pan_accumulates_and_reset(editor):
    editor.pan((10.0, 5.0))
    editor.pan((3.0, -2.0))
    assert editor.canvas_offset == (10.0 + 3.0, 5.0 - 2.0)
    assert editor.is_panning is True
    editor.zoom(100.0)
    editor.reset_view()
    assert editor.canvas_offset == (0.0, 0.0)
    assert editor.canvas_scale == 1.0


def test_zoom_clamps(editor):
    editor.zoom(1e6)
    assert editor.canvas_scale == 2.0
    editor.zoom(-1e6)
    assert editor.canvas_scale == 0.25


def test_zoom_zero_and_direction(editor):
    editor.zoom(0.0)
    assert editor.canvas_scale == 1.0
    editor.zoom(50.0)
    assert editor.canvas_scale > 1.0
    editor.reset_view()
    editor.zoom(-50.0)
    assert editor.canvas_scale < 1.0


def test_coordinate_round_trip(editor):
    rect = Rect(20.0, 40.0, 800.0, 600.0)
    editor.pan((15.0, -7.0))
    editor.zoom(300.0)
    point = (123.5, -45.25)
    back = editor.screen_to_canvas(editor.canvas_to_screen(point, rect), rect)
    assert back == pytest.approx(point)


def test_identity_view_maps_rect_origin(editor):
    rect = Rect(20.0, 40.0, 800.0, 600.0)
    assert editor.canvas_to_screen((0.0, 0.0), rect) == (20.0, 40.0)


def test_grid_lines_within_rect_and_spaced(editor):
    rect = Rect(10.0, 20.0, 400.0, 300.0)
    editor.pan((17.0, 33.0))
    grid = editor.grid_lines(rect)
    assert grid.vertical and grid.horizontal
    assert all(x < rect.x + rect.width for x in grid.vertical)
    assert all(y < rect.y + rect.height for y in grid.horizontal)
    gaps = [b - a for a, b in zip(grid.vertical, grid.vertical[1:])]
    assert all(math.isclose(g, 50.0) for g in gaps)
    assert grid.origin_x == rect.x + 17.0
    assert grid.origin_y == rect.y + 33.0


def test_grid_origin_outside(editor):
    rect = Rect(0.0, 0.0, 100.0, 100.0)
    editor.pan((-500.0, 500.0))
    grid = editor.grid_lines(rect)
    assert grid.origin_x is None
    assert grid.origin_y is None


def test_delete_selected(editor):
    audio = _by_title(editor, "Audio Analyzer")
    editor.node_graph.select(audio.id)
    editor.delete_selected()
    assert audio.id not in editor.node_graph.nodes
    assert len(editor.node_graph.nodes) == 2