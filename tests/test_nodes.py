import pytest

from vibevj.nodes import (
    Connection,
    Node,
    NodeGraph,
    SocketType,
    bezier_points,
    canvas_to_screen,
    connection_curve,
)
from vibevj.types import Rect

ORIGIN_RECT = Rect(0.0, 0.0, 800.0, 600.0)


def _graph_with_pair():
    graph = NodeGraph()
    src = Node(graph.new_node_id(), "Audio", (0.0, 0.0))
    src.add_output(graph.new_socket_id(), "Bass")
    dst = Node(graph.new_node_id(), "Output", (300.0, 0.0))
    dst.add_input(graph.new_socket_id(), "Color")
    dst.add_input(graph.new_socket_id(), "Transform")
    graph.add_node(src)
    graph.add_node(dst)
    src.update_socket_positions()
    dst.update_socket_positions()
    return graph, src, dst


def test_canvas_to_screen_identity_mapping():
    assert canvas_to_screen((12.0, 7.0), (0.0, 0.0), 1.0, ORIGIN_RECT) == (12.0, 7.0)


def test_canvas_to_screen_applies_scale_offset_and_rect():
    rect = Rect(100.0, 200.0, 10.0, 10.0)
    assert canvas_to_screen((10.0, 20.0), (5.0, 5.0), 2.0, rect) == (125.0, 245.0)


def test_bezier_endpoints_and_count():
    points = bezier_points((0, 0), (1, 2), (3, 4), (5, 6), 10)
    assert len(points) == 11
    assert points[0] == pytest.approx((0.0, 0.0))
    assert points[-1] == pytest.approx((5.0, 6.0))


def test_bezier_straight_line_stays_on_line():
    points = bezier_points((0, 0), (1, 1), (2, 2), (3, 3), 8)
    for x, y in points:
        assert x == pytest.approx(y)


def test_bezier_rejects_zero_segments():
    with pytest.raises(ValueError):
        bezier_points((0, 0), (0, 0), (0, 0), (0, 0), 0)


def test_connection_curve_has_21_points_and_horizontal_tangents():
    points = connection_curve((0.0, 0.0), (200.0, 100.0))
    assert len(points) == 21
    assert points[0] == pytest.approx((0.0, 0.0))
    assert points[-1] == pytest.approx((200.0, 100.0))
    # Leaves rightwards from start and arrives rightwards at end.
    assert points[1][0] > points[0][0]
    assert points[-1][0] > points[-2][0]


def test_socket_positions_follow_node():
    node = Node(1, "Shader", (100.0, 100.0))
    node.add_input(1, "UV")
    node.add_input(2, "Time")
    node.add_output(3, "Color")
    node.update_socket_positions()
    first, second = node.inputs
    assert first.position[0] == second.position[0]
    assert second.position[1] - first.position[1] == pytest.approx(25.0)
    assert node.outputs[0].position[1] == first.position[1]
    assert node.outputs[0].position[0] - first.position[0] == pytest.approx(
        node.size[0] + 12.0
    )
    assert first.socket_type is SocketType.INPUT
    assert node.outputs[0].socket_type is SocketType.OUTPUT


def test_node_rect_and_defaults():
    node = Node(1, "N", (10.0, 20.0))
    assert node.rect() == Rect(10.0, 20.0, 150.0, 100.0)
    assert node.color == (60, 60, 80)


def test_get_socket_and_socket_at_pos():
    node = Node(1, "N", (0.0, 0.0))
    node.add_input(4, "In")
    node.add_output(5, "Out")
    node.update_socket_positions()
    assert node.get_socket(5).name == "Out"
    assert node.get_socket(99) is None
    out_pos = node.outputs[0].position
    assert node.socket_at_pos(out_pos, 1.0).id == 5
    far = (out_pos[0] + 10.0, out_pos[1])
    assert node.socket_at_pos(far, 1.0) is None
    # Smaller scale widens the canvas-space hit radius.
    assert node.socket_at_pos(far, 0.5).id == 5


def test_ids_increment_from_one():
    graph = NodeGraph()
    assert [graph.new_node_id() for _ in range(3)] == [1, 2, 3]
    assert [graph.new_socket_id() for _ in range(2)] == [1, 2]


def test_add_node_assigns_missing_socket_ids():
    graph = NodeGraph()
    node = Node(graph.new_node_id(), "N", (0.0, 0.0))
    node.add_input(0, "A")
    node.add_output(0, "B")
    graph.add_node(node)
    ids = [s.id for s in node.inputs + node.outputs]
    assert ids == [1, 2]
    assert graph.nodes[node.id] is node


def test_add_connection_output_to_input():
    graph, src, dst = _graph_with_pair()
    conn = Connection(src.id, src.outputs[0].id, dst.id, dst.inputs[0].id)
    assert graph.add_connection(conn) is True
    assert graph.connections == [conn]


def test_add_connection_rejects_wrong_direction_and_unknown():
    graph, src, dst = _graph_with_pair()
    backwards = Connection(dst.id, dst.inputs[0].id, src.id, src.outputs[0].id)
    assert graph.add_connection(backwards) is False
    unknown = Connection(src.id, src.outputs[0].id, 42, 1)
    assert graph.add_connection(unknown) is False
    bad_socket = Connection(src.id, 999, dst.id, dst.inputs[0].id)
    assert graph.add_connection(bad_socket) is False
    assert graph.connections == []


def test_add_connection_replaces_existing_edge_into_input():
    graph, src, dst = _graph_with_pair()
    other = Node(graph.new_node_id(), "Other", (0.0, 200.0))
    other.add_output(graph.new_socket_id(), "Out")
    graph.add_node(other)
    first = Connection(src.id, src.outputs[0].id, dst.id, dst.inputs[0].id)
    second = Connection(other.id, other.outputs[0].id, dst.id, dst.inputs[0].id)
    graph.add_connection(first)
    graph.add_connection(second)
    assert graph.connections == [second]


def test_remove_connection():
    graph, src, dst = _graph_with_pair()
    conn = Connection(src.id, src.outputs[0].id, dst.id, dst.inputs[0].id)
    graph.add_connection(conn)
    graph.remove_connection(conn)
    assert graph.connections == []


def test_remove_node_drops_edges_and_selection():
    graph, src, dst = _graph_with_pair()
    graph.add_connection(Connection(src.id, src.outputs[0].id, dst.id, dst.inputs[0].id))
    graph.select(dst.id)
    graph.remove_node(dst.id)
    assert dst.id not in graph.nodes
    assert graph.connections == []
    assert graph.selected_node is None


def test_delete_selected():
    graph, src, dst = _graph_with_pair()
    graph.select(src.id)
    graph.delete_selected()
    assert list(graph.nodes) == [dst.id]


def test_select_unknown_node_raises():
    graph = NodeGraph()
    with pytest.raises(KeyError):
        graph.select(7)


def test_drag_node_scales_delta_and_selects():
    graph, src, _ = _graph_with_pair()
    graph.drag_node(src.id, (20.0, 10.0), 2.0)
    assert src.position == pytest.approx((10.0, 5.0))
    assert graph.selected_node == src.id
    assert graph.drag_start_pos == (0.0, 0.0)
    graph.drag_node(src.id, (20.0, 10.0), 2.0)
    assert graph.drag_start_pos == (0.0, 0.0)
    graph.end_drag()
    assert graph.drag_start_pos is None


def test_press_and_release_creates_connection():
    graph, src, dst = _graph_with_pair()
    out_pos = src.outputs[0].position
    graph.press_pointer(out_pos, (0.0, 0.0), 1.0, ORIGIN_RECT)
    assert graph.active_connection == (src.id, src.outputs[0].id, out_pos)
    graph.press_pointer((200.0, 50.0), (0.0, 0.0), 1.0, ORIGIN_RECT)
    assert graph.active_connection[2] == (200.0, 50.0)
    assert graph.release_pointer(dst.inputs[1].position, 1.0) is True
    assert graph.active_connection is None
    assert graph.connections == [
        Connection(src.id, src.outputs[0].id, dst.id, dst.inputs[1].id)
    ]


def test_press_on_input_does_not_start_connection():
    graph, _, dst = _graph_with_pair()
    graph.press_pointer(dst.inputs[0].position, (0.0, 0.0), 1.0, ORIGIN_RECT)
    assert graph.active_connection is None
    assert graph.release_pointer(dst.inputs[0].position, 1.0) is False


def test_release_on_empty_space_cancels():
    graph, src, _ = _graph_with_pair()
    graph.press_pointer(src.outputs[0].position, (0.0, 0.0), 1.0, ORIGIN_RECT)
    assert graph.release_pointer((1000.0, 1000.0), 1.0) is False
    assert graph.active_connection is None
    assert graph.connections == []


def test_connection_curves_endpoints():
    graph, src, dst = _graph_with_pair()
    graph.add_connection(Connection(src.id, src.outputs[0].id, dst.id, dst.inputs[0].id))
    rect = Rect(10.0, 20.0, 100.0, 100.0)
    curves = graph.connection_curves((0.0, 0.0), 1.0, rect)
    assert len(curves) == 1
    curve = curves[0]
    assert curve[0] == pytest.approx(
        canvas_to_screen(src.outputs[0].position, (0.0, 0.0), 1.0, rect)
    )
    assert curve[-1] == pytest.approx(
        canvas_to_screen(dst.inputs[0].position, (0.0, 0.0), 1.0, rect)
    )


def test_connection_curves_include_active_connection():
    graph, src, _ = _graph_with_pair()
    graph.press_pointer(src.outputs[0].position, (0.0, 0.0), 1.0, ORIGIN_RECT)
    graph.press_pointer((250.0, 80.0), (0.0, 0.0), 1.0, ORIGIN_RECT)
    curves = graph.connection_curves((0.0, 0.0), 1.0, ORIGIN_RECT)
    assert len(curves) == 1
    assert curves[0][-1] == pytest.approx((250.0, 80.0))