from unittest.mock import MagicMock

from canvas_controller import CanvasController
from model import Point, PointerButton, SnapMode, ViewportConfig


def test_end_to_end_zoom_pan_and_snap(controller):
    zooms = []
    controller.zoom_changed.connect(zooms.append)

    history = []
    for _ in range(3):
        controller.wheel(-120)
        history.append(controller.viewport.zoom)
    assert history == [0.75, 0.5, 0.5]
    assert zooms == [0.75, 0.5]

    controller.pointer_move(100, 100)
    controller.pointer_down(PointerButton.MIDDLE, 100, 100)
    controller.pointer_move(150, 100)
    controller.pointer_up(PointerButton.MIDDLE, 150, 100)
    assert controller.viewport.pan_offset == (100, 0)

    screen = controller.viewport.relative_to_screen(Point(-5, -5))
    assert controller.viewport.snapped_cell_index(screen) == (-1, -1)


def test_wheel_direction_and_zero_delta(controller):
    controller.wheel(-1)
    assert controller.viewport.zoom == 0.75
    controller.wheel(0)
    assert controller.viewport.zoom == 0.75
    controller.wheel(3)
    assert controller.viewport.zoom == 1.0


def test_toggle_key(controller):
    assert controller.key_press("F1") is True
    assert not controller.pan.allowed
    assert controller.key_press("F2") is False
    assert not controller.pan.allowed


def test_custom_toggle_key():
    controller = CanvasController(toggle_key="space")
    assert controller.key_press("F1") is False
    assert controller.key_press("space") is True


def test_mouse_events_pass_through_before_pan(controller):
    down, up, started = MagicMock(), MagicMock(), MagicMock()
    controller.mouse_down.connect(down)
    controller.mouse_up.connect(up)
    controller.pan_started.connect(started)

    controller.pointer_down(PointerButton.LEFT, 5, 6)
    down.assert_called_once_with(PointerButton.LEFT, Point(5, 6))
    started.assert_not_called()

    controller.pointer_down(PointerButton.MIDDLE, 5, 6)
    started.assert_called_once_with()

    controller.pointer_up(PointerButton.RIGHT, 7, 8)
    up.assert_called_once_with(PointerButton.RIGHT, Point(7, 8))
    assert controller.pan.active


def test_pan_disallowed_ignores_middle_button(controller):
    controller.toggle_pan()
    controller.pointer_down(PointerButton.MIDDLE, 0, 0)
    controller.pointer_move(200, 200)
    assert controller.viewport.pan_offset == (0, 0)


def test_render_requested_on_state_changes(controller):
    render = MagicMock()
    controller.render_requested.connect(render)
    controller.pointer_move(1, 1)
    controller.wheel(-1)
    controller.resize(640, 480)
    controller.recenter_on(0, 0)
    assert render.call_count == 4


def test_frame_status_values(controller):
    controller.pointer_move(40, 70)
    frame = controller.frame()
    assert frame.snapped_cell == (1, 2)
    assert frame.hover_rect == (32, 64, 32, 32)
    assert frame.snap_status == "X: 1 Y: 2"
    assert frame.zoom_status == "Z: 100%"

    controller.wheel(-1)
    assert controller.frame().zoom_status == "Z: 75%"


def test_frame_grid_covers_viewport(controller):
    frame = controller.frame()
    vertical = [line for line in frame.grid_lines if line.x1 == line.x2 and line.y2 == 600]
    # ceil(800 / 32) + 1
    assert len(vertical) == 26


def test_frame_negative_cell_after_pan(controller):
    controller.go_to(Point(-64, -64))
    controller.pointer_move(10, 10)
    assert controller.frame().snapped_cell == (-2, -2)


def test_half_snap_mode_in_frame():
    controller = CanvasController(ViewportConfig(), snap_mode=SnapMode.HALF)
    controller.pointer_move(20, 20)
    frame = controller.frame()
    assert frame.hover_rect == (16, 16, 32, 32)
    assert frame.snapped_cell == (0, 0)


def test_recenter_uses_viewport_size(controller):
    controller.wheel(-1)
    controller.recenter_on(5, -3)
    controller.pointer_move(400, 300)
    assert controller.viewport.screen_to_relative(controller.mouse_position) == (5 * 32 + 16, -3 * 32 + 16)
    assert controller.frame().snapped_cell == (5, -3)
