# Host-independent event handling and frame geometry for the grid viewport.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

import config
from model import GridLine, Point, PointerButton, Rect, Signal, Size, SnapMode, ViewportConfig, ZoomDirection
from pan_controller import PanController
from viewport_transform import ViewportTransform


logger = logging.getLogger(__name__)


@dataclass
class Frame:
    grid_lines: List[GridLine]
    hover_rect: Rect
    snapped_cell: Tuple[int, int]
    zoom: float
    zoom_percent: int

    @property
    def snap_status(self) -> str:
        """Description: Snap status text
        Inputs: None
        """
        col, row = self.snapped_cell
        return config.SNAP_STATUS_FORMAT.format(col=col, row=row)

    @property
    def zoom_status(self) -> str:
        """Description: Zoom status text
        Inputs: None
        """
        return config.ZOOM_STATUS_FORMAT.format(percent=self.zoom_percent)


class CanvasController:
    """
    Receives raw host events, drives the viewport and pan state machine, and
    builds the geometry for each redraw. Knows nothing about the toolkit.
    """

    def __init__(
        self,
        viewport_config: Optional[ViewportConfig] = None,
        pan_button: PointerButton = PointerButton(config.PAN_BUTTON),
        toggle_key: str = config.PAN_TOGGLE_KEY,
        snap_mode: SnapMode = SnapMode.NORMAL,
    ) -> None:
        """Description: Init
        Inputs: viewport_config: Optional[ViewportConfig], pan_button: PointerButton, toggle_key: str, snap_mode: SnapMode
        """
        self.viewport = ViewportTransform(viewport_config)
        self.pan = PanController(self.viewport, pan_button)
        self.toggle_key = toggle_key
        self.snap_mode = snap_mode

        self._mouse_position = Point(0, 0)
        self._viewport_size = Size(0, 0)

        self.mouse_down = Signal("mouse_down")
        self.mouse_up = Signal("mouse_up")
        self.render_requested = Signal("render_requested")

    @property
    def zoom_changed(self) -> Signal:
        return self.viewport.zoom_changed

    @property
    def pan_started(self) -> Signal:
        return self.pan.pan_started

    @property
    def pan_stopped(self) -> Signal:
        return self.pan.pan_stopped

    @property
    def mouse_position(self) -> Point:
        return self._mouse_position

    @property
    def viewport_size(self) -> Size:
        return self._viewport_size

    # -----------------------------
    # Inbound events
    # -----------------------------
    def pointer_move(self, x: float, y: float) -> None:
        """Description: Pointer move
        Inputs: x: float, y: float
        """
        self._mouse_position = Point(x, y)
        self.pan.move(self._mouse_position)
        self._request_render()

    def pointer_down(self, button: PointerButton, x: float, y: float) -> None:
        """Description: Pointer down
        Inputs: button: PointerButton, x: float, y: float
        """
        self._mouse_position = Point(x, y)
        self.mouse_down.emit(button, self._mouse_position)
        self.pan.button_down(button, self._mouse_position)

    def pointer_up(self, button: PointerButton, x: float, y: float) -> None:
        """Description: Pointer up
        Inputs: button: PointerButton, x: float, y: float
        """
        self._mouse_position = Point(x, y)
        self.mouse_up.emit(button, self._mouse_position)
        self.pan.button_up(button)

    def wheel(self, delta: float) -> None:
        """Description: Step the zoom by wheel direction
        Inputs: delta: float
        """
        if delta == 0:
            return
        direction = ZoomDirection.IN if delta > 0 else ZoomDirection.OUT
        self.viewport.set_zoom_step(direction)
        self._request_render()

    def key_press(self, key: str) -> bool:
        """Description: Key press
        Inputs: key: str
        """
        if key != self.toggle_key:
            return False
        self.toggle_pan()
        return True

    def resize(self, width: int, height: int) -> None:
        """Description: Resize
        Inputs: width: int, height: int
        """
        self._viewport_size = Size(max(0, int(width)), max(0, int(height)))
        self._request_render()

    def toggle_pan(self) -> bool:
        """Description: Toggle pan
        Inputs: None
        """
        return self.pan.toggle_allowed()

    def zoom_in(self) -> None:
        self.wheel(1)

    def zoom_out(self) -> None:
        self.wheel(-1)

    def go_to(self, point: Point) -> None:
        """Description: Go to
        Inputs: point: Point
        """
        self.viewport.go_to(point)
        self._request_render()

    def recenter_on(self, col: int, row: int) -> None:
        """Description: Center a cell in the current viewport
        Inputs: col: int, row: int
        """
        self.viewport.recenter_on(col, row, self._viewport_size)
        self._request_render()

    def _request_render(self) -> None:
        self.render_requested.emit()

    # -----------------------------
    # Outbound geometry
    # -----------------------------
    def frame(self) -> Frame:
        """Description: Geometry and status values for one redraw
        Inputs: None
        """
        return Frame(
            grid_lines=self.viewport.grid_lines(self._viewport_size),
            hover_rect=self.viewport.hover_rect(self._mouse_position, self.snap_mode),
            snapped_cell=self.viewport.snapped_cell_index(self._mouse_position, self.snap_mode),
            zoom=self.viewport.zoom,
            zoom_percent=self.viewport.zoom_percent,
        )
