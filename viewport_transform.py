# Zoom, pan offset and grid snapping for the grid viewport.

from __future__ import annotations

from typing import List, Optional, Tuple
import logging
import math

import numpy as np

from model import (
    GridLine,
    Point,
    Rect,
    Signal,
    Size,
    SnapMode,
    ViewportConfig,
    ZoomDirection,
    validate_delta_zoom,
    validate_zoom_bounds,
)


logger = logging.getLogger(__name__)

# Digits kept when dividing by a zoom factor that is not exact in binary.
_UNSCALE_PRECISION = 9


class ViewportTransform:
    """
    Maps points between three spaces:

      - screen: raw pointer pixels
      - scaled: floor(screen / zoom), the space of a renderer scaled by zoom
      - relative: scaled - pan_offset, where the grid lives

    relative_to_screen is the exact inverse of screen_to_relative for every
    integer relative point.
    """

    def __init__(self, viewport_config: Optional[ViewportConfig] = None) -> None:
        """Description: Init
        Inputs: viewport_config: Optional[ViewportConfig]
        """
        cfg = (viewport_config or ViewportConfig()).validate()
        self._cell_width = int(cfg.cell_width)
        self._cell_height = int(cfg.cell_height)
        self._min_zoom = cfg.min_zoom
        self._max_zoom = cfg.max_zoom
        self._delta_zoom = cfg.delta_zoom
        self._zoom = min(self._max_zoom, max(self._min_zoom, 1.0))
        self._pan_offset = Point(0, 0)

        self.zoom_changed = Signal("zoom_changed")

    @property
    def cell_width(self) -> int:
        return self._cell_width

    @property
    def cell_height(self) -> int:
        return self._cell_height

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def min_zoom(self) -> float:
        return self._min_zoom

    @property
    def max_zoom(self) -> float:
        return self._max_zoom

    @property
    def delta_zoom(self) -> float:
        return self._delta_zoom

    @property
    def zoom_percent(self) -> int:
        """Description: Zoom as a whole percentage
        Inputs: None
        """
        return int(round(self._zoom * 100))

    @property
    def pan_offset(self) -> Point:
        return self._pan_offset

    # -----------------------------
    # Coordinate spaces
    # -----------------------------
    def screen_to_scaled(self, point: Point) -> Point:
        """Description: Screen to scaled
        Inputs: point: Point
        """
        return Point(self._unscale(point[0]), self._unscale(point[1]))

    def screen_to_relative(self, point: Point) -> Point:
        """Description: Screen to relative
        Inputs: point: Point
        """
        scaled = self.screen_to_scaled(point)
        return Point(scaled.x - self._pan_offset.x, scaled.y - self._pan_offset.y)

    def relative_to_screen(self, point: Point) -> Point:
        """Description: Relative to screen
        Inputs: point: Point
        """
        return Point(
            (point[0] + self._pan_offset.x) * self._zoom,
            (point[1] + self._pan_offset.y) * self._zoom,
        )

    def _unscale(self, value: float) -> int:
        return math.floor(round(value / self._zoom, _UNSCALE_PRECISION))

    # -----------------------------
    # Snapping
    # -----------------------------
    def snap_step(self, mode: SnapMode = SnapMode.NORMAL) -> Tuple[int, int]:
        """Description: Grid step for a snap mode
        Inputs: mode: SnapMode
        """
        if mode is SnapMode.HALF:
            return max(1, self._cell_width // 2), max(1, self._cell_height // 2)
        return self._cell_width, self._cell_height

    def snap_relative(self, point: Point, mode: SnapMode = SnapMode.NORMAL) -> Point:
        """Description: Snap a relative point to the grid intersection at or above-left of it
        Inputs: point: Point, mode: SnapMode
        """
        step_x, step_y = self.snap_step(mode)
        # Floored modulo: -1 belongs to the cell starting at -step, not at 0.
        return Point(point[0] - point[0] % step_x, point[1] - point[1] % step_y)

    def snap_to_grid(self, point: Point, mode: SnapMode = SnapMode.NORMAL) -> Point:
        """Description: Snap a screen point, returning a screen point
        Inputs: point: Point, mode: SnapMode
        """
        closest = self.snap_relative(self.screen_to_relative(point), mode)
        return self.relative_to_screen(closest)

    def relative_cell_index(self, point: Point, mode: SnapMode = SnapMode.NORMAL) -> Tuple[int, int]:
        """Description: Grid cell containing a relative point
        Inputs: point: Point, mode: SnapMode
        """
        closest = self.snap_relative(point, mode)
        return int(closest.x // self._cell_width), int(closest.y // self._cell_height)

    def snapped_cell_index(self, point: Point, mode: SnapMode = SnapMode.NORMAL) -> Tuple[int, int]:
        """Description: Grid cell under a screen point
        Inputs: point: Point, mode: SnapMode
        """
        snapped = self.screen_to_relative(self.snap_to_grid(point, mode))
        return self.relative_cell_index(snapped, mode)

    def hover_rect(self, point: Point, mode: SnapMode = SnapMode.NORMAL) -> Rect:
        """Description: Cell rectangle under a screen point, in scaled coordinates
        Inputs: point: Point, mode: SnapMode
        """
        closest = self.snap_relative(self.screen_to_relative(point), mode)
        return Rect(
            closest.x + self._pan_offset.x,
            closest.y + self._pan_offset.y,
            self._cell_width,
            self._cell_height,
        )

    # -----------------------------
    # Zoom
    # -----------------------------
    def set_zoom_step(self, direction: ZoomDirection) -> bool:
        """Description: Step the zoom in or out, clamped to the bounds
        Inputs: direction: ZoomDirection
        """
        step = self._delta_zoom if direction is ZoomDirection.IN else -self._delta_zoom
        return self._apply_zoom(self._zoom + step)

    def set_zoom_bounds(self, min_zoom: float, max_zoom: float) -> None:
        """Description: Replace the zoom bounds and pull the zoom inside them
        Inputs: min_zoom: float, max_zoom: float
        """
        validate_zoom_bounds(min_zoom, max_zoom)
        self._min_zoom = min_zoom
        self._max_zoom = max_zoom
        self._apply_zoom(self._zoom)

    def set_delta_zoom(self, delta_zoom: float) -> None:
        """Description: Set delta zoom
        Inputs: delta_zoom: float
        """
        validate_delta_zoom(delta_zoom)
        self._delta_zoom = delta_zoom

    def _apply_zoom(self, value: float) -> bool:
        new_zoom = min(self._max_zoom, max(self._min_zoom, round(value, _UNSCALE_PRECISION)))
        if new_zoom == self._zoom:
            return False
        logger.debug("Zoom %s -> %s", self._zoom, new_zoom)
        self._zoom = new_zoom
        self.zoom_changed.emit(new_zoom)
        return True

    # -----------------------------
    # Pan offset
    # -----------------------------
    def set_pan_offset(self, offset: Point) -> None:
        """Description: Set pan offset
        Inputs: offset: Point
        """
        self._pan_offset = Point(int(offset[0]), int(offset[1]))

    def go_to(self, point: Point) -> None:
        """Description: Move the view so that point lands on the origin
        Inputs: point: Point
        """
        self.set_pan_offset(Point(-point[0], -point[1]))

    def recenter_on(self, col: int, row: int, viewport_size: Size) -> None:
        """Description: Center cell (col, row) in a viewport of the given size
        Inputs: col: int, row: int, viewport_size: Size
        """
        center = self.screen_to_scaled(Point(viewport_size[0] / 2, viewport_size[1] / 2))
        target_x = col * self._cell_width + self._cell_width // 2
        target_y = row * self._cell_height + self._cell_height // 2
        self.go_to(Point(target_x - center.x, target_y - center.y))
        logger.debug("Recentered on cell (%d, %d), offset %s", col, row, self._pan_offset)

    # -----------------------------
    # Grid geometry
    # -----------------------------
    def grid_lines(self, viewport_size: Size) -> List[GridLine]:
        """Description: Grid lines covering the viewport, in scaled coordinates
        Inputs: viewport_size: Size
        """
        width = viewport_size[0] / self._zoom
        height = viewport_size[1] / self._zoom
        columns = math.ceil(width / self._cell_width)
        rows = math.ceil(height / self._cell_height)

        xs = np.arange(columns + 1) * self._cell_width + self._pan_offset.x % self._cell_width
        ys = np.arange(rows + 1) * self._cell_height + self._pan_offset.y % self._cell_height

        lines = [GridLine(int(x), 0, int(x), height) for x in xs]
        lines.extend(GridLine(0, int(y), width, int(y)) for y in ys)
        return lines
