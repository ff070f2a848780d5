# Drag-to-pan state machine for the grid viewport.

from __future__ import annotations

from enum import Enum
from typing import Optional
import logging

from model import Point, PointerButton, Signal
from viewport_transform import ViewportTransform


logger = logging.getLogger(__name__)


class PanState(Enum):
    IDLE = "idle"
    PANNING = "panning"


class PanController:
    """
    Idle/Panning state machine writing the pan offset of a ViewportTransform.

    The offset while dragging is always scaled pointer position minus the
    anchor captured at start, so no rounding accumulates between moves.
    """

    def __init__(self, viewport: ViewportTransform, pan_button: PointerButton = PointerButton.MIDDLE) -> None:
        """Description: Init
        Inputs: viewport: ViewportTransform, pan_button: PointerButton
        """
        self.viewport = viewport
        self.pan_button = pan_button

        self._allowed = True
        self._state = PanState.IDLE
        self._anchor: Optional[Point] = None

        self.pan_started = Signal("pan_started")
        self.pan_stopped = Signal("pan_stopped")

    @property
    def allowed(self) -> bool:
        return self._allowed

    @property
    def state(self) -> PanState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is PanState.PANNING

    @property
    def anchor(self) -> Optional[Point]:
        return self._anchor

    def start(self, screen_point: Point) -> bool:
        """Description: Start panning from a screen point
        Inputs: screen_point: Point
        """
        if not self._allowed or self.active:
            return False
        self._state = PanState.PANNING
        self._anchor = self.viewport.screen_to_relative(screen_point)
        logger.debug("Pan started, anchor %s", self._anchor)
        self.pan_started.emit()
        return True

    def stop(self) -> bool:
        """Description: Stop panning
        Inputs: None
        """
        if not self.active:
            return False
        self._state = PanState.IDLE
        self._anchor = None
        logger.debug("Pan stopped, offset %s", self.viewport.pan_offset)
        self.pan_stopped.emit()
        return True

    def move(self, screen_point: Point) -> bool:
        """Description: Drag the view to follow the pointer
        Inputs: screen_point: Point
        """
        if not self.active or self._anchor is None:
            return False
        scaled = self.viewport.screen_to_scaled(screen_point)
        self.viewport.set_pan_offset(Point(scaled.x - self._anchor.x, scaled.y - self._anchor.y))
        return True

    def toggle_allowed(self) -> bool:
        """Description: Flip whether panning may start; stops an active pan first
        Inputs: None
        """
        if self._allowed:
            self.stop()
        self._allowed = not self._allowed
        logger.debug("Panning %s", "allowed" if self._allowed else "disallowed")
        return self._allowed

    def button_down(self, button: PointerButton, screen_point: Point) -> bool:
        """Description: Button down
        Inputs: button: PointerButton, screen_point: Point
        """
        if button is not self.pan_button:
            return False
        return self.start(screen_point)

    def button_up(self, button: PointerButton) -> bool:
        """Description: Button up
        Inputs: button: PointerButton
        """
        if button is not self.pan_button:
            return False
        return self.stop()
