from __future__ import annotations

from typing import Dict, Optional

import tkinter as tk

import config
from canvas_controller import CanvasController, Frame
from model import Pen, PointerButton, Signal, ViewportConfig


TK_BUTTONS: Dict[int, PointerButton] = {
    1: PointerButton.LEFT,
    2: PointerButton.MIDDLE,
    3: PointerButton.RIGHT,
}


class CanvasView:
    def __init__(self, master: tk.Widget, viewport_config: Optional[ViewportConfig] = None) -> None:
        """Description: Init
        Inputs: master: tk.Widget, viewport_config: Optional[ViewportConfig]
        """
        self.controller = CanvasController(viewport_config)
        self.canvas = tk.Canvas(master, bg=config.THEME["bg"], highlightthickness=0, takefocus=True)

        self.grid_pen = Pen(config.THEME["grid"], config.GRID_PEN_WIDTH)
        self.hover_pen = Pen(config.THEME["hover"], config.HOVER_PEN_WIDTH)

        # Called with (canvas, zoom) before the grid is stroked.
        self.render = Signal("render")
        self.frame_drawn = Signal("frame_drawn")

        self.controller.render_requested.connect(self.draw)
        self.controller.pan_started.connect(self._on_pan_started)
        self.controller.pan_stopped.connect(self._on_pan_stopped)

        self.canvas.bind("<Configure>", self._on_resize)
        self.canvas.bind("<Motion>", self._on_motion)
        for number in TK_BUTTONS:
            self.canvas.bind(f"<ButtonPress-{number}>", self._on_button_press)
            self.canvas.bind(f"<ButtonRelease-{number}>", self._on_button_release)
        self.canvas.bind("<MouseWheel>", self._on_mouse_wheel)
        self.canvas.bind("<Button-4>", lambda _e: self.controller.wheel(1))
        self.canvas.bind("<Button-5>", lambda _e: self.controller.wheel(-1))
        self.canvas.bind("<KeyPress>", self._on_key_press)
        self.canvas.bind("<Enter>", lambda _e: self.canvas.focus_set())
        self.canvas.focus_set()

    def set_grid_pen(self, pen: Pen) -> None:
        """Description: Set grid pen
        Inputs: pen: Pen
        """
        self.grid_pen = pen
        self.draw()

    def set_hover_pen(self, pen: Pen) -> None:
        """Description: Set hover pen
        Inputs: pen: Pen
        """
        self.hover_pen = pen
        self.draw()

    def draw(self) -> None:
        """Description: Redraw grid and hover box from the controller's frame
        Inputs: None
        """
        self.canvas.delete("grid")
        self.canvas.delete("hover")

        frame = self.controller.frame()
        self.render.emit(self.canvas, frame.zoom)
        self._draw_grid(frame)
        self._draw_hover(frame)
        self.frame_drawn.emit(frame)

    def _draw_grid(self, frame: Frame) -> None:
        """Description: Draw grid
        Inputs: frame: Frame
        """
        zoom = frame.zoom
        for line in frame.grid_lines:
            self.canvas.create_line(
                line.x1 * zoom,
                line.y1 * zoom,
                line.x2 * zoom,
                line.y2 * zoom,
                fill=self.grid_pen.color,
                width=self.grid_pen.width,
                tags="grid",
            )

    def _draw_hover(self, frame: Frame) -> None:
        zoom = frame.zoom
        rect = frame.hover_rect
        self.canvas.create_rectangle(
            rect.x * zoom,
            rect.y * zoom,
            (rect.x + rect.width) * zoom,
            (rect.y + rect.height) * zoom,
            outline=self.hover_pen.color,
            width=self.hover_pen.width,
            tags="hover",
        )

    def _on_resize(self, event: tk.Event) -> None:
        """Description: On resize
        Inputs: event: tk.Event
        """
        self.controller.resize(event.width, event.height)

    def _on_motion(self, event: tk.Event) -> None:
        self.controller.pointer_move(event.x, event.y)

    def _on_button_press(self, event: tk.Event) -> None:
        """Description: On button press
        Inputs: event: tk.Event
        """
        self.canvas.focus_set()
        self.controller.pointer_down(TK_BUTTONS[event.num], event.x, event.y)

    def _on_button_release(self, event: tk.Event) -> None:
        """Description: On button release
        Inputs: event: tk.Event
        """
        self.controller.pointer_up(TK_BUTTONS[event.num], event.x, event.y)

    def _on_mouse_wheel(self, event: tk.Event) -> None:
        # e.delta is +/-120 on Windows, small on macOS trackpads
        self.controller.wheel(event.delta)

    def _on_key_press(self, event: tk.Event) -> None:
        self.controller.key_press(event.keysym)

    def _on_pan_started(self) -> None:
        self.canvas.configure(cursor=config.PAN_CURSOR)

    def _on_pan_stopped(self) -> None:
        self.canvas.configure(cursor=config.DEFAULT_CURSOR)
