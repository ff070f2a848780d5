from __future__ import annotations

import tkinter as tk
from tkinter import messagebox, simpledialog

import config
from canvas_controller import Frame
from canvas_view import CanvasView
from model import ViewportConfig


class GridViewerApp:
    def __init__(self, viewport_config: ViewportConfig | None = None) -> None:
        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.THEME["bg"])
        self.root.geometry(config.WINDOW_GEOMETRY)

        self._snap_status_var = tk.StringVar(value="")
        self._zoom_status_var = tk.StringVar(value="")
        self._pan_status_var = tk.StringVar(value="")

        self._build_menu()
        self._build_layout(viewport_config)
        self._update_pan_status()

    def run(self) -> None:
        self.root.mainloop()

    def _build_menu(self) -> None:
        menu = tk.Menu(self.root)
        self.root.config(menu=menu)

        view_menu = tk.Menu(menu, tearoff=0)
        view_menu.add_command(label="Zoom In", command=self.zoom_in)
        view_menu.add_command(label="Zoom Out", command=self.zoom_out)
        view_menu.add_separator()
        view_menu.add_command(label="Toggle Panning", accelerator=config.PAN_TOGGLE_KEY, command=self.toggle_panning)
        view_menu.add_command(label="Go to Cell...", command=self.go_to_cell)
        menu.add_cascade(label="View", menu=view_menu)

        help_menu = tk.Menu(menu, tearoff=0)
        help_menu.add_command(label="About", command=self.show_about)
        menu.add_cascade(label="Help", menu=help_menu)

    def _build_layout(self, viewport_config: ViewportConfig | None) -> None:
        self.canvas_frame = tk.Frame(self.root, bg=config.THEME["bg"])
        self.canvas_frame.pack(fill=tk.BOTH, expand=True)
        self.canvas_frame.rowconfigure(0, weight=1)
        self.canvas_frame.columnconfigure(0, weight=1)

        self.canvas_view = CanvasView(self.canvas_frame, viewport_config)
        self.canvas_view.canvas.grid(row=0, column=0, sticky="nsew")
        self.canvas_view.frame_drawn.connect(self._update_status)

        controller = self.canvas_view.controller
        controller.pan_started.connect(self._update_pan_status)
        controller.pan_stopped.connect(self._update_pan_status)

        self._build_status_bar()

    def _build_status_bar(self) -> None:
        status = tk.Frame(self.root, bg=config.THEME["panel_alt"])
        status.pack(fill=tk.X, side=tk.BOTTOM)
        for variable in (self._snap_status_var, self._zoom_status_var, self._pan_status_var):
            label = tk.Label(status, textvariable=variable, bg=config.THEME["panel_alt"], fg=config.THEME["muted"], anchor="w")
            label.pack(side=tk.LEFT, padx=(8, 8))

    def _update_status(self, frame: Frame) -> None:
        self._snap_status_var.set(frame.snap_status)
        self._zoom_status_var.set(frame.zoom_status)

    def _update_pan_status(self) -> None:
        pan = self.canvas_view.controller.pan
        if pan.active:
            text = "Panning"
        elif pan.allowed:
            text = "Pan: middle button"
        else:
            text = "Pan: off"
        self._pan_status_var.set(text)

    def zoom_in(self) -> None:
        self.canvas_view.controller.zoom_in()

    def zoom_out(self) -> None:
        self.canvas_view.controller.zoom_out()

    def toggle_panning(self) -> None:
        self.canvas_view.controller.toggle_pan()
        self._update_pan_status()

    def go_to_cell(self) -> None:
        col = simpledialog.askinteger("Go to Cell", "Column:", parent=self.root)
        if col is None:
            return
        row = simpledialog.askinteger("Go to Cell", "Row:", parent=self.root)
        if row is None:
            return
        self.canvas_view.controller.recenter_on(col, row)

    def show_about(self) -> None:
        messagebox.showinfo(
            "About",
            f"{config.WINDOW_TITLE}\n\nWheel to zoom, hold the middle button to pan.\n"
            f"{config.PAN_TOGGLE_KEY} toggles panning.",
        )
