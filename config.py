# Configuration values for the grid viewport.

WINDOW_TITLE = "Grid Viewport"
WINDOW_GEOMETRY = "1024x768"

# Grid cell size in pixels (width, height)
GRID_CELL_WIDTH = 32
GRID_CELL_HEIGHT = 32

ZOOM_MIN = 0.5
ZOOM_MAX = 1.0
ZOOM_DELTA = 0.25

THEME = {
    "bg": "#1F2125",
    "panel_alt": "#2F343C",
    "muted": "#9AA0A6",
    "grid": "black",
    "hover": "red",
}

GRID_PEN_WIDTH = 1.0
HOVER_PEN_WIDTH = 1.0

# Pointer button that drags the view, and the key that toggles panning.
PAN_BUTTON = "middle"
PAN_TOGGLE_KEY = "F1"

PAN_CURSOR = "fleur"
DEFAULT_CURSOR = ""

SNAP_STATUS_FORMAT = "X: {col} Y: {row}"
ZOOM_STATUS_FORMAT = "Z: {percent}%"
