from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple
import logging

from matplotlib import colors

import config


logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a viewport is configured with values it cannot honour."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class Point(NamedTuple):
    x: float
    y: float


class Size(NamedTuple):
    width: int
    height: int


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float


class GridLine(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float


class SnapMode(Enum):
    NORMAL = 0
    HALF = 1


class ZoomDirection(Enum):
    IN = 1
    OUT = -1


class PointerButton(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


@dataclass(frozen=True)
class Pen:
    color: str
    width: float = 1.0

    def __post_init__(self) -> None:
        """Description: Validate and normalize the pen color to hex
        Inputs: None
        """
        if not colors.is_color_like(self.color):
            raise InvalidConfiguration(f"Unknown pen color: {self.color!r}", field="color", value=self.color)
        if self.width <= 0:
            raise InvalidConfiguration(f"Pen width must be positive, got {self.width}", field="width", value=self.width)
        object.__setattr__(self, "color", colors.to_hex(self.color))


@dataclass(frozen=True)
class ViewportConfig:
    cell_width: int = config.GRID_CELL_WIDTH
    cell_height: int = config.GRID_CELL_HEIGHT
    min_zoom: float = config.ZOOM_MIN
    max_zoom: float = config.ZOOM_MAX
    delta_zoom: float = config.ZOOM_DELTA

    def validate(self) -> "ViewportConfig":
        """Description: Check every invariant and return self
        Inputs: None
        """
        if self.cell_width <= 0:
            self._reject("cell_width must be positive", "cell_width", self.cell_width)
        if self.cell_height <= 0:
            self._reject("cell_height must be positive", "cell_height", self.cell_height)
        validate_zoom_bounds(self.min_zoom, self.max_zoom)
        validate_delta_zoom(self.delta_zoom)
        return self

    @staticmethod
    def _reject(message: str, field: str, value: Any) -> None:
        logger.debug("Rejected viewport configuration: %s=%r", field, value)
        raise InvalidConfiguration(f"{message}, got {value!r}", field=field, value=value)


def validate_zoom_bounds(min_zoom: float, max_zoom: float) -> None:
    if min_zoom <= 0:
        raise InvalidConfiguration(f"min_zoom must be positive, got {min_zoom!r}", field="min_zoom", value=min_zoom)
    if min_zoom > max_zoom:
        raise InvalidConfiguration(
            f"min_zoom ({min_zoom!r}) must not exceed max_zoom ({max_zoom!r})",
            field="max_zoom",
            value=max_zoom,
        )


def validate_delta_zoom(delta_zoom: float) -> None:
    if delta_zoom <= 0:
        raise InvalidConfiguration(f"delta_zoom must be positive, got {delta_zoom!r}", field="delta_zoom", value=delta_zoom)


class Signal:
    """A list of observers called synchronously, in registration order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: list = []

    def connect(self, callback) -> None:
        """Description: Register an observer
        Inputs: callback
        """
        self._observers.append(callback)

    def disconnect(self, callback) -> None:
        """Description: Remove a previously registered observer
        Inputs: callback
        """
        self._observers.remove(callback)

    def emit(self, *args: Any) -> None:
        """Description: Call every observer with args
        Inputs: *args
        """
        for callback in list(self._observers):
            callback(*args)

    def __len__(self) -> int:
        return len(self._observers)
