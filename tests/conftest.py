import pytest

from canvas_controller import CanvasController
from model import ViewportConfig
from pan_controller import PanController
from viewport_transform import ViewportTransform


@pytest.fixture
def viewport_config():
    """32x32 cells, zoom between 0.5 and 1.0 in steps of 0.25."""
    return ViewportConfig(cell_width=32, cell_height=32, min_zoom=0.5, max_zoom=1.0, delta_zoom=0.25)


@pytest.fixture
def viewport(viewport_config):
    return ViewportTransform(viewport_config)


@pytest.fixture
def pan(viewport):
    return PanController(viewport)


@pytest.fixture
def controller(viewport_config):
    controller = CanvasController(viewport_config)
    controller.resize(800, 600)
    return controller
