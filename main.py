#---------------------------------------------------------------------------------------------#
# Grid viewport launcher
import argparse
import logging

import config
from app import GridViewerApp
from model import ViewportConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=config.WINDOW_TITLE)
    parser.add_argument("--cell-width", type=int, default=config.GRID_CELL_WIDTH)
    parser.add_argument("--cell-height", type=int, default=config.GRID_CELL_HEIGHT)
    parser.add_argument("--min-zoom", type=float, default=config.ZOOM_MIN)
    parser.add_argument("--max-zoom", type=float, default=config.ZOOM_MAX)
    parser.add_argument("--delta-zoom", type=float, default=config.ZOOM_DELTA)
    parser.add_argument("--debug", action="store_true", help="log zoom and pan changes")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    viewport_config = ViewportConfig(
        cell_width=args.cell_width,
        cell_height=args.cell_height,
        min_zoom=args.min_zoom,
        max_zoom=args.max_zoom,
        delta_zoom=args.delta_zoom,
    ).validate()
    GridViewerApp(viewport_config).run()


if __name__ == "__main__":
    main()
