# File: doodle/app.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Entry-point de la demo: muestra una Image (o una Animation) en un ImageCanvas.
# Notes: `python -m doodle.app` o `doodle-demo [--animate]`.
from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from doodle.core.animation import FrameAnimation
from doodle.core.color import hsl, rgb
from doodle.core.common_colors import BLACK
from doodle.core.image import Circle, Image, Rectangle, Triangle, all_beside
from doodle.core.settings import load_render_settings
from doodle.core.units import degrees
from doodle.core.version import APP_NAME, APP_VERSION
from doodle.ui.canvas_view import ImageCanvas, animate, draw
from doodle.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def demo_image() -> Image:
    base = hsl(degrees(200), 0.6, 0.5)
    row = all_beside(
        Circle(10 + 8 * i).fill_color(base.spin(40 * i)).line_color(BLACK)
        for i in range(5)
    )
    roof = Triangle(220, 60).fill_color(rgb(180, 60, 40))
    body = Rectangle(160, 90).fill_color(base.lighten(0.2)).line_width(3)
    return roof.above(body).above(row)


def demo_animation() -> FrameAnimation:
    def frame(n: int) -> Image:
        c = hsl(degrees(n * 3), 0.7, 0.5)
        r = 20 + 10 * abs(((n % 60) - 30) / 30.0)
        return Circle(r).fill_color(c).beside(Circle(50 - r).fill_color(c.spin(180)))

    return FrameAnimation(frame)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    setup_logging()
    settings = load_render_settings()
    app = QApplication(argv)

    canvas = ImageCanvas(settings=settings)
    canvas.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
    if "--animate" in argv[1:]:
        player = animate(demo_animation(), canvas)
        app.aboutToQuit.connect(player.stop)
    else:
        draw(demo_image(), canvas)
    canvas.show()
    log.info("%s iniciado (v%s)", APP_NAME, APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
