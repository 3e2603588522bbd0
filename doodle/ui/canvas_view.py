# File: doodle/ui/canvas_view.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Binding Qt (PySide6): DrawingSink sobre QPainter, widget de lienzo,
#          render offscreen a QImage y loop de animacion con QTimer.
# Notes:
#   - La escena es y hacia arriba con origen en el centro: translate + scale(1, -1).
#   - Angulos de arc: canvas (radianes) -> Qt (grados, sentido invertido).
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QRectF, Qt, QTimer
from PySide6.QtGui import QBrush, QColor, QImage, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from doodle.core.animation import Animation
from doodle.core.color import Color, parse_color
from doodle.core.drawing_context import DrawingContext
from doodle.core.image import Image
from doodle.core.render import draw_image
from doodle.core.settings import RenderSettings, load_render_settings
from doodle.utils.errors import DoodleIOError

log = logging.getLogger(__name__)

_TAU = math.pi * 2.0

_CAPS = {
    "butt": Qt.PenCapStyle.FlatCap,
    "round": Qt.PenCapStyle.RoundCap,
    "square": Qt.PenCapStyle.SquareCap,
}
_JOINS = {
    "bevel": Qt.PenJoinStyle.BevelJoin,
    "round": Qt.PenJoinStyle.RoundJoin,
    "miter": Qt.PenJoinStyle.MiterJoin,
}


def to_qcolor(color: Color) -> QColor:
    c = color.to_rgba()
    return QColor(int(c.r), int(c.g), int(c.b), int(c.a.to_unsigned_byte()))


class QPainterSink:
    """DrawingSink that builds a QPainterPath and paints it with a QPainter."""

    def __init__(self, painter: QPainter) -> None:
        self._painter = painter
        self._path = QPainterPath()
        self._brush_color = QColor(0, 0, 0)
        self._pen = QPen(QColor(0, 0, 0))

    @property
    def path(self) -> QPainterPath:
        return self._path

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def close_path(self) -> None:
        self._path.closeSubpath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._path.elementCount() == 0:
            self._path.moveTo(x, y)
        else:
            self._path.lineTo(x, y)

    def arc(self, cx: float, cy: float, r: float, start: float, end: float) -> None:
        sweep = end - start
        if sweep >= _TAU:
            sweep = _TAU
        elif sweep < 0.0:
            sweep = sweep % _TAU

        rect = QRectF(cx - r, cy - r, 2.0 * r, 2.0 * r)
        start_deg = -math.degrees(start)
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, start_deg)
        self._path.arcTo(rect, start_deg, -math.degrees(sweep))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._path.addRect(QRectF(x, y, w, h))

    def set_fill_style(self, color: str) -> None:
        self._brush_color = to_qcolor(parse_color(color))

    def fill(self) -> None:
        self._painter.fillPath(self._path, QBrush(self._brush_color))

    def set_stroke_style(self, color: str, width: float, cap: str, join: str) -> None:
        pen = QPen(to_qcolor(parse_color(color)))
        pen.setWidthF(float(width))
        pen.setCapStyle(_CAPS.get(str(cap), Qt.PenCapStyle.FlatCap))
        pen.setJoinStyle(_JOINS.get(str(join), Qt.PenJoinStyle.MiterJoin))
        self._pen = pen

    def stroke(self) -> None:
        self._painter.strokePath(self._path, self._pen)


def paint_image(
    painter: QPainter,
    image: Image,
    width: int,
    height: int,
    *,
    context: Optional[DrawingContext] = None,
    antialias: bool = True,
) -> None:
    """Paint `image` centered on a width x height device area."""
    painter.save()
    try:
        painter.setRenderHint(QPainter.Antialiasing, bool(antialias))
        painter.translate(width / 2.0, height / 2.0)
        painter.scale(1.0, -1.0)
        draw_image(image, QPainterSink(painter), context=context)
    finally:
        painter.restore()


def render_to_qimage(
    image: Image,
    width: int,
    height: int,
    *,
    background: Optional[str] = "white",
    context: Optional[DrawingContext] = None,
    antialias: bool = True,
) -> QImage:
    """Offscreen render. `background=None` leaves the image transparent."""
    img = QImage(int(width), int(height), QImage.Format_ARGB32_Premultiplied)
    if background:
        img.fill(to_qcolor(parse_color(background)))
    else:
        img.fill(QColor(0, 0, 0, 0))

    p = QPainter(img)
    try:
        paint_image(p, image, int(width), int(height), context=context, antialias=antialias)
    finally:
        p.end()
    return img


def save_png(image: Image, out_path: str | Path, width: int, height: int, **kwargs) -> Path:
    p = Path(out_path)
    if p.suffix.lower() != ".png":
        p = p.with_suffix(".png")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DoodleIOError(f"Could not create folder for PNG: {p}") from e
    img = render_to_qimage(image, width, height, **kwargs)
    if not img.save(str(p)):
        raise DoodleIOError(f"Could not save PNG: {p}")
    log.info("PNG saved: %s (%sx%s)", p, width, height)
    return p


class ImageCanvas(QWidget):
    """Widget that shows one Image centered on its area."""

    def __init__(self, parent: Optional[QWidget] = None, *, settings: Optional[RenderSettings] = None) -> None:
        super().__init__(parent)
        self._settings = settings or load_render_settings()
        self._image: Optional[Image] = None
        self._context: Optional[DrawingContext] = None
        self._background = to_qcolor(parse_color(self._settings.background))
        self.resize(*self._settings.canvas_size)

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    def image(self) -> Optional[Image]:
        return self._image

    def set_image(self, image: Optional[Image], context: Optional[DrawingContext] = None) -> None:
        self._image = image
        self._context = context
        self.update()

    def paintEvent(self, event) -> None:  # pragma: no cover (UI)
        p = QPainter(self)
        try:
            p.fillRect(self.rect(), self._background)
            if self._image is not None:
                paint_image(
                    p,
                    self._image,
                    self.width(),
                    self.height(),
                    context=self._context,
                    antialias=self._settings.antialias,
                )
        finally:
            p.end()
        log.debug("Canvas painted (%sx%s)", self.width(), self.height())


class AnimationPlayer(QObject):
    """Fixed-interval redraw loop.

    Shows `animation.draw()`, waits `interval_ms` and moves on to
    `animation.animate()`. Frames are independent renders.
    """

    def __init__(self, animation: Animation, canvas: ImageCanvas, interval_ms: Optional[int] = None) -> None:
        super().__init__(canvas)
        self._animation = animation
        self._canvas = canvas
        self._interval_ms = int(interval_ms if interval_ms is not None else canvas.settings.frame_interval_ms)
        self._running = False
        self.frames_shown = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.step)

    @property
    def animation(self) -> Animation:
        return self._animation

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        log.info("Animation started (every %s ms)", self._interval_ms)
        self._show_current()

    def stop(self) -> None:
        self._timer.stop()
        if self._running:
            log.info("Animation stopped after %s frames", self.frames_shown)
        self._running = False

    def step(self) -> None:
        """Advance one frame and show it."""
        self._animation = self._animation.animate()
        self._show_current()

    def _show_current(self) -> None:
        self._canvas.set_image(self._animation.draw())
        self.frames_shown += 1
        if self._running:
            self._timer.start(self._interval_ms)


def draw(image: Image, canvas: ImageCanvas) -> None:
    canvas.set_image(image)


def animate(animation: Animation, canvas: ImageCanvas, interval_ms: Optional[int] = None) -> AnimationPlayer:
    player = AnimationPlayer(animation, canvas, interval_ms)
    player.start()
    return player
