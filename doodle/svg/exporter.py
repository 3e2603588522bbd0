# File: doodle/svg/exporter.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: DrawingSink que genera SVG + export de una Image a archivo .svg.
# Notes:
#   - Cada fill()/stroke() emite un <path>; asi se conserva el orden fill -> stroke.
#   - La escena (y hacia arriba) va dentro de un <g> con el eje y invertido.
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import Element, SubElement, tostring

from doodle.core.color import parse_color
from doodle.core.drawing_context import DrawingContext
from doodle.core.image import Image
from doodle.core.render import draw_image
from doodle.core.units import format_number
from doodle.utils.errors import DoodleIOError

log = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

_TAU = math.pi * 2.0


def _n(v: float) -> str:
    return format_number(v)


class SvgSink:
    """Collects path commands and appends <path> elements to `parent`."""

    def __init__(self, parent: Element) -> None:
        self._parent = parent
        self._d: list[str] = []
        self._current: Optional[tuple[float, float]] = None
        self._subpath_start: Optional[tuple[float, float]] = None
        self._fill_color = "rgba(0, 0, 0, 1.0)"
        self._stroke_style: tuple[str, float, str, str] = ("rgba(0, 0, 0, 1.0)", 1.0, "butt", "miter")

    @property
    def path_data(self) -> str:
        return " ".join(self._d)

    # ------------------------------
    # Path construction
    # ------------------------------
    def begin_path(self) -> None:
        self._d = []
        self._current = None
        self._subpath_start = None

    def close_path(self) -> None:
        # rect() already closes its subpath
        if self._current is None or self._d[-1].endswith("Z"):
            return
        self._d.append("Z")
        self._current = self._subpath_start

    def move_to(self, x: float, y: float) -> None:
        self._d.append(f"M {_n(x)} {_n(y)}")
        self._current = (x, y)
        self._subpath_start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self.move_to(x, y)
            return
        self._d.append(f"L {_n(x)} {_n(y)}")
        self._current = (x, y)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._d.append(f"M {_n(x)} {_n(y)} h {_n(w)} v {_n(h)} h {_n(-w)} Z")
        self._current = (x, y)
        self._subpath_start = (x, y)

    def arc(self, cx: float, cy: float, r: float, start: float, end: float) -> None:
        sx = cx + r * math.cos(start)
        sy = cy + r * math.sin(start)
        if self._current is None:
            self.move_to(sx, sy)
        else:
            self.line_to(sx, sy)

        sweep = end - start
        if sweep >= _TAU:
            sweep = _TAU
        elif sweep < 0.0:
            sweep = sweep % _TAU
        if sweep <= 0.0 or r <= 0.0:
            return

        # SVG arcs cannot draw a full circle in one command: split in <= 180 deg pieces.
        n = max(1, math.ceil(sweep / math.pi - 1e-9))
        step = sweep / n
        for i in range(1, n + 1):
            a = start + step * i
            ex = cx + r * math.cos(a)
            ey = cy + r * math.sin(a)
            self._d.append(f"A {_n(r)} {_n(r)} 0 0 1 {_n(ex)} {_n(ey)}")
        self._current = (cx + r * math.cos(start + sweep), cy + r * math.sin(start + sweep))

    # ------------------------------
    # Painting
    # ------------------------------
    def set_fill_style(self, color: str) -> None:
        self._fill_color = color

    def set_stroke_style(self, color: str, width: float, cap: str, join: str) -> None:
        self._stroke_style = (color, float(width), str(cap), str(join))

    def fill(self) -> None:
        if not self._d:
            return
        c = parse_color(self._fill_color).to_rgba()
        attrs = {"d": self.path_data, "fill": c.to_hex(), "stroke": "none"}
        if c.a < 1.0:
            attrs["fill-opacity"] = c.a.to_canvas()
        SubElement(self._parent, "path", attrs)

    def stroke(self) -> None:
        if not self._d:
            return
        color, width, cap, join = self._stroke_style
        c = parse_color(color).to_rgba()
        attrs = {
            "d": self.path_data,
            "fill": "none",
            "stroke": c.to_hex(),
            "stroke-width": _n(width),
            "stroke-linecap": cap,
            "stroke-linejoin": join,
        }
        if c.a < 1.0:
            attrs["stroke-opacity"] = c.a.to_canvas()
        SubElement(self._parent, "path", attrs)


def build_svg(
    image: Image,
    width: int,
    height: int,
    *,
    context: Optional[DrawingContext] = None,
    background: Optional[str] = None,
) -> Element:
    """Build the <svg> tree with the image centered on a width x height viewport."""
    w = int(width)
    h = int(height)
    svg = Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "version": "1.1",
            "width": str(w),
            "height": str(h),
            "viewBox": f"0 0 {w} {h}",
        },
    )
    if background:
        bg = parse_color(background).to_rgba()
        attrs = {"x": "0", "y": "0", "width": str(w), "height": str(h), "fill": bg.to_hex()}
        if bg.a < 1.0:
            attrs["fill-opacity"] = bg.a.to_canvas()
        SubElement(svg, "rect", attrs)

    scene = SubElement(
        svg,
        "g",
        {"id": "DOODLE_SCENE", "transform": f"matrix(1 0 0 -1 {_n(w / 2.0)} {_n(h / 2.0)})"},
    )
    draw_image(image, SvgSink(scene), context=context)
    return svg


def image_to_svg_string(
    image: Image,
    width: int,
    height: int,
    *,
    context: Optional[DrawingContext] = None,
    background: Optional[str] = None,
) -> str:
    return tostring(build_svg(image, width, height, context=context, background=background), encoding="unicode")


def export_image_svg(
    image: Image,
    out_path: str | Path,
    width: int,
    height: int,
    *,
    context: Optional[DrawingContext] = None,
    background: Optional[str] = None,
) -> Path:
    """Write the image as an SVG file (the .svg suffix is forced)."""
    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    xml = image_to_svg_string(image, width, height, context=context, background=background)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise DoodleIOError(f"Could not export SVG: {p}") from e
    log.info("SVG exported: %s (%sx%s)", p, width, height)
    return p
