# File: doodle/core/drawing_context.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Estilo ambiente (fill/stroke) que se propaga de arriba hacia abajo en el render.
# Notes: Inmutable; ContextTransform devuelve un contexto nuevo para su subarbol.
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from doodle.core.color import Color
from doodle.core.common_colors import BLACK


class LineCap(str, Enum):
    """Line cap; the value is the canvas keyword."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def to_canvas(self) -> str:
        return self.value


class LineJoin(str, Enum):
    """Line join; the value is the canvas keyword."""

    BEVEL = "bevel"
    ROUND = "round"
    MITER = "miter"

    def to_canvas(self) -> str:
        return self.value


def coerce_line_cap(v: object, default: LineCap = LineCap.BUTT) -> LineCap:
    s = str(getattr(v, "value", v) or "").strip().lower()
    for m in LineCap:
        if m.value == s:
            return m
    return default


def coerce_line_join(v: object, default: LineJoin = LineJoin.MITER) -> LineJoin:
    s = str(getattr(v, "value", v) or "").strip().lower()
    for m in LineJoin:
        if m.value == s:
            return m
    return default


@dataclass(frozen=True)
class Fill:
    color: Color


@dataclass(frozen=True)
class Stroke:
    width: float = 1.0
    color: Color = BLACK
    cap: LineCap = LineCap.BUTT
    join: LineJoin = LineJoin.MITER


DEFAULT_STROKE = Stroke()


@dataclass(frozen=True)
class DrawingContext:
    stroke: Optional[Stroke] = None
    fill: Optional[Fill] = None

    @classmethod
    def black_lines(cls) -> "DrawingContext":
        """Base style: 1px black lines, no fill."""
        return cls(stroke=DEFAULT_STROKE, fill=None)

    def with_fill_color(self, color: Color) -> "DrawingContext":
        return replace(self, fill=Fill(color))

    def without_fill(self) -> "DrawingContext":
        return replace(self, fill=None)

    def with_line_color(self, color: Color) -> "DrawingContext":
        base = self.stroke or DEFAULT_STROKE
        return replace(self, stroke=replace(base, color=color))

    def with_line_width(self, width: float) -> "DrawingContext":
        base = self.stroke or DEFAULT_STROKE
        return replace(self, stroke=replace(base, width=max(0.0, float(width))))

    def with_line_cap(self, cap: LineCap) -> "DrawingContext":
        base = self.stroke or DEFAULT_STROKE
        return replace(self, stroke=replace(base, cap=cap))

    def with_line_join(self, join: LineJoin) -> "DrawingContext":
        base = self.stroke or DEFAULT_STROKE
        return replace(self, stroke=replace(base, join=join))

    def without_line(self) -> "DrawingContext":
        return replace(self, stroke=None)
