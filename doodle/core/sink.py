# File: doodle/core/sink.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Contrato minimo de superficie de dibujo (estilo canvas 2D) + sink que graba llamadas.
# Notes: Las coordenadas llegan en espacio de escena (y hacia arriba).
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DrawingSink(Protocol):
    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(self, cx: float, cy: float, r: float, start: float, end: float) -> None:
        """Circular arc, angles in radians, counter-clockwise in scene space."""
        ...

    def rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def set_fill_style(self, color: str) -> None: ...

    def fill(self) -> None: ...

    def set_stroke_style(self, color: str, width: float, cap: str, join: str) -> None: ...

    def stroke(self) -> None: ...


class RecordingSink:
    """Stores every call as ``(name, *args)``. Used by tests and debug dumps."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def close_path(self) -> None:
        self.calls.append(("close_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def arc(self, cx: float, cy: float, r: float, start: float, end: float) -> None:
        self.calls.append(("arc", cx, cy, r, start, end))

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("rect", x, y, w, h))

    def set_fill_style(self, color: str) -> None:
        self.calls.append(("set_fill_style", color))

    def fill(self) -> None:
        self.calls.append(("fill",))

    def set_stroke_style(self, color: str, width: float, cap: str, join: str) -> None:
        self.calls.append(("set_stroke_style", color, width, cap, join))

    def stroke(self) -> None:
        self.calls.append(("stroke",))

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    def clear(self) -> None:
        self.calls.clear()
