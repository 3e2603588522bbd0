# File: doodle/core/point.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Point (posicion) y Vec (desplazamiento) en 2D.
# Notes: Coordenadas de escena con y hacia arriba; los bindings invierten el eje.
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec") -> "Vec":
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec":
        return Vec(-self.x, -self.y)

    def __mul__(self, k: float) -> "Vec":
        return Vec(self.x * k, self.y * k)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, v: Vec) -> "Point":
        if not isinstance(v, Vec):
            return NotImplemented
        return Point(self.x + v.x, self.y + v.y)

    def __sub__(self, other: "Point") -> Vec:
        if not isinstance(other, Point):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def with_x(self, x: float) -> "Point":
        return Point(x, self.y)

    def with_y(self, y: float) -> "Point":
        return Point(self.x, y)


ORIGIN = Point(0.0, 0.0)
