# File: doodle/core/image.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Arbol inmutable de imagenes: primitivas, combinadores y transformaciones de estilo.
# Notes:
#   - Ningun nodo guarda bounding box ni estado mutable; la geometria se calcula
#     bajo demanda en doodle.geom.bounding_box.
#   - Drawable es el punto de extension abierto (figuras definidas por el usuario).
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Iterable, Optional, Union

from doodle.core.color import Color
from doodle.core.drawing_context import DrawingContext, LineCap, LineJoin
from doodle.core.point import Vec
from doodle.utils.errors import DoodleValidationError

StyleFn = Callable[[DrawingContext], DrawingContext]


def _size(v: Any) -> float:
    """Sizes are clipped to >= 0 (NaN counts as 0)."""
    f = float(v)
    if f != f or f < 0.0:
        return 0.0
    return f


class Image:
    """Base of every image node. Combinators return new trees."""

    def on(self, other: "Image") -> "Overlay":
        """Draw self on top of other."""
        return Overlay(self, other)

    def under(self, other: "Image") -> "Overlay":
        return Overlay(other, self)

    def beside(self, other: "Image") -> "Beside":
        return Beside(self, other)

    def above(self, other: "Image") -> "Above":
        return Above(self, other)

    def below(self, other: "Image") -> "Above":
        return Above(other, self)

    def at(self, dx: Union[Vec, float], dy: Optional[float] = None) -> "At":
        """Translate by a Vec, or by (dx, dy)."""
        if isinstance(dx, Vec):
            return At(dx, self)
        return At(Vec(float(dx), float(dy or 0.0)), self)

    # ------------------------------
    # Style helpers (ContextTransform)
    # ------------------------------
    def with_context(self, f: StyleFn) -> "ContextTransform":
        return ContextTransform(f, self)

    def fill_color(self, color: Color) -> "ContextTransform":
        return ContextTransform(ContextUpdate("with_fill_color", (color,)), self)

    def line_color(self, color: Color) -> "ContextTransform":
        return ContextTransform(ContextUpdate("with_line_color", (color,)), self)

    def line_width(self, width: float) -> "ContextTransform":
        return ContextTransform(ContextUpdate("with_line_width", (float(width),)), self)

    def line_cap(self, cap: LineCap) -> "ContextTransform":
        return ContextTransform(ContextUpdate("with_line_cap", (cap,)), self)

    def line_join(self, join: LineJoin) -> "ContextTransform":
        return ContextTransform(ContextUpdate("with_line_join", (join,)), self)

    def no_fill(self) -> "ContextTransform":
        return ContextTransform(ContextUpdate("without_fill", ()), self)

    def no_line(self) -> "ContextTransform":
        return ContextTransform(ContextUpdate("without_line", ()), self)


@dataclass(frozen=True)
class ContextUpdate:
    """A named DrawingContext method call, usable as a StyleFn.

    Compared by value, so two trees built with the same style helpers are equal.
    """

    method: str
    args: tuple[Any, ...] = ()

    def __call__(self, context: DrawingContext) -> DrawingContext:
        return getattr(context, self.method)(*self.args)


# ------------------------------
# Primitives (centered on their local origin)
# ------------------------------
@dataclass(frozen=True)
class Circle(Image):
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", _size(self.radius))


@dataclass(frozen=True)
class Rectangle(Image):
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _size(self.width))
        object.__setattr__(self, "height", _size(self.height))


@dataclass(frozen=True)
class Triangle(Image):
    """Isosceles triangle, apex up."""

    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _size(self.width))
        object.__setattr__(self, "height", _size(self.height))


# ------------------------------
# Combinators
# ------------------------------
@dataclass(frozen=True)
class Overlay(Image):
    """top over bottom, sharing the same origin. bottom is drawn first."""

    top: Image
    bottom: Image


@dataclass(frozen=True)
class Beside(Image):
    """left and right side by side, vertically centered."""

    left: Image
    right: Image


@dataclass(frozen=True)
class Above(Image):
    """top stacked over bottom, horizontally centered."""

    top: Image
    bottom: Image


@dataclass(frozen=True)
class At(Image):
    offset: Vec
    inner: Image


@dataclass(frozen=True)
class ContextTransform(Image):
    f: StyleFn
    inner: Image


class Drawable(Image, ABC):
    """Anything that can produce an Image on demand.

    Subclass and implement ``draw``; the layout engine and the renderer
    resolve it before recursing.
    """

    @abstractmethod
    def draw(self) -> Image:
        raise NotImplementedError


ImageNode = Union[Circle, Rectangle, Triangle, Overlay, Beside, Above, At, ContextTransform, Drawable]


# ------------------------------
# Folds
# ------------------------------
def _fold(images: Iterable[Image], combine: Callable[[Image, Image], Image], what: str) -> Image:
    items = list(images)
    if not items:
        raise DoodleValidationError(f"{what}: need at least one image")
    return reduce(combine, items)


def all_beside(images: Iterable[Image]) -> Image:
    """Left to right."""
    return _fold(images, Beside, "all_beside")


def all_above(images: Iterable[Image]) -> Image:
    """Top to bottom."""
    return _fold(images, Above, "all_above")


def all_on(images: Iterable[Image]) -> Image:
    """First image ends up on top."""
    return _fold(images, Overlay, "all_on")
