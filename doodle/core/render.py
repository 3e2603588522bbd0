# File: doodle/core/render.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Recorrido de render: del arbol Image a llamadas de path sobre un DrawingSink.
# Notes:
#   - El orden de recorrido define el z-order: no reordenar.
#   - El estilo se pasa explicitamente como parametro (sin estado global).
#   - Coordenadas de escena con y hacia arriba; el sink mapea al dispositivo.
from __future__ import annotations

import math
from typing import Optional, assert_never, cast

from doodle.core.drawing_context import DrawingContext
from doodle.core.image import (
    Above,
    At,
    Beside,
    Circle,
    ContextTransform,
    Drawable,
    Image,
    ImageNode,
    Overlay,
    Rectangle,
    Triangle,
)
from doodle.core.point import ORIGIN, Point
from doodle.core.sink import DrawingSink
from doodle.geom.bounding_box import bounding_box


def _fill_and_stroke(context: DrawingContext, sink: DrawingSink) -> None:
    # Fill first, then stroke; absent aspects issue no calls.
    if context.fill is not None:
        sink.set_fill_style(context.fill.color.to_canvas())
        sink.fill()

    if context.stroke is not None:
        s = context.stroke
        sink.set_stroke_style(s.color.to_canvas(), float(s.width), s.cap.to_canvas(), s.join.to_canvas())
        sink.stroke()


def render(image: Image, origin: Point, context: DrawingContext, sink: DrawingSink) -> None:
    """Draw `image` with its local origin at `origin`."""
    node = cast(ImageNode, image)
    if isinstance(node, Circle):
        sink.begin_path()
        sink.arc(origin.x, origin.y, node.radius, 0.0, math.pi * 2.0)
        sink.close_path()
        _fill_and_stroke(context, sink)

    elif isinstance(node, Rectangle):
        w, h = node.width, node.height
        sink.begin_path()
        sink.rect(origin.x - w / 2.0, origin.y - h / 2.0, w, h)
        sink.close_path()
        _fill_and_stroke(context, sink)

    elif isinstance(node, Triangle):
        w, h = node.width, node.height
        sink.begin_path()
        sink.move_to(origin.x, origin.y + h / 2.0)
        sink.line_to(origin.x + w / 2.0, origin.y - h / 2.0)
        sink.line_to(origin.x - w / 2.0, origin.y - h / 2.0)
        sink.close_path()
        _fill_and_stroke(context, sink)

    elif isinstance(node, Overlay):
        render(node.bottom, origin, context, sink)
        render(node.top, origin, context, sink)

    elif isinstance(node, Beside):
        box = bounding_box(node)
        l_box = bounding_box(node.left)
        r_box = bounding_box(node.right)

        l_origin_x = origin.x + box.left + (l_box.width / 2.0)
        r_origin_x = origin.x + box.right - (r_box.width / 2.0)
        # Children are centered on their own origin, so y stays put.
        render(node.left, origin.with_x(l_origin_x), context, sink)
        render(node.right, origin.with_x(r_origin_x), context, sink)

    elif isinstance(node, Above):
        box = bounding_box(node)
        t_box = bounding_box(node.top)
        b_box = bounding_box(node.bottom)

        t_origin_y = origin.y + box.top - (t_box.height / 2.0)
        b_origin_y = origin.y + box.bottom + (b_box.height / 2.0)
        render(node.top, origin.with_y(t_origin_y), context, sink)
        render(node.bottom, origin.with_y(b_origin_y), context, sink)

    elif isinstance(node, At):
        render(node.inner, origin + node.offset, context, sink)

    elif isinstance(node, ContextTransform):
        render(node.inner, origin, node.f(context), sink)

    elif isinstance(node, Drawable):
        render(node.draw(), origin, context, sink)

    else:
        assert_never(node)


def draw_image(
    image: Image,
    sink: DrawingSink,
    *,
    origin: Point = ORIGIN,
    context: Optional[DrawingContext] = None,
) -> None:
    """Render from the root with the default black-lines style."""
    render(image, origin, context if context is not None else DrawingContext.black_lines(), sink)
