"""Tests for the image tree builders, drawing context and animations."""
from __future__ import annotations

import dataclasses

import pytest

from doodle.core.animation import FrameAnimation
from doodle.core.common_colors import BLACK, RED
from doodle.core.drawing_context import (
    DEFAULT_STROKE,
    DrawingContext,
    Fill,
    LineCap,
    LineJoin,
    Stroke,
    coerce_line_cap,
    coerce_line_join,
)
from doodle.core.image import (
    Above,
    At,
    Beside,
    Circle,
    ContextTransform,
    ContextUpdate,
    Overlay,
    Rectangle,
    all_above,
    all_beside,
    all_on,
)
from doodle.core.point import Point, Vec
from doodle.utils.errors import DoodleValidationError


class TestCombinators:
    def test_builders(self):
        a, b = Circle(1), Rectangle(2, 3)
        assert a.on(b) == Overlay(a, b)
        assert a.under(b) == Overlay(b, a)
        assert a.beside(b) == Beside(a, b)
        assert a.above(b) == Above(a, b)
        assert a.below(b) == Above(b, a)

    def test_at_with_vector_or_numbers(self):
        c = Circle(1)
        assert c.at(Vec(2, 3)) == At(Vec(2, 3), c)
        assert c.at(2, 3) == At(Vec(2.0, 3.0), c)
        assert c.at(2) == At(Vec(2.0, 0.0), c)

    def test_nodes_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Circle(1).radius = 3  # type: ignore[misc]

    def test_combinators_do_not_touch_operands(self):
        a = Circle(1)
        a.beside(Circle(2)).above(Circle(3))
        assert a == Circle(1)

    def test_style_helpers_compare_by_value(self):
        assert Circle(1).fill_color(RED) == Circle(1).fill_color(RED)
        assert Circle(1).fill_color(RED) != Circle(1).fill_color(BLACK)

    def test_style_helper_wraps_context_update(self):
        node = Circle(1).line_width(2)
        assert isinstance(node, ContextTransform)
        assert node.f == ContextUpdate("with_line_width", (2.0,))

    def test_with_context_takes_any_function(self):
        node = Circle(1).with_context(DrawingContext.without_fill)
        assert node.f(DrawingContext(fill=Fill(RED))) == DrawingContext()


class TestFolds:
    def test_all_beside_left_to_right(self):
        a, b, c = Circle(1), Circle(2), Circle(3)
        assert all_beside([a, b, c]) == Beside(Beside(a, b), c)

    def test_all_above_top_to_bottom(self):
        a, b, c = Circle(1), Circle(2), Circle(3)
        assert all_above([a, b, c]) == Above(Above(a, b), c)

    def test_all_on_first_is_on_top(self):
        a, b, c = Circle(1), Circle(2), Circle(3)
        assert all_on([a, b, c]) == Overlay(Overlay(a, b), c)

    def test_single_image_is_returned_as_is(self):
        assert all_beside([Circle(4)]) == Circle(4)

    def test_accepts_generators(self):
        assert all_beside(Circle(r) for r in (1, 2)) == Beside(Circle(1), Circle(2))

    @pytest.mark.parametrize("fold", [all_beside, all_above, all_on])
    def test_empty_input_raises(self, fold):
        with pytest.raises(DoodleValidationError):
            fold([])


class TestDrawingContext:
    def test_black_lines(self):
        ctx = DrawingContext.black_lines()
        assert ctx.fill is None
        assert ctx.stroke == Stroke(1.0, BLACK, LineCap.BUTT, LineJoin.MITER)

    def test_line_helpers_start_from_default_stroke(self):
        ctx = DrawingContext().with_line_color(RED)
        assert ctx.stroke == dataclasses.replace(DEFAULT_STROKE, color=RED)

    def test_helpers_return_new_contexts(self):
        base = DrawingContext.black_lines()
        changed = base.with_line_width(5).with_fill_color(RED)
        assert base == DrawingContext.black_lines()
        assert changed.stroke.width == 5.0
        assert changed.fill == Fill(RED)

    def test_negative_width_clips(self):
        assert DrawingContext().with_line_width(-2).stroke.width == 0.0

    def test_without(self):
        ctx = DrawingContext.black_lines().with_fill_color(RED)
        assert ctx.without_fill().fill is None
        assert ctx.without_line().stroke is None

    def test_cap_and_join(self):
        ctx = DrawingContext().with_line_cap(LineCap.SQUARE).with_line_join(LineJoin.ROUND)
        assert (ctx.stroke.cap.to_canvas(), ctx.stroke.join.to_canvas()) == ("square", "round")

    def test_coerce(self):
        assert coerce_line_cap("Round") is LineCap.ROUND
        assert coerce_line_cap("bogus") is LineCap.BUTT
        assert coerce_line_join(LineJoin.BEVEL) is LineJoin.BEVEL
        assert coerce_line_join(None) is LineJoin.MITER


class TestPointAndVec:
    def test_vector_math(self):
        assert Vec(1, 2) + Vec(3, 4) == Vec(4, 6)
        assert Vec(1, 2) - Vec(3, 4) == Vec(-2, -2)
        assert -Vec(1, 2) == Vec(-1, -2)
        assert 2 * Vec(1, 2) == Vec(2, 4)

    def test_point_and_vec(self):
        assert Point(1, 1) + Vec(2, 3) == Point(3, 4)
        assert Point(3, 4) - Point(1, 1) == Vec(2, 3)
        assert Point(1, 2).with_x(5) == Point(5, 2)
        assert Point(1, 2).with_y(5) == Point(1, 5)


class TestFrameAnimation:
    def test_draw_and_animate(self):
        anim = FrameAnimation(lambda n: Circle(n + 1))
        assert anim.draw() == Circle(1)
        nxt = anim.animate().animate()
        assert nxt.frame == 2
        assert nxt.draw() == Circle(3)
        # the original state is untouched
        assert anim.frame == 0
