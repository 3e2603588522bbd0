"""Tests for the bounded scalars: Normalized, UnsignedByte, Angle."""
from __future__ import annotations

import math

import pytest

from doodle.core.units import Angle, Normalized, UnsignedByte, degrees, format_number, radians, turns


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [(1, "1.0"), (0.5, "0.5"), (100.0, "100.0"), (1 / 3, "0.333333"), (-1e-9, "0.0")],
    )
    def test_short_decimal_form(self, value, expected):
        assert format_number(value) == expected


class TestNormalized:
    def test_clips_on_construction(self):
        assert Normalized(1.5) == 1.0
        assert Normalized(-0.2) == 0.0
        assert Normalized(0.25) == 0.25

    def test_nan_becomes_zero(self):
        assert Normalized(float("nan")) == 0.0

    def test_arithmetic_is_not_reclipped(self):
        total = Normalized(0.8) + Normalized(0.8)
        assert total == pytest.approx(1.6)
        assert not isinstance(total, Normalized)
        assert Normalized.clip(total) == 1.0

    def test_to_unsigned_byte_rounds_half_up(self):
        assert Normalized(0.5).to_unsigned_byte() == 128
        assert Normalized(1.0).to_unsigned_byte() == 255
        assert Normalized(0.0).to_unsigned_byte() == 0

    def test_canvas_strings(self):
        assert Normalized(1).to_canvas() == "1.0"
        assert Normalized(0.5).to_percentage() == "50.0%"

    def test_bounds(self):
        assert Normalized.MIN_VALUE == 0.0
        assert Normalized.MAX_VALUE == 1.0


class TestUnsignedByte:
    def test_clips_on_construction(self):
        assert UnsignedByte(300) == 255
        assert UnsignedByte(-5) == 0
        assert UnsignedByte(float("inf")) == 255
        assert UnsignedByte(float("-inf")) == 0

    def test_floats_round_half_up(self):
        assert UnsignedByte(12.5) == 13
        assert UnsignedByte(12.49) == 12

    def test_signed_byte_conversions(self):
        assert UnsignedByte.from_int8(-1) == 255
        assert UnsignedByte.from_int8(127) == 127
        assert UnsignedByte(200).to_int8() == -56
        assert UnsignedByte(10).to_int8() == 10

    def test_to_normalized(self):
        assert UnsignedByte(255).to_normalized() == 1.0
        assert UnsignedByte(0).to_normalized() == 0.0
        assert UnsignedByte(51).to_normalized() == pytest.approx(0.2)

    def test_to_canvas(self):
        assert UnsignedByte(42).to_canvas() == "42"


class TestAngle:
    def test_canonical_range(self):
        assert Angle(370).deg == 10.0
        assert Angle(-10).deg == 350.0
        assert Angle(360).deg == 0.0

    def test_tiny_negative_does_not_land_on_360(self):
        assert Angle(-1e-20).deg == 0.0

    def test_addition_wraps(self):
        assert (degrees(10) + degrees(355)) == Angle(5)

    def test_subtraction_and_negation_wrap(self):
        assert (degrees(10) - degrees(20)).deg == 350.0
        assert -degrees(90) == degrees(270)

    def test_constructors(self):
        assert radians(math.pi).deg == pytest.approx(180.0)
        assert turns(0.5).deg == 180.0
        assert Angle.degrees(720.5).deg == pytest.approx(0.5)

    def test_conversions(self):
        a = degrees(90)
        assert a.to_degrees() == 90.0
        assert a.to_radians() == pytest.approx(math.pi / 2)
        assert a.to_turns() == 0.25
        assert isinstance(a.to_turns(), Normalized)

    def test_to_turns_stays_below_one(self):
        assert degrees(359.999).to_turns() < 1.0

    def test_non_finite_becomes_zero(self):
        assert Angle(float("inf")).deg == 0.0
        assert Angle(float("nan")).deg == 0.0

    def test_adding_non_angle_is_unsupported(self):
        with pytest.raises(TypeError):
            degrees(10) + 5  # type: ignore[operator]
