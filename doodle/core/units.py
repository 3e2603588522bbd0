# File: doodle/core/units.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Escalares acotados del modelo de color: Normalized, UnsignedByte, Angle.
# Notes: La construccion siempre recorta/canoniza; nunca falla con input numerico.
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


def format_number(x: float) -> str:
    """Short decimal form used by the canvas strings: 1.0, 0.5, 33.333333."""
    s = f"{float(x):.6f}".rstrip("0")
    if s.endswith("."):
        s += "0"
    if s == "-0.0":
        s = "0.0"
    return s


def _as_float(value: Any) -> float:
    v = float(value)
    if math.isnan(v):
        return 0.0
    return v


class Normalized(float):
    """A real number in [0, 1].

    Out-of-range input is clipped on construction. Arithmetic between two
    Normalized values returns a plain ``float`` which may be out of range;
    callers re-clip with ``Normalized.clip``.
    """

    MIN_VALUE: "Normalized"
    MAX_VALUE: "Normalized"

    def __new__(cls, value: Any = 0.0) -> "Normalized":
        v = _as_float(value)
        return super().__new__(cls, min(1.0, max(0.0, v)))

    @classmethod
    def clip(cls, value: Any) -> "Normalized":
        return cls(value)

    def get(self) -> float:
        return float(self)

    def to_unsigned_byte(self) -> "UnsignedByte":
        # round half up, like the canvas does
        return UnsignedByte(math.floor(float(self) * 255.0 + 0.5))

    def to_percentage(self) -> str:
        return f"{format_number(float(self) * 100.0)}%"

    def to_canvas(self) -> str:
        return format_number(self)

    def __repr__(self) -> str:
        return f"Normalized({float(self)!r})"


Normalized.MIN_VALUE = Normalized(0.0)
Normalized.MAX_VALUE = Normalized(1.0)


class UnsignedByte(int):
    """An integer channel value in [0, 255]. Clips on construction."""

    MIN_VALUE: "UnsignedByte"
    MAX_VALUE: "UnsignedByte"

    def __new__(cls, value: Any = 0) -> "UnsignedByte":
        if isinstance(value, int):
            v = int(value)
        else:
            f = _as_float(value)
            if math.isinf(f):
                v = 255 if f > 0 else 0
            else:
                v = math.floor(f + 0.5)
        return super().__new__(cls, min(255, max(0, v)))

    @classmethod
    def clip(cls, value: Any) -> "UnsignedByte":
        return cls(value)

    @classmethod
    def from_int8(cls, b: int) -> "UnsignedByte":
        """Build from a two's-complement signed byte (-128..127)."""
        return cls(int(b) & 0xFF)

    def get(self) -> int:
        return int(self)

    def to_int8(self) -> int:
        v = int(self)
        return v - 256 if v > 127 else v

    def to_normalized(self) -> Normalized:
        return Normalized(int(self) / 255.0)

    def to_canvas(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"UnsignedByte({int(self)})"


UnsignedByte.MIN_VALUE = UnsignedByte(0)
UnsignedByte.MAX_VALUE = UnsignedByte(255)


def _wrap_degrees(d: float) -> float:
    if not math.isfinite(d):
        return 0.0
    w = d % 360.0
    # tiny negatives round up to exactly 360.0
    if w >= 360.0:
        w = 0.0
    return w + 0.0


@dataclass(frozen=True)
class Angle:
    """An angle kept canonical in degrees, in [0, 360).

    Addition and subtraction wrap modulo 360 degrees.
    """

    deg: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "deg", _wrap_degrees(_as_float(self.deg)))

    @classmethod
    def degrees(cls, value: Any) -> "Angle":
        return cls(_as_float(value))

    @classmethod
    def radians(cls, value: Any) -> "Angle":
        return cls(math.degrees(_as_float(value)))

    @classmethod
    def turns(cls, value: Any) -> "Angle":
        return cls(_as_float(value) * 360.0)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.deg + other.deg)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.deg - other.deg)

    def __neg__(self) -> "Angle":
        return Angle(-self.deg)

    def to_degrees(self) -> float:
        return self.deg

    def to_radians(self) -> float:
        return math.radians(self.deg)

    def to_turns(self) -> Normalized:
        """Fraction of a full turn, in [0, 1)."""
        return Normalized(self.deg / 360.0)

    def to_canvas(self) -> str:
        return format_number(self.deg)


def degrees(value: Any) -> Angle:
    return Angle.degrees(value)


def radians(value: Any) -> Angle:
    return Angle.radians(value)


def turns(value: Any) -> Angle:
    return Angle.turns(value)
