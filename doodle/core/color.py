# File: doodle/core/color.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Modelo de color inmutable: RGBA | HSLA, conversiones y ajustes.
# Notes:
#   - Union cerrada de dos variantes; cada rama termina en assert_never.
#   - Los ajustes (spin/lighten/...) siempre devuelven HSLA.
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Optional, Union, assert_never, cast

from doodle.core.units import Angle, Normalized, UnsignedByte
from doodle.utils.errors import DoodleValidationError


class Color:
    """Base class of the two color representations.

    Never instantiated directly: every Color is either ``RGBA`` or ``HSLA``.
    All operations return new values.
    """

    def _variant(self) -> "RGBA | HSLA":
        return cast("RGBA | HSLA", self)

    # ------------------------------
    # Adjustments (always via HSLA)
    # ------------------------------
    def spin(self, angle: Angle | float) -> "HSLA":
        """Rotate the hue. Plain numbers are degrees."""
        if not isinstance(angle, Angle):
            angle = Angle.degrees(angle)
        base = self.to_hsla()
        return replace(base, h=base.h + angle)

    def lighten(self, amount: float) -> "HSLA":
        """Lighten by an absolute amount (not relative to the current lightness)."""
        base = self.to_hsla()
        return replace(base, l=Normalized.clip(base.l + amount))

    def darken(self, amount: float) -> "HSLA":
        """Darken by an absolute amount (not relative to the current lightness)."""
        base = self.to_hsla()
        return replace(base, l=Normalized.clip(base.l - amount))

    def saturate(self, amount: float) -> "HSLA":
        base = self.to_hsla()
        return replace(base, s=Normalized.clip(base.s + amount))

    def desaturate(self, amount: float) -> "HSLA":
        base = self.to_hsla()
        return replace(base, s=Normalized.clip(base.s - amount))

    def fade_in(self, amount: float) -> "HSLA":
        """Increase alpha by an absolute amount."""
        base = self.to_hsla()
        return replace(base, a=Normalized.clip(base.a + amount))

    def fade_out(self, amount: float) -> "HSLA":
        """Decrease alpha by an absolute amount."""
        base = self.to_hsla()
        return replace(base, a=Normalized.clip(base.a - amount))

    @property
    def alpha(self) -> Normalized:
        c = self._variant()
        if isinstance(c, RGBA):
            return c.a
        elif isinstance(c, HSLA):
            return c.a
        else:
            assert_never(c)

    def approx_equals(self, other: "Color") -> bool:
        """Loose equality in RGBA space.

        Channels may differ by at most 1 and alpha by less than 0.1, which
        absorbs the rounding of an HSLA round trip.
        """
        a = self.to_rgba()
        b = other.to_rgba()
        return (
            abs(a.r - b.r) < 2
            and abs(a.g - b.g) < 2
            and abs(a.b - b.b) < 2
            and abs(a.a - b.a) < 0.1
        )

    # ------------------------------
    # Conversions
    # ------------------------------
    def to_hsla(self) -> "HSLA":
        c = self._variant()
        if isinstance(c, HSLA):
            return c
        elif isinstance(c, RGBA):
            return _rgba_to_hsla(c)
        else:
            assert_never(c)

    def to_rgba(self) -> "RGBA":
        c = self._variant()
        if isinstance(c, RGBA):
            return c
        elif isinstance(c, HSLA):
            return _hsla_to_rgba(c)
        else:
            assert_never(c)

    def to_canvas(self) -> str:
        """Web-style string: ``rgba(R, G, B, A)`` or ``hsla(H, S%, L%, A)``."""
        c = self._variant()
        if isinstance(c, RGBA):
            return f"rgba({c.r.to_canvas()}, {c.g.to_canvas()}, {c.b.to_canvas()}, {c.a.to_canvas()})"
        elif isinstance(c, HSLA):
            return f"hsla({c.h.to_canvas()}, {c.s.to_percentage()}, {c.l.to_percentage()}, {c.a.to_canvas()})"
        else:
            assert_never(c)

    def to_hex(self) -> str:
        """``#rrggbb`` (alpha dropped)."""
        c = self.to_rgba()
        return f"#{int(c.r):02x}{int(c.g):02x}{int(c.b):02x}"

    def __str__(self) -> str:
        return self.to_canvas()

    @staticmethod
    def from_canvas(text: str) -> "RGBA | HSLA":
        return parse_color(text)


@dataclass(frozen=True)
class RGBA(Color):
    r: UnsignedByte
    g: UnsignedByte
    b: UnsignedByte
    a: Normalized = Normalized.MAX_VALUE

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", UnsignedByte(self.r))
        object.__setattr__(self, "g", UnsignedByte(self.g))
        object.__setattr__(self, "b", UnsignedByte(self.b))
        object.__setattr__(self, "a", Normalized(self.a))


@dataclass(frozen=True)
class HSLA(Color):
    h: Angle
    s: Normalized
    l: Normalized  # noqa: E741
    a: Normalized = Normalized.MAX_VALUE

    def __post_init__(self) -> None:
        if not isinstance(self.h, Angle):
            object.__setattr__(self, "h", Angle.degrees(self.h))
        object.__setattr__(self, "s", Normalized(self.s))
        object.__setattr__(self, "l", Normalized(self.l))
        object.__setattr__(self, "a", Normalized(self.a))


ColorValue = Union[RGBA, HSLA]


def _rgba_to_hsla(c: RGBA) -> HSLA:
    rn = c.r.to_normalized().get()
    gn = c.g.to_normalized().get()
    bn = c.b.to_normalized().get()
    c_max = max(rn, gn, bn)
    c_min = min(rn, gn, bn)
    delta = c_max - c_min

    # delta == 0: hue is undefined, take the red branch value (0 degrees).
    if delta == 0.0:
        unnormalized_hue = 0.0
    elif c_max == rn:
        unnormalized_hue = 60.0 * ((gn - bn) / delta)
    elif c_max == gn:
        unnormalized_hue = 60.0 * (((bn - rn) / delta) + 2.0)
    else:
        unnormalized_hue = 60.0 * (((rn - gn) / delta) + 4.0)
    hue = Angle.degrees(unnormalized_hue)

    lightness = Normalized.clip((c_max + c_min) / 2.0)

    if delta == 0.0:
        saturation = Normalized.MIN_VALUE
    else:
        saturation = Normalized.clip(delta / (1.0 - abs(2.0 * lightness.get() - 1.0)))

    return HSLA(hue, saturation, lightness, c.a)


def _hue_to_rgb(p: float, q: float, t: float) -> Normalized:
    if t < 1.0 / 6.0:
        v = p + (q - p) * 6.0 * t
    elif t < 0.5:
        v = q
    elif t < 2.0 / 3.0:
        v = p + (q - p) * (2.0 / 3.0 - t) * 6.0
    else:
        v = p
    return Normalized.clip(v)


def _hsla_to_rgba(c: HSLA) -> RGBA:
    if c.s.get() == 0.0:
        gray = c.l.to_unsigned_byte()
        return RGBA(gray, gray, gray, c.a)

    s = c.s.get()
    lightness = c.l.get()
    if lightness < 0.5:
        q = lightness * (1.0 + s)
    else:
        q = lightness + s - (lightness * s)
    p = 2.0 * lightness - q

    third = Angle.degrees(120.0)
    r = _hue_to_rgb(p, q, (c.h + third).to_turns())
    g = _hue_to_rgb(p, q, c.h.to_turns())
    b = _hue_to_rgb(p, q, (c.h - third).to_turns())
    return RGBA(r.to_unsigned_byte(), g.to_unsigned_byte(), b.to_unsigned_byte(), c.a)


# ------------------------------
# Convenience constructors (clip, never fail)
# ------------------------------
def rgba(r: float, g: float, b: float, a: float) -> RGBA:
    return RGBA(UnsignedByte.clip(r), UnsignedByte.clip(g), UnsignedByte.clip(b), Normalized.clip(a))


def hsla(h: Angle | float, s: float, l: float, a: float) -> HSLA:  # noqa: E741
    return HSLA(h if isinstance(h, Angle) else Angle.degrees(h), Normalized.clip(s), Normalized.clip(l), Normalized.clip(a))


def rgb(r: float, g: float, b: float) -> RGBA:
    return rgba(r, g, b, 1.0)


def hsl(h: Angle | float, s: float, l: float) -> HSLA:  # noqa: E741
    return hsla(h, s, l, 1.0)


# ------------------------------
# Parsing (canvas strings -> Color)
# ------------------------------
_FUNC_RE = re.compile(r"^\s*(rgba?|hsla?)\s*\(\s*(.*?)\s*\)\s*$", re.IGNORECASE)
_HEX_RE = re.compile(r"^\s*#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})\s*$")
_NUM_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\d*\.?\d+)(?:[eE][+-]?\d+)?)\s*(%|deg)?$")


def _parse_number(token: str, text: str) -> tuple[float, Optional[str]]:
    m = _NUM_RE.match(token.strip())
    if not m:
        raise DoodleValidationError(f"Invalid number {token!r} in color {text!r}")
    return float(m.group(1)), m.group(2)


def _fraction(token: str, text: str) -> float:
    v, unit = _parse_number(token, text)
    return v / 100.0 if unit == "%" else v


def _channel(token: str, text: str) -> float:
    v, unit = _parse_number(token, text)
    return v * 255.0 / 100.0 if unit == "%" else v


def parse_color(text: Any) -> ColorValue:
    """Parse a canvas/CSS color string.

    Accepts ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``, ``#rgb``,
    ``#rrggbb``, ``#rrggbbaa`` and CSS color names. Out-of-range numbers
    are clipped; malformed text raises DoodleValidationError.
    """
    if not isinstance(text, str):
        raise DoodleValidationError(f"Color must be a string, got {type(text).__name__}")

    m = _FUNC_RE.match(text)
    if m:
        kind = m.group(1).lower()
        parts = [p for p in re.split(r"\s*,\s*|\s+", m.group(2)) if p and p != "/"]
        if len(parts) not in (3, 4):
            raise DoodleValidationError(f"Expected 3 or 4 components in {text!r}")
        a = _fraction(parts[3], text) if len(parts) == 4 else 1.0
        if kind.startswith("rgb"):
            return rgba(_channel(parts[0], text), _channel(parts[1], text), _channel(parts[2], text), a)
        h, _unit = _parse_number(parts[0], text)
        return hsla(h, _fraction(parts[1], text), _fraction(parts[2], text), a)

    m = _HEX_RE.match(text)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return rgba(r, g, b, a)

    from doodle.core.common_colors import named_color

    named = named_color(text)
    if named is not None:
        return named
    raise DoodleValidationError(f"Unrecognized color: {text!r}")
