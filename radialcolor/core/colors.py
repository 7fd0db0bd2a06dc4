import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .math import clamp, round_half_up

if TYPE_CHECKING:
    from PySide6.QtGui import QColor


class Channel(Enum):
    """Generic slot of a three-channel tuple; meaning depends on the TupleType."""
    A = "A"
    B = "B"
    C = "C"


class TupleType(Enum):
    RGB = "RGB"
    HSB = "HSB"
    ALPHA = "Alpha"


def _clamp_8bit(value: float) -> int:
    return int(clamp(int(value), 0, 255))


@dataclass(frozen=True)
class Rgba:
    """
    Pixel color: four 8-bit channels, each clamped into 0..255 on construction.
    Uses the same integer ranges as Qt for easy bridging.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _clamp_8bit(getattr(self, name)))

    def to_rgba(self, /) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def to_rgb(self, /) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def with_alpha(self, alpha: int) -> "Rgba":
        return Rgba(self.r, self.g, self.b, alpha)

    def to_QColor(self) -> "QColor":
        from PySide6.QtGui import QColor
        return QColor(self.r, self.g, self.b, self.a)

    @staticmethod
    def from_qcolor(qcolor: "QColor") -> "Rgba":
        return Rgba(qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())


def compose_with_alpha(color: Rgba, alpha: int) -> Rgba:
    return color.with_alpha(alpha)


def rgb_to_hsb(r: int, g: int, b: int) -> tuple[float, float, float]:
    # Input: r,g,b in [0,255] (ints)
    # Output: (h, s, b) each in [0,1]; achromatic colors get hue 0
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    brightness = cmax / 255.0
    saturation = delta / cmax if cmax != 0 else 0.0

    if saturation == 0.0:
        return 0.0, saturation, brightness

    redc = (cmax - r) / delta
    greenc = (cmax - g) / delta
    bluec = (cmax - b) / delta
    if r == cmax:
        hue = bluec - greenc
    elif g == cmax:
        hue = 2.0 + redc - bluec
    else:  # b == cmax
        hue = 4.0 + greenc - redc
    hue /= 6.0
    if hue < 0.0:
        hue += 1.0
    return hue, saturation, brightness


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> tuple[int, int, int]:
    if saturation == 0.0:
        v = round_half_up(brightness * 255.0)
        return v, v, v

    # only the fractional part of the hue matters: 1.0 wraps back to red
    h = (hue - math.floor(hue)) * 6.0
    i = int(math.floor(h))
    f = h - i
    v = brightness
    p = v * (1.0 - saturation)
    q = v * (1.0 - saturation * f)
    t = v * (1.0 - saturation * (1.0 - f))

    if i == 0:
        r, g, b = v, t, p
    elif i == 1:
        r, g, b = q, v, p
    elif i == 2:
        r, g, b = p, v, t
    elif i == 3:
        r, g, b = p, q, v
    elif i == 4:
        r, g, b = t, p, v
    else:  # i == 5
        r, g, b = v, p, q

    return round_half_up(r * 255.0), round_half_up(g * 255.0), round_half_up(b * 255.0)


def _unit(value: float) -> float:
    return clamp(float(value), 0.0, 1.0)


@dataclass(frozen=True)
class ColorTuple:
    """
    Three scalar channels (a, b, c), each clamped into [0, 1].

    The tuple carries no color model of its own: the same (a, b, c) reads as
    (red, green, blue) under TupleType.RGB and as (hue, saturation, brightness)
    under TupleType.HSB. Alpha is never stored here.
    """
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "a", _unit(self.a))
        object.__setattr__(self, "b", _unit(self.b))
        object.__setattr__(self, "c", _unit(self.c))

    @staticmethod
    def from_rgb(r: int, g: int, b: int) -> "ColorTuple":
        """8-bit channels, clamped to 0..255 then scaled by 1/255."""
        return ColorTuple(
            clamp(r, 0, 255) / 255.0,
            clamp(g, 0, 255) / 255.0,
            clamp(b, 0, 255) / 255.0,
        )

    @staticmethod
    def from_color(color: Rgba) -> "ColorTuple":
        return ColorTuple.from_rgb(color.r, color.g, color.b)

    @staticmethod
    def hsb_of(color: Rgba) -> "ColorTuple":
        return ColorTuple(*rgb_to_hsb(color.r, color.g, color.b))

    def as_tuple(self, /) -> tuple[float, float, float]:
        return self.a, self.b, self.c

    def channel(self, channel: Channel) -> float:
        match channel:
            case Channel.A:
                return self.a
            case Channel.B:
                return self.b
            case Channel.C:
                return self.c
            case _:
                raise ValueError(channel)

    def with_channel(self, channel: Channel, value: float) -> "ColorTuple":
        a, b, c = self.as_tuple()
        match channel:
            case Channel.A:
                a = value
            case Channel.B:
                b = value
            case Channel.C:
                c = value
            case _:
                raise ValueError(channel)
        return ColorTuple(a, b, c)

    def channel_as_int(self, channel: Channel, range_: int) -> int:
        return round_half_up(self.channel(channel) * range_)

    def to_color(self, tuple_type: TupleType, alpha: int = 255) -> Rgba:
        match tuple_type:
            case TupleType.RGB:
                r = round_half_up(self.a * 255.0)
                g = round_half_up(self.b * 255.0)
                b = round_half_up(self.c * 255.0)
            case TupleType.HSB:
                r, g, b = hsb_to_rgb(self.a, self.b, self.c)
            case _:
                raise ValueError(f"{tuple_type} does not describe a color model")
        return Rgba(r, g, b, alpha)


@dataclass(frozen=True)
class ColorRange:
    """Per-channel linear blend between two tuples."""
    start: ColorTuple = ColorTuple(1.0, 0.0, 0.0)
    end: ColorTuple = ColorTuple(0.0, 0.0, 0.0)

    def interpolate(self, t: float) -> ColorTuple:
        sa, sb, sc = self.start.as_tuple()
        ea, eb, ec = self.end.as_tuple()
        return ColorTuple(
            sa + (ea - sa) * t,
            sb + (eb - sb) * t,
            sc + (ec - sc) * t,
        )
