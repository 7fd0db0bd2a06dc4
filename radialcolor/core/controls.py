from abc import ABC, abstractmethod
from dataclasses import dataclass

from .colors import Channel, ColorRange, ColorTuple, Rgba, TupleType
from .events import AlphaChanged, BandChanged, Event
from .math import (
    TAU, Point, arc_sweep, clamp, normalize_angle, polar_point, round_half_up, world_to_polar,
)


class InteractiveControl(ABC):
    """
    Something the pointer can grab in world coordinates.

    Required queries:
      - contains_point(point): hit test
      - update_from_point(point): move the control to the pointer and return
        the change event it produces
    """

    @abstractmethod
    def contains_point(self, point: Point, /) -> bool:
        pass

    @abstractmethod
    def update_from_point(self, point: Point, /) -> Event:
        pass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center_y(self) -> float:
        return self.y + self.height * 0.5

    def contains(self, point: Point) -> bool:
        x, y = point
        return (self.min_x <= x <= self.max_x) and (self.min_y <= y <= self.max_y)


@dataclass(frozen=True)
class BandSegment:
    inner: Point
    outer: Point
    color: Rgba


class ColorBand(InteractiveControl):
    """
    Arc-shaped slider for one channel of one color model.

    Geometry (fixed at construction):
      - center, radius, width: the band covers distances radius +- width/2
      - arc_begin, arc_end: normalized to [0, 2pi]; the band runs counter-clockwise
        from begin to end and may cross angle 0 (arc_begin > arc_end)
      - sweep: arc_sweep(arc_begin, arc_end); a sweep of exactly 2pi is a full circle

    State:
      - value in [0, 1], the position along the arc
      - theta, the angle of the handle (derived from value)
      - color_range, the gradient painted along the arc
    """

    def __init__(
            self,
            tuple_type: TupleType,
            channel: Channel,
            center: Point,
            radius: float,
            arc_begin: float,
            arc_end: float,
            width: float,
            /
    ):
        if radius <= 0.0 or width <= 0.0:
            raise ValueError(f"Band radius and width must be positive, got {radius!r} and {width!r}")
        self._tuple_type = tuple_type
        self._channel = channel
        self._center: Point = (float(center[0]), float(center[1]))
        self._radius = float(radius)
        self._width = float(width)
        self._arc_begin = normalize_angle(arc_begin)
        self._arc_end = normalize_angle(arc_end)
        self._sweep = arc_sweep(self._arc_begin, self._arc_end)
        self._is_circle = self._sweep == TAU

        self._color_range = ColorRange()
        self._value = 0.0
        self._theta = self._arc_begin

    # --- identity / geometry

    @property
    def tuple_type(self) -> TupleType:
        return self._tuple_type

    @property
    def channel(self) -> Channel:
        return self._channel

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def width(self) -> float:
        return self._width

    @property
    def arc_begin(self) -> float:
        return self._arc_begin

    @property
    def arc_end(self) -> float:
        return self._arc_end

    @property
    def sweep(self) -> float:
        return self._sweep

    @property
    def is_circle(self) -> bool:
        return self._is_circle

    @property
    def inner_radius(self) -> float:
        return self._radius - self._width / 2.0

    @property
    def outer_radius(self) -> float:
        return self._radius + self._width / 2.0

    @property
    def arc_length(self) -> float:
        return self._sweep * self._radius

    # --- state

    @property
    def value(self) -> float:
        return self._value

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def handle_angle(self) -> float:
        return self._theta

    @property
    def color_range(self) -> ColorRange:
        return self._color_range

    def set_colors(self, start: ColorTuple, end: ColorTuple) -> None:
        self._color_range = ColorRange(start, end)

    def update(self, t: float) -> None:
        """
        Programmatic path: place the handle at ratio t without producing an event.
        """
        self._value = clamp(float(t), 0.0, 1.0)
        self._theta = normalize_angle(self._arc_begin + self._sweep * self._value)

    def update_from_screen(self, theta: float) -> BandChanged:
        """
        Pointer path: move the handle to the angle theta (clamped onto the arc)
        and return the resulting change event.
        """
        n_theta = normalize_angle(theta)

        if not self._is_circle:
            begin, end = self._arc_begin, self._arc_end
            if begin > end:
                # arc crosses 0; the gap is (end, begin). Snap to the closer endpoint
                if end < n_theta < begin:
                    delta_begin = begin - n_theta
                    delta_end = n_theta - end
                    n_theta = begin if delta_begin < delta_end else end
            else:
                n_theta = clamp(n_theta, begin, end)

        self._theta = n_theta
        if self._sweep > 0.0:
            self._value = clamp(arc_sweep(self._arc_begin, n_theta) / self._sweep, 0.0, 1.0)
        else:
            self._value = 0.0
        return BandChanged(self._tuple_type, self._channel, self._value)

    def contains_polar(self, distance: float, theta: float) -> bool:
        if not (self.inner_radius <= distance <= self.outer_radius):
            return False
        if self._is_circle:
            return True

        n_theta = normalize_angle(theta)
        if self._arc_begin > self._arc_end:
            return (self._arc_begin <= n_theta <= TAU) or (0.0 <= n_theta <= self._arc_end)
        return self._arc_begin <= n_theta <= self._arc_end

    # --- InteractiveControl

    def contains_point(self, point: Point, /) -> bool:
        distance, theta = world_to_polar(self._center, point)
        return self.contains_polar(distance, theta)

    def update_from_point(self, point: Point, /) -> BandChanged:
        _, theta = world_to_polar(self._center, point)
        return self.update_from_screen(theta)

    # --- rendering contract

    def polar_from_center(self, distance: float, theta: float) -> Point:
        return polar_point(self._center, distance, theta)

    def segments(self, step: float = 3.0) -> list[BandSegment]:
        """
        Radial strokes across the arc, one every `step` units of arc length,
        colored along the band's gradient.
        """
        n = max(2, round_half_up(self.arc_length / max(step, 1e-6)))
        theta_inc = self._sweep / n
        inner, outer = self.inner_radius, self.outer_radius
        out: list[BandSegment] = []
        for i in range(n):
            t = self._arc_begin + theta_inc * i
            tuple_ = self._color_range.interpolate(i / (n - 1))
            out.append(BandSegment(
                self.polar_from_center(inner, t),
                self.polar_from_center(outer, t),
                tuple_.to_color(self._tuple_type),
            ))
        return out

    def __repr__(self):
        return f"ColorBand[{self._tuple_type.value} : {self._channel.value}]"


class AlphaSlider(InteractiveControl):
    """
    Horizontal slider for alpha. Unlike the bands, its value is an 8-bit
    integer in 0..255, not a ratio.
    """

    VAL_MIN = 0
    VAL_MAX = 255

    def __init__(self, bounds: Rect, color: Rgba = Rgba(0, 0, 0), /):
        self._bounds = bounds
        self._value = self.VAL_MIN
        self._handle_offset = 0.0
        self._start_color = Rgba(0, 0, 0, 0)
        self._end_color = Rgba(0, 0, 0, 255)
        self.set_color(color)

    @property
    def bounds(self) -> Rect:
        return self._bounds

    @property
    def value(self) -> int:
        return self._value

    @property
    def handle_offset(self) -> float:
        """Handle x position, relative to the slider's left edge."""
        return self._handle_offset

    @property
    def gradient(self) -> tuple[Rgba, Rgba]:
        return self._start_color, self._end_color

    def set_color(self, color: Rgba) -> None:
        self._start_color = color.with_alpha(0)
        self._end_color = color.with_alpha(255)

    def set_alpha(self, value: int) -> None:
        """Programmatic path: no event is produced."""
        self._value = int(clamp(int(value), self.VAL_MIN, self.VAL_MAX))
        self._handle_offset = self._bounds.width * (self._value / float(self.VAL_MAX))

    # --- InteractiveControl

    def contains_point(self, point: Point, /) -> bool:
        return self._bounds.contains(point)

    def update_from_point(self, point: Point, /) -> AlphaChanged:
        min_x, max_x = self._bounds.min_x, self._bounds.max_x
        x = clamp(point[0], min_x, max_x)
        local_x = x - min_x
        span = max_x - min_x
        scale = local_x / span if span > 0.0 else 0.0

        self._handle_offset = local_x
        self._value = round_half_up(self.VAL_MAX * scale)
        return AlphaChanged(self._value)

    def __repr__(self):
        return f"AlphaSlider[{self._value}]"
