import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from .colors import Channel, ColorTuple, Rgba, TupleType, compose_with_alpha
from .controls import AlphaSlider, ColorBand
from .events import AlphaChanged, BandChanged, Event, ValueEdited
from .fields import NumericField

logger = logging.getLogger(__name__)

_CHANNELS = (Channel.A, Channel.B, Channel.C)
_ALPHA_KEY = (TupleType.ALPHA, Channel.A)


@dataclass(frozen=True)
class ColorState:
    rgb: ColorTuple
    hsb: ColorTuple
    alpha: int

    @property
    def color(self) -> Rgba:
        return self.rgb.to_color(TupleType.RGB, self.alpha)


StateListener = Callable[[ColorState], None]


class ColorSynchronizer:
    """
    Keeps the six bands, the alpha slider and the seven numeric fields
    describing one color.

    RGB and HSB are two views of the same color. Whichever model a change
    comes from is authoritative; the other one is derived through the 8-bit
    pixel color and pushed back into its bands and fields. Pushes happen with
    events suppressed, so a derived update never re-enters dispatch().
    """

    def __init__(
            self,
            bands: Iterable[ColorBand],
            alpha_slider: AlphaSlider,
            fields: Iterable[NumericField],
            on_change: Optional[StateListener] = None,
    ):
        self._bands: dict[tuple[TupleType, Channel], ColorBand] = {}
        for band in bands:
            key = (band.tuple_type, band.channel)
            if key in self._bands:
                raise ValueError(f"Duplicate band for {key[0].value}:{key[1].value}")
            self._bands[key] = band
        for tuple_type in (TupleType.RGB, TupleType.HSB):
            for channel in _CHANNELS:
                if (tuple_type, channel) not in self._bands:
                    raise ValueError(f"Missing band for {tuple_type.value}:{channel.value}")

        self._fields: dict[tuple[TupleType, Channel], NumericField] = {}
        for field in fields:
            key = (field.tuple_type, field.channel)
            if key in self._fields:
                raise ValueError(f"Duplicate field for {key[0].value}:{key[1].value}")
            self._fields[key] = field

        self._alpha_slider = alpha_slider
        self._on_change = on_change
        self._alpha = alpha_slider.value
        self._suppressed = False
        self._dynamic_color = Rgba(0, 0, 0, self._alpha)
        self._current_color = self._dynamic_color
        self._last_state: Optional[ColorState] = None

    # --- access

    def band(self, tuple_type: TupleType, channel: Channel) -> ColorBand:
        return self._bands[(tuple_type, channel)]

    def field(self, tuple_type: TupleType, channel: Channel) -> NumericField:
        return self._fields[(tuple_type, channel)]

    @property
    def bands(self) -> list[ColorBand]:
        return list(self._bands.values())

    @property
    def fields(self) -> list[NumericField]:
        return list(self._fields.values())

    @property
    def alpha_slider(self) -> AlphaSlider:
        return self._alpha_slider

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def state(self) -> ColorState:
        return ColorState(self._tuple_of(TupleType.RGB), self._tuple_of(TupleType.HSB), self._alpha)

    @property
    def dynamic_color(self) -> Rgba:
        """The color under the pointer, updated on every change."""
        return self._dynamic_color

    @property
    def current_color(self) -> Rgba:
        """The color at the last pointer release, numeric edit or load_color()."""
        return self._current_color

    def set_listener(self, on_change: Optional[StateListener]) -> None:
        self._on_change = on_change

    # --- suppression

    @property
    def is_suppressed(self) -> bool:
        return self._suppressed

    @contextmanager
    def suppressed(self) -> Iterator[None]:
        """Drop every event dispatched inside the block."""
        previous = self._suppressed
        self._suppressed = True
        try:
            yield
        finally:
            self._suppressed = previous

    # --- public API

    def dispatch(self, event: Event) -> bool:
        """
        Apply one change event. Returns False when the event was dropped
        because a push is in progress.
        """
        if self._suppressed:
            logger.debug("Dropped %r while suppressed", event)
            return False

        logger.debug("Dispatch %r", event)
        match event:
            case BandChanged():
                self._on_band_changed(event)
            case AlphaChanged():
                self._on_alpha_changed(event.value)
            case ValueEdited(tuple_type=TupleType.ALPHA):
                self._on_alpha_changed(event.value)
                self.commit()
            case ValueEdited():
                self._on_value_edited(event)
                self.commit()
            case _:
                raise TypeError(f"Unknown event {event!r}")

        self._publish()
        return True

    def load_color(self, color: Rgba) -> None:
        """Seed every control from one absolute color."""
        logger.debug("Load %r", color)
        rgb = ColorTuple.from_color(color)
        hsb = ColorTuple.hsb_of(color)
        self._alpha = color.a
        with self.suppressed():
            self._push(TupleType.RGB, rgb)
            self._push(TupleType.HSB, hsb)
            self._push_alpha(color)
        self._dynamic_color = color
        self._current_color = color
        self._publish()

    def commit(self) -> Rgba:
        """The live color becomes the current color (pointer release, numeric edit)."""
        self._current_color = self._dynamic_color
        return self._current_color

    # --- internals

    def _tuple_of(self, tuple_type: TupleType) -> ColorTuple:
        return ColorTuple(*(self._bands[(tuple_type, channel)].value for channel in _CHANNELS))

    def _field_tuple_of(self, tuple_type: TupleType) -> ColorTuple:
        return ColorTuple(*(self._fields[(tuple_type, channel)].scale() for channel in _CHANNELS))

    def _on_band_changed(self, event: BandChanged) -> None:
        band = self._bands[(event.tuple_type, event.channel)]
        if band.value != event.value:
            band.update(event.value)
        self._cross_update(event.tuple_type, self._tuple_of(event.tuple_type))

    def _on_value_edited(self, event: ValueEdited) -> None:
        field = self._fields[(event.tuple_type, event.channel)]
        if field.value != event.value:
            field.update_from_int(event.value)
        match event.tuple_type:
            case TupleType.RGB:
                source = ColorTuple.from_rgb(*(self._fields[(TupleType.RGB, c)].value for c in _CHANNELS))
            case _:
                source = self._field_tuple_of(TupleType.HSB)
        self._cross_update(event.tuple_type, source)

    def _cross_update(self, tuple_type: TupleType, source: ColorTuple) -> None:
        color = source.to_color(tuple_type, self._alpha)
        if tuple_type is TupleType.RGB:
            rgb, hsb = source, ColorTuple.hsb_of(color)
        else:
            rgb, hsb = ColorTuple.from_color(color), source

        with self.suppressed():
            self._push(TupleType.RGB, rgb)
            self._push(TupleType.HSB, hsb)
            self._alpha_slider.set_color(color)
        self._dynamic_color = color

    def _on_alpha_changed(self, value: int) -> None:
        self._alpha = int(max(AlphaSlider.VAL_MIN, min(AlphaSlider.VAL_MAX, value)))
        self._dynamic_color = compose_with_alpha(self._dynamic_color, self._alpha)
        with self.suppressed():
            if self._alpha_slider.value != self._alpha:
                self._alpha_slider.set_alpha(self._alpha)
            alpha_field = self._fields.get(_ALPHA_KEY)
            if alpha_field is not None:
                alpha_field.update_from_int(self._alpha)

    def _push(self, tuple_type: TupleType, tuple_: ColorTuple) -> None:
        """
        Move the bands and fields of one model to tuple_, and regradient its
        bands: each band shows its own channel sweeping 0 -> 1 with the other
        two channels held at their live values.
        """
        for channel in _CHANNELS:
            band = self._bands[(tuple_type, channel)]
            band.update(tuple_.channel(channel))
            band.set_colors(tuple_.with_channel(channel, 0.0), tuple_.with_channel(channel, 1.0))

            field = self._fields.get((tuple_type, channel))
            if field is not None:
                field.update_from_tuple(tuple_)

    def _push_alpha(self, color: Rgba) -> None:
        self._alpha_slider.set_alpha(self._alpha)
        self._alpha_slider.set_color(color)
        alpha_field = self._fields.get(_ALPHA_KEY)
        if alpha_field is not None:
            alpha_field.update_from_int(self._alpha)

    def _publish(self) -> None:
        state = self.state
        if state == self._last_state:
            return
        self._last_state = state
        if self._on_change is not None:
            self._on_change(state)
