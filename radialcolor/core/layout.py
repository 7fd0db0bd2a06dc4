from .colors import Channel, ColorTuple, TupleType
from .controls import AlphaSlider, ColorBand, Rect
from .fields import NumericField
from .math import TAU, deg_to_rad
from radialcolor.config import DEFAULT_LAYOUT, DialogLayout


def build_bands(layout: DialogLayout = DEFAULT_LAYOUT) -> list[ColorBand]:
    """
    The six standard bands, in hit-test order: red, green, blue on the outer
    ring, then brightness, saturation, hue from the inside out.
    """
    center = layout.center
    width = layout.band_width

    def rgb_band(channel: Channel, span: tuple[float, float], end: ColorTuple) -> ColorBand:
        band = ColorBand(
            TupleType.RGB, channel, center, layout.rgb_radius,
            deg_to_rad(span[0]), deg_to_rad(span[1]), width,
        )
        band.set_colors(ColorTuple(0.0, 0.0, 0.0), end)
        return band

    def hsb_band(channel: Channel, radius: float, start: ColorTuple) -> ColorBand:
        band = ColorBand(TupleType.HSB, channel, center, radius, 0.0, TAU, width)
        band.set_colors(start, ColorTuple(1.0, 1.0, 1.0))
        return band

    return [
        rgb_band(Channel.A, layout.red_span, ColorTuple(1.0, 0.0, 0.0)),
        rgb_band(Channel.B, layout.green_span, ColorTuple(0.0, 1.0, 0.0)),
        rgb_band(Channel.C, layout.blue_span, ColorTuple(0.0, 0.0, 1.0)),
        hsb_band(Channel.C, layout.brightness_radius, ColorTuple(1.0, 1.0, 0.0)),
        hsb_band(Channel.B, layout.saturation_radius, ColorTuple(1.0, 0.0, 1.0)),
        hsb_band(Channel.A, layout.hue_radius, ColorTuple(0.0, 1.0, 1.0)),
    ]


def build_alpha_slider(layout: DialogLayout = DEFAULT_LAYOUT) -> AlphaSlider:
    bounds = Rect(
        layout.alpha_margin,
        layout.alpha_y,
        layout.panel_width - 2.0 * layout.alpha_margin,
        layout.alpha_bar_height,
    )
    slider = AlphaSlider(bounds)
    slider.set_alpha(AlphaSlider.VAL_MAX)
    return slider


def build_fields() -> list[NumericField]:
    """The seven numeric fields, in display order."""
    return [
        NumericField(TupleType.RGB, Channel.A, "Red", 0, 255),
        NumericField(TupleType.RGB, Channel.B, "Green", 0, 255),
        NumericField(TupleType.RGB, Channel.C, "Blue", 0, 255),
        NumericField(TupleType.HSB, Channel.A, "Hue", 0, 360),
        NumericField(TupleType.HSB, Channel.B, "Saturation", 0, 100),
        NumericField(TupleType.HSB, Channel.C, "Brightness", 0, 100),
        NumericField(TupleType.ALPHA, Channel.A, "Alpha", 0, 255),
    ]
