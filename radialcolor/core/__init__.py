from radialcolor.config import DEFAULT_LAYOUT

from .math import Point, TAU, normalize_angle, arc_sweep, world_to_polar, deg_to_rad, rad_to_deg
from .colors import Channel, TupleType, Rgba, ColorTuple, ColorRange, rgb_to_hsb, hsb_to_rgb, compose_with_alpha
from .events import BandChanged, AlphaChanged, ValueEdited, Event
from .controls import InteractiveControl, ColorBand, AlphaSlider, Rect, BandSegment
from .fields import NumericField
from .synchronizer import ColorSynchronizer, ColorState
from .layout import build_bands, build_alpha_slider, build_fields


def build_synchronizer(layout=None, on_change=None) -> ColorSynchronizer:
    """A synchronizer wired to the standard bands, alpha slider and fields."""
    layout = layout or DEFAULT_LAYOUT
    return ColorSynchronizer(build_bands(layout), build_alpha_slider(layout), build_fields(), on_change)
