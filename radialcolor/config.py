from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DialogLayout:
    """
    Geometry of the radial dialog, in world units (y up, origin bottom-left).
    Angles are in degrees, counter-clockwise from +X.
    """
    panel_width: int = 460
    alpha_height: int = 32
    band_width: float = 24.0
    preview_radius: float = 80.0

    hue_radius: float = 160.0
    saturation_radius: float = 130.0
    brightness_radius: float = 100.0
    rgb_radius: float = 190.0

    red_span: tuple[float, float] = (-55.0, 55.0)
    green_span: tuple[float, float] = (65.0, 175.0)
    blue_span: tuple[float, float] = (185.0, 295.0)

    alpha_margin: float = 40.0
    alpha_y: float = 12.0
    alpha_bar_height: float = 24.0

    segment_step: float = 3.0
    checker_size: int = 10
    alpha_checker_size: int = 8

    @property
    def panel_height(self) -> int:
        return self.panel_width + self.alpha_height

    @property
    def center(self) -> tuple[float, float]:
        half = self.panel_width / 2.0
        return half, half + self.alpha_height


DEFAULT_LAYOUT = DialogLayout()

STYLESHEET_PATH = Path(__file__).resolve().parent / "style" / "main.qss"


def load_stylesheet(path: Path | str | None = None) -> str:
    """Contents of a Qt stylesheet, or "" when there is none."""
    p = Path(path) if path is not None else STYLESHEET_PATH
    if not p.is_file():
        return ""
    with open(p, "r", encoding="utf-8") as f:
        return f.read()
