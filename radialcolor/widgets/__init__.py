from .display import DisplayPanel
from .controls import NumericControl, ControlPanel
from .dialog import RadialColorDialog

__all__ = [
    "DisplayPanel",
    "NumericControl",
    "ControlPanel",
    "RadialColorDialog",
]
