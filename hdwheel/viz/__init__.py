"""SVG primitives and theming shared by the wheel renderers."""

from .core.svg import SvgDocument, SvgElement, fmt
from .core.theme import LIGHT_THEME, STANDARD_THEME, ThemeManager, WheelTheme

__all__ = [
    "SvgDocument",
    "SvgElement",
    "fmt",
    "WheelTheme",
    "ThemeManager",
    "STANDARD_THEME",
    "LIGHT_THEME",
]
