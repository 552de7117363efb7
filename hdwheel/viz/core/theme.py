"""Colour, font and stroke tokens for wheel rendering."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Mapping, MutableMapping, Optional

__all__ = ["WheelTheme", "ThemeManager", "STANDARD_THEME", "LIGHT_THEME", "default_theme_manager"]


@dataclass(frozen=True)
class WheelTheme:
    """Immutable set of tokens shared by every band of one wheel."""

    identifier: str
    name: str
    colors: Mapping[str, str] = field(default_factory=dict)
    fonts: Mapping[str, str] = field(default_factory=dict)
    strokes: Mapping[str, float] = field(default_factory=dict)

    def color(self, role: str, default: Optional[str] = None) -> Optional[str]:
        return self.colors.get(role, default)

    def font(self, role: str, default: Optional[str] = None) -> Optional[str]:
        return self.fonts.get(role, default)

    def stroke(self, token: str, default: Optional[float] = None) -> Optional[float]:
        return self.strokes.get(token, default)

    @property
    def background(self) -> str:
        return self.colors.get("background", "#151E25")

    @property
    def foreground(self) -> str:
        return self.colors.get("foreground", "#FFFFFF")

    @property
    def highlight(self) -> str:
        return self.colors.get("highlight", "#fab414")

    def with_colors(self, **colors: str) -> "WheelTheme":
        merged = dict(self.colors)
        merged.update({role: value for role, value in colors.items() if value})
        return replace(self, colors=merged)

    def to_payload(self) -> Dict[str, object]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "colors": dict(self.colors),
            "fonts": dict(self.fonts),
            "strokes": dict(self.strokes),
        }


_FONTS = {
    "numbers": "Herculanum",
    "codon_letters": "Copperplate",
    "gate_numbers": "Copperplate-Light, Copperplate",
    "amino_acids": "Copperplate",
}
_STROKES = {"structure": 0.5, "codon_structure": 0.8, "divider": 0.5}

STANDARD_THEME = WheelTheme(
    identifier="standard",
    name="Standard (dark)",
    colors={"background": "#151E25", "foreground": "#FFFFFF", "highlight": "#fab414"},
    fonts=_FONTS,
    strokes=_STROKES,
)

LIGHT_THEME = WheelTheme(
    identifier="light",
    name="Light",
    colors={"background": "#FFFFFF", "foreground": "#151E25", "highlight": "#fab414"},
    fonts=_FONTS,
    strokes=_STROKES,
)


class ThemeManager:
    """Registry of :class:`WheelTheme` instances keyed by identifier."""

    def __init__(self, themes: Optional[Iterable[WheelTheme]] = None) -> None:
        self._themes: MutableMapping[str, WheelTheme] = {}
        for theme in themes or ():
            self.register(theme)

    def register(self, theme: WheelTheme) -> None:
        if theme.identifier in self._themes:
            raise ValueError(f"Theme '{theme.identifier}' already registered")
        self._themes[theme.identifier] = theme

    def get(self, identifier: str) -> WheelTheme:
        try:
            return self._themes[identifier]
        except KeyError as exc:
            raise KeyError(f"Unknown theme '{identifier}'") from exc

    def identifiers(self) -> list[str]:
        return sorted(self._themes)


def default_theme_manager() -> ThemeManager:
    return ThemeManager([STANDARD_THEME, LIGHT_THEME])
