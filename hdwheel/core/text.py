"""Band relative text sizing for gate labels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from ..exceptions import InvalidGeometry
from .scaling import BandGeometry

__all__ = ["TextRatios", "TEXT_RATIOS", "TextConfig", "calculate_text_config", "GATE_ARC_DEGREES"]

# 64 gates share the full circle.
GATE_ARC_DEGREES = 360.0 / 64


@dataclass(frozen=True)
class TextRatios:
    """Text proportions measured on the master artwork (19px font in a 75.66px band)."""

    font_size_to_band_width: float = 0.2511
    line_height_to_band_width: float = 0.2064
    vertical_scale: float = 1.2
    char_width_to_font_size: float = 0.7
    # minimum word length -> font multiplier
    long_word_multipliers: Mapping[int, float] = field(
        default_factory=lambda: {13: 0.792, 12: 0.875, 11: 0.916}
    )


TEXT_RATIOS = TextRatios()


@dataclass(frozen=True)
class TextConfig:
    band_width: float
    arc_length: float
    standard_font_size: float
    line_height: float
    vertical_scale: float
    chars_per_line: int
    max_lines: int
    ratios: TextRatios = TEXT_RATIOS

    def font_size_for(self, word: str) -> float:
        """Shrink long words so they still fit inside one gate's arc."""

        length = len(word)
        for threshold in sorted(self.ratios.long_word_multipliers, reverse=True):
            if length >= threshold:
                return self.standard_font_size * self.ratios.long_word_multipliers[threshold]
        return self.standard_font_size


def calculate_text_config(geometry: BandGeometry, ratios: TextRatios = TEXT_RATIOS) -> TextConfig:
    """Derive per-gate text metrics for ``geometry``."""

    width = geometry.band_width
    if width <= 0:
        raise InvalidGeometry(f"band width must be > 0, got {width}")
    arc_length = geometry.mid_radius * math.radians(GATE_ARC_DEGREES)
    font = width * ratios.font_size_to_band_width
    return TextConfig(
        band_width=width,
        arc_length=arc_length,
        standard_font_size=font,
        line_height=width * ratios.line_height_to_band_width,
        vertical_scale=ratios.vertical_scale,
        chars_per_line=math.floor(arc_length / (font * ratios.char_width_to_font_size)),
        max_lines=math.floor(width / (font * ratios.vertical_scale)),
        ratios=ratios,
    )
