"""Built-in wheel bands and the registry the assembler resolves names against."""

from .base import (
    BandDefinition,
    BandRegistry,
    RenderContext,
    render_band_document,
)
from .codons import CODONS_BAND
from .hexagrams import HEXAGRAMS_BAND
from .numbers import NUMBERS_BAND

__all__ = [
    "BandDefinition",
    "BandRegistry",
    "RenderContext",
    "render_band_document",
    "NUMBERS_BAND",
    "HEXAGRAMS_BAND",
    "CODONS_BAND",
    "default_registry",
]


def default_registry() -> BandRegistry:
    """Registry holding the numbers, hexagrams and codons bands, innermost first."""

    return BandRegistry([NUMBERS_BAND, HEXAGRAMS_BAND, CODONS_BAND])
