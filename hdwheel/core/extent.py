"""Visual footprint of a band, which may reach past its nominal radii."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..exceptions import InvalidGeometry
from .angles import Point
from .scaling import BandGeometry

__all__ = ["VisualExtent", "BandSource"]


@dataclass(frozen=True, slots=True)
class VisualExtent:
    visual_inner: float
    visual_outer: float

    @property
    def visual_width(self) -> float:
        return self.visual_outer - self.visual_inner

    def scaled(self, factor: float) -> "VisualExtent":
        return VisualExtent(self.visual_inner * factor, self.visual_outer * factor)


@dataclass(frozen=True, slots=True)
class BandSource:
    """A band's geometry as authored, before it is placed in a wheel.

    The visual extent must enclose the nominal band; decorations may only
    widen it.
    """

    name: str
    geometry: BandGeometry
    visual: VisualExtent

    def __post_init__(self) -> None:
        inner, outer = self.geometry.inner_radius, self.geometry.outer_radius
        v_inner, v_outer = self.visual.visual_inner, self.visual.visual_outer
        if not (math.isfinite(v_inner) and math.isfinite(v_outer)):
            raise InvalidGeometry(f"band '{self.name}': visual extent must be finite")
        if not v_inner <= inner <= outer <= v_outer:
            raise InvalidGeometry(
                f"band '{self.name}': visual extent [{v_inner}, {v_outer}] "
                f"must enclose band [{inner}, {outer}]"
            )
        if v_inner <= 0:
            raise InvalidGeometry(f"band '{self.name}': visual inner radius must be > 0")

    @classmethod
    def with_margins(
        cls,
        name: str,
        center: Point,
        inner_radius: float,
        outer_radius: float,
        *,
        below: float = 0.0,
        above: float = 0.0,
        relative: bool = False,
    ) -> "BandSource":
        """Build a source whose visual extent adds ``below``/``above`` margins.

        With ``relative=True`` the margins are fractions of the band width.
        """

        geometry = BandGeometry(center, inner_radius, outer_radius)
        scale = geometry.band_width if relative else 1.0
        visual = VisualExtent(inner_radius - below * scale, outer_radius + above * scale)
        return cls(name, geometry, visual)

    @property
    def center(self) -> Point:
        return self.geometry.center

    @property
    def inner_radius(self) -> float:
        return self.geometry.inner_radius

    @property
    def outer_radius(self) -> float:
        return self.geometry.outer_radius

    @property
    def visual_inner(self) -> float:
        return self.visual.visual_inner

    @property
    def visual_outer(self) -> float:
        return self.visual.visual_outer
