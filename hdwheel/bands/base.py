"""Band registry and the structure elements every band shares."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, MutableMapping, Optional, Sequence, Tuple

from ..core.angles import AngleModel, Point, midpoint_angle, polar_point
from ..core.extent import BandSource
from ..exceptions import UnknownBand
from ..knowledge.positioning import angle_of
from ..viz.core.svg import SvgDocument, SvgElement, fmt
from ..viz.core.theme import STANDARD_THEME, WheelTheme

LOG = logging.getLogger(__name__)

__all__ = [
    "RenderContext",
    "BandDefinition",
    "BandRegistry",
    "DIVIDER_INSET",
    "ring_circle",
    "divider_line",
    "structure_group",
    "render_band_document",
]

# Dividers stop this far short of the ring circles.
DIVIDER_INSET = 2.0


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every band generator for one render."""

    theme: WheelTheme = STANDARD_THEME
    model: AngleModel = field(default_factory=AngleModel)
    include_structure: bool = True


BandRenderer = Callable[[RenderContext], SvgElement]


@dataclass(frozen=True)
class BandDefinition:
    """A named band: its native geometry plus the generator for its content."""

    name: str
    source: BandSource
    render: BandRenderer
    description: str = ""


class BandRegistry:
    """Ordered mapping of band names to :class:`BandDefinition`."""

    def __init__(self, bands: Optional[Iterable[BandDefinition]] = None) -> None:
        self._bands: MutableMapping[str, BandDefinition] = {}
        for band in bands or ():
            self.register(band)

    def register(self, band: BandDefinition) -> None:
        if band.name in self._bands:
            raise ValueError(f"Band '{band.name}' already registered")
        self._bands[band.name] = band

    def get(self, name: str) -> BandDefinition:
        try:
            return self._bands[name]
        except KeyError as exc:
            known = ", ".join(self._bands) or "none"
            raise UnknownBand(f"Unknown band type '{name}' (known: {known})") from exc

    def resolve(self, names: Sequence[str]) -> List[BandDefinition]:
        """Look up every name before anything is rendered."""

        return [self.get(name) for name in names]

    def names(self) -> List[str]:
        return list(self._bands)

    def __contains__(self, name: object) -> bool:
        return name in self._bands

    def __iter__(self) -> Iterator[BandDefinition]:
        return iter(self._bands.values())

    def __len__(self) -> int:
        return len(self._bands)


def ring_circle(
    element_id: str, center: Point, radius: float, stroke: str, stroke_width: float
) -> SvgElement:
    return SvgElement("circle").set(
        id=element_id,
        cx=center.x,
        cy=center.y,
        r=radius,
        fill="none",
        stroke=stroke,
        stroke_miterlimit=10,
        stroke_width=stroke_width,
    )


def divider_line(
    element_id: str,
    center: Point,
    target_angle: float,
    inner: float,
    outer: float,
    stroke: str,
    stroke_width: Optional[float] = None,
) -> SvgElement:
    start = polar_point(center, outer, target_angle)
    end = polar_point(center, inner, target_angle)
    return SvgElement("line").set(
        id=element_id,
        x1=start.x,
        y1=start.y,
        x2=end.x,
        y2=end.y,
        fill="none",
        stroke=stroke,
        stroke_miterlimit=10,
        stroke_width=stroke_width,
    )


def structure_group(
    source: BandSource,
    ctx: RenderContext,
    pairs: Sequence[Tuple[int, int]],
    *,
    angle_shift: float = 0.0,
) -> SvgElement:
    """Inner/outer ring circles plus one divider per adjacent gate pair.

    Each divider sits on the wrap-aware midpoint between the two gates.
    ``angle_shift`` is added to the target angle for bands whose content is
    offset from the gate start.
    """

    stroke = ctx.theme.foreground
    width = ctx.theme.stroke("structure", 0.5)
    center = source.center
    rings = SvgElement("g").set(id="RINGS").add(
        ring_circle("RING_-_INNER", center, source.inner_radius, stroke, width),
        ring_circle("RING_-_OUTER", center, source.outer_radius, stroke, width),
    )
    dividers = SvgElement("g").set(id="DIVIDERS")
    for gate_a, gate_b in pairs:
        mid = midpoint_angle(angle_of(gate_a), angle_of(gate_b))
        dividers.add(
            divider_line(
                f"LINE_-_{gate_a}_{gate_b}",
                center,
                ctx.model.to_target_angle(mid) + angle_shift,
                source.inner_radius + DIVIDER_INSET,
                source.outer_radius - DIVIDER_INSET,
                stroke,
            )
        )
    return SvgElement("g").set(id="STRUCTURE").add(rings, dividers)


def render_band_document(
    band: BandDefinition,
    ctx: Optional[RenderContext] = None,
    *,
    include_background: bool = True,
) -> SvgDocument:
    """Render ``band`` on its own, in its native coordinate space."""

    ctx = ctx or RenderContext()
    center = band.source.center
    width = center.x * 2
    height = center.y * 2
    doc = SvgDocument(
        width=width,
        height=height,
        viewbox=(0.0, 0.0, width, height),
        background=ctx.theme.background if include_background else None,
    )
    doc.set_metadata(band=band.name, offset=fmt(ctx.model.offset))
    doc.add(band.render(ctx))
    LOG.debug("rendered standalone band %s", band.name)
    return doc
