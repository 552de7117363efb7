"""Snap placement: stack independently authored bands into one wheel.

Each band is placed with a pure translate + uniform scale so its content
keeps its internal proportions. Bands are processed innermost first and
every band's visual inner edge is snapped onto the previous band's visual
outer edge plus ``padding``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.angles import Point
from ..core.extent import BandSource
from ..exceptions import InvalidGeometry
from ..viz.core.svg import fmt

LOG = logging.getLogger(__name__)

__all__ = [
    "Placement",
    "BandTransform",
    "ViewBox",
    "DEFAULT_VIEW_PADDING",
    "compute_snap_placements",
    "compute_transform",
    "canvas_viewbox",
    "snap_summary",
]

DEFAULT_VIEW_PADDING = 50.0


@dataclass(frozen=True, slots=True)
class Placement:
    """Where one band ends up in a concrete wheel, in target units."""

    name: str
    scale: float
    inner_radius: float
    outer_radius: float
    visual_inner: float
    visual_outer: float
    # seam alignment shift in uniform mode; the rendered transform cannot apply it
    radial_offset: float = 0.0

    @property
    def band_width(self) -> float:
        return self.outer_radius - self.inner_radius

    @property
    def visual_width(self) -> float:
        return self.visual_outer - self.visual_inner


@dataclass(frozen=True, slots=True)
class BandTransform:
    translate_x: float
    translate_y: float
    scale: float

    def apply(self, point: Point) -> Point:
        """Map a point in the band's source coordinates into the wheel."""

        return Point(
            self.translate_x + point.x * self.scale,
            self.translate_y + point.y * self.scale,
        )

    def to_svg(self) -> str:
        return (
            f"translate({fmt(self.translate_x)}, {fmt(self.translate_y)}) "
            f"scale({fmt(self.scale, 6)})"
        )


@dataclass(frozen=True, slots=True)
class ViewBox:
    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def to_svg(self) -> str:
        return " ".join(fmt(value) for value in self.as_tuple())


def _check_inputs(start_radius: float, padding: float, uniform_scale: Optional[float]) -> None:
    if not math.isfinite(start_radius) or start_radius <= 0:
        raise InvalidGeometry(f"start_radius must be a positive number, got {start_radius!r}")
    if not math.isfinite(padding):
        raise InvalidGeometry(f"padding must be finite, got {padding!r}")
    if uniform_scale is not None and (not math.isfinite(uniform_scale) or uniform_scale <= 0):
        raise InvalidGeometry(f"uniform_scale must be > 0, got {uniform_scale!r}")


def compute_snap_placements(
    sources: Sequence[BandSource],
    start_radius: float,
    padding: float = 0.0,
    uniform_scale: Optional[float] = None,
) -> List[Placement]:
    """Compute the placement of every band, innermost first.

    Parameters
    ----------
    sources:
        Band sources ordered from the centre outwards.
    start_radius:
        Radius at which the first band's visual inner edge must land.
    padding:
        Gap between one band's visual outer edge and the next band's visual
        inner edge. Negative values overlap bands deliberately.
    uniform_scale:
        When given, every band uses this scale; the reported radii are then
        shifted so each visual inner edge still sits on its seam.

    Returns
    -------
    list of Placement
        One placement per source, in the same order.
    """

    _check_inputs(start_radius, padding, uniform_scale)
    if not sources:
        raise InvalidGeometry("at least one band is required to compose a wheel")

    placements: List[Placement] = []
    seam = start_radius
    previous_rendered_outer: Optional[float] = None

    for index, source in enumerate(sources):
        target_inner = seam if index == 0 else seam + padding
        if target_inner <= 0:
            if uniform_scale is None:
                raise InvalidGeometry(
                    f"band '{source.name}' would start at radius {target_inner:.4f}; "
                    "reduce the negative padding"
                )
            LOG.warning(
                "band '%s' starts at non-positive radius %.4f", source.name, target_inner
            )
        if uniform_scale is None:
            scale = target_inner / source.visual_inner
            offset = 0.0
        else:
            scale = uniform_scale
            offset = target_inner - source.visual_inner * scale

        placement = Placement(
            name=source.name,
            scale=scale,
            inner_radius=source.inner_radius * scale + offset,
            outer_radius=source.outer_radius * scale + offset,
            visual_inner=source.visual_inner * scale + offset,
            visual_outer=source.visual_outer * scale + offset,
            radial_offset=offset,
        )

        if uniform_scale is not None:
            rendered_inner = source.visual_inner * scale
            if previous_rendered_outer is not None and rendered_inner < previous_rendered_outer:
                LOG.warning(
                    "uniform scale %.6f makes band '%s' overlap the previous band by %.4f",
                    scale,
                    source.name,
                    previous_rendered_outer - rendered_inner,
                )
            if abs(offset) > 1e-9:
                LOG.warning(
                    "uniform scale %.6f leaves band '%s' %.4f units off its seam",
                    scale,
                    source.name,
                    offset,
                )
            previous_rendered_outer = source.visual_outer * scale

        LOG.debug(
            "placed %s scale=%.6f visual=[%.4f, %.4f]",
            placement.name,
            placement.scale,
            placement.visual_inner,
            placement.visual_outer,
        )
        placements.append(placement)
        seam = placement.visual_outer

    return placements


def compute_transform(source_center: Point, target_center: Point, scale: float) -> BandTransform:
    """Transform that scales a band and moves its centre onto ``target_center``.

    SVG applies ``translate(...) scale(...)`` right to left, so the scaled
    source centre lands at ``source_center * scale`` and the translation
    moves that point onto the target.
    """

    return BandTransform(
        translate_x=target_center.x - source_center.x * scale,
        translate_y=target_center.y - source_center.y * scale,
        scale=scale,
    )


def canvas_viewbox(
    center: Point,
    placements: Sequence[Placement],
    margin: float = DEFAULT_VIEW_PADDING,
) -> ViewBox:
    """Square canvas centred on ``center`` that contains every band."""

    if not placements:
        raise InvalidGeometry("cannot size a canvas without placements")
    reach = max(p.visual_outer for p in placements) + margin
    size = reach * 2
    return ViewBox(center.x - reach, center.y - reach, size, size)


def snap_summary(
    placements: Sequence[Placement],
    *,
    center: Optional[Point] = None,
    start_radius: Optional[float] = None,
    padding: Optional[float] = None,
) -> str:
    """Render a human readable report of ``placements``."""

    rule = "=" * 55
    thin = "-" * 55
    lines = ["Ring Assembly - Snap Placement Summary", rule]
    if center is not None:
        lines.append(f"Center: ({center.x:g}, {center.y:g})")
    if start_radius is not None:
        lines.append(f"Start Radius (visual inner): {start_radius:g}")
    if padding is not None:
        lines.append(f"Padding between rings: {padding:g}")
    lines.extend(["", "Rings (inside to outside):", thin])

    for index, p in enumerate(placements):
        lines.append(f"{index + 1}. {p.name.upper()}")
        lines.append(f"   Scale factor: {p.scale:.4f}")
        lines.append(
            f"   Geometric: inner={p.inner_radius:.1f}, outer={p.outer_radius:.1f}, "
            f"band={p.band_width:.1f}"
        )
        lines.append(
            f"   Visual:    inner={p.visual_inner:.1f}, outer={p.visual_outer:.1f}, "
            f"width={p.visual_width:.1f}"
        )
        if index < len(placements) - 1:
            gap = placements[index + 1].visual_inner - p.visual_outer
            lines.append(f"   Gap to next: {gap:.1f}")
        lines.append("")

    lines.append(thin)
    if placements:
        lines.append(f"Total visual outer radius: {placements[-1].visual_outer:.1f}")
    return "\n".join(lines)
