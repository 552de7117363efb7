"""Compose registered bands into one wheel and export it as SVG or PNG."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..bands import BandDefinition, BandRegistry, RenderContext, default_registry
from ..core.angles import AngleModel, Point, WheelCalibration
from ..exceptions import InvalidGeometry
from ..viz.core.svg import SvgDocument, SvgElement
from ..viz.core.theme import STANDARD_THEME, WheelTheme
from .snap import (
    DEFAULT_VIEW_PADDING,
    BandTransform,
    Placement,
    ViewBox,
    canvas_viewbox,
    compute_snap_placements,
    compute_transform,
    snap_summary,
)

LOG = logging.getLogger(__name__)

__all__ = [
    "AssemblyConfig",
    "PlacedBand",
    "WheelAssembly",
    "STANDARD_RINGS",
    "STANDARD_WHEEL",
    "assemble_rings",
    "assemble_standard_wheel",
    "render_preview_png",
    "export_wheel",
    "plan_wheel",
]

STANDARD_RINGS: Tuple[str, ...] = ("numbers", "hexagrams", "codons")


@dataclass(frozen=True)
class AssemblyConfig:
    """How to stack bands into one wheel."""

    center: Point = Point(1000.0, 1000.0)
    start_radius: float = 400.0
    padding: float = 0.0
    rings: Tuple[str, ...] = STANDARD_RINGS
    uniform_scale: Optional[float] = None
    include_background: bool = True
    include_structure: bool = True
    view_padding: float = DEFAULT_VIEW_PADDING


STANDARD_WHEEL = AssemblyConfig()


@dataclass(frozen=True)
class PlacedBand:
    band: BandDefinition
    placement: Placement
    transform: BandTransform


@dataclass
class WheelAssembly:
    """Result of :func:`assemble_rings`: placements plus the rendered document."""

    config: AssemblyConfig
    bands: List[PlacedBand]
    viewbox: ViewBox
    document: SvgDocument
    theme: WheelTheme = field(default=STANDARD_THEME)

    @property
    def placements(self) -> List[Placement]:
        return [placed.placement for placed in self.bands]

    def summary(self) -> str:
        return snap_summary(
            self.placements,
            center=self.config.center,
            start_radius=self.config.start_radius,
            padding=self.config.padding,
        )

    def to_svg(self, pretty: bool = True) -> str:
        return self.document.to_string(pretty=pretty)


def assemble_rings(
    config: AssemblyConfig,
    registry: Optional[BandRegistry] = None,
    theme: Optional[WheelTheme] = None,
    calibration: Optional[WheelCalibration] = None,
) -> WheelAssembly:
    """Place and render every band named in ``config.rings``.

    All names are resolved before any geometry is computed, so an unknown
    band fails the whole composition without producing partial output.
    """

    registry = registry or default_registry()
    theme = theme or STANDARD_THEME
    if not config.rings:
        raise InvalidGeometry("a wheel needs at least one ring")
    definitions = registry.resolve(config.rings)

    placements = compute_snap_placements(
        [band.source for band in definitions],
        start_radius=config.start_radius,
        padding=config.padding,
        uniform_scale=config.uniform_scale,
    )
    viewbox = canvas_viewbox(config.center, placements, config.view_padding)

    doc = SvgDocument(
        width=viewbox.width,
        height=viewbox.height,
        viewbox=viewbox.as_tuple(),
        background=theme.background if config.include_background else None,
    )
    doc.set_metadata(rings=",".join(config.rings), theme=theme.identifier)

    ctx = RenderContext(
        theme=theme,
        model=AngleModel(calibration),
        include_structure=config.include_structure,
    )
    placed: List[PlacedBand] = []
    for band, placement in zip(definitions, placements):
        transform = compute_transform(band.source.center, config.center, placement.scale)
        wrapper = SvgElement("g").set(id=f"{band.name}-ring", transform=transform.to_svg())
        wrapper.add(band.render(ctx))
        doc.add(wrapper)
        placed.append(PlacedBand(band, placement, transform))

    LOG.info(
        "assembled %d ring(s) %s, outer visual radius %.4f",
        len(placed),
        ",".join(config.rings),
        placements[-1].visual_outer,
    )
    return WheelAssembly(config=config, bands=placed, viewbox=viewbox, document=doc, theme=theme)


def assemble_standard_wheel(
    *,
    center: Point = STANDARD_WHEEL.center,
    start_radius: float = STANDARD_WHEEL.start_radius,
    padding: float = STANDARD_WHEEL.padding,
    include_background: bool = True,
    theme: Optional[WheelTheme] = None,
) -> WheelAssembly:
    """Numbers, hexagrams and codons stacked from the inside out."""

    config = AssemblyConfig(
        center=center,
        start_radius=start_radius,
        padding=padding,
        include_background=include_background,
    )
    return assemble_rings(config, theme=theme)


# ---------------------------------------------------------------------------
# PNG preview


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size=size)
    except OSError:  # pragma: no cover - font availability varies
        return ImageFont.load_default()


def render_preview_png(assembly: WheelAssembly, size: int = 800) -> bytes:
    """Rasterise the placement rings (nominal and visual bounds) for a quick look.

    Band content is not rasterised; the preview shows where each band lands.
    """

    vb = assembly.viewbox
    factor = size / vb.width
    theme = assembly.theme
    img = Image.new("RGBA", (size, size), theme.background)
    draw = ImageDraw.Draw(img)
    cx = (assembly.config.center.x - vb.x) * factor
    cy = (assembly.config.center.y - vb.y) * factor
    label_font = _font(max(10, size // 60))

    def _ring(radius: float, color: str, width: int) -> None:
        r = radius * factor
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), outline=color, width=width)

    for placed in assembly.bands:
        p = placed.placement
        _ring(p.visual_inner, theme.highlight, 1)
        _ring(p.visual_outer, theme.highlight, 1)
        _ring(p.inner_radius, theme.foreground, 2)
        _ring(p.outer_radius, theme.foreground, 2)
        label_r = (p.inner_radius + p.outer_radius) / 2 * factor
        bbox = draw.textbbox((0, 0), p.name, font=label_font)
        draw.text(
            (cx - (bbox[2] - bbox[0]) / 2, cy - label_r - (bbox[3] - bbox[1]) / 2),
            p.name,
            fill=theme.foreground,
            font=label_font,
        )

    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def export_wheel(assembly: WheelAssembly, fmt: str = "svg", *, size: int = 800) -> bytes:
    """Return the assembled wheel as SVG or PNG bytes."""

    fmt_lower = fmt.lower()
    if fmt_lower == "svg":
        return assembly.document.to_bytes()
    if fmt_lower == "png":
        return render_preview_png(assembly, size=size)
    raise ValueError("Unsupported format: expected 'svg' or 'png'")


def plan_wheel(config: AssemblyConfig, registry: Optional[BandRegistry] = None) -> List[Placement]:
    """Placements for ``config`` without rendering any band content."""

    registry = registry or default_registry()
    sources = [band.source for band in registry.resolve(config.rings)]
    return compute_snap_placements(
        sources, config.start_radius, config.padding, config.uniform_scale
    )
