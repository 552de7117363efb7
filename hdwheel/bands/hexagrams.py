"""Hexagram band: six-line glyphs with line 1 facing the centre."""

from __future__ import annotations

from ..core.angles import Point
from ..core.extent import BandSource
from ..core.scaling import (
    Mid,
    RatioSet,
    ScaledGeometry,
    compute_scaled_geometry,
    extract_font_ratios,
)
from ..knowledge.positioning import (
    GATE_SEQUENCE,
    adjacent_pairs,
    angle_of,
    binary_of,
    gate_data_attributes,
)
from ..viz.core.svg import SvgElement, fmt
from .base import BandDefinition, RenderContext, structure_group

__all__ = ["SOURCE", "RATIOS", "hexagram_symbol", "render_hexagrams", "HEXAGRAMS_BAND"]

SOURCE = BandSource.with_margins(
    "hexagrams",
    Point(1451.344, 1451.344),
    1334.4257,
    1451.094,
    below=2.0,
    above=2.0,
)

# Glyph measurements from the master artwork, stored as band-width ratios.
RATIOS = RatioSet(
    radii={"symbol": Mid(0.0)},
    elements=extract_font_ratios(
        SOURCE.geometry.band_width,
        {
            "line_width": 80.7558,
            "line_height": 9.9549,
            "line_spacing": 16.91,
            "gap_width": 7.34,
        },
    ),
)


def hexagram_symbol(gate: int, scaled: ScaledGeometry) -> list[SvgElement]:
    """Rects for the six lines of ``gate``; line 6 at ``y=0``, line 1 lowest."""

    width = scaled.require("elements", "line_width")
    height = scaled.require("elements", "line_height")
    spacing = scaled.require("elements", "line_spacing")
    gap = scaled.require("elements", "gap_width")
    segment = (width - gap) / 2

    lines: list[SvgElement] = []
    for index, bit in enumerate(binary_of(gate)):
        line = index + 1
        y = (6 - line) * spacing
        if bit == "1":
            lines.append(
                SvgElement("rect").update({"data-line": line, "data-type": "yang"}).set(
                    x=0.0, y=y, width=width, height=height
                )
            )
        else:
            lines.append(
                SvgElement("g").update({"data-line": line, "data-type": "yin"}).add(
                    SvgElement("rect").set(x=0.0, y=y, width=segment, height=height),
                    SvgElement("rect").set(x=segment + gap, y=y, width=segment, height=height),
                )
            )
    return lines


def render_hexagrams(ctx: RenderContext) -> SvgElement:
    scaled = compute_scaled_geometry(SOURCE.geometry, RATIOS)
    radius = scaled.require("radii", "symbol")
    width = scaled.require("elements", "line_width")
    height = scaled.require("elements", "line_height")
    spacing = scaled.require("elements", "line_spacing")
    offset_x = -width / 2
    offset_y = -(spacing * 5 + height) / 2
    model = ctx.model

    group = SvgElement("g").set(id="HEXAGRAM-RING")
    if ctx.include_structure:
        group.add(structure_group(SOURCE, ctx, adjacent_pairs()))

    symbols = SvgElement("g").set(id="hexagrams", fill=ctx.theme.foreground, stroke="none")
    for gate in GATE_SEQUENCE:
        domain = angle_of(gate)
        target = model.to_target_angle(domain)
        position = model.to_position(domain, radius, scaled.center)
        rotation = model.to_tangent_rotation(target)
        glyph = SvgElement("g").set(
            id=f"gate-{gate}",
            transform=(
                f"translate({fmt(position.x)}, {fmt(position.y)}) rotate({fmt(rotation)}) "
                f"translate({fmt(offset_x)}, {fmt(offset_y)})"
            ),
        )
        glyph.update(gate_data_attributes(gate, include_wheel_index=False))
        glyph.add(*hexagram_symbol(gate, scaled))
        symbols.add(glyph)
    return group.add(symbols)


HEXAGRAMS_BAND = BandDefinition(
    name="hexagrams",
    source=SOURCE,
    render=render_hexagrams,
    description="Hexagram glyphs, line 1 innermost",
)
