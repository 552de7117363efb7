"""Gate numbers band: the 64 gate numbers read along the ring."""

from __future__ import annotations

from ..core.angles import Point, polar_point
from ..core.extent import BandSource
from ..core.scaling import Mid, RatioSet, compute_scaled_geometry, extract_font_ratios
from ..knowledge.positioning import (
    DEGREES_PER_LINE,
    GATE_SEQUENCE,
    adjacent_pairs,
    angle_of,
    gate_data_attributes,
)
from ..viz.core.svg import SvgElement, fmt
from .base import BandDefinition, RenderContext, structure_group

__all__ = ["SOURCE", "RATIOS", "LINE_START_OFFSET", "render_numbers", "NUMBERS_BAND"]

SOURCE = BandSource.with_margins(
    "numbers",
    Point(1657.7978, 1657.4867),
    1538.587,
    1648.5514,
    below=2.0,
    above=2.0,
)

# Numbers are centred one line into their gate.
LINE_START_OFFSET = DEGREES_PER_LINE

RATIOS = RatioSet(
    radii={"text": Mid(0.0)},
    fonts=extract_font_ratios(SOURCE.geometry.band_width, {"number": 117.1932}),
)


def render_numbers(ctx: RenderContext) -> SvgElement:
    scaled = compute_scaled_geometry(SOURCE.geometry, RATIOS)
    radius = scaled.require("radii", "text")
    font_size = scaled.require("fonts", "number")
    model = ctx.model

    group = SvgElement("g").set(id="NUMBERS")
    if ctx.include_structure:
        group.add(
            structure_group(SOURCE, ctx, adjacent_pairs(), angle_shift=LINE_START_OFFSET)
        )

    numbers = SvgElement("g").set(id="GATE-NUMBERS", fill=ctx.theme.foreground)
    for gate in GATE_SEQUENCE:
        target = model.to_target_angle(angle_of(gate)) + LINE_START_OFFSET
        position = polar_point(scaled.center, radius, target)
        rotation = model.to_tangent_rotation(target)
        text = SvgElement("text", text=str(gate)).set(
            transform=f"translate({fmt(position.x)} {fmt(position.y)}) rotate({fmt(rotation)})",
            font_size=font_size,
            font_family=ctx.theme.font("numbers", "Herculanum"),
            text_anchor="middle",
            dominant_baseline="central",
            stroke="none",
        )
        text.update(gate_data_attributes(gate))
        numbers.add(text)
    return group.add(numbers)


NUMBERS_BAND = BandDefinition(
    name="numbers",
    source=SOURCE,
    render=render_numbers,
    description="Gate numbers, read tangentially",
)
