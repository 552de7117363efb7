"""Codon band: codon letters, gate dots, gate numbers and amino acid names.

Several elements sit outside the nominal band (the decorative innermost and
outer circles, codon letters, amino acid names), so the visual extent is
widened by band-width-relative margins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..core.angles import Point, midpoint_angle
from ..core.extent import BandSource
from ..core.scaling import (
    FromInner,
    FromOuter,
    Mid,
    RatioSet,
    ScaledGeometry,
    compute_scaled_geometry,
)
from ..knowledge.positioning import (
    GATE_SEQUENCE,
    amino_acid_of,
    angle_of,
    codon_of,
    gate_data_attributes,
)
from ..viz.core.svg import SvgElement, fmt
from .base import BandDefinition, RenderContext, divider_line, ring_circle

__all__ = [
    "SOURCE",
    "RATIOS",
    "AminoRun",
    "amino_acid_runs",
    "render_codons",
    "CODONS_BAND",
]

INNER_MARGIN_RATIO = 0.0885
OUTER_MARGIN_RATIO = 0.1062

SOURCE = BandSource.with_margins(
    "codons",
    Point(1122.0567, 1130.6034),
    858.2697,
    1084.3718,
    below=INNER_MARGIN_RATIO,
    above=OUTER_MARGIN_RATIO,
    relative=True,
)

RATIOS = RatioSet(
    radii={
        "codon_letters": FromInner(-0.0221),
        "gate_dots": FromInner(0.1106),
        "gate_numbers": Mid(-0.1327),
        "amino_acids": FromOuter(0.0531),
        "outer_ring": FromOuter(OUTER_MARGIN_RATIO),
        "inner_ring": FromInner(-INNER_MARGIN_RATIO),
    },
    fonts={
        "codon_letters": 0.1072,
        "gate_numbers": 0.0856,
        "amino_acids": 0.0708,
    },
    elements={"gate_dot": 0.0369},
)


@dataclass(frozen=True, slots=True)
class AminoRun:
    """Consecutive gates on the wheel that code for the same amino acid."""

    amino_acid: str
    gates: Tuple[int, ...]

    @property
    def element_id(self) -> str:
        name = self.amino_acid.replace(" ", "_").upper()
        return f"AMINO_-_{name}_-_{'_'.join(str(g) for g in self.gates)}"


def amino_acid_runs() -> List[AminoRun]:
    """Group the wheel into runs of one amino acid, merging across 360°/0°."""

    runs: List[Tuple[str, List[int]]] = []
    for gate in GATE_SEQUENCE:
        acid = amino_acid_of(gate)
        if runs and runs[-1][0] == acid:
            runs[-1][1].append(gate)
        else:
            runs.append((acid, [gate]))
    if len(runs) > 1 and runs[0][0] == runs[-1][0]:
        acid, tail = runs.pop()
        runs[0] = (acid, tail + runs[0][1])
    return [AminoRun(acid, tuple(gates)) for acid, gates in runs]


def _run_angle(run: AminoRun) -> float:
    return midpoint_angle(angle_of(run.gates[0]), angle_of(run.gates[-1]))


def _structure(scaled: ScaledGeometry, runs: List[AminoRun], ctx: RenderContext) -> SvgElement:
    stroke = ctx.theme.foreground
    width = ctx.theme.stroke("codon_structure", 0.8)
    center = scaled.center
    inner_ring = scaled.require("radii", "inner_ring")
    rings = SvgElement("g").set(id="RINGS").add(
        ring_circle("RING_-_OUTER", center, scaled.require("radii", "outer_ring"), stroke, width),
        ring_circle("RING_-_MIDDLE", center, scaled.outer_radius, stroke, width),
        ring_circle("RING_-_INNERMOST", center, inner_ring, stroke, width),
    )
    dividers = SvgElement("g").set(id="DIVIDERS")
    for index, run in enumerate(runs):
        following = runs[(index + 1) % len(runs)]
        boundary = midpoint_angle(angle_of(run.gates[-1]), angle_of(following.gates[0]))
        dividers.add(
            divider_line(
                f"LINE_-_{run.gates[-1]}_{following.gates[0]}",
                center,
                ctx.model.to_target_angle(boundary),
                inner_ring,
                scaled.outer_radius,
                stroke,
                ctx.theme.stroke("divider", 0.5),
            )
        )
    return SvgElement("g").set(id="GROUP_-_STRUCTURE").add(rings, dividers)


def _rotated_text(value: str, position: Point, rotation: float, **attrs: object) -> SvgElement:
    return SvgElement("text", text=value).set(
        transform=f"translate({fmt(position.x)} {fmt(position.y)}) rotate({fmt(rotation)})",
        text_anchor="middle",
        dominant_baseline="central",
        **attrs,
    )


def render_codons(ctx: RenderContext) -> SvgElement:
    scaled = compute_scaled_geometry(SOURCE.geometry, RATIOS)
    model = ctx.model
    center = scaled.center
    fill = ctx.theme.foreground
    runs = amino_acid_runs()

    group = SvgElement("g").set(id="CODON-RING")
    if ctx.include_structure:
        group.add(_structure(scaled, runs, ctx))

    content = SvgElement("g").set(id="GROUP_-_THE_CODON_RINGS")
    for run in runs:
        run_group = SvgElement("g").set(id=run.element_id)
        run_group.update({"data-amino-acid": run.amino_acid})
        for gate in run.gates:
            domain = angle_of(gate)
            rotation = model.to_tangent_rotation(model.to_target_angle(domain))
            codon = codon_of(gate)
            letters = _rotated_text(
                codon,
                model.to_position(domain, scaled.require("radii", "codon_letters"), center),
                rotation,
                id=f"TEXT_-_CODON-LETTERS_-_{gate}",
                font_size=scaled.require("fonts", "codon_letters"),
                font_family=ctx.theme.font("codon_letters", "Copperplate"),
                fill=fill,
            )
            letters.update(gate_data_attributes(gate, include_wheel_index=False))
            dot_at = model.to_position(domain, scaled.require("radii", "gate_dots"), center)
            dot = SvgElement("circle").set(
                id=f"SYMBOL_-_GATE-DOT_-_{gate}",
                cx=dot_at.x,
                cy=dot_at.y,
                r=scaled.require("elements", "gate_dot"),
                fill=fill,
            ).update({"data-gate": gate})
            number = _rotated_text(
                str(gate),
                model.to_position(domain, scaled.require("radii", "gate_numbers"), center),
                rotation,
                font_size=scaled.require("fonts", "gate_numbers"),
                font_family=ctx.theme.font("gate_numbers", "Copperplate"),
                fill=fill,
            ).update({"data-gate": gate})
            run_group.add(letters, dot, number)

        run_angle = _run_angle(run)
        run_group.add(
            _rotated_text(
                run.amino_acid,
                model.to_position(run_angle, scaled.require("radii", "amino_acids"), center),
                model.readable_rotation(model.to_target_angle(run_angle)),
                font_size=scaled.require("fonts", "amino_acids"),
                font_family=ctx.theme.font("amino_acids", "Copperplate"),
                fill=ctx.theme.highlight,
            )
        )
        content.add(run_group)
    return group.add(content)


CODONS_BAND = BandDefinition(
    name="codons",
    source=SOURCE,
    render=render_codons,
    description="Codon letters, gate dots and amino acid names",
)
