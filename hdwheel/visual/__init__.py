"""Wheel composition: snap placement, assembly and export."""

from .assembler import (
    STANDARD_WHEEL,
    AssemblyConfig,
    WheelAssembly,
    assemble_rings,
    assemble_standard_wheel,
    export_wheel,
    plan_wheel,
    render_preview_png,
)
from .snap import (
    BandTransform,
    Placement,
    ViewBox,
    canvas_viewbox,
    compute_snap_placements,
    compute_transform,
    snap_summary,
)

__all__ = [
    "AssemblyConfig",
    "BandTransform",
    "Placement",
    "STANDARD_WHEEL",
    "ViewBox",
    "WheelAssembly",
    "assemble_rings",
    "assemble_standard_wheel",
    "canvas_viewbox",
    "compute_snap_placements",
    "compute_transform",
    "export_wheel",
    "plan_wheel",
    "render_preview_png",
    "snap_summary",
]
