from __future__ import annotations

import dataclasses

import pytest

from hdwheel.core.angles import Point, WheelCalibration
from hdwheel.exceptions import InvalidGeometry, UnknownBand
from hdwheel.visual import (
    STANDARD_WHEEL,
    AssemblyConfig,
    assemble_rings,
    assemble_standard_wheel,
    compute_transform,
    export_wheel,
    plan_wheel,
)
from hdwheel.viz.core.theme import LIGHT_THEME


def test_standard_wheel_wraps_each_band() -> None:
    assembly = assemble_standard_wheel()

    assert [placed.band.name for placed in assembly.bands] == ["numbers", "hexagrams", "codons"]
    for placed in assembly.bands:
        wrapper = assembly.document.find(f"{placed.band.name}-ring")
        assert wrapper is not None
        expected = compute_transform(
            placed.band.source.center, STANDARD_WHEEL.center, placed.placement.scale
        )
        assert wrapper.attributes["transform"] == expected.to_svg()

    assert assembly.document.find("background") is not None
    assert assembly.document.find("CODON-RING") is not None
    assert assembly.placements[0].visual_inner == pytest.approx(400.0)


def test_viewbox_is_centered_on_wheel() -> None:
    assembly = assemble_standard_wheel(center=Point(500.0, 500.0))
    viewbox = assembly.viewbox
    assert viewbox.x + viewbox.width / 2 == pytest.approx(500.0)
    assert viewbox.y + viewbox.height / 2 == pytest.approx(500.0)
    assert viewbox.width / 2 == pytest.approx(assembly.placements[-1].visual_outer + 50.0)
    assert f'viewBox="{viewbox.to_svg()}"' in assembly.to_svg()


def test_unknown_band_fails_before_rendering() -> None:
    config = AssemblyConfig(rings=("numbers", "spokes"))
    with pytest.raises(UnknownBand):
        assemble_rings(config)
    with pytest.raises(KeyError):
        plan_wheel(config)


def test_empty_ring_list_is_rejected() -> None:
    with pytest.raises(InvalidGeometry):
        assemble_rings(AssemblyConfig(rings=()))


def test_subset_and_options() -> None:
    config = AssemblyConfig(
        rings=("hexagrams",),
        include_background=False,
        include_structure=False,
    )
    assembly = assemble_rings(config, theme=LIGHT_THEME)
    assert len(assembly.bands) == 1
    assert assembly.document.find("background") is None
    assert assembly.document.find("STRUCTURE") is None
    assert assembly.document.metadata["theme"] == "light"


def test_calibration_changes_rendered_positions() -> None:
    config = AssemblyConfig(rings=("numbers",))
    default_svg = assemble_rings(config).to_svg()
    shifted_svg = assemble_rings(config, calibration=WheelCalibration(offset=0.0)).to_svg()
    assert default_svg != shifted_svg


def test_plan_wheel_matches_assembly() -> None:
    config = dataclasses.replace(STANDARD_WHEEL, padding=4.0)
    assembly = assemble_rings(config)
    assert plan_wheel(config) == assembly.placements


def test_summary_lists_every_band() -> None:
    summary = assemble_standard_wheel(padding=2.0).summary()
    assert "1. NUMBERS" in summary
    assert "3. CODONS" in summary
    assert "Padding between rings: 2" in summary


def test_export_formats() -> None:
    assembly = assemble_standard_wheel()
    assert export_wheel(assembly, "svg").startswith(b"<svg")
    assert export_wheel(assembly, "PNG", size=200).startswith(b"\x89PNG")
    with pytest.raises(ValueError, match="Unsupported format"):
        export_wheel(assembly, "pdf")
