from __future__ import annotations

import pytest

from hdwheel.bands import (
    CODONS_BAND,
    HEXAGRAMS_BAND,
    NUMBERS_BAND,
    BandRegistry,
    RenderContext,
    default_registry,
    render_band_document,
)
from hdwheel.bands.codons import SOURCE as CODON_SOURCE, amino_acid_runs
from hdwheel.bands.hexagrams import RATIOS as HEXAGRAM_RATIOS, hexagram_symbol
from hdwheel.bands.hexagrams import SOURCE as HEXAGRAM_SOURCE
from hdwheel.core.scaling import compute_scaled_geometry
from hdwheel.exceptions import UnknownBand
from hdwheel.knowledge.positioning import GATE_SEQUENCE, codon_of
from hdwheel.viz.core.theme import LIGHT_THEME


def test_default_registry_order() -> None:
    registry = default_registry()
    assert registry.names() == ["numbers", "hexagrams", "codons"]
    assert "codons" in registry
    assert len(registry) == 3
    assert [band.name for band in registry] == registry.names()


def test_registry_rejects_duplicates_and_unknown_names() -> None:
    registry = BandRegistry([NUMBERS_BAND])
    with pytest.raises(ValueError):
        registry.register(NUMBERS_BAND)
    with pytest.raises(UnknownBand) as excinfo:
        registry.resolve(["numbers", "spokes"])
    assert "Unknown band type 'spokes'" in str(excinfo.value)


def test_numbers_band_content() -> None:
    group = NUMBERS_BAND.render(RenderContext())
    assert group.attributes["id"] == "NUMBERS"

    numbers = group.find("GATE-NUMBERS")
    assert numbers is not None
    assert len(numbers.children) == 64
    first = numbers.children[0]
    assert first.text == "41"
    assert first.attributes["data-gate"] == "41"
    assert first.attributes["data-wheel-index"] == "0"
    assert first.attributes["transform"].startswith("translate(")

    dividers = group.find("DIVIDERS")
    assert dividers is not None
    assert len(dividers.children) == 64
    assert group.find("LINE_-_60_41") is not None


def test_structure_can_be_skipped() -> None:
    group = NUMBERS_BAND.render(RenderContext(include_structure=False))
    assert group.find("STRUCTURE") is None
    assert group.find("GATE-NUMBERS") is not None


def test_hexagram_lines_follow_binary() -> None:
    scaled = compute_scaled_geometry(HEXAGRAM_SOURCE.geometry, HEXAGRAM_RATIOS)

    creative = hexagram_symbol(1, scaled)
    assert [line.tag for line in creative] == ["rect"] * 6
    assert {line.attributes["data-type"] for line in creative} == {"yang"}

    receptive = hexagram_symbol(2, scaled)
    assert [line.tag for line in receptive] == ["g"] * 6
    assert all(len(line.children) == 2 for line in receptive)

    # line 1 sits lowest in the glyph, nearest the centre once rotated
    ys = [float(line.attributes["y"]) for line in creative]
    assert ys == sorted(ys, reverse=True)


def test_hexagram_band_has_one_glyph_per_gate() -> None:
    group = HEXAGRAMS_BAND.render(RenderContext())
    symbols = group.find("hexagrams")
    assert symbols is not None
    assert len(symbols.children) == 64
    glyph = group.find("gate-13")
    assert glyph is not None
    assert glyph.attributes["data-codon"] == "CAA"
    assert "rotate(" in glyph.attributes["transform"]


def test_amino_acid_runs_partition_the_wheel() -> None:
    runs = amino_acid_runs()
    gates = [gate for run in runs for gate in run.gates]
    assert sorted(gates) == list(range(1, 65))
    for current, following in zip(runs, runs[1:]):
        assert current.amino_acid != following.amino_acid
    for run in runs:
        assert run.element_id.startswith("AMINO_-_")


def test_codon_band_content() -> None:
    group = CODONS_BAND.render(RenderContext(theme=LIGHT_THEME))
    letters = group.find("TEXT_-_CODON-LETTERS_-_13")
    assert letters is not None
    assert letters.text == codon_of(13) == "CAA"
    assert letters.attributes["fill"] == LIGHT_THEME.foreground

    assert group.find("SYMBOL_-_GATE-DOT_-_41") is not None
    innermost = group.find("RING_-_INNERMOST")
    assert innermost is not None
    assert float(innermost.attributes["r"]) == pytest.approx(CODON_SOURCE.visual_inner, abs=1e-3)

    amino_labels = [
        node for node in group.iter()
        if node.tag == "text" and node.attributes.get("fill") == LIGHT_THEME.highlight
    ]
    assert len(amino_labels) == len(amino_acid_runs())


def test_standalone_band_document() -> None:
    doc = render_band_document(NUMBERS_BAND)
    svg = doc.to_string()
    assert svg.startswith("<svg")
    assert 'viewBox="0.0000 0.0000 3315.5956 3314.9734"' in svg
    assert doc.find("background") is not None
    assert doc.metadata["band"] == "numbers"

    bare = render_band_document(NUMBERS_BAND, include_background=False)
    assert bare.find("background") is None


@pytest.mark.parametrize("gate", GATE_SEQUENCE[:4])
def test_numbers_are_rendered_deterministically(gate: int) -> None:
    first = NUMBERS_BAND.render(RenderContext()).to_string()
    second = NUMBERS_BAND.render(RenderContext()).to_string()
    assert first == second
    assert f">{gate}</text>" in first
