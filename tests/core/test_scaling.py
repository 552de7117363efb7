from __future__ import annotations

import dataclasses
import math

import pytest

from hdwheel.core.angles import Point
from hdwheel.core.scaling import (
    PRESETS,
    BandGeometry,
    BandRatios,
    FromInner,
    FromOuter,
    Mid,
    RatioSet,
    coerce_ratio,
    compute_multi_band_geometry,
    compute_scaled_geometry,
    extract_font_ratios,
    extract_ratios,
    verify_ratios,
)
from hdwheel.exceptions import InvalidGeometry, InvalidRatio, MissingRatio, WheelError

CENTER = Point(1000.0, 1000.0)
BASE = BandGeometry(CENTER, 400.0, 500.0)
SCALES = (0.1, 0.5, 1.0, 2.0, 10.0)


def test_inner_anchored_text_radius_scales_with_band() -> None:
    ratios = {"radii": {"text": {"from": "inner", "offset": 0.3}}}

    at_one = compute_scaled_geometry(BASE, ratios, scale_factor=1.0)
    assert at_one.require("radii", "text") == pytest.approx(430.0)

    at_two = compute_scaled_geometry(BASE, ratios, scale_factor=2.0)
    assert at_two.band_width == pytest.approx(200.0)
    radius = at_two.require("radii", "text")
    assert radius == pytest.approx(860.0)
    assert (radius - at_two.inner_radius) / at_two.band_width == pytest.approx(0.3)
    assert at_two.center == Point(2000.0, 2000.0)


def test_center_override_is_used_verbatim() -> None:
    scaled = compute_scaled_geometry(BASE, None, scale_factor=3.0, center_override=CENTER)
    assert scaled.center == CENTER
    assert scaled.inner_radius == pytest.approx(1200.0)
    assert scaled.mid_radius == pytest.approx(1350.0)


@pytest.mark.parametrize("preset", sorted(PRESETS))
@pytest.mark.parametrize("scale", SCALES)
def test_ratios_are_scale_invariant(preset: str, scale: float) -> None:
    ratio_set = PRESETS[preset]
    scaled = compute_scaled_geometry(BASE, ratio_set, scale_factor=scale)
    width = scaled.band_width

    for name, ratio in ratio_set.radii.items():
        recovered = (scaled.radii[name] - ratio.anchor(scaled.geometry)) / width
        assert math.isclose(recovered, ratio.offset, abs_tol=1e-3)
    for name, ratio in ratio_set.fonts.items():
        assert math.isclose(scaled.fonts[name] / width, ratio, abs_tol=1e-3)
    for name, ratio in ratio_set.elements.items():
        assert math.isclose(scaled.elements[name] / width, ratio, abs_tol=1e-3)


def test_anchor_variants_resolve_against_their_edge() -> None:
    assert Mid(0.1).resolve(BASE) == pytest.approx(460.0)
    assert FromInner(-0.1).resolve(BASE) == pytest.approx(390.0)
    assert FromOuter(0.05).resolve(BASE) == pytest.approx(505.0)


def test_coerce_ratio_payloads() -> None:
    assert coerce_ratio(0.2) == Mid(0.2)
    assert coerce_ratio({"from": "outer", "offset": -0.1}) == FromOuter(-0.1)
    assert coerce_ratio({"offset": 0.3}) == Mid(0.3)
    assert coerce_ratio(FromInner(0.5)) == FromInner(0.5)
    with pytest.raises(InvalidRatio):
        coerce_ratio({"from": "edge", "offset": 0.1})
    with pytest.raises(InvalidRatio):
        coerce_ratio(True)
    with pytest.raises(InvalidRatio):
        coerce_ratio("mid")


@pytest.mark.parametrize(
    ("inner", "outer"),
    [(500.0, 400.0), (400.0, 400.0), (-1.0, 10.0), (math.nan, 10.0), (0.0, math.inf)],
)
def test_degenerate_geometry_is_rejected(inner: float, outer: float) -> None:
    with pytest.raises(InvalidGeometry):
        BandGeometry(CENTER, inner, outer)


@pytest.mark.parametrize("scale", [0.0, -1.0, math.nan])
def test_scale_factor_must_be_positive(scale: float) -> None:
    with pytest.raises(InvalidGeometry):
        compute_scaled_geometry(BASE, None, scale_factor=scale)


def test_invalid_geometry_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        BandGeometry(CENTER, 10.0, 5.0)
    assert issubclass(InvalidGeometry, WheelError)


def test_require_reports_missing_names() -> None:
    scaled = compute_scaled_geometry(BASE, PRESETS["text_ring"])
    assert scaled.require("fonts", "primary") == pytest.approx(25.0)
    with pytest.raises(MissingRatio) as excinfo:
        scaled.require("fonts", "headline")
    assert "headline" in str(excinfo.value)
    with pytest.raises(KeyError):
        scaled.require("colours", "primary")


def test_extract_ratios_per_reference() -> None:
    assert extract_ratios(BASE, {"text": 430.0}, reference="inner") == {"text": FromInner(0.3)}
    assert extract_ratios(BASE, {"text": 450.0}) == {"text": Mid(0.0)}
    assert extract_ratios(BASE, {"label": 530.0}, reference="outer") == {"label": FromOuter(0.3)}
    with pytest.raises(InvalidRatio):
        extract_ratios(BASE, {"text": 430.0}, reference="centre")


def test_extract_font_ratios_rounds_to_four_places() -> None:
    assert extract_font_ratios(75.66, {"label": 19.0}) == {"label": 0.2511}
    with pytest.raises(InvalidGeometry):
        extract_font_ratios(0.0, {"label": 19.0})


def test_verify_ratios_accepts_faithful_scaling() -> None:
    expected = PRESETS["complex_ring"]
    scaled = compute_scaled_geometry(BASE, expected, scale_factor=2.5)
    check = verify_ratios(scaled, expected)
    assert check.valid
    assert check.errors == ()


def test_verify_ratios_reports_drift_and_missing_values() -> None:
    expected = PRESETS["complex_ring"]
    scaled = compute_scaled_geometry(BASE, expected)
    radii = dict(scaled.radii)
    radii["dots"] += 1.0
    del radii["outer_text"]
    fonts = dict(scaled.fonts)
    fonts["mid"] *= 2
    tampered = dataclasses.replace(scaled, radii=radii, fonts=fonts)

    check = verify_ratios(tampered, expected)
    assert not check.valid
    assert any(error.startswith("Radius dots: expected") for error in check.errors)
    assert "Missing radius: outer_text" in check.errors
    assert any(error.startswith("Font mid: expected") for error in check.errors)


def test_ratio_set_from_mapping() -> None:
    ratio_set = RatioSet.from_mapping(
        {
            "radii": {"a": 0.1, "b": {"from": "inner", "offset": 0.2}},
            "fonts": {"label": 0.25},
        }
    )
    assert ratio_set.radii == {"a": Mid(0.1), "b": FromInner(0.2)}
    assert ratio_set.fonts == {"label": 0.25}
    with pytest.raises(InvalidRatio):
        RatioSet.from_mapping({"radii": [0.1]})


def test_multi_band_geometry() -> None:
    multi = compute_multi_band_geometry(
        Point(100.0, 100.0),
        {"names": (100.0, 200.0), "keys": (200.0, 260.0)},
        {"names": BandRatios(text_position_ratio=0.25, font_ratio=0.1, line_height_ratio=1.5)},
        scale_factor=2.0,
    )
    assert multi.center == Point(200.0, 200.0)

    names = multi["names"]
    assert names.inner_radius == pytest.approx(200.0)
    assert names.text_radius == pytest.approx(250.0)
    assert names.font_size == pytest.approx(20.0)
    assert names.line_height == pytest.approx(30.0)

    keys = multi["keys"]
    assert keys.text_radius == pytest.approx(keys.mid_radius)
    assert keys.font_size == pytest.approx(120.0 * 0.25)
    assert keys.line_height == pytest.approx(keys.font_size * 0.9)

    with pytest.raises(MissingRatio):
        multi["elsewhere"]


def test_multi_band_geometry_validates_each_band() -> None:
    with pytest.raises(InvalidGeometry):
        compute_multi_band_geometry(CENTER, {"bad": (300.0, 200.0)})
