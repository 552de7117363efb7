from __future__ import annotations

import pytest

from hdwheel.core.angles import Point
from hdwheel.core.scaling import BandGeometry
from hdwheel.core.text import GATE_ARC_DEGREES, TEXT_RATIOS, calculate_text_config


def test_text_config_for_hundred_unit_band() -> None:
    config = calculate_text_config(BandGeometry(Point(0.0, 0.0), 450.0, 550.0))

    assert GATE_ARC_DEGREES == pytest.approx(5.625)
    assert config.band_width == pytest.approx(100.0)
    assert config.arc_length == pytest.approx(49.0874, abs=1e-4)
    assert config.standard_font_size == pytest.approx(25.11)
    assert config.line_height == pytest.approx(20.64)
    assert config.vertical_scale == TEXT_RATIOS.vertical_scale
    assert config.chars_per_line == 2
    assert config.max_lines == 3


@pytest.mark.parametrize(
    ("length", "multiplier"),
    [(14, 0.792), (13, 0.792), (12, 0.875), (11, 0.916), (10, 1.0), (3, 1.0)],
)
def test_long_words_shrink(length: int, multiplier: float) -> None:
    config = calculate_text_config(BandGeometry(Point(0.0, 0.0), 450.0, 550.0))
    assert config.font_size_for("x" * length) == pytest.approx(25.11 * multiplier)


def test_text_ratio_defaults() -> None:
    assert TEXT_RATIOS.long_word_multipliers == {13: 0.792, 12: 0.875, 11: 0.916}
    assert TEXT_RATIOS.font_size_to_band_width == 0.2511
