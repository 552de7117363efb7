"""Layout core: angle model, proportional scaling and text sizing."""

from .angles import (
    DEFAULT_CALIBRATION,
    POSITION_OFFSET,
    AngleModel,
    Point,
    WheelCalibration,
    from_position,
    is_on_far_side,
    midpoint_angle,
    norm360,
    polar_point,
    readable_rotation,
    to_position,
    to_radial_rotation,
    to_tangent_rotation,
    to_target_angle,
)
from .extent import BandSource, VisualExtent
from .scaling import (
    PRESETS,
    BandGeometry,
    BandRatios,
    FromInner,
    FromOuter,
    Mid,
    RadiusRatio,
    RatioSet,
    ScaledGeometry,
    compute_multi_band_geometry,
    compute_scaled_geometry,
    extract_font_ratios,
    extract_ratios,
    verify_ratios,
)
from .text import TEXT_RATIOS, TextConfig, calculate_text_config

__all__ = [
    "AngleModel",
    "BandGeometry",
    "BandRatios",
    "BandSource",
    "DEFAULT_CALIBRATION",
    "FromInner",
    "FromOuter",
    "Mid",
    "POSITION_OFFSET",
    "PRESETS",
    "Point",
    "RadiusRatio",
    "RatioSet",
    "ScaledGeometry",
    "TEXT_RATIOS",
    "TextConfig",
    "WheelCalibration",
    "calculate_text_config",
    "compute_multi_band_geometry",
    "compute_scaled_geometry",
    "extract_font_ratios",
    "extract_ratios",
    "from_position",
    "is_on_far_side",
    "midpoint_angle",
    "norm360",
    "polar_point",
    "readable_rotation",
    "to_position",
    "to_radial_rotation",
    "to_tangent_rotation",
    "to_target_angle",
    "verify_ratios",
    "VisualExtent",
]
