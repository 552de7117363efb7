"""Ratio based proportional scaling for annular bands.

Every element inside a band is described relative to the band width so it
keeps its relative position and size when the band is rescaled. Absolute
radii and sizes are derived values only: the ratios are the source of truth.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidGeometry, InvalidRatio, MissingRatio
from .angles import Point

LOG = logging.getLogger(__name__)

__all__ = [
    "BandGeometry",
    "Mid",
    "FromInner",
    "FromOuter",
    "RadiusRatio",
    "coerce_ratio",
    "RatioSet",
    "ScaledGeometry",
    "BandRatios",
    "SubBand",
    "MultiBandGeometry",
    "RatioCheck",
    "compute_scaled_geometry",
    "compute_multi_band_geometry",
    "extract_ratios",
    "extract_font_ratios",
    "verify_ratios",
    "PRESETS",
    "DEFAULT_FONT_RATIO",
    "DEFAULT_LINE_HEIGHT_RATIO",
]

DEFAULT_FONT_RATIO = 0.25
DEFAULT_LINE_HEIGHT_RATIO = 0.9


def _require_finite(name: str, value: float) -> float:
    numeric = float(value)
    if not math.isfinite(numeric):
        raise InvalidGeometry(f"{name} must be finite, got {value!r}")
    return numeric


@dataclass(frozen=True, slots=True)
class BandGeometry:
    """Nominal geometry of one annulus.

    ``band_width`` and ``mid_radius`` are derived on access so they can
    never disagree with the radii.
    """

    center: Point
    inner_radius: float
    outer_radius: float

    def __post_init__(self) -> None:
        inner = _require_finite("inner_radius", self.inner_radius)
        outer = _require_finite("outer_radius", self.outer_radius)
        _require_finite("center.x", self.center.x)
        _require_finite("center.y", self.center.y)
        if inner < 0:
            raise InvalidGeometry(f"inner_radius must be >= 0, got {inner}")
        if inner >= outer:
            raise InvalidGeometry(
                f"inner_radius ({inner}) must be smaller than outer_radius ({outer})"
            )

    @property
    def band_width(self) -> float:
        return self.outer_radius - self.inner_radius

    @property
    def mid_radius(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2.0

    def scaled(self, factor: float, center: Optional[Point] = None) -> "BandGeometry":
        """Return the geometry scaled about the origin, optionally re-centred."""

        return BandGeometry(
            center=center if center is not None else self.center.scaled(factor),
            inner_radius=self.inner_radius * factor,
            outer_radius=self.outer_radius * factor,
        )


# -------------------- Radius ratios --------------------


@dataclass(frozen=True, slots=True)
class Mid:
    """Radius measured from the band's mid radius, in band widths."""

    offset: float = 0.0
    anchor_name: ClassVar[str] = "mid"

    def anchor(self, geometry: BandGeometry) -> float:
        return geometry.mid_radius

    def resolve(self, geometry: BandGeometry) -> float:
        return self.anchor(geometry) + geometry.band_width * self.offset


@dataclass(frozen=True, slots=True)
class FromInner:
    """Radius measured from the inner edge, in band widths."""

    offset: float = 0.0
    anchor_name: ClassVar[str] = "inner"

    def anchor(self, geometry: BandGeometry) -> float:
        return geometry.inner_radius

    def resolve(self, geometry: BandGeometry) -> float:
        return self.anchor(geometry) + geometry.band_width * self.offset


@dataclass(frozen=True, slots=True)
class FromOuter:
    """Radius measured from the outer edge, in band widths."""

    offset: float = 0.0
    anchor_name: ClassVar[str] = "outer"

    def anchor(self, geometry: BandGeometry) -> float:
        return geometry.outer_radius

    def resolve(self, geometry: BandGeometry) -> float:
        return self.anchor(geometry) + geometry.band_width * self.offset


RadiusRatio = Union[Mid, FromInner, FromOuter]

_ANCHORS: Dict[str, type] = {"mid": Mid, "inner": FromInner, "outer": FromOuter}


def coerce_ratio(value: object) -> RadiusRatio:
    """Return a :data:`RadiusRatio` for ``value``.

    Bare numbers are mid-anchored offsets. Mappings of the form
    ``{"from": "inner", "offset": 0.3}`` are accepted so ratio sets can be
    loaded from YAML or JSON payloads.
    """

    if isinstance(value, (Mid, FromInner, FromOuter)):
        return value
    if isinstance(value, bool):
        raise InvalidRatio(f"radius ratio must be numeric, got {value!r}")
    if isinstance(value, (int, float)):
        return Mid(float(value))
    if isinstance(value, Mapping):
        anchor = str(value.get("from", "mid")).lower()
        try:
            kind = _ANCHORS[anchor]
        except KeyError as exc:
            raise InvalidRatio(
                f"unknown ratio anchor '{anchor}' (expected one of {sorted(_ANCHORS)})"
            ) from exc
        return kind(float(value.get("offset", 0.0)))
    raise InvalidRatio(f"unsupported radius ratio payload: {value!r}")


@dataclass(frozen=True)
class RatioSet:
    """Named ratios describing where elements sit inside a band."""

    radii: Mapping[str, RadiusRatio] = field(default_factory=dict)
    fonts: Mapping[str, float] = field(default_factory=dict)
    elements: Mapping[str, float] = field(default_factory=dict)
    line_heights: Mapping[str, float] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "RatioSet":
        radii = payload.get("radii") or {}
        if not isinstance(radii, Mapping):
            raise InvalidRatio("'radii' must be a mapping")
        return cls(
            radii={str(name): coerce_ratio(value) for name, value in radii.items()},
            fonts=_float_map(payload.get("fonts")),
            elements=_float_map(payload.get("elements")),
            line_heights=_float_map(payload.get("line_heights")),
        )


def _float_map(value: object) -> Dict[str, float]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidRatio(f"expected a mapping of ratios, got {value!r}")
    return {str(name): float(ratio) for name, ratio in value.items()}


@dataclass(frozen=True)
class ScaledGeometry:
    """Absolute values derived from a :class:`RatioSet` for one scale factor."""

    geometry: BandGeometry
    scale_factor: float
    radii: Mapping[str, float] = field(default_factory=dict)
    fonts: Mapping[str, float] = field(default_factory=dict)
    elements: Mapping[str, float] = field(default_factory=dict)
    line_heights: Mapping[str, float] = field(default_factory=dict)

    @property
    def center(self) -> Point:
        return self.geometry.center

    @property
    def inner_radius(self) -> float:
        return self.geometry.inner_radius

    @property
    def outer_radius(self) -> float:
        return self.geometry.outer_radius

    @property
    def band_width(self) -> float:
        return self.geometry.band_width

    @property
    def mid_radius(self) -> float:
        return self.geometry.mid_radius

    def require(self, kind: str, name: str) -> float:
        """Return the named value from ``radii``/``fonts``/``elements``/``line_heights``."""

        table = getattr(self, kind, None)
        if not isinstance(table, Mapping):
            raise MissingRatio(f"unknown ratio table '{kind}'")
        try:
            return table[name]
        except KeyError as exc:
            raise MissingRatio(f"missing {kind} ratio '{name}'") from exc


def _as_ratio_set(ratios: RatioSet | Mapping[str, object] | None) -> RatioSet:
    if ratios is None:
        return RatioSet()
    if isinstance(ratios, RatioSet):
        return ratios
    return RatioSet.from_mapping(ratios)


def _check_scale(scale_factor: float) -> float:
    factor = _require_finite("scale_factor", scale_factor)
    if factor <= 0:
        raise InvalidGeometry(f"scale_factor must be > 0, got {factor}")
    return factor


def compute_scaled_geometry(
    base: BandGeometry,
    ratios: RatioSet | Mapping[str, object] | None = None,
    scale_factor: float = 1.0,
    center_override: Optional[Point] = None,
) -> ScaledGeometry:
    """Scale ``base`` by ``scale_factor`` and resolve every ratio in ``ratios``.

    Parameters
    ----------
    base:
        Reference geometry (usually the master artwork's measurements).
    ratios:
        Radius, font, element and line height ratios.
    scale_factor:
        Uniform multiplier applied to both radii and, unless
        ``center_override`` is supplied, to the centre.
    center_override:
        Explicit centre for the scaled band.

    Returns
    -------
    ScaledGeometry
        Absolute radii and sizes for the scaled band.
    """

    factor = _check_scale(scale_factor)
    ratio_set = _as_ratio_set(ratios)
    geometry = base.scaled(factor, center_override)
    width = geometry.band_width

    radii = {name: coerce_ratio(ratio).resolve(geometry) for name, ratio in ratio_set.radii.items()}
    scaled = ScaledGeometry(
        geometry=geometry,
        scale_factor=factor,
        radii=radii,
        fonts={name: width * ratio for name, ratio in ratio_set.fonts.items()},
        elements={name: width * ratio for name, ratio in ratio_set.elements.items()},
        line_heights={name: width * ratio for name, ratio in ratio_set.line_heights.items()},
    )
    LOG.debug(
        "scaled band inner=%.4f outer=%.4f factor=%s (%d radii, %d fonts)",
        geometry.inner_radius,
        geometry.outer_radius,
        factor,
        len(radii),
        len(scaled.fonts),
    )
    return scaled


# -------------------- Multi-band geometry --------------------


@dataclass(frozen=True, slots=True)
class BandRatios:
    """Per sub-band ratios for :func:`compute_multi_band_geometry`."""

    text_position_ratio: Optional[float] = None
    font_ratio: Optional[float] = None
    line_height_ratio: Optional[float] = None


@dataclass(frozen=True, slots=True)
class SubBand:
    geometry: BandGeometry
    text_radius: float
    font_size: float
    line_height: float

    @property
    def inner_radius(self) -> float:
        return self.geometry.inner_radius

    @property
    def outer_radius(self) -> float:
        return self.geometry.outer_radius

    @property
    def band_width(self) -> float:
        return self.geometry.band_width

    @property
    def mid_radius(self) -> float:
        return self.geometry.mid_radius


@dataclass(frozen=True)
class MultiBandGeometry:
    center: Point
    scale_factor: float
    bands: Mapping[str, SubBand]

    def __getitem__(self, name: str) -> SubBand:
        try:
            return self.bands[name]
        except KeyError as exc:
            raise MissingRatio(f"unknown sub-band '{name}'") from exc


def compute_multi_band_geometry(
    center: Point,
    bands: Mapping[str, Tuple[float, float]],
    band_ratios: Mapping[str, BandRatios] | None = None,
    scale_factor: float = 1.0,
    center_override: Optional[Point] = None,
    default_font_ratio: float = DEFAULT_FONT_RATIO,
) -> MultiBandGeometry:
    """Resolve several nested sub-bands sharing one centre.

    ``bands`` maps a sub-band name to its ``(inner, outer)`` radii. Each
    sub-band places its text at ``inner + width * text_position_ratio``
    (mid radius when unset) with a font of ``width * font_ratio``.
    """

    factor = _check_scale(scale_factor)
    resolved_center = center_override if center_override is not None else center.scaled(factor)
    band_ratios = band_ratios or {}

    resolved: Dict[str, SubBand] = {}
    for name, (inner, outer) in bands.items():
        geometry = BandGeometry(resolved_center, inner * factor, outer * factor)
        ratios = band_ratios.get(name, BandRatios())
        width = geometry.band_width
        if ratios.text_position_ratio is None:
            text_radius = geometry.mid_radius
        else:
            text_radius = geometry.inner_radius + width * ratios.text_position_ratio
        font_ratio = default_font_ratio if ratios.font_ratio is None else ratios.font_ratio
        font_size = width * font_ratio
        line_ratio = (
            DEFAULT_LINE_HEIGHT_RATIO
            if ratios.line_height_ratio is None
            else ratios.line_height_ratio
        )
        resolved[name] = SubBand(geometry, text_radius, font_size, font_size * line_ratio)

    return MultiBandGeometry(center=resolved_center, scale_factor=factor, bands=resolved)


# -------------------- Ratio extraction and verification --------------------


def extract_ratios(
    geometry: BandGeometry,
    absolute_values: Mapping[str, float],
    reference: str = "mid",
) -> Dict[str, RadiusRatio]:
    """Convert absolute radii into ratios anchored on ``reference``.

    Offsets are rounded to four decimals, which is the precision the
    master artwork measurements carry.
    """

    try:
        kind = _ANCHORS[reference]
    except KeyError as exc:
        raise InvalidRatio(f"unknown reference '{reference}'") from exc
    anchor = kind().anchor(geometry)
    width = geometry.band_width
    return {
        name: kind(round((float(value) - anchor) / width, 4))
        for name, value in absolute_values.items()
    }


def extract_font_ratios(band_width: float, fonts: Mapping[str, float]) -> Dict[str, float]:
    if band_width <= 0:
        raise InvalidGeometry(f"band_width must be > 0, got {band_width}")
    return {name: round(float(size) / band_width, 4) for name, size in fonts.items()}


@dataclass(frozen=True, slots=True)
class RatioCheck:
    valid: bool
    errors: Tuple[str, ...] = ()


def verify_ratios(
    scaled: ScaledGeometry,
    expected: RatioSet | Mapping[str, object],
    tolerance: float = 0.001,
) -> RatioCheck:
    """Check that ``scaled`` still honours the ``expected`` ratios."""

    ratio_set = _as_ratio_set(expected)
    errors: List[str] = []

    for name, ratio in ratio_set.radii.items():
        actual = scaled.radii.get(name)
        if actual is None:
            errors.append(f"Missing radius: {name}")
            continue
        target = coerce_ratio(ratio).resolve(scaled.geometry)
        if abs(actual - target) > tolerance:
            errors.append(f"Radius {name}: expected {target:.4f}, got {actual:.4f}")

    for label, wanted, actual_map in (
        ("Font", ratio_set.fonts, scaled.fonts),
        ("Element", ratio_set.elements, scaled.elements),
        ("Line height", ratio_set.line_heights, scaled.line_heights),
    ):
        for name, ratio in wanted.items():
            actual = actual_map.get(name)
            if actual is None:
                errors.append(f"Missing {label.lower()}: {name}")
                continue
            target = scaled.band_width * ratio
            if abs(actual - target) > tolerance:
                errors.append(f"{label} {name}: expected {target:.4f}, got {actual:.4f}")

    return RatioCheck(valid=not errors, errors=tuple(errors))


# -------------------- Presets --------------------

PRESETS: Dict[str, RatioSet] = {
    # single text band such as gate numbers or names
    "text_ring": RatioSet(
        radii={"text_radius": Mid(0.0)},
        fonts={"primary": 0.25, "small": 0.20},
        line_heights={"primary": 0.20},
    ),
    "symbol_ring": RatioSet(
        radii={"symbol_center": Mid(0.0)},
        elements={"symbol_width": 0.35, "line_height": 0.04},
    ),
    # several stacked layers, codon style
    "complex_ring": RatioSet(
        radii={
            "inner_text": FromInner(-0.02),
            "dots": FromInner(0.11),
            "mid_text": Mid(-0.13),
            "outer_text": FromOuter(0.05),
        },
        fonts={"inner": 0.107, "mid": 0.086, "outer": 0.071},
        elements={"dot_radius": 0.037},
    ),
}
