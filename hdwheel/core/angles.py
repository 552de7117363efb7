"""Angle and coordinate conversions for radial wheel layouts.

Domain angles are clockwise bearings measured from the wheel's own zero
reference (gate 41 line 1 sits at 0°). Target angles live in the SVG
coordinate space where 0° points at 3 o'clock and the y axis grows
downwards. The two are related by a single calibration offset which is
carried by :class:`WheelCalibration` so several calibrations can coexist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "POSITION_OFFSET",
    "Point",
    "WheelCalibration",
    "AngleModel",
    "DEFAULT_CALIBRATION",
    "DEFAULT_MODEL",
    "norm360",
    "signed180",
    "midpoint_angle",
    "polar_point",
    "to_target_angle",
    "to_tangent_rotation",
    "to_radial_rotation",
    "is_on_far_side",
    "readable_rotation",
    "to_position",
    "from_position",
]

# Aligns the 10|11 divider with 12 o'clock and the 25|36 divider with 9 o'clock.
POSITION_OFFSET = 323.4375


@dataclass(frozen=True, slots=True)
class Point:
    """A position in target space (y increases downwards)."""

    x: float
    y: float

    def scaled(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class WheelCalibration:
    """Immutable calibration shared by every band of one wheel instance."""

    offset: float = POSITION_OFFSET


DEFAULT_CALIBRATION = WheelCalibration()


def norm360(value: float) -> float:
    """Normalize ``value`` to ``[0, 360)``."""

    wrapped = math.fmod(value, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    # fmod of a tiny negative number can round back up to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def signed180(value: float) -> float:
    """Normalize ``value`` to ``(-180, 180]``."""

    wrapped = math.fmod(value, 360.0)
    if wrapped > 180.0:
        wrapped -= 360.0
    elif wrapped <= -180.0:
        wrapped += 360.0
    return wrapped


def polar_point(center: Point, radius: float, target_angle: float) -> Point:
    """Point at ``radius`` from ``center`` along an SVG (target) angle."""

    rad = math.radians(target_angle)
    return Point(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


def midpoint_angle(a: float, b: float) -> float:
    """Return the bisector of two domain angles.

    Pairs further than 180° apart are treated as straddling the 0°/360°
    seam, so ``midpoint_angle(358, 2)`` is ``0`` rather than ``180``.
    Inputs are normalized to ``[0, 360)`` first.
    """

    a = norm360(a)
    b = norm360(b)
    if abs(b - a) > 180.0:
        return ((a + b + 360.0) / 2.0) % 360.0
    return (a + b) / 2.0


class AngleModel:
    """Convert domain angles into SVG positions and rotations.

    Parameters
    ----------
    calibration:
        Offset configuration. Defaults to :data:`DEFAULT_CALIBRATION`.
    """

    __slots__ = ("calibration",)

    def __init__(self, calibration: WheelCalibration | None = None) -> None:
        self.calibration = calibration or DEFAULT_CALIBRATION

    def __repr__(self) -> str:
        return f"AngleModel(offset={self.calibration.offset!r})"

    @property
    def offset(self) -> float:
        return self.calibration.offset

    def to_target_angle(self, domain_angle: float) -> float:
        """Return the SVG angle for ``domain_angle``.

        The domain runs clockwise from 12 o'clock while the SVG wheel is
        mirrored and starts at 3 o'clock, hence the negation and ``-90``.
        """

        return -domain_angle - 90.0 + self.calibration.offset

    @staticmethod
    def to_tangent_rotation(target_angle: float) -> float:
        """Rotation that lays a baseline along the ring at ``target_angle``."""

        return target_angle + 90.0

    @staticmethod
    def to_radial_rotation(target_angle: float) -> float:
        """Rotation pointing an element's up axis away from the centre, in ``(-180, 180]``."""

        return signed180(target_angle + 180.0)

    @staticmethod
    def is_on_far_side(target_angle: float) -> bool:
        """Return ``True`` when naive radial text at ``target_angle`` renders upside down."""

        normalized = norm360(target_angle + 180.0)
        return 90.0 < normalized < 270.0

    @staticmethod
    def readable_rotation(target_angle: float) -> float:
        """Tangent rotation flipped by 180° where it would otherwise read upside down."""

        rotation = target_angle + 90.0
        normalized = norm360(rotation)
        if 90.0 < normalized < 270.0:
            rotation += 180.0
        return rotation

    def to_position(self, domain_angle: float, radius: float, center: Point) -> Point:
        return polar_point(center, radius, self.to_target_angle(domain_angle))

    def from_position(self, point: Point, center: Point) -> Tuple[float, float]:
        """Invert :meth:`to_position`, returning ``(domain_angle, radius)``.

        The domain angle is normalized to ``[0, 360)``. A point at the
        centre has no defined bearing and resolves to the angle whose target
        angle is zero.
        """

        dx = point.x - center.x
        dy = point.y - center.y
        radius = math.hypot(dx, dy)
        target = math.degrees(math.atan2(dy, dx))
        domain = self.calibration.offset - 90.0 - target
        return norm360(domain), radius


DEFAULT_MODEL = AngleModel(DEFAULT_CALIBRATION)


def to_target_angle(domain_angle: float) -> float:
    return DEFAULT_MODEL.to_target_angle(domain_angle)


def to_tangent_rotation(target_angle: float) -> float:
    return AngleModel.to_tangent_rotation(target_angle)


def to_radial_rotation(target_angle: float) -> float:
    return AngleModel.to_radial_rotation(target_angle)


def is_on_far_side(target_angle: float) -> bool:
    return AngleModel.is_on_far_side(target_angle)


def readable_rotation(target_angle: float) -> float:
    return AngleModel.readable_rotation(target_angle)


def to_position(domain_angle: float, radius: float, center: Point) -> Point:
    return DEFAULT_MODEL.to_position(domain_angle, radius, center)


def from_position(point: Point, center: Point) -> Tuple[float, float]:
    return DEFAULT_MODEL.from_position(point, center)
