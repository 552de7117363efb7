"""Error taxonomy shared by the wheel layout engine."""

from __future__ import annotations

__all__ = [
    "WheelError",
    "InvalidGeometry",
    "InvalidRatio",
    "MissingRatio",
    "UnknownBand",
]


class WheelError(Exception):
    """Base class for every error raised by :mod:`hdwheel`."""


class InvalidGeometry(WheelError, ValueError):
    """Raised when band radii, margins or scale factors cannot describe a ring."""


class InvalidRatio(WheelError, ValueError):
    """Raised when a ratio payload does not name a known anchor."""


class MissingRatio(WheelError, KeyError):
    """Raised when a named radius, font or element ratio is not configured."""

    def __str__(self) -> str:  # KeyError quotes its argument by default
        return str(self.args[0]) if self.args else ""


class UnknownBand(WheelError, KeyError):
    """Raised when a composition references a band that is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
