"""hdwheel: proportional layout of concentric bands on a radial wheel."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("hdwheel")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved hdwheel package version."""

    return __version__


__all__ = ["__version__", "get_version"]
