"""Logging helpers for hdwheel command line entry points.

Placement code (snap composer, ratio scaling, band renderers) logs one
DEBUG record per band and per scaled geometry. Those records repeat what
``hdwheel summary`` already prints, so :func:`configure_logging` caps the
placement loggers at INFO unless placement tracing is requested.
"""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging", "LOG_LEVEL_ENV", "PLACEMENT_LOGGERS", "placement_level"]

LOG_LEVEL_ENV = "LOG_LEVEL"

PLACEMENT_LOGGERS = ("hdwheel.visual", "hdwheel.core.scaling", "hdwheel.bands")

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: str | int | None) -> int:
    """Return a logging level derived from ``value``.

    Level names are matched case insensitively and numeric strings are
    accepted as-is. Anything unrecognised resolves to :data:`logging.INFO`.
    """

    if value is None:
        return logging.INFO

    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return logging.INFO

    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved

    return logging.INFO


def placement_level(root_level: int, *, trace_placement: bool = False) -> int:
    """Level applied to :data:`PLACEMENT_LOGGERS` for a given root level."""

    if trace_placement:
        return root_level
    return max(root_level, logging.INFO)


def configure_logging(
    *,
    level: str | int | None = None,
    trace_placement: bool = False,
    **kwargs: Any,
) -> int:
    """Configure the root logger for wheel assembly runs.

    Parameters
    ----------
    level:
        Optional log level override. When omitted the ``LOG_LEVEL``
        environment variable is consulted. ``kwargs`` are forwarded to
        :func:`logging.basicConfig`.
    trace_placement:
        Let per-band placement DEBUG records through when the root level
        allows them. Off by default.

    Returns
    -------
    int
        The effective logging level applied to the root logger.
    """

    raw_level = os.environ.get(LOG_LEVEL_ENV) if level is None else level
    effective_level = _coerce_level(raw_level)

    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )

    capped = placement_level(effective_level, trace_placement=trace_placement)
    for name in PLACEMENT_LOGGERS:
        logging.getLogger(name).setLevel(capped)

    return effective_level
