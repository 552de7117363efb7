"""Process bootstrap helpers (logging) for hdwheel entry points."""

from .logging import PLACEMENT_LOGGERS, configure_logging

__all__ = ["PLACEMENT_LOGGERS", "configure_logging"]
