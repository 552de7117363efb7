"""Configuration helpers exposed at :mod:`hdwheel.config`."""

from __future__ import annotations

from .settings import (
    AssemblyCfg,
    CalibrationCfg,
    Settings,
    ThemeCfg,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "AssemblyCfg",
    "CalibrationCfg",
    "Settings",
    "ThemeCfg",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "save_settings",
]
