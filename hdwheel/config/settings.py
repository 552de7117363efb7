"""Configuration models and helpers for hdwheel settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..core.angles import POSITION_OFFSET, Point, WheelCalibration
from ..viz.core.theme import STANDARD_THEME, WheelTheme, default_theme_manager
from ..visual.assembler import STANDARD_RINGS, AssemblyConfig
from ..visual.snap import DEFAULT_VIEW_PADDING

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1
CONFIG_FILENAME = "config.yaml"
HOME_ENV = "HDWHEEL_HOME"

# -------------------- Settings Schema --------------------


class CalibrationCfg(BaseModel):
    """Offset between the domain angle and the screen angle."""

    offset: float = POSITION_OFFSET

    @field_validator("offset", mode="before")
    @classmethod
    def _wrap_offset(cls, value: float) -> float:
        return float(value) % 360.0

    def to_runtime(self) -> WheelCalibration:
        return WheelCalibration(offset=self.offset)


class ThemeCfg(BaseModel):
    """Colour overrides applied on top of a registered theme."""

    identifier: str = STANDARD_THEME.identifier
    background: Optional[str] = None
    foreground: Optional[str] = None
    highlight: Optional[str] = None
    stroke_width: Optional[float] = None

    @field_validator("stroke_width", mode="before")
    @classmethod
    def _cap_stroke_width(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return max(0.1, min(10.0, float(value)))

    def to_runtime(self) -> WheelTheme:
        theme = default_theme_manager().get(self.identifier)
        theme = theme.with_colors(
            background=self.background,
            foreground=self.foreground,
            highlight=self.highlight,
        )
        if self.stroke_width is not None:
            strokes = {token: self.stroke_width for token in theme.strokes}
            theme = replace(theme, strokes=strokes)
        return theme


class AssemblyCfg(BaseModel):
    """Where and how the bands of the standard wheel are stacked."""

    center_x: float = 1000.0
    center_y: float = 1000.0
    start_radius: float = 400.0
    padding: float = 0.0
    uniform_scale: Optional[float] = None
    rings: List[str] = Field(default_factory=lambda: list(STANDARD_RINGS))
    include_background: bool = True
    view_padding: float = DEFAULT_VIEW_PADDING

    @field_validator("start_radius", mode="before")
    @classmethod
    def _cap_start_radius(cls, value: float) -> float:
        return max(1.0, float(value))

    @field_validator("padding", mode="before")
    @classmethod
    def _cap_padding(cls, value: float) -> float:
        return max(0.0, min(500.0, float(value)))

    @field_validator("view_padding", mode="before")
    @classmethod
    def _cap_view_padding(cls, value: float) -> float:
        return max(0.0, float(value))

    @field_validator("uniform_scale", mode="before")
    @classmethod
    def _drop_non_positive_scale(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        numeric = float(value)
        return numeric if numeric > 0 else None

    def to_runtime(self) -> AssemblyConfig:
        return AssemblyConfig(
            center=Point(self.center_x, self.center_y),
            start_radius=self.start_radius,
            padding=self.padding,
            rings=tuple(self.rings),
            uniform_scale=self.uniform_scale,
            include_background=self.include_background,
            view_padding=self.view_padding,
        )


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    calibration: CalibrationCfg = Field(default_factory=CalibrationCfg)
    theme: ThemeCfg = Field(default_factory=ThemeCfg)
    assembly: AssemblyCfg = Field(default_factory=AssemblyCfg)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get(HOME_ENV, str(Path.home() / ".hdwheel")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    LOG.debug("saved settings to %s", target_path)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Bring older payloads up to the current schema version."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < CURRENT_SETTINGS_SCHEMA_VERSION:
        version = CURRENT_SETTINGS_SCHEMA_VERSION
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("ignoring malformed settings file %s", source_path)
        raw = {}
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target


__all__ = [
    "AssemblyCfg",
    "CalibrationCfg",
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "Settings",
    "ThemeCfg",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "save_settings",
]
