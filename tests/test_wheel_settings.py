from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from hdwheel.config import (
    AssemblyCfg,
    CalibrationCfg,
    Settings,
    ThemeCfg,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)
from hdwheel.core.angles import POSITION_OFFSET
from hdwheel.visual import STANDARD_WHEEL


@pytest.fixture()
def wheel_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("HDWHEEL_HOME", str(home))
    return home


def test_defaults_match_standard_wheel() -> None:
    settings = default_settings()
    assert settings.schema_version == 1
    assert settings.calibration.to_runtime().offset == POSITION_OFFSET
    assert settings.assembly.to_runtime() == STANDARD_WHEEL
    assert settings.theme.to_runtime().identifier == "standard"


def test_field_clamps() -> None:
    assert AssemblyCfg(padding=-5).padding == 0.0
    assert AssemblyCfg(padding=9000).padding == 500.0
    assert AssemblyCfg(start_radius=0).start_radius == 1.0
    assert AssemblyCfg(uniform_scale=-1).uniform_scale is None
    assert AssemblyCfg(uniform_scale=0.5).uniform_scale == 0.5
    assert CalibrationCfg(offset=683.4375).offset == pytest.approx(323.4375)
    assert ThemeCfg(stroke_width=50).stroke_width == 10.0


def test_theme_overrides_apply() -> None:
    theme = ThemeCfg(identifier="light", highlight="#00ff00", stroke_width=1.5).to_runtime()
    assert theme.identifier == "light"
    assert theme.highlight == "#00ff00"
    assert set(theme.strokes.values()) == {1.5}
    with pytest.raises(KeyError):
        ThemeCfg(identifier="neon").to_runtime()


def test_config_home_follows_environment(wheel_home: Path) -> None:
    assert get_config_home() == wheel_home
    path = config_path()
    assert path == wheel_home / "config.yaml"
    assert wheel_home.is_dir()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "wheel.yaml"
    settings = Settings(assembly=AssemblyCfg(padding=3.0, rings=["numbers", "codons"]))
    save_settings(settings, target)

    loaded = load_settings(target)
    assert loaded.assembly.padding == 3.0
    assert loaded.assembly.to_runtime().rings == ("numbers", "codons")


def test_load_creates_defaults_when_missing(wheel_home: Path) -> None:
    settings = load_settings()
    assert settings == default_settings()
    assert (wheel_home / "config.yaml").exists()


def test_legacy_payload_is_upgraded(tmp_path: Path) -> None:
    target = tmp_path / "legacy.yaml"
    target.write_text(yaml.safe_dump({"assembly": {"padding": 2}}), encoding="utf-8")

    settings = load_settings(target)
    assert settings.schema_version == 1
    assert settings.assembly.padding == 2.0
    on_disk = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert on_disk["schema_version"] == 1


def test_malformed_payload_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "broken.yaml"
    target.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(target).assembly == AssemblyCfg()
