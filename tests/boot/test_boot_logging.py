from __future__ import annotations

import logging

import pytest

from hdwheel.boot.logging import PLACEMENT_LOGGERS, configure_logging, placement_level
from hdwheel.cli import main


@pytest.fixture(autouse=True)
def restore_logging(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("HDWHEEL_HOME", str(tmp_path / "home"))
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    levels = {name: logging.getLogger(name).level for name in PLACEMENT_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_debug_root_keeps_placement_loggers_at_info() -> None:
    assert configure_logging(level="debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    snap = logging.getLogger("hdwheel.visual.snap")
    assert snap.getEffectiveLevel() == logging.INFO
    assert not snap.isEnabledFor(logging.DEBUG)
    assert logging.getLogger("hdwheel.config.settings").isEnabledFor(logging.DEBUG)


def test_trace_placement_lets_debug_records_through() -> None:
    configure_logging(level=logging.DEBUG, trace_placement=True)
    for name in PLACEMENT_LOGGERS:
        assert logging.getLogger(name).isEnabledFor(logging.DEBUG)


def test_quieter_root_level_is_not_raised() -> None:
    configure_logging(level="WARNING")
    assert logging.getLogger("hdwheel.core.scaling").getEffectiveLevel() == logging.WARNING


def test_level_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert configure_logging() == logging.ERROR
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert configure_logging() == logging.INFO


@pytest.mark.parametrize(
    ("root", "trace", "expected"),
    [
        (logging.DEBUG, False, logging.INFO),
        (logging.DEBUG, True, logging.DEBUG),
        (logging.ERROR, False, logging.ERROR),
    ],
)
def test_placement_level(root: int, trace: bool, expected: int) -> None:
    assert placement_level(root, trace_placement=trace) == expected


def test_cli_summary_suppresses_placement_debug(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "DEBUG", "summary"]) == 0
    assert capsys.readouterr().out.startswith("Ring Assembly - Snap Placement Summary")
    assert not logging.getLogger("hdwheel.visual.snap").isEnabledFor(logging.DEBUG)


def test_cli_trace_placement_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "DEBUG", "--trace-placement", "summary"]) == 0
    capsys.readouterr()
    assert logging.getLogger("hdwheel.visual.snap").isEnabledFor(logging.DEBUG)
