from __future__ import annotations

import pytest

from pyrecords.config import RecordsConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "PYRECORDS_SNAPSHOT_PATH",
        "PYRECORDS_SNAPSHOT_INDENT",
        "PYRECORDS_SCORES_PATH",
        "PYRECORDS_REPORT_PATH",
        "PYRECORDS_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)

    config = RecordsConfig.from_env()

    assert config == RecordsConfig()
    assert config.snapshot_path == "inventory.json"


def test_env_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYRECORDS_SNAPSHOT_PATH", "/tmp/snap.json")
    monkeypatch.setenv("PYRECORDS_SNAPSHOT_INDENT", "4")
    monkeypatch.setenv("PYRECORDS_VERBOSE", "yes")

    config = RecordsConfig.from_env()

    assert config.snapshot_path == "/tmp/snap.json"
    assert config.snapshot_indent == 4
    assert config.verbose is True


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYRECORDS_REPORT_PATH", "env-report.txt")
    monkeypatch.setenv("PYRECORDS_VERBOSE", "1")

    config = RecordsConfig.from_env(report_path="cli-report.txt", verbose=False)

    assert config.report_path == "cli-report.txt"
    assert config.verbose is False
