"""Pytest configuration for test isolation.

The CLI reads ``BUD_WIDTH``/``BUD_LOG_LEVEL`` from the environment, loads a
``.env`` from the current working directory, and sizes the chart from the
terminal width (``COLUMNS`` when set). Any of these leaking in from the
developer's shell would change the rendered report, so every test runs in its
own temporary directory with a fixed terminal width.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("BUD_WIDTH", "BUD_LOG_LEVEL"):
        # setenv first so teardown also removes values loaded from a .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("COLUMNS", "80")
