from __future__ import annotations

import sys
from pathlib import Path

import pytest
from helpers import GIT_ENV, RECORDER, Upstream


@pytest.fixture(autouse=True)
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in GIT_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def upstream(tmp_path: Path) -> Upstream:
    return Upstream(tmp_path / "upstream")


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    ws = tmp_path / "workspace"
    ws.mkdir()
    monkeypatch.chdir(ws)
    return ws


@pytest.fixture
def recorder(tmp_path: Path) -> tuple[list[str], Path]:
    """A set_root_cmd that dumps its arguments as JSON."""
    script = tmp_path / "record.py"
    script.write_text(RECORDER)
    record = tmp_path / "record.json"
    return [sys.executable, str(script), str(record)], record
