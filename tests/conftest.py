"""Shared fixtures: option files under tmp_path, isolated from real config."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no OPTFILE_* overrides."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("OPTFILE_ENCODING", raising=False)
    monkeypatch.delenv("OPTFILE_VERBOSE", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI points the optfile logger at CliRunner's stderr; undo that."""
    yield
    pkg_logger = logging.getLogger("optfile")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture
def make_file(tmp_path: Path):
    """Write text to a fresh option file and return its path."""
    def _make(text: str, name: str = "app.conf") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path
    return _make
