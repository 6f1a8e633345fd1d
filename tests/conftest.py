"""Shared pytest fixtures for dll-deployer tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_file():
    """Create a file (and its parent dirs) with some bytes; returns its path."""

    def _write(path: Path, content: bytes = b"MZ") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def app_dir(tmp_path: Path, write_file) -> Path:
    """A deployment target directory holding app.exe."""
    target = tmp_path / "app"
    write_file(target / "app.exe", b"MZ app")
    return target
