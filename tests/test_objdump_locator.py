"""Tests for objdump location: shutil.which is mocked."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from dll_deployer.exceptions import ToolNotFoundError
from dll_deployer.objdump.locator import resolve_objdump


@pytest.fixture
def builtin_dir(tmp_path: Path, write_file) -> Path:
    bundle = tmp_path / "bundle"
    write_file(bundle / "objdump")
    write_file(bundle / "objdump.exe")
    return bundle


class TestSystemSelector:
    def test_found_on_path(self, tmp_path: Path, write_file):
        system = write_file(tmp_path / "usr" / "bin" / "objdump")
        with patch("dll_deployer.objdump.locator.shutil.which", return_value=str(system)):
            assert resolve_objdump("[system]") == str(system)

    def test_not_found(self):
        with patch("dll_deployer.objdump.locator.shutil.which", return_value=None):
            with pytest.raises(ToolNotFoundError) as exc_info:
                resolve_objdump("[system]")
        assert exc_info.value.exit_code == 2


class TestBuiltinSelector:
    def test_found_next_to_tool(self, builtin_dir: Path):
        result = resolve_objdump("[builtin]", builtin_dir=builtin_dir)
        assert Path(result).parent == builtin_dir
        assert Path(result).name in ("objdump", "objdump.exe")

    def test_not_bundled(self, tmp_path: Path):
        with pytest.raises(ToolNotFoundError) as exc_info:
            resolve_objdump("[builtin]", builtin_dir=tmp_path)
        assert exc_info.value.exit_code == 3


class TestAutoSelector:
    def test_prefers_system(self, tmp_path: Path, write_file, builtin_dir: Path):
        system = write_file(tmp_path / "usr" / "bin" / "objdump")
        with patch("dll_deployer.objdump.locator.shutil.which", return_value=str(system)):
            assert resolve_objdump("[auto]", builtin_dir=builtin_dir) == str(system)

    def test_falls_back_to_builtin(self, builtin_dir: Path):
        with patch("dll_deployer.objdump.locator.shutil.which", return_value=None):
            result = resolve_objdump("[auto]", builtin_dir=builtin_dir)
        assert Path(result).parent == builtin_dir

    def test_nothing_available(self, tmp_path: Path):
        with patch("dll_deployer.objdump.locator.shutil.which", return_value=None):
            with pytest.raises(ToolNotFoundError) as exc_info:
                resolve_objdump("[auto]", builtin_dir=tmp_path)
        assert exc_info.value.exit_code == 3


class TestExplicitPath:
    def test_existing_file(self, tmp_path: Path, write_file):
        tool = write_file(tmp_path / "x86_64-w64-mingw32-objdump")
        assert resolve_objdump(str(tool)) == str(tool)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ToolNotFoundError) as exc_info:
            resolve_objdump(str(tmp_path / "nope"))
        assert exc_info.value.exit_code == 4

    def test_directory_is_not_a_tool(self, tmp_path: Path):
        with pytest.raises(ToolNotFoundError):
            resolve_objdump(str(tmp_path))
