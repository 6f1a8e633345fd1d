"""Tests for search directory composition: pure filesystem logic."""

from __future__ import annotations

import os
from pathlib import Path

from dll_deployer.models.config import DeployConfig
from dll_deployer.search.paths import (
    SearchPaths,
    build_deep_dirs,
    build_shallow_dirs,
    existing_cmake_prefix_bins,
)


def _config(tmp_path: Path, **kwargs) -> DeployConfig:
    return DeployConfig(binary=tmp_path / "app" / "app.exe", **kwargs)


class TestExplicitDirs:
    def test_kept_in_order(self, tmp_path: Path):
        config = _config(tmp_path, shallow_search_dirs=("S1", "S2"), deep_search_dirs=("D1",))
        assert build_shallow_dirs(config, environ={}, platform="linux") == ["S1", "S2"]
        assert build_deep_dirs(config, environ={}, platform="linux") == ["D1"]

    def test_missing_explicit_dir_not_filtered(self, tmp_path: Path):
        missing = str(tmp_path / "does-not-exist")
        config = _config(tmp_path, shallow_search_dirs=(missing,))
        assert build_shallow_dirs(config, environ={}, platform="linux") == [missing]


class TestCmakePrefixPath:
    def test_bin_subdir_added_after_explicit(self, tmp_path: Path):
        qt = tmp_path / "Qt" / "6.6.0" / "mingw_64"
        (qt / "bin").mkdir(parents=True)
        config = _config(tmp_path, shallow_search_dirs=("S1",), cmake_prefix_paths=(str(qt),))

        shallow = build_shallow_dirs(config, environ={}, platform="linux")
        deep = build_deep_dirs(config, environ={}, platform="linux")

        assert shallow == ["S1", f"{qt}/bin"]
        assert deep == [f"{qt}/bin"]

    def test_prefix_without_bin_dropped(self, tmp_path: Path):
        (tmp_path / "prefix").mkdir()
        assert existing_cmake_prefix_bins((str(tmp_path / "prefix"),)) == []

    def test_bin_that_is_a_file_dropped(self, tmp_path: Path, write_file):
        write_file(tmp_path / "prefix" / "bin")
        assert existing_cmake_prefix_bins((str(tmp_path / "prefix"),)) == []

    def test_semicolon_list_split(self, tmp_path: Path):
        a = tmp_path / "a"
        b = tmp_path / "b"
        (a / "bin").mkdir(parents=True)
        (b / "bin").mkdir(parents=True)
        result = existing_cmake_prefix_bins((f"{a};{tmp_path / 'missing'};{b}",))
        assert result == [f"{a}/bin", f"{b}/bin"]


class TestEnvPath:
    def _environ(self, *dirs: Path | str) -> dict[str, str]:
        return {"PATH": os.pathsep.join(str(d) for d in dirs)}

    def test_used_on_windows(self, tmp_path: Path):
        mingw = tmp_path / "mingw64" / "bin"
        mingw.mkdir(parents=True)
        config = _config(tmp_path, shallow_search_dirs=("S1",))

        dirs = build_shallow_dirs(config, environ=self._environ(mingw), platform="win32")
        assert dirs == ["S1", str(mingw)]

    def test_nonexistent_entries_dropped(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        config = _config(tmp_path)
        environ = self._environ(tmp_path / "gone", real)
        assert build_deep_dirs(config, environ=environ, platform="win32") == [str(real)]

    def test_skipped_when_requested(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        config = _config(tmp_path, skip_env_path=True)
        assert build_shallow_dirs(config, environ=self._environ(real), platform="win32") == []

    def test_ignored_off_windows(self, tmp_path: Path):
        real = tmp_path / "real"
        real.mkdir()
        config = _config(tmp_path)
        assert build_shallow_dirs(config, environ=self._environ(real), platform="linux") == []

    def test_order_explicit_prefix_env(self, tmp_path: Path):
        prefix = tmp_path / "prefix"
        (prefix / "bin").mkdir(parents=True)
        env_dir = tmp_path / "env"
        env_dir.mkdir()
        config = _config(tmp_path, deep_search_dirs=("D1",), cmake_prefix_paths=(str(prefix),))

        dirs = build_deep_dirs(config, environ=self._environ(env_dir), platform="win32")
        assert dirs == ["D1", f"{prefix}/bin", str(env_dir)]


class TestSearchPaths:
    def test_from_config(self, tmp_path: Path):
        config = _config(tmp_path, shallow_search_dirs=("S1",), deep_search_dirs=("D1", "D2"))
        paths = SearchPaths.from_config(config, environ={}, platform="linux")
        assert paths.shallow == ("S1",)
        assert paths.deep == ("D1", "D2")
