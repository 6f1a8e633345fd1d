"""Search directory lists for dll lookup.

Both lists are composed the same way, in priority order:
  1. explicit directories, unfiltered
  2. ``<prefix>/bin`` for each CMake prefix path that is a directory
  3. directories on PATH (Windows only, unless skipped)
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dll_deployer.models.config import DeployConfig


def _is_dir(path: str) -> bool:
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def existing_cmake_prefix_bins(prefix_paths: tuple[str, ...]) -> list[str]:
    """``bin`` subdirectories of the CMake prefix paths that exist."""
    dirs = []
    for entry in prefix_paths:
        for prefix in entry.split(";"):
            if not prefix:
                continue
            candidate = f"{prefix}/bin"
            if _is_dir(candidate):
                dirs.append(candidate)
    return dirs


def existing_env_path(environ: Mapping[str, str] | None = None) -> list[str]:
    """Directories named in PATH that exist."""
    env = os.environ if environ is None else environ
    value = env.get("PATH")
    if not value:
        return []
    return [p for p in value.split(os.pathsep) if p and _is_dir(p)]


def _compose(
    explicit: tuple[str, ...],
    config: DeployConfig,
    environ: Mapping[str, str] | None,
    platform: str | None,
) -> list[str]:
    dirs = list(explicit)
    dirs.extend(existing_cmake_prefix_bins(config.cmake_prefix_paths))
    platform = sys.platform if platform is None else platform
    if platform == "win32" and not config.skip_env_path:
        dirs.extend(existing_env_path(environ))
    return dirs


def build_shallow_dirs(
    config: DeployConfig,
    *,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> list[str]:
    """Directories checked for a direct child match."""
    return _compose(config.shallow_search_dirs, config, environ, platform)


def build_deep_dirs(
    config: DeployConfig,
    *,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> list[str]:
    """Directories walked recursively."""
    return _compose(config.deep_search_dirs, config, environ, platform)


@dataclass(frozen=True)
class SearchPaths:
    """Both search lists, built once per run."""

    shallow: tuple[str, ...]
    deep: tuple[str, ...]

    @classmethod
    def from_config(
        cls,
        config: DeployConfig,
        *,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> SearchPaths:
        return cls(
            shallow=tuple(build_shallow_dirs(config, environ=environ, platform=platform)),
            deep=tuple(build_deep_dirs(config, environ=environ, platform=platform)),
        )
