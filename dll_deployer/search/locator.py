"""Find a dll by name in the search directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import structlog

from dll_deployer.search.paths import SearchPaths

log = structlog.get_logger("dll_deployer.search")

# Returns None to accept a candidate, or the reason it was rejected.
Validator = Callable[[Path], str | None]


class LibraryLocator:
    """
    Look up a dll in ordered search directories.

    Shallow search checks ``<dir>/<name>`` for each directory.
    Deep search walks each directory tree (root included) and checks
    ``<visited dir>/<name>``. The first candidate that is a regular file and
    passes the validator wins.
    """

    def __init__(
        self,
        paths: SearchPaths,
        *,
        shallow_enabled: bool = True,
        deep_enabled: bool = True,
    ) -> None:
        self.paths = paths
        self.shallow_enabled = shallow_enabled
        self.deep_enabled = deep_enabled

    def find(self, name: str, validate: Validator | None = None) -> Path | None:
        """Shallow search first, then deep search, skipping disabled phases."""
        if self.shallow_enabled:
            found = self.find_shallow(name, self.paths.shallow, validate)
            if found is not None:
                return found
        if self.deep_enabled:
            return self.find_deep(name, self.paths.deep, validate)
        return None

    @staticmethod
    def find_shallow(
        name: str, dirs: tuple[str, ...] | list[str], validate: Validator | None = None
    ) -> Path | None:
        for directory in dirs:
            candidate = Path(directory) / name
            if _accept(candidate, validate):
                return candidate
        return None

    @staticmethod
    def find_deep(
        name: str, dirs: tuple[str, ...] | list[str], validate: Validator | None = None
    ) -> Path | None:
        for directory in dirs:
            for dirpath, dirnames, _ in os.walk(directory, onerror=_log_walk_error):
                dirnames.sort()
                candidate = Path(dirpath) / name
                if _accept(candidate, validate):
                    return candidate
                # os.walk lists symlinked dirs without descending into them
                for dirname in dirnames:
                    link = Path(dirpath) / dirname
                    if link.is_symlink() and _accept(link / name, validate):
                        return link / name
        return None


def _accept(candidate: Path, validate: Validator | None) -> bool:
    try:
        if not candidate.is_file():
            return False
    except OSError:
        return False
    if validate is None:
        return True
    reason = validate(candidate)
    if reason is not None:
        log.debug("search.candidate_rejected", path=str(candidate), reason=reason)
        return False
    return True


def _log_walk_error(error: OSError) -> None:
    log.debug("search.walk_failed", path=error.filename, error=str(error))
