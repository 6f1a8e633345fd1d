"""System dll detection: live probe on Windows, static name table elsewhere."""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SystemLibraryClassifier(Protocol):
    """Decides whether a dll is owned by the operating system."""

    def is_system_library(self, name: str) -> bool: ...


def _system_root() -> str:
    return os.environ.get("SystemRoot", "C:/Windows").replace("\\", "/").rstrip("/")


def default_system_dirs() -> list[str]:
    """Directories a Windows installation keeps its own dlls in."""
    root = _system_root()
    return [
        f"{root}/",
        f"{root}/system32/",
        f"{root}/System32/Wbem/",
        f"{root}/System32/WindowsPowerShell/v1.0/",
        f"{root}/System32/OpenSSH/",
    ]


class SystemDirProbe:
    """Native variant: a dll is a system dll if it exists in a Windows system directory."""

    def __init__(self, system_dirs: list[str] | None = None) -> None:
        self.system_dirs = system_dirs if system_dirs is not None else default_system_dirs()

    def is_system_library(self, name: str) -> bool:
        for prefix in self.system_dirs:
            if Path(f"{prefix.rstrip('/')}/{name}").is_file():
                return True
        return False


@lru_cache(maxsize=1)
def load_system_dll_list() -> frozenset[str]:
    """Known Windows dll names bundled with the package, lower-cased."""
    text = (
        (resources.files("dll_deployer") / "data" / "system_dlls.txt")
        .read_text(encoding="utf-8")
    )
    return frozenset(line.strip().lower() for line in text.splitlines() if line.strip())


class StaticSystemList:
    """Cross-compiling variant: exact lookup in a table of known system dll names."""

    def __init__(self, names: frozenset[str] | None = None) -> None:
        self.names = names if names is not None else load_system_dll_list()

    def is_system_library(self, name: str) -> bool:
        return name.lower() in self.names


def default_system_classifier(platform: str | None = None) -> SystemLibraryClassifier:
    """Live probe when running on Windows, static table otherwise."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return SystemDirProbe()
    return StaticSystemList()
