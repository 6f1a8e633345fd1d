"""Test doubles for dll_deployer: deploy without objdump or real PE files.

Usage::

    from dll_deployer.testing import FakeInspector

    inspector = FakeInspector(
        dependencies={"app.exe": ["a.dll"], "a.dll": ["kernel32.dll"]},
        formats={"app.exe": "pei-x86-64"},
    )

Binaries are looked up by file name, so a dll keeps its entry after it is
copied. Files with no format entry get ``default_format``.
"""

from __future__ import annotations

from pathlib import Path

from dll_deployer.exceptions import ToolInvocationError


class FakeInspector:
    """Drop-in replacement for ObjdumpInspector backed by dicts."""

    def __init__(
        self,
        *,
        dependencies: dict[str, list[str]] | None = None,
        formats: dict[str, str] | None = None,
        default_format: str = "pei-x86-64",
    ) -> None:
        self.dependencies = dependencies or {}
        self.formats = formats or {}
        self.default_format = default_format
        self._calls: list[tuple[str, str]] = []

    @property
    def calls(self) -> list[tuple[str, str]]:
        """(operation, path) pairs received: useful for assertions in tests."""
        return self._calls

    def get_dependencies(self, path: Path | str) -> list[str]:
        self._calls.append(("dependencies", str(path)))
        self._check_exists(path)
        return list(self.dependencies.get(Path(path).name, []))

    def get_format(self, path: Path | str) -> str:
        self._calls.append(("format", str(path)))
        self._check_exists(path)
        by_path = self.formats.get(str(path))
        if by_path is not None:
            return by_path
        return self.formats.get(Path(path).name, self.default_format)

    @staticmethod
    def _check_exists(path: Path | str) -> None:
        if not Path(path).is_file():
            raise ToolInvocationError(["objdump", str(path)], 1, f"'{path}': No such file")
