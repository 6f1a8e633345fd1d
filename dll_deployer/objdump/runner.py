"""objdump invocation: dll imports and file format of a PE binary.

objdump is spawned once per call; nothing is cached.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from dll_deployer.exceptions import ParseError, ToolInvocationError

log = structlog.get_logger("dll_deployer.objdump")

DLL_NAME_MARKER = "dll name: "
DLL_SUFFIX = ".dll"
FILE_FORMAT_MARKER = "file format "


def parse_dependency_line(line: str) -> str:
    """Extract the dll name from one ``DLL Name: foo.dll`` line (already lower-cased).

    The name runs from the end of the marker to the first ``.dll`` on the line.

    Raises:
        ParseError: If the line has no ``.dll`` or the name is shorter than two characters.
    """
    fail_msg = f'Failed to parse dll name from output "{line}"'
    start = line.find(DLL_NAME_MARKER)
    end = line.find(DLL_SUFFIX)
    if start < 0 or end < 0:
        raise ParseError(fail_msg)
    # A .dll before the end of the marker counts as an empty name
    start += len(DLL_NAME_MARKER)
    if start + 1 >= end:
        raise ParseError(fail_msg)
    return line[start:end] + DLL_SUFFIX


def parse_dependencies(output: str) -> list[str]:
    """Parse ``objdump -x`` output into declared dll names, in order, duplicates kept."""
    output = output.replace("\r", "").lower()
    dlls = []
    for line in output.split("\n"):
        if DLL_NAME_MARKER not in line:
            continue
        dlls.append(parse_dependency_line(line))
    return dlls


def parse_file_format(output: str, filename: str = "") -> str:
    """Parse ``objdump -f`` output into the format tag, e.g. ``pei-x86-64``.

    Raises:
        ParseError: If no line carries a ``file format`` marker.
    """
    output = output.replace("\r", "")
    for line in output.split("\n"):
        loc = line.rfind(FILE_FORMAT_MARKER)
        if loc >= 0:
            return line[loc + len(FILE_FORMAT_MARKER) :]
    raise ParseError(
        f"Failed to parse file format of {filename} from objdump output, it says:\n{output}"
    )


class ObjdumpInspector:
    """Query a binary through an objdump executable."""

    def __init__(self, objdump: str) -> None:
        self.objdump = objdump

    def get_dependencies(self, path: Path | str) -> list[str]:
        """List the dll names ``path`` imports, lower-cased, in declaration order."""
        output = self._run([str(path), "-x", "--section=.rdata"])
        deps = parse_dependencies(output)
        log.debug("objdump.dependencies", binary=str(path), dependencies=deps)
        return deps

    def get_format(self, path: Path | str) -> str:
        """Return the objdump format tag of ``path``."""
        output = self._run(["-f", str(path)])
        return parse_file_format(output, str(path))

    def _run(self, args: list[str]) -> str:
        cmd = [self.objdump, *args]
        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise ToolInvocationError(cmd, None, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace")
            raise ToolInvocationError(cmd, result.returncode, stderr)
        return result.stdout.decode("utf-8", errors="replace")
