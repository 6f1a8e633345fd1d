"""Locate the objdump executable."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

import structlog

from dll_deployer.exceptions import ToolNotFoundError
from dll_deployer.models.config import OBJDUMP_AUTO, OBJDUMP_BUILTIN, OBJDUMP_SYSTEM

log = structlog.get_logger("dll_deployer.objdump")


def _builtin_dir() -> Path:
    """Directory of the running ``deploy-dll`` entry point."""
    return Path(sys.argv[0]).resolve().parent


def find_system_objdump() -> str | None:
    """First objdump found on PATH, or None."""
    found = shutil.which("objdump")
    if found and Path(found).is_file():
        return found
    return None


def find_builtin_objdump(builtin_dir: Path | None = None) -> str:
    """objdump shipped next to this tool.

    Raises:
        ToolNotFoundError: If no bundled objdump exists.
    """
    prefix = builtin_dir if builtin_dir is not None else _builtin_dir()
    exe = "objdump.exe" if sys.platform == "win32" else "objdump"
    candidate = prefix / exe
    if not candidate.is_file():
        raise ToolNotFoundError(f"Builtin objdump executable {candidate} not found", 3)
    return str(candidate)


def resolve_objdump(selector: str, builtin_dir: Path | None = None) -> str:
    """Resolve a location selector into an objdump path.

    Selectors:
      ``[system]``  objdump on PATH
      ``[builtin]`` objdump next to this tool
      ``[auto]``    system first, then builtin
      otherwise     an explicit file path

    Raises:
        ToolNotFoundError: If the selected strategy finds nothing.
    """
    if selector == OBJDUMP_SYSTEM:
        found = find_system_objdump()
        if found is None:
            raise ToolNotFoundError("Failed to find objdump in your system", 2)
        return found

    if selector == OBJDUMP_BUILTIN:
        return find_builtin_objdump(builtin_dir)

    if selector == OBJDUMP_AUTO:
        found = find_system_objdump()
        if found is not None:
            return found
        log.debug("objdump.system_not_found", fallback=OBJDUMP_BUILTIN)
        return find_builtin_objdump(builtin_dir)

    if not Path(selector).is_file():
        raise ToolNotFoundError(f"Given objdump file {selector} doesn't exist", 4)
    return selector
