"""Deployment configuration record."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dll_deployer.exceptions import TargetNotFoundError

# Inspection tool location selectors
OBJDUMP_AUTO = "[auto]"
OBJDUMP_SYSTEM = "[system]"
OBJDUMP_BUILTIN = "[builtin]"


@dataclass(frozen=True)
class DeployConfig:
    """Options for one deployment run. Read-only once constructed."""

    binary: Path  # absolute path of the exe/dll to deploy for
    shallow_search_dirs: tuple[str, ...] = ()
    deep_search_dirs: tuple[str, ...] = ()
    cmake_prefix_paths: tuple[str, ...] = ()  # each entry may be a ;-separated list
    ignore: frozenset[str] = field(default_factory=frozenset)
    skip_env_path: bool = False
    copy_vc_redist: bool = False
    no_shallow_search: bool = False
    no_deep_search: bool = False
    allow_missing: bool = False
    verbose: bool = False
    objdump_file: str = OBJDUMP_AUTO

    def __post_init__(self) -> None:
        # Dependency names are matched lower-cased
        object.__setattr__(self, "ignore", frozenset(n.lower() for n in self.ignore))

    @property
    def target_dir(self) -> Path:
        return self.binary.parent

    @classmethod
    def from_cli(
        cls,
        binary_file: str,
        *,
        shallow_search_dir: tuple[str, ...] = (),
        deep_search_dir: tuple[str, ...] = (),
        cmake_prefix_path: tuple[str, ...] = (),
        ignore: tuple[str, ...] = (),
        skip_env_path: bool = False,
        copy_vc_redist: bool = False,
        no_shallow_search: bool = False,
        no_deep_search: bool = False,
        allow_missing: bool = False,
        verbose: bool = False,
        objdump_file: str = OBJDUMP_AUTO,
    ) -> DeployConfig:
        """Build a config from raw command line values.

        Relative binary paths are resolved against the current directory.

        Raises:
            TargetNotFoundError: If the binary is not a regular file.
        """
        binary = Path(binary_file)
        if not binary.is_file():
            raise TargetNotFoundError(f'The given target "{binary_file}" is not a file')
        if not binary.is_absolute():
            binary = Path.cwd() / binary

        return cls(
            binary=binary,
            shallow_search_dirs=tuple(shallow_search_dir),
            deep_search_dirs=tuple(deep_search_dir),
            cmake_prefix_paths=tuple(cmake_prefix_path),
            ignore=frozenset(ignore),
            skip_env_path=skip_env_path,
            copy_vc_redist=copy_vc_redist,
            no_shallow_search=no_shallow_search,
            no_deep_search=no_deep_search,
            allow_missing=allow_missing,
            verbose=verbose,
            objdump_file=objdump_file,
        )
