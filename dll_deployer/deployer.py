"""Deployment engine: copy every dll a binary needs next to it, recursively.

Flow for one binary:
    objdump -x -> dll names -> classify each
        -> UNRESOLVED: shallow search, then deep search (format tag must match the root)
        -> copy into the target directory -> recurse into the copy

The engine keeps no visited set. A dll that was copied earlier in the run is
classified ALREADY_DEPLOYED from the filesystem, which also ends cycles.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Protocol

import structlog

from dll_deployer.classifier import Classification, DependencyClassifier
from dll_deployer.exceptions import CopyError, TargetNotFoundError, UnresolvedDependencyError
from dll_deployer.models.config import DeployConfig
from dll_deployer.models.report import DeployReport
from dll_deployer.search.locator import LibraryLocator, Validator
from dll_deployer.search.paths import SearchPaths
from dll_deployer.system_libs import SystemLibraryClassifier, default_system_classifier

log = structlog.get_logger("dll_deployer.deploy")


class BinaryInspector(Protocol):
    """What the engine needs from objdump."""

    def get_dependencies(self, path: Path | str) -> list[str]: ...

    def get_format(self, path: Path | str) -> str: ...


class DllDeployer:
    """Resolve and copy the dll closure of ``config.binary`` into its directory."""

    def __init__(
        self,
        config: DeployConfig,
        inspector: BinaryInspector,
        *,
        system: SystemLibraryClassifier | None = None,
        paths: SearchPaths | None = None,
    ) -> None:
        self.config = config
        self.inspector = inspector
        self.classifier = DependencyClassifier(
            config, system if system is not None else default_system_classifier()
        )
        self.locator = LibraryLocator(
            paths if paths is not None else SearchPaths.from_config(config),
            shallow_enabled=not config.no_shallow_search,
            deep_enabled=not config.no_deep_search,
        )

    def run(self) -> DeployReport:
        """Deploy for the root binary.

        Raises:
            TargetNotFoundError: The root binary is not a file.
            ToolInvocationError, ParseError: objdump failed or its output is unexpected.
            UnresolvedDependencyError: A dll was not found and allow_missing is off.
            CopyError: A located dll could not be copied.
        """
        binary = self.config.binary
        if not binary.is_file():
            raise TargetNotFoundError(f'The given target "{binary}" is not a file')

        binary_format = self.inspector.get_format(binary)
        log.debug("deploy.binary_format", binary=str(binary), format=binary_format)
        log.debug(
            "deploy.search_dirs",
            shallow=list(self.locator.paths.shallow),
            deep=list(self.locator.paths.deep),
        )

        report = DeployReport(binary_format=binary_format)
        self.deploy(binary, self.config.target_dir, binary_format, report)
        return report

    def deploy(
        self,
        binary: Path,
        target_dir: Path,
        binary_format: str,
        report: DeployReport,
    ) -> None:
        """Deploy the dependencies of ``binary``; recurses depth-first into each copy."""
        log.debug("deploy.start", binary=str(binary), target_dir=str(target_dir))
        deps = self.inspector.get_dependencies(binary)
        log.debug("deploy.requires", binary=str(binary), dependencies=deps)

        for dep in deps:
            disposition = self.classifier.classify(dep, target_dir)
            if disposition is not Classification.UNRESOLVED:
                log.debug("deploy.skipped", dll=dep, reason=disposition.value)
                report.skipped[disposition].append(dep)
                continue

            log.debug("deploy.searching", dll=dep, required_by=str(binary))
            location = self.locator.find(dep, self._format_validator(binary_format))

            if location is None:
                if not self.config.allow_missing:
                    raise UnresolvedDependencyError(dep, str(binary))
                log.warning("deploy.missing", dll=dep, required_by=str(binary))
                report.missing.append((dep, str(binary)))
                continue

            destination = target_dir / dep
            self._copy(location, destination)
            report.copied.append((dep, str(location)))

            self.deploy(destination, target_dir, binary_format, report)

    def _format_validator(self, binary_format: str) -> Validator:
        def validate(candidate: Path) -> str | None:
            found = self.inspector.get_format(candidate)
            if found != binary_format:
                return (
                    f"DLL architecture mismatch. Expected {binary_format}, but found {found}"
                )
            return None

        return validate

    @staticmethod
    def _copy(source: Path, destination: Path) -> None:
        log.info("deploy.copying", source=str(source), destination=str(destination))
        try:
            shutil.copy(source, destination)
        except OSError as e:
            # a partial file would pass the already-deployed check next run
            try:
                destination.unlink(missing_ok=True)
            except OSError as cleanup_error:
                log.warning(
                    "deploy.cleanup_failed", path=str(destination), error=str(cleanup_error)
                )
            raise CopyError(str(source), str(destination), str(e)) from e
