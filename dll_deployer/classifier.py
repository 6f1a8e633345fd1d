"""Dependency classification: decide whether a dll must be located at all."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from dll_deployer.models.config import DeployConfig
from dll_deployer.system_libs import SystemLibraryClassifier

VC_REDIST_PREFIX = "api-ms-win"


class Classification(Enum):
    """Disposition of one dependency name. Only UNRESOLVED needs a search."""

    ALREADY_DEPLOYED = "already_deployed"
    IGNORED = "ignored"
    SYSTEM_OWNED = "system_owned"
    REDISTRIBUTABLE = "redistributable"
    UNRESOLVED = "unresolved"


def is_vc_redist_dll(name: str) -> bool:
    """Microsoft Visual C/C++ runtime api-set forwarders."""
    return name.startswith(VC_REDIST_PREFIX)


class DependencyClassifier:
    """
    Classify a dll name against the config and the target directory.

    Rules, first match wins:
      1. ALREADY_DEPLOYED  <target_dir>/<name> is a file
      2. IGNORED           name is in the ignore set
      3. SYSTEM_OWNED      the system classifier claims it
      4. REDISTRIBUTABLE   VC runtime dll and copy_vc_redist is off
      5. UNRESOLVED

    Re-evaluated on every call; nothing is remembered between calls.
    """

    def __init__(self, config: DeployConfig, system: SystemLibraryClassifier) -> None:
        self.config = config
        self.system = system

    def classify(self, name: str, target_dir: Path | None = None) -> Classification:
        target_dir = self.config.target_dir if target_dir is None else target_dir
        if (target_dir / name).is_file():
            return Classification.ALREADY_DEPLOYED
        if name in self.config.ignore:
            return Classification.IGNORED
        if self.system.is_system_library(name):
            return Classification.SYSTEM_OWNED
        if not self.config.copy_vc_redist and is_vc_redist_dll(name):
            return Classification.REDISTRIBUTABLE
        return Classification.UNRESOLVED
