"""Summary of a deployment run."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from dll_deployer.classifier import Classification


@dataclass
class DeployReport:
    """What a run did to the target directory."""

    binary_format: str
    copied: list[tuple[str, str]] = field(default_factory=list)  # (dll name, source path)
    missing: list[tuple[str, str]] = field(default_factory=list)  # (dll name, required by)
    skipped: dict[Classification, list[str]] = field(default_factory=lambda: defaultdict(list))

    @property
    def copied_names(self) -> list[str]:
        return [name for name, _ in self.copied]

    @property
    def missing_names(self) -> list[str]:
        return [name for name, _ in self.missing]
