"""Data records exchanged between the prompts, the engine and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import ScaffoldError, SourceMissing


class ProjectAnswers(BaseModel):
    """Answers describing the project being created.

    Accepts both ``project_name`` and the ``projectName`` alias so answer
    mappings produced by other front ends validate unchanged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    project_name: str = Field(default="", alias="projectName")
    description: str = Field(default="")


@dataclass
class CopyResult:
    """Outcome of one :meth:`TreeCopier.copy` call."""

    files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)
    excluded: list[Path] = field(default_factory=list)
    missing: list[SourceMissing] = field(default_factory=list)

    def merge(self, other: "CopyResult") -> "CopyResult":
        """Fold *other* into this result and return ``self``."""
        self.files.extend(other.files)
        self.directories.extend(other.directories)
        self.excluded.extend(other.excluded)
        self.missing.extend(other.missing)
        return self


@dataclass
class ScaffoldReport:
    """Everything the initializer did for one target directory."""

    target_dir: Path
    copied: CopyResult = field(default_factory=CopyResult)
    entries: list[str] = field(default_factory=list)
    failures: list[ScaffoldError] = field(default_factory=list)
    manifest: dict[str, Any] | None = None

    @property
    def missing(self) -> list[SourceMissing]:
        return self.copied.missing

    @property
    def success(self) -> bool:
        """True when every step completed; missing sources are only warnings."""
        return not self.failures
