"""Project initializer.

Composes the tree copier and the manifest transformer into one run against a
target directory.  Failures are isolated: a top-level template entry that
cannot be copied is recorded and the remaining entries are still copied, and
a manifest failure is recorded without affecting the copied files.  The
caller receives a ``ScaffoldReport`` describing every piece that failed.
"""

from __future__ import annotations

from pathlib import Path

from .config import InitConfig
from .copier import TreeCopier
from .errors import (
    FilesystemWriteError,
    ManifestReadError,
    ManifestWriteError,
    ScaffoldError,
)
from .manifest import ManifestTransformer
from .models import ProjectAnswers, ScaffoldReport


class ProjectInitializer:
    """Creates a new project from the configured template.

    Attributes:
        config: Template location, allow-list, deny-list and manifest policy.
        copier: Copies template entries relative to ``config.template_dir``.
        transformer: Rewrites the template manifest.
    """

    def __init__(self, config: InitConfig) -> None:
        self.config = config
        self.copier = TreeCopier(config.template_dir)
        self.transformer = ManifestTransformer(config)

    def initialize(self, target_dir: str | Path, answers: ProjectAnswers) -> ScaffoldReport:
        """Populate *target_dir* from the template.

        Raises:
            ScaffoldError: *target_dir* is the template directory or lies
                inside it.
            FilesystemWriteError: *target_dir* itself cannot be created.
        """
        target = Path(target_dir).resolve()
        self._check_target(target)
        report = ScaffoldReport(target_dir=target)

        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemWriteError(target, str(exc)) from exc

        self._copy_entries(target, report)
        self._write_manifest(target, answers, report)
        return report

    # -- Steps ---------------------------------------------------------------

    def _check_target(self, target: Path) -> None:
        template = self.config.template_dir.resolve()
        if target == template or template in target.parents:
            raise ScaffoldError(
                target, f"Target directory {target} lies inside the template {template}"
            )

    def _copy_entries(self, target: Path, report: ScaffoldReport) -> None:
        exclusions = self.config.exclusions
        for entry in self.config.files_to_copy:
            source = self.config.template_dir / entry
            try:
                result = self.copier.copy(source, target / entry, exclusions)
            except FilesystemWriteError as exc:
                report.failures.append(exc)
                continue
            report.copied.merge(result)
            skipped = source in result.excluded or any(m.path == source for m in result.missing)
            if not skipped:
                report.entries.append(entry)

    def _write_manifest(
        self, target: Path, answers: ProjectAnswers, report: ScaffoldReport
    ) -> None:
        try:
            report.manifest = self.transformer.transform(
                self.config.template_manifest_path,
                target / self.config.manifest_name,
                answers,
                target.name,
            )
        except (ManifestReadError, ManifestWriteError) as exc:
            report.failures.append(exc)
