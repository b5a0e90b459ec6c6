"""Manifest (``package.json``) transformation for new projects.

The template's manifest describes the template itself.  A new project gets
its own name, a fresh version and description, loses the fields that tie it
to the template (launcher entry point, author and repository links), and
builds with a plain compile step.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .config import InitConfig
from .errors import ManifestReadError, ManifestWriteError
from .models import ProjectAnswers
from .utils import atomic_write_text, dump_json, load_json


class ManifestTransformer:
    """Rewrites a template manifest for a newly created project."""

    def __init__(self, config: InitConfig) -> None:
        self.config = config

    # -- Public API --------------------------------------------------------

    def transform(
        self,
        template_manifest_path: str | Path,
        destination_manifest_path: str | Path,
        answers: ProjectAnswers,
        dest_root_name: str,
    ) -> dict[str, Any]:
        """Read, rewrite and write the manifest.

        Args:
            template_manifest_path: The template's ``package.json``.
            destination_manifest_path: Where the new manifest is written.
            answers: Project name and description.
            dest_root_name: Basename of the destination directory, used when
                ``answers.project_name`` is empty.

        Returns:
            The manifest as written.

        Raises:
            ManifestReadError: The template manifest is missing, unreadable,
                not valid JSON, or not a JSON object.
            ManifestWriteError: The destination could not be written, or
                neither the answers nor *dest_root_name* provide a project
                name.  No partial file is left behind.
        """
        manifest = self.read(template_manifest_path)
        try:
            updated = self.apply(manifest, answers, dest_root_name)
        except ValueError as exc:
            raise ManifestWriteError(destination_manifest_path, str(exc)) from exc
        self.write(destination_manifest_path, updated)
        return updated

    def read(self, path: str | Path) -> dict[str, Any]:
        """Load the template manifest, which must be a JSON object."""
        try:
            data = load_json(path)
        except FileNotFoundError as exc:
            raise ManifestReadError(path, "file not found") from exc
        except json.JSONDecodeError as exc:
            raise ManifestReadError(path, f"invalid JSON ({exc})") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestReadError(path, str(exc)) from exc
        if not isinstance(data, dict):
            raise ManifestReadError(path, f"expected a JSON object, got {type(data).__name__}")
        return data

    def apply(
        self,
        manifest: dict[str, Any],
        answers: ProjectAnswers,
        dest_root_name: str,
    ) -> dict[str, Any]:
        """Return a rewritten copy of *manifest*.

        Existing keys keep their position; keys the template lacks are
        appended.  A blank ``project_name`` falls back to *dest_root_name*;
        a non-blank one is written as given.

        Raises:
            ValueError: Both names are blank.
        """
        name = answers.project_name if answers.project_name.strip() else dest_root_name
        if not name.strip():
            raise ValueError("A project name is required but none was given")

        updated = dict(manifest)
        updated["name"] = name
        updated["version"] = self.config.initial_version
        updated["description"] = answers.description

        for key in self.config.stripped_fields:
            updated.pop(key, None)

        scripts = updated.get("scripts")
        if isinstance(scripts, dict) and "build" in scripts:
            updated["scripts"] = {**scripts, "build": self.config.build_command}

        return updated

    def write(self, path: str | Path, manifest: dict[str, Any]) -> None:
        """Write *manifest* to *path* as a complete file or not at all."""
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            atomic_write_text(target, dump_json(manifest))
        except OSError as exc:
            raise ManifestWriteError(target, str(exc)) from exc
