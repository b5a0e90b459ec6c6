"""mcp-server-init configuration.

Typed configuration for the initializer.  A single ``InitConfig`` is built by
the CLI (from arguments, environment variables or a saved JSON file) and
passed explicitly into every component that needs it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .copier import ExclusionSet, normalize_path_spec

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"

# Top-level template entries copied into a new project.  The manifest is
# handled separately by the manifest transformer.
DEFAULT_FILES_TO_COPY: list[str] = [
    ".eslintrc.json",
    ".gitignore",
    ".prettierrc.json",
    "README.md",
    "tsconfig.json",
    "docs",
    "src",
]

# Paths relative to the template root that are never copied.
DEFAULT_EXCLUDE_FROM_COPY: list[str] = [
    "node_modules",
    "dist",
    ".git",
    "package-lock.json",
    "src/initialize.ts",
]

# Manifest fields that describe the template rather than the new project.
DEFAULT_STRIPPED_FIELDS: list[str] = [
    "bin",
    "author",
    "repository",
    "bugs",
    "homepage",
]


class InitConfig(BaseModel):
    """Configuration for creating a project from a template.

    Holds the template location, the allow-list and deny-list, and the
    values the manifest transformer writes into every new project.
    """

    template_dir: Path = Field(default=_DEFAULT_TEMPLATE_DIR)
    files_to_copy: list[str] = Field(default_factory=lambda: list(DEFAULT_FILES_TO_COPY))
    exclude_from_copy: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_FROM_COPY)
    )
    manifest_name: str = Field(default="package.json", min_length=1)
    initial_version: str = Field(default="0.1.0", min_length=1)
    default_description: str = Field(default="My new MCP Server")
    build_command: str = Field(default="tsc", min_length=1)
    stripped_fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STRIPPED_FIELDS)
    )

    @field_validator("files_to_copy")
    @classmethod
    def _check_entries(cls, value: list[str]) -> list[str]:
        for entry in value:
            parts = normalize_path_spec(entry)
            if not parts:
                raise ValueError(f"files_to_copy entry {entry!r} names the template root")
            if Path(entry).is_absolute() or ".." in parts:
                raise ValueError(
                    f"files_to_copy entry {entry!r} must be relative to the template root"
                )
        return value

    @field_validator("exclude_from_copy")
    @classmethod
    def _check_exclusions(cls, value: list[str]) -> list[str]:
        for entry in value:
            if not normalize_path_spec(entry):
                raise ValueError(
                    f"exclude_from_copy entry {entry!r} names the template root, "
                    "which cannot be excluded"
                )
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def template_manifest_path(self) -> Path:
        """Path to the template's own manifest."""
        return self.template_dir / self.manifest_name

    @property
    def exclusions(self) -> ExclusionSet:
        return ExclusionSet(self.exclude_from_copy)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "InitConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "InitConfig":
        """Build an ``InitConfig`` from environment variables.

        Recognised variables (all optional):
            MCP_INIT_TEMPLATE_DIR, MCP_INIT_INITIAL_VERSION,
            MCP_INIT_BUILD_COMMAND, MCP_INIT_DEFAULT_DESCRIPTION,
            MCP_INIT_EXCLUDE (comma-separated, added to the default deny-list).

        Keyword arguments override both the environment and the defaults.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MCP_INIT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["MCP_INIT_TEMPLATE_DIR"])
        if os.environ.get("MCP_INIT_INITIAL_VERSION"):
            kwargs["initial_version"] = os.environ["MCP_INIT_INITIAL_VERSION"]
        if os.environ.get("MCP_INIT_BUILD_COMMAND"):
            kwargs["build_command"] = os.environ["MCP_INIT_BUILD_COMMAND"]
        if "MCP_INIT_DEFAULT_DESCRIPTION" in os.environ:
            kwargs["default_description"] = os.environ["MCP_INIT_DEFAULT_DESCRIPTION"]

        extra_excludes = [
            e.strip() for e in os.environ.get("MCP_INIT_EXCLUDE", "").split(",") if e.strip()
        ]
        if extra_excludes:
            kwargs["exclude_from_copy"] = DEFAULT_EXCLUDE_FROM_COPY + extra_excludes

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
