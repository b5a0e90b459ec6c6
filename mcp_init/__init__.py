"""mcp-server-init -- creates new MCP server projects from a template.

The engine has two parts: ``TreeCopier`` copies the allow-listed template
entries minus the deny-listed paths, and ``ManifestTransformer`` rewrites the
template's ``package.json`` for the new project.  ``ProjectInitializer``
runs both against a target directory.

Quick usage::

    from mcp_init import InitConfig, ProjectAnswers, ProjectInitializer

    report = ProjectInitializer(InitConfig()).initialize(
        "./my-server",
        ProjectAnswers(project_name="my-server", description="Weather tools"),
    )
"""

from mcp_init.config import InitConfig
from mcp_init.copier import ExclusionSet, TreeCopier
from mcp_init.errors import (
    FilesystemWriteError,
    ManifestReadError,
    ManifestWriteError,
    ScaffoldError,
    SourceMissing,
)
from mcp_init.initializer import ProjectInitializer
from mcp_init.manifest import ManifestTransformer
from mcp_init.models import CopyResult, ProjectAnswers, ScaffoldReport

__version__ = "0.1.0"

__all__ = [
    "CopyResult",
    "ExclusionSet",
    "FilesystemWriteError",
    "InitConfig",
    "ManifestReadError",
    "ManifestTransformer",
    "ManifestWriteError",
    "ProjectAnswers",
    "ProjectInitializer",
    "ScaffoldError",
    "ScaffoldReport",
    "SourceMissing",
    "TreeCopier",
]
