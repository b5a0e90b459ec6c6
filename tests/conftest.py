"""Shared pytest fixtures for the mcp-server-init test suite.

Provides reusable fixtures for:
- A small template tree on disk (files, nested directories, a manifest)
- An ``InitConfig`` pointing at that template
- Sample answers and template manifests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from mcp_init.config import InitConfig
from mcp_init.models import ProjectAnswers


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Return ``{relative posix path: bytes}`` for every file under *root*."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ---------------------------------------------------------------------------
# Manifests & answers
# ---------------------------------------------------------------------------


@pytest.fixture
def template_manifest() -> dict[str, Any]:
    """A template ``package.json`` carrying every field that gets rewritten."""
    return {
        "name": "mcp-server-template",
        "version": "9.9.9",
        "description": "The template itself",
        "main": "dist/server.js",
        "type": "module",
        "bin": {"mcp-server-template": "dist/initialize.js"},
        "scripts": {
            "start": "node dist/server.js",
            "build": "tsc && node -e \"require('fs').chmodSync('dist/initialize.js','755')\"",
            "dev": "nodemon src/server.ts",
        },
        "author": "Template Author",
        "repository": {"type": "git", "url": "https://example.invalid/t.git"},
        "bugs": {"url": "https://example.invalid/t/issues"},
        "homepage": "https://example.invalid/t",
        "license": "ISC",
        "dependencies": {"@modelcontextprotocol/sdk": "^1.7.0", "zod": "^3.23.8"},
    }


@pytest.fixture
def answers() -> ProjectAnswers:
    return ProjectAnswers(project_name="weather-server", description="Weather tools")


# ---------------------------------------------------------------------------
# Template tree & config
# ---------------------------------------------------------------------------


@pytest.fixture
def template_dir(tmp_path: Path, template_manifest: dict[str, Any]) -> Path:
    """A template tree with allowed entries, excluded entries and a manifest."""
    root = tmp_path / "template"
    write_tree(
        root,
        {
            "README.md": "# Template\n",
            ".gitignore": "node_modules/\ndist/\n",
            "tsconfig.json": '{"compilerOptions": {"strict": true}}\n',
            "src/server.ts": "export const server = 1;\n",
            "src/initialize.ts": "// scaffolding script\n",
            "src/tools/index.ts": "export {};\n",
            "src/tools/greet.ts": "export const greet = 'hi';\n",
            "docs/index.md": "# Docs\n",
            "node_modules/pkg/index.js": "module.exports = {};\n",
            "dist/server.js": "compiled\n",
            "package-lock.json": "{}\n",
        },
    )
    (root / "package.json").write_text(json.dumps(template_manifest, indent=2), encoding="utf-8")
    return root


@pytest.fixture
def init_config(template_dir: Path) -> InitConfig:
    return InitConfig(
        template_dir=template_dir,
        files_to_copy=["README.md", ".gitignore", "tsconfig.json", "src", "docs"],
    )


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Destination path for a new project (not created)."""
    return tmp_path / "out" / "new-project"
