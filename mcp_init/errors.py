"""Error taxonomy for template instantiation.

Every error carries the filesystem path it concerns so the caller can report
exactly which piece of the scaffold failed.  ``SourceMissing`` is never
raised by the copier; it is recorded as a warning on the copy result.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding errors."""

    kind = "scaffold"

    def __init__(self, path: str | Path, message: str = "") -> None:
        self.path = Path(path)
        super().__init__(message or f"{self.kind}: {self.path}")


class SourceMissing(ScaffoldError):
    """A listed template entry does not exist on disk (non-fatal)."""

    kind = "source missing"

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"Source path not found, skipping: {path}")


class FilesystemWriteError(ScaffoldError):
    """Creating a directory or writing a file under the destination failed."""

    kind = "filesystem write"

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.reason = reason
        message = f"Failed to write {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(path, message)


class ManifestReadError(ScaffoldError):
    """The template manifest is missing, unreadable or not a JSON object."""

    kind = "manifest read"

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.reason = reason
        message = f"Cannot read manifest {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(path, message)


class ManifestWriteError(ScaffoldError):
    """The transformed manifest could not be persisted."""

    kind = "manifest write"

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.reason = reason
        message = f"Cannot write manifest {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(path, message)
