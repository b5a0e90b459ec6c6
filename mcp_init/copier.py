"""Recursive template copy with path-segment-aware exclusion.

The copier walks a template subtree depth-first and mirrors it under a
destination directory.  Exclusion rules are paths relative to the template
root; a rule excludes the path it names and everything beneath it, but never
a sibling that merely shares a name prefix (``src/foo`` does not exclude
``src/foobar``).

Symlinks are followed: a link to a file is written as a regular file and a
link to a directory is copied as a directory.  A dangling link is reported
as a missing source.  Special files (named pipes, sockets, device nodes)
are never opened; they raise ``FilesystemWriteError`` naming the source.
Nothing at the destination is ever deleted.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePath, PurePosixPath

from .errors import FilesystemWriteError, SourceMissing
from .models import CopyResult
from .utils import atomic_copy_file


# ---------------------------------------------------------------------------
# Path specs
# ---------------------------------------------------------------------------


def normalize_path_spec(path: str | PurePath) -> tuple[str, ...]:
    """Normalize *path* into a tuple of POSIX segments.

    ``"./src/foo/"``, ``"src/foo"`` and (on Windows) ``"src\\foo"`` all give
    ``("src", "foo")``.  The root (``""`` or ``"."``) gives ``()``.
    """
    posix = PurePath(path).as_posix()
    return tuple(part for part in PurePosixPath(posix).parts if part != ".")


class ExclusionSet:
    """Paths, relative to the template root, that must never be copied.

    Membership is a segment-wise prefix test, so order and duplicates do not
    matter.  The root itself cannot be excluded.
    """

    def __init__(self, entries: Iterable[str | PurePath] = ()) -> None:
        specs = (normalize_path_spec(entry) for entry in entries)
        self._specs: frozenset[tuple[str, ...]] = frozenset(s for s in specs if s)

    def matches(self, relative_path: str | PurePath) -> bool:
        """Return ``True`` if *relative_path* equals or descends from an entry."""
        parts = normalize_path_spec(relative_path)
        if not parts:
            return False
        return any(parts[: len(spec)] == spec for spec in self._specs)

    def __contains__(self, relative_path: object) -> bool:
        if not isinstance(relative_path, (str, PurePath)):
            return False
        return self.matches(relative_path)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted("/".join(spec) for spec in self._specs))

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"ExclusionSet({list(self)!r})"


# ---------------------------------------------------------------------------
# TreeCopier
# ---------------------------------------------------------------------------


class TreeCopier:
    """Materializes filtered copies of entries under a fixed template root."""

    def __init__(self, template_root: str | Path) -> None:
        self.template_root = Path(template_root)

    def relative_to_root(self, source: str | Path) -> str:
        return os.path.relpath(source, self.template_root)

    def copy(
        self,
        source: str | Path,
        destination: str | Path,
        exclusions: ExclusionSet,
    ) -> CopyResult:
        """Copy *source* to *destination*, skipping excluded paths.

        Args:
            source: A file or directory, normally under ``template_root``.
            destination: Where the copy of *source* should live.
            exclusions: Root-relative paths to leave out.

        Returns:
            A ``CopyResult`` listing written files, created directories,
            excluded paths and ``SourceMissing`` warnings.

        Raises:
            FilesystemWriteError: If a directory cannot be created or listed,
                a source file cannot be read or is not a regular file, or a
                file cannot be written.  The error names the failing path.
        """
        result = CopyResult()
        self._copy(Path(source), Path(destination), exclusions, result)
        return result

    def _copy(
        self,
        source: Path,
        destination: Path,
        exclusions: ExclusionSet,
        result: CopyResult,
    ) -> None:
        if exclusions.matches(self.relative_to_root(source)):
            result.excluded.append(source)
            return

        if not source.exists():
            result.missing.append(SourceMissing(source))
            return

        if source.is_dir():
            if _ensure_directory(destination):
                result.directories.append(destination)
            try:
                children = sorted(source.iterdir(), key=lambda p: p.name)
            except OSError as exc:
                raise FilesystemWriteError(source, f"cannot list directory ({exc})") from exc
            for child in children:
                self._copy(child, destination / child.name, exclusions, result)
            return

        try:
            mode = source.stat().st_mode
        except OSError as exc:
            raise FilesystemWriteError(source, f"cannot read file ({exc})") from exc
        # Opening a FIFO or device for reading can block forever.
        if not stat.S_ISREG(mode):
            raise FilesystemWriteError(source, "not a regular file")

        if _ensure_directory(destination.parent):
            result.directories.append(destination.parent)
        try:
            atomic_copy_file(source, destination)
        except OSError as exc:
            failed = source if _names_path(exc, source) else destination
            raise FilesystemWriteError(failed, str(exc)) from exc
        result.files.append(destination)


def _names_path(exc: OSError, path: Path) -> bool:
    return exc.filename is not None and Path(exc.filename) == path


def _ensure_directory(path: Path) -> bool:
    """Create *path* with missing parents.  Returns ``True`` if it was created."""
    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemWriteError(path, str(exc)) from exc
    return True
