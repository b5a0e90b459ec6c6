"""Unit tests for utility functions (mcp_init.utils).

Tests cover:
- load_json / dump_json
- atomic_write_text / atomic_copy_file (complete or untouched)
- Rich output helpers (smoke tests)
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from mcp_init.utils import (
    atomic_copy_file,
    atomic_write_text,
    dump_json,
    load_json,
    print_error,
    print_info,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestJson:
    @pytest.mark.unit
    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"a": [1, 2]}), encoding="utf-8")
        assert load_json(path) == {"a": [1, 2]}

    @pytest.mark.unit
    def test_load_json_list(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_json(path) == [1, 2]

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_load_invalid_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)

    @pytest.mark.unit
    def test_dump_json(self):
        assert dump_json({"b": 1, "a": 2}) == '{\n  "b": 1,\n  "a": 2\n}\n'


# ---------------------------------------------------------------------------
# Atomic writes
# ---------------------------------------------------------------------------


class TestAtomicWrites:
    @pytest.mark.unit
    def test_write_text(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        atomic_write_text(path, "héllo\n")
        assert path.read_text(encoding="utf-8") == "héllo\n"
        assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]

    @pytest.mark.unit
    def test_write_text_replaces(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        path.write_text("old contents, longer than the new", encoding="utf-8")
        atomic_write_text(path, "new")
        assert path.read_text(encoding="utf-8") == "new"

    @pytest.mark.unit
    def test_copy_file_bytes(self, tmp_path: Path):
        src = tmp_path / "src.bin"
        src.write_bytes(bytes(range(256)) * 10)
        dst = tmp_path / "dst.bin"
        atomic_copy_file(src, dst)
        assert dst.read_bytes() == src.read_bytes()

    @pytest.mark.unit
    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    def test_copy_file_keeps_mode(self, tmp_path: Path):
        src = tmp_path / "run.sh"
        src.write_text("#!/bin/sh\n", encoding="utf-8")
        src.chmod(0o755)
        dst = tmp_path / "copy.sh"
        atomic_copy_file(src, dst)
        assert dst.stat().st_mode & 0o777 == 0o755

    @pytest.mark.unit
    def test_failed_write_leaves_original(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        path.write_text("original", encoding="utf-8")
        with patch("mcp_init.utils.os.replace", side_effect=OSError("boom")):
            with pytest.raises(OSError, match="boom"):
                atomic_write_text(path, "new")
        assert path.read_text(encoding="utf-8") == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]

    @pytest.mark.unit
    def test_failed_copy_leaves_nothing(self, tmp_path: Path):
        src = tmp_path / "src.txt"
        src.write_text("data", encoding="utf-8")
        with patch("mcp_init.utils.shutil.copyfileobj", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                atomic_copy_file(src, tmp_path / "dst.txt")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["src.txt"]

    @pytest.mark.unit
    def test_missing_source_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            atomic_copy_file(tmp_path / "nope", tmp_path / "dst")
        assert not (tmp_path / "dst").exists()

    @pytest.mark.unit
    def test_missing_parent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            atomic_write_text(tmp_path / "no" / "such" / "dir.txt", "x")


# ---------------------------------------------------------------------------
# Rich output helpers (smoke tests - verify they don't raise)
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self):
        print_summary_table({"Project": "demo", "Files": "3"}, title="Test Summary")

    @pytest.mark.unit
    def test_print_messages(self):
        print_success("done")
        print_error("failed")
        print_warning("careful")
        print_info("note")

    @pytest.mark.unit
    def test_print_next_steps(self, capsys: pytest.CaptureFixture[str]):
        print_next_steps("my-server")
        out = capsys.readouterr().out
        assert "cd my-server" in out
        assert "npm install" in out
