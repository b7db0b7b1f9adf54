"""Tests for atomic text IO helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from filebind.io import atomic_replace, read_text_exact, temp_path_for, write_text_atomic


def test_temp_path_is_sibling_with_suffix(tmp_path: Path) -> None:
    assert temp_path_for(tmp_path / "token.txt", ".tmp") == tmp_path / "token.txt.tmp"


def test_atomic_replace_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "token.txt"
    out_path.write_bytes(b"original")

    with pytest.raises(RuntimeError, match="boom"):
        with atomic_replace(out_path, temp_suffix=".tmp") as handle:
            handle.write(b"half-written")
            raise RuntimeError("boom")

    assert out_path.read_bytes() == b"original"
    assert not (tmp_path / "token.txt.tmp").exists()


def test_write_text_atomic_preserves_line_endings(tmp_path: Path) -> None:
    out_path = tmp_path / "value.txt"

    write_text_atomic(path=out_path, content="a\r\nb\n", temp_suffix=".tmp")

    assert out_path.read_bytes() == b"a\r\nb\n"
    assert read_text_exact(out_path) == "a\r\nb\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["value.txt"]


def test_write_text_atomic_truncates_stale_temp(tmp_path: Path) -> None:
    out_path = tmp_path / "value.txt"
    (tmp_path / "value.txt.tmp").write_bytes(b"leftover from a crashed run")

    write_text_atomic(path=out_path, content="new", temp_suffix=".tmp")

    assert out_path.read_bytes() == b"new"
    assert not (tmp_path / "value.txt.tmp").exists()


def test_write_text_atomic_encodes_utf8(tmp_path: Path) -> None:
    out_path = tmp_path / "value.txt"

    write_text_atomic(path=out_path, content="héllo ✓", temp_suffix=".tmp")

    assert out_path.read_bytes() == "héllo ✓".encode()
