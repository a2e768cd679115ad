"""Tests for atomic file replacement."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from goboilr.emit.writer import write_atomic


def test_write_atomic_creates_file(tmp_path: Path) -> None:
    destination = tmp_path / "out.go"
    assert write_atomic(destination, "package out\n") is True
    assert destination.read_text(encoding="utf-8") == "package out\n"
    assert list(tmp_path.iterdir()) == [destination]


def test_write_atomic_skips_identical_content(tmp_path: Path) -> None:
    destination = tmp_path / "out.go"
    write_atomic(destination, "package out\n")
    assert write_atomic(destination, "package out\n") is False


def test_failed_replace_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    destination = tmp_path / "out.go"
    destination.write_text("package old\n", encoding="utf-8")

    def _fail(src, dst):  # type: ignore[no-untyped-def]
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _fail)
    with pytest.raises(OSError):
        write_atomic(destination, "package new\n")

    assert destination.read_text(encoding="utf-8") == "package old\n"
    assert list(tmp_path.iterdir()) == [destination]


def test_write_atomic_requires_existing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        write_atomic(tmp_path / "nope" / "out.go", "package out\n")


def test_new_file_mode_follows_umask(tmp_path: Path) -> None:
    previous = os.umask(0o027)
    try:
        destination = tmp_path / "out.go"
        write_atomic(destination, "package out\n")
    finally:
        os.umask(previous)
    assert stat.S_IMODE(destination.stat().st_mode) == 0o640


def test_existing_file_mode_is_preserved(tmp_path: Path) -> None:
    destination = tmp_path / "out.go"
    destination.write_text("package old\n", encoding="utf-8")
    destination.chmod(0o600)

    assert write_atomic(destination, "package new\n") is True
    assert stat.S_IMODE(destination.stat().st_mode) == 0o600
