"""Atomic replacement of generated files."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

_DEFAULT_MODE = 0o666


def write_atomic(destination: Path, content: str) -> bool:
    """Write ``content`` to ``destination`` through a sibling temp file.

    Returns False when the destination already holds exactly ``content``
    and was left untouched. Raises ``OSError`` (``FileNotFoundError`` or
    ``NotADirectoryError`` for a bad parent) without leaving the temp file
    behind.
    """
    data = content.encode("utf-8")
    parent = destination.parent
    if not parent.exists():
        raise FileNotFoundError(f"directory {parent} does not exist")
    if not parent.is_dir():
        raise NotADirectoryError(f"{parent} is not a directory")

    mode = _default_mode()
    try:
        current = destination.stat()
    except FileNotFoundError:
        pass
    else:
        if destination.is_file() and destination.read_bytes() == data:
            return False
        mode = stat.S_IMODE(current.st_mode)

    handle = tempfile.NamedTemporaryFile(
        "wb", dir=parent, prefix=f".{destination.name}.", suffix=".tmp", delete=False
    )
    temp_path = Path(handle.name)
    try:
        with handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_path, mode)
        os.replace(temp_path, destination)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return True


def _default_mode() -> int:
    """Permissions a plain ``open(path, "w")`` would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return _DEFAULT_MODE & ~umask


__all__ = ["write_atomic"]
