"""Recursive cell file discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from s57_extract.common import FatalScanError

DEFAULT_SUFFIX = ".000"


def scan_cells(root: Path, suffix: str = DEFAULT_SUFFIX) -> Iterator[Path]:
    """Yields files under ``root`` whose last suffix equals ``suffix``.

    Every call starts a fresh traversal. Entries are visited in name order,
    the files of a directory before its sub-directories, and symlinked
    directories are not followed. Any traversal error raises FatalScanError.
    """

    if not root.exists() or not root.is_dir():
        raise FatalScanError(f"Input path must be an existing directory: {root}")

    yield from _walk(root, suffix)


def _walk(directory: Path, suffix: str) -> Iterator[Path]:
    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        raise FatalScanError(f"failed to read directory {directory}: {exc}") from exc

    sub_dirs: list[Path] = []
    for child in children:
        if child.is_dir():
            if not child.is_symlink():
                sub_dirs.append(child)
            continue
        if child.is_file() and child.suffix == suffix:
            yield child

    for sub_dir in sub_dirs:
        yield from _walk(sub_dir, suffix)
