"""Single-file zip packing for finished outputs."""

from __future__ import annotations

from pathlib import Path
import zipfile

from s57_extract.common import ArchiveError
from s57_extract.observability import get_logger

logger = get_logger(__name__)

ENTRY_COMMENT = b"File comment"


def add_to_archive(source_file: Path, archive_path: Path, name_in_archive: str | None = None) -> None:
    """Adds ``source_file`` as one deflated entry, creating the archive if needed.

    The whole file is read into memory first. Existing entries are kept.
    Raises ArchiveError on any read or write failure.
    """

    entry_name = name_in_archive or source_file.name
    try:
        payload = source_file.read_bytes()
    except OSError as exc:
        raise ArchiveError(f"failed to read source file {source_file}: {exc}") from exc

    if archive_path.exists() and not zipfile.is_zipfile(archive_path):
        raise ArchiveError(f"not a zip archive: {archive_path}")

    mode = "a" if archive_path.exists() else "w"
    info = zipfile.ZipInfo(entry_name)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.comment = ENTRY_COMMENT

    try:
        archive_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive_path, mode=mode, compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(info, payload)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ArchiveError(f"failed to add {entry_name} to {archive_path}: {exc}") from exc


def compress(source_file: Path, archive_path: Path, name_in_archive: str | None = None) -> bool:
    """Non-raising wrapper around add_to_archive. Returns success."""
    try:
        add_to_archive(source_file, archive_path, name_in_archive)
    except ArchiveError as exc:
        logger.error("%s", exc)
        return False

    logger.info("compressed %s into %s", source_file, archive_path)
    return True
