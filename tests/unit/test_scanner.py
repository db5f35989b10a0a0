from __future__ import annotations

from pathlib import Path

import pytest

from s57_extract.common import FatalScanError
from s57_extract.scanner import scan_cells


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def test_scan_finds_cells_recursively_in_stable_order(tmp_path: Path) -> None:
    _touch(tmp_path / "b" / "US5BB01M.000")
    _touch(tmp_path / "a" / "deeper" / "US4AA02M.000")
    _touch(tmp_path / "a" / "US3AA01M.000")
    _touch(tmp_path / "ROOT0001.000")

    found = [path.relative_to(tmp_path).as_posix() for path in scan_cells(tmp_path)]

    assert found == [
        "ROOT0001.000",
        "a/US3AA01M.000",
        "a/deeper/US4AA02M.000",
        "b/US5BB01M.000",
    ]


def test_scan_ignores_other_suffixes_and_updates(tmp_path: Path) -> None:
    _touch(tmp_path / "US5XX01M.000")
    _touch(tmp_path / "US5XX01M.001")
    _touch(tmp_path / "CATALOG.031")
    _touch(tmp_path / "notes.txt")

    assert [path.name for path in scan_cells(tmp_path)] == ["US5XX01M.000"]


def test_scan_is_lazy_and_restartable(tmp_path: Path) -> None:
    _touch(tmp_path / "US5XX01M.000")

    first = scan_cells(tmp_path)
    assert next(first).name == "US5XX01M.000"
    assert [path.name for path in scan_cells(tmp_path)] == ["US5XX01M.000"]


def test_scan_of_empty_directory_yields_nothing(tmp_path: Path) -> None:
    assert list(scan_cells(tmp_path)) == []


def test_scan_missing_root_raises_fatal_error(tmp_path: Path) -> None:
    with pytest.raises(FatalScanError, match="existing directory"):
        list(scan_cells(tmp_path / "missing"))


def _deny_listing(monkeypatch: pytest.MonkeyPatch, denied: Path) -> None:
    original = Path.iterdir

    def iterdir(self: Path):
        if self == denied:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)


def test_scan_failure_below_root_raises_fatal_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _touch(tmp_path / "a" / "US5AA01M.000")
    _touch(tmp_path / "b" / "US5BB01M.000")
    _deny_listing(monkeypatch, tmp_path / "b")

    with pytest.raises(FatalScanError, match="Permission denied"):
        list(scan_cells(tmp_path))
