"""Fake engines shared by the test suite.

A fake cell is a JSON file (named ``*.000``) of the form::

    {"layers": {"DEPARE": {"fields": ["DRVAL1"],
                           "features": [{"geometry": "POINT (1 2)", "DRVAL1": 5}]}}}

The fake query engine loads the layers into an in-memory SQLite database and
runs the synthesized SQL unchanged, with the geometry functions registered as
pass-through functions.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
import json
from pathlib import Path
import sqlite3
from typing import Any, Sequence

import pytest

from s57_extract.common import CellOpenError, ExportRequest, QueryExecutionError


def write_cell(path: Path, layers: dict[str, dict[str, Any]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"layers": layers}), encoding="utf-8")
    return path


def layer(fields: Sequence[str], *features: dict[str, Any]) -> dict[str, Any]:
    return {"fields": list(fields), "features": list(features)}


def read_rows(csv_path: Path) -> list[dict[str, str]]:
    with open(csv_path, encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


class FakeSource:
    def __init__(self, path: Path, layers: dict[str, dict[str, Any]]) -> None:
        self.path = path
        self.layers = layers
        self.closed = False

    def has_layer(self, layer_name: str) -> bool:
        return layer_name in self.layers

    def field_names(self, layer_name: str) -> tuple[str, ...]:
        return tuple(self.layers.get(layer_name, {}).get("fields", ()))

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeRowSet:
    columns: tuple[str, ...]
    rows: list[tuple[Any, ...]]
    source_path: Path
    closed: bool = False

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeEngine:
    """Source, query and export engine backed by JSON, SQLite and csv."""

    fail_export_for: set[str] = field(default_factory=set)
    opened: list[tuple[Path, tuple[str, ...]]] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)
    exports: list[ExportRequest] = field(default_factory=list)

    def open(self, path: Path, open_options: Sequence[str] = ()) -> FakeSource:
        self.opened.append((path, tuple(open_options)))
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            layers = payload["layers"]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise CellOpenError(f"failed to open {path}: {exc}") from exc
        return FakeSource(path, layers)

    def execute(self, source: FakeSource, query: str) -> FakeRowSet:
        self.queries.append(query)
        conn = sqlite3.connect(":memory:")
        try:
            conn.create_function("ST_MakeValid", 1, lambda geometry: geometry)
            conn.create_function("ST_SimplifyPreserveTopology", 2, lambda geometry, tolerance: geometry)
            for name, content in source.layers.items():
                columns = ["geometry", *content.get("fields", [])]
                quoted = ", ".join(f'"{column}"' for column in columns)
                conn.execute(f'CREATE TABLE "{name}" ({quoted})')
                for feature in content.get("features", []):
                    conn.execute(
                        f'INSERT INTO "{name}" VALUES ({", ".join("?" for _ in columns)})',
                        [feature.get(column) for column in columns],
                    )
            cursor = conn.execute(query)
            result_columns = tuple(item[0] for item in cursor.description)
            rows = cursor.fetchall()
        except sqlite3.Error as exc:
            raise QueryExecutionError(f"query failed: {exc}") from exc
        finally:
            conn.close()
        return FakeRowSet(columns=result_columns, rows=rows, source_path=source.path)

    def export(self, rows: FakeRowSet, request: ExportRequest) -> None:
        if rows.source_path.name in self.fail_export_for:
            raise QueryExecutionError(f"export rejected for {rows.source_path.name}")
        self.exports.append(request)

        request.output_dir.mkdir(parents=True, exist_ok=True)
        csv_path = request.output_dir / f"{request.output_name}.csv"
        if request.append:
            with open(csv_path, encoding="utf-8", newline="") as f:
                header = next(csv.reader(f))
            with open(csv_path, "a", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                for row in rows.rows:
                    by_name = dict(zip(rows.columns, row))
                    writer.writerow([by_name.get(column) for column in header])
            return

        with open(csv_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(rows.columns)
            writer.writerows(rows.rows)


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def use_fake_engine(monkeypatch: pytest.MonkeyPatch, fake_engine: FakeEngine) -> FakeEngine:
    """Makes the pipeline's default engine the fake one."""
    monkeypatch.setattr(
        "s57_extract.pipeline.service.get_engine",
        lambda name, config=None: fake_engine,
    )
    return fake_engine
