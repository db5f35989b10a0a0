"""Engine contracts for opening cells, running queries and writing tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from s57_extract.common import ExportRequest


@dataclass(frozen=True)
class EngineConfig:
    wkt_precision: int = 8
    dialect: str = "SQLite"
    output_format: str = "CSV"


class VectorSource(Protocol):
    """An opened cell file."""

    path: Path

    def has_layer(self, layer_name: str) -> bool:
        ...

    def field_names(self, layer_name: str) -> tuple[str, ...]:
        ...

    def close(self) -> None:
        ...


class RowSet(Protocol):
    """Result of a query, ready to be written."""

    columns: tuple[str, ...]

    def close(self) -> None:
        ...


class VectorSourceEngine(Protocol):
    def open(self, path: Path, open_options: Sequence[str] = ()) -> VectorSource:
        """Raises CellOpenError when the file cannot be opened."""
        ...


class QueryExecutionEngine(Protocol):
    def execute(self, source: VectorSource, query: str) -> RowSet:
        """Raises QueryExecutionError when the query is rejected."""
        ...


class TabularExportEngine(Protocol):
    def export(self, rows: RowSet, request: ExportRequest) -> None:
        """Raises QueryExecutionError when the destination rejects the rows."""
        ...


class Engine(VectorSourceEngine, QueryExecutionEngine, TabularExportEngine, Protocol):
    """Single object serving as source, query and export engine."""


def get_engine(name: str, config: EngineConfig | None = None) -> Engine:
    """Returns an engine implementing all three contracts."""
    if not name or not name.strip():
        raise ValueError("Engine name must not be empty")
    engine_name = name.strip().lower()
    if engine_name in {"gdal", "ogr"}:
        from s57_extract.engine.gdal_engine import GdalEngine

        return GdalEngine(config or EngineConfig())
    raise ValueError(f"Unsupported engine: {name}")
