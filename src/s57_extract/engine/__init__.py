"""Vector source, query and export engines."""

from .adapter import (
    Engine,
    EngineConfig,
    QueryExecutionEngine,
    RowSet,
    TabularExportEngine,
    VectorSource,
    VectorSourceEngine,
    get_engine,
)

__all__ = [
    "Engine",
    "EngineConfig",
    "QueryExecutionEngine",
    "RowSet",
    "TabularExportEngine",
    "VectorSource",
    "VectorSourceEngine",
    "get_engine",
]
