"""Pipeline orchestration service."""

from __future__ import annotations

from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path
import shutil
from typing import Callable, Iterable, Iterator

from s57_extract.common import (
    CellOpenError,
    CellProcessingError,
    ExportRequest,
    ExtractionSettings,
    FatalScanError,
    FileOutcome,
    QueryExecutionError,
    RunReport,
    RunState,
    SchemaMismatchError,
)
from s57_extract.engine import (
    EngineConfig,
    QueryExecutionEngine,
    RowSet,
    TabularExportEngine,
    VectorSourceEngine,
    get_engine,
)
from s57_extract.inspector import CellInspector, inspect_cell
from s57_extract.observability import get_logger
from s57_extract.query import level_code, synthesize
from s57_extract.rules import LayerRegistry
from s57_extract.scanner import scan_cells

logger = get_logger(__name__)


@dataclass(frozen=True)
class _PreparedCell:
    path: Path
    rows: RowSet | None = None
    outcome: FileOutcome | None = None


def run_extraction(
    input_dir: Path,
    output_dir: Path,
    output_name: str,
    registry: LayerRegistry,
    settings: ExtractionSettings | None = None,
    source_engine: VectorSourceEngine | None = None,
    query_engine: QueryExecutionEngine | None = None,
    export_engine: TabularExportEngine | None = None,
    engine_config: EngineConfig | None = None,
) -> RunReport:
    """Runs scan -> inspect -> synthesize -> execute -> export over a cell tree.

    The output directory is removed before the first cell and recreated by
    the export engine on the first successful write, whose columns are then
    locked for the rest of the run. Per-file problems are recorded in the
    report; only a traversal failure raises.
    """

    settings = settings or ExtractionSettings()
    if not input_dir.exists() or not input_dir.is_dir():
        raise FatalScanError(f"Input path must be an existing directory: {input_dir}")
    if settings.workers < 1:
        raise ValueError("workers must be at least 1")

    if source_engine is None or query_engine is None or export_engine is None:
        default_engine = get_engine("gdal", engine_config)
        source_engine = source_engine or default_engine
        query_engine = query_engine or default_engine
        export_engine = export_engine or default_engine

    if output_dir.is_file() or output_dir.is_symlink():
        output_dir.unlink()
        logger.info("removed previous output path: %s", output_dir)
    elif output_dir.exists():
        shutil.rmtree(output_dir)
        logger.info("removed previous output directory: %s", output_dir)

    logger.info(
        "extraction started: input=%s, layers=%s, force_2d=%s",
        input_dir,
        ",".join(registry.layer_names),
        settings.force_2d,
    )

    state = RunState(output_dir=output_dir, output_name=output_name)
    prepare = partial(
        _prepare_cell,
        inspector=CellInspector(source_engine, settings.open_options),
        query_engine=query_engine,
        registry=registry,
        settings=settings,
    )

    cells = scan_cells(input_dir, settings.suffix)
    if settings.workers > 1:
        prepared_cells = _prepare_concurrently(cells, prepare, settings.workers)
    else:
        prepared_cells = (prepare(path) for path in cells)

    for prepared in prepared_cells:
        _finish_cell(prepared, state, export_engine, settings)

    report = RunReport(
        output_path=output_dir / f"{output_name}.csv",
        processed=state.processed,
        exported=state.exported,
        skipped=state.skipped,
        failed=state.failed,
        columns=state.locked_columns,
        outcomes=tuple(state.outcomes),
    )
    logger.info(
        "extraction completed: processed=%d, exported=%d, skipped=%d, failed=%d",
        report.processed,
        report.exported,
        report.skipped,
        report.failed,
    )
    return report


def _prepare_cell(
    path: Path,
    inspector: CellInspector,
    query_engine: QueryExecutionEngine,
    registry: LayerRegistry,
    settings: ExtractionSettings,
) -> _PreparedCell:
    source_path = str(path)
    logger.info("processing: %s", path)

    try:
        source = inspector.open(path)
    except CellOpenError as exc:
        logger.warning("cannot open %s: %s", path, exc)
        return _PreparedCell(path, outcome=FileOutcome(source_path, "skipped_open_failure", str(exc)))

    try:
        try:
            plan = inspect_cell(source, registry)
        except CellOpenError as exc:
            logger.warning("cannot inspect %s: %s", path, exc)
            return _PreparedCell(path, outcome=FileOutcome(source_path, "skipped_open_failure", str(exc)))

        if plan.is_empty:
            if plan.missing_field_layers:
                message = "target layers lack their field: " + ",".join(plan.missing_field_layers)
                logger.warning("  %s, file skipped", message)
                return _PreparedCell(path, outcome=FileOutcome(source_path, "skipped_field_missing", message))
            logger.info("  no target layer found, file skipped")
            return _PreparedCell(path, outcome=FileOutcome(source_path, "skipped_empty"))

        query = synthesize(
            plan,
            level=level_code(path.name),
            attribute_column=registry.attribute_column,
            tolerance=settings.tolerance,
        )
        logger.debug("  query: %s", query)

        try:
            rows = query_engine.execute(source, query)
        except QueryExecutionError as exc:
            logger.warning("query failed for %s: %s", path, exc)
            return _PreparedCell(path, outcome=FileOutcome(source_path, "export_failed", str(exc)))
        return _PreparedCell(path, rows=rows)
    finally:
        source.close()


def _prepare_concurrently(
    cells: Iterable[Path],
    prepare: Callable[[Path], _PreparedCell],
    workers: int,
) -> Iterator[_PreparedCell]:
    """Prepares cells on a bounded pool and yields them in scan order."""
    with ThreadPoolExecutor(max_workers=workers) as pool:
        pending: deque[Future[_PreparedCell]] = deque()
        for path in cells:
            pending.append(pool.submit(prepare, path))
            if len(pending) >= workers * 2:
                yield pending.popleft().result()
        while pending:
            yield pending.popleft().result()


def _finish_cell(
    prepared: _PreparedCell,
    state: RunState,
    export_engine: TabularExportEngine,
    settings: ExtractionSettings,
) -> None:
    """Single writer: the only place that touches the destination."""
    if prepared.outcome is not None:
        state.record(prepared.outcome)
        return

    rows = prepared.rows
    if rows is None:
        raise ValueError(f"prepared cell without rows or outcome: {prepared.path}")

    source_path = str(prepared.path)
    append = not state.first_write
    try:
        if append and set(rows.columns) != set(state.locked_columns):
            raise SchemaMismatchError(
                f"columns {list(rows.columns)} do not match output columns {list(state.locked_columns)}"
            )
        logger.info("  exporting %s (append=%s)", prepared.path.name, append)
        export_engine.export(
            rows,
            ExportRequest(
                output_dir=state.output_dir,
                output_name=state.output_name,
                append=append,
                force_2d=settings.force_2d,
            ),
        )
    except CellProcessingError as exc:
        logger.warning("export failed for %s: %s", prepared.path, exc)
        state.record(FileOutcome(source_path, "export_failed", str(exc), rows.columns))
        return
    finally:
        rows.close()

    if state.first_write:
        state.first_write = False
        state.locked_columns = rows.columns
    state.record(FileOutcome(source_path, "exported", columns=rows.columns))
