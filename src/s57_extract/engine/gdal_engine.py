"""GDAL/OGR implementation of the engine contracts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from osgeo import gdal, ogr

from s57_extract.common import (
    GEOMETRY_COLUMN,
    CellOpenError,
    ExportRequest,
    QueryExecutionError,
)

from .adapter import EngineConfig

gdal.UseExceptions()
ogr.UseExceptions()

logger = logging.getLogger(__name__)

_RESULT_LAYER_NAME = "result"


class GdalVectorSource:
    def __init__(self, path: Path, dataset: gdal.Dataset) -> None:
        self.path = path
        self._dataset: gdal.Dataset | None = dataset

    @property
    def dataset(self) -> gdal.Dataset:
        if self._dataset is None:
            raise CellOpenError(f"source already closed: {self.path}")
        return self._dataset

    def has_layer(self, layer_name: str) -> bool:
        try:
            return self.dataset.GetLayerByName(layer_name) is not None
        except RuntimeError:
            return False

    def field_names(self, layer_name: str) -> tuple[str, ...]:
        try:
            layer = self.dataset.GetLayerByName(layer_name)
            if layer is None:
                return ()
            defn = layer.GetLayerDefn()
        except RuntimeError as exc:
            raise CellOpenError(f"failed to read schema of {layer_name} in {self.path}: {exc}") from exc
        return tuple(defn.GetFieldDefn(i).GetName() for i in range(defn.GetFieldCount()))

    def close(self) -> None:
        self._dataset = None


class GdalRowSet:
    def __init__(self, dataset: gdal.Dataset, columns: tuple[str, ...]) -> None:
        self.columns = columns
        self._dataset: gdal.Dataset | None = dataset

    @property
    def dataset(self) -> gdal.Dataset:
        if self._dataset is None:
            raise QueryExecutionError("row set already closed")
        return self._dataset

    def close(self) -> None:
        self._dataset = None


class GdalEngine:
    """Opens cells with the S57 driver, queries them with the SQLite dialect
    and writes the result as CSV with a WKT geometry column."""

    def __init__(self, config: EngineConfig) -> None:
        self._config = config
        gdal.SetConfigOption("OGR_WKT_PRECISION", str(config.wkt_precision))

    def open(self, path: Path, open_options: Sequence[str] = ()) -> GdalVectorSource:
        try:
            dataset = gdal.OpenEx(str(path), gdal.OF_VECTOR, open_options=list(open_options))
        except RuntimeError as exc:
            raise CellOpenError(f"failed to open {path}: {exc}") from exc
        if dataset is None:
            raise CellOpenError(f"failed to open {path}")
        return GdalVectorSource(path, dataset)

    def execute(self, source: GdalVectorSource, query: str) -> GdalRowSet:
        memory_driver = ogr.GetDriverByName("MEM") or ogr.GetDriverByName("Memory")
        if memory_driver is None:
            raise QueryExecutionError("no in-memory vector driver available")

        result_layer = None
        try:
            result_layer = source.dataset.ExecuteSQL(query, dialect=self._config.dialect)
            if result_layer is None:
                raise QueryExecutionError(f"query returned no result layer: {source.path}")
            memory_ds = memory_driver.CreateDataSource(f"rows_{source.path.stem}")
            memory_ds.CopyLayer(result_layer, _RESULT_LAYER_NAME)
        except RuntimeError as exc:
            raise QueryExecutionError(f"query failed for {source.path}: {exc}") from exc
        finally:
            if result_layer is not None:
                source.dataset.ReleaseResultSet(result_layer)

        defn = memory_ds.GetLayerByName(_RESULT_LAYER_NAME).GetLayerDefn()
        columns = (GEOMETRY_COLUMN,) + tuple(
            defn.GetFieldDefn(i).GetName() for i in range(defn.GetFieldCount())
        )
        return GdalRowSet(memory_ds, columns)

    def export(self, rows: GdalRowSet, request: ExportRequest) -> None:
        options = gdal.VectorTranslateOptions(
            format=self._config.output_format,
            accessMode="append" if request.append else None,
            layerName=request.output_name,
            layerCreationOptions=["GEOMETRY=AS_WKT"],
            dim="2" if request.force_2d else None,
        )
        try:
            destination = gdal.VectorTranslate(
                destNameOrDestDS=str(request.output_dir),
                srcDS=rows.dataset,
                options=options,
            )
        except RuntimeError as exc:
            raise QueryExecutionError(f"export to {request.output_dir} failed: {exc}") from exc

        if destination is None:
            raise QueryExecutionError(f"export to {request.output_dir} failed")
        # Dropping the reference flushes and closes the CSV file.
        destination = None
        logger.debug("exported rows: dest=%s, append=%s", request.output_dir, request.append)
