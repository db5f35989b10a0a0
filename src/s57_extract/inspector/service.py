"""Per-cell layer inspection."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from s57_extract.common import CellPlan, ExtractionSettings, PlannedLayer, required_field
from s57_extract.engine import VectorSource, VectorSourceEngine
from s57_extract.observability import get_logger
from s57_extract.rules import LayerRegistry

logger = get_logger(__name__)

DEFAULT_OPEN_OPTIONS: tuple[str, ...] = ExtractionSettings().open_options


def inspect_cell(source: VectorSource, registry: LayerRegistry) -> CellPlan:
    """Builds the plan of registry layers present in an opened cell.

    Layers are checked in registry order. A field rule whose field is absent
    from the layer schema drops the layer; the name is kept in
    ``missing_field_layers`` for reporting.
    """

    planned: list[PlannedLayer] = []
    missing_field_layers: list[str] = []

    for layer_name, rule in registry.items():
        if not source.has_layer(layer_name):
            continue

        field_name = required_field(rule)
        if field_name is None:
            logger.info("  layer found: %s, constant value", layer_name)
            planned.append(PlannedLayer(layer_name=layer_name, rule=rule))
            continue

        available = {name.upper() for name in source.field_names(layer_name)}
        if field_name.upper() not in available:
            logger.warning(
                "  layer found: %s, but field '%s' is missing; layer skipped",
                layer_name,
                field_name,
            )
            missing_field_layers.append(layer_name)
            continue

        logger.info("  layer found: %s, using field '%s'", layer_name, field_name)
        planned.append(PlannedLayer(layer_name=layer_name, rule=rule))

    return CellPlan(layers=tuple(planned), missing_field_layers=tuple(missing_field_layers))


class CellInspector:
    """Opens cells through a source engine and plans their extraction."""

    def __init__(
        self,
        engine: VectorSourceEngine,
        open_options: Sequence[str] = DEFAULT_OPEN_OPTIONS,
    ) -> None:
        self._engine = engine
        self._open_options = tuple(open_options)

    def open(self, path: Path) -> VectorSource:
        """Raises CellOpenError when the engine cannot open the cell."""
        return self._engine.open(path, self._open_options)

    def inspect(self, path: Path, registry: LayerRegistry) -> CellPlan:
        source = self.open(path)
        try:
            return inspect_cell(source, registry)
        finally:
            source.close()
