"""Shared data models for S57 Extract."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Union

FileStatus = Literal[
    "exported",
    "skipped_empty",
    "skipped_open_failure",
    "skipped_field_missing",
    "export_failed",
]

GEOMETRY_COLUMN = "WKT"
LAYER_COLUMN = "LAYERS"
LEVEL_COLUMN = "LEVEL"


@dataclass(frozen=True)
class ConstantRule:
    """Every feature of the layer reports ``value``."""

    value: float

    def output_columns(self, attribute_column: str) -> tuple[str, ...]:
        return (GEOMETRY_COLUMN, LAYER_COLUMN, attribute_column)


@dataclass(frozen=True)
class FieldCastRule:
    """Reports ``field_name`` cast to REAL; NULL and empty values dropped."""

    field_name: str

    def output_columns(self, attribute_column: str) -> tuple[str, ...]:
        return (GEOMETRY_COLUMN, LAYER_COLUMN, attribute_column)


@dataclass(frozen=True)
class FieldFilterRule:
    """Reports ``field_name`` as text with the cell level code attached."""

    field_name: str

    def output_columns(self, attribute_column: str) -> tuple[str, ...]:
        return (GEOMETRY_COLUMN, LEVEL_COLUMN, LAYER_COLUMN, self.field_name)


ExtractionRule = Union[ConstantRule, FieldCastRule, FieldFilterRule]


def required_field(rule: ExtractionRule) -> str | None:
    if isinstance(rule, (FieldCastRule, FieldFilterRule)):
        return rule.field_name
    return None


@dataclass(frozen=True)
class PlannedLayer:
    layer_name: str
    rule: ExtractionRule
    field_present: bool = True


@dataclass(frozen=True)
class CellPlan:
    layers: tuple[PlannedLayer, ...]
    missing_field_layers: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.layers


@dataclass(frozen=True)
class ExtractionSettings:
    force_2d: bool = False
    tolerance: float = 0.00025
    open_options: tuple[str, ...] = ("SPLIT_MULTIPOINT=ON", "ADD_SOUNDG_DEPTH=ON")
    suffix: str = ".000"
    workers: int = 1


@dataclass(frozen=True)
class ExportRequest:
    output_dir: Path
    output_name: str
    append: bool
    force_2d: bool


@dataclass(frozen=True)
class FileOutcome:
    source_path: str
    status: FileStatus
    message: str = ""
    columns: tuple[str, ...] = ()


@dataclass
class RunState:
    """Mutable per-run bookkeeping owned by the pipeline."""

    output_dir: Path
    output_name: str
    first_write: bool = True
    locked_columns: tuple[str, ...] = ()
    processed: int = 0
    exported: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: list[FileOutcome] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        self.processed += 1
        self.outcomes.append(outcome)
        if outcome.status == "exported":
            self.exported += 1
        elif outcome.status == "export_failed":
            self.failed += 1
        else:
            self.skipped += 1


@dataclass(frozen=True)
class RunReport:
    output_path: Path
    processed: int
    exported: int
    skipped: int
    failed: int
    columns: tuple[str, ...] = ()
    outcomes: tuple[FileOutcome, ...] = ()

    @property
    def has_failures(self) -> bool:
        return self.failed > 0
