"""Common models and exceptions."""

from .exceptions import (
    ArchiveError,
    CellOpenError,
    CellProcessingError,
    FatalScanError,
    QueryExecutionError,
    RegistryError,
    SchemaMismatchError,
    UsageError,
    UserInputError,
)
from .models import (
    GEOMETRY_COLUMN,
    LAYER_COLUMN,
    LEVEL_COLUMN,
    CellPlan,
    ConstantRule,
    ExportRequest,
    ExtractionRule,
    ExtractionSettings,
    FieldCastRule,
    FieldFilterRule,
    FileOutcome,
    FileStatus,
    PlannedLayer,
    RunReport,
    RunState,
    required_field,
)

__all__ = [
    "GEOMETRY_COLUMN",
    "LAYER_COLUMN",
    "LEVEL_COLUMN",
    "ArchiveError",
    "CellOpenError",
    "CellPlan",
    "CellProcessingError",
    "ConstantRule",
    "ExportRequest",
    "ExtractionRule",
    "ExtractionSettings",
    "FatalScanError",
    "FieldCastRule",
    "FieldFilterRule",
    "FileOutcome",
    "FileStatus",
    "PlannedLayer",
    "QueryExecutionError",
    "RegistryError",
    "RunReport",
    "RunState",
    "SchemaMismatchError",
    "UsageError",
    "UserInputError",
    "required_field",
]
