"""Custom exceptions for command exit mapping."""

from __future__ import annotations


class UserInputError(Exception):
    """Raised when user input or environment is invalid."""


class UsageError(UserInputError):
    """Raised by the argument parser instead of exiting the process."""

    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class RegistryError(UserInputError):
    """Raised when a layer registry is malformed."""


class FatalScanError(UserInputError):
    """Raised when the input tree cannot be traversed. Aborts the run."""


class CellProcessingError(Exception):
    """Base class for per-file failures. Never escapes the pipeline."""


class CellOpenError(CellProcessingError):
    """Raised when a cell file cannot be opened by the vector source engine."""


class QueryExecutionError(CellProcessingError):
    """Raised when the query or export engine rejects a synthesized query."""


class SchemaMismatchError(CellProcessingError):
    """Raised when a row set does not match the locked output columns."""


class ArchiveError(Exception):
    """Raised when the archive packer cannot write an entry."""
