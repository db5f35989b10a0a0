"""CLI command modules."""

from __future__ import annotations

from types import ModuleType

from s57_extract.cli.commands import depth, names, pack, run

COMMAND_MODULES: list[ModuleType] = [depth, names, run, pack]

__all__ = ["COMMAND_MODULES"]
