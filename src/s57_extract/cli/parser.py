"""CLI parser construction."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import NoReturn

from s57_extract.cli.commands import COMMAND_MODULES
from s57_extract.common import UsageError


class CliArgumentParser(argparse.ArgumentParser):
    """Raises UsageError instead of exiting on malformed arguments."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    """Creates the main parser and registers every sub-command."""
    parser = CliArgumentParser(
        prog="s57-extract",
        description="Batch attribute extraction from S-57 cell files.",
    )
    parser.add_argument("--log-config", type=Path, default=None, help="YAML logging dictConfig")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for module in COMMAND_MODULES:
        module.configure(subparsers)

    return parser
