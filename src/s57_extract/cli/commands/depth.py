"""depth command handler."""

from __future__ import annotations

import argparse

from s57_extract.cli.commands._extraction import add_extraction_arguments, execute_extraction
from s57_extract.rules import build_depth_registry


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("depth", help="depth values of land, depth and hazard layers")
    add_extraction_arguments(parser, default_name="depth", force_2d_default=True)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    return execute_extraction(args, build_depth_registry())
