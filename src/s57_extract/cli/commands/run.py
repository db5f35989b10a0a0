"""run command handler: registry read from a YAML file."""

from __future__ import annotations

import argparse
from pathlib import Path

from s57_extract.cli.commands._extraction import add_extraction_arguments, execute_extraction
from s57_extract.rules import load_layer_registry


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("run", help="extract with a registry read from YAML")
    add_extraction_arguments(parser, default_name="extract", force_2d_default=False)
    parser.add_argument("-r", "--rules", required=True, type=Path, help="registry YAML file")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    return execute_extraction(args, load_layer_registry(args.rules))
