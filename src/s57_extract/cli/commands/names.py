"""names command handler."""

from __future__ import annotations

import argparse

from s57_extract.cli.commands._extraction import add_extraction_arguments, execute_extraction
from s57_extract.rules import DEFAULT_NAME_FIELD, DEFAULT_NAME_LAYERS, build_name_registry


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("names", help="non-empty text field of the listed layers")
    add_extraction_arguments(parser, default_name="nobjnm", force_2d_default=False)
    parser.add_argument(
        "-l",
        "--layers",
        nargs="+",
        default=list(DEFAULT_NAME_LAYERS),
        help="layers to read",
    )
    parser.add_argument("-f", "--field", default=DEFAULT_NAME_FIELD, help="field to filter on")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    return execute_extraction(args, build_name_registry(args.layers, args.field))
