"""pack command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from s57_extract.archive import compress


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("pack", help="compress one file into a zip archive")
    parser.add_argument("--source", required=True, type=Path)
    parser.add_argument("--archive", required=True, type=Path)
    parser.add_argument("--name", default=None, help="entry name inside the archive")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    if not compress(args.source, args.archive, args.name):
        return 1
    print(f"[OK] archive={args.archive}")
    return 0
