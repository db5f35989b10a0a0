"""Command line interface."""

from .parser import CliArgumentParser, build_parser

__all__ = ["CliArgumentParser", "build_parser"]
