"""Arguments and execution shared by the extraction commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from s57_extract.archive import compress
from s57_extract.common import ExtractionSettings, RunReport
from s57_extract.engine import EngineConfig
from s57_extract.pipeline import run_extraction
from s57_extract.rules import LayerRegistry


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def add_extraction_arguments(
    parser: argparse.ArgumentParser,
    default_name: str,
    force_2d_default: bool,
) -> None:
    parser.add_argument("-i", "--input-dir", required=True, type=Path, help="directory holding S-57 cells")
    parser.add_argument(
        "-o",
        "--output-dir",
        required=True,
        type=Path,
        help="CSV output directory, deleted and recreated on every run",
    )
    parser.add_argument("-n", "--output-name", default=default_name, help="output table name (no suffix)")
    parser.add_argument(
        "--force-2d",
        action=argparse.BooleanOptionalAction,
        default=force_2d_default,
        help="write 2D geometries",
    )
    parser.add_argument("--workers", type=positive_int, default=1, help="cells prepared in parallel")
    parser.add_argument("--wkt-precision", type=positive_int, default=8, help="decimal digits in WKT output")
    parser.add_argument("--zip", type=Path, default=None, help="compress the finished CSV into this archive")


def execute_extraction(args: argparse.Namespace, registry: LayerRegistry) -> int:
    report = run_extraction(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        output_name=args.output_name,
        registry=registry,
        settings=ExtractionSettings(force_2d=args.force_2d, workers=args.workers),
        engine_config=EngineConfig(wkt_precision=args.wkt_precision),
    )
    _print_report(report)

    if args.zip is not None and report.exported > 0:
        if compress(report.output_path, args.zip):
            print(f"[OK] archive={args.zip}")
        else:
            print(f"[WARN] archive failed: {args.zip}")
    return 0


def _print_report(report: RunReport) -> None:
    print(f"[OK] output={report.output_path if report.exported else '(none)'}")
    print(
        f"[OK] processed={report.processed} exported={report.exported} "
        f"skipped={report.skipped} failed={report.failed}"
    )
    if report.has_failures:
        failed = [item for item in report.outcomes if item.status == "export_failed"]
        for item in failed[:20]:
            print(f"[WARN] {item.source_path} ({item.message})")
