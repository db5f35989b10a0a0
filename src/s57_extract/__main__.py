"""Entry point for the S57 Extract CLI."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from s57_extract.cli import build_parser
from s57_extract.common import UsageError, UserInputError
from s57_extract.observability import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except UsageError as exc:
        sys.stderr.write(exc.usage or parser.format_usage())
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return 1

    setup_logging(args.log_config, level=logging.DEBUG if args.verbose else logging.INFO)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stderr)
        return 1

    try:
        return int(handler(args))
    except UserInputError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("filesystem error: %s", exc)
        return 1
    except Exception as exc:  # pragma: no cover
        logger.error("extraction failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
