"""Logging set-up."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(config_path: Path | None = None, level: int = logging.INFO) -> None:
    """Initializes logging from a YAML dictConfig, falling back to basicConfig."""
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                config: dict[str, Any] = yaml.safe_load(f)
            logging.config.dictConfig(config)
            return
        except (OSError, yaml.YAMLError, ValueError, TypeError, AttributeError) as exc:
            logging.basicConfig(level=level, format=DEFAULT_FORMAT)
            logging.getLogger(__name__).warning(
                "logging config %s not applied, using defaults: %s", config_path, exc
            )
            return

    logging.basicConfig(level=level, format=DEFAULT_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
