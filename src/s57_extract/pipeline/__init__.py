"""Pipeline module."""

from .service import run_extraction

__all__ = ["run_extraction"]
