"""Query synthesis."""

from .service import DEFAULT_LEVEL, DEFAULT_TOLERANCE, level_code, synthesize

__all__ = ["DEFAULT_LEVEL", "DEFAULT_TOLERANCE", "level_code", "synthesize"]
