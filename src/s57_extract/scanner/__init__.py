"""Cell file scanning."""

from .service import DEFAULT_SUFFIX, scan_cells

__all__ = ["DEFAULT_SUFFIX", "scan_cells"]
