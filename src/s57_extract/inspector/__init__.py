"""Cell inspection."""

from .service import DEFAULT_OPEN_OPTIONS, CellInspector, inspect_cell

__all__ = ["DEFAULT_OPEN_OPTIONS", "CellInspector", "inspect_cell"]
