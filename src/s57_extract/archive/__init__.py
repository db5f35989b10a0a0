"""Archive packer."""

from .service import add_to_archive, compress

__all__ = ["add_to_archive", "compress"]
