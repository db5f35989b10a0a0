"""S57 Extract: batch attribute extraction from S-57 chart cells."""

__version__ = "0.1.0"
