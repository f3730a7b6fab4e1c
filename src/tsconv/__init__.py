"""tsconv: Unix timestamp and date string converter."""

__version__ = "0.1.0"
