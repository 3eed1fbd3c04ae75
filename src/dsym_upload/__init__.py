"""Upload dSYM debug symbols to a crash reporting service."""

__version__ = "1.0.0"
