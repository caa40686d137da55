"""tasktrack: per-user task tracking service."""

__version__ = "1.0.0"
