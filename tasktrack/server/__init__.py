"""HTTP server assembly for tasktrack."""

from tasktrack.server.app import AppState, create_app

__all__ = ["AppState", "create_app"]
