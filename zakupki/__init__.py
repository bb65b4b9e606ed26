"""Fetch, store and parse 44-FZ procurement notice pages into tender records."""

__version__ = "0.1.0"
__all__ = ["cache", "cli", "fetch", "models", "pages", "parser", "storage"]