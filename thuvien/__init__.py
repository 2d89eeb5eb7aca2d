"""Manage a small library's book catalogue: loading, editing, searching, lending and saving."""

__version__ = "0.1.0"
__all__ = ["book", "catalog", "report", "cli"]