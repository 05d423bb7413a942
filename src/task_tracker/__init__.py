"""Task tracker: an ordered, SQLite-backed task store and the operations on it."""

__version__ = "0.1.0"
