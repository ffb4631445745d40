"""A small command-line point-of-sale till backed by SQLite."""

__version__ = "0.1.0"