"""SQLite storage for sales, categories and menu items."""

from __future__ import annotations

import sqlite3
from contextlib import suppress
from datetime import datetime
from os import PathLike

DEFAULT_PATH = "pos_database.db"
SALE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS sales ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "product_name TEXT,"
    "price REAL,"
    "quantity INTEGER,"
    "datetime TEXT)",
    "CREATE TABLE IF NOT EXISTS categories ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT UNIQUE)",
    "CREATE TABLE IF NOT EXISTS menu_items ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT,"
    "price REAL,"
    "category TEXT)",
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """An open till database with its tables in place."""

    def __init__(self, path: str | PathLike[str] = DEFAULT_PATH) -> None:
        self.path = path
        try:
            self.connection = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        try:
            self._create_schema()
        except sqlite3.Error as exc:
            self.connection.close()
            raise DatabaseError(str(exc)) from exc

    def _create_schema(self) -> None:
        cursor = self.connection.cursor()
        cursor.execute(_SCHEMA[0])
        # Older databases may lack the datetime column; adding it twice fails harmlessly.
        with suppress(sqlite3.OperationalError):
            cursor.execute("ALTER TABLE sales ADD COLUMN datetime TEXT")
        for statement in _SCHEMA[1:]:
            cursor.execute(statement)

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def record_sale(self, name: str, price: float, quantity: int, when: datetime) -> int:
        """Store one sold line and return its row id."""
        try:
            cursor = self.connection.execute(
                "INSERT INTO sales (product_name, price, quantity, datetime) VALUES (?, ?, ?, ?)",
                (name, price, quantity, when.strftime(SALE_TIME_FORMAT)),
            )
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor.lastrowid

    def sales(self) -> list[tuple[str, float, int, str]]:
        """All recorded sales as (product, price, quantity, timestamp), oldest first."""
        try:
            rows = self.connection.execute(
                "SELECT product_name, price, quantity, datetime FROM sales ORDER BY id"
            ).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return [tuple(row) for row in rows]

    def item_prices(self) -> dict[str, float]:
        """Menu item names mapped to their prices; later duplicates win."""
        try:
            rows = self.connection.execute("SELECT name, price FROM menu_items").fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return {name: float(price) for name, price in rows}