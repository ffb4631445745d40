"""Menu category management."""

from __future__ import annotations

import sqlite3

from tillpoint.database import Database, DatabaseError


class InputError(ValueError):
    """Raised when user-supplied input is missing or malformed."""


class CategoryStore:
    """Adds, lists and deletes menu categories."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def names(self, sort: bool = True) -> list[str]:
        """Category names, alphabetically when sort is true, else in storage order."""
        sql = "SELECT name FROM categories"
        if sort:
            sql += " ORDER BY name ASC"
        try:
            rows = self.db.connection.execute(sql).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return [name for (name,) in rows]

    def add(self, name: str) -> None:
        """Add a category; surrounding whitespace is dropped."""
        name = name.strip()
        if not name:
            raise InputError("Category name cannot be empty.")
        try:
            self.db.connection.execute("INSERT INTO categories (name) VALUES (?)", (name,))
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def delete(self, name: str | None) -> None:
        """Delete the named category; None means nothing was selected."""
        if name is None:
            raise InputError("Please select a category to delete.")
        try:
            self.db.connection.execute("DELETE FROM categories WHERE name = ?", (name,))
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc