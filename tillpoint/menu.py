"""Menu items: adding, deleting and laying them out by category."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TypeVar

from tillpoint.categories import CategoryStore, InputError
from tillpoint.database import Database, DatabaseError
from tillpoint.formatting import parse_number

T = TypeVar("T")

GRID_COLUMNS = 3


@dataclass(frozen=True)
class MenuItem:
    """A single item on the menu."""

    id: int
    name: str
    price: float
    category: str


@dataclass
class MenuSection:
    """All menu items that share one category."""

    category: str
    items: list[MenuItem] = field(default_factory=list)


class MenuStore:
    """Reads and edits the menu."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def add_item(self, name: str, price_text: str, category: str) -> int:
        """Validate and store a new item; return its id."""
        if not CategoryStore(self.db).names(sort=False):
            raise InputError("Please add categories before adding items.")
        name = name.strip()
        price_text = price_text.strip()
        if not name or not price_text or not category:
            raise InputError("Please fill all fields.")
        if category not in CategoryStore(self.db).names(sort=False):
            raise InputError(f"Unknown category: {category}")
        try:
            price = parse_number(price_text)
        except ValueError as exc:
            raise InputError("Price must be a valid number.") from exc
        try:
            cursor = self.db.connection.execute(
                "INSERT INTO menu_items (name, price, category) VALUES (?, ?, ?)",
                (name, price, category),
            )
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor.lastrowid

    def delete_item(self, item_id: int | None) -> bool:
        """Delete an item by id; None means nothing was selected.

        Returns whether an item was removed.
        """
        if item_id is None:
            raise InputError("Please select an item to delete.")
        try:
            cursor = self.db.connection.execute(
                "DELETE FROM menu_items WHERE id = ?", (item_id,)
            )
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor.rowcount > 0

    def sections(self) -> list[MenuSection]:
        """The menu grouped by category, categories in order of first appearance."""
        try:
            rows = self.db.connection.execute(
                "SELECT id, name, price, category FROM menu_items ORDER BY id"
            ).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        sections: dict[str, MenuSection] = {}
        for item_id, name, price, category in rows:
            section = sections.setdefault(category, MenuSection(category))
            section.items.append(MenuItem(item_id, name, float(price), category))
        return list(sections.values())

    def price_map(self) -> dict[str, float]:
        """Item names mapped to prices, for price suggestions."""
        return self.db.item_prices()


def grid_positions(items: Iterable[T], columns: int = GRID_COLUMNS) -> Iterator[tuple[int, int, T]]:
    """Yield (row, column, item), filling rows of the given width left to right."""
    if columns < 1:
        raise ValueError("columns must be positive")
    for index, item in enumerate(items):
        row, column = divmod(index, columns)
        yield row, column, item