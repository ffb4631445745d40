"""The sales cart: lines being rung up, their running total and the sale itself."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime

from tillpoint.categories import InputError
from tillpoint.database import Database, DatabaseError
from tillpoint.formatting import format_number, parse_int, parse_number

log = logging.getLogger(__name__)

ReceiptRow = tuple[str, str, str, str]


def _lenient_number(text: str) -> float:
    """Parse a number, treating anything unparsable as zero."""
    try:
        return parse_number(text)
    except ValueError:
        return 0.0


def _lenient_int(text: str) -> int:
    """Parse an integer, treating anything unparsable as zero."""
    try:
        return parse_int(text)
    except ValueError:
        return 0


@dataclass(frozen=True)
class CartLine:
    """One product line in the cart."""

    name: str
    price: float
    quantity: int

    @property
    def total(self) -> float:
        return self.price * self.quantity

    def row(self) -> ReceiptRow:
        """The line as displayed: name, price, quantity and total as text."""
        return (
            self.name,
            format_number(self.price),
            format_number(self.quantity),
            format_number(self.total),
        )


@dataclass(frozen=True)
class Sale:
    """A completed sale."""

    items: tuple[ReceiptRow, ...]
    grand_total: float
    recorded: int

    @property
    def message(self) -> str:
        return f"Products sold and recorded!\nGrand Total: Rs {format_number(self.grand_total)}"


class Cart:
    """Products rung up but not yet sold."""

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._lines)

    def add_product(self, name: str, price_text: str, quantity_text: str) -> CartLine:
        """Add a line from entered text.

        All three fields must be filled; a price or quantity that does not
        parse counts as zero. The price kept is the one shown, to six
        significant digits.
        """
        if not name or not price_text or not quantity_text:
            raise InputError("Please fill all fields.")
        price = _lenient_number(format_number(_lenient_number(price_text)))
        line = CartLine(name, price, _lenient_int(quantity_text))
        self._lines.append(line)
        return line

    def clear(self) -> None:
        self._lines.clear()

    def total(self) -> float:
        return sum((line.total for line in self._lines), 0.0)

    def title(self) -> str:
        return f"Total: Rs {format_number(self.total())}"

    def sell(self, db: Database, now: datetime | None = None) -> Sale:
        """Record every line as sold, empty the cart and return the sale.

        A line that cannot be stored is logged and still appears on the sale.
        """
        when = now if now is not None else datetime.now()
        recorded = 0
        for line in self._lines:
            try:
                db.record_sale(line.name, line.price, line.quantity, when)
            except DatabaseError as exc:
                log.warning("Insert error: %s", exc)
            else:
                recorded += 1
        sale = Sale(
            items=tuple(line.row() for line in self._lines),
            grand_total=self.total(),
            recorded=recorded,
        )
        self.clear()
        return sale


def suggest_price(price_map: Mapping[str, float], name: str) -> str | None:
    """The menu price for a product name as text, or None if it is not on the menu."""
    price = price_map.get(name.strip())
    if price is None:
        return None
    return format_number(price)