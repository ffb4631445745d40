"""HTML receipts for completed sales."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from os import PathLike
from pathlib import Path

from tillpoint.formatting import format_number

SHOP_NAME = "Tangy & Toasted"


def _receipt_time(now: datetime) -> str:
    hour = now.hour % 12 or 12
    suffix = "AM" if now.hour < 12 else "PM"
    return f"{now:%d-%m-%Y} {hour:02d}:{now:%M} {suffix}"


def render_receipt(
    items: Iterable[Sequence[str]],
    grand_total: float,
    now: datetime | None = None,
) -> str:
    """Build the receipt document for rows of (product, price, quantity, total)."""
    when = now if now is not None else datetime.now()
    parts = [
        f"<h2 style='text-align:center;'>{SHOP_NAME} - Receipt</h2>",
        f"<p style='text-align:right;'>{_receipt_time(when)}</p>",
        "<hr>",
        "<table width='100%' border='1' cellspacing='0' cellpadding='4'>",
        "<tr style='font-weight:bold; background:#f0f0f0;'>"
        "<td>Product</td><td>Price</td><td>Quantity</td><td>Total</td></tr>",
    ]
    for product, price, quantity, total in items:
        parts.append(
            f"<tr><td>{product}</td><td>{price}</td><td>{quantity}</td><td>{total}</td></tr>"
        )
    parts.append("</table>")
    parts.append(
        f"<h3 style='text-align:right;'>Grand Total: \u20a8 {format_number(grand_total)}</h3>"
    )
    parts.append("<p style='text-align:center;'>Thank you for your purchase!<br>Visit Again!</p>")
    return "".join(parts)


def write_receipt(
    path: str | PathLike[str],
    items: Iterable[Sequence[str]],
    grand_total: float,
    now: datetime | None = None,
) -> Path:
    """Write the receipt document to path and return it."""
    target = Path(path)
    target.write_text(render_receipt(items, grand_total, now), encoding="utf-8")
    return target