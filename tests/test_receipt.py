from datetime import datetime

import pytest

from tillpoint.formatting import format_number
from tillpoint.receipt import render_receipt, write_receipt

ITEMS = [("Tea", "50", "2", "100"), ("Bun", "20", "1", "20")]


def test_header_and_footer():
    html = render_receipt(ITEMS, 120.0, datetime(2024, 1, 2, 9, 5))
    assert html.startswith("<h2 style='text-align:center;'>Tangy & Toasted - Receipt</h2>")
    assert html.endswith(
        "<p style='text-align:center;'>Thank you for your purchase!<br>Visit Again!</p>"
    )


def test_afternoon_time_uses_twelve_hour_clock():
    html = render_receipt([], 0.0, datetime(2024, 1, 2, 15, 4))
    assert "02-01-2024 03:04 PM" in html


@pytest.mark.parametrize("hour,label", [(0, "12"), (12, "12")])
def test_midnight_and_noon_show_twelve(hour, label):
    html = render_receipt([], 0.0, datetime(2024, 3, 4, hour, 30))
    assert f"04-03-2024 {label}:30 " in html


def test_each_row_is_in_table_in_order():
    html = render_receipt(ITEMS, 120.0, datetime(2024, 1, 2))
    rows = [
        f"<tr><td>{a}</td><td>{b}</td><td>{c}</td><td>{d}</td></tr>" for a, b, c, d in ITEMS
    ]
    positions = [html.index(row) for row in rows]
    assert positions == sorted(positions)
    assert html.index("</table>") > positions[-1]


def test_grand_total_line():
    html = render_receipt(ITEMS, 120.5, datetime(2024, 1, 2))
    assert f"Grand Total: \u20a8 {format_number(120.5)}</h3>" in html


def test_write_receipt_round_trip(tmp_path):
    now = datetime(2024, 6, 7, 8, 9)
    path = write_receipt(tmp_path / "receipt.html", ITEMS, 120.0, now)
    assert path.read_text(encoding="utf-8") == render_receipt(ITEMS, 120.0, now)