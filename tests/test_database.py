from datetime import datetime

import pytest

from tillpoint.database import Database, DatabaseError


@pytest.fixture
def db(tmp_path):
    with Database(tmp_path / "till.db") as database:
        yield database


def _tables(database):
    rows = database.connection.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


def test_schema_created(db):
    assert _tables(db) == {"sales", "categories", "menu_items"}


def test_record_and_list_sales(db):
    db.record_sale("Tea", 50.0, 2, datetime(2024, 1, 2, 3, 4, 5))
    db.record_sale("Toast", 120.0, 1, datetime(2024, 1, 2, 3, 4, 6))
    assert db.sales() == [
        ("Tea", 50.0, 2, "2024-01-02 03:04:05"),
        ("Toast", 120.0, 1, "2024-01-02 03:04:06"),
    ]


def test_record_sale_returns_increasing_ids(db):
    first = db.record_sale("A", 1.0, 1, datetime(2024, 5, 1))
    second = db.record_sale("B", 2.0, 1, datetime(2024, 5, 1))
    assert second > first


def test_empty_database_has_no_sales(db):
    assert db.sales() == []
    assert db.item_prices() == {}


def test_item_prices_later_duplicate_wins(db):
    db.connection.execute(
        "INSERT INTO menu_items (name, price, category) VALUES ('Latte', 200, 'Drinks')"
    )
    db.connection.execute(
        "INSERT INTO menu_items (name, price, category) VALUES ('Latte', 220, 'Drinks')"
    )
    db.connection.execute(
        "INSERT INTO menu_items (name, price, category) VALUES ('Bun', 80.5, 'Bakery')"
    )
    assert db.item_prices() == {"Latte": 220.0, "Bun": 80.5}


def test_reopen_keeps_data(tmp_path):
    path = tmp_path / "till.db"
    with Database(path) as first:
        first.record_sale("Tea", 50.0, 3, datetime(2023, 12, 31, 23, 59, 59))
    with Database(path) as second:
        assert second.sales() == [("Tea", 50.0, 3, "2023-12-31 23:59:59")]


def test_open_failure_raises(tmp_path):
    with pytest.raises(DatabaseError):
        Database(tmp_path / "missing" / "dir" / "till.db")


def test_use_after_close_raises(tmp_path):
    database = Database(tmp_path / "till.db")
    database.close()
    with pytest.raises(DatabaseError):
        database.sales()
    with pytest.raises(DatabaseError):
        database.record_sale("Tea", 1.0, 1, datetime(2024, 1, 1))