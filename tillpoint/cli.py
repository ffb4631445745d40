"""Command-line front end for the till."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from tillpoint.cart import Cart, suggest_price
from tillpoint.categories import CategoryStore, InputError
from tillpoint.database import DEFAULT_PATH, Database, DatabaseError
from tillpoint.formatting import format_number
from tillpoint.menu import MenuStore
from tillpoint.receipt import write_receipt


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tillpoint", description="Point-of-sale till.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    sell = commands.add_parser("sell", help="ring up and sell products")
    sell.add_argument(
        "--item",
        nargs=3,
        action="append",
        default=[],
        metavar=("NAME", "PRICE", "QUANTITY"),
        help="a product line; an empty PRICE takes the menu price",
    )
    sell.add_argument("--receipt", help="file to write the receipt to")

    commands.add_parser("history", help="list recorded sales")

    categories = commands.add_parser("categories", help="manage categories")
    cat_actions = categories.add_subparsers(dest="action", required=True)
    cat_actions.add_parser("list")
    cat_add = cat_actions.add_parser("add")
    cat_add.add_argument("name")
    cat_delete = cat_actions.add_parser("delete")
    cat_delete.add_argument("name")

    menu = commands.add_parser("menu", help="manage menu items")
    menu_actions = menu.add_subparsers(dest="action", required=True)
    menu_actions.add_parser("list")
    menu_add = menu_actions.add_parser("add")
    menu_add.add_argument("name")
    menu_add.add_argument("price")
    menu_add.add_argument("category")
    menu_delete = menu_actions.add_parser("delete")
    menu_delete.add_argument("id", type=int)

    price = commands.add_parser("price", help="look up a menu price")
    price.add_argument("name")
    return parser


def _sell(db: Database, args: argparse.Namespace) -> int:
    prices = db.item_prices()
    cart = Cart()
    for name, price_text, quantity_text in args.item:
        if not price_text:
            price_text = suggest_price(prices, name) or ""
        cart.add_product(name, price_text, quantity_text)
    sale = cart.sell(db)
    if args.receipt:
        write_receipt(args.receipt, sale.items, sale.grand_total)
        print("Receipt saved successfully.")
    print(sale.message)
    return 0


def _history(db: Database) -> int:
    for name, price, quantity, when in db.sales():
        print(f"{when}\t{name}\t{format_number(float(price))}\t{quantity}")
    return 0


def _categories(db: Database, args: argparse.Namespace) -> int:
    store = CategoryStore(db)
    if args.action == "add":
        store.add(args.name)
    elif args.action == "delete":
        store.delete(args.name)
    else:
        for name in store.names():
            print(name)
    return 0


def _menu(db: Database, args: argparse.Namespace) -> int:
    store = MenuStore(db)
    if args.action == "add":
        item_id = store.add_item(args.name, args.price, args.category)
        print(f"Item added successfully. [{item_id}]")
    elif args.action == "delete":
        if not store.delete_item(args.id):
            print(f"No item with id {args.id}.", file=sys.stderr)
            return 1
        print("Item deleted successfully.")
    else:
        for section in store.sections():
            print(section.category)
            for item in section.items:
                print(f"  [{item.id}] {item.name} Rs {format_number(item.price)}")
    return 0


def _price(db: Database, args: argparse.Namespace) -> int:
    price = suggest_price(db.item_prices(), args.name)
    if price is None:
        print(f"Not on the menu: {args.name.strip()}", file=sys.stderr)
        return 1
    print(price)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the till command line; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        with Database(args.db) as db:
            if args.command == "sell":
                return _sell(db, args)
            if args.command == "history":
                return _history(db)
            if args.command == "categories":
                return _categories(db, args)
            if args.command == "menu":
                return _menu(db, args)
            return _price(db, args)
    except InputError as exc:
        print(f"Input Error: {exc}", file=sys.stderr)
    except DatabaseError as exc:
        print(f"Database Error: {exc}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())