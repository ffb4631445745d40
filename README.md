# tillpoint

A small point-of-sale till for a café or snack counter, run from the command
line. All data lives in one SQLite file: the menu categories, the menu items
and the history of every line sold.

## Installing

```
pip install .
```

tillpoint needs only the Python standard library and runs on Python 3.10
and later.

## The `tillpoint` command

Every command takes an optional `--db FILE` before the command name; it
defaults to `pos_database.db` in the current directory. The file and its
tables are created when missing.

### Categories

```
tillpoint categories add Sandwiches
tillpoint categories list
tillpoint categories delete Sandwiches
```

`list` prints the category names alphabetically. Names are trimmed of
surrounding whitespace and must not be empty; adding a name that already
exists is refused with a database error. Deleting a category does not remove
menu items filed under it.

### Menu items

```
tillpoint menu add "Club Sandwich" 450 Sandwiches
tillpoint menu list
tillpoint menu delete 3
```

`add` needs at least one category to exist, a non-empty name and price, a
category that exists, and a price that is a plain decimal number. It prints
the new item's id. `list` prints each category that has items, in the order
the categories first appear, followed by its items as `[id] name Rs price`.
`delete` takes an item id and exits with status 1 if no item has that id.

### Selling

```
tillpoint sell --item "Club Sandwich" 450 2 --item Coffee "" 1 --receipt receipt.html
```

Each `--item` gives a product name, a price and a quantity. An empty price
takes the menu price of an item with that name. A price or quantity that is
not a number counts as zero. Every line is recorded in the sales history with
the current date and time, and the grand total is printed. With `--receipt`
an HTML receipt is written to the given file as well.

### History and prices

```
tillpoint history
tillpoint price "Club Sandwich"
```

`history` prints every recorded sale, oldest first, as tab-separated
timestamp, product, price and quantity. `price` prints the menu price of an
item, or exits with status 1 if it is not on the menu.

Invalid input is reported on standard error as `Input Error: ...` and
database failures as `Database Error: ...`; both exit with status 1.

## Using it from Python

```python
from datetime import datetime

from tillpoint.database import Database
from tillpoint.categories import CategoryStore
from tillpoint.menu import MenuStore, grid_positions
from tillpoint.cart import Cart
from tillpoint.receipt import write_receipt

with Database("pos_database.db") as db:
    CategoryStore(db).add("Sandwiches")
    MenuStore(db).add_item("Club Sandwich", "450", "Sandwiches")

    for section in MenuStore(db).sections():
        for row, column, item in grid_positions(section.items):
            print(section.category, row, column, item.name)

    cart = Cart()
    cart.add_product("Club Sandwich", "450", "2")
    print(cart.title())          # Total: Rs 900
    sale = cart.sell(db, datetime.now())
    write_receipt("receipt.html", sale.items, sale.grand_total)
```

- `tillpoint.database.Database` opens the file and offers `record_sale`,
  `sales` and `item_prices`.
- `tillpoint.categories.CategoryStore` lists, adds and deletes categories.
- `tillpoint.menu.MenuStore` adds and deletes items and groups them into
  `MenuSection`s of `MenuItem`s; `grid_positions` lays items out three to a
  row.
- `tillpoint.cart.Cart` holds `CartLine`s, keeps the running total and
  `sell` returns a `Sale`; `suggest_price` looks up a menu price by name.
- `tillpoint.receipt.render_receipt` builds the receipt HTML and
  `write_receipt` saves it.
- `tillpoint.formatting` holds the number parsing and formatting rules.

Errors are raised as exceptions: `InputError` (a `ValueError`) for missing or
malformed input, `DatabaseError` when SQLite refuses a statement.

## What it does not do

tillpoint has no graphical window: there is no on-screen menu grid, dashboard
or sales-history screen, only the commands above. Receipts are written as
HTML files; it does not print or produce PDF documents itself.

## Running the tests

```
pip install ".[test]"
pytest
```