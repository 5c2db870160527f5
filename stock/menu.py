# stock/menu.py
from __future__ import annotations

import logging
import sqlite3
import sys
from typing import Callable, Dict, Optional, TextIO

from stock.errors import StoreError
from stock.input_reader import InputReader
from stock.models import Product
from stock.report import format_product, render_products
from stock.store import (
    create_product,
    delete_product,
    get_product,
    list_products,
    product_exists_by_id,
    product_exists_by_name,
    update_product,
)

logger = logging.getLogger(__name__)

MENU = (
    "\n=== Stock Management ===\n"
    "1. Add a product\n"
    "2. List products\n"
    "3. Delete a product\n"
    "4. Update a product\n"
    "0. Quit\n"
    "Choice: "
)

QUIT = 0


class Terminal:
    """Screen clearing and pausing for the interactive shell."""

    CLEAR = "\033[2J\033[H"

    def __init__(self, reader: InputReader, out: Optional[TextIO] = None):
        self.reader = reader
        self.out = out if out is not None else sys.stdout

    def clear(self) -> None:
        isatty = getattr(self.out, "isatty", None)
        if isatty is not None and isatty():
            self.out.write(self.CLEAR)
            self.out.flush()

    def pause(self) -> None:
        self.out.write("\nPress Enter to return to the menu...")
        self.out.flush()
        self.reader.read_line()


class InventoryShell:
    """
    Menu loop over an open database handle.

    Store failures are reported and the loop keeps going; end of input at any
    prompt ends the session as if the user had chosen to quit.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        reader: Optional[InputReader] = None,
        out: Optional[TextIO] = None,
        terminal: Optional[Terminal] = None,
    ):
        self.conn = conn
        self.out = out if out is not None else sys.stdout
        self.reader = reader or InputReader(out=self.out)
        self.terminal = terminal or Terminal(self.reader, out=self.out)
        self._actions: Dict[int, Callable[[], bool]] = {
            1: self.add_product,
            2: self.show_products,
            3: self.remove_product,
            4: self.edit_product,
        }

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def run(self) -> None:
        while True:
            self.terminal.clear()
            choice = self.reader.read_non_negative_integer(MENU)
            if choice is None:
                self._say("\nGoodbye!")
                return
            if choice == QUIT:
                self.terminal.clear()
                self._say("Goodbye!")
                return
            self.terminal.clear()
            if not self.dispatch(choice):
                return
            self.terminal.pause()

    def dispatch(self, choice: int) -> bool:
        """Run one menu action. Returns False once input has run out."""
        action = self._actions.get(choice)
        if action is None:
            self._say("Invalid choice.")
            return True
        try:
            return action()
        except StoreError as e:
            logger.warning("Menu action %d failed: %s", choice, e)
            self._say(f"Error: {e}")
            return True

    # -------------------------
    # Actions
    # -------------------------
    def add_product(self) -> bool:
        name = self.reader.read_text("Product name: ")
        if name is None:
            return False
        if product_exists_by_name(self.conn, name):
            self._say(f"A product named '{name}' already exists.")
            return True
        quantity = self.reader.read_non_negative_integer("Quantity: ")
        if quantity is None:
            return False
        price = self.reader.read_non_negative_float("Price: ")
        if price is None:
            return False
        new_id = create_product(self.conn, Product(name=name, quantity=quantity, price=price))
        self._say(f"Product added with ID {new_id}.")
        return True

    def show_products(self) -> bool:
        self._say(render_products(list_products(self.conn)))
        return True

    def remove_product(self) -> bool:
        product_id = self.reader.read_non_negative_integer("ID of the product to delete: ")
        if product_id is None:
            return False
        if not product_exists_by_id(self.conn, product_id):
            self._say(f"No product with ID {product_id}.")
            return True
        delete_product(self.conn, product_id)
        self._say(f"Product {product_id} deleted.")
        return True

    def edit_product(self) -> bool:
        product_id = self.reader.read_non_negative_integer("ID of the product to update: ")
        if product_id is None:
            return False
        current = get_product(self.conn, product_id)
        if current is None:
            self._say(f"No product with ID {product_id}.")
            return True
        self._say("Current: " + format_product(current))

        name = self.reader.read_text("New name: ")
        if name is None:
            return False
        if name != current.name and product_exists_by_name(self.conn, name):
            self._say(f"A product named '{name}' already exists.")
            return True
        quantity = self.reader.read_non_negative_integer("New quantity: ")
        if quantity is None:
            return False
        price = self.reader.read_non_negative_float("New price: ")
        if price is None:
            return False
        update_product(self.conn, Product(id=product_id, name=name, quantity=quantity, price=price))
        self._say(f"Product {product_id} updated.")
        return True
