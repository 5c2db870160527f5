"""Tests for the interactive menu shell, driven through in-memory streams."""

import io

from stock import db
from stock.errors import StatementError
from stock.input_reader import InputReader
from stock.menu import InventoryShell, Terminal
from stock.models import Product
from stock.store import create_product, list_products


def run_shell(conn, script: str) -> str:
    out = io.StringIO()
    reader = InputReader(stream=io.StringIO(script), out=out)
    InventoryShell(conn, reader=reader, out=out).run()
    return out.getvalue()


class TestMenuFlows:
    """Each script ends with the pause line and a menu choice."""

    def test_quit(self, conn):
        output = run_shell(conn, "0\n")

        assert "=== Stock Management ===" in output
        assert "Goodbye!" in output

    def test_end_of_input_quits(self, conn):
        assert "Goodbye!" in run_shell(conn, "")

    def test_add_and_list(self, conn):
        output = run_shell(conn, "1\nPen\n10\n1.5\n\n2\n\n0\n")

        assert "Product added with ID 1." in output
        assert "ID: 1 | Name: Pen | Quantity: 10 | Price: 1.50" in output
        assert list_products(conn) == [Product(id=1, name="Pen", quantity=10, price=1.5)]

    def test_add_reprompts_on_bad_numbers(self, conn):
        output = run_shell(conn, "1\nPen\n-3\nten\n4\n1.2.3\n2.5\n\n0\n")

        assert "Negative values are not allowed" in output
        assert "Please enter a valid price" in output
        assert list_products(conn) == [Product(id=1, name="Pen", quantity=4, price=2.5)]

    def test_add_refuses_duplicate_name(self, conn):
        create_product(conn, Product(name="Pen", quantity=1, price=1.0))

        output = run_shell(conn, "1\nPen\n\n0\n")

        assert "A product named 'Pen' already exists." in output
        assert len(list_products(conn)) == 1

    def test_list_empty(self, conn):
        assert "No products." in run_shell(conn, "2\n\n0\n")

    def test_delete(self, conn):
        create_product(conn, Product(name="Pen", quantity=1, price=1.0))

        output = run_shell(conn, "3\n1\n\n0\n")

        assert "Product 1 deleted." in output
        assert list_products(conn) == []

    def test_delete_unknown_id(self, conn):
        create_product(conn, Product(name="Pen", quantity=1, price=1.0))

        output = run_shell(conn, "3\n7\n\n0\n")

        assert "No product with ID 7." in output
        assert len(list_products(conn)) == 1

    def test_update(self, conn):
        create_product(conn, Product(name="Pen", quantity=1, price=1.0))

        output = run_shell(conn, "4\n1\nBlue pen\n3\n2.75\n\n0\n")

        assert "Current: ID: 1 | Name: Pen" in output
        assert "Product 1 updated." in output
        assert list_products(conn) == [Product(id=1, name="Blue pen", quantity=3, price=2.75)]

    def test_update_keeps_own_name(self, conn):
        create_product(conn, Product(name="Pen", quantity=1, price=1.0))

        run_shell(conn, "4\n1\nPen\n9\n1.0\n\n0\n")

        assert list_products(conn)[0].quantity == 9

    def test_update_refuses_name_of_other_product(self, conn):
        create_product(conn, Product(name="Pen", quantity=1, price=1.0))
        create_product(conn, Product(name="Ink", quantity=1, price=1.0))

        output = run_shell(conn, "4\n2\nPen\n\n0\n")

        assert "A product named 'Pen' already exists." in output
        assert list_products(conn)[1].name == "Ink"

    def test_update_unknown_id(self, conn):
        assert "No product with ID 5." in run_shell(conn, "4\n5\n\n0\n")

    def test_invalid_choice(self, conn):
        assert "Invalid choice." in run_shell(conn, "9\n\n0\n")

    def test_input_ends_mid_action(self, conn):
        output = run_shell(conn, "1\nPen\n")

        assert list_products(conn) == []
        assert "Product added" not in output


class TestMenuErrors:
    def test_store_error_is_reported_and_loop_continues(self, conn, monkeypatch):
        def broken(_conn):
            raise StatementError("Failed to list products: disk I/O error")

        monkeypatch.setattr("stock.menu.list_products", broken)

        output = run_shell(conn, "2\n\n0\n")

        assert "Error: Failed to list products: disk I/O error" in output
        assert "Goodbye!" in output

    def test_closed_handle_is_reported(self, db_path):
        conn = db.initialize(db_path)
        db.close(conn)

        output = run_shell(conn, "2\n\n0\n")

        assert "Error: Database is not initialized." in output


class TestTerminal:
    def test_clear_only_on_tty(self):
        out = io.StringIO()
        Terminal(InputReader(stream=io.StringIO(""), out=out), out=out).clear()

        assert out.getvalue() == ""

    def test_clear_on_tty(self):
        class FakeTty(io.StringIO):
            def isatty(self):
                return True

        out = FakeTty()
        Terminal(InputReader(stream=io.StringIO(""), out=out), out=out).clear()

        assert out.getvalue() == Terminal.CLEAR

    def test_pause_consumes_one_line(self):
        out = io.StringIO()
        reader = InputReader(stream=io.StringIO("\nnext\n"), out=out)

        Terminal(reader, out=out).pause()

        assert "Press Enter" in out.getvalue()
        assert reader.read_line() == "next"
