# stock/store.py
from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from stock.db import exec_all, exec_one, exec_write, require_handle
from stock.models import Product

logger = logging.getLogger(__name__)

# ids live in a 64-bit INTEGER column; anything outside cannot match a row
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

# -------------------------
# Helpers (internal)
# -------------------------

def _id_in_range(product_id: int) -> bool:
    return MIN_ID <= product_id <= MAX_ID


def _row_to_product(row: Dict[str, Any]) -> Product:
    return Product(
        id=row["id"],
        name=row["nom"],
        quantity=row["quantite"],
        price=row["prix"],
    )


# -------------------------
# Create
# -------------------------
def create_product(conn: Optional[sqlite3.Connection], product: Product) -> int:
    """Insert a product and return the id the database assigned to it."""
    new_id, _ = exec_write(
        conn,
        "insert product",
        "INSERT INTO produits (nom, quantite, prix) VALUES (?, ?, ?)",
        (product.name, product.quantity, product.price),
    )
    logger.info("Created product %s (%r)", new_id, product.name)
    return int(new_id)


# -------------------------
# Read
# -------------------------
def list_products(conn: Optional[sqlite3.Connection]) -> List[Product]:
    rows = exec_all(conn, "list products", "SELECT id, nom, quantite, prix FROM produits")
    return [_row_to_product(r) for r in rows]


def get_product(conn: Optional[sqlite3.Connection], product_id: int) -> Optional[Product]:
    if not _id_in_range(product_id):
        require_handle(conn)
        return None
    row = exec_one(
        conn,
        "read product",
        "SELECT id, nom, quantite, prix FROM produits WHERE id = ?",
        (product_id,),
    )
    return _row_to_product(row) if row else None


# -------------------------
# Update / Delete
# -------------------------
# Both succeed as no-ops when no row matches; the return value is the
# number of rows touched.

def update_product(conn: Optional[sqlite3.Connection], product: Product) -> int:
    if product.id is None:
        raise ValueError("product.id is required for update")
    if not _id_in_range(product.id):
        require_handle(conn)
        return 0
    _, changed = exec_write(
        conn,
        "update product",
        "UPDATE produits SET nom = ?, quantite = ?, prix = ? WHERE id = ?",
        (product.name, product.quantity, product.price, product.id),
    )
    logger.info("Updated product %s (%d row(s))", product.id, changed)
    return changed


def delete_product(conn: Optional[sqlite3.Connection], product_id: int) -> int:
    if not _id_in_range(product_id):
        require_handle(conn)
        return 0
    _, changed = exec_write(
        conn,
        "delete product",
        "DELETE FROM produits WHERE id = ?",
        (product_id,),
    )
    logger.info("Deleted product %s (%d row(s))", product_id, changed)
    return changed


# -------------------------
# Existence checks
# -------------------------
def product_exists_by_id(conn: Optional[sqlite3.Connection], product_id: int) -> bool:
    if not _id_in_range(product_id):
        require_handle(conn)
        return False
    row = exec_one(
        conn,
        "check product id",
        "SELECT COUNT(*) AS n FROM produits WHERE id = ?",
        (product_id,),
    )
    return bool(row and row["n"] > 0)


def product_exists_by_name(conn: Optional[sqlite3.Connection], name: str) -> bool:
    # "=" on TEXT uses the BINARY collation: exact and case-sensitive
    row = exec_one(
        conn,
        "check product name",
        "SELECT COUNT(*) AS n FROM produits WHERE nom = ?",
        (name,),
    )
    return bool(row and row["n"] > 0)
