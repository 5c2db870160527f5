# stock/seed_db.py
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from stock.db import DEFAULT_DB_PATH, close, initialize
from stock.models import Product
from stock.store import create_product

DEMO_PRODUCTS = [
    Product(name="USB-C Cable (1m)", quantity=25, price=8.99),
    Product(name="Wireless Mouse", quantity=12, price=19.99),
    Product(name="Mechanical Keyboard", quantity=6, price=74.99),
    Product(name="Laptop Stand", quantity=10, price=29.99),
    Product(name="HDMI Adapter", quantity=18, price=15.99),
    Product(name="Notebook (pack of 3)", quantity=30, price=9.99),
    Product(name="Desk Lamp", quantity=8, price=34.99),
    Product(name="Ethernet Cable (2m)", quantity=40, price=6.99),
]

def reset_db(db_path: Path) -> None:
    if db_path.exists():
        db_path.unlink()

def seed(db_path: Union[str, Path] = DEFAULT_DB_PATH) -> int:
    db_path = Path(db_path)
    reset_db(db_path)
    conn = initialize(db_path)
    try:
        for p in DEMO_PRODUCTS:
            create_product(conn, p)
    finally:
        close(conn)
    print(f"Seeded {len(DEMO_PRODUCTS)} products into {db_path}")
    return len(DEMO_PRODUCTS)

def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Reset a datastore and fill it with demo products.")
    p.add_argument("--db", default=str(DEFAULT_DB_PATH))
    args = p.parse_args(argv)
    seed(args.db)

if __name__ == "__main__":
    main()
