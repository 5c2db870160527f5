# stock/report.py
from __future__ import annotations

from typing import Iterable

from stock.models import Product


def format_product(p: Product) -> str:
    return f"ID: {p.id} | Name: {p.name} | Quantity: {p.quantity} | Price: {p.price:.2f}"


def render_products(products: Iterable[Product]) -> str:
    lines = [format_product(p) for p in products]
    if not lines:
        return "No products."
    out = ["Products:"]
    out.extend(lines)
    return "\n".join(out)
