# src/reporting/aggregates.py
from __future__ import annotations

from math import fsum
from typing import Dict, Iterable, List, Sequence

from src.business_objects.customer import Customer
from src.business_objects.order import Order
from src.business_objects.product import Product


# ───────────────────────────── order views ───────────────────────────── #

def orders_by_customer(orders: Iterable[Order]) -> Dict[Customer, List[Order]]:
    """
    Group orders by their owning customer.

    Groups appear in first-seen order and keep encounter order inside each
    group. A customer with no orders gets no group.
    """
    groups: Dict[Customer, List[Order]] = {}
    for order in orders:
        groups.setdefault(order.customer, []).append(order)
    return groups


def total_spent_by_customer(orders: Iterable[Order]) -> Dict[Customer, float]:
    """
    Sum of order totals per customer.

    Notation:
        spent(c) = ∑_{o : customer(o) = c} total(o)
    """
    return {
        customer: fsum(o.total for o in group)
        for customer, group in orders_by_customer(orders).items()
    }


def average_order_value(orders: Sequence[Order]) -> float:
    """
    Arithmetic mean of order totals.

    Returns:
        0.0 when there are no orders.
    """
    if not orders:
        return 0.0
    return fsum(o.total for o in orders) / len(orders)


# ───────────────────────────── catalog views ───────────────────────────── #

def top_expensive_products(products: Iterable[Product], n: int = 3) -> List[Product]:
    """
    Up to `n` products, most expensive first.
    Equal prices keep their catalog order (sorted() is stable).
    """
    if n < 0:
        raise ValueError(f"n must be >= 0. Got {n}.")
    return sorted(products, key=lambda p: p.price, reverse=True)[:n]


def category_totals(products: Iterable[Product]) -> Dict[str, float]:
    """Sum of product prices per category, categories in first-seen order."""
    by_category: Dict[str, List[float]] = {}
    for p in products:
        by_category.setdefault(p.category, []).append(p.price)
    return {category: fsum(prices) for category, prices in by_category.items()}
