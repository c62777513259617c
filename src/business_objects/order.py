from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from itertools import count
from math import fsum
from typing import Iterator, List, Optional

from .common import DEFAULT_ORDER_STATUS, DELIVERY_LEAD_DAYS
from .customer import Customer
from .product import Product


@dataclass
class Order:
    """
    An order placed by a customer.

    Fields
    -------
    products : list of Product
        References into the shared catalog, in the order they were added.
        Append-only through `add_product`.
    customer : Customer
        Owner of the order. Set once at construction; reassigning raises
        AttributeError.
    delivery_date : date
        Defaults to `order_date` + `delivery_lead_days`; never earlier than
        `order_date`.
    """

    # Identifiers
    order_id: int
    customer: Customer

    # Lifecycle
    status: str = DEFAULT_ORDER_STATUS
    order_date: date = field(default_factory=date.today)
    delivery_date: Optional[date] = None

    # Items
    products: List[Product] = field(default_factory=list)

    delivery_lead_days: int = field(default=DELIVERY_LEAD_DAYS, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.delivery_date is None:
            self.delivery_date = self.order_date + timedelta(days=self.delivery_lead_days)
        self._check_delivery_date(self.delivery_date)

    def __setattr__(self, name, value) -> None:
        if name == "customer" and "customer" in self.__dict__:
            raise AttributeError(f"Order {self.order_id}: customer cannot be reassigned.")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------ #
    # Aggregates (derived, never cached)
    # ------------------------------------------------------------------ #

    @property
    def total(self) -> float:
        return fsum(p.price for p in self.products)

    # ------------------------------------------------------------------ #
    # Mutators
    # ------------------------------------------------------------------ #

    def add_product(self, product: Product) -> None:
        self.products.append(product)

    def set_status(self, status: str) -> None:
        self.status = status

    def set_delivery_date(self, delivery_date: date) -> None:
        self._check_delivery_date(delivery_date)
        self.delivery_date = delivery_date

    def _check_delivery_date(self, delivery_date: date) -> None:
        if delivery_date < self.order_date:
            raise ValueError(
                f"Order {self.order_id}: delivery_date {delivery_date} is before order_date {self.order_date}."
            )


class OrderIdSequence:
    """Monotonically increasing order ids, one sequence per instance."""

    def __init__(self, start: int = 1) -> None:
        self._counter: Iterator[int] = count(start)

    def next_id(self) -> int:
        return next(self._counter)
