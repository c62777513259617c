# src/reporting/report.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO

from src.business_objects.config import DemoConfig
from src.business_objects.errors import CatalogFileError
from src.business_objects.product import Product
from src.business_objects.seed import RetailInstance
from src.reporting.aggregates import (
    average_order_value,
    category_totals,
    orders_by_customer,
    top_expensive_products,
    total_spent_by_customer,
)
from src.storage.flat_file import load_products, save_products

logger = logging.getLogger(__name__)


def banner(n: int) -> str:
    return f"************* {n} *****************"


@dataclass
class RetailReport:
    """
    Report driver over one RetailInstance:
      0) list all orders
      1..5) aggregate views, one banner each
      6) save the catalog to disk
      7) load it back and list it
    Steps 6 and 7 report file errors and carry on; nothing else is caught.
    """
    instance: RetailInstance
    cfg: DemoConfig = field(default_factory=DemoConfig)
    out: Optional[TextIO] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.out is None:
            self.out = sys.stdout

    # ------------------------------------------------------------------ #
    # Views
    # ------------------------------------------------------------------ #

    def snapshot(self) -> Dict[str, Any]:
        """All aggregate views of the instance, keyed by section name."""
        orders = self.instance.orders
        products = self.instance.products
        return {
            "orders_by_customer": orders_by_customer(orders),
            "total_spent_by_customer": total_spent_by_customer(orders),
            "top_expensive_products": top_expensive_products(products, self.cfg.report.top_n),
            "average_order_value": average_order_value(orders),
            "category_totals": category_totals(products),
        }

    # ------------------------------------------------------------------ #
    # Run
    # ------------------------------------------------------------------ #

    def run(self) -> Optional[List[Product]]:
        """
        Print every section. Returns the catalog read back in section 7, or
        None if it could not be loaded.
        """
        for order in self.instance.orders:
            self._print(order)

        snap = self.snapshot()

        self._section(1)
        for customer, orders in snap["orders_by_customer"].items():
            self._print(f"Customer: {customer} has made {len(orders)} orders.")
            self._print(f"Orders: {orders}")

        self._section(2)
        for customer, total in snap["total_spent_by_customer"].items():
            self._print(f"Customer: {customer} has spent {total} €")

        self._section(3)
        for product in snap["top_expensive_products"]:
            self._print(product)

        self._section(4)
        self._print(f"Average Order Value: {snap['average_order_value']}")

        self._section(5)
        self._print(f"Categories and Totals: {snap['category_totals']}")

        self._section(6)
        self.save_catalog()

        self._section(7)
        loaded = self.load_catalog()
        for product in loaded or []:
            self._print(product)
        return loaded

    def save_catalog(self) -> bool:
        fcfg = self.cfg.catalog_file
        try:
            save_products(self.instance.products, fcfg.path, fcfg)
        except CatalogFileError as e:
            logger.error("Error saving to disk: %s", e)
            return False
        return True

    def load_catalog(self) -> Optional[List[Product]]:
        fcfg = self.cfg.catalog_file
        try:
            return load_products(fcfg.path, fcfg)
        except CatalogFileError as e:
            logger.error("Error loading from disk: %s", e)
            return None

    # ------------------------------------------------------------------ #
    # Output helpers
    # ------------------------------------------------------------------ #

    def _section(self, n: int) -> None:
        self._print(banner(n))

    def _print(self, obj: Any) -> None:
        print(obj, file=self.out)
