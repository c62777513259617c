# src/business_objects/seed.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .config import DemoConfig, OrderConfig
from .customer import Customer
from .errors import CustomerNotFoundError, ProductNotFoundError
from .order import Order, OrderIdSequence
from .product import Product


# (customer name, product names) pairs, placed in this order.
OrderSpec = Tuple[str, Sequence[str]]

SEED_ORDERS: Tuple[OrderSpec, ...] = (
    ("John Smith", ("Samsung Galaxy S22", "Moby Dick", "Huggies Diapers")),
    ("Emily Johnson", ("Harry Potter", "The Catcher in the Rye", "Samsung Galaxy S22")),
    ("Michael Brown", ("Moby Dick", "Huggies Diapers")),
    ("Sarah Davis", ("Huggies Diapers",)),
    ("Michael Brown", ("Samsung Galaxy S22",)),
)


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------

@dataclass
class RetailInstance:
    """
    Everything one run works on: catalog, customers and placed orders.
    Collections are append-only for the lifetime of the instance.
    """
    products: List[Product]
    customers: List[Customer]
    orders: List[Order] = field(default_factory=list)
    order_ids: OrderIdSequence = field(default_factory=OrderIdSequence, repr=False)


def make_objects(cfg: Optional[DemoConfig] = None, *, today: Optional[date] = None) -> RetailInstance:
    """
    Build the fixed demo instance guided by `cfg`.

    Steps:
      1) Product catalog
      2) Customers
      3) Orders (SEED_ORDERS, resolved against 1) and 2))

    Raises ProductNotFoundError / CustomerNotFoundError if the seed data
    references something that does not exist.
    """
    cfg = cfg or DemoConfig()
    cfg.validate()

    instance = RetailInstance(
        products=seed_products(),
        customers=seed_customers(),
        order_ids=OrderIdSequence(cfg.orders.first_order_id),
    )
    instance.orders.extend(
        place_orders(
            SEED_ORDERS,
            products=instance.products,
            customers=instance.customers,
            order_ids=instance.order_ids,
            order_cfg=cfg.orders,
            today=today,
        )
    )
    return instance


# -------------------------------------------------------------------
# Catalog & customers
# -------------------------------------------------------------------

def seed_products() -> List[Product]:
    return [
        Product("Samsung Galaxy S22", "Smartphones", 1200.0),
        Product("Moby Dick", "Books", 25),
        Product("Harry Potter", "Books", 40),
        Product("The Catcher in the Rye", "Books", 30),
        Product("Huggies Diapers", "Baby", 20),
        Product("Toy Truck", "Toys", 35),
        Product("Drone", "Toys", 150),
        Product("Lego City", "Toys", 80),
    ]


def seed_customers() -> List[Customer]:
    return [
        Customer("John Smith", 1),
        Customer("Emily Johnson", 2),
        Customer("Michael Brown", 3),
        Customer("Sarah Davis", 4),
    ]


class ProductCatalogIndex:
    """
    Name → product lookup built once from the catalog.
    When names repeat, the first product in catalog order wins.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._by_name: Dict[str, Product] = {}
        for p in products:
            self._by_name.setdefault(p.name, p)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def get(self, name: str) -> Product:
        try:
            return self._by_name[name]
        except KeyError:
            raise ProductNotFoundError(name) from None


class CustomerDirectory:
    """Name → customer lookup; first customer with a given name wins."""

    def __init__(self, customers: Iterable[Customer]) -> None:
        self._by_name: Dict[str, Customer] = {}
        for c in customers:
            self._by_name.setdefault(c.name, c)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Customer:
        try:
            return self._by_name[name]
        except KeyError:
            raise CustomerNotFoundError(name) from None


# -------------------------------------------------------------------
# Orders
# -------------------------------------------------------------------

def place_order(
    customer: Customer,
    product_names: Sequence[str],
    catalog: ProductCatalogIndex,
    *,
    order_id: int,
    order_cfg: Optional[OrderConfig] = None,
    today: Optional[date] = None,
) -> Order:
    """
    Create an order for `customer` holding the named products, in the given order.
    Fails with ProductNotFoundError on the first unknown name; nothing is
    returned in that case.
    """
    ocfg = order_cfg or OrderConfig()
    order = Order(
        order_id=order_id,
        customer=customer,
        status=ocfg.default_status,
        order_date=today or date.today(),
        delivery_lead_days=ocfg.delivery_lead_days,
    )
    for name in product_names:
        order.add_product(catalog.get(name))
    return order


def place_orders(
    specs: Iterable[OrderSpec],
    *,
    products: Sequence[Product],
    customers: Sequence[Customer],
    order_ids: OrderIdSequence,
    order_cfg: Optional[OrderConfig] = None,
    today: Optional[date] = None,
) -> List[Order]:
    catalog = ProductCatalogIndex(products)
    directory = CustomerDirectory(customers)
    orders: List[Order] = []
    for customer_name, product_names in specs:
        orders.append(
            place_order(
                directory.get(customer_name),
                product_names,
                catalog,
                order_id=order_ids.next_id(),
                order_cfg=order_cfg,
                today=today,
            )
        )
    return orders
