"""
Domain model package for the retail orders demo.

This package defines the core business objects:
- Product
- Customer
- Order

It also exposes the error types, the configuration dataclasses and the
fixed-data seeding helpers.
"""

from .product import Product
from .customer import Customer
from .order import Order, OrderIdSequence
from .errors import (
    RetailError,
    ProductNotFoundError,
    CustomerNotFoundError,
    CatalogFileError,
    CatalogFormatError,
)
from .config import CatalogFileConfig, OrderConfig, ReportConfig, DemoConfig
from .seed import (
    RetailInstance,
    ProductCatalogIndex,
    CustomerDirectory,
    make_objects,
    place_order,
    place_orders,
    seed_products,
    seed_customers,
)

__all__ = [
    # entities
    "Product",
    "Customer",
    "Order",
    "OrderIdSequence",
    # errors
    "RetailError",
    "ProductNotFoundError",
    "CustomerNotFoundError",
    "CatalogFileError",
    "CatalogFormatError",
    # config
    "CatalogFileConfig",
    "OrderConfig",
    "ReportConfig",
    "DemoConfig",
    # seeding
    "RetailInstance",
    "ProductCatalogIndex",
    "CustomerDirectory",
    "make_objects",
    "place_order",
    "place_orders",
    "seed_products",
    "seed_customers",
]
