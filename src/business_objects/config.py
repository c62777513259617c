from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .common import DEFAULT_ORDER_STATUS, DELIVERY_LEAD_DAYS, PRICE_DECIMALS


# -------------------------
# Catalog file config
# -------------------------

@dataclass
class CatalogFileConfig:
    """
    Where and how the product catalog is persisted.
    Records look like `name@category@price#`; the separators are kept here so
    the codec and its tests agree on them.
    """
    path: str = "products.txt"
    encoding: str = "utf-8"
    record_sep: str = "#"
    field_sep: str = "@"
    price_decimals: int = PRICE_DECIMALS

    def validate(self) -> None:
        if not self.path:
            raise ValueError("catalog_file.path must be non-empty.")
        if len(self.record_sep) != 1 or len(self.field_sep) != 1:
            raise ValueError("catalog_file separators must be single characters.")
        if self.record_sep == self.field_sep:
            raise ValueError("catalog_file.record_sep and field_sep must differ.")
        if "," in (self.record_sep, self.field_sep) or "." in (self.record_sep, self.field_sep):
            raise ValueError("catalog_file separators cannot be ',' or '.' (decimal separators).")
        if self.price_decimals < 0:
            raise ValueError("catalog_file.price_decimals must be >= 0.")


# -------------------------
# Orders config
# -------------------------

@dataclass
class OrderConfig:
    """
    Defaults applied to newly placed orders.
    - first_order_id: start of the per-instance id sequence
    """
    default_status: str = DEFAULT_ORDER_STATUS
    delivery_lead_days: int = DELIVERY_LEAD_DAYS
    first_order_id: int = 1

    def validate(self) -> None:
        if not self.default_status:
            raise ValueError("orders.default_status must be non-empty.")
        if self.delivery_lead_days < 0:
            raise ValueError("orders.delivery_lead_days must be >= 0.")
        if self.first_order_id < 0:
            raise ValueError("orders.first_order_id must be >= 0.")


# -------------------------
# Report config
# -------------------------

@dataclass
class ReportConfig:
    top_n: int = 3

    def validate(self) -> None:
        if self.top_n < 0:
            raise ValueError("report.top_n must be >= 0.")


# -------------------------
# Top-level demo config
# -------------------------

@dataclass
class DemoConfig:
    """
    Top-level configuration for one run of the demo.

    Sub-configs can be passed as dataclass instances OR plain dicts:

        DemoConfig(
            catalog_file=dict(path="out/products.txt"),
            orders=dict(delivery_lead_days=3),
            report=dict(top_n=5),
        )
    """
    catalog_file: Union[CatalogFileConfig, dict] = field(default_factory=CatalogFileConfig)
    orders: Union[OrderConfig, dict] = field(default_factory=OrderConfig)
    report: Union[ReportConfig, dict] = field(default_factory=ReportConfig)

    # Coerce dicts → dataclasses for nested configs
    def __post_init__(self):
        if isinstance(self.catalog_file, dict):
            self.catalog_file = CatalogFileConfig(**self.catalog_file)
        if isinstance(self.orders, dict):
            self.orders = OrderConfig(**self.orders)
        if isinstance(self.report, dict):
            self.report = ReportConfig(**self.report)

    def validate(self) -> None:
        self.catalog_file.validate()
        self.orders.validate()
        self.report.validate()
