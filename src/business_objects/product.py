from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """
    Catalog entry. Immutable; orders hold references into the shared catalog.

    `price` is always stored as float, so literals like 25 and 1200.0 end up
    with the same representation.
    """
    name: str
    category: str
    price: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", float(self.price))
