from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Customer:
    """
    A shopper who places orders. Orders point at it; it never points back.
    Compared and hashed by identity: two customers sharing a name and id are
    still two different grouping keys.
    """
    name: str
    customer_id: int
