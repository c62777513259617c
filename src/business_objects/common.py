from __future__ import annotations

import re


DEFAULT_ORDER_STATUS = "New"
DELIVERY_LEAD_DAYS = 7
PRICE_DECIMALS = 2

_DECIMAL_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)


def format_price(value: float, decimals: int = PRICE_DECIMALS) -> str:
    """
    Fixed-point price text with '.' as the decimal separator.
    Locale-independent: "%.2f" never emits ','.
    """
    # + 0.0 folds -0.0 into 0.0 so nothing prints as "-0.00"
    return f"{float(value) + 0.0:.{decimals}f}"


def parse_price(text: str) -> float:
    """
    Parse a price written with either '.' or ',' as the decimal separator.
    Only plain non-negative decimals are accepted ("25", "25.00", "1,35");
    signs, exponents, digit grouping, nan and inf raise ValueError.
    """
    normalized = text.strip().replace(",", ".")
    if not _DECIMAL_RE.fullmatch(normalized):
        raise ValueError(f"'{text}' is not a plain decimal number.")
    return float(normalized)
