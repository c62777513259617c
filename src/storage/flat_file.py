# src/storage/flat_file.py
"""
Product catalog <-> flat text file.

Format (one string, no newlines):

    Book@Books@25.00#Phone@Electronics@1200.00#

Each record is `name@category@price` followed by `#`. Prices are written
with a fixed number of decimals and '.'; on read, ',' is accepted too.
"""
from __future__ import annotations

import logging
from math import isfinite
from pathlib import Path
from typing import Iterable, List, Optional, Union

from src.business_objects.common import format_price, parse_price
from src.business_objects.config import CatalogFileConfig
from src.business_objects.errors import CatalogFileError, CatalogFormatError
from src.business_objects.product import Product

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# -------------------------------------------------------------------
# Text codec
# -------------------------------------------------------------------

def encode_products(products: Iterable[Product], cfg: Optional[CatalogFileConfig] = None) -> str:
    """
    Serialize the catalog to one string.

    Raises CatalogFormatError, before producing any text, if a name or
    category contains a separator or a price is negative or not finite.
    """
    cfg = cfg or CatalogFileConfig()
    fs, rs = cfg.field_sep, cfg.record_sep
    records: List[str] = []
    for p in products:
        for label, value in (("name", p.name), ("category", p.category)):
            if fs in value or rs in value:
                raise CatalogFormatError(
                    f"Product '{p.name}': {label} '{value}' contains a separator ({fs!r} or {rs!r})."
                )
        if not (isfinite(p.price) and p.price >= 0):
            raise CatalogFormatError(f"Product '{p.name}': price {p.price} cannot be stored.")
        records.append(f"{p.name}{fs}{p.category}{fs}{format_price(p.price, cfg.price_decimals)}{rs}")
    return "".join(records)


def decode_products(text: str, cfg: Optional[CatalogFileConfig] = None) -> List[Product]:
    """
    Parse catalog text back into products, in file order.

    Empty fragments (the one after the final '#') are skipped. Raises
    CatalogFormatError if a record does not have exactly three fields or the
    price is not a plain decimal.
    """
    cfg = cfg or CatalogFileConfig()
    products: List[Product] = []
    for idx, record in enumerate(text.split(cfg.record_sep)):
        if not record:
            continue
        parts = record.split(cfg.field_sep)
        if len(parts) != 3:
            raise CatalogFormatError(
                f"Record {idx} '{record}' has {len(parts)} field(s); expected name{cfg.field_sep}"
                f"category{cfg.field_sep}price."
            )
        name, category, price_text = parts
        try:
            price = parse_price(price_text)
        except ValueError as e:
            raise CatalogFormatError(f"Record {idx} '{record}': invalid price '{price_text}'.") from e
        products.append(Product(name=name, category=category, price=price))
    return products


# -------------------------------------------------------------------
# File I/O
# -------------------------------------------------------------------

def save_products(
    products: Iterable[Product],
    path: Optional[PathLike] = None,
    cfg: Optional[CatalogFileConfig] = None,
) -> Path:
    """
    Write the whole catalog in one go, replacing any existing content.
    Returns the path written. OS failures surface as CatalogFileError.
    """
    cfg = cfg or CatalogFileConfig()
    path = Path(path if path is not None else cfg.path)
    data = encode_products(products, cfg)
    try:
        with path.open("w", encoding=cfg.encoding, newline="") as f:
            f.write(data)
    except OSError as e:
        raise CatalogFileError(f"Cannot write catalog to {path}: {e}") from e
    logger.info("Saved catalog to %s (%d bytes)", path, len(data.encode(cfg.encoding)))
    return path


def load_products(path: Optional[PathLike] = None, cfg: Optional[CatalogFileConfig] = None) -> List[Product]:
    """
    Read and decode the catalog file.
    Missing or unreadable files raise CatalogFileError; malformed content
    raises CatalogFormatError (a CatalogFileError too).
    """
    cfg = cfg or CatalogFileConfig()
    path = Path(path if path is not None else cfg.path)
    try:
        with path.open("r", encoding=cfg.encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogFileError(f"Cannot read catalog from {path}: {e}") from e
    products = decode_products(text, cfg)
    logger.info("Loaded %d product(s) from %s", len(products), path)
    return products
