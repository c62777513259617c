# tests/flat_file_test.py
from __future__ import annotations

import pytest

from src.business_objects.config import CatalogFileConfig
from src.business_objects.errors import CatalogFileError, CatalogFormatError
from src.business_objects.product import Product
from src.storage.flat_file import decode_products, encode_products, load_products, save_products


# ───────────────────────── helpers ───────────────────────── #

def build_catalog() -> list:
    return [
        Product("Book", "Books", 25.0),
        Product("Phone", "Electronics", 1200.0),
    ]


# ───────────────────────── text codec ───────────────────────── #

def test_encode_exact_text():
    assert encode_products(build_catalog()) == "Book@Books@25.00#Phone@Electronics@1200.00#"


def test_encode_empty_catalog():
    assert encode_products([]) == ""
    assert decode_products("") == []


def test_decode_exact_text():
    products = decode_products("Book@Books@25.00#Phone@Electronics@1200.00#")
    assert products == build_catalog()


def test_decode_accepts_comma_decimal_separator():
    assert decode_products("Pen@Office@1,35#") == [Product("Pen", "Office", 1.35)]


def test_decode_without_trailing_separator():
    assert decode_products("Book@Books@25.00") == [Product("Book", "Books", 25.0)]


def test_missing_price_field_is_a_parse_error():
    with pytest.raises(CatalogFormatError):
        decode_products("OnlyName@Category#")


def test_extra_field_is_a_parse_error():
    with pytest.raises(CatalogFormatError):
        decode_products("A@B@1.00@extra#")


def test_bad_price_is_a_parse_error():
    with pytest.raises(CatalogFormatError) as exc:
        decode_products("Book@Books@cheap#")
    assert isinstance(exc.value.__cause__, ValueError)


def test_parse_error_is_a_file_error():
    assert issubclass(CatalogFormatError, CatalogFileError)
    assert issubclass(CatalogFileError, OSError)


def test_prices_are_rounded_to_two_decimals():
    text = encode_products([Product("Gum", "Candy", 0.999), Product("Tea", "Food", 3.14159)])
    assert text == "Gum@Candy@1.00#Tea@Food@3.14#"
    assert [p.price for p in decode_products(text)] == [1.0, 3.14]


def test_custom_separators():
    cfg = CatalogFileConfig(record_sep="\n", field_sep=";")
    text = encode_products(build_catalog(), cfg)
    assert text == "Book;Books;25.00\nPhone;Electronics;1200.00\n"
    assert decode_products(text, cfg) == build_catalog()


# ───────────────────────── file I/O ───────────────────────── #

def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "products.txt"
    catalog = build_catalog() + [Product("Pen", "Office", 1.355)]
    save_products(catalog, path)

    assert path.read_text(encoding="utf-8").endswith("#")
    loaded = load_products(path)
    assert [(p.name, p.category) for p in loaded] == [(p.name, p.category) for p in catalog]
    assert [p.price for p in loaded] == [round(p.price, 2) for p in catalog]


def test_save_overwrites_existing_content(tmp_path):
    path = tmp_path / "products.txt"
    path.write_text("stale@stale@9.99#" * 10, encoding="utf-8")
    save_products(build_catalog(), path)
    assert path.read_text(encoding="utf-8") == "Book@Books@25.00#Phone@Electronics@1200.00#"


def test_save_uses_configured_path(tmp_path):
    cfg = CatalogFileConfig(path=str(tmp_path / "catalog.txt"))
    written = save_products(build_catalog(), cfg=cfg)
    assert written.name == "catalog.txt"
    assert load_products(cfg=cfg) == build_catalog()


def test_load_missing_file(tmp_path):
    with pytest.raises(CatalogFileError) as exc:
        load_products(tmp_path / "nope.txt")
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_save_into_missing_directory(tmp_path):
    with pytest.raises(CatalogFileError):
        save_products(build_catalog(), tmp_path / "missing" / "products.txt")


def test_load_malformed_file(tmp_path):
    path = tmp_path / "products.txt"
    path.write_text("Book@Books@25.00#OnlyName@Category#", encoding="utf-8")
    with pytest.raises(CatalogFormatError):
        load_products(path)


# ───────────────────────── unstorable / non-decimal input ───────────────────────── #

@pytest.mark.parametrize(
    "product",
    [
        Product("Ink#Pen", "Office", 2.0),
        Product("A@B", "Office", 1.0),
        Product("Ink", "Off#ice", 1.0),
        Product("Ink", "Off@ice", 1.0),
        Product("Refund", "Misc", -5.0),
        Product("Void", "Misc", float("inf")),
        Product("Void", "Misc", float("nan")),
    ],
)
def test_encode_rejects_products_that_cannot_round_trip(product):
    with pytest.raises(CatalogFormatError) as exc:
        encode_products(build_catalog() + [product])
    assert product.name in str(exc.value)


def test_save_rejects_separator_in_name_and_writes_nothing(tmp_path):
    path = tmp_path / "products.txt"
    with pytest.raises(CatalogFormatError):
        save_products([Product("Book", "Books", 25.0), Product("Ink#Pen", "Office", 2.0)], path)
    assert not path.exists()


def test_save_rejects_separator_and_keeps_old_file(tmp_path):
    path = tmp_path / "products.txt"
    save_products(build_catalog(), path)
    with pytest.raises(CatalogFormatError):
        save_products([Product("A@B", "C#X", 1.0)], path)
    assert load_products(path) == build_catalog()


def test_negative_zero_price_is_written_as_zero():
    text = encode_products([Product("Free", "Promo", -0.0)])
    assert text == "Free@Promo@0.00#"
    assert decode_products(text) == [Product("Free", "Promo", 0.0)]


@pytest.mark.parametrize(
    "price_text",
    ["nan", "inf", "-inf", "Infinity", "1e3", "1_000", "-5.00", "+5.00", "5.", ".5", "1.2.3", "1,2,3", "", " "],
)
def test_decode_rejects_non_decimal_prices(price_text):
    with pytest.raises(CatalogFormatError):
        decode_products(f"Book@Books@{price_text}#")


@pytest.mark.parametrize(
    "price_text, expected",
    [("25", 25.0), ("25.00", 25.0), ("1,35", 1.35), (" 7.5 ", 7.5), ("0", 0.0)],
)
def test_decode_accepts_plain_decimals(price_text, expected):
    assert decode_products(f"Book@Books@{price_text}#")[0].price == expected


def test_load_invalid_utf8_is_a_file_error(tmp_path):
    path = tmp_path / "products.txt"
    path.write_bytes(b"Book@Books@25.00#\xff\xfe@Bad@1.00#")
    with pytest.raises(CatalogFileError) as exc:
        load_products(path)
    assert not isinstance(exc.value, CatalogFormatError)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-q"]))
