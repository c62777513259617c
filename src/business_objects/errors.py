from __future__ import annotations


class RetailError(Exception):
    """Base class for errors raised by the retail demo."""


class ProductNotFoundError(RetailError, KeyError):
    """A product name has no match in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Product '{self.name}' not found in catalog."


class CustomerNotFoundError(RetailError, KeyError):
    """A customer name has no match in the customer list."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Customer '{self.name}' not found."


class CatalogFileError(RetailError, OSError):
    """The catalog file could not be written, read or parsed."""


class CatalogFormatError(CatalogFileError, ValueError):
    """A catalog file record is malformed."""
