"""Catalog and order store ports.

Checkout reaches the catalogue and the order records only through these
contracts. Adapters raise ``StoreError`` for any failure they cannot
recover from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from boutique.catalogue.product import ProductSnapshot


class StoreError(Exception):
    """A store could not complete the requested read or write."""


@dataclass(frozen=True)
class OrderHeader:
    customer_id: str
    subtotal: int
    delivery_fee: int
    delivery_address: str


@dataclass(frozen=True)
class OrderLineRecord:
    product_id: str
    product_name: str
    product_price: int
    quantity: int


class CatalogStore(ABC):
    """Abstract catalogue access used during checkout."""

    @abstractmethod
    async def get_product(self, product_id: str) -> ProductSnapshot | None:
        """Return the current snapshot of a product, or None if it does not exist."""
        ...

    @abstractmethod
    async def decrement_stock(self, product_id: str, amount: int) -> int:
        """Take ``amount`` units out of stock and return the new stock level."""
        ...


class OrderStore(ABC):
    """Abstract order persistence."""

    @abstractmethod
    async def create_order(self, header: OrderHeader) -> str:
        """Record an order header and return the generated order id."""
        ...

    @abstractmethod
    async def create_order_lines(self, order_id: str, lines: list[OrderLineRecord]) -> None:
        """Attach line items to an existing order."""
        ...
