"""Store adapters over the boutique domain.

Each call is dispatched as a domain command and processed synchronously;
Protean's exceptions are translated into ``StoreError``.
"""

import json
from dataclasses import asdict

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from boutique.catalogue.management import DecrementStock
from boutique.catalogue.product import Product, ProductSnapshot
from boutique.ordering.order.placement import PlaceOrder, RecordOrderLines
from boutique.ordering.stores.port import (
    CatalogStore,
    OrderHeader,
    OrderLineRecord,
    OrderStore,
    StoreError,
)


class DomainCatalogStore(CatalogStore):
    async def get_product(self, product_id: str) -> ProductSnapshot | None:
        try:
            product = current_domain.repository_for(Product).get(product_id)
        except ObjectNotFoundError:
            return None
        return product.snapshot()

    async def decrement_stock(self, product_id: str, amount: int) -> int:
        try:
            return current_domain.process(
                DecrementStock(product_id=product_id, quantity=amount),
                asynchronous=False,
            )
        except (ObjectNotFoundError, ValidationError) as exc:
            raise StoreError(f"Could not decrement stock of product {product_id}: {exc}") from exc


class DomainOrderStore(OrderStore):
    async def create_order(self, header: OrderHeader) -> str:
        try:
            return current_domain.process(
                PlaceOrder(
                    customer_id=header.customer_id,
                    subtotal=header.subtotal,
                    delivery_fee=header.delivery_fee,
                    delivery_address=header.delivery_address,
                ),
                asynchronous=False,
            )
        except ValidationError as exc:
            raise StoreError(f"Could not create order: {exc}") from exc

    async def create_order_lines(self, order_id: str, lines: list[OrderLineRecord]) -> None:
        try:
            current_domain.process(
                RecordOrderLines(order_id=order_id, lines=json.dumps([asdict(line) for line in lines])),
                asynchronous=False,
            )
        except (ObjectNotFoundError, ValidationError) as exc:
            raise StoreError(f"Could not record lines for order {order_id}: {exc}") from exc
