"""Configurable in-memory stores for development and testing.

Both fakes record every call and can be told to fail, so checkout can be
exercised against each failure branch without a backend.
"""

from uuid import uuid4

from boutique.catalogue.product import ProductSnapshot
from boutique.ordering.stores.port import (
    CatalogStore,
    OrderHeader,
    OrderLineRecord,
    OrderStore,
    StoreError,
)


class FakeCatalogStore(CatalogStore):
    def __init__(self, products: list[ProductSnapshot] | None = None) -> None:
        self.stock: dict[str, int] = {}
        self.products: dict[str, ProductSnapshot] = {}
        self.failing_products: set[str] = set()
        self.calls: list[dict] = []
        for product in products or []:
            self.put(product)

    def put(self, product: ProductSnapshot) -> None:
        self.products[product.product_id] = product
        self.stock[product.product_id] = product.stock

    def configure(self, failing_products=()) -> None:
        """Make stock decrements fail for the given product ids."""
        self.failing_products = set(failing_products)

    async def get_product(self, product_id: str) -> ProductSnapshot | None:
        self.calls.append({"method": "get_product", "product_id": product_id})
        product = self.products.get(product_id)
        if product is None:
            return None
        return ProductSnapshot(
            product_id=product.product_id,
            name=product.name,
            price=product.price,
            category=product.category,
            stock=self.stock[product_id],
        )

    async def decrement_stock(self, product_id: str, amount: int) -> int:
        self.calls.append({"method": "decrement_stock", "product_id": product_id, "amount": amount})
        if product_id in self.failing_products:
            raise StoreError(f"Stock update rejected for product {product_id}")
        if product_id not in self.stock:
            raise StoreError(f"Unknown product {product_id}")
        if amount > self.stock[product_id]:
            raise StoreError(f"Insufficient stock for product {product_id}")

        self.stock[product_id] -= amount
        return self.stock[product_id]


class FakeOrderStore(OrderStore):
    def __init__(self) -> None:
        self.headers: dict[str, OrderHeader] = {}
        self.lines: dict[str, list[OrderLineRecord]] = {}
        self.fail_orders = False
        self.fail_lines = False
        self.failure_reason = "Order store unavailable"

    def configure(self, fail_orders=False, fail_lines=False, failure_reason="Order store unavailable") -> None:
        self.fail_orders = fail_orders
        self.fail_lines = fail_lines
        self.failure_reason = failure_reason

    async def create_order(self, header: OrderHeader) -> str:
        if self.fail_orders:
            raise StoreError(self.failure_reason)

        order_id = f"ord-{uuid4().hex[:12]}"
        self.headers[order_id] = header
        return order_id

    async def create_order_lines(self, order_id: str, lines: list[OrderLineRecord]) -> None:
        if self.fail_lines:
            raise StoreError(self.failure_reason)
        if order_id not in self.headers:
            raise StoreError(f"Unknown order {order_id}")

        self.lines.setdefault(order_id, []).extend(lines)
