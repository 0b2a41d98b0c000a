"""Order submission pipeline — writes a checkout to the stores and notifies the shop.

Steps run strictly in sequence:
    1. record the order header          (failure: OrderPersistFailed, stop)
    2. record the order lines           (failure: LineItemPersistFailed, stop;
                                          the header is not rolled back)
    3. decrement stock per line         (best effort, failures become warnings)
    4. dispatch the order summary       (best effort, failure becomes a warning)
    5. clear the cart

Stock is never decremented below zero: a line whose quantity exceeds the
product's current stock is skipped, so a stock race never blocks an order.
"""

from dataclasses import dataclass

import structlog

from boutique.notifications.channel.port import NotificationSink
from boutique.notifications.templates.order_summary import OrderSummaryTemplate
from boutique.ordering.cart.cart import CartLine, CartStore
from boutique.ordering.checkout.assembler import OrderSubmission
from boutique.ordering.checkout.errors import (
    AlreadyInProgress,
    LineItemPersistFailed,
    OrderPersistFailed,
)
from boutique.ordering.stores.port import (
    CatalogStore,
    OrderHeader,
    OrderLineRecord,
    OrderStore,
    StoreError,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderReceipt:
    order_id: str
    grand_total: int
    warnings: tuple[str, ...] = ()


class OrderSubmissionPipeline:
    def __init__(
        self,
        cart: CartStore,
        catalog: CatalogStore,
        orders: OrderStore,
        sink: NotificationSink,
        template: OrderSummaryTemplate,
    ) -> None:
        self._cart = cart
        self._catalog = catalog
        self._orders = orders
        self._sink = sink
        self._template = template
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit(self, submission: OrderSubmission) -> OrderReceipt:
        """Run the pipeline once. A second call while one is running is rejected."""
        if self._in_flight:
            raise AlreadyInProgress("An order submission is already running for this cart")

        self._in_flight = True
        try:
            with structlog.contextvars.bound_contextvars(customer_id=submission.identity.customer_id):
                return await self._run(submission)
        finally:
            self._in_flight = False

    async def _run(self, submission: OrderSubmission) -> OrderReceipt:
        order_id = await self._persist_header(submission)
        await self._persist_lines(order_id, submission)

        warnings = []
        for line in submission.lines:
            warning = await self._decrement_stock(order_id, line)
            if warning:
                warnings.append(warning)

        warning = self._dispatch(order_id, submission)
        if warning:
            warnings.append(warning)

        self._cart.clear()
        logger.info(
            "Order submitted",
            order_id=order_id,
            grand_total=submission.grand_total,
            warnings=len(warnings),
        )
        return OrderReceipt(order_id=order_id, grand_total=submission.grand_total, warnings=tuple(warnings))

    async def _persist_header(self, submission: OrderSubmission) -> str:
        header = OrderHeader(
            customer_id=submission.identity.customer_id,
            subtotal=submission.subtotal,
            delivery_fee=submission.delivery_fee,
            delivery_address=submission.identity.address,
        )
        try:
            return await self._orders.create_order(header)
        except StoreError as exc:
            logger.error("Order header could not be recorded", error=str(exc))
            raise OrderPersistFailed(str(exc)) from exc

    async def _persist_lines(self, order_id: str, submission: OrderSubmission) -> None:
        records = [
            OrderLineRecord(
                product_id=line.product_id,
                product_name=line.product.name,
                product_price=line.product.price,
                quantity=line.quantity,
            )
            for line in submission.lines
        ]
        try:
            await self._orders.create_order_lines(order_id, records)
        except StoreError as exc:
            logger.error("Order lines could not be recorded, header left without lines", order_id=order_id, error=str(exc))
            raise LineItemPersistFailed(order_id, str(exc)) from exc

    async def _decrement_stock(self, order_id: str, line: CartLine) -> str | None:
        try:
            product = await self._catalog.get_product(line.product_id)
            if product is None:
                logger.warning("Product no longer in catalogue, stock not updated", product_id=line.product_id)
                return f"Stock for {line.product.name} was not updated: product no longer exists."

            if product.stock - line.quantity < 0:
                logger.warning(
                    "Stock would go negative, decrement skipped",
                    order_id=order_id,
                    product_id=line.product_id,
                    stock=product.stock,
                    quantity=line.quantity,
                )
                return f"Stock for {line.product.name} was not updated: only {product.stock} left."

            new_stock = await self._catalog.decrement_stock(line.product_id, line.quantity)
        except Exception as exc:
            logger.error("Error updating stock", order_id=order_id, product_id=line.product_id, error=str(exc))
            return f"Stock for {line.product.name} was not updated."

        logger.debug("Stock decremented", product_id=line.product_id, new_stock=new_stock)
        return None

    def _dispatch(self, order_id: str, submission: OrderSubmission) -> str | None:
        message = self._template.render(submission)
        try:
            delivered = self._sink.dispatch(message)
        except Exception as exc:
            logger.error("Order notification dispatch failed", order_id=order_id, error=str(exc))
            delivered = False

        if not delivered:
            return f"The order summary could not be sent. Please share order {order_id} with the shop."
        return None
