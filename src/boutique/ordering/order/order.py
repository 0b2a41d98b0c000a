"""Order aggregate — the durable record of a checkout.

Status machine:
    PENDING → PROCESSING → DELIVERED
    PENDING | PROCESSING → CANCELLED

The header is recorded first and its lines attached in a second step, so
an order can exist with no lines when checkout stops in between.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from boutique.domain import boutique
from boutique.ordering.order.events import OrderLinesRecorded, OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


@boutique.entity(part_of="Order")
class OrderLine:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    product_price = Integer(required=True, min_value=0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.product_price * self.quantity


@boutique.aggregate
class Order:
    customer_id = Identifier(required=True)
    subtotal = Integer(required=True, min_value=0)
    delivery_fee = Integer(default=0, min_value=0)
    delivery_address = Text()
    lines = HasMany(OrderLine)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    placed_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, subtotal, delivery_fee, delivery_address):
        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            delivery_address=delivery_address,
            status=OrderStatus.PENDING.value,
            placed_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                subtotal=subtotal,
                delivery_fee=delivery_fee,
                placed_at=now,
            )
        )
        return order

    @property
    def grand_total(self):
        return self.subtotal + (self.delivery_fee or 0)

    # -------------------------------------------------------------------
    # Lines
    # -------------------------------------------------------------------
    def record_lines(self, lines_data):
        """Attach line items, each a dict of product_id, product_name, product_price, quantity."""
        if OrderStatus(self.status) != OrderStatus.PENDING:
            raise ValidationError({"status": ["Lines can only be recorded on a pending order"]})
        if not lines_data:
            raise ValidationError({"lines": ["An order needs at least one line"]})

        for data in lines_data:
            self.add_lines(
                OrderLine(
                    product_id=data["product_id"],
                    product_name=data["product_name"],
                    product_price=data["product_price"],
                    quantity=data["quantity"],
                )
            )
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderLinesRecorded(
                order_id=str(self.id),
                line_count=len(lines_data),
                item_count=sum(data["quantity"] for data in lines_data),
            )
        )

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        current = OrderStatus(self.status)
        target = OrderStatus(new_status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        self.status = target.value
        self.updated_at = datetime.now(UTC)
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
            )
        )
