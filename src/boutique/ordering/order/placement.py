"""Order placement — commands and handler."""

import json

from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from boutique.domain import boutique
from boutique.ordering.order.order import Order


@boutique.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    subtotal = Integer(required=True, min_value=0)
    delivery_fee = Integer(default=0, min_value=0)
    delivery_address = Text()


@boutique.command(part_of="Order")
class RecordOrderLines:
    order_id = Identifier(required=True)
    lines = Text(required=True)  # JSON: list of {product_id, product_name, product_price, quantity}


@boutique.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            customer_id=command.customer_id,
            subtotal=command.subtotal,
            delivery_fee=command.delivery_fee or 0,
            delivery_address=command.delivery_address,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)

    @handle(RecordOrderLines)
    def record_order_lines(self, command):
        lines_data = json.loads(command.lines) if isinstance(command.lines, str) else command.lines

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.record_lines(lines_data)
        repo.add(order)
