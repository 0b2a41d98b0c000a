"""Order back office — status updates and order listings."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from boutique.domain import boutique
from boutique.ordering.order.order import Order, OrderStatus


@boutique.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


@boutique.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_status(command.status)
        repo.add(order)


def all_orders() -> list[Order]:
    """Every order, newest first."""
    orders = current_domain.repository_for(Order)._dao.query.all().items
    return sorted(orders, key=lambda order: order.placed_at, reverse=True)


def orders_for_customer(customer_id: str) -> list[Order]:
    return [order for order in all_orders() if str(order.customer_id) == str(customer_id)]
