"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from boutique.domain import boutique


@boutique.event(part_of="Order")
class OrderPlaced:
    """An order header was recorded at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    subtotal = Integer(required=True)
    delivery_fee = Integer(required=True)
    placed_at = DateTime(required=True)


@boutique.event(part_of="Order")
class OrderLinesRecorded:
    """Line items were attached to an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    line_count = Integer(required=True)
    item_count = Integer(required=True)


@boutique.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
