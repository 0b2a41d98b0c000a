"""Domain events for the Customer aggregate."""

from protean.fields import Identifier, String

from boutique.domain import boutique


@boutique.event(part_of="Customer")
class CustomerRegistered:
    """A new account was created."""

    __version__ = 1

    customer_id = Identifier(required=True)
    name = String(required=True)
    email = String(required=True)
    role = String(required=True)
