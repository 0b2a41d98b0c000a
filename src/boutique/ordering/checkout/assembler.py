"""Checkout assembler — turns the cart and the shopper into an order submission."""

from dataclasses import dataclass

from protean.exceptions import ValidationError

from boutique.identity.customer import CheckoutIdentity
from boutique.ordering.cart.cart import CartLine, CartStore
from boutique.ordering.checkout.errors import EmptyCart, NotAuthenticated


@dataclass(frozen=True)
class OrderSubmission:
    """Immutable record of one checkout attempt."""

    identity: CheckoutIdentity
    lines: tuple[CartLine, ...]
    subtotal: int
    delivery_fee: int
    grand_total: int

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)


class CheckoutAssembler:
    def assemble(self, cart: CartStore, identity: CheckoutIdentity | None, delivery_fee: int) -> OrderSubmission:
        """Snapshot the cart for submission without changing it.

        Raises ``NotAuthenticated`` when nobody is signed in, then ``EmptyCart``
        when there is nothing to order.
        """
        if identity is None:
            raise NotAuthenticated()
        if cart.is_empty:
            raise EmptyCart()
        if delivery_fee < 0:
            raise ValidationError({"delivery_fee": ["Delivery fee cannot be negative"]})

        subtotal = cart.total()
        return OrderSubmission(
            identity=identity,
            lines=cart.lines,
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            grand_total=subtotal + delivery_fee,
        )
