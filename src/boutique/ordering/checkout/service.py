"""Checkout service — the storefront's "place order" action.

Resolves the shopper, assembles the submission, runs the pipeline and
reports the outcome as notices, including form details the order cannot
carry. Returns the receipt on success and None when a checkout or
submission error ended the attempt.
"""

import structlog
from protean.exceptions import ValidationError

from boutique.identity.customer import CheckoutIdentity
from boutique.identity.provider.port import IdentityProvider
from boutique.notifications.notices import Notice, NoticeBoard, NoticeVariant
from boutique.ordering.cart.cart import CartStore
from boutique.ordering.checkout.assembler import CheckoutAssembler
from boutique.ordering.checkout.errors import CheckoutError, InvalidCheckoutDetails, SubmissionError
from boutique.ordering.checkout.pipeline import OrderReceipt, OrderSubmissionPipeline

logger = structlog.get_logger(__name__)


class CheckoutService:
    def __init__(
        self,
        cart: CartStore,
        identities: IdentityProvider,
        pipeline: OrderSubmissionPipeline,
        notices: NoticeBoard,
        delivery_fee: int,
        assembler: CheckoutAssembler | None = None,
    ) -> None:
        self.cart = cart
        self.identities = identities
        self.pipeline = pipeline
        self.notices = notices
        self.delivery_fee = delivery_fee
        self.assembler = assembler or CheckoutAssembler()

    def order_summary(self) -> dict:
        """Subtotal, delivery fee and total as shown next to the cart."""
        subtotal = self.cart.total()
        return {
            "subtotal": subtotal,
            "delivery_fee": self.delivery_fee,
            "total": subtotal + self.delivery_fee,
            "item_count": self.cart.count(),
        }

    async def checkout(self, **details) -> OrderReceipt | None:
        """Place an order for the signed-in shopper.

        ``details`` may carry name, email, phone or address entered on the
        checkout form; they replace the profile's values for this order.
        """
        try:
            identity = self._identity_with(details)
            submission = self.assembler.assemble(self.cart, identity, self.delivery_fee)
            receipt = await self.pipeline.submit(submission)
        except (CheckoutError, SubmissionError) as exc:
            logger.warning("Checkout did not complete", reason=type(exc).__name__, error=str(exc))
            self.notices.post(Notice(exc.title, exc.description, NoticeVariant.DESTRUCTIVE))
            return None

        for warning in receipt.warnings:
            self.notices.post(Notice("Order placed with warnings", warning, NoticeVariant.WARNING))
        self.notices.post(Notice("Order completed", "Your order has been placed successfully!"))
        return receipt

    def _identity_with(self, details: dict) -> CheckoutIdentity | None:
        unknown = set(details) - {"name", "email", "phone", "address"}
        if unknown:
            raise TypeError(f"Unknown checkout details: {', '.join(sorted(unknown))}")

        identity = self.identities.current_identity()
        overrides = {key: value for key, value in details.items() if value}
        if identity is None or not overrides:
            return identity

        try:
            return CheckoutIdentity(
                customer_id=identity.customer_id,
                name=overrides.get("name", identity.name),
                email=overrides.get("email", identity.email),
                phone=overrides.get("phone", identity.phone),
                address=overrides.get("address", identity.address),
            )
        except ValidationError as exc:
            raise InvalidCheckoutDetails(exc.messages) from exc
