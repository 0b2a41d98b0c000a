"""Checkout and submission errors.

Each error carries the short notice shown to the shopper when it ends a
checkout attempt.
"""


class CheckoutError(Exception):
    """Checkout preconditions failed; nothing was written."""

    title = "Checkout failed"
    description = "An error occurred during checkout."


class NotAuthenticated(CheckoutError):
    title = "Please login"
    description = "You need to be logged in to complete your order."


class EmptyCart(CheckoutError):
    title = "Empty cart"
    description = "Your cart is empty. Add some items before checkout."


class InvalidCheckoutDetails(CheckoutError):
    """A detail entered on the checkout form was rejected."""

    def __init__(self, messages: dict) -> None:
        problems = "; ".join(
            f"{field}: {', '.join(map(str, errors)) if isinstance(errors, list) else errors}"
            for field, errors in messages.items()
        )
        super().__init__(problems)
        self.messages = messages
        self.description = f"Please check your details ({problems})."


class SubmissionError(Exception):
    """The order could not be submitted."""

    title = "Checkout failed"
    description = "An error occurred during checkout."


class OrderPersistFailed(SubmissionError):
    description = "Your order could not be recorded. Please try again."


class LineItemPersistFailed(SubmissionError):
    """Order lines failed after the header was recorded; the header is left in place."""

    description = "Your order was only partially recorded. Please contact the shop."

    def __init__(self, order_id: str, reason: str) -> None:
        super().__init__(f"Lines for order {order_id} were not recorded: {reason}")
        self.order_id = order_id


class AlreadyInProgress(SubmissionError):
    title = "Checkout in progress"
    description = "Your order is already being placed."
