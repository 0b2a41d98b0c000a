"""Stock policy — how many units a cart line may hold.

Pure functions with no side effects. Callers reject requests below one
unit before consulting the policy.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StockDecision:
    """Admissible quantity for a cart line and whether the request was cut down."""

    quantity: int
    was_capped: bool


def admissible_quantity(requested: int, existing_in_cart: int, available_stock: int) -> StockDecision:
    """Clamp a request against available stock.

    With units already in the cart (merge mode) the request is added to them
    before clamping; with none (direct mode) the request is clamped as is.
    Negative stock counts as zero.
    """
    wanted = requested + existing_in_cart
    quantity = min(wanted, max(available_stock, 0))
    return StockDecision(quantity=quantity, was_capped=quantity < wanted)


def direct_quantity(requested: int, available_stock: int) -> StockDecision:
    """Clamp a quantity that replaces whatever the line held before."""
    return admissible_quantity(requested, 0, available_stock)
