"""Shopping cart — line items keyed by product, persisted as a snapshot.

The cart lives on the shopper's side. It holds a ``ProductSnapshot`` per
line, clamps quantities against the snapshot's stock, merges repeated adds
of the same product into one line, and writes a full JSON snapshot to its
``SnapshotStore`` after every mutation. On construction it restores the
last snapshot; a snapshot that cannot be decoded is logged and replaced by
an empty cart.
"""

import json

import structlog
from protean.exceptions import ValidationError
from protean.fields import Integer, ValueObject

from boutique.catalogue.product import ProductSnapshot
from boutique.domain import boutique
from boutique.notifications.notices import (
    LoggingNoticeBoard,
    NoticeBoard,
    added_to_cart,
    removed_from_cart,
    stock_limit_reached,
)
from boutique.ordering.cart.snapshot.port import SnapshotStore
from boutique.ordering.cart.stock_policy import StockDecision, admissible_quantity, direct_quantity

logger = structlog.get_logger(__name__)

DEFAULT_CART_KEY = "cart"

_SNAPSHOT_FIELDS = ("product_id", "name", "price", "category", "stock")


@boutique.value_object
class CartLine:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)

    @property
    def product_id(self) -> str:
        return self.product.product_id

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity

    def as_snapshot_dict(self) -> dict:
        return {
            "product": {field: getattr(self.product, field) for field in _SNAPSHOT_FIELDS},
            "quantity": self.quantity,
        }

    @classmethod
    def from_snapshot_dict(cls, data: dict) -> "CartLine":
        product = data["product"]
        return cls(
            product=ProductSnapshot(**{field: product.get(field) for field in _SNAPSHOT_FIELDS}),
            quantity=data["quantity"],
        )


class CartStore:
    """Stateful cart aggregate with a single "ready" state."""

    def __init__(
        self,
        snapshots: SnapshotStore,
        notices: NoticeBoard | None = None,
        key: str = DEFAULT_CART_KEY,
    ) -> None:
        self._snapshots = snapshots
        self._notices = notices or LoggingNoticeBoard()
        self._key = key
        self._lines: dict[str, CartLine] = self._restore()

    # -------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------
    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    def quantity_of(self, product_id: str) -> int:
        line = self._lines.get(product_id)
        return line.quantity if line else 0

    def total(self) -> int:
        """Sum of unit price times quantity over all lines, in minor units."""
        return sum(line.line_total for line in self._lines.values())

    def count(self) -> int:
        """Number of units in the cart."""
        return sum(line.quantity for line in self._lines.values())

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, product: ProductSnapshot, quantity: int = 1) -> StockDecision:
        """Add units of a product, merging into its existing line.

        The quantity is clamped to the product's stock; clamping posts a
        notice but never rejects the add.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        existing = self._lines.get(product.product_id)
        decision = admissible_quantity(quantity, existing.quantity if existing else 0, product.stock)

        if decision.was_capped:
            self._notices.post(stock_limit_reached(product.stock))

        if decision.quantity < 1:
            # Nothing left in stock: a zero-unit line cannot exist
            self._lines.pop(product.product_id, None)
        else:
            self._lines[product.product_id] = CartLine(product=product, quantity=decision.quantity)
            if existing is None:
                self._notices.post(added_to_cart(product.name))

        logger.debug(
            "Cart item added",
            product_id=product.product_id,
            requested=quantity,
            quantity=decision.quantity,
            capped=decision.was_capped,
        )
        self._persist()
        return decision

    def remove_item(self, product_id: str) -> None:
        if self._lines.pop(product_id, None) is not None:
            self._notices.post(removed_from_cart())
        self._persist()

    def set_quantity(self, product_id: str, quantity: int) -> StockDecision | None:
        """Replace a line's quantity, clamped to its stored stock.

        Anything below one unit removes the line. Unknown products are ignored.
        """
        if quantity < 1:
            self.remove_item(product_id)
            return None

        line = self._lines.get(product_id)
        if line is None:
            self._persist()
            return None

        decision = direct_quantity(quantity, line.product.stock)
        if decision.was_capped:
            self._notices.post(stock_limit_reached(line.product.stock))

        if decision.quantity < 1:
            del self._lines[product_id]
        else:
            self._lines[product_id] = CartLine(product=line.product, quantity=decision.quantity)

        self._persist()
        return decision

    def clear(self) -> None:
        self._lines.clear()
        self._persist()

    # -------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------
    def snapshot(self) -> str:
        return json.dumps([line.as_snapshot_dict() for line in self._lines.values()])

    @staticmethod
    def decode_snapshot(blob: str) -> dict[str, CartLine]:
        data = json.loads(blob)
        if not isinstance(data, list):
            raise ValueError("Cart snapshot must be a JSON list of lines")

        lines: dict[str, CartLine] = {}
        for entry in data:
            line = CartLine.from_snapshot_dict(entry)
            lines[line.product_id] = line
        return lines

    def _persist(self) -> None:
        self._snapshots.save(self._key, self.snapshot())

    def _restore(self) -> dict[str, CartLine]:
        try:
            blob = self._snapshots.load(self._key)
            if blob is None:
                return {}
            return self.decode_snapshot(blob)
        except (ValueError, TypeError, KeyError, AttributeError, ValidationError) as exc:
            logger.warning("Discarding unreadable cart snapshot", key=self._key, error=str(exc))
            return {}
