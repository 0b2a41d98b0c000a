"""Product aggregate root and the read-only snapshot the cart holds.

The catalogue is authoritative for price and stock. Carts keep a
``ProductSnapshot`` taken when the item was added, which may go stale.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String, Text

from boutique.catalogue.events import (
    ProductAdded,
    ProductDetailsUpdated,
    StockDecremented,
    StockReplenished,
)
from boutique.domain import boutique

DEFAULT_IMAGE = "/placeholder.svg"


@boutique.value_object
class ProductSnapshot:
    """Point-in-time copy of a product's identity, price and stock."""

    product_id: String(required=True, max_length=50)
    name: String(required=True, max_length=255)
    price: Integer(required=True, min_value=0)
    category: String(max_length=100, default="")
    stock: Integer(required=True, min_value=0)


@boutique.aggregate
class Product:
    """A sellable item managed from the back office."""

    name: String(required=True, max_length=255)
    description: Text()
    image: String(max_length=500, default=DEFAULT_IMAGE)
    price: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)
    stock: Integer(required=True, min_value=0, default=0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def category_must_not_be_blank(self):
        if not self.category or not self.category.strip():
            raise ValidationError({"category": ["Category cannot be blank"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def add(cls, name, price, category, stock=0, description=None, image=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            price=price,
            category=(category or "").strip().lower(),
            stock=stock,
            description=description,
            image=image or DEFAULT_IMAGE,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                price=price,
                category=product.category,
                stock=stock,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Back office edits
    # -------------------------------------------------------------------
    def update_details(self, name=None, description=None, image=None, price=None, category=None):
        """Replace the provided fields, leaving the others untouched."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if image is not None:
            self.image = image
        if price is not None:
            self.price = price
        if category is not None:
            self.category = category.strip().lower()
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                price=self.price,
                category=self.category,
            )
        )

    # -------------------------------------------------------------------
    # Stock movements
    # -------------------------------------------------------------------
    def restock(self, quantity):
        if quantity < 1:
            raise ValidationError({"quantity": ["Restock quantity must be at least 1"]})

        self.stock += quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockReplenished(
                product_id=str(self.id),
                quantity=quantity,
                new_stock=self.stock,
            )
        )

    def decrement_stock(self, quantity):
        """Take ``quantity`` units out of stock. Stock never goes below zero."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Decrement quantity must be at least 1"]})
        if quantity > self.stock:
            raise ValidationError(
                {"stock": [f"Cannot remove {quantity} units, only {self.stock} in stock"]}
            )

        self.stock -= quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockDecremented(
                product_id=str(self.id),
                quantity=quantity,
                new_stock=self.stock,
            )
        )
        return self.stock

    def snapshot(self) -> ProductSnapshot:
        return ProductSnapshot(
            product_id=str(self.id),
            name=self.name,
            price=self.price,
            category=self.category,
            stock=self.stock,
        )
