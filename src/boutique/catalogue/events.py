"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from boutique.domain import boutique


@boutique.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Integer(required=True)
    category = String(required=True)
    stock = Integer(required=True)


@boutique.event(part_of="Product")
class ProductDetailsUpdated:
    """Name, description, image, price or category of a product changed."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Integer(required=True)
    category = String(required=True)


@boutique.event(part_of="Product")
class StockReplenished:
    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_stock = Integer(required=True)


@boutique.event(part_of="Product")
class StockDecremented:
    """Units were taken out of stock to fulfil an order."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_stock = Integer(required=True)

