"""Storefront read helpers over the product repository."""

from protean.utils.globals import current_domain

from boutique.catalogue.product import Product


def all_products() -> list[Product]:
    """Every product in the catalogue, sorted by name."""
    products = current_domain.repository_for(Product)._dao.query.all().items
    return sorted(products, key=lambda product: product.name.lower())


def products_in_category(category: str) -> list[Product]:
    normalized = category.strip().lower()
    return [product for product in all_products() if product.category == normalized]


def categories() -> list[str]:
    return sorted({product.category for product in all_products()})
