"""Sample catalogue used to seed a fresh store."""

from protean.utils.globals import current_domain

from boutique.catalogue.management import AddProduct

SAMPLE_PRODUCTS = [
    {
        "name": "Floral Summer Dress",
        "price": 2500,
        "category": "dresses",
        "description": "A beautiful floral summer dress, perfect for hot Kenyan days.",
        "stock": 15,
    },
    {
        "name": "Classic Denim Jacket",
        "price": 3500,
        "category": "outerwear",
        "description": "A timeless denim jacket that goes with everything.",
        "stock": 10,
    },
    {
        "name": "Leather Ankle Boots",
        "price": 4500,
        "category": "shoes",
        "description": "Stylish leather ankle boots for all occasions.",
        "stock": 8,
    },
    {
        "name": "Statement Necklace",
        "price": 1200,
        "category": "accessories",
        "description": "A bold statement necklace to elevate any outfit.",
        "stock": 20,
    },
    {
        "name": "Silk Blouse",
        "price": 1800,
        "category": "tops",
        "description": "Elegant silk blouse for formal and casual occasions.",
        "stock": 12,
    },
    {
        "name": "Slim Fit Jeans",
        "price": 2200,
        "category": "bottoms",
        "description": "Classic slim fit jeans with perfect stretch.",
        "stock": 25,
    },
]


def seed_catalogue(products=None) -> list[str]:
    """Add the sample products and return their generated ids."""
    return [
        current_domain.process(AddProduct(**data), asynchronous=False)
        for data in (products or SAMPLE_PRODUCTS)
    ]
