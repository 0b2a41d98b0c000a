"""Catalogue back office — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from boutique.catalogue.product import Product
from boutique.domain import boutique, logger


@boutique.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    price = Integer(required=True, min_value=0)
    category = String(required=True, max_length=100)
    stock = Integer(default=0, min_value=0)
    description = Text()
    image = String(max_length=500)


@boutique.command(part_of="Product")
class UpdateProductDetails:
    product_id = Identifier(required=True)
    name = String(max_length=255)
    price = Integer(min_value=0)
    category = String(max_length=100)
    description = Text()
    image = String(max_length=500)


@boutique.command(part_of="Product")
class RestockProduct:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@boutique.command(part_of="Product")
class DecrementStock:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@boutique.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


@boutique.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            price=command.price,
            category=command.category,
            stock=command.stock or 0,
            description=command.description,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProductDetails)
    def update_product_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            image=command.image,
            price=command.price,
            category=command.category,
        )
        repo.add(product)

    @handle(RestockProduct)
    def restock_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.restock(command.quantity)
        repo.add(product)
        return product.stock

    @handle(DecrementStock)
    def decrement_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        new_stock = product.decrement_stock(command.quantity)
        repo.add(product)
        return new_stock

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("Product removed from catalogue", product_id=str(command.product_id))
