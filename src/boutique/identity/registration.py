"""Customer accounts — commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from boutique.domain import boutique, logger
from boutique.identity.customer import Customer, CustomerRole


@boutique.command(part_of="Customer")
class RegisterCustomer:
    name = String(required=True, max_length=200)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    address = Text()
    role = String(choices=CustomerRole, default=CustomerRole.CUSTOMER.value)


@boutique.command(part_of="Customer")
class RemoveCustomer:
    customer_id = Identifier(required=True)


@boutique.command_handler(part_of=Customer)
class CustomerAccountHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(
            name=command.name,
            email=command.email,
            phone=command.phone,
            address=command.address,
            role=command.role or CustomerRole.CUSTOMER.value,
        )
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(RemoveCustomer)
    def remove_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        repo._dao.delete(customer)
        logger.info("Customer account removed", customer_id=str(command.customer_id))


def all_customers() -> list[Customer]:
    return current_domain.repository_for(Customer)._dao.query.filter(role=CustomerRole.CUSTOMER.value).all().items
