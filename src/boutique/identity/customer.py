"""Customer aggregate and the identity snapshot used at checkout."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text, ValueObject

from boutique.domain import boutique
from boutique.identity.contact import EmailAddress, PhoneNumber
from boutique.identity.events import CustomerRegistered

NOT_PROVIDED = "Not provided"


class CustomerRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@boutique.value_object
class CheckoutIdentity:
    """Who is placing an order and where it should be delivered."""

    customer_id: String(required=True, max_length=50)
    name: String(required=True, max_length=200)
    email: String(required=True, max_length=254)
    phone: String(max_length=20, default=NOT_PROVIDED)
    address: Text(default=NOT_PROVIDED)

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name.strip():
            raise ValidationError({"name": ["Name cannot be blank"]})


@boutique.aggregate
class Customer:
    """A registered shopper or back-office administrator."""

    name: String(required=True, max_length=200)
    email: ValueObject(EmailAddress, required=True)
    phone: ValueObject(PhoneNumber)
    address: Text()
    role: String(choices=CustomerRole, default=CustomerRole.CUSTOMER.value)
    registered_at: DateTime()

    @classmethod
    def register(cls, name, email, phone=None, address=None, role=CustomerRole.CUSTOMER.value):
        customer = cls(
            name=name,
            email=EmailAddress(address=email),
            phone=PhoneNumber(number=phone) if phone else None,
            address=address,
            role=role,
            registered_at=datetime.now(UTC),
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=str(customer.id),
                name=name,
                email=email,
                role=role,
            )
        )
        return customer

    @property
    def is_admin(self) -> bool:
        return self.role == CustomerRole.ADMIN.value

    def checkout_identity(self, phone=None, address=None) -> CheckoutIdentity:
        """Identity for checkout, with optional overrides entered on the form."""
        return CheckoutIdentity(
            customer_id=str(self.id),
            name=self.name,
            email=self.email.address,
            phone=phone or (self.phone.number if self.phone else NOT_PROVIDED),
            address=address or self.address or NOT_PROVIDED,
        )
