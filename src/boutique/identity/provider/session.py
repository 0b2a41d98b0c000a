"""Identity providers backed by a sign-in session or a fixed identity."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from boutique.domain import logger
from boutique.identity.customer import CheckoutIdentity, Customer
from boutique.identity.provider.port import IdentityProvider


class CustomerSessionProvider(IdentityProvider):
    """Resolves the signed-in customer from the domain's customer repository."""

    def __init__(self, customer_id: str | None = None) -> None:
        self.customer_id = customer_id

    def sign_in(self, customer_id: str) -> None:
        self.customer_id = customer_id

    def sign_out(self) -> None:
        self.customer_id = None

    def current_identity(self) -> CheckoutIdentity | None:
        if self.customer_id is None:
            return None

        try:
            customer = current_domain.repository_for(Customer).get(self.customer_id)
        except ObjectNotFoundError:
            logger.warning("Signed-in customer no longer exists", customer_id=self.customer_id)
            return None

        return customer.checkout_identity()


class StaticIdentityProvider(IdentityProvider):
    """Always returns the identity it was built with (None means signed out)."""

    def __init__(self, identity: CheckoutIdentity | None = None) -> None:
        self.identity = identity

    def current_identity(self) -> CheckoutIdentity | None:
        return self.identity
