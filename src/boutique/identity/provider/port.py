"""Identity provider port — who is checking out, if anyone."""

from abc import ABC, abstractmethod

from boutique.identity.customer import CheckoutIdentity


class IdentityProvider(ABC):
    """Abstract source of the signed-in customer's checkout identity."""

    @abstractmethod
    def current_identity(self) -> CheckoutIdentity | None:
        """Return the current identity, or None when nobody is signed in."""
        ...
