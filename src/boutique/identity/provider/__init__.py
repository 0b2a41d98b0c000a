"""Identity providers used by checkout."""

from boutique.identity.provider.port import IdentityProvider
from boutique.identity.provider.session import CustomerSessionProvider, StaticIdentityProvider

__all__ = ["IdentityProvider", "CustomerSessionProvider", "StaticIdentityProvider"]
