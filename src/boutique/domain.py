"""Domain initialization and configuration.

Single bounded context for the boutique: catalogue, customer accounts,
the shopping cart and the checkout/ordering flow.
"""

from protean.domain import Domain

from boutique.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
boutique = Domain(name="boutique")
