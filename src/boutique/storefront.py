"""Storefront composition root — wires the cart and checkout to their collaborators.

Every collaborator can be passed in; anything omitted falls back to the
production adapter for the configured settings.
"""

from dataclasses import dataclass

from boutique.config import StorefrontSettings
from boutique.domain import boutique
from boutique.identity.provider import CustomerSessionProvider, IdentityProvider
from boutique.notifications.channel import build_sink
from boutique.notifications.channel.port import NotificationSink
from boutique.notifications.notices import LoggingNoticeBoard, NoticeBoard
from boutique.notifications.templates import OrderSummaryTemplate
from boutique.ordering.cart.cart import CartStore
from boutique.ordering.cart.snapshot import FileSnapshotStore, SnapshotStore
from boutique.ordering.cart.stock_policy import StockDecision
from boutique.ordering.checkout.pipeline import OrderSubmissionPipeline
from boutique.ordering.checkout.service import CheckoutService
from boutique.ordering.stores import CatalogStore, DomainCatalogStore, DomainOrderStore, OrderStore


@dataclass
class Storefront:
    settings: StorefrontSettings
    cart: CartStore
    catalog: CatalogStore
    identities: IdentityProvider
    checkout: CheckoutService

    async def add_to_cart(self, product_id: str, quantity: int = 1) -> StockDecision | None:
        """Add a catalogue product to the cart using its current stock. None if it does not exist."""
        product = await self.catalog.get_product(product_id)
        if product is None:
            return None
        return self.cart.add_item(product, quantity)


def build_storefront(
    settings: StorefrontSettings | None = None,
    *,
    snapshots: SnapshotStore | None = None,
    notices: NoticeBoard | None = None,
    identities: IdentityProvider | None = None,
    catalog: CatalogStore | None = None,
    orders: OrderStore | None = None,
    sink: NotificationSink | None = None,
) -> Storefront:
    settings = settings or StorefrontSettings.load(boutique)
    notices = notices or LoggingNoticeBoard()
    identities = identities or CustomerSessionProvider()
    catalog = catalog or DomainCatalogStore()

    cart = CartStore(
        snapshots or FileSnapshotStore(settings.snapshot_dir),
        notices,
        key=settings.cart_snapshot_key,
    )
    pipeline = OrderSubmissionPipeline(
        cart=cart,
        catalog=catalog,
        orders=orders or DomainOrderStore(),
        sink=sink or build_sink(settings),
        template=OrderSummaryTemplate(settings.shop_name, settings.currency_label),
    )
    checkout = CheckoutService(
        cart=cart,
        identities=identities,
        pipeline=pipeline,
        notices=notices,
        delivery_fee=settings.delivery_fee,
    )
    return Storefront(
        settings=settings,
        cart=cart,
        catalog=catalog,
        identities=identities,
        checkout=checkout,
    )
