"""Shared fixtures for cart and checkout tests."""

import pytest

from boutique.catalogue.product import ProductSnapshot
from boutique.identity.customer import CheckoutIdentity
from boutique.identity.provider import StaticIdentityProvider
from boutique.notifications.channel.fake import FakeNotificationSink
from boutique.notifications.notices import RecordingNoticeBoard
from boutique.notifications.templates import OrderSummaryTemplate
from boutique.ordering.cart.cart import CartStore
from boutique.ordering.cart.snapshot import MemorySnapshotStore
from boutique.ordering.checkout.pipeline import OrderSubmissionPipeline
from boutique.ordering.checkout.service import CheckoutService
from boutique.ordering.stores import FakeCatalogStore, FakeOrderStore


def _snapshot(product_id="prod-dress", name="Floral Summer Dress", price=2500, stock=15, category="dresses"):
    return ProductSnapshot(product_id=product_id, name=name, price=price, category=category, stock=stock)


@pytest.fixture()
def make_product():
    """Factory for product snapshots with sensible defaults."""
    return _snapshot


@pytest.fixture()
def dress():
    return _snapshot()


@pytest.fixture()
def necklace():
    return _snapshot(
        product_id="prod-necklace",
        name="Statement Necklace",
        price=1200,
        stock=20,
        category="accessories",
    )


@pytest.fixture()
def identity():
    return CheckoutIdentity(
        customer_id="cust-001",
        name="Jane Wanjiku",
        email="jane@example.com",
        phone="+254712345678",
        address="123 Nairobi St, Kenya",
    )


@pytest.fixture()
def snapshots():
    return MemorySnapshotStore()


@pytest.fixture()
def notices():
    return RecordingNoticeBoard()


@pytest.fixture()
def cart(snapshots, notices):
    return CartStore(snapshots, notices)


@pytest.fixture()
def catalog(dress, necklace):
    return FakeCatalogStore([dress, necklace])


@pytest.fixture()
def orders():
    return FakeOrderStore()


@pytest.fixture()
def sink():
    return FakeNotificationSink()


@pytest.fixture()
def template():
    return OrderSummaryTemplate("KEV'SCUE BOUTIQUE", "KSh")


@pytest.fixture()
def pipeline(cart, catalog, orders, sink, template):
    return OrderSubmissionPipeline(cart=cart, catalog=catalog, orders=orders, sink=sink, template=template)


@pytest.fixture()
def checkout_service(cart, pipeline, notices, identity):
    return CheckoutService(
        cart=cart,
        identities=StaticIdentityProvider(identity),
        pipeline=pipeline,
        notices=notices,
        delivery_fee=150,
    )
