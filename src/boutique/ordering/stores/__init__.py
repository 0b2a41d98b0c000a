"""Catalog and order stores used by checkout."""

from boutique.ordering.stores.domain_adapter import DomainCatalogStore, DomainOrderStore
from boutique.ordering.stores.fake_adapter import FakeCatalogStore, FakeOrderStore
from boutique.ordering.stores.port import (
    CatalogStore,
    OrderHeader,
    OrderLineRecord,
    OrderStore,
    StoreError,
)

__all__ = [
    "CatalogStore",
    "OrderStore",
    "OrderHeader",
    "OrderLineRecord",
    "StoreError",
    "DomainCatalogStore",
    "DomainOrderStore",
    "FakeCatalogStore",
    "FakeOrderStore",
]
