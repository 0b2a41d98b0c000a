"""Snapshot stores for persisting the cart between sessions."""

from boutique.ordering.cart.snapshot.file import FileSnapshotStore
from boutique.ordering.cart.snapshot.memory import MemorySnapshotStore
from boutique.ordering.cart.snapshot.port import SnapshotStore

__all__ = ["SnapshotStore", "MemorySnapshotStore", "FileSnapshotStore"]
