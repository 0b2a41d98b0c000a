"""In-memory snapshot store — lives as long as the process."""

from boutique.ordering.cart.snapshot.port import SnapshotStore


class MemorySnapshotStore(SnapshotStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.blobs: dict[str, str] = dict(initial or {})
        self.writes = 0

    def save(self, key: str, blob: str) -> None:
        self.blobs[key] = blob
        self.writes += 1

    def load(self, key: str) -> str | None:
        return self.blobs.get(key)
