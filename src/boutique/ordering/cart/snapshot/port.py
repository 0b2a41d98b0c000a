"""Snapshot store port — key/value persistence for cart state across restarts."""

from abc import ABC, abstractmethod


class SnapshotStore(ABC):
    """Abstract key/value sink holding serialized snapshots."""

    @abstractmethod
    def save(self, key: str, blob: str) -> None:
        """Store ``blob`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def load(self, key: str) -> str | None:
        """Return the blob stored under ``key``, or None if there is none."""
        ...
