"""File-backed snapshot store — one UTF-8 file per key inside a directory."""

import re
from pathlib import Path

from boutique.ordering.cart.snapshot.port import SnapshotStore

_UNSAFE_KEY_CHARACTERS = re.compile(r"[^A-Za-z0-9_.-]")


class FileSnapshotStore(SnapshotStore):
    """Keeps snapshots on disk so a cart survives a process restart.

    Writes go to a temporary sibling first and are then renamed over the
    target, so a reader never sees a half-written snapshot.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARACTERS.sub('_', key)}.json"

    def save(self, key: str, blob: str) -> None:
        target = self._path_for(key)
        staging = target.with_suffix(".tmp")
        staging.write_text(blob, encoding="utf-8")
        staging.replace(target)

    def load(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")
