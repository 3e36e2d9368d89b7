"""JSON snapshots of a store's contents.

The store itself has no persistence. This collaborator writes a full
entity list to disk and reads one back, so a store can be rebuilt in a
new session with :meth:`EntityStore.load`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from pyrecords.exceptions import SnapshotError
from pyrecords.store import EntityStore

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class SnapshotFile(Generic[M]):
    """A JSON file holding a list of *model* entities."""

    def __init__(self, path: str | Path, model: type[M], *, indent: int = 2) -> None:
        self._path = Path(path)
        self._model = model
        self._indent = indent or None
        self._adapter: TypeAdapter[list[M]] = TypeAdapter(list[model])  # type: ignore[valid-type]

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def save(self, entities: list[M]) -> None:
        """Write *entities* to the snapshot file, replacing its contents."""
        payload = self._adapter.dump_json(entities, indent=self._indent)
        try:
            self._path.write_bytes(payload)
        except OSError as exc:
            raise SnapshotError(f"Error saving to file: {exc}", path=str(self._path)) from exc
        _logger.debug("Saved %d %s entities to %s", len(entities), self._model.__name__, self._path)

    def load(self) -> list[M]:
        """Read the snapshot file. A missing file yields an empty list."""
        if not self._path.exists():
            _logger.debug("Snapshot %s does not exist; nothing to load", self._path)
            return []
        try:
            payload = self._path.read_bytes()
        except OSError as exc:
            raise SnapshotError(f"Error loading from file: {exc}", path=str(self._path)) from exc
        try:
            entities = self._adapter.validate_json(payload)
        except ValidationError as exc:
            raise SnapshotError(
                f"Error loading from file: {exc.error_count()} invalid entries in {self._path}",
                path=str(self._path),
            ) from exc
        _logger.debug("Loaded %d %s entities from %s", len(entities), self._model.__name__, self._path)
        return entities

    def save_store(self, store: EntityStore[Any, M]) -> None:
        self.save(store.get_all())

    def load_into(self, store: EntityStore[Any, M]) -> int:
        """Replace *store* contents with the snapshot; return the entity count."""
        entities = self.load()
        store.load(entities)
        return len(entities)
