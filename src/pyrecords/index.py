"""Rebuildable secondary index over a foreign key.

A :class:`GroupIndex` is a point-in-time view. It does not observe the
store it was built from; after mutating the store, call :meth:`GroupIndex.build`
again before querying.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from pyrecords.store import EntityStore

_logger = logging.getLogger(__name__)

G = TypeVar("G", bound=Hashable)
T = TypeVar("T")


class GroupIndex(Generic[G, T]):
    """Mapping from a grouping key to the entities sharing it.

    Usage::

        index: GroupIndex[int, Prescription] = GroupIndex()
        index.build(prescriptions.get_all(), lambda rx: rx.patient_id)
        index.get_by_key(2)
    """

    def __init__(self) -> None:
        self._groups: dict[G, list[T]] = {}
        self._built = False

    @classmethod
    def from_store(cls, store: EntityStore[Any, T], key_of: Callable[[T], G]) -> GroupIndex[G, T]:
        """Build a new index from the current contents of *store*."""
        index: GroupIndex[G, T] = cls()
        index.build(store.get_all(), key_of)
        return index

    @property
    def built(self) -> bool:
        """Whether :meth:`build` has run at least once."""
        return self._built

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __repr__(self) -> str:
        return f"GroupIndex(groups={len(self._groups)}, built={self._built})"

    def build(self, entities: Iterable[T], key_of: Callable[[T], G]) -> None:
        """Discard any previous state and group *entities* by ``key_of``.

        Every entity lands in exactly one group; order within a group
        follows the input order.
        """
        groups: dict[G, list[T]] = {}
        count = 0
        for entity in entities:
            groups.setdefault(key_of(entity), []).append(entity)
            count += 1
        self._groups = groups
        self._built = True
        _logger.debug("Built index: %d entities in %d groups", count, len(groups))

    def get_by_key(self, key: G) -> list[T]:
        """Return a copy of the group for *key*; unknown keys yield ``[]``."""
        return list(self._groups.get(key, ()))

    def keys(self) -> frozenset[G]:
        return frozenset(self._groups)

    def as_mapping(self) -> Mapping[G, tuple[T, ...]]:
        """Read-only view of every group."""
        return MappingProxyType({key: tuple(group) for key, group in self._groups.items()})
