"""In-memory keyed entity store.

The store owns its entities and is the only place identifier uniqueness
is enforced. It knows nothing about secondary indexes: a
:class:`~pyrecords.index.GroupIndex` is rebuilt from :meth:`EntityStore.get_all`
by the caller whenever it needs a fresh view.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from pyrecords.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError

_logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class EntityStore(Generic[K, T]):
    """Uniquely-keyed collection of entities.

    Entities are keyed by ``key_of``, which reads the ``id_field`` attribute
    (``id``) unless given.
    Enumeration follows insertion order.

    Parameters
    ----------
    name : str
        Entity label used in log lines and error messages.
    id_field : str
        Attribute holding the identifier. It can never be updated through
        :meth:`update_field`.
    key_of : Callable[[T], K] or None
        Identifier accessor. Defaults to reading ``id_field``.
    validators : Mapping[str, Callable[[Any], bool]] or None
        Per-field domain constraints checked by :meth:`update_field` after
        pydantic has converted the new value and before it is assigned.
        Pydantic field constraints on the entity are enforced as well.
    """

    def __init__(
        self,
        name: str = "entity",
        *,
        id_field: str = "id",
        key_of: Callable[[T], K] | None = None,
        validators: Mapping[str, Callable[[Any], bool]] | None = None,
    ) -> None:
        self._name = name
        self._id_field = id_field
        self._key_of: Callable[[T], K] = key_of if key_of is not None else operator.attrgetter(id_field)
        self._validators: dict[str, Callable[[Any], bool]] = dict(validators or {})
        self._items: dict[K, T] = {}

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"EntityStore(name={self._name!r}, size={len(self._items)})"

    def key_of(self, entity: T) -> K:
        """Return the identifier of *entity*."""
        return self._key_of(entity)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert(self, entity: T) -> None:
        """Store *entity* under its identifier.

        Raises :class:`DuplicateKeyError` if the identifier is taken; the
        store is left unchanged.
        """
        key = self._key_of(entity)
        if key in self._items:
            raise DuplicateKeyError(
                f"{self._label()} with ID {key} already exists.",
                key=key,
                entity=self._name,
            )
        self._items[key] = entity
        _logger.debug("Inserted %s %r (size=%d)", self._name, key, len(self._items))

    def remove(self, key: K) -> T:
        """Delete and return the entity stored under *key*."""
        try:
            entity = self._items.pop(key)
        except KeyError as exc:
            raise self._not_found(key) from exc
        _logger.debug("Removed %s %r (size=%d)", self._name, key, len(self._items))
        return entity

    def update_field(self, key: K, field: str, mutator: Callable[[Any], Any]) -> Any:
        """Apply ``mutator(current)`` to one field of a stored entity, in place.

        Returns the value as stored. Raises :class:`NotFoundError` when *key* is
        absent and :class:`InvalidValueError` when the field is the
        identifier, unknown, read-only, or the new value breaks a
        constraint. On failure the previous value is kept.
        """
        entity = self.get_by_id(key)
        if field == self._id_field:
            raise self._invalid(key, field, f"{self._label()} identifier '{field}' cannot be updated.")
        if not _has_field(entity, field):
            raise self._invalid(key, field, f"{self._label()} has no field '{field}'.")

        value = self._convert(entity, key, field, mutator(getattr(entity, field)))

        check = self._validators.get(field)
        if check is not None:
            try:
                accepted = check(value)
            except (TypeError, ValueError) as exc:
                raise self._invalid(key, field, f"Invalid value {value!r} for {self._name} field '{field}'.") from exc
            if not accepted:
                raise self._invalid(key, field, f"Invalid value {value!r} for {self._name} field '{field}'.")

        try:
            setattr(entity, field, value)
        except AttributeError as exc:
            # Frozen dataclasses and setter-less properties.
            raise self._invalid(key, field, f"{self._label()} field '{field}' is read-only.") from exc

        stored = getattr(entity, field)
        _logger.debug("Updated %s %r field %s=%r", self._name, key, field, stored)
        return stored

    def _convert(self, entity: Any, key: K, field: str, value: Any) -> Any:
        """Return *value* as the entity would store it.

        Pydantic entities validate the assignment on a shallow copy, so
        coercion and field constraints apply without touching the stored
        entity. Other entities get the value unchanged.
        """
        if not isinstance(entity, BaseModel):
            return value
        candidate = entity.model_copy()
        try:
            setattr(candidate, field, value)
        except ValidationError as exc:
            if _is_frozen_error(exc):
                raise self._invalid(key, field, f"{self._label()} field '{field}' is read-only.") from exc
            raise self._invalid(
                key,
                field,
                f"Invalid value {value!r} for {self._name} field '{field}': {_first_error(exc)}",
            ) from exc
        return getattr(candidate, field)

    def update_quantity(self, key: K, quantity: int) -> int:
        """Set the ``quantity`` of a stored item.

        Negative quantities raise :class:`InvalidValueError`.
        """
        self.get_by_id(key)
        if quantity < 0:
            raise self._invalid(key, "quantity", "Quantity cannot be negative.")
        result: int = self.update_field(key, "quantity", lambda _current: quantity)
        return result

    def load(self, entities: Iterable[T]) -> None:
        """Replace the whole contents with *entities*.

        A repeated identifier raises :class:`DuplicateKeyError` and keeps
        the previous contents.
        """
        items: dict[K, T] = {}
        for entity in entities:
            key = self._key_of(entity)
            if key in items:
                raise DuplicateKeyError(
                    f"{self._label()} with ID {key} appears more than once.",
                    key=key,
                    entity=self._name,
                )
            items[key] = entity
        self._items = items
        _logger.debug("Loaded %d %s entities", len(items), self._name)

    def clear(self) -> None:
        self._items.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, key: K) -> T:
        """Return the entity stored under *key* or raise :class:`NotFoundError`."""
        try:
            return self._items[key]
        except KeyError as exc:
            raise self._not_found(key) from exc

    def try_get_by_id(self, key: K) -> T | None:
        return self._items.get(key)

    def get_all(self) -> list[T]:
        """Return a new list of every stored entity, in insertion order."""
        return list(self._items.values())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _label(self) -> str:
        return self._name[:1].upper() + self._name[1:]

    def _not_found(self, key: K) -> NotFoundError:
        return NotFoundError(f"{self._label()} with ID {key} not found.", key=key, entity=self._name)

    def _invalid(self, key: K, field: str, message: str) -> InvalidValueError:
        return InvalidValueError(message, key=key, entity=self._name, field=field)


def _has_field(entity: Any, field: str) -> bool:
    if isinstance(entity, BaseModel):
        return field in type(entity).model_fields
    return hasattr(entity, field)


_FROZEN_ERROR_TYPES = frozenset({"frozen_instance", "frozen_field"})


def _is_frozen_error(exc: ValidationError) -> bool:
    return any(error.get("type") in _FROZEN_ERROR_TYPES for error in exc.errors())


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg", exc))
