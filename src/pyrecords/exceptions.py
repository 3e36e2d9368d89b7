"""Custom exception hierarchy for pyrecords."""

from __future__ import annotations

from typing import Any


class RecordsError(Exception):
    """Base exception for all pyrecords errors."""


class StoreError(RecordsError):
    """An entity store operation was rejected."""

    def __init__(
        self,
        message: str,
        *,
        key: Any = None,
        entity: str = "entity",
    ) -> None:
        self.key = key
        self.entity = entity
        super().__init__(message)


class DuplicateKeyError(StoreError):
    """An entity with the same identifier is already stored."""


class NotFoundError(StoreError):
    """No entity is stored under the requested identifier."""


class InvalidValueError(StoreError):
    """A field update would violate a domain constraint.

    Also raised for updates that target the identifier, an unknown field,
    or a field the entity does not expose as mutable.
    """

    def __init__(
        self,
        message: str,
        *,
        key: Any = None,
        entity: str = "entity",
        field: str = "",
    ) -> None:
        self.field = field
        super().__init__(message, key=key, entity=entity)


class SnapshotError(RecordsError):
    """Reading or writing a JSON snapshot failed."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class ScoreFileError(RecordsError):
    """A score file line could not be parsed."""

    def __init__(self, message: str, *, line_number: int = 0) -> None:
        self.line_number = line_number
        super().__init__(message)


class MissingFieldError(ScoreFileError):
    """A score line does not have exactly three fields."""


class InvalidScoreFormatError(ScoreFileError):
    """A score line carries a non-integer id or score."""


class InsufficientFundsError(RecordsError):
    """A savings account cannot cover a transaction."""

    def __init__(self, message: str, *, balance: Any = None, amount: Any = None) -> None:
        self.balance = balance
        self.amount = amount
        super().__init__(message)
