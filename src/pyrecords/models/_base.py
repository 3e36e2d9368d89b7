"""Base models for stored entities.

An entity only has to expose a stable identifier to live in an
:class:`~pyrecords.store.EntityStore` (the ``id`` attribute unless the
store is given another ``id_field`` or ``key_of``). The pydantic bases
below are how the bundled domain models satisfy that:

* :class:`RecordModel` is a frozen snapshot; every field is read-only.
* :class:`MutableRecordModel` re-validates on assignment, so a value that
  breaks a field constraint (``ge=0`` on a quantity, for example) raises
  and leaves the previous value in place. Fields that must stay fixed
  are declared with ``Field(frozen=True)``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """Immutable entity snapshot."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class MutableRecordModel(BaseModel):
    """Entity whose non-frozen fields may be updated in place."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
    )
