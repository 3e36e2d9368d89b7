"""Finance transaction record."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import Field

from pyrecords.models._base import RecordModel


class Transaction(RecordModel):
    """A categorized payment. ``category`` is the natural grouping key."""

    id: int
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    amount: Decimal = Field(..., gt=0)
    category: str = Field(..., min_length=1)
