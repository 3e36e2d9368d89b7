"""Inventory and warehouse items."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from pyrecords.models._base import MutableRecordModel, RecordModel


class InventoryItem(RecordModel):
    """Logged inventory entry, persisted as part of a JSON snapshot."""

    id: int
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)
    date_added: datetime


class ElectronicItem(MutableRecordModel):
    """Warehouse electronics line. Only ``quantity`` is mutable."""

    id: int = Field(..., frozen=True)
    name: str = Field(..., min_length=1, frozen=True)
    quantity: int = Field(..., ge=0)
    brand: str = Field(default="", frozen=True)
    warranty_months: int = Field(default=0, ge=0, frozen=True)

    def __str__(self) -> str:
        return (
            f"ElectronicItem(Id={self.id}, Name={self.name}, Brand={self.brand}, "
            f"Warranty={self.warranty_months}mo, Quantity={self.quantity})"
        )


class GroceryItem(MutableRecordModel):
    """Warehouse grocery line. Only ``quantity`` is mutable."""

    id: int = Field(..., frozen=True)
    name: str = Field(..., min_length=1, frozen=True)
    quantity: int = Field(..., ge=0)
    expiry_date: date = Field(..., frozen=True)

    def __str__(self) -> str:
        return f"GroceryItem(Id={self.id}, Name={self.name}, Expiry={self.expiry_date:%Y-%m-%d}, Quantity={self.quantity})"
