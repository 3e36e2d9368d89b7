"""Entity models bundled with pyrecords."""

from pyrecords.models._base import MutableRecordModel, RecordModel
from pyrecords.models.finance import Transaction
from pyrecords.models.grading import Student
from pyrecords.models.health import Patient, Prescription
from pyrecords.models.inventory import ElectronicItem, GroceryItem, InventoryItem

__all__ = [
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "MutableRecordModel",
    "Patient",
    "Prescription",
    "RecordModel",
    "Student",
    "Transaction",
]
