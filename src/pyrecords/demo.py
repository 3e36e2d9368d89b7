#!/usr/bin/env python3
"""Seed-and-print demos built on the entity store and group index.

Usage
-----
    pyrecords-demo health --patient 2
    pyrecords-demo warehouse
    pyrecords-demo inventory --snapshot inventory.json
    pyrecords-demo grading --scores students.txt --report report.txt
    pyrecords-demo finance
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from typing import Any

from pyrecords.config import RecordsConfig
from pyrecords.exceptions import (
    DuplicateKeyError,
    InsufficientFundsError,
    InvalidValueError,
    NotFoundError,
    ScoreFileError,
    SnapshotError,
    StoreError,
)
from pyrecords.finance import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    SavingsAccount,
    TransactionProcessor,
)
from pyrecords.index import GroupIndex
from pyrecords.models import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Transaction,
)
from pyrecords.scores import read_students, write_report
from pyrecords.snapshot import SnapshotFile
from pyrecords.store import EntityStore

_logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------


class HealthSystemApp:
    """Patients, prescriptions and a patient-id → prescriptions index."""

    def __init__(self) -> None:
        self.patients: EntityStore[int, Patient] = EntityStore("patient")
        self.prescriptions: EntityStore[int, Prescription] = EntityStore("prescription")
        self.index: GroupIndex[int, Prescription] = GroupIndex()

    def seed_data(self, today: date | None = None) -> None:
        today = today or date.today()
        self.patients.insert(Patient(id=1, name="Ama Mensah", age=28, gender="Female"))
        self.patients.insert(Patient(id=2, name="Kwame Boateng", age=35, gender="Male"))
        self.patients.insert(Patient(id=3, name="Efua Owusu", age=42, gender="Female"))

        for rx_id, patient_id, medication, days_ago in (
            (101, 1, "Amoxicillin 500mg", 10),
            (102, 1, "Paracetamol 1g", 7),
            (103, 2, "Ibuprofen 400mg", 5),
            (104, 3, "Atorvastatin 20mg", 2),
            (105, 2, "Metformin 500mg", 1),
        ):
            self.prescriptions.insert(
                Prescription(
                    id=rx_id,
                    patient_id=patient_id,
                    medication_name=medication,
                    date_issued=today - timedelta(days=days_ago),
                )
            )

    def build_prescription_map(self) -> None:
        self.index.build(self.prescriptions.get_all(), lambda rx: rx.patient_id)

    def print_all_patients(self) -> None:
        print("All Patients:")
        for patient in self.patients:
            print(f"- {patient}")
        print()

    def print_prescriptions_for_patient(self, patient_id: int) -> bool:
        patient = self.patients.try_get_by_id(patient_id)
        if patient is None:
            print(f"No patient found with Id={patient_id}")
            return False

        print(f"Prescriptions for {patient.name} (Id={patient.id}):")
        prescriptions = self.index.get_by_key(patient_id)
        if not prescriptions:
            print("  (none)")
            return True
        for rx in sorted(prescriptions, key=lambda rx: rx.date_issued):
            print(f"- {rx}")
        print()
        return True


def run_health(patient_id: int = 2) -> int:
    app = HealthSystemApp()
    app.seed_data()
    app.build_prescription_map()
    app.print_all_patients()
    return 0 if app.print_prescriptions_for_patient(patient_id) else 1


# ------------------------------------------------------------------
# Warehouse
# ------------------------------------------------------------------


class WarehouseManager:
    """Electronics and grocery stores with log-and-continue stock helpers."""

    def __init__(self) -> None:
        self.electronics: EntityStore[int, ElectronicItem] = EntityStore("electronic item")
        self.groceries: EntityStore[int, GroceryItem] = EntityStore("grocery item")

    def seed_data(self, today: date | None = None) -> None:
        today = today or date.today()
        self.electronics.insert(ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24))
        self.electronics.insert(
            ElectronicItem(id=2, name="Smartphone", quantity=15, brand="Samsung", warranty_months=12)
        )
        self.electronics.insert(ElectronicItem(id=3, name="Monitor", quantity=8, brand="LG", warranty_months=18))

        self.groceries.insert(GroceryItem(id=101, name="Milk", quantity=20, expiry_date=today + timedelta(days=5)))
        self.groceries.insert(GroceryItem(id=102, name="Bread", quantity=30, expiry_date=today + timedelta(days=2)))
        self.groceries.insert(GroceryItem(id=103, name="Eggs", quantity=50, expiry_date=today + timedelta(days=10)))

    @staticmethod
    def print_all_items(store: EntityStore[int, Any]) -> None:
        for item in store:
            print(item)
        print()

    @staticmethod
    def increase_stock(store: EntityStore[int, Any], item_id: int, quantity: int) -> bool:
        try:
            item = store.get_by_id(item_id)
            store.update_quantity(item_id, item.quantity + quantity)
        except StoreError as exc:
            _logger.warning("Stock increase failed: %s", exc)
            print(f"Error: {exc}")
            return False
        print(f"Updated quantity for {item.name}: {item.quantity}")
        return True

    @staticmethod
    def remove_item_by_id(store: EntityStore[int, Any], item_id: int) -> bool:
        try:
            store.remove(item_id)
        except NotFoundError as exc:
            _logger.warning("Removal failed: %s", exc)
            print(f"Error: {exc}")
            return False
        print(f"Item with ID {item_id} removed.")
        return True


def run_warehouse() -> int:
    manager = WarehouseManager()
    manager.seed_data()

    print("Grocery Inventory:")
    manager.print_all_items(manager.groceries)
    print("Electronic Inventory:")
    manager.print_all_items(manager.electronics)

    print("Exception Tests:")
    try:
        manager.electronics.insert(ElectronicItem(id=1, name="Tablet", quantity=5, brand="Apple", warranty_months=12))
    except DuplicateKeyError as exc:
        print(f"DuplicateKeyError: {exc}")

    manager.remove_item_by_id(manager.groceries, 999)

    try:
        manager.electronics.update_quantity(2, -5)
    except InvalidValueError as exc:
        print(f"InvalidValueError: {exc}")
    return 0


# ------------------------------------------------------------------
# Inventory snapshot
# ------------------------------------------------------------------


def seed_inventory(store: EntityStore[int, InventoryItem]) -> None:
    now = datetime.now(UTC)
    for item_id, name, quantity in (
        (1, "Laptop", 5),
        (2, "Mouse", 15),
        (3, "Keyboard", 10),
        (4, "Monitor", 7),
        (5, "USB Drive", 20),
    ):
        store.insert(InventoryItem(id=item_id, name=name, quantity=quantity, date_added=now))


def run_inventory(config: RecordsConfig) -> int:
    snapshot = SnapshotFile(config.snapshot_path, InventoryItem, indent=config.snapshot_indent)
    store: EntityStore[int, InventoryItem] = EntityStore("inventory item")
    seed_inventory(store)
    try:
        snapshot.save_store(store)

        print("\n--- Simulating new session ---\n")

        reloaded: EntityStore[int, InventoryItem] = EntityStore("inventory item")
        snapshot.load_into(reloaded)
    except (SnapshotError, DuplicateKeyError) as exc:
        print(f"Error: {exc}")
        return 1

    for item in reloaded:
        print(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, Date Added: {item.date_added}")
    return 0


# ------------------------------------------------------------------
# Grading
# ------------------------------------------------------------------


def run_grading(config: RecordsConfig) -> int:
    try:
        students = read_students(config.scores_path)
        write_report(students, config.report_path)
    except FileNotFoundError as exc:
        print(f"FileNotFoundError: {exc}")
        return 1
    except ScoreFileError as exc:
        print(f"{type(exc).__name__}: {exc}")
        return 1
    except OSError as exc:
        print(f"Unexpected error: {exc}")
        return 1
    print("Report generated successfully.")
    return 0


# ------------------------------------------------------------------
# Finance
# ------------------------------------------------------------------


def run_finance() -> int:
    account = SavingsAccount("ACC-001", Decimal("1000"))
    print(f"Created account {account.account_number} with balance {account.balance:,.2f}")

    transactions: EntityStore[int, Transaction] = EntityStore("transaction")
    plan: list[tuple[Transaction, TransactionProcessor]] = [
        (Transaction(id=1, amount=Decimal("150.00"), category="Groceries"), MobileMoneyProcessor()),
        (Transaction(id=2, amount=Decimal("300.00"), category="Utilities"), BankTransferProcessor()),
        (Transaction(id=3, amount=Decimal("120.00"), category="Entertainment"), CryptoWalletProcessor()),
    ]

    for transaction, processor in plan:
        print(processor.process(transaction))

    for transaction, _processor in plan:
        try:
            balance = account.apply_transaction(transaction)
        except InsufficientFundsError as exc:
            print(exc)
            continue
        print(f"New balance: {balance:,.2f}")
        transactions.insert(transaction)

    print(f"Final balance: {account.balance:,.2f}")

    by_category = GroupIndex.from_store(transactions, lambda t: t.category)
    for category in sorted(by_category.keys()):
        total = sum((t.amount for t in by_category.get_by_key(category)), Decimal(0))
        print(f"{category}: {total:,.2f}")
    return 0


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyrecords-demo", description="Entity store and group index demos")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="demo", required=True)

    health = sub.add_parser("health", help="Patients and prescriptions grouped by patient")
    health.add_argument("--patient", type=int, default=2, help="Patient id to list prescriptions for")

    sub.add_parser("warehouse", help="Warehouse stock with error handling")

    inventory = sub.add_parser("inventory", help="Save and reload an inventory snapshot")
    inventory.add_argument("--snapshot", help="Snapshot JSON file (default: from config)")

    grading = sub.add_parser("grading", help="Grade a score file")
    grading.add_argument("--scores", help="Input score file (default: from config)")
    grading.add_argument("--report", help="Output report file (default: from config)")

    sub.add_parser("finance", help="Process transactions against a savings account")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.verbose:
        overrides["verbose"] = True
    if getattr(args, "snapshot", None):
        overrides["snapshot_path"] = args.snapshot
    if getattr(args, "scores", None):
        overrides["scores_path"] = args.scores
    if getattr(args, "report", None):
        overrides["report_path"] = args.report
    config = RecordsConfig.from_env(**overrides)

    if config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    if args.demo == "health":
        return run_health(args.patient)
    if args.demo == "warehouse":
        return run_warehouse()
    if args.demo == "inventory":
        return run_inventory(config)
    if args.demo == "grading":
        return run_grading(config)
    return run_finance()


if __name__ == "__main__":
    raise SystemExit(main())
