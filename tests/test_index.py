"""Tests for the rebuildable group index."""

from __future__ import annotations

from datetime import date

import pytest

from pyrecords.index import GroupIndex
from pyrecords.models import Patient, Prescription
from pyrecords.store import EntityStore


def _rx(rx_id: int, patient_id: int) -> Prescription:
    return Prescription(id=rx_id, patient_id=patient_id, medication_name=f"Drug {rx_id}", date_issued=date(2026, 1, 1))


@pytest.fixture
def prescriptions() -> EntityStore[int, Prescription]:
    store: EntityStore[int, Prescription] = EntityStore("prescription")
    for rx_id, patient_id in ((101, 1), (102, 1), (103, 2), (104, 3), (105, 2)):
        store.insert(_rx(rx_id, patient_id))
    return store


def test_prescriptions_grouped_by_patient(prescriptions: EntityStore[int, Prescription]) -> None:
    patients: EntityStore[int, Patient] = EntityStore("patient")
    patients.insert(Patient(id=1, name="Ama", age=28))
    patients.insert(Patient(id=2, name="Kwame", age=35))
    patients.insert(Patient(id=3, name="Efua", age=42))

    index: GroupIndex[int, Prescription] = GroupIndex()
    index.build(prescriptions.get_all(), lambda rx: rx.patient_id)

    assert [rx.id for rx in index.get_by_key(2)] == [103, 105]
    assert index.get_by_key(99) == []
    assert index.keys() == frozenset(p.id for p in patients)


def test_every_entity_lands_in_exactly_one_group(prescriptions: EntityStore[int, Prescription]) -> None:
    entities = prescriptions.get_all()
    index: GroupIndex[int, Prescription] = GroupIndex()
    index.build(entities, lambda rx: rx.patient_id)

    for rx in entities:
        assert index.get_by_key(rx.patient_id).count(rx) == 1
    assert sum(len(index.get_by_key(key)) for key in index.keys()) == len(entities)


def test_unknown_key_on_empty_index() -> None:
    index: GroupIndex[str, Prescription] = GroupIndex()

    assert not index.built
    assert index.get_by_key("nobody") == []
    assert index.keys() == frozenset()


def test_build_is_idempotent(prescriptions: EntityStore[int, Prescription]) -> None:
    entities = prescriptions.get_all()
    index: GroupIndex[int, Prescription] = GroupIndex()
    index.build(entities, lambda rx: rx.patient_id)
    once = dict(index.as_mapping())

    index.build(entities, lambda rx: rx.patient_id)

    assert dict(index.as_mapping()) == once
    assert index.built


def test_index_is_a_snapshot_until_rebuilt(prescriptions: EntityStore[int, Prescription]) -> None:
    index = GroupIndex.from_store(prescriptions, lambda rx: rx.patient_id)

    prescriptions.remove(103)
    prescriptions.insert(_rx(106, 4))

    assert [rx.id for rx in index.get_by_key(2)] == [103, 105]
    assert 4 not in index

    index.build(prescriptions.get_all(), lambda rx: rx.patient_id)

    assert [rx.id for rx in index.get_by_key(2)] == [105]
    assert [rx.id for rx in index.get_by_key(4)] == [106]


def test_rebuild_drops_stale_groups() -> None:
    index: GroupIndex[int, Prescription] = GroupIndex()
    index.build([_rx(1, 1), _rx(2, 2)], lambda rx: rx.patient_id)

    index.build([_rx(3, 2)], lambda rx: rx.patient_id)

    assert index.keys() == frozenset({2})
    assert index.get_by_key(1) == []
    assert len(index) == 1


def test_returned_groups_are_copies(prescriptions: EntityStore[int, Prescription]) -> None:
    index = GroupIndex.from_store(prescriptions, lambda rx: rx.patient_id)

    index.get_by_key(1).clear()

    assert len(index.get_by_key(1)) == 2


def test_as_mapping_is_read_only(prescriptions: EntityStore[int, Prescription]) -> None:
    index = GroupIndex.from_store(prescriptions, lambda rx: rx.patient_id)
    mapping = index.as_mapping()

    assert tuple(rx.id for rx in mapping[1]) == (101, 102)
    with pytest.raises(TypeError):
        mapping[5] = ()  # type: ignore[index]


def test_build_accepts_a_generator() -> None:
    index: GroupIndex[str, int] = GroupIndex()
    index.build((n for n in range(6)), lambda n: "even" if n % 2 == 0 else "odd")

    assert index.get_by_key("even") == [0, 2, 4]
    assert index.get_by_key("odd") == [1, 3, 5]
