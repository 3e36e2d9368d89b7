"""Patient and prescription records."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from pyrecords.models._base import RecordModel


class Patient(RecordModel):
    """A registered patient."""

    id: int
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    gender: str = ""

    def __str__(self) -> str:
        return f"Patient(Id={self.id}, Name={self.name}, Age={self.age}, Gender={self.gender})"


class Prescription(RecordModel):
    """A prescription issued to a patient.

    ``patient_id`` is the foreign key used to group prescriptions per
    patient.
    """

    id: int
    patient_id: int
    medication_name: str = Field(..., min_length=1)
    date_issued: date

    def __str__(self) -> str:
        return (
            f"Prescription(Id={self.id}, PatientId={self.patient_id}, "
            f"Medication={self.medication_name}, DateIssued={self.date_issued:%Y-%m-%d})"
        )
