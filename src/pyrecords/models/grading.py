"""Student score record."""

from __future__ import annotations

from pyrecords.models._base import RecordModel


class Student(RecordModel):
    """A student and their raw score."""

    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        """Letter grade for ``score``; scores above 100 are ``"Invalid"``."""
        if self.score > 100:
            return "Invalid"
        if self.score >= 80:
            return "A"
        if self.score >= 70:
            return "B"
        if self.score >= 60:
            return "C"
        if self.score >= 50:
            return "D"
        return "F"

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"
