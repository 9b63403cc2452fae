from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentInput:
    name: str
    roll_number: str
    email: str
    phone: str
    section_id: int


@dataclass(frozen=True)
class Student:
    """A student on a section roster.

    ``section_id`` is a soft reference: it is never checked against the
    sections collection and survives deletion of the section.
    """

    student_id: int
    name: str
    roll_number: str
    email: str
    phone: str
    section_id: int

    def to_json(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "rollNumber": self.roll_number,
            "email": self.email,
            "phone": self.phone,
            "sectionId": self.section_id,
        }
