from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceInput:
    student_id: int
    date: date
    present: bool


@dataclass(frozen=True)
class AttendanceRecord:
    """One attendance mark. Unique per (student_id, date)."""

    attendance_id: int
    student_id: int
    date: date
    present: bool

    def to_json(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "present": self.present,
        }
