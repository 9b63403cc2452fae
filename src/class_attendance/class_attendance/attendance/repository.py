from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def mark_attendance(self, *, student_id: int, day: date, present: bool) -> AttendanceRecord:
        """Create or update the record for (student_id, day).

        An existing record keeps its id and date; only ``present`` changes.
        """

        raise NotImplementedError

    def attendance_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def attendance_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def attendance_between(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
