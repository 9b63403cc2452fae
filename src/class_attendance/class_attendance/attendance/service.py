from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import DayLike, to_day, today
from ..common.validators import require_bool, require_int, require_payload
from ..core.exceptions import ValidationError
from .model import AttendanceInput, AttendanceRecord
from .repository import AttendanceRepository


def parse_attendance_payload(data: Any) -> AttendanceInput:
    data = require_payload(data)
    if data.get("date") is None:
        raise ValidationError("date is required")
    return AttendanceInput(
        student_id=require_int(data, "studentId"),
        date=to_day(data["date"]),
        present=require_bool(data, "present"),
    )


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def mark(self, data: Any) -> AttendanceRecord:
        """Create or overwrite the mark for the payload's student and day."""

        payload = parse_attendance_payload(data)
        return self._attendance.mark_attendance(
            student_id=payload.student_id,
            day=payload.date,
            present=payload.present,
        )

    def for_date(self, value: Optional[DayLike] = None) -> Sequence[AttendanceRecord]:
        day = to_day(value) if value else today()
        return self._attendance.attendance_for_date(day)

    def for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.attendance_for_student(int(student_id))
