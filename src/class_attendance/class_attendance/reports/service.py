from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from datetime import date, timedelta

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import week_start
from ..core.constants import DAYS_PER_WEEK
from ..sections.repository import SectionRepository
from ..students.repository import StudentRepository

# Sunday-first, independent of the process locale.
_DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

WEEKLY_CSV_FIELDS = ["date", "day", "present", "absent", "total"]


def attendance_rate(present: int, total: int) -> int:
    """Rounded percentage of ``total`` marks that are present; 0 when nothing is marked."""
    if total <= 0:
        return 0
    return int(round(present * 100 / total))


@dataclass(frozen=True)
class DailyOverview:
    day: date
    total_students: int
    total_sections: int
    present: int
    absent: int
    unmarked: int
    attendance_rate: int
    absent_students: list[dict] = field(default_factory=list)

    def to_json(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "totalStudents": self.total_students,
            "totalSections": self.total_sections,
            "present": self.present,
            "absent": self.absent,
            "unmarked": self.unmarked,
            "attendanceRate": self.attendance_rate,
            "absentStudents": self.absent_students,
        }


class ReportService:
    """Read-only aggregates over the roster and attendance marks."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        sections: SectionRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._sections = sections

    def daily_overview(self, day: date) -> DailyOverview:
        students = self._students.list_students()
        marks = self._attendance.attendance_for_date(day)

        present = sum(1 for m in marks if m.present)
        absent = len(marks) - present

        marked_ids = {m.student_id for m in marks}
        absent_ids = {m.student_id for m in marks if not m.present}

        return DailyOverview(
            day=day,
            total_students=len(students),
            total_sections=len(self._sections.list_sections()),
            present=present,
            absent=absent,
            unmarked=sum(1 for s in students if s.student_id not in marked_ids),
            attendance_rate=attendance_rate(present, len(marks)),
            absent_students=[s.to_json() for s in students if s.student_id in absent_ids],
        )

    def weekly_overview(self, anchor: date) -> list[dict]:
        """One row per day, Sunday to Saturday, of the week containing ``anchor``."""

        start = week_start(anchor)
        end = start + timedelta(days=DAYS_PER_WEEK - 1)

        per_day: dict[date, list[int]] = {}
        for m in self._attendance.attendance_between(start=start, end=end):
            bucket = per_day.setdefault(m.date, [0, 0])
            bucket[0] += 1 if m.present else 0
            bucket[1] += 1

        rows: list[dict] = []
        for offset in range(DAYS_PER_WEEK):
            day = start + timedelta(days=offset)
            present, total = per_day.get(day, (0, 0))
            rows.append(
                {
                    "date": day.strftime("%Y-%m-%d"),
                    "day": _DAY_LABELS[offset],
                    "present": present,
                    "absent": total - present,
                    "total": total,
                }
            )
        return rows

    def weekly_csv(self, anchor: date) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=WEEKLY_CSV_FIELDS)
        writer.writeheader()
        for row in self.weekly_overview(anchor):
            writer.writerow(row)
        return out.getvalue()

    def student_summary(self, student_id: int) -> dict:
        marks = self._attendance.attendance_for_student(int(student_id))
        present = sum(1 for m in marks if m.present)
        return {
            "studentId": int(student_id),
            "daysMarked": len(marks),
            "present": present,
            "absent": len(marks) - present,
            "attendanceRate": attendance_rate(present, len(marks)),
        }
