from __future__ import annotations

import csv
import io
from datetime import date

from src.class_attendance.class_attendance.database.seed import seed_demo_data
from src.class_attendance.class_attendance.reports.service import ReportService, attendance_rate


def _service(store) -> ReportService:
    return ReportService(store, store, store)


def test_attendance_rate_rounds_and_handles_zero():
    assert attendance_rate(0, 0) == 0
    assert attendance_rate(2, 3) == 67
    assert attendance_rate(3, 3) == 100


def test_daily_overview_counts(store):
    seed_demo_data(store, store)
    day = date(2024, 3, 1)
    store.mark_attendance(student_id=1, day=day, present=True)
    store.mark_attendance(student_id=2, day=day, present=True)
    store.mark_attendance(student_id=3, day=day, present=False)

    overview = _service(store).daily_overview(day)

    assert overview.total_students == 20
    assert overview.total_sections == 2
    assert overview.present == 2
    assert overview.absent == 1
    assert overview.unmarked == 17
    assert overview.attendance_rate == 67
    assert [s["id"] for s in overview.absent_students] == [3]


def test_daily_overview_without_marks(store):
    seed_demo_data(store, store)

    data = _service(store).daily_overview(date(2024, 3, 1)).to_json()

    assert data["present"] == 0
    assert data["attendanceRate"] == 0
    assert data["unmarked"] == 20
    assert data["date"] == "2024-03-01"


def test_weekly_overview_spans_sunday_to_saturday(store):
    store.mark_attendance(student_id=1, day=date(2024, 3, 3), present=True)
    store.mark_attendance(student_id=2, day=date(2024, 3, 3), present=False)
    store.mark_attendance(student_id=1, day=date(2024, 3, 9), present=True)
    # outside the week
    store.mark_attendance(student_id=1, day=date(2024, 3, 10), present=True)

    rows = _service(store).weekly_overview(date(2024, 3, 6))

    assert [r["day"] for r in rows] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert rows[0] == {"date": "2024-03-03", "day": "Sun", "present": 1, "absent": 1, "total": 2}
    assert rows[6]["present"] == 1
    assert sum(r["total"] for r in rows) == 3


def test_weekly_csv_has_header_and_seven_rows(store):
    text = _service(store).weekly_csv(date(2024, 3, 6))

    rows = list(csv.DictReader(io.StringIO(text)))
    assert len(rows) == 7
    assert rows[0]["date"] == "2024-03-03"
    assert rows[0]["total"] == "0"


def test_student_summary(store):
    store.mark_attendance(student_id=4, day=date(2024, 3, 1), present=True)
    store.mark_attendance(student_id=4, day=date(2024, 3, 2), present=False)
    store.mark_attendance(student_id=4, day=date(2024, 3, 3), present=True)

    summary = _service(store).student_summary(4)

    assert summary == {"studentId": 4, "daysMarked": 3, "present": 2, "absent": 1, "attendanceRate": 67}
