from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance import service as attendance_service_module
from src.class_attendance.class_attendance.attendance.service import AttendanceService, parse_attendance_payload
from src.class_attendance.class_attendance.core.exceptions import ValidationError


def test_same_calendar_day_different_time_overwrites(store):
    svc = AttendanceService(store)

    svc.mark({"studentId": 5, "date": "2024-03-01", "present": True})
    svc.mark({"studentId": 5, "date": "2024-03-01T23:59:00Z", "present": False})

    records = svc.for_student(5)
    assert len(records) == 1
    assert records[0].present is False
    assert records[0].date == date(2024, 3, 1)


def test_for_date_accepts_any_time_of_day(store):
    svc = AttendanceService(store)
    svc.mark({"studentId": 1, "date": "2024-03-01T08:00:00", "present": True})

    assert len(svc.for_date("2024-03-01T17:30:00")) == 1
    assert svc.for_date("2024-03-02") == []


def test_for_date_defaults_to_today(store, monkeypatch):
    monkeypatch.setattr(attendance_service_module, "today", lambda: date(2024, 3, 1))
    svc = AttendanceService(store)
    svc.mark({"studentId": 1, "date": "2024-03-01", "present": True})

    assert len(svc.for_date()) == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2024-03-01", "present": True},
        {"studentId": "1", "date": "2024-03-01", "present": True},
        {"studentId": 1, "present": True},
        {"studentId": 1, "date": "not a date", "present": True},
        {"studentId": 1, "date": "2024-03-01", "present": "yes"},
        {"studentId": 1, "date": "2024-03-01", "present": 1},
        "studentId=1",
    ],
)
def test_invalid_payload_is_rejected(payload):
    with pytest.raises(ValidationError):
        parse_attendance_payload(payload)


def test_invalid_payload_does_not_touch_store(store):
    svc = AttendanceService(store)

    with pytest.raises(ValidationError):
        svc.mark({"studentId": 1, "date": "2024-03-01"})

    assert store.attendance_for_student(1) == []
