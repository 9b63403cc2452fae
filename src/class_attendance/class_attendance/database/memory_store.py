from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..sections.model import Section, SectionInput
from ..sections.repository import SectionRepository
from ..students.model import Student, StudentInput
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Table(Generic[T]):
    """Id-keyed rows for one entity type plus its id counter."""

    def __init__(self) -> None:
        self.rows: Dict[int, T] = {}
        self.next_id = 1

    def allocate_id(self) -> int:
        new_id = self.next_id
        self.next_id += 1
        return new_id

    def put(self, row_id: int, row: T) -> T:
        self.rows[row_id] = row
        # Ids put here by update-at-absent-id must never be handed out by create.
        if row_id >= self.next_id:
            self.next_id = row_id + 1
        return row


class MemoryStore(SectionRepository, StudentRepository, AttendanceRepository):
    """Process-lifetime in-memory store for sections, students and attendance.

    Flask may serve requests from several threads, so every operation runs
    under one re-entrant lock; this keeps id assignment and the attendance
    scan-then-write atomic.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._sections: _Table[Section] = _Table()
        self._students: _Table[Student] = _Table()
        self._attendance: _Table[AttendanceRecord] = _Table()

    # ----- sections -----

    def list_sections(self) -> List[Section]:
        with self._lock:
            return list(self._sections.rows.values())

    def get_section(self, section_id: int) -> Optional[Section]:
        with self._lock:
            return self._sections.rows.get(section_id)

    def create_section(self, payload: SectionInput) -> Section:
        return self._create(self._sections, lambda new_id: _section_from(new_id, payload))

    def update_section(self, section_id: int, payload: SectionInput) -> Section:
        with self._lock:
            return self._sections.put(section_id, _section_from(section_id, payload))

    def delete_section(self, section_id: int) -> None:
        with self._lock:
            self._sections.rows.pop(section_id, None)

    # ----- students -----

    def list_students(self) -> List[Student]:
        with self._lock:
            return list(self._students.rows.values())

    def get_student(self, student_id: int) -> Optional[Student]:
        with self._lock:
            return self._students.rows.get(student_id)

    def create_student(self, payload: StudentInput) -> Student:
        return self._create(self._students, lambda new_id: _student_from(new_id, payload))

    def update_student(self, student_id: int, payload: StudentInput) -> Student:
        with self._lock:
            return self._students.put(student_id, _student_from(student_id, payload))

    def delete_student(self, student_id: int) -> None:
        with self._lock:
            self._students.rows.pop(student_id, None)

    # ----- attendance -----

    def mark_attendance(self, *, student_id: int, day: date, present: bool) -> AttendanceRecord:
        with self._lock:
            existing = self._find_attendance(student_id, day)
            if existing is not None:
                updated = replace(existing, present=present)
                self._attendance.rows[existing.attendance_id] = updated
                logger.debug("attendance %s overwritten: student=%s day=%s present=%s",
                             existing.attendance_id, student_id, day, present)
                return updated

            new_id = self._attendance.allocate_id()
            record = AttendanceRecord(attendance_id=new_id, student_id=student_id, date=day, present=present)
            self._attendance.put(new_id, record)
            logger.debug("attendance %s created: student=%s day=%s present=%s", new_id, student_id, day, present)
            return record

    def attendance_for_date(self, day: date) -> List[AttendanceRecord]:
        with self._lock:
            return [r for r in self._attendance.rows.values() if r.date == day]

    def attendance_for_student(self, student_id: int) -> List[AttendanceRecord]:
        with self._lock:
            return [r for r in self._attendance.rows.values() if r.student_id == student_id]

    def attendance_between(self, *, start: date, end: date) -> List[AttendanceRecord]:
        with self._lock:
            return [r for r in self._attendance.rows.values() if start <= r.date <= end]

    # ----- helpers -----

    def _create(self, table: _Table[T], build: Callable[[int], T]) -> T:
        with self._lock:
            new_id = table.allocate_id()
            return table.put(new_id, build(new_id))

    def _find_attendance(self, student_id: int, day: date) -> Optional[AttendanceRecord]:
        for record in self._attendance.rows.values():
            if record.student_id == student_id and record.date == day:
                return record
        return None


def _section_from(section_id: int, payload: SectionInput) -> Section:
    return Section(section_id=section_id, name=payload.name, description=payload.description)


def _student_from(student_id: int, payload: StudentInput) -> Student:
    return Student(
        student_id=student_id,
        name=payload.name,
        roll_number=payload.roll_number,
        email=payload.email,
        phone=payload.phone,
        section_id=payload.section_id,
    )
