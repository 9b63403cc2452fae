from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import require_email, require_int, require_length, require_payload, require_str
from ..core.constants import (
    PHONE_MAX,
    PHONE_MIN,
    ROLL_NUMBER_MAX,
    ROLL_NUMBER_MIN,
    STUDENT_NAME_MAX,
    STUDENT_NAME_MIN,
)
from ..core.exceptions import NotFoundError
from .model import Student, StudentInput
from .repository import StudentRepository


def parse_student_payload(data: Any) -> StudentInput:
    data = require_payload(data)
    return StudentInput(
        name=require_length(require_str(data, "name"), "name", min_len=STUDENT_NAME_MIN, max_len=STUDENT_NAME_MAX),
        roll_number=require_length(
            require_str(data, "rollNumber"), "rollNumber", min_len=ROLL_NUMBER_MIN, max_len=ROLL_NUMBER_MAX
        ),
        email=require_email(require_str(data, "email")),
        phone=require_length(require_str(data, "phone"), "phone", min_len=PHONE_MIN, max_len=PHONE_MAX),
        section_id=require_int(data, "sectionId"),
    )


class StudentService:
    """Use case: manage the student roster.

    Roll numbers are meant to be unique but are not checked here, and
    ``sectionId`` may point at a section that does not exist.
    """

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_all(self) -> Sequence[Student]:
        return self._students.list_students()

    def get(self, student_id: int) -> Student:
        student = self._students.get_student(int(student_id))
        if student is None:
            raise NotFoundError("Student not found")
        return student

    def create(self, data: Any) -> Student:
        return self._students.create_student(parse_student_payload(data))

    def update(self, student_id: int, data: Any) -> Student:
        return self._students.update_student(int(student_id), parse_student_payload(data))

    def delete(self, student_id: int) -> None:
        self._students.delete_student(int(student_id))
