from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student, StudentInput


class StudentRepository(Protocol):
    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_student(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create_student(self, payload: StudentInput) -> Student:
        raise NotImplementedError

    def update_student(self, student_id: int, payload: StudentInput) -> Student:
        raise NotImplementedError

    def delete_student(self, student_id: int) -> None:
        raise NotImplementedError
