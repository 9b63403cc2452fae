from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .auth.service import AuthService
from .database.memory_store import MemoryStore
from .database.seed import seed_demo_data
from .reports.service import ReportService
from .sections.service import SectionService
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: MemoryStore

    auth_service: AuthService
    section_service: SectionService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(
    *,
    auth_username: str,
    auth_password: str,
    seed: bool = True,
    store: Optional[MemoryStore] = None,
) -> Container:
    """Wire services around one store owned by the returned container."""

    store = store or MemoryStore()
    if seed:
        seed_demo_data(store, store)

    return Container(
        store=store,
        auth_service=AuthService.from_plaintext(auth_username, auth_password),
        section_service=SectionService(store),
        student_service=StudentService(store),
        attendance_service=AttendanceService(store),
        report_service=ReportService(store, store, store),
    )
