from __future__ import annotations

import logging

from ..core.constants import DEMO_STUDENT_COUNT
from ..sections.model import SectionInput
from ..sections.repository import SectionRepository
from ..students.model import StudentInput
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)

DEMO_SECTIONS = (
    SectionInput(name="Class 10A", description="Section A of 10th grade"),
    SectionInput(name="Class 10B", description="Section B of 10th grade"),
)


def demo_students(section_ids: list[int], count: int = DEMO_STUDENT_COUNT) -> list[StudentInput]:
    """Round-robin ``count`` demo students over ``section_ids``."""

    out: list[StudentInput] = []
    for i in range(count):
        n = i + 1
        out.append(
            StudentInput(
                name=f"Student {n}",
                roll_number=f"2024{n:03d}",
                email=f"student{n}@example.com",
                phone=f"123456789{n:02d}",
                section_id=section_ids[i % len(section_ids)],
            )
        )
    return out


def seed_demo_data(sections: SectionRepository, students: StudentRepository) -> None:
    """Load the fixed demo roster: 2 sections and 20 students."""

    created = [sections.create_section(s) for s in DEMO_SECTIONS]
    for payload in demo_students([s.section_id for s in created]):
        students.create_student(payload)

    logger.info("demo seed ready (sections=%d, students=%d)", len(created), DEMO_STUDENT_COUNT)
