from __future__ import annotations

from src.class_attendance.class_attendance.database.seed import demo_students, seed_demo_data


def test_seed_creates_two_sections_and_twenty_students(store):
    seed_demo_data(store, store)

    assert len(store.list_sections()) == 2
    assert len(store.list_students()) == 20


def test_seed_assigns_sections_round_robin(store):
    seed_demo_data(store, store)
    first, second = [s.section_id for s in store.list_sections()]

    for i, student in enumerate(store.list_students()):
        assert student.section_id == (first if i % 2 == 0 else second)


def test_demo_student_fields():
    students = demo_students([1, 2])

    assert students[0].name == "Student 1"
    assert students[0].roll_number == "2024001"
    assert students[0].email == "student1@example.com"
    assert students[0].phone == "12345678901"
    assert students[19].roll_number == "2024020"
    assert students[19].phone == "12345678920"
