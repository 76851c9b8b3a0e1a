# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student
from gradebook.store import StudentStore

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student(1, "Иванов Иван", [78, 85, 90]),
        Student(3, "Петров Петр", [92, 88, 95]),
        Student(2, "Сидорова Анна", [65, 70]),
    ]

@pytest.fixture
def sample_store() -> StudentStore:
    """Хранилище с тремя студентами, добавленными через add()/add_grade()."""
    store = StudentStore()
    for stud_id, name, grades in [
        (1, "Иванов Иван", [78, 85, 90]),
        (3, "Петров Петр", [92, 88, 95]),
        (2, "Сидорова Анна", [65, 70]),
    ]:
        store.add(stud_id, name)
        for grade in grades:
            store.add_grade(stud_id, grade)
    return store
