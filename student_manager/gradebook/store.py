# gradebook/store.py
"""Хранилище записей о студентах в памяти."""
import logging
from typing import Iterator, List, Optional, Union

try:
    from .models import Student
    from .processing import ClassExtremes, highest_lowest
    from .search import binary_search_by_id
    from .sorting import SortKey, SortMethod, sort_students
except (ImportError, ValueError):
    from models import Student
    from processing import ClassExtremes, highest_lowest
    from search import binary_search_by_id
    from sorting import SortKey, SortMethod, sort_students
# -------------------------

logger = logging.getLogger(__name__)

class StudentStore:
    """Упорядоченная коллекция студентов с уникальными ID.

    Порядок меняется только сортировкой и удалением; удаление сдвигает
    последующие записи влево, сохраняя их взаимный порядок.

    Индексы, которые принимает get() и возвращают binary_search_by_id() и
    highest_lowest(), действительны только до следующего add(), delete()
    или sort(). Для долгоживущих ссылок используйте ID и find().
    """

    def __init__(self):
        self._students: List[Student] = []

    def _index_of(self, student_id: int) -> Optional[int]:
        for i, s in enumerate(self._students):
            if s.id == student_id:
                return i
        return None

    def add(self, student_id: int, name: Optional[str]) -> bool:
        """Добавляет студента без оценок. False, если такой ID уже есть."""
        if self._index_of(student_id) is not None:
            logger.debug("Duplicate student id %s rejected", student_id)
            return False
        self._students.append(Student(student_id, name))
        logger.debug("Added student %s", student_id)
        return True

    def delete(self, student_id: int) -> bool:
        """Удаляет студента вместе с оценками. False, если ID не найден."""
        idx = self._index_of(student_id)
        if idx is None:
            return False
        self._students.pop(idx)
        logger.debug("Deleted student %s at index %d", student_id, idx)
        return True

    def update_name(self, student_id: int, new_name: Optional[str]) -> bool:
        idx = self._index_of(student_id)
        if idx is None:
            return False
        self._students[idx].name = new_name
        logger.debug("Renamed student %s", student_id)
        return True

    def add_grade(self, student_id: int, grade: float) -> bool:
        """Добавляет оценку и пересчитывает средний балл.

        Диапазон оценки здесь не проверяется, это делает вызывающий код.
        """
        idx = self._index_of(student_id)
        if idx is None:
            return False
        self._students[idx].add_grade(grade)
        logger.debug("Added grade %s to student %s", grade, student_id)
        return True

    def find(self, student_id: int) -> Optional[Student]:
        idx = self._index_of(student_id)
        return None if idx is None else self._students[idx]

    def count(self) -> int:
        return len(self._students)

    def get(self, index: int) -> Optional[Student]:
        """Студент по позиции или None, если индекс вне диапазона."""
        if index < 0 or index >= len(self._students):
            return None
        return self._students[index]

    def highest_lowest(self) -> Optional[ClassExtremes]:
        return highest_lowest(self._students)

    def sort(self, method: Union[SortMethod, int, str] = SortMethod.MERGE,
             key: Union[SortKey, int, str] = SortKey.ID) -> int:
        """Сортирует записи на месте и возвращает число сравнений."""
        comparisons = sort_students(self._students, method, key)
        logger.debug("Sorted %d students (%s, %s), %d comparisons",
                     len(self._students), method, key, comparisons)
        return comparisons

    def binary_search_by_id(self, target_id: int, lo: int = 0, hi: Optional[int] = None) -> Optional[int]:
        """Бинарный поиск по ID. Хранилище должно быть отсортировано по ID."""
        if hi is None:
            hi = len(self._students) - 1
        return binary_search_by_id(self._students, target_id, lo, hi)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)
