# gradebook/models.py
"""Модуль, определяющий основную модель данных Student."""
from typing import Iterable, List, Optional

try:
    # Сначала относительный (для pytest)
    from .aggregation import recalc_average
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    from aggregation import recalc_average
# -------------------------

NAME_MAX_LEN = 49

def truncate_name(name: Optional[str]) -> str:
    """Обрезает имя до NAME_MAX_LEN символов. None превращается в пустую строку."""
    if name is None:
        return ""
    return name[:NAME_MAX_LEN]

class Student:
    """Представляет студента с его ID, именем и оценками.

    Средний балл хранится, а не считается при каждом обращении: он
    пересчитывается сразу после добавления оценки и снаружи не изменяется.
    """
    def __init__(self, student_id: int, name: Optional[str], grades: Iterable[float] = ()):
        self.id = student_id
        self._name = truncate_name(name)
        self._grades: List[float] = []
        self._average = 0.0
        for grade in grades:
            self.add_grade(grade)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: Optional[str]):
        self._name = truncate_name(value)

    @property
    def grades(self) -> List[float]:
        """Копия списка оценок в порядке ввода."""
        return list(self._grades)

    @property
    def grade_count(self) -> int:
        return len(self._grades)

    @property
    def average(self) -> float:
        """Средний балл студента. 0.0, если оценок нет."""
        return self._average

    def add_grade(self, grade: float):
        """Добавляет оценку и синхронно пересчитывает средний балл."""
        self._grades.append(float(grade))
        self._average = recalc_average(self._grades)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id={self.id}, name='{self.name}', average={self.average:.2f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        grades_str = ", ".join(f"{g:.2f}" for g in self._grades) if self._grades else "Нет оценок"
        return f"ID: {self.id:<3} | Имя: {self.name:<20} | Средний балл: {self.average:<6.2f} | Оценки: [{grades_str}]"
