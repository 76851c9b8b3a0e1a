# gradebook/processing.py
"""Модуль для статистики по группе: лучший и худший средний балл, общие итоги."""
from typing import Any, Dict, List, NamedTuple, Optional

try:
    # 1. Относительный импорт (для pytest)
    from .models import Student
    from .aggregation import recursive_sum
except (ImportError, ValueError):
    # 2. Прямой импорт (для EXE)
    from models import Student
    from aggregation import recursive_sum
# --------------------------------------------------

class ClassExtremes(NamedTuple):
    highest: float
    highest_index: int
    lowest: float
    lowest_index: int

def highest_lowest(students: List[Student]) -> Optional[ClassExtremes]:
    """Один проход по списку: наибольший и наименьший средний балл с индексами.

    При равных значениях побеждает первый найденный студент.
    """
    if not students:
        return None

    highest = lowest = students[0].average
    highest_index = lowest_index = 0
    for i in range(1, len(students)):
        avg = students[i].average
        if avg > highest:
            highest, highest_index = avg, i
        if avg < lowest:
            lowest, lowest_index = avg, i
    return ClassExtremes(highest, highest_index, lowest, lowest_index)

def get_group_statistics(students: List[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по группе студентов."""
    extremes = highest_lowest(students)
    if extremes is None:
        return None

    all_grades = [grade for s in students for grade in s.grades]
    overall_avg = recursive_sum(all_grades) / len(all_grades) if all_grades else 0.0

    return {
        "total_students": len(students),
        "total_grades": len(all_grades),
        "overall_average": overall_avg,
        "best_student": students[extremes.highest_index],
        "worst_student": students[extremes.lowest_index],
    }
