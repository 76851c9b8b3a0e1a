# gradebook/search.py
"""Рекурсивный бинарный поиск студента по ID."""
from typing import List, Optional

try:
    from .models import Student
except (ImportError, ValueError):
    from models import Student
# -------------------------

def binary_search_by_id(students: List[Student], target_id: int, lo: int, hi: int) -> Optional[int]:
    """Ищет target_id в students[lo..hi] включительно и возвращает индекс или None.

    Список должен быть заранее отсортирован по возрастанию ID. Это не
    проверяется: на неотсортированном списке результат не определён.
    """
    if lo > hi:
        return None
    mid = lo + (hi - lo) // 2
    mid_id = students[mid].id
    if mid_id == target_id:
        return mid
    if mid_id > target_id:
        return binary_search_by_id(students, target_id, lo, mid - 1)
    return binary_search_by_id(students, target_id, mid + 1, hi)
