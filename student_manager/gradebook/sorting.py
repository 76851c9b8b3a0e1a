# gradebook/sorting.py
"""Модуль сортировки студентов: пузырьком, вставками и слиянием.

Все три алгоритма сортируют список на месте и устойчивы: студенты с равным
ключом сохраняют исходный взаимный порядок. Каждая функция возвращает число
выполненных сравнений ключей.
"""
from enum import Enum
from operator import attrgetter
from typing import Any, Callable, List, Union

try:
    from .models import Student
except (ImportError, ValueError):
    from models import Student
# -------------------------

KeyFunc = Callable[[Student], Any]

class SortMethod(Enum):
    BUBBLE = 1
    INSERTION = 2
    MERGE = 3

class SortKey(Enum):
    ID = 1
    AVERAGE = 2

_KEY_FUNCS = {
    SortKey.ID: attrgetter('id'),
    SortKey.AVERAGE: attrgetter('average'),
}

_METHOD_ALIASES = {
    'bubble': SortMethod.BUBBLE,
    'insertion': SortMethod.INSERTION,
    'merge': SortMethod.MERGE,
}

_KEY_ALIASES = {
    'id': SortKey.ID,
    'avg': SortKey.AVERAGE,
    'average': SortKey.AVERAGE,
}

def bubble_sort(students: List[Student], key: KeyFunc) -> int:
    """Пузырьковая сортировка с ранним выходом, если за проход не было обменов."""
    comparisons = 0
    n = len(students)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            comparisons += 1
            if key(students[j]) > key(students[j + 1]):
                students[j], students[j + 1] = students[j + 1], students[j]
                swapped = True
        if not swapped:
            break
    return comparisons

def insertion_sort(students: List[Student], key: KeyFunc) -> int:
    """Сортировка вставками: элементы сдвигаются вправо, пока не найдётся место."""
    comparisons = 0
    for i in range(1, len(students)):
        current = students[i]
        current_key = key(current)
        j = i - 1
        while j >= 0:
            comparisons += 1
            if key(students[j]) <= current_key:
                break
            students[j + 1] = students[j]
            j -= 1
        students[j + 1] = current
    return comparisons

def _merge(students: List[Student], lo: int, mid: int, hi: int, key: KeyFunc) -> int:
    """Сливает отсортированные students[lo:mid+1] и students[mid+1:hi+1]."""
    left = students[lo:mid + 1]
    right = students[mid + 1:hi + 1]
    comparisons = 0
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        comparisons += 1
        # При равенстве берём элемент из левой половины
        if key(left[i]) <= key(right[j]):
            students[k] = left[i]
            i += 1
        else:
            students[k] = right[j]
            j += 1
        k += 1
    for item in left[i:]:
        students[k] = item
        k += 1
    for item in right[j:]:
        students[k] = item
        k += 1
    return comparisons

def _merge_sort(students: List[Student], lo: int, hi: int, key: KeyFunc) -> int:
    if lo >= hi:
        return 0
    mid = lo + (hi - lo) // 2
    comparisons = _merge_sort(students, lo, mid, key)
    comparisons += _merge_sort(students, mid + 1, hi, key)
    return comparisons + _merge(students, lo, mid, hi, key)

def merge_sort(students: List[Student], key: KeyFunc) -> int:
    """Рекурсивная сортировка слиянием, O(n log n) при любом входе."""
    return _merge_sort(students, 0, len(students) - 1, key)

_ALGORITHMS = {
    SortMethod.BUBBLE: bubble_sort,
    SortMethod.INSERTION: insertion_sort,
    SortMethod.MERGE: merge_sort,
}

def resolve_method(method: Union[SortMethod, int, str]) -> SortMethod:
    """Приводит номер из меню, имя или элемент перечисления к SortMethod."""
    if isinstance(method, SortMethod):
        return method
    if isinstance(method, str) and method.strip().lower() in _METHOD_ALIASES:
        return _METHOD_ALIASES[method.strip().lower()]
    try:
        return SortMethod(method)
    except ValueError:
        raise ValueError("Неверный метод сортировки. Доступно: 1 (bubble), 2 (insertion), 3 (merge).")

def resolve_key(key: Union[SortKey, int, str]) -> SortKey:
    """Приводит номер из меню, имя или элемент перечисления к SortKey."""
    if isinstance(key, SortKey):
        return key
    if isinstance(key, str) and key.strip().lower() in _KEY_ALIASES:
        return _KEY_ALIASES[key.strip().lower()]
    try:
        return SortKey(key)
    except ValueError:
        raise ValueError("Неверный ключ для сортировки. Доступно: 1 (id), 2 (avg).")

def sort_students(students: List[Student],
                  method: Union[SortMethod, int, str] = SortMethod.MERGE,
                  key: Union[SortKey, int, str] = SortKey.ID) -> int:
    """Сортирует список студентов на месте. Возвращает число сравнений."""
    algorithm = _ALGORITHMS[resolve_method(method)]
    key_func = _KEY_FUNCS[resolve_key(key)]
    if len(students) <= 1:
        return 0
    return algorithm(students, key_func)
