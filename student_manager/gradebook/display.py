# gradebook/display.py
"""Табличное представление студентов для консоли (сводка и матрица оценок)."""
from typing import Iterable

import pandas as pd

try:
    from .models import Student
except (ImportError, ValueError):
    from models import Student
# -------------------------

SUMMARY_COLUMNS = ['ID', 'Имя', 'Средний балл', 'Оценок']

def summary_frame(students: Iterable[Student]) -> pd.DataFrame:
    """Одна строка на студента: ID, имя, средний балл и число оценок."""
    rows = [[s.id, s.name, round(s.average, 2), s.grade_count] for s in students]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

def grade_matrix_frame(students: Iterable[Student]) -> pd.DataFrame:
    """Матрица оценок: строка на студента, столбец на каждую оценку.

    Короткие строки дополняются пустыми ячейками до самого длинного списка
    оценок. Индекс строки совпадает с текущей позицией студента в хранилище.
    """
    students = list(students)
    max_grades = max((s.grade_count for s in students), default=0)
    grade_columns = [f'Оценка {i + 1}' for i in range(max_grades)]

    rows = []
    for s in students:
        grades = s.grades + [None] * (max_grades - s.grade_count)
        rows.append([s.id, s.name] + grades + [round(s.average, 2)])

    return pd.DataFrame(rows, columns=['ID', 'Имя'] + grade_columns + ['Средний балл'])

def format_frame(frame: pd.DataFrame) -> str:
    """Текст таблицы для вывода: оценки с двумя знаками, пустые ячейки как '-'."""
    return frame.to_string(float_format=lambda v: f"{v:.2f}", na_rep='-')
