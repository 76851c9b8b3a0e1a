# gradebook/io_utils.py
"""Модуль для сохранения и загрузки студентов в JSON-файл.

Формат файла:
    {
      "students": [
        {
          "id": 1,
          "name": "...",
          "grades": [80.00, 90.00],
          "average": 85.00
        }
      ]
    }

Оценки и средний балл записываются с двумя знаками после точки. Поле average
при загрузке не читается: средний балл пересчитывается хранилищем по оценкам.
"""
import json
import logging
import math
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Iterable, Optional, Union

try:
    # Сначала относительный (для pytest)
    from .models import Student
    from .store import StudentStore
    from .errors import FileProcessingError, DataValidationError
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    from models import Student
    from store import StudentStore
    from errors import FileProcessingError, DataValidationError
# -------------------------

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def format_student(student: Student) -> str:
    """JSON-объект одного студента; числа с двумя знаками после точки."""
    grades = ", ".join(f"{g:.2f}" for g in student.grades)
    return "\n".join([
        "    {",
        f"      \"id\": {student.id},",
        f"      \"name\": {json.dumps(student.name, ensure_ascii=False)},",
        f"      \"grades\": [{grades}],",
        f"      \"average\": {student.average:.2f}",
        "    }",
    ])

def format_document(students: Iterable[Student]) -> str:
    entries = [format_student(s) for s in students]
    if not entries:
        return "{\n  \"students\": []\n}\n"
    return "{\n  \"students\": [\n" + ",\n".join(entries) + "\n  ]\n}\n"

def save_students_to_json(filepath: PathLike, students: Iterable[Student]):
    """Записывает всех студентов в JSON-файл, полностью заменяя его содержимое.

    Документ пишется во временный файл рядом с целевым и затем переименовывается,
    поэтому при ошибке записи старый файл остаётся нетронутым. Права доступа
    существующего файла сохраняются.
    """
    path = Path(filepath)
    students = list(students)
    text = format_document(students)

    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, mode='w', encoding='utf-8') as file:
            file.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")

    logger.info("Saved %d students to %s", len(students), path)

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _as_grade(value: Any) -> Optional[float]:
    """Оценка из JSON как float или None, если это не конечное число."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        grade = float(value)
    except OverflowError:
        return None
    return grade if math.isfinite(grade) else None

def load_students_from_json(filepath: PathLike, store: StudentStore) -> int:
    """Загружает студентов из JSON-файла в хранилище и возвращает их число.

    Отсутствующий файл не ошибка: хранилище остаётся пустым. Каждая запись
    проходит через store.add() и store.add_grade(), как при вводе из меню.
    Записи с некорректным или повторяющимся ID и без имени пропускаются,
    нечисловые, бесконечные и NaN оценки тоже.
    """
    path = Path(filepath)
    try:
        with open(path, mode='r', encoding='utf-8') as file:
            raw = file.read()
    except FileNotFoundError:
        logger.info("Data file %s not found, starting empty", path)
        return 0
    except OSError as e:
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}")

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataValidationError(f"Файл {filepath} не является корректным JSON: {e}")

    if not isinstance(document, dict) or not isinstance(document.get("students"), list):
        raise DataValidationError(f"В файле {filepath} нет списка 'students'.")

    loaded = 0
    for position, entry in enumerate(document["students"]):
        if load_student_entry(entry, store):
            loaded += 1
        else:
            logger.warning("Skipped malformed student entry #%d in %s", position, path)

    logger.info("Loaded %d students from %s", loaded, path)
    return loaded

def load_student_entry(entry: Any, store: StudentStore) -> bool:
    """Переносит одну запись из JSON в хранилище. False, если запись пропущена."""
    if not isinstance(entry, dict):
        return False

    student_id = entry.get("id")
    name = entry.get("name")
    if not _is_int(student_id) or not isinstance(name, str) or not name:
        return False
    if not store.add(student_id, name):
        return False

    grades = entry.get("grades")
    if isinstance(grades, list):
        for value in grades:
            grade = _as_grade(value)
            if grade is not None:
                store.add_grade(student_id, grade)
    return True
