# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import argparse
import logging
import traceback
from dataclasses import replace
from typing import List, Optional

try:
    # 1. Попытка относительного импорта (Для pytest и запуска через python -m gradebook.main)
    from . import io_utils, processing, display, errors
    from .config import AppConfig
    from .sorting import SortKey, SortMethod
    from .models import Student
    from .store import StudentStore
except (ImportError, ValueError):
    # 2. Попытка прямого импорта (Для запуска через python gradebook/main.py)
    import io_utils
    import processing
    import display
    import errors
    from config import AppConfig
    from sorting import SortKey, SortMethod
    from models import Student
    from store import StudentStore
# -------------------------

logger = logging.getLogger(__name__)

def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*40)
    print("          МЕНЮ УПРАВЛЕНИЯ")
    print("="*40)
    print("1. Добавить студента")
    print("2. Добавить оценку студенту")
    print("3. Показать всех студентов (сводка)")
    print("4. Показать матрицу оценок")
    print("5. Сортировать студентов")
    print("6. Найти студента по ID (бинарный поиск)")
    print("7. Статистика по группе")
    print("8. Удалить студента")
    print("9. Изменить имя студента")
    print("0. Выход")
    print("="*40)

def read_int(prompt: str) -> int:
    """Запрашивает целое число, пока не будет введено корректное значение."""
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print("❌ Нужно целое число, попробуйте ещё раз.")

def read_float(prompt: str) -> float:
    """Запрашивает число, пока не будет введено корректное значение."""
    while True:
        raw = input(prompt).strip()
        try:
            return float(raw)
        except ValueError:
            print("❌ Нужно число, попробуйте ещё раз.")

def validate_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise errors.DataValidationError("Имя студента не может быть пустым.")
    return name

def validate_grade(grade: float, config: AppConfig) -> float:
    if not config.grade_min <= grade <= config.grade_max:
        raise errors.DataValidationError(
            f"Оценка {grade} недопустима. Разрешен диапазон {config.grade_min:g}-{config.grade_max:g}.")
    return grade

def save_data(store: StudentStore, config: AppConfig) -> bool:
    """Сохраняет хранилище в файл данных. Ошибка сообщается, но данные в памяти остаются."""
    try:
        io_utils.save_students_to_json(config.data_file, store)
    except errors.FileProcessingError as e:
        logger.error("Save failed: %s", e)
        print(f"❌ Не удалось сохранить данные: {e}")
        return False
    return True

def print_student_details(student: Student):
    print(f"Найден: ID={student.id} Имя={student.name} "
          f"Ср. балл={student.average:.2f} Оценок={student.grade_count}")
    if student.grade_count:
        print("Оценки: " + ", ".join(f"{g:.2f}" for g in student.grades))

def main_cli(store: StudentStore, config: AppConfig):
    """Основной цикл консольного приложения."""
    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                stud_id = read_int("Введите ID нового студента: ")
                name = validate_name(input("Введите имя студента: "))
                if not store.add(stud_id, name):
                    print(f"❌ Студент с ID {stud_id} уже существует.")
                else:
                    print(f"✅ Студент {name} успешно добавлен.")
                    save_data(store, config)

            elif choice == '2':
                stud_id = read_int("Введите ID студента: ")
                grade = validate_grade(
                    read_float(f"Введите оценку ({config.grade_min:g}-{config.grade_max:g}): "), config)
                if not store.add_grade(stud_id, grade):
                    print(f"❌ Студент с ID {stud_id} не найден.")
                else:
                    print("✅ Оценка добавлена, средний балл пересчитан.")
                    save_data(store, config)

            elif choice == '3':
                if not len(store):
                    print("ℹ️ Список студентов пуст.")
                else:
                    print("\n--- Список всех студентов ---")
                    print(display.format_frame(display.summary_frame(store)))

            elif choice == '4':
                if not len(store):
                    print("ℹ️ Список студентов пуст.")
                else:
                    print("\n--- Матрица оценок ---")
                    print(display.format_frame(display.grade_matrix_frame(store)))

            elif choice == '5':
                print("Метод сортировки: 1. Пузырьком  2. Вставками  3. Слиянием")
                method = read_int("Выберите метод: ")
                print("Ключ сортировки: 1. ID  2. Средний балл")
                key = read_int("Выберите ключ: ")
                try:
                    comparisons = store.sort(method, key)
                    print(f"✅ Отсортировано (сравнений: {comparisons}).")
                except ValueError as ve:
                    print(f"❌ Ошибка сортировки: {ve}")

            elif choice == '6':
                stud_id = read_int("Введите ID для поиска: ")
                # Бинарный поиск требует порядка по ID
                store.sort(SortMethod.MERGE, SortKey.ID)
                index = store.binary_search_by_id(stud_id)
                if index is None:
                    print(f"❌ Студент с ID {stud_id} не найден.")
                else:
                    print_student_details(store.get(index))

            elif choice == '7':
                stats = processing.get_group_statistics(list(store))
                if not stats:
                    print("ℹ️ Список студентов пуст, статистика недоступна.")
                else:
                    best, worst = stats['best_student'], stats['worst_student']
                    print("\n--- Статистика по группе ---")
                    print(f"Всего студентов: {stats['total_students']}")
                    print(f"Всего оценок: {stats['total_grades']}")
                    print(f"Общий средний балл: {stats['overall_average']:.2f}")
                    print(f"Лучший средний балл: ID={best.id} {best.name} ({best.average:.2f})")
                    print(f"Худший средний балл: ID={worst.id} {worst.name} ({worst.average:.2f})")

            elif choice == '8':
                stud_id = read_int("Введите ID студента для удаления: ")
                if store.delete(stud_id):
                    print(f"✅ Студент с ID {stud_id} успешно удален.")
                    save_data(store, config)
                else:
                    print(f"❌ Студент с ID {stud_id} не найден.")

            elif choice == '9':
                stud_id = read_int("Введите ID студента: ")
                name = validate_name(input("Введите новое имя: "))
                if store.update_name(stud_id, name):
                    print("✅ Имя обновлено.")
                    save_data(store, config)
                else:
                    print(f"❌ Студент с ID {stud_id} не найден.")

            elif choice == '0':
                save_data(store, config)
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 9.")

        except errors.StudentAppError as e:
            print(f"❌ Ошибка данных: {e}")
        except MemoryError:
            # Нехватка памяти не восстанавливается, завершаем программу
            raise
        except Exception as e:
            logger.exception("Unexpected error while handling menu choice %r", choice)
            print(f"❌ Произошла непредвиденная ошибка: {e}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Консольный менеджер записей о студентах.")
    parser.add_argument("--data-file", help="JSON-файл с данными (по умолчанию data/students.json)")
    parser.add_argument("--log-level", help="уровень логирования: DEBUG, INFO, WARNING, ERROR")
    return parser

def load_config(argv: Optional[List[str]] = None) -> AppConfig:
    args = build_parser().parse_args(argv)
    config = AppConfig.from_env()
    if args.data_file:
        config = replace(config, data_file=args.data_file)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    return config

def run(argv: Optional[List[str]] = None) -> int:
    """Точка входа: читает настройки, загружает данные и запускает меню."""
    config = load_config(argv)
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    store = StudentStore()
    try:
        loaded = io_utils.load_students_from_json(config.data_file, store)
        if loaded:
            print(f"✅ Загружено {loaded} студентов из {config.data_file}.")
    except errors.StudentAppError as e:
        logger.error("Load failed: %s", e)
        print(f"⚠️ Данные не загружены: {e}")

    print("Система управления студентами")
    main_cli(store, config)
    return 0

if __name__ == '__main__':
    try:
        run()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
