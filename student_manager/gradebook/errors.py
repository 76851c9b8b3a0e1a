# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(StudentAppError):
    """Некорректные данные: ввод пользователя или содержимое файла данных."""
    pass

class FileProcessingError(StudentAppError):
    """Файл данных не удалось прочитать или записать."""
    pass
