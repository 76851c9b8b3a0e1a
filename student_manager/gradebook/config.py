# gradebook/config.py
"""Настройки приложения: путь к файлу данных, уровень логирования, диапазон оценок.

Значения по умолчанию можно переопределить переменными окружения
STUDENT_MANAGER_DATA_FILE и STUDENT_MANAGER_LOG_LEVEL.
"""
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DATA_FILE = Path("data") / "students.json"
ENV_DATA_FILE = "STUDENT_MANAGER_DATA_FILE"
ENV_LOG_LEVEL = "STUDENT_MANAGER_LOG_LEVEL"

@dataclass(frozen=True)
class AppConfig:
    """Неизменяемая конфигурация, проверяется при создании.

    Attributes:
        data_file: JSON-файл, из которого данные читаются при старте и куда сохраняются
        log_level: имя уровня logging (DEBUG, INFO, WARNING, ...)
        grade_min: минимальная допустимая оценка при вводе
        grade_max: максимальная допустимая оценка при вводе
    """
    data_file: Path = DEFAULT_DATA_FILE
    log_level: str = "WARNING"
    grade_min: float = 0.0
    grade_max: float = 100.0

    def __post_init__(self):
        object.__setattr__(self, "data_file", Path(self.data_file))
        object.__setattr__(self, "log_level", self.log_level.upper())
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Неизвестный уровень логирования: {self.log_level}")
        if self.grade_min > self.grade_max:
            raise ValueError("grade_min не может быть больше grade_max.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        environ = os.environ if environ is None else environ
        config = cls()
        if environ.get(ENV_DATA_FILE):
            config = replace(config, data_file=Path(environ[ENV_DATA_FILE]))
        if environ.get(ENV_LOG_LEVEL):
            config = replace(config, log_level=environ[ENV_LOG_LEVEL])
        return config
