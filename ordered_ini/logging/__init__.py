"""Module de logging."""

from ordered_ini.logging.base import Logger
from ordered_ini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
