"""
utils/logging.py

Логирование генератора и хранилища таблицы.

Прогресс генерации идёт в stderr (боковой канал), чтобы не смешиваться
с выводом CLI. Для многочасовых прогонов лог дублируется в файл.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "corner_pdb"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return handler


class PdbLogger:
    """Обёртка над логгером corner_pdb: один stderr-handler на процесс."""

    def __init__(self, name: str = LOGGER_NAME, level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Повторное создание не добавляет второй handler
        if not self.logger.handlers:
            _attach(self.logger, logging.StreamHandler(sys.stderr), level)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers (--verbose)."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)


_default_logger: Optional[PdbLogger] = None


def get_logger() -> PdbLogger:
    """Общий логгер процесса."""
    global _default_logger
    if _default_logger is None:
        _default_logger = PdbLogger()
    return _default_logger


def setup_file_logging(log_file: str = "corner_pdb.log",
                       level: int = logging.INFO) -> logging.Handler:
    """
    Дублирует лог в файл (main.py --log-file).

    Returns:
        добавленный handler, чтобы его можно было снять
    """
    logger = get_logger().logger
    return _attach(logger, logging.FileHandler(log_file, encoding='utf-8'), level)
