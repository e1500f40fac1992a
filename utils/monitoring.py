"""
utils/monitoring.py

Мониторинг прогресса генерации и времени операций.
"""

import time
from functools import wraps
from typing import Dict, List, Optional

from .logging import get_logger


class ProgressMonitor:
    """
    Периодический отчёт о ходе генерации.

    Чисто наблюдательный: не влияет на результат поиска.
    """

    def __init__(self, total: int, interval: int = 1 << 18, max_level: int = 11):
        """
        Args:
            total: размер кодомена (сколько состояний нужно захешировать)
            interval: каждые сколько извлечений со стека печатать отчёт
            max_level: ожидаемая максимальная глубина (для строки отчёта)
        """
        self.total = total
        # Маска работает только для степеней двойки
        self.mask = interval - 1 if interval & (interval - 1) == 0 else None
        self.interval = interval
        self.max_level = max_level
        self.level_times: Dict[int, float] = {}
        self.reports: int = 0
        self.logger = get_logger()
        self._level_start: Optional[float] = None
        self._level: Optional[int] = None

    def should_report(self, traversed: int) -> bool:
        if self.interval <= 0:
            return False
        if self.mask is not None:
            return (traversed & self.mask) == self.mask
        return traversed % self.interval == 0

    def format_progress(self, hashed: int, depth: int, traversed: int) -> str:
        percent = 100.0 * hashed / self.total if self.total else 0.0
        return (f"{hashed}/{self.total} hashed, on level:{depth}/{self.max_level}, "
                f"total traversed:{traversed} {percent:.1f}%")

    def tick(self, hashed: int, depth: int, traversed: int) -> None:
        """Вызывается на каждом извлечении со стека."""
        if self.should_report(traversed):
            self.reports += 1
            self.logger.info(self.format_progress(hashed, depth, traversed))

    def start_level(self, depth: int) -> None:
        """Закрывает предыдущий уровень и начинает отсчёт нового."""
        self.finish_level()
        self._level = depth
        self._level_start = time.perf_counter()

    def finish_level(self) -> None:
        if self._level is None:
            return
        elapsed = time.perf_counter() - self._level_start
        self.level_times[self._level] = elapsed
        self.logger.debug(f"Уровень {self._level} пройден за {elapsed:.3f}s")
        self._level = None
        self._level_start = None

    def level_summary(self) -> List[str]:
        return [f"level {d}: {t:.3f}s" for d, t in sorted(self.level_times.items())]


def monitor_time(operation: str):
    """
    Декоратор: логирует время выполнения операции (debug).

    Usage:
        @monitor_time('save_table')
        def save_table(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start
                get_logger().debug(f"{operation}: {elapsed:.3f}s")
        return wrapper
    return decorator
