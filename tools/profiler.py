"""
tools/profiler.py

Профилирование генератора на урезанном прогоне.

Полная генерация идёт часами, поэтому профилируем прогон с отсечкой
max_count: результат всегда PARTIAL и не сохраняется в файл.
"""

import time
import cProfile
import pstats
import io
from typing import Dict, Any, Optional, Tuple
from contextlib import contextmanager

from core.cubie import CubieCube
from heuristics.corner_table import CornerTable
from solvers.base import GenerationResult
from solvers.corner_generator import CornerTableGenerator

# Сколько состояний хешировать при профилировании
PROFILE_COUNT = 10_000_000


class GenerationProfiler:
    """Профилировщик прогонов генератора."""

    def __init__(self):
        self.profiles: Dict[str, cProfile.Profile] = {}
        self.stats: Dict[str, Dict[str, Any]] = {}

    @contextmanager
    def profile(self, name: str):
        """
        Контекстный менеджер для профилирования.

        Usage:
            with profiler.profile('generate'):
                # код для профилирования
        """
        profiler = cProfile.Profile()
        profiler.enable()
        start_time = time.time()

        try:
            yield
        finally:
            profiler.disable()
            self.profiles[name] = profiler
            self.stats[name] = {'elapsed_time': time.time() - start_time}

    def get_stats(self, name: str, sort_by: str = 'cumulative',
                  limit: int = 20) -> str:
        """
        Статистика профилирования в виде строки.

        Args:
            name: имя профиля
            sort_by: сортировка ('cumulative', 'time', 'calls')
            limit: количество строк
        """
        if name not in self.profiles:
            return f"No profile found for '{name}'"

        stream = io.StringIO()
        stats = pstats.Stats(self.profiles[name], stream=stream)
        stats.sort_stats(sort_by)
        stats.print_stats(limit)
        return stream.getvalue()

    def run_generation(self, max_count: int = PROFILE_COUNT,
                       table: Optional[CornerTable] = None,
                       name: str = 'generate') -> GenerationResult:
        """Прогон генератора с отсечкой под профилировщиком."""
        table = table if table is not None else CornerTable()
        generator = CornerTableGenerator(progress_interval=0)

        with self.profile(name):
            result = generator.generate(table, CubieCube.solved(), max_count=max_count)

        self.stats[name].update({
            'status': result.status.value,
            'hashed': result.stats.hashed,
            'traversed': result.stats.traversed,
        })
        return result


def profile_generation(max_count: int = PROFILE_COUNT, sort_by: str = 'cumulative',
                       limit: int = 20) -> Tuple[GenerationResult, str]:
    """
    Профилирует урезанную генерацию.

    Returns:
        (результат прогона, отчёт pstats)
    """
    profiler = GenerationProfiler()
    result = profiler.run_generation(max_count)
    return result, profiler.get_stats('generate', sort_by=sort_by, limit=limit)
