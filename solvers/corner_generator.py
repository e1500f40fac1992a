"""
solvers/corner_generator.py

Генерация таблицы углов итеративным углублением (IDDFS) с явным стеком.

Алгоритм:
1. Стек пуст → глубина += 1, отметки уровня очищаются, в стек кладётся корень.
2. Узел на целевой глубине → пишем расстояние в таблицу, если ячейка пуста
   (первая запись выигрывает, повтор — дубликат).
3. Узел мельче целевой глубины → раскрываем 18 ходов, кроме отсечённых
   предикатом; ребёнка кладём в стек, только если на этом уровне он ещё
   не встречался на расстоянии <= текущего + 1.
4. Стоп, когда захешированы все 88179840 индексов.

Глобальное множество посещённых не нужно: уровни идут по возрастанию,
поэтому первая запись индекса всегда на минимальном расстоянии.
"""

import time
from typing import Callable, Optional, Tuple

from core.cubie import CubieCube
from core.moves import MOVE_COUNT, apply_move_corners
from core.pruning import should_skip
from heuristics.corner_index import CORNER_STATES, encode_corners
from heuristics.corner_table import CornerTable, MAX_NIBBLE
from utils.error_handling import GenerationError
from utils.logging import get_logger
from utils.monitoring import ProgressMonitor

from .base import GeneratorStats, GenerationResult, GenerationStatus
from .frontier import FrontierNode, FrontierStack

# Отчёт каждые 2^18 извлечений со стека
PROGRESS_INTERVAL = 1 << 18

# 15 в буфере отметок означает «не встречали», глубже 14 уровней хранить нечего
MAX_LEVEL = MAX_NIBBLE - 1

# Наблюдаемая максимальная глубина для углов (HTM)
EXPECTED_MAX_DEPTH = 11


class CornerTableGenerator:
    """
    Генератор таблицы углов.

    Коллабораторы передаются явно, по умолчанию — модель куба из core.
    """

    def __init__(self, apply_move: Callable = apply_move_corners,
                 should_skip: Callable = should_skip,
                 encode: Callable = encode_corners,
                 progress_interval: int = PROGRESS_INTERVAL,
                 states: int = CORNER_STATES,
                 verbose: bool = False):
        """
        Args:
            apply_move: (конфигурация, move_id) -> конфигурация
            should_skip: (move_id, предыдущий move_id | None) -> bool
            encode: конфигурация -> индекс
            states: размер кодомена encode (сколько индексов нужно покрыть)
            progress_interval: период отчёта о прогрессе (0 — без отчётов)
            verbose: подробный лог уровней
        """
        self.apply_move = apply_move
        self.should_skip = should_skip
        self.encode = encode
        self.states = states
        self.progress_interval = progress_interval
        self.verbose = verbose
        self.stats = GeneratorStats()
        self.logger = get_logger()

    def generate(self, table: CornerTable, solved: CubieCube,
                 max_depth: Optional[int] = None,
                 max_count: Optional[int] = None) -> GenerationResult:
        """
        Заполняет таблицу расстояниями от solved.

        Таблица принадлежит вызывающему и очищается перед началом.

        Args:
            table: таблица для заполнения
            solved: опорная конфигурация (расстояние 0)
            max_depth: остановиться после полного прохода этого уровня
            max_count: остановиться, захешировав столько состояний (профилирование)

        Returns:
            GenerationResult: COMPLETE или PARTIAL (намеренная отсечка)

        Raises:
            GenerationError: поиск исчерпан, а кодомен не покрыт
        """
        self.stats = stats = GeneratorStats()
        states = self.states
        monitor = ProgressMonitor(states, self.progress_interval,
                                  max_level=EXPECTED_MAX_DEPTH)

        apply_move = self.apply_move
        should_skip = self.should_skip
        encode = self.encode

        table.clear()
        markers = CornerTable.markers()
        stack = FrontierStack()
        depth = -1
        start = time.time()

        self._log(f"Генерация таблицы углов: {states} состояний")

        try:
            while stats.hashed < states:
                if not stack:
                    if max_depth is not None and depth >= max_depth:
                        return self._finish(GenerationStatus.PARTIAL, depth, start, stack,
                                            f"достигнута max_depth={max_depth}")
                    if depth >= MAX_LEVEL:
                        stats.depth = depth
                        stats.time_elapsed = time.time() - start
                        raise GenerationError(
                            f"Уровень {depth + 1} превышает {MAX_LEVEL}, а захешировано "
                            f"{stats.hashed}/{states}"
                        )
                    depth += 1
                    self._log(f"Уровень {depth} (захешировано {stats.hashed})")
                    monitor.start_level(depth)
                    markers.clear(MAX_NIBBLE)
                    stack.push(FrontierNode(solved, None, 0))
                    stats.pushed += 1

                node = stack.pop()
                stats.traversed += 1
                monitor.tick(stats.hashed, depth, stats.traversed)

                if node.distance == depth:
                    if table.set_if_unset(encode(node.cube), depth):
                        stats.hashed += 1
                        if (max_count is not None and stats.hashed >= max_count
                                and stats.hashed < states):
                            return self._finish(GenerationStatus.PARTIAL, depth, start, stack,
                                                f"достигнут max_count={max_count}")
                    else:
                        stats.duplicates += 1
                    continue

                child_distance = node.distance + 1
                for move in range(MOVE_COUNT):
                    if should_skip(move, node.move):
                        stats.moves_pruned += 1
                        continue

                    child = apply_move(node.cube, move)
                    index = encode(child)
                    if markers.get(index) <= child_distance:
                        stats.marker_skips += 1
                        continue

                    markers.set(index, child_distance)
                    stack.push(FrontierNode(child, move, child_distance))
                    stats.pushed += 1
        finally:
            monitor.finish_level()
            stats.level_times = dict(monitor.level_times)
            stats.max_stack = max(stats.max_stack, stack.max_size)
            del markers

        return self._finish(GenerationStatus.COMPLETE, depth, start, stack)

    def _finish(self, status: GenerationStatus, depth: int, start: float,
                stack: FrontierStack, reason: str = "") -> GenerationResult:
        stats = self.stats
        stats.depth = depth
        stats.time_elapsed = time.time() - start
        stats.max_stack = stack.max_size
        stack.clear()

        if status is GenerationStatus.COMPLETE:
            self.logger.info(f"Таблица углов готова: {stats}")
        else:
            self.logger.warning(f"Генерация прервана ({reason}): {stats}")
        return GenerationResult(status, stats, reason)

    def _log(self, message: str) -> None:
        if self.verbose:
            self.logger.info(f"[{self.__class__.__name__}] {message}")


def generate_corner_table(solved: Optional[CubieCube] = None,
                          **kwargs) -> Tuple[CornerTable, GenerationResult]:
    """
    Выделяет таблицу и заполняет её.

    kwargs делятся между конструктором генератора и generate():
    max_depth / max_count уходят в generate(), остальное — в конструктор.
    """
    run_kwargs = {k: kwargs.pop(k) for k in ('max_depth', 'max_count') if k in kwargs}
    table = CornerTable()
    generator = CornerTableGenerator(**kwargs)
    result = generator.generate(table, solved or CubieCube.solved(), **run_kwargs)
    return table, result
