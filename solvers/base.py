"""
solvers/base.py

Статистика и результат генерации таблицы.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class GenerationStatus(Enum):
    """COMPLETE — весь кодомен покрыт; PARTIAL — намеренная отсечка."""
    COMPLETE = "complete"
    PARTIAL = "partial"


@dataclass
class GeneratorStats:
    """Статистика работы генератора."""
    hashed: int = 0           # записано в таблицу
    traversed: int = 0        # извлечено со стека
    pushed: int = 0           # положено в стек
    duplicates: int = 0       # повторные находки на целевой глубине
    moves_pruned: int = 0     # ходы, отсечённые предикатом
    marker_skips: int = 0     # дети, подавленные отметками уровня
    max_stack: int = 0
    depth: int = -1
    time_elapsed: float = 0.0
    level_times: Dict[int, float] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"Hashed: {self.hashed}, "
            f"Traversed: {self.traversed}, "
            f"Duplicates: {self.duplicates}, "
            f"Depth: {self.depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


@dataclass
class GenerationResult:
    status: GenerationStatus
    stats: GeneratorStats
    reason: str = ""

    @property
    def complete(self) -> bool:
        return self.status is GenerationStatus.COMPLETE

    def __bool__(self) -> bool:
        return self.complete
