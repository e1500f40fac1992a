"""
cube_io/visualizer.py

Текстовый вывод: углы куба, распределение расстояний, статистика.
"""

from typing import List, Optional

from core.cubie import CubieCube, CORNER_NAMES


def format_corners(cube: CubieCube) -> str:
    """
    Углы по слотам: "URF:UFL1 UFL:URF2 ...".

    Ноль в повороте опускается.
    """
    parts = []
    for slot, name in enumerate(CORNER_NAMES):
        label, twist = cube.corner(slot)
        parts.append(f"{name}:{CORNER_NAMES[label]}{twist or ''}")
    return ' '.join(parts)


def format_histogram(histogram: List[int], root_known: bool = True,
                     total: Optional[int] = None) -> str:
    """
    Таблица распределения расстояний.

    Args:
        histogram: 16 счётчиков по значениям полубайта
        root_known: в счётчике нулей ровно один корень, остальные — пустые
        total: размер кодомена для процентов
    """
    total = total or sum(histogram)
    lines = ["Расстояние   Состояний      %"]
    lines.append("-" * 34)

    zero = histogram[0]
    if root_known and zero:
        lines.append(f"{0:>10} {1:>12} {100.0 / total:>8.4f}")
        unset = zero - 1
    else:
        unset = 0
        lines.append(f"{0:>10} {zero:>12} {100.0 * zero / total:>8.4f}")

    for distance in range(1, len(histogram)):
        count = histogram[distance]
        if count:
            lines.append(f"{distance:>10} {count:>12} {100.0 * count / total:>8.4f}")

    if unset:
        lines.append(f"{'не задано':>10} {unset:>12} {100.0 * unset / total:>8.4f}")
    return '\n'.join(lines)


def format_stats(stats) -> str:
    """Многострочный вывод GeneratorStats."""
    lines = [
        f"  Захешировано:        {stats.hashed}",
        f"  Извлечено со стека:  {stats.traversed}",
        f"  Положено в стек:     {stats.pushed}",
        f"  Дубликаты:           {stats.duplicates}",
        f"  Отсечено ходов:      {stats.moves_pruned}",
        f"  Подавлено отметкой:  {stats.marker_skips}",
        f"  Пик стека:           {stats.max_stack}",
        f"  Глубина:             {stats.depth}",
        f"  Время:               {stats.time_elapsed:.3f}s",
    ]
    return '\n'.join(lines)
