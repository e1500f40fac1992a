"""
analysis/verify.py

Независимая проверка таблицы: обычный BFS от собранного состояния.

BFS работает с сырыми кортежами (cp, co) и не использует ни кодировщик
для дедупликации, ни отсечение ходов, ни буфер отметок. Поэтому он
ловит ошибки любой из этих частей генератора.
"""

import random
from collections import deque
from typing import Dict, List, Optional, Tuple

from core.cubie import CubieCube
from core.moves import MOVE_COUNT, apply_corner_move
from heuristics.corner_index import encode_corners
from heuristics.corner_table import CornerTable
from utils.logging import get_logger

CornerState = Tuple[Tuple[int, ...], Tuple[int, ...]]


def bfs_corner_distances(max_depth: int,
                         start: Optional[CubieCube] = None) -> Dict[CornerState, int]:
    """
    Точные расстояния всех состояний углов до глубины max_depth включительно.

    Returns:
        {(cp, co): расстояние}
    """
    start = start or CubieCube.solved()
    root = (start.cp, start.co)
    distances: Dict[CornerState, int] = {root: 0}
    queue = deque([root])

    while queue:
        state = queue.popleft()
        distance = distances[state]
        if distance >= max_depth:
            continue
        cp, co = state
        for move in range(MOVE_COUNT):
            child = apply_corner_move(cp, co, move)
            if child not in distances:
                distances[child] = distance + 1
                queue.append(child)

    return distances


def depth_counts(distances: Dict[CornerState, int]) -> List[int]:
    """Число состояний на каждой глубине."""
    counts = [0] * (max(distances.values()) + 1)
    for d in distances.values():
        counts[d] += 1
    return counts


def cross_check_table(table: CornerTable, max_depth: int,
                      sample: Optional[int] = None,
                      seed: int = 0) -> List[Tuple[int, int, int]]:
    """
    Сверяет таблицу с BFS до глубины max_depth.

    Args:
        table: проверяемая таблица
        max_depth: глубина BFS
        sample: проверить только случайную выборку из стольких состояний
        seed: зерно выборки

    Returns:
        Список расхождений (index, в таблице, по BFS); пустой — всё сходится
    """
    logger = get_logger()
    distances = bfs_corner_distances(max_depth)
    states = list(distances.items())
    if sample is not None and sample < len(states):
        states = random.Random(seed).sample(states, sample)

    mismatches = []
    for (cp, co), expected in states:
        index = encode_corners(CubieCube(cp, co))
        actual = table.get(index)
        if actual != expected or not table.is_set(index):
            mismatches.append((index, actual, expected))

    if mismatches:
        logger.error(f"Расхождений с BFS: {len(mismatches)} из {len(states)}")
    else:
        logger.info(f"Проверено {len(states)} состояний до глубины {max_depth}: расхождений нет")
    return mismatches
