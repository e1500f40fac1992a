"""
heuristics - Таблица углов

Экспортирует:
- Кодировщик состояния углов
- Полубайтовую таблицу расстояний
- Оракул нижней границы
"""

from .corner_index import (
    CORNER_STATES,
    ORIENTATION_STATES,
    PERMUTATION_STATES,
    encode_corners,
    decode_corners,
    permutation_rank,
    orientation_rank,
    lehmer_digits
)
from .corner_table import CornerTable, TABLE_BYTES, UNSET, MAX_NIBBLE
from .pattern_db import (
    get_corner_table,
    set_corner_table,
    reset_corner_table,
    corner_heuristic
)

__all__ = [
    'CORNER_STATES',
    'ORIENTATION_STATES',
    'PERMUTATION_STATES',
    'encode_corners',
    'decode_corners',
    'permutation_rank',
    'orientation_rank',
    'lehmer_digits',
    'CornerTable',
    'TABLE_BYTES',
    'UNSET',
    'MAX_NIBBLE',
    'get_corner_table',
    'set_corner_table',
    'reset_corner_table',
    'corner_heuristic',
]
