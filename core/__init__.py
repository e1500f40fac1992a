"""
core - Модель куба

Конфигурация на уровне кубиков, 18 ходов и отсечение ходов.
"""

from .cubie import (
    CubieCube, CornerCube, CORNER_NAMES, EDGE_NAMES, CORNER_SLOTS, permutation_parity
)
from .moves import (
    FACES, MOVE_COUNT, MOVE_NAMES, MOVE_IDS, MOVE_TABLES,
    face_of, inverse_move, apply_move, apply_corner_move, apply_move_corners,
    apply_sequence
)
from .pruning import OPPOSITE_FACE, should_skip, is_canonical_sequence

__all__ = [
    'CubieCube', 'CornerCube', 'CORNER_NAMES', 'EDGE_NAMES', 'CORNER_SLOTS', 'permutation_parity',
    'FACES', 'MOVE_COUNT', 'MOVE_NAMES', 'MOVE_IDS', 'MOVE_TABLES',
    'face_of', 'inverse_move', 'apply_move', 'apply_corner_move', 'apply_move_corners',
    'apply_sequence',
    'OPPOSITE_FACE', 'should_skip', 'is_canonical_sequence',
]
