"""
core/pruning.py

Отсечение заведомо избыточных последовательностей ходов.

- Два хода одной грани подряд всегда сводятся к одному ходу (или к нулю).
- Ходы противоположных граней коммутируют (U D == D U), поэтому
  допускается только порядок «меньшая грань, затем большая».
"""

from typing import Optional

from .moves import face_of

# U↔D, R↔L, F↔B
OPPOSITE_FACE = (3, 4, 5, 0, 1, 2)


def should_skip(move: int, previous: Optional[int]) -> bool:
    """
    True, если ход move после previous избыточен.

    previous=None — корень поиска, ничего не отсекаем.
    """
    if previous is None:
        return False
    face = face_of(move)
    prev_face = face_of(previous)
    if face == prev_face:
        return True
    return OPPOSITE_FACE[prev_face] == face and face < prev_face


def is_canonical_sequence(moves) -> bool:
    """Последовательность не содержит отсекаемых пар."""
    previous = None
    for move in moves:
        if should_skip(move, previous):
            return False
        previous = move
    return True
