"""
heuristics/corner_index.py

Кодирование конфигурации углов в плотный индекс [0, 88179840).

Индекс = ранг перестановки (код Лемера, смешанная система счисления)
         * 3^7 + ориентации первых 7 углов в троичной системе.
Ориентация 8-го угла определяется остальными, поэтому 8! * 3^7 состояний.
"""

from math import factorial
from typing import Sequence, Tuple

from core.cubie import CORNER_SLOTS
from utils.error_handling import IndexDomainError

ORIENTATION_STATES = 3 ** 7            # 2187
PERMUTATION_STATES = factorial(8)      # 40320
CORNER_STATES = PERMUTATION_STATES * ORIENTATION_STATES  # 88179840


def lehmer_digits(labels: Sequence[int]) -> Tuple[int, ...]:
    """
    Первые 7 цифр факториальной системы для перестановки из 8 меток.

    slot_value[k] — сколько ещё не использованных меток меньше k.
    Каждая обработанная метка уменьшает значения всех меток после неё.
    """
    slot_value = [0, 1, 2, 3, 4, 5, 6, 7]
    digits = []
    for label in labels[:7]:
        digits.append(slot_value[label])
        for k in range(label + 1, 8):
            slot_value[k] -= 1
    return tuple(digits)


def permutation_rank(cp: Sequence[int]) -> int:
    """Ранг перестановки углов в [0, 40320)."""
    rank = 0
    for digit, k in zip(lehmer_digits(cp), range(7, 0, -1)):
        rank += digit * factorial(k)
    return rank


def orientation_rank(co: Sequence[int]) -> int:
    """Ранг ориентаций первых 7 углов в [0, 2187)."""
    rank = 0
    for o in co[:7]:
        rank = rank * 3 + o
    return rank


def encode_corners(cube) -> int:
    """
    Индекс углов конфигурации.

    Args:
        cube: объект с методом corner(slot) -> (метка, ориентация)

    Returns:
        Целое в [0, 88179840)

    Raises:
        IndexDomainError: если индекс вне диапазона (дефект или недостижимая позиция)
    """
    labels = []
    orientations = []
    for slot in CORNER_SLOTS:
        label, orientation = cube.corner(slot)
        labels.append(label)
        orientations.append(orientation)

    index = permutation_rank(labels) * ORIENTATION_STATES + orientation_rank(orientations)

    if not 0 <= index < CORNER_STATES:
        raise IndexDomainError(
            f"Индекс {index} вне [0, {CORNER_STATES}): labels={labels}, "
            f"orientations={orientations}"
        )
    return index


def decode_corners(index: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Обратное преобразование: индекс → (cp, co).

    Raises:
        IndexDomainError: если индекс вне диапазона
    """
    if not 0 <= index < CORNER_STATES:
        raise IndexDomainError(f"Индекс {index} вне [0, {CORNER_STATES})")

    perm_rank, orient_rank = divmod(index, ORIENTATION_STATES)

    co = [0] * 8
    for slot in range(6, -1, -1):
        orient_rank, co[slot] = divmod(orient_rank, 3)
    co[7] = (-sum(co[:7])) % 3

    available = list(range(8))
    cp = []
    for k in range(7, 0, -1):
        digit, perm_rank = divmod(perm_rank, factorial(k))
        cp.append(available.pop(digit))
    cp.append(available[0])

    return tuple(cp), tuple(co)
