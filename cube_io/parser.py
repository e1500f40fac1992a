"""
cube_io/parser.py

Разбор нотации ходов и явного описания углов.
"""

import re
from typing import List, Sequence

from core.cubie import CubieCube, CORNER_NAMES
from core.moves import MOVE_IDS, MOVE_NAMES
from utils.error_handling import MoveParseError, InvalidCubeError, validate_cube

_TOKEN = re.compile(r"^([URFDLB])(2|'|’|)$")
_CORNER_TOKEN = re.compile(r"^([URFDLB]{3})([012]?)$")


def parse_moves(text: str) -> List[int]:
    """
    Разбирает строку вида "R U2 F' D".

    Разделители — пробелы и запятые. "R2'" не допускается.

    Returns:
        Список move_id

    Raises:
        MoveParseError: при неизвестном токене
    """
    moves = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        match = _TOKEN.match(token)
        if not match:
            raise MoveParseError(
                f"Неизвестный ход '{token}'. Ожидается: U R F D L B с суффиксом '' / 2 / '"
            )
        face, suffix = match.groups()
        if suffix == '’':
            suffix = "'"
        moves.append(MOVE_IDS[face + suffix])
    return moves


def format_moves(moves: Sequence[int]) -> str:
    return ' '.join(MOVE_NAMES[m] for m in moves)


def parse_corners(text: str) -> CubieCube:
    """
    Разбирает явное описание углов по слотам URF UFL ULB UBR DFR DLF DBL DRB.

    Формат: 8 токенов "<кубик><поворот>", например "UFL1 URF2 ULB UBR ...".
    Поворот по умолчанию 0. Рёбра считаются собранными (с поправкой чётности).

    Raises:
        MoveParseError: если формат неверен
        InvalidCubeError: если конфигурация недостижима
    """
    tokens = [t for t in re.split(r"[\s,]+", text.strip().upper()) if t]
    if len(tokens) != 8:
        raise MoveParseError(f"Нужно 8 углов, получено {len(tokens)}")

    cp = []
    co = []
    for token in tokens:
        match = _CORNER_TOKEN.match(token)
        if not match or match.group(1) not in CORNER_NAMES:
            raise MoveParseError(f"Неизвестный угол '{token}'. Ожидается: {' '.join(CORNER_NAMES)}")
        name, twist = match.groups()
        cp.append(CORNER_NAMES.index(name))
        co.append(int(twist) if twist else 0)

    if len(set(cp)) != 8:
        raise InvalidCubeError("Каждый угол должен встречаться ровно один раз")

    cube = CubieCube.from_corners(cp, co)
    validate_cube(cube)
    return cube
