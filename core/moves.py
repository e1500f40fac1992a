"""
core/moves.py

18 ходов метрики HTM: 6 граней × (четверть по часовой, двойной, против часовой).

move_id = face * 3 + turn
  face: U=0 R=1 F=2 D=3 L=4 B=5
  turn: 0 — X, 1 — X2, 2 — X'

Таблицы всех 18 ходов строятся из шести базовых поворотов
композицией кубиков.
"""

from typing import Iterable, List, Tuple

from .cubie import CornerCube, CubieCube

FACES = "URFDLB"
TURN_SUFFIXES = ("", "2", "'")
MOVE_COUNT = 18

MOVE_NAMES: Tuple[str, ...] = tuple(
    face + suffix for face in FACES for suffix in TURN_SUFFIXES
)
MOVE_IDS = {name: i for i, name in enumerate(MOVE_NAMES)}

# Базовые повороты граней по часовой стрелке: (cp, co, ep, eo)
_BASIC_MOVES = {
    'U': ((3, 0, 1, 2, 4, 5, 6, 7), (0, 0, 0, 0, 0, 0, 0, 0),
          (3, 0, 1, 2, 4, 5, 6, 7, 8, 9, 10, 11), (0,) * 12),
    'R': ((4, 1, 2, 0, 7, 5, 6, 3), (2, 0, 0, 1, 1, 0, 0, 2),
          (8, 1, 2, 3, 11, 5, 6, 7, 4, 9, 10, 0), (0,) * 12),
    'F': ((1, 5, 2, 3, 0, 4, 6, 7), (1, 2, 0, 0, 2, 1, 0, 0),
          (0, 9, 2, 3, 4, 8, 6, 7, 1, 5, 10, 11), (0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0)),
    'D': ((0, 1, 2, 3, 5, 6, 7, 4), (0, 0, 0, 0, 0, 0, 0, 0),
          (0, 1, 2, 3, 5, 6, 7, 4, 8, 9, 10, 11), (0,) * 12),
    'L': ((0, 2, 6, 3, 4, 1, 5, 7), (0, 1, 2, 0, 0, 2, 1, 0),
          (0, 1, 10, 3, 4, 5, 9, 7, 8, 2, 6, 11), (0,) * 12),
    'B': ((0, 1, 3, 7, 4, 5, 2, 6), (0, 0, 1, 2, 0, 0, 2, 1),
          (0, 1, 2, 11, 4, 5, 6, 10, 8, 9, 3, 7), (0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 1)),
}


def _build_move_cubes() -> List[CubieCube]:
    cubes = []
    for face in FACES:
        basic = CubieCube(*_BASIC_MOVES[face])
        quarter = basic
        half = quarter.multiply(basic)
        counter = half.multiply(basic)
        cubes.extend([quarter, half, counter])
    return cubes


MOVE_CUBES: Tuple[CubieCube, ...] = tuple(_build_move_cubes())

# Плоские таблицы для горячего цикла: (cp, co, ep, eo) каждого хода
MOVE_TABLES = tuple((m.cp, m.co, m.ep, m.eo) for m in MOVE_CUBES)


def face_of(move: int) -> int:
    return move // 3


def inverse_move(move: int) -> int:
    """X ↔ X', X2 остаётся X2."""
    face, turn = divmod(move, 3)
    return face * 3 + (2 - turn)


def apply_move(cube: CubieCube, move: int) -> CubieCube:
    """
    Применяет ход к конфигурации и возвращает новую.

    Чистая функция: исходный куб не меняется.
    """
    mcp, mco, mep, meo = MOVE_TABLES[move]
    cp, co, ep, eo = cube.cp, cube.co, cube.ep, cube.eo
    return CubieCube(
        tuple(cp[j] for j in mcp),
        tuple((co[j] + o) % 3 for j, o in zip(mcp, mco)),
        tuple(ep[j] for j in mep),
        tuple((eo[j] + o) % 2 for j, o in zip(mep, meo)),
    )


def apply_corner_move(cp: Tuple[int, ...], co: Tuple[int, ...],
                      move: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """То же, что apply_move, только для углов (без создания куба)."""
    mcp, mco, _, _ = MOVE_TABLES[move]
    return (tuple(cp[j] for j in mcp),
            tuple((co[j] + o) % 3 for j, o in zip(mcp, mco)))


def apply_move_corners(cube, move: int) -> CornerCube:
    """
    apply_move для углов: результат — CornerCube, рёбра не вычисляются.

    cube — любой объект с cp/co (CubieCube или CornerCube).
    """
    mcp, mco, _, _ = MOVE_TABLES[move]
    cp, co = cube.cp, cube.co
    return CornerCube(tuple(cp[j] for j in mcp),
                      tuple((co[j] + o) % 3 for j, o in zip(mcp, mco)))


def apply_sequence(cube: CubieCube, moves: Iterable[int]) -> CubieCube:
    for move in moves:
        cube = apply_move(cube, move)
    return cube
