"""
tests/test_cubie_moves.py

Тесты модели куба:
- таблицы 18 ходов (порядок, обратные ходы, сохранение инвариантов);
- проверка достижимости конфигурации (validate_cube);
- правило отсечения избыточных пар ходов.
"""

import random

import pytest

from core.cubie import CubieCube, CornerCube, permutation_parity, SOLVED_CP
from core.moves import (
    MOVE_COUNT, MOVE_NAMES, MOVE_IDS, apply_move, apply_corner_move, apply_move_corners,
    apply_sequence, inverse_move, face_of,
)
from core.pruning import should_skip, is_canonical_sequence
from heuristics.corner_index import encode_corners
from utils.error_handling import InvalidCubeError, validate_cube


def _random_cube(seed: int, length: int = 25) -> CubieCube:
    rng = random.Random(seed)
    moves = [rng.randrange(MOVE_COUNT) for _ in range(length)]
    return apply_sequence(CubieCube.solved(), moves)


def test_move_names_order():
    """move_id = грань * 3 + поворот, грани в порядке URFDLB."""
    assert len(MOVE_NAMES) == MOVE_COUNT == 18
    assert MOVE_NAMES[:3] == ("U", "U2", "U'")
    assert MOVE_IDS["R"] == 3
    assert MOVE_IDS["B'"] == 17
    assert face_of(MOVE_IDS["D2"]) == 3


@pytest.mark.parametrize("face", "URFDLB")
def test_quarter_turn_has_order_four(solved_cube, face):
    """Четыре четверти одной грани возвращают собранный куб."""
    move = MOVE_IDS[face]
    cube = solved_cube
    for i in range(3):
        cube = apply_move(cube, move)
        assert not cube.is_solved(), f"{face} x{i + 1} не должен собирать куб"
    cube = apply_move(cube, move)
    assert cube.is_solved()


@pytest.mark.parametrize("move", range(MOVE_COUNT))
def test_inverse_move_undoes_move(move):
    cube = _random_cube(move)
    assert apply_move(apply_move(cube, move), inverse_move(move)) == cube


def test_half_turn_is_two_quarters(solved_cube):
    for face in "URFDLB":
        twice = apply_sequence(solved_cube, [MOVE_IDS[face]] * 2)
        assert twice == apply_move(solved_cube, MOVE_IDS[face + "2"]), face


def test_moves_preserve_invariants():
    """После любых ходов конфигурация остаётся достижимой."""
    for seed in range(20):
        cube = _random_cube(seed)
        assert validate_cube(cube) is True
        assert sum(cube.co) % 3 == 0
        assert permutation_parity(cube.cp) == permutation_parity(cube.ep)


def test_apply_move_is_pure(solved_cube):
    before = CubieCube(solved_cube.cp, solved_cube.co, solved_cube.ep, solved_cube.eo)
    apply_move(solved_cube, MOVE_IDS["R"])
    assert solved_cube == before


def test_corner_move_matches_full_move():
    cube = _random_cube(7)
    for move in range(MOVE_COUNT):
        full = apply_move(cube, move)
        assert apply_corner_move(cube.cp, cube.co, move) == full.corners()


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_corner_only_move_matches_full_move(seed):
    cube = _random_cube(seed)
    corners = CornerCube.from_cube(cube)
    for move in range(MOVE_COUNT):
        full = apply_move(cube, move)
        from_full = apply_move_corners(cube, move)
        from_corners = apply_move_corners(corners, move)
        assert isinstance(from_full, CornerCube)
        assert from_full == from_corners == CornerCube.from_cube(full)
        assert from_corners.corners() == full.corners()
        assert from_corners.corner(0) == full.corner(0)
        assert encode_corners(from_corners) == encode_corners(full)


def test_u_and_d_do_not_twist_corners(solved_cube):
    for name in ("U", "U'", "D2"):
        assert apply_move(solved_cube, MOVE_IDS[name]).co == (0,) * 8


def test_r_twists_corners(solved_cube):
    cube = apply_move(solved_cube, MOVE_IDS["R"])
    assert cube.cp == (4, 1, 2, 0, 7, 5, 6, 3)
    assert cube.co == (2, 0, 0, 1, 1, 0, 0, 2)


def test_sexy_move_has_order_six(solved_cube):
    sexy = [MOVE_IDS[m] for m in ("R", "U", "R'", "U'")]
    cube = solved_cube
    for _ in range(6):
        cube = apply_sequence(cube, sexy)
    assert cube.is_solved()


def test_from_corners_fixes_edge_parity():
    """Одиночная перестановка углов дополняется перестановкой рёбер."""
    cp = (1, 0) + SOLVED_CP[2:]
    cube = CubieCube.from_corners(cp, (0,) * 8)
    assert validate_cube(cube)
    assert cube.ep[6] == 7 and cube.ep[7] == 6


def test_validate_cube_rejects_twisted_corner():
    with pytest.raises(InvalidCubeError):
        validate_cube(CubieCube(co=(1, 0, 0, 0, 0, 0, 0, 0)))


def test_validate_cube_rejects_flipped_edge():
    with pytest.raises(InvalidCubeError):
        validate_cube(CubieCube(eo=(1,) + (0,) * 11))


def test_validate_cube_rejects_parity_mismatch():
    with pytest.raises(InvalidCubeError):
        validate_cube(CubieCube(cp=(1, 0, 2, 3, 4, 5, 6, 7)))


def test_validate_cube_rejects_bad_permutation():
    with pytest.raises(InvalidCubeError):
        validate_cube(CubieCube(cp=(0, 0, 2, 3, 4, 5, 6, 7)))


def test_should_skip_root_allows_everything():
    assert not any(should_skip(move, None) for move in range(MOVE_COUNT))


def test_should_skip_same_face():
    assert should_skip(MOVE_IDS["R2"], MOVE_IDS["R"])
    assert should_skip(MOVE_IDS["U"], MOVE_IDS["U'"])


def test_should_skip_opposite_faces_in_one_order_only():
    """U D разрешено, D U отсекается (ходы коммутируют)."""
    assert not should_skip(MOVE_IDS["D"], MOVE_IDS["U"])
    assert should_skip(MOVE_IDS["U"], MOVE_IDS["D"])
    assert not should_skip(MOVE_IDS["L2"], MOVE_IDS["R"])
    assert should_skip(MOVE_IDS["R"], MOVE_IDS["L'"])


def test_should_skip_unrelated_faces():
    assert not should_skip(MOVE_IDS["F"], MOVE_IDS["R"])
    assert not should_skip(MOVE_IDS["R"], MOVE_IDS["F"])


def test_should_skip_counts_per_previous_move():
    """После хода грани U..F отсекается 3 хода, после D..B — 6."""
    for previous in range(MOVE_COUNT):
        skipped = sum(should_skip(move, previous) for move in range(MOVE_COUNT))
        expected = 3 if face_of(previous) < 3 else 6
        assert skipped == expected, MOVE_NAMES[previous]


def test_is_canonical_sequence():
    assert is_canonical_sequence([MOVE_IDS[m] for m in ("R", "U", "F'", "D2", "U")]) is False
    assert is_canonical_sequence([MOVE_IDS[m] for m in ("U", "D", "R", "L")]) is True
    assert is_canonical_sequence([]) is True
