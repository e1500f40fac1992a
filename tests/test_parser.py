"""
tests/test_parser.py

Тесты разбора нотации ходов и описания углов, текстового вывода.
"""

import pytest

from core.cubie import CubieCube
from core.moves import MOVE_IDS, apply_sequence
from cube_io.parser import parse_moves, format_moves, parse_corners
from cube_io.visualizer import format_corners, format_histogram, format_stats
from solvers.base import GeneratorStats
from utils.error_handling import InvalidCubeError, MoveParseError


def test_parse_moves_basic():
    assert parse_moves("R U2 F'") == [MOVE_IDS["R"], MOVE_IDS["U2"], MOVE_IDS["F'"]]


def test_parse_moves_separators_and_typographic_prime():
    assert parse_moves("  R,U’ ,, D2 ") == [MOVE_IDS["R"], MOVE_IDS["U'"], MOVE_IDS["D2"]]


def test_parse_moves_empty():
    assert parse_moves("") == []
    assert parse_moves("   ") == []


@pytest.mark.parametrize("text", ["X", "R2'", "r", "RU", "U3"])
def test_parse_moves_rejects(text):
    with pytest.raises(MoveParseError):
        parse_moves(text)


def test_move_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_moves("Q")


def test_format_moves_roundtrip():
    text = "R U2 F' D L2 B'"
    assert format_moves(parse_moves(text)) == text


def test_parse_corners_solved():
    cube = parse_corners("URF UFL ULB UBR DFR DLF DBL DRB")
    assert cube.is_solved()


def test_parse_corners_matches_moves():
    """Описание углов после R совпадает с результатом хода."""
    moved = apply_sequence(CubieCube.solved(), [MOVE_IDS["R"]])
    tokens = [part.split(":")[1] for part in format_corners(moved).split()]
    assert tokens[0] == "DFR2"
    cube = parse_corners(" ".join(tokens))
    assert cube.corners() == moved.corners()


def test_parse_corners_odd_permutation():
    cube = parse_corners("UFL URF ULB UBR DFR DLF DBL DRB")
    assert cube.cp[:2] == (1, 0)


def test_parse_corners_wrong_count():
    with pytest.raises(MoveParseError):
        parse_corners("URF UFL")


def test_parse_corners_unknown_name():
    with pytest.raises(MoveParseError):
        parse_corners("URF UFL ULB UBR DFR DLF DBL XYZ")


def test_parse_corners_duplicate():
    with pytest.raises(InvalidCubeError):
        parse_corners("URF URF ULB UBR DFR DLF DBL DRB")


def test_parse_corners_bad_twist_sum():
    with pytest.raises(InvalidCubeError):
        parse_corners("URF1 UFL ULB UBR DFR DLF DBL DRB")


def test_format_corners_solved(solved_cube):
    assert format_corners(solved_cube).startswith("URF:URF UFL:UFL")


def test_format_histogram_unset_row():
    histogram = [10, 18, 0, 0] + [0] * 12
    text = format_histogram(histogram, root_known=True, total=28)
    assert "не задано" in text
    assert "9" in text.splitlines()[-1]


def test_format_histogram_full_table():
    histogram = [1, 18, 243] + [0] * 13
    text = format_histogram(histogram)
    assert "не задано" not in text
    assert "243" in text


def test_format_stats():
    text = format_stats(GeneratorStats(hashed=5, traversed=9, depth=1))
    assert "5" in text and "9" in text
