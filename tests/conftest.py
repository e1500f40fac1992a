"""
tests/conftest.py

Общие фикстуры: собранный куб, таблица до глубины 3, сброс общей таблицы.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.cubie import CubieCube
from heuristics.pattern_db import reset_corner_table
from solvers.corner_generator import generate_corner_table


@pytest.fixture
def solved_cube() -> CubieCube:
    return CubieCube.solved()


@pytest.fixture(scope="session")
def shallow_generation():
    """
    (таблица, результат) генерации до глубины 3 включительно.

    Одна на сессию: тесты только читают таблицу.
    """
    return generate_corner_table(max_depth=3, progress_interval=0)


@pytest.fixture
def shallow_table(shallow_generation):
    table, _ = shallow_generation
    return table


@pytest.fixture(autouse=True)
def _fresh_corner_table():
    """Общая таблица процесса не переживает тест."""
    reset_corner_table()
    yield
    reset_corner_table()
