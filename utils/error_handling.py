"""
utils/error_handling.py

Иерархия исключений и обработка ошибок ввода-вывода.
"""

from typing import Callable, Any
from functools import wraps

from core.cubie import permutation_parity

from .logging import get_logger


class CornerPdbError(Exception):
    """Базовое исключение проекта."""
    pass


class IndexDomainError(CornerPdbError):
    """Индекс вне [0, 88179840): дефект кодировщика или недостижимая позиция."""
    pass


class InvalidCubeError(CornerPdbError):
    """Невалидная (недостижимая или искажённая) конфигурация куба."""
    pass


class MoveParseError(CornerPdbError, ValueError):
    """Ошибка разбора нотации ходов."""
    pass


class TableIOError(CornerPdbError):
    """Нет пригодной таблицы (файл отсутствует или обрезан)."""
    pass


class GenerationError(CornerPdbError):
    """Поиск исчерпан, а кодомен покрыт не полностью."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True):
    """
    Декоратор для файловых операций.

    Ловит только ошибки проекта и OSError: логирует и возвращает
    default_return. Всё остальное пробрасывается дальше.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (CornerPdbError, OSError) as e:
                if log_error:
                    get_logger().error(f"{func.__name__}: {e}")
                return default_return
        return wrapper
    return decorator


def validate_cube(cube) -> bool:
    """
    Проверяет, что конфигурация достижима.

    Условия:
    - cp, ep — перестановки 0..7 и 0..11;
    - ориентации углов в {0,1,2} с суммой ≡ 0 (mod 3);
    - ориентации рёбер в {0,1} с суммой ≡ 0 (mod 2);
    - чётности перестановок углов и рёбер совпадают.

    Raises:
        InvalidCubeError: если конфигурация невалидна
    """
    if cube is None:
        raise InvalidCubeError("Куб не может быть None")

    if sorted(cube.cp) != list(range(8)):
        raise InvalidCubeError(f"cp не является перестановкой углов: {cube.cp}")
    if sorted(cube.ep) != list(range(12)):
        raise InvalidCubeError(f"ep не является перестановкой рёбер: {cube.ep}")

    if any(o not in (0, 1, 2) for o in cube.co):
        raise InvalidCubeError(f"Ориентация угла вне {{0,1,2}}: {cube.co}")
    if sum(cube.co) % 3:
        raise InvalidCubeError("Сумма ориентаций углов не кратна 3")

    if any(o not in (0, 1) for o in cube.eo):
        raise InvalidCubeError(f"Ориентация ребра вне {{0,1}}: {cube.eo}")
    if sum(cube.eo) % 2:
        raise InvalidCubeError("Сумма ориентаций рёбер нечётна")

    if permutation_parity(cube.cp) != permutation_parity(cube.ep):
        raise InvalidCubeError("Чётности перестановок углов и рёбер не совпадают")

    return True
