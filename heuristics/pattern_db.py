"""
heuristics/pattern_db.py

Таблица углов как оракул для поиска: нижняя граница числа ходов.

Таблица загружается один раз на процесс и дальше только читается,
поэтому её можно разделять между любым числом потребителей.
Построение «на лету» не предусмотрено: полная генерация занимает часы,
её запускают отдельно (main.py generate).
"""

from typing import Optional

from utils.error_handling import TableIOError
from .corner_index import encode_corners
from .corner_table import CornerTable

# Глобальная таблица (ленивая загрузка) и файл, из которого она взята
_corner_table: Optional[CornerTable] = None
_corner_table_path: Optional[str] = None


def get_corner_table(path: Optional[str] = None) -> CornerTable:
    """
    Получает загруженную таблицу или загружает её с диска.

    Без path возвращается уже загруженная таблица, а если её нет —
    читается TABLE_FILE. Другой path перечитывает таблицу; при ошибке
    прежняя остаётся на месте.

    Raises:
        TableIOError: если файла нет или он обрезан
    """
    global _corner_table, _corner_table_path

    if _corner_table is not None and path in (None, _corner_table_path):
        return _corner_table

    from cube_io.table_file import load_table, TABLE_FILE

    path = path or TABLE_FILE
    table = load_table(path)
    if table is None:
        raise TableIOError(f"Нет пригодной таблицы углов: {path}")
    _corner_table, _corner_table_path = table, path
    return table


def set_corner_table(table: Optional[CornerTable], path: Optional[str] = None) -> None:
    """
    Подменяет общую таблицу (уже загруженную или сгенерированную).

    path — файл, которому таблица соответствует: запрос с тем же path
    вернёт её, не читая диск.
    """
    global _corner_table, _corner_table_path
    _corner_table = table
    _corner_table_path = path if table is not None else None


def reset_corner_table() -> None:
    set_corner_table(None)


def corner_heuristic(cube, table: Optional[CornerTable] = None) -> int:
    """
    Нижняя граница числа ходов до сборки углов.

    Args:
        cube: конфигурация
        table: явная таблица; по умолчанию — общая
    """
    if table is None:
        table = get_corner_table()
    return table.get(encode_corners(cube))
