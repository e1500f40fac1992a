"""
cube_io - Ввод/вывод

Экспортирует:
- Чтение/запись файла таблицы углов
- Парсинг ходов и углов
- Текстовый вывод
"""

from .table_file import pack_write, pack_read, save_table, load_table, TABLE_FILE
from .parser import parse_moves, format_moves, parse_corners
from .visualizer import format_corners, format_histogram, format_stats

__all__ = [
    'pack_write',
    'pack_read',
    'save_table',
    'load_table',
    'TABLE_FILE',
    'parse_moves',
    'format_moves',
    'parse_corners',
    'format_corners',
    'format_histogram',
    'format_stats',
]
