"""
analysis - Проверка таблицы

Экспортирует:
- Независимый BFS по углам
- Сверку таблицы с BFS
"""

from .verify import bfs_corner_distances, depth_counts, cross_check_table

__all__ = [
    'bfs_corner_distances',
    'depth_counts',
    'cross_check_table',
]
