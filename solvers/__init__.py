"""
solvers - Генерация таблицы углов

Экспортирует:
- CornerTableGenerator: IDDFS с явным стеком и отметками уровня
- FrontierStack / FrontierNode: стек фронтира
- GeneratorStats / GenerationResult / GenerationStatus
"""

from .base import GeneratorStats, GenerationResult, GenerationStatus
from .frontier import FrontierNode, FrontierStack
from .corner_generator import (
    CornerTableGenerator,
    generate_corner_table,
    PROGRESS_INTERVAL,
    MAX_LEVEL
)

__all__ = [
    'GeneratorStats',
    'GenerationResult',
    'GenerationStatus',
    'FrontierNode',
    'FrontierStack',
    'CornerTableGenerator',
    'generate_corner_table',
    'PROGRESS_INTERVAL',
    'MAX_LEVEL',
]
