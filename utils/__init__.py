"""
utils - Логирование, ошибки, мониторинг
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    CornerPdbError, IndexDomainError, InvalidCubeError, MoveParseError,
    TableIOError, GenerationError, handle_errors, validate_cube
)
from .monitoring import ProgressMonitor, monitor_time

__all__ = [
    'get_logger',
    'setup_file_logging',
    'CornerPdbError',
    'IndexDomainError',
    'InvalidCubeError',
    'MoveParseError',
    'TableIOError',
    'GenerationError',
    'handle_errors',
    'validate_cube',
    'ProgressMonitor',
    'monitor_time',
]
