"""
cube_io/table_file.py

Чтение и запись таблицы углов.

Формат файла: ровно 44089920 байт, без заголовка, полубайты как в памяти.
Файл побайтно совместим с ранее сгенерированными таблицами.
"""

import os
import tempfile
from typing import BinaryIO, Optional

from heuristics.corner_table import CornerTable, TABLE_BYTES
from utils.error_handling import handle_errors
from utils.logging import get_logger
from utils.monitoring import monitor_time

TABLE_FILE = os.environ.get("CORNER_PDB_FILE", "corners.pdb")

# Размер порции при чтении
READ_CHUNK = 1 << 20


def pack_write(table: CornerTable, stream: BinaryIO) -> bool:
    """
    Пишет ровно TABLE_BYTES байт таблицы в поток.

    Returns:
        False, если записано меньше (например, диск заполнен)
    """
    logger = get_logger()
    view = table.buffer()
    written = 0
    try:
        while written < TABLE_BYTES:
            n = stream.write(view[written:])
            # Небуферизованный поток может вернуть None или 0
            if not n:
                break
            written += n
    except OSError as e:
        logger.error(f"Ошибка записи таблицы: {e}")
        return False
    finally:
        view.release()

    if written < TABLE_BYTES:
        logger.error(f"Записано {written} из {TABLE_BYTES} байт")
        return False
    return True


def pack_read(table: CornerTable, stream: BinaryIO) -> bool:
    """
    Читает ровно TABLE_BYTES байт из потока в таблицу.

    Данные сначала читаются во временный буфер: при коротком чтении
    таблица остаётся нетронутой, обрезанный файл никогда не используется.

    Returns:
        False, если в потоке меньше TABLE_BYTES байт
    """
    logger = get_logger()
    scratch = bytearray(TABLE_BYTES)
    view = memoryview(scratch)
    got = 0
    try:
        while got < TABLE_BYTES:
            n = stream.readinto(view[got:got + READ_CHUNK])
            if not n:
                break
            got += n
    except OSError as e:
        logger.error(f"Ошибка чтения таблицы: {e}")
        return False
    finally:
        view.release()

    if got < TABLE_BYTES:
        logger.error(f"Прочитано {got} из {TABLE_BYTES} байт: таблица обрезана")
        return False

    target = table.buffer()
    try:
        target[:] = scratch
    finally:
        target.release()
    table.root_index = None
    return True


@handle_errors(default_return=False)
@monitor_time('save_table')
def save_table(table: CornerTable, path: Optional[str] = None) -> bool:
    """
    Сохраняет таблицу в файл атомарно.

    Пишем во временный файл в той же директории, затем os.replace:
    под целевым именем никогда не появляется неполный файл.
    """
    path = path or TABLE_FILE
    directory = os.path.dirname(os.path.abspath(path))
    temp_fd, temp_file = tempfile.mkstemp(suffix='.pdb.tmp', dir=directory)
    try:
        with open(temp_fd, 'wb') as f:
            ok = pack_write(table, f)
        if not ok:
            return False
        os.replace(temp_file, path)
        temp_file = None
    finally:
        if temp_file and os.path.exists(temp_file):
            os.remove(temp_file)

    get_logger().info(f"Таблица сохранена в {path}")
    return True


@handle_errors(default_return=None)
@monitor_time('load_table')
def load_table(path: Optional[str] = None) -> Optional[CornerTable]:
    """
    Загружает таблицу из файла.

    Returns:
        CornerTable или None, если файла нет или он обрезан
    """
    path = path or TABLE_FILE
    if not os.path.exists(path):
        get_logger().warning(f"Файл таблицы не найден: {path}")
        return None

    table = CornerTable()
    with open(path, 'rb') as f:
        if not pack_read(table, f):
            return None

    table.locate_root()
    size = os.path.getsize(path)
    if size > TABLE_BYTES:
        get_logger().warning(f"В {path} лишние {size - TABLE_BYTES} байт после таблицы")
    return table
