"""
tests/test_table_file.py

Тесты файла таблицы:
- побайтная раскладка и обмен через поток;
- короткое чтение / запись;
- атомарное сохранение и загрузка с диска.
"""

import io
import os

from heuristics.corner_table import CornerTable, TABLE_BYTES
from cube_io import table_file
from cube_io.table_file import pack_write, pack_read, save_table, load_table


class _ShortWriter(io.RawIOBase):
    """Поток, принимающий не больше limit байт (как заполненный диск)."""

    def __init__(self, limit):
        self.limit = limit
        self.written = 0

    def writable(self):
        return True

    def write(self, data):
        n = min(len(data), self.limit - self.written)
        self.written += n
        return n


class _FailingWriter(io.RawIOBase):
    def writable(self):
        return True

    def write(self, data):
        raise OSError("No space left on device")


def _sample_table() -> CornerTable:
    table = CornerTable()
    table.set_if_unset(0, 0)
    table.set(1, 5)
    table.set(2, 3)
    table.set(1000001, 11)
    return table


def test_pack_write_exact_bytes():
    stream = io.BytesIO()
    assert pack_write(_sample_table(), stream) is True
    data = stream.getvalue()
    assert len(data) == TABLE_BYTES
    assert data[0] == 0x50
    assert data[1] == 0x03
    assert data[500000] == 0xB0


def test_pack_read_restores_table():
    original = _sample_table()
    stream = io.BytesIO()
    pack_write(original, stream)
    stream.seek(0)

    restored = CornerTable()
    assert pack_read(restored, stream) is True
    assert restored == original
    assert restored.get(1000001) == 11
    # корень после чтения неизвестен до locate_root()
    assert restored.root_index is None


def test_pack_read_short_stream_leaves_table_untouched():
    table = CornerTable()
    table.set(42, 7)
    stream = io.BytesIO(b"\x11" * (TABLE_BYTES - 1))

    assert pack_read(table, stream) is False
    assert table.get(42) == 7
    assert table.get(0) == 0


def test_pack_write_short_write():
    writer = _ShortWriter(limit=1000)
    assert pack_write(CornerTable(), writer) is False
    assert writer.written == 1000


def test_pack_write_os_error():
    assert pack_write(CornerTable(), _FailingWriter()) is False


def test_save_and_load(tmp_path):
    path = str(tmp_path / "corners.pdb")
    original = _sample_table()

    assert save_table(original, path) is True
    assert os.path.getsize(path) == TABLE_BYTES
    # временных файлов не остаётся
    assert os.listdir(tmp_path) == ["corners.pdb"]

    loaded = load_table(path)
    assert loaded == original


def test_load_missing_file(tmp_path):
    assert load_table(str(tmp_path / "missing.pdb")) is None


def test_load_truncated_file(tmp_path):
    path = tmp_path / "short.pdb"
    path.write_bytes(b"\x00" * 1024)
    assert load_table(str(path)) is None


def test_load_ignores_trailing_bytes(tmp_path):
    path = tmp_path / "long.pdb"
    path.write_bytes(b"\x21" * TABLE_BYTES + b"extra")
    table = load_table(str(path))
    assert table is not None
    assert table.get(0) == 1
    assert table.get(1) == 2


def test_load_locates_root(tmp_path, shallow_table):
    path = str(tmp_path / "shallow.pdb")
    assert save_table(shallow_table, path)
    loaded = load_table(path)
    assert loaded.root_index == 0
    assert loaded.is_set(0)


def test_failed_save_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "corners.pdb"
    path.write_bytes(b"old")
    monkeypatch.setattr(table_file, "pack_write", lambda table, stream: False)

    assert save_table(CornerTable(), str(path)) is False
    assert path.read_bytes() == b"old"
    assert os.listdir(tmp_path) == ["corners.pdb"]


def test_default_path(tmp_path, monkeypatch):
    path = str(tmp_path / "default.pdb")
    monkeypatch.setattr(table_file, "TABLE_FILE", path)

    assert save_table(_sample_table()) is True
    assert os.path.exists(path)
    assert load_table() == _sample_table()
