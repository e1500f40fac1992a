"""
heuristics/corner_table.py

Таблица расстояний углов: 88179840 значений по 4 бита, два на байт.

Байт b хранит индекс 2b в младшем полубайте и 2b+1 в старшем.
Раскладка байтов наружу не выдаётся: доступ только через методы,
сырые байты видит лишь cube_io.table_file (через buffer()).
"""

from typing import List, Optional

from utils.error_handling import IndexDomainError
from .corner_index import CORNER_STATES

TABLE_BYTES = CORNER_STATES // 2   # 44089920

UNSET = 0
MAX_NIBBLE = 15

# Таблицы перекодировки байта в его младший / старший полубайт
_LOW_NIBBLE = bytes(b & 0x0F for b in range(256))
_HIGH_NIBBLE = bytes(b >> 4 for b in range(256))


class CornerTable:
    """
    Полубайтовая таблица над bytearray.

    Значение 0 в файле означает и «не задано», и «расстояние 0».
    Чтобы корень не перезаписывался, таблица запоминает индекс,
    в который явно записали 0 (root_index), и считает его заданным.
    """
    __slots__ = ('_data', 'root_index')

    def __init__(self, fill: int = UNSET, data: Optional[bytearray] = None):
        """
        Args:
            fill: начальное значение каждого полубайта (0..15)
            data: готовый буфер ровно TABLE_BYTES байт (забирается как есть)
        """
        if data is not None:
            if len(data) != TABLE_BYTES:
                raise ValueError(f"Буфер должен быть {TABLE_BYTES} байт, а не {len(data)}")
            self._data = data
        else:
            self._data = bytearray([_fill_byte(fill)]) * TABLE_BYTES
        self.root_index: Optional[int] = None

    @classmethod
    def markers(cls) -> 'CornerTable':
        """Буфер отметок уровня: все полубайты = 15 («ещё не встречали»)."""
        return cls(fill=MAX_NIBBLE)

    def __len__(self) -> int:
        return CORNER_STATES

    def get(self, index: int) -> int:
        if not 0 <= index < CORNER_STATES:
            raise IndexDomainError(f"Индекс {index} вне таблицы")
        byte = self._data[index >> 1]
        return byte >> 4 if index & 1 else byte & 0x0F

    def set(self, index: int, value: int) -> None:
        """Безусловная запись полубайта."""
        if not 0 <= index < CORNER_STATES:
            raise IndexDomainError(f"Индекс {index} вне таблицы")
        if not 0 <= value <= MAX_NIBBLE:
            raise ValueError(f"Значение {value} не помещается в 4 бита")
        pos = index >> 1
        if index & 1:
            self._data[pos] = (self._data[pos] & 0x0F) | (value << 4)
        else:
            self._data[pos] = (self._data[pos] & 0xF0) | value

    def is_set(self, index: int) -> bool:
        return index == self.root_index or self.get(index) != UNSET

    def set_if_unset(self, index: int, value: int) -> bool:
        """
        Записывает значение, только если ячейка ещё пуста.

        Returns:
            True — запись произошла, False — дубликат
        """
        if self.is_set(index):
            return False
        self.set(index, value)
        if value == UNSET:
            self.root_index = index
        return True

    def clear(self, fill: int = UNSET) -> None:
        """Заполняет все полубайты значением fill (0..15)."""
        byte = _fill_byte(fill)
        self._data[:] = bytes([byte]) * TABLE_BYTES
        self.root_index = None

    def locate_root(self) -> Optional[int]:
        """
        Находит единственный индекс с расстоянием 0 в полной таблице.

        Для загруженной из файла таблицы root_index неизвестен.
        """
        low = self._data.translate(_LOW_NIBBLE)
        high = self._data.translate(_HIGH_NIBBLE)
        candidates = []
        pos = low.find(0)
        if pos >= 0:
            candidates.append(2 * pos)
        pos = high.find(0)
        if pos >= 0:
            candidates.append(2 * pos + 1)
        self.root_index = min(candidates) if candidates else None
        return self.root_index

    def distance_histogram(self) -> List[int]:
        """Сколько ячеек хранят каждое из значений 0..15."""
        low = self._data.translate(_LOW_NIBBLE)
        high = self._data.translate(_HIGH_NIBBLE)
        return [low.count(v) + high.count(v) for v in range(MAX_NIBBLE + 1)]

    def assigned_count(self) -> int:
        """Число заданных ячеек (ненулевые плюс корень)."""
        nonzero = CORNER_STATES - self.distance_histogram()[UNSET]
        return nonzero + (1 if self.root_index is not None else 0)

    def buffer(self) -> memoryview:
        """Сырые байты для чтения/записи файла."""
        return memoryview(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CornerTable):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"CornerTable(root_index={self.root_index})"


def _fill_byte(fill: int) -> int:
    if not 0 <= fill <= MAX_NIBBLE:
        raise ValueError(f"Значение {fill} не помещается в 4 бита")
    return fill | (fill << 4)
