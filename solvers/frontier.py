"""
solvers/frontier.py

Явный стек узлов фронтира вместо рекурсии.
"""

from typing import Any, List, NamedTuple, Optional


class FrontierNode(NamedTuple):
    cube: Any
    move: Optional[int]   # последний применённый ход, None у корня
    distance: int


class FrontierStack:
    """LIFO над списком; запоминает пиковый размер."""
    __slots__ = ('_items', 'max_size')

    def __init__(self):
        self._items: List[FrontierNode] = []
        self.max_size = 0

    def push(self, node: FrontierNode) -> None:
        self._items.append(node)
        if len(self._items) > self.max_size:
            self.max_size = len(self._items)

    def pop(self) -> FrontierNode:
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
