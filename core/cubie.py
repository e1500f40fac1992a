"""
core/cubie.py

Представление куба 3x3x3 на уровне кубиков.

Углы (слоты 0-7):  URF UFL ULB UBR DFR DLF DBL DRB
Рёбра (слоты 0-11): UR UF UL UB DR DF DL DB FR FL BL BR

cp[slot] — какой угловой кубик стоит в слоте (номер его «родного» слота),
co[slot] — его поворот (0, 1, 2). Аналогично ep/eo для рёбер.
"""

from typing import NamedTuple, Sequence, Tuple

CORNER_NAMES = ("URF", "UFL", "ULB", "UBR", "DFR", "DLF", "DBL", "DRB")
EDGE_NAMES = ("UR", "UF", "UL", "UB", "DR", "DF", "DL", "DB", "FR", "FL", "BL", "BR")

# Канонический порядок слотов для кодировщика
CORNER_SLOTS = tuple(range(8))

SOLVED_CP = tuple(range(8))
SOLVED_CO = (0,) * 8
SOLVED_EP = tuple(range(12))
SOLVED_EO = (0,) * 12


class CubieCube:
    """Неизменяемая конфигурация куба."""
    __slots__ = ('cp', 'co', 'ep', 'eo')

    def __init__(self, cp: Sequence[int] = SOLVED_CP, co: Sequence[int] = SOLVED_CO,
                 ep: Sequence[int] = SOLVED_EP, eo: Sequence[int] = SOLVED_EO):
        self.cp = tuple(cp)
        self.co = tuple(co)
        self.ep = tuple(ep)
        self.eo = tuple(eo)

    @classmethod
    def solved(cls) -> 'CubieCube':
        return cls()

    @classmethod
    def from_corners(cls, cp: Sequence[int], co: Sequence[int]) -> 'CubieCube':
        """
        Куб с заданными углами и рёбрами на месте.

        Чётность рёбер подгоняется под чётность углов (меняются местами
        рёбра DB и DL), чтобы конфигурация оставалась достижимой.
        Таблице углов рёбра безразличны.
        """
        ep = list(SOLVED_EP)
        if permutation_parity(cp):
            ep[6], ep[7] = ep[7], ep[6]
        return cls(cp, co, ep, SOLVED_EO)

    @classmethod
    def from_corner_index(cls, index: int) -> 'CubieCube':
        from heuristics.corner_index import decode_corners
        cp, co = decode_corners(index)
        return cls.from_corners(cp, co)

    def corner(self, slot: int) -> Tuple[int, int]:
        """(метка перестановки, ориентация) кубика в слоте."""
        return self.cp[slot], self.co[slot]

    def corners(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        return self.cp, self.co

    def multiply(self, other: 'CubieCube') -> 'CubieCube':
        """
        Композиция self * other: сначала self, затем other.

        Кубик в слоте i после other приходит из слота other.cp[i],
        ориентации складываются.
        """
        cp = tuple(self.cp[j] for j in other.cp)
        co = tuple((self.co[j] + o) % 3 for j, o in zip(other.cp, other.co))
        ep = tuple(self.ep[j] for j in other.ep)
        eo = tuple((self.eo[j] + o) % 2 for j, o in zip(other.ep, other.eo))
        return CubieCube(cp, co, ep, eo)

    def is_solved(self) -> bool:
        return (self.cp == SOLVED_CP and self.co == SOLVED_CO
                and self.ep == SOLVED_EP and self.eo == SOLVED_EO)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CubieCube):
            return NotImplemented
        return (self.cp == other.cp and self.co == other.co
                and self.ep == other.ep and self.eo == other.eo)

    def __hash__(self) -> int:
        return hash((self.cp, self.co, self.ep, self.eo))

    def __repr__(self) -> str:
        return f"CubieCube(cp={self.cp}, co={self.co}, ep={self.ep}, eo={self.eo})"


def permutation_parity(perm: Sequence[int]) -> int:
    inversions = 0
    for i in range(len(perm)):
        for j in range(i + 1, len(perm)):
            if perm[i] > perm[j]:
                inversions += 1
    return inversions % 2


class CornerCube(NamedTuple):
    """
    Только углы конфигурации.

    Таблице углов рёбра не нужны, поэтому генератор по умолчанию
    работает с этим облегчённым видом и не пересчитывает ep/eo.
    """
    cp: Tuple[int, ...]
    co: Tuple[int, ...]

    @classmethod
    def from_cube(cls, cube) -> 'CornerCube':
        return cls(tuple(cube.cp), tuple(cube.co))

    def corner(self, slot: int) -> Tuple[int, int]:
        return self.cp[slot], self.co[slot]

    def corners(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        return self.cp, self.co
