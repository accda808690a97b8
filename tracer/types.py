# tracer/types.py
from enum import IntEnum
from typing import NamedTuple, Dict


class CellKind(IntEnum):
    """
    电路板格子类型
    约定沿用栅格地图：0 表示空闲，1 表示障碍物。
    """
    OPEN = 0
    CLOSED = 1
    TRACE = 2    # 已被走线占用 (文件中的 'T')
    START = 3    # 元件起点 '1'
    END = 4      # 元件终点 '2'

    @property
    def char(self) -> str:
        return CELL_TO_CHAR[self]

    @classmethod
    def from_char(cls, char: str) -> "CellKind":
        # KeyError 由调用方 (Board/Loader) 转成 InvalidFileFormatError
        return CHAR_TO_CELL[char]


CELL_TO_CHAR: Dict[CellKind, str] = {
    CellKind.OPEN: "O",
    CellKind.CLOSED: "X",
    CellKind.TRACE: "T",
    CellKind.START: "1",
    CellKind.END: "2",
}

CHAR_TO_CELL: Dict[str, CellKind] = {c: k for k, c in CELL_TO_CHAR.items()}


class Position(NamedTuple):
    """栅格索引 (行, 列)，与普通 tuple 可直接比较"""
    row: int
    col: int

    def is_adjacent(self, other) -> bool:
        """4-连通相邻 (上下左右)"""
        return abs(self.row - other[0]) + abs(self.col - other[1]) == 1


# 4 个基本方向 (d_row, d_col)：上、下、左、右
# 顺序决定了扩展顺序，进而影响同长度路径的输出顺序
CARDINAL_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
