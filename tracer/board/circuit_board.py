# tracer/board/circuit_board.py
import numpy as np
from typing import List, Optional, Sequence, Tuple, Union
from scipy.ndimage import label

from .base import BoardBase
from tracer.types import CellKind, Position, CHAR_TO_CELL
from tracer.exceptions import InvalidFileFormatError, OccupiedPositionError

_VALID_CODES = np.array([kind.value for kind in CellKind], dtype=np.int8)

# 可通行格子 (用于连通性预检查)
_PASSABLE = (CellKind.OPEN, CellKind.START, CellKind.END)


class CircuitBoard(BoardBase):
    """
    电路板 (只读栅格)

    构造完成后不可修改：内部矩阵的 writeable 标志被关闭，
    所有 TraceState 共享同一个实例而无需拷贝。
    """

    def __init__(self,
                 data: Union[np.ndarray, Sequence[Sequence[int]]],
                 start: Optional[Tuple[int, int]] = None,
                 end: Optional[Tuple[int, int]] = None):
        grid = self._to_matrix(data)

        # 1. 统计已声明的起点/终点
        starts = self._positions_of(grid, CellKind.START)
        ends = self._positions_of(grid, CellKind.END)
        if len(starts) > 1:
            raise OccupiedPositionError(f"Board declares {len(starts)} start cells: {starts}")
        if len(ends) > 1:
            raise OccupiedPositionError(f"Board declares {len(ends)} end cells: {ends}")

        # 2. 显式放置起点/终点 (例如由 BoardGenerator 给出)
        if start is not None and end is not None and tuple(start) == tuple(end):
            raise OccupiedPositionError(f"Start and end coincide at {tuple(start)}")
        if start is not None:
            self._place(grid, CellKind.START, start, starts)
        if end is not None:
            self._place(grid, CellKind.END, end, ends)

        starts = self._positions_of(grid, CellKind.START)
        ends = self._positions_of(grid, CellKind.END)
        if not starts:
            raise InvalidFileFormatError("Board has no start cell ('1')")
        if not ends:
            raise InvalidFileFormatError("Board has no end cell ('2')")

        grid.setflags(write=False)
        self._grid = grid
        self._rows, self._cols = grid.shape
        self._start = starts[0]
        self._end = ends[0]

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[str]]], **kwargs) -> "CircuitBoard":
        """
        由字符行构造，例如 ["1 O O", "O X O", "O O 2"]。
        字符之间的空白可有可无。
        """
        matrix = []
        for r, row in enumerate(rows):
            chars = row.split() if isinstance(row, str) else list(row)
            if isinstance(row, str) and len(chars) == 1 and len(chars[0]) > 1:
                chars = list(chars[0])
            try:
                matrix.append([CHAR_TO_CELL[c].value for c in chars])
            except KeyError as e:
                raise InvalidFileFormatError(f"Unknown cell char {e.args[0]!r} in row {r}") from None
        return cls(matrix, **kwargs)

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def start(self) -> Position:
        return self._start

    @property
    def end(self) -> Position:
        return self._end

    def start_position(self) -> Position:
        return self._start

    def end_position(self) -> Position:
        return self._end

    def is_inside(self, row: int, col: int) -> bool:
        return (0 <= row < self._rows) and (0 <= col < self._cols)

    def cell(self, row: int, col: int) -> CellKind:
        return CellKind(int(self._grid[row, col]))

    def is_open(self, row: int, col: int) -> bool:
        if not self.is_inside(row, col):
            return False  # 越界视为不可走
        kind = self._grid[row, col]
        return bool(kind == CellKind.OPEN or kind == CellKind.END)

    def is_end_reachable(self) -> bool:
        """
        连通性预检查：起点与终点是否位于同一个 4-连通区域。
        scipy.ndimage.label 的默认结构元素即为十字形 (4-连通)。
        """
        passable = np.isin(self._grid, [k.value for k in _PASSABLE])
        labels, _ = label(passable)
        return bool(labels[self._start] == labels[self._end])

    def to_rows(self) -> List[str]:
        return [" ".join(CellKind(int(v)).char for v in row) for row in self._grid]

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def __repr__(self) -> str:
        return f"CircuitBoard(rows={self._rows}, cols={self._cols}, start={tuple(self._start)}, end={tuple(self._end)})"

    # --- 内部辅助 ---

    @staticmethod
    def _to_matrix(data) -> np.ndarray:
        """校验形状与编码，返回可写的 int8 拷贝"""
        if isinstance(data, np.ndarray):
            grid = data
        else:
            rows = [list(r) for r in data]
            if not rows or not rows[0]:
                raise InvalidFileFormatError("Board must have at least one row and one column")
            widths = {len(r) for r in rows}
            if len(widths) != 1:
                raise InvalidFileFormatError(f"Board rows have unequal lengths: {sorted(widths)}")
            # 先不指定 dtype，避免 int8 强转时截断小数或溢出回绕
            grid = np.array(rows)

        if grid.ndim != 2:
            raise InvalidFileFormatError(f"Board must be 2-D, got {grid.ndim}-D")
        if grid.shape[0] < 1 or grid.shape[1] < 1:
            raise InvalidFileFormatError("Board must have at least one row and one column")
        if not np.issubdtype(grid.dtype, np.integer):
            raise InvalidFileFormatError(f"Board cells must be integer codes, got dtype {grid.dtype}")

        unknown = ~np.isin(grid, _VALID_CODES)
        if np.any(unknown):
            r, c = np.argwhere(unknown)[0]
            raise InvalidFileFormatError(f"Unknown cell code {grid[r, c]} at ({r}, {c})")
        return grid.astype(np.int8, copy=True)

    @staticmethod
    def _positions_of(grid: np.ndarray, kind: CellKind) -> List[Position]:
        return [Position(int(r), int(c)) for r, c in np.argwhere(grid == kind)]

    @staticmethod
    def _place(grid: np.ndarray, kind: CellKind, pos: Tuple[int, int], declared: List[Position]):
        row, col = pos
        if not (0 <= row < grid.shape[0] and 0 <= col < grid.shape[1]):
            raise InvalidFileFormatError(f"{kind.name} position {tuple(pos)} is outside the board")
        if declared and declared[0] != (row, col):
            raise OccupiedPositionError(f"{kind.name} already declared at {tuple(declared[0])}")
        current = CellKind(int(grid[row, col]))
        if current not in (CellKind.OPEN, kind):
            raise OccupiedPositionError(f"Cannot place {kind.name} on {current.name} cell at {tuple(pos)}")
        grid[row, col] = kind
