# tracer/search/trace_state.py
from typing import FrozenSet, Tuple

from tracer.board.base import BoardBase
from tracer.types import CellKind, Position


class TraceState:
    """
    搜索状态：一条从起点出发的部分走线

    - visited: 已访问格子集合 (包含起点)，frozenset 保证 O(1) 成员查询且不可变
    - path:    按顺序记录的走线格子 (不含起点)
    - head:    当前所在格子 (path 的最后一个元素)

    状态一经构造不再修改；扩展总是返回一个新的 TraceState，
    因此 Storage 中同时存在的多条分叉路径互不干扰。
    """

    __slots__ = ("_board", "_path", "_visited")

    def __init__(self, board: BoardBase, path: Tuple[Position, ...], visited: FrozenSet[Position]):
        # 一般不直接调用，使用 seed() / extend()
        self._board = board
        self._path = path
        self._visited = visited

    @classmethod
    def seed(cls, board: BoardBase, row: int, col: int) -> "TraceState":
        """起点 + 一个相邻的可走格子，长度为 1"""
        head = Position(row, col)
        return cls(board, (head,), frozenset((board.start_position(), head)))

    def extend(self, row: int, col: int) -> "TraceState":
        """
        [核心] 向 (row, col) 延伸一步。
        调用方 (CircuitTracer) 负责先用 is_open() 过滤，这里不做检查。
        """
        head = Position(row, col)
        return TraceState(self._board, self._path + (head,), self._visited | {head})

    def is_complete(self) -> bool:
        """头部与终点 4-连通相邻即完成 (起终点紧挨时，头部直接落在终点上也算)"""
        end = self._board.end_position()
        head = self.head
        return head == end or head.is_adjacent(end)

    def is_open(self, row: int, col: int) -> bool:
        """电路板上可走，且本路径尚未经过"""
        return self._board.is_open(row, col) and (row, col) not in self._visited

    def length(self) -> int:
        """从起点走过的步数"""
        return len(self._visited) - 1

    # 别名
    path_length = length

    @property
    def board(self) -> BoardBase:
        return self._board

    @property
    def path(self) -> Tuple[Position, ...]:
        return self._path

    @property
    def visited(self) -> FrozenSet[Position]:
        return self._visited

    @property
    def head(self) -> Position:
        return self._path[-1]

    @property
    def row(self) -> int:
        return self._path[-1].row

    @property
    def col(self) -> int:
        return self._path[-1].col

    def render(self) -> str:
        """电路板文本，走线格子标记为 'T'"""
        data = self._board.data.copy()
        end = self._board.end_position()
        for pos in self._path:
            if pos != end:
                data[pos] = CellKind.TRACE
        return "\n".join(" ".join(CellKind(int(v)).char for v in row) for row in data)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        cells = ", ".join(f"({p.row},{p.col})" for p in self._path)
        return f"TraceState(length={self.length()}, path=[{cells}])"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TraceState):
            return NotImplemented
        return self._board is other._board and self._path == other._path

    def __hash__(self) -> int:
        return hash((id(self._board), self._path))
