# tracer/board/generator.py
import random
import numpy as np
from typing import Tuple, Optional

from .circuit_board import CircuitBoard
from tracer.types import CellKind, Position


class BoardGenerator:
    """
    随机电路板生成器
    随机撒障碍物，并在起终点之间“推”出若干条通道，保证至少存在一条路。
    """

    def __init__(
        self,
        obstacle_density: float = 0.2,
        extra_corridors: int = 0,
        seed: Optional[int] = None
    ):
        self.density = obstacle_density
        self.extra_corridors = extra_corridors
        self.seed = seed

        # 使用独立的随机源，避免影响全局随机状态
        self._rng = np.random.default_rng(seed)
        self._py_rng = random.Random(seed)

    def generate(self, rows: int, cols: int,
                 start: Tuple[int, int] = (0, 0),
                 end: Optional[Tuple[int, int]] = None) -> CircuitBoard:
        if end is None:
            end = (rows - 1, cols - 1)

        # 1. 随机障碍底图
        data = np.where(self._rng.random((rows, cols)) < self.density,
                        CellKind.CLOSED, CellKind.OPEN).astype(np.int8)

        # 2. 清除起终点
        data[start] = CellKind.OPEN
        data[end] = CellKind.OPEN

        # 3. 主通道 + 冗余通道
        self._carve_corridor(data, Position(*start), Position(*end))
        for _ in range(self.extra_corridors):
            self._carve_corridor(data, Position(*start), Position(*end))

        return CircuitBoard(data, start=start, end=end)

    def _carve_corridor(self, data: np.ndarray, start: Position, end: Position):
        """
        随机单调走廊：每一步随机选择沿行或沿列靠近终点，并清除经过的格子。
        """
        row, col = start
        while (row, col) != tuple(end):
            step_row = row != end.row and (col == end.col or self._py_rng.random() < 0.5)
            if step_row:
                row += 1 if end.row > row else -1
            else:
                col += 1 if end.col > col else -1
            data[row, col] = CellKind.OPEN
