# tracer/board/base.py
from abc import ABC, abstractmethod
import numpy as np

from tracer.types import CellKind, Position


class BoardBase(ABC):
    """
    电路板抽象基类
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回电路板数据矩阵 (rows, cols)，元素为 CellKind 编码。
        约定：0 表示空闲，1 表示障碍物。
        """
        pass

    @property
    @abstractmethod
    def rows(self) -> int:
        """行数"""
        pass

    @property
    @abstractmethod
    def cols(self) -> int:
        """列数"""
        pass

    @abstractmethod
    def start_position(self) -> Position:
        """起点 (元件 '1') 的栅格索引"""
        pass

    @abstractmethod
    def end_position(self) -> Position:
        """终点 (元件 '2') 的栅格索引"""
        pass

    @abstractmethod
    def cell(self, row: int, col: int) -> CellKind:
        """查询格子类型 (调用方保证不越界)"""
        pass

    @abstractmethod
    def is_inside(self, row: int, col: int) -> bool:
        """检查栅格索引是否在电路板范围内"""
        pass

    @abstractmethod
    def is_open(self, row: int, col: int) -> bool:
        """
        [关键接口] 在范围内，且格子为 OPEN 或 END。
        是否已被某条路径访问过由 TraceState 负责，不在这里判断。
        """
        pass
