# tracer/search/tracer.py
import time
from dataclasses import dataclass
from typing import List, Optional

from tracer.board.circuit_board import CircuitBoard
from tracer.config import StorageMode
from tracer.types import CARDINAL_OFFSETS
from tracer.search.trace_state import TraceState
from tracer.search.storage import create_storage
from tracer.interfaces import ITracerObserver
from tracer.visualization.observers import EfficientObserver


@dataclass
class SearchStats:
    """一次搜索的统计信息"""
    stored: int = 0
    retrieved: int = 0
    completed: int = 0
    best_length: Optional[int] = None
    solutions: int = 0
    elapsed_ms: float = 0.0


class CircuitTracer:
    """
    穷举搜索起点到终点之间的所有最短走线 (允许并列)。

    工作流程：
    1. 以起点四周可走的格子作为种子放入 Storage。
    2. 反复取出一个状态：
       - 已完成 (紧挨终点)：与当前最优长度比较，更短则替换、相等则追加、更长则丢弃；
       - 未完成：向四个方向上可走且未访问的格子延伸，新状态放回 Storage。
    3. Storage 为空时结束，最优集合即结果。

    Storage 的种类 (栈/队列) 只影响发现路径的先后顺序，不影响最终结果集合。
    """

    def __init__(self, storage_mode: StorageMode = StorageMode.STACK):
        self.storage_mode = storage_mode
        self.last_stats: Optional[SearchStats] = None

    def trace(self,
              board: CircuitBoard,
              observer: Optional[ITracerObserver] = None) -> List[TraceState]:
        """
        执行搜索
        :param board: 只读电路板
        :param observer: 观察者钩子 (用于记录/可视化搜索过程)
        :return: 所有并列最短的完成路径 (无解时返回空列表)
        """
        # 1. 初始化观察者
        if observer is None:
            observer = EfficientObserver()
        observer.set_board_info(board)

        stats = SearchStats()
        self.last_stats = stats
        t0 = time.perf_counter()

        observer.log("Start tracing", payload={
            'storage': self.storage_mode.name,
            'shape': board.shape,
            'start': tuple(board.start_position()),
            'end': tuple(board.end_position()),
        })

        # 连通性预检查：终点不可达时结果必然为空，跳过穷举
        if not board.is_end_reachable():
            observer.log("End is not reachable from start, no path found.", level='WARN')
            stats.elapsed_ms = (time.perf_counter() - t0) * 1000
            return []

        storage = create_storage(self.storage_mode)
        # 最优集合只属于本次调用，重复调用无需重置
        best_paths: List[TraceState] = []

        # 2. 种子
        start = board.start_position()
        for d_row, d_col in CARDINAL_OFFSETS:
            new_row, new_col = start.row + d_row, start.col + d_col
            if board.is_open(new_row, new_col):
                seed = TraceState.seed(board, new_row, new_col)
                storage.store(seed)
                stats.stored += 1
                observer.record_store(seed)

        # 3. 主循环
        while not storage.is_empty():
            current = storage.retrieve()
            stats.retrieved += 1
            observer.record_retrieve(current)

            # A. 已完成：三路比较
            if current.is_complete():
                stats.completed += 1
                accepted = True
                if not best_paths:
                    best_paths.append(current)
                elif current.length() < best_paths[0].length():
                    best_paths = [current]
                elif current.length() == best_paths[0].length():
                    best_paths.append(current)
                else:
                    accepted = False
                observer.record_solution(current, accepted)
                continue

            # B. 扩展邻居
            for d_row, d_col in CARDINAL_OFFSETS:
                new_row, new_col = current.row + d_row, current.col + d_col
                if current.is_open(new_row, new_col):
                    child = current.extend(new_row, new_col)
                    storage.store(child)
                    stats.stored += 1
                    observer.record_store(child)

        stats.solutions = len(best_paths)
        stats.best_length = best_paths[0].length() if best_paths else None
        stats.elapsed_ms = (time.perf_counter() - t0) * 1000

        if best_paths:
            observer.log(f"Found {len(best_paths)} shortest path(s) of length {stats.best_length}",
                         payload=vars(stats))
        else:
            observer.log("Storage is empty, no path found.", payload=vars(stats))
        return best_paths
