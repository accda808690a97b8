import logging
import time
import os
import numpy as np
from typing import Any, List, Dict, Optional
from tracer.interfaces import ITracerObserver


class EfficientObserver(ITracerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def record_store(self, state: Any): pass
    def record_retrieve(self, state: Any): pass
    def record_solution(self, state: Any, accepted: bool): pass
    def set_board_info(self, board_info: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(ITracerObserver):
    """
    实验模式
    记录入栈/入队、展开、完成路径等关键内容。
    这些信息主要用于栈与队列的比较和可视化。
    """
    def __init__(self):
        # 存储格式: List[TraceState]
        self.stored_states: List[Any] = []
        self.expanded_states: List[Any] = []
        # 进入过最优集合的完成路径 (之后可能被更短的路径替换)
        self.solutions: List[Any] = []
        # 比当前最优更长、被直接丢弃的完成路径
        self.rejected_solutions: List[Any] = []
        self.board_info = None

    def record_store(self, state: Any):
        self.stored_states.append(state)

    def record_retrieve(self, state: Any):
        self.expanded_states.append(state)

    def record_solution(self, state: Any, accepted: bool):
        if accepted:
            self.solutions.append(state)
        else:
            self.rejected_solutions.append(state)

    def set_board_info(self, board_info: Any):
        self.board_info = board_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心结果和可视化，控制台保持安静
        pass

    def visit_counts(self):
        """
        每个格子被取出处理的次数 (热力图数据)，形状与电路板相同。
        """
        if self.board_info is None:
            return None
        counts = np.zeros(self.board_info.shape, dtype=int)
        for state in self.expanded_states:
            counts[state.head] += 1
        return counts


class DebugObserver(ITracerObserver):
    """
    Debug 模式
    用于详细分析一次搜索为什么慢或者为什么无解。
    将详细日志写入文件，同时保留实验数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/tracer_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"trace_debug_{timestamp}.log")

        # logger 名带上时间戳与 id，避免多个实例共享同一个 Handler
        self.logger_name = f"TracerDebug_{timestamp}_{id(self)}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_store(self, state: Any):
        self.viz_observer.record_store(state)

    def record_retrieve(self, state: Any):
        self.viz_observer.record_retrieve(state)
        self.logger.debug(f"Retrieve: {state!r}")

    def record_solution(self, state: Any, accepted: bool):
        self.viz_observer.record_solution(state, accepted)
        verdict = "accepted" if accepted else "discarded (longer than best)"
        self.logger.debug(f"Complete path {verdict}: {state!r}")

    def set_board_info(self, board_info: Any):
        self.viz_observer.set_board_info(board_info)
        self.logger.info(f"Board Info set: {board_info!r}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """关闭文件句柄，并把本实例的 logger 从 logging 管理器中移除"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        logging.Logger.manager.loggerDict.pop(self.logger_name, None)

    # Proxy properties for ExperimentObserver compatibility
    @property
    def stored_states(self): return self.viz_observer.stored_states
    @property
    def expanded_states(self): return self.viz_observer.expanded_states
    @property
    def solutions(self): return self.viz_observer.solutions
    @property
    def rejected_solutions(self): return self.viz_observer.rejected_solutions
    @property
    def board_info(self): return self.viz_observer.board_info

    def visit_counts(self):
        return self.viz_observer.visit_counts()
