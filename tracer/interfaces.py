from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ITracerObserver(ABC):
    """
    走线搜索观察者接口
    用于解耦搜索算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录关键数据用于可视化
    3. Debug: 详细日志记录用于问题排查
    """

    @abstractmethod
    def record_store(self, state: Any):
        """记录放入 Storage 的状态"""
        pass

    @abstractmethod
    def record_retrieve(self, state: Any):
        """记录从 Storage 取出、正在处理的状态"""
        pass

    @abstractmethod
    def record_solution(self, state: Any, accepted: bool):
        """记录一条完成的路径，以及它是否进入最优集合"""
        pass

    @abstractmethod
    def set_board_info(self, board_info: Any):
        """设置电路板信息 (用于可视化背景等)"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如统计信息、配置参数等)
        """
        pass
