# tracer/search/storage/base.py
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Storage(ABC, Generic[T]):
    """
    待扩展状态的容器 (Strategy Interface)

    搜索算法只依赖 store / retrieve / is_empty，
    换用栈或队列即可在深度优先与广度优先之间切换，而不改动搜索代码。
    不做去重：同一个格子可以被多条不同路径到达，全部保留。
    """

    @abstractmethod
    def store(self, item: T) -> None:
        """放入一个元素"""
        pass

    @abstractmethod
    def retrieve(self) -> T:
        """
        按当前策略取出一个元素
        :raises EmptyStorageError: 容器为空 (调用前应先检查 is_empty)
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @staticmethod
    def stack() -> "Storage":
        from .stack import StackStorage
        return StackStorage()

    @staticmethod
    def queue() -> "Storage":
        from .queue import QueueStorage
        return QueueStorage()
