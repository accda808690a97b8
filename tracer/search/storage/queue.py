# tracer/search/storage/queue.py
from collections import deque
from typing import Deque

from .base import Storage, T
from tracer.exceptions import EmptyStorageError


class QueueStorage(Storage[T]):
    """
    队列 (FIFO)：最先放入的最先取出 -> 广度优先
    deque 保证两端操作都是 O(1)。
    """

    def __init__(self):
        self._items: Deque[T] = deque()

    def store(self, item: T) -> None:
        self._items.append(item)

    def retrieve(self) -> T:
        if not self._items:
            raise EmptyStorageError("retrieve() called on an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
