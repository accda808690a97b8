# tracer/search/storage/stack.py
from typing import List

from .base import Storage, T
from tracer.exceptions import EmptyStorageError


class StackStorage(Storage[T]):
    """
    栈 (LIFO)：最后放入的最先取出 -> 深度优先
    """

    def __init__(self):
        self._items: List[T] = []

    def store(self, item: T) -> None:
        self._items.append(item)

    def retrieve(self) -> T:
        if not self._items:
            raise EmptyStorageError("retrieve() called on an empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
