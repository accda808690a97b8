# tracer/search/storage/__init__.py

from .base import Storage
from .stack import StackStorage
from .queue import QueueStorage
from tracer.config import StorageMode


def create_storage(mode: StorageMode) -> Storage:
    """根据配置创建对应的 Storage 实例"""
    if mode == StorageMode.STACK:
        return StackStorage()
    if mode == StorageMode.QUEUE:
        return QueueStorage()
    raise ValueError(f"Unknown storage mode: {mode}")


__all__ = ["Storage", "StackStorage", "QueueStorage", "create_storage"]
