# tracer/config.py
from enum import Enum
from dataclasses import dataclass


class StorageMode(Enum):
    # 栈 (LIFO)：深度优先的探索顺序
    STACK = "-s"

    # 队列 (FIFO)：广度优先的探索顺序
    QUEUE = "-q"

    @classmethod
    def from_flag(cls, flag: str) -> "StorageMode":
        for mode in cls:
            if mode.value == flag:
                return mode
        raise ValueError(f"Unknown storage flag: {flag}")


class OutputMode(Enum):
    # 控制台打印每条最短路径
    CONSOLE = "-c"

    # matplotlib 图形窗口 (或保存为图片)
    GUI = "-g"

    @classmethod
    def from_flag(cls, flag: str) -> "OutputMode":
        for mode in cls:
            if mode.value == flag:
                return mode
        raise ValueError(f"Unknown output flag: {flag}")


@dataclass
class TracerConfig:
    storage_mode: StorageMode = StorageMode.STACK
    output_mode: OutputMode = OutputMode.CONSOLE
    debug_mode: bool = False
    log_dir: str = "logs/tracer_debug"
