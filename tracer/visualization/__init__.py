# tracer/visualization/__init__.py
# plotter 依赖 matplotlib，按需从 tracer.visualization.plotter 导入

from .observers import EfficientObserver, ExperimentObserver, DebugObserver
from .console import format_solutions, print_solutions

__all__ = [
    "EfficientObserver",
    "ExperimentObserver",
    "DebugObserver",
    "format_solutions",
    "print_solutions",
]
