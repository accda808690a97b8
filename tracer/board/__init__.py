# tracer/board/__init__.py

from .base import BoardBase
from .circuit_board import CircuitBoard
from .loader import load_board, parse_board
from .generator import BoardGenerator

__all__ = ["BoardBase", "CircuitBoard", "load_board", "parse_board", "BoardGenerator"]
