# tracer/__init__.py

from .types import CellKind, Position, CARDINAL_OFFSETS
from .config import StorageMode, OutputMode, TracerConfig
from .exceptions import (
    CircuitBoardError,
    InvalidFileFormatError,
    OccupiedPositionError,
    EmptyStorageError,
)

__all__ = [
    "CellKind",
    "Position",
    "CARDINAL_OFFSETS",
    "StorageMode",
    "OutputMode",
    "TracerConfig",
    "CircuitBoardError",
    "InvalidFileFormatError",
    "OccupiedPositionError",
    "EmptyStorageError",
]
