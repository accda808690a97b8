# tracer/search/__init__.py

from .trace_state import TraceState
from .storage import Storage, StackStorage, QueueStorage, create_storage
from tracer.interfaces import ITracerObserver
from .tracer import CircuitTracer, SearchStats

__all__ = [
    "TraceState",
    "Storage",
    "StackStorage",
    "QueueStorage",
    "create_storage",
    "ITracerObserver",
    "CircuitTracer",
    "SearchStats",
]
