# tracer/visualization/console.py
from typing import Sequence, TextIO
import sys


def format_solutions(paths: Sequence) -> str:
    """每条路径渲染为一张电路板 (走线标记为 'T')，之间以空行分隔"""
    return "\n\n".join(p.render() for p in paths)


def print_solutions(paths: Sequence, out: TextIO = None):
    if out is None:
        out = sys.stdout
    for p in paths:
        out.write(p.render() + "\n\n")
