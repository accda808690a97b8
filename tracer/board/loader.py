# tracer/board/loader.py
"""
电路板文件加载

文件格式：
    ROWS COLS
    1 O O
    O X O
    O O 2

第一行为行数与列数，其后每行为 COLS 个以空白分隔的字符 (O/X/T/1/2)。
"""
from typing import List

from .circuit_board import CircuitBoard
from tracer.types import CHAR_TO_CELL
from tracer.exceptions import InvalidFileFormatError


def parse_board(text: str) -> CircuitBoard:
    """解析电路板文本，返回只读的 CircuitBoard"""
    lines = [line.strip() for line in text.splitlines()]
    # 去掉首尾空行 (中间的空行视为格式错误，会导致行数不符)
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise InvalidFileFormatError("Empty board description")

    # 1. 解析尺寸
    header = lines[0].split()
    if len(header) != 2:
        raise InvalidFileFormatError(f"Header must be 'ROWS COLS', got {lines[0]!r}")
    try:
        n_rows, n_cols = int(header[0]), int(header[1])
    except ValueError:
        raise InvalidFileFormatError(f"Header dimensions must be integers, got {lines[0]!r}") from None
    if n_rows < 1 or n_cols < 1:
        raise InvalidFileFormatError(f"Board dimensions must be positive, got {n_rows}x{n_cols}")

    # 2. 逐行校验
    body = lines[1:]
    if len(body) != n_rows:
        raise InvalidFileFormatError(f"Expected {n_rows} rows, found {len(body)}")

    matrix: List[List[int]] = []
    for r, line in enumerate(body):
        tokens = line.split()
        if len(tokens) != n_cols:
            raise InvalidFileFormatError(f"Row {r}: expected {n_cols} columns, found {len(tokens)}")
        row = []
        for c, token in enumerate(tokens):
            if token not in CHAR_TO_CELL:
                raise InvalidFileFormatError(f"Row {r}, col {c}: unknown cell char {token!r}")
            row.append(CHAR_TO_CELL[token].value)
        matrix.append(row)

    # 3. 起终点数量/位置的校验交给 CircuitBoard
    return CircuitBoard(matrix)


def load_board(path: str) -> CircuitBoard:
    """从文件加载电路板 (文件不存在时 FileNotFoundError 原样抛出)"""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_board(text)
