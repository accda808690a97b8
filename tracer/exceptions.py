# tracer/exceptions.py


class CircuitBoardError(Exception):
    """电路板构造阶段的错误基类"""


class InvalidFileFormatError(CircuitBoardError, ValueError):
    """
    输入格式非法：
    声明的尺寸与实际行列数不符、出现未知字符、缺少起点或终点等。
    """


class OccupiedPositionError(CircuitBoardError, ValueError):
    """
    位置冲突：
    起点/终点重复声明、起点与终点重合、或被放在障碍物上。
    """


class EmptyStorageError(IndexError):
    """
    对空 Storage 调用 retrieve()。
    属于调用方的编程错误，搜索循环必须先检查 is_empty()。
    """
