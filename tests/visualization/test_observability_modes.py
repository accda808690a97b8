import glob
import logging
import os

import pytest

from tracer.board.circuit_board import CircuitBoard
from tracer.config import StorageMode
from tracer.search.tracer import CircuitTracer
from tracer.visualization.observers import EfficientObserver, ExperimentObserver, DebugObserver


@pytest.fixture
def tracer_setup():
    board = CircuitBoard.from_rows([
        "1 O O O",
        "O X X O",
        "O O O 2",
    ])
    tracer = CircuitTracer(StorageMode.STACK)
    return tracer, board


def test_efficient_mode(tracer_setup):
    tracer, board = tracer_setup
    observer = EfficientObserver()

    paths = tracer.trace(board, observer)

    assert paths
    # EfficientObserver 不保存任何记录
    assert not hasattr(observer, 'expanded_states')
    assert not hasattr(observer, 'stored_states')


def test_efficient_mode_prints_only_errors(capsys):
    observer = EfficientObserver()
    observer.log("quiet")
    observer.log("loud", level='ERROR')
    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "[ERROR] loud" in out


def test_experiment_mode(tracer_setup):
    tracer, board = tracer_setup
    observer = ExperimentObserver()

    paths = tracer.trace(board, observer)

    assert observer.board_info is board
    assert len(observer.stored_states) > 0
    assert len(observer.expanded_states) == len(observer.stored_states)
    # 最终结果一定出现在被接受的完成路径中
    for p in paths:
        assert p in observer.solutions


def test_visit_counts(tracer_setup):
    tracer, board = tracer_setup
    observer = ExperimentObserver()
    assert observer.visit_counts() is None

    tracer.trace(board, observer)
    counts = observer.visit_counts()

    assert counts.shape == board.shape
    assert counts.sum() == len(observer.expanded_states)
    assert counts[board.start_position()] == 0


def test_debug_mode(tracer_setup, tmp_path):
    tracer, board = tracer_setup
    log_dir = str(tmp_path / "tracer_debug")

    observer = DebugObserver(log_dir=log_dir)
    paths = tracer.trace(board, observer)
    observer.close()

    # 1. 兼容 Experiment 模式
    assert len(observer.expanded_states) > 0
    assert observer.board_info is board
    assert len(observer.solutions) >= len(paths)

    # 2. 检查日志文件
    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1
    assert observer.log_file == log_files[0]

    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Debug Session Started" in content
    assert "Start tracing" in content
    assert "shortest path(s)" in content
    assert "Retrieve: TraceState" in content


def test_debug_mode_logs_unreachable_end_as_warning(tmp_path):
    board = CircuitBoard.from_rows(["1 O X", "O X 2"])
    observer = DebugObserver(log_dir=str(tmp_path))
    assert CircuitTracer().trace(board, observer) == []
    observer.close()

    with open(observer.log_file, 'r', encoding='utf-8') as f:
        content = f.read()
    assert "WARNING - End is not reachable" in content


def test_debug_observers_do_not_accumulate_loggers(tmp_path):
    names = []
    for i in range(3):
        observer = DebugObserver(log_dir=str(tmp_path / f"run{i}"))
        assert observer.logger_name in logging.Logger.manager.loggerDict
        names.append(observer.logger_name)
        observer.close()
        assert observer.logger.handlers == []

    assert len(set(names)) == 3
    for name in names:
        assert name not in logging.Logger.manager.loggerDict
