import pytest

from tracer.board.circuit_board import CircuitBoard
from tracer.search.trace_state import TraceState


@pytest.fixture
def board():
    return CircuitBoard.from_rows([
        "1 O O",
        "O O O",
        "O O 2",
    ])


def assert_invariants(state):
    assert state.head in state.visited
    assert state.length() == len(state.visited) - 1 == len(state.path)
    assert len(set(state.path)) == len(state.path)
    assert state.board.start_position() in state.visited


def test_seed(board):
    state = TraceState.seed(board, 0, 1)
    assert state.length() == 1
    assert state.path == ((0, 1),)
    assert state.visited == {(0, 0), (0, 1)}
    assert state.head == (0, 1)
    assert (state.row, state.col) == (0, 1)
    assert not state.is_complete()
    assert_invariants(state)


def test_is_open_excludes_start_and_visited(board):
    state = TraceState.seed(board, 0, 1)
    assert not state.is_open(0, 0)     # START
    assert not state.is_open(0, 1)     # 已访问
    assert not state.is_open(-1, 1)    # 越界
    assert state.is_open(0, 2)
    assert state.is_open(1, 1)


def test_extend_returns_new_state(board):
    parent = TraceState.seed(board, 0, 1)
    child = parent.extend(1, 1)

    assert child is not parent
    assert child.length() == 2
    assert child.path == ((0, 1), (1, 1))
    assert not child.is_open(1, 1)
    # 父状态保持不变
    assert parent.length() == 1
    assert parent.is_open(1, 1)
    assert_invariants(parent)
    assert_invariants(child)


def test_divergent_children_do_not_share_visited(board):
    parent = TraceState.seed(board, 0, 1)
    left = parent.extend(1, 1)
    right = parent.extend(0, 2)
    assert (0, 2) not in left.visited
    assert (1, 1) not in right.visited


def test_complete_when_adjacent_to_end(board):
    state = TraceState.seed(board, 0, 1).extend(1, 1)
    assert not state.is_complete()
    assert state.extend(1, 2).is_complete()
    assert state.extend(2, 1).is_complete()


def test_head_on_end_counts_as_complete():
    board = CircuitBoard.from_rows(["1 2"])
    state = TraceState.seed(board, 0, 1)
    assert state.is_complete()
    assert state.length() == 1


def test_path_length_alias(board):
    state = TraceState.seed(board, 1, 0).extend(2, 0)
    assert state.path_length() == state.length() == 2


def test_render_marks_trace(board):
    state = TraceState.seed(board, 0, 1).extend(1, 1).extend(1, 2)
    assert state.render() == "1 T O\nO T T\nO O 2"
    assert str(state) == state.render()
    # 电路板本身不受影响
    assert str(board) == "1 O O\nO O O\nO O 2"


def test_render_keeps_end_char():
    board = CircuitBoard.from_rows(["1 2"])
    assert TraceState.seed(board, 0, 1).render() == "1 2"


def test_equality_and_hash(board):
    a = TraceState.seed(board, 0, 1).extend(1, 1)
    b = TraceState.seed(board, 0, 1).extend(1, 1)
    c = TraceState.seed(board, 1, 0).extend(1, 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2
