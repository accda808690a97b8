import matplotlib
matplotlib.use("Agg")

from tracer.board.circuit_board import CircuitBoard
from tracer.search.tracer import CircuitTracer
from tracer.visualization.console import format_solutions, print_solutions
from tracer.visualization.observers import ExperimentObserver
from tracer.visualization.plotter import BoardPlotter

BLOCKED_CENTER = ["1 O O", "O X O", "O O 2"]


def test_draw_one_axis_per_path():
    board = CircuitBoard.from_rows(["1 O O", "O O O", "O O 2"])
    paths = CircuitTracer().trace(board)

    fig = BoardPlotter(board, max_columns=4).draw(paths)
    visible = [ax for ax in fig.axes if ax.axison]
    assert len(visible) == len(paths) == 6
    assert visible[0].get_title().endswith("length=3")


def test_save_with_heatmap(tmp_path):
    board = CircuitBoard.from_rows(BLOCKED_CENTER)
    observer = ExperimentObserver()
    paths = CircuitTracer().trace(board, observer)

    outfile = tmp_path / "traces.png"
    BoardPlotter(board).save(paths, str(outfile), visit_counts=observer.visit_counts())
    assert outfile.exists()
    assert outfile.stat().st_size > 0


def test_save_without_paths(tmp_path):
    board = CircuitBoard.from_rows(["1 O X", "O X 2"])
    outfile = tmp_path / "empty.png"
    BoardPlotter(board).save([], str(outfile))
    assert outfile.exists()


def test_console_output(capsys):
    board = CircuitBoard.from_rows(BLOCKED_CENTER)
    paths = CircuitTracer().trace(board)

    text = format_solutions(paths)
    assert "1 T T\nO X T\nO O 2" in text
    assert "1 O O\nT X O\nT T 2" in text
    assert text.count("\n\n") == 1

    print_solutions(paths)
    assert capsys.readouterr().out == text + "\n\n"


def test_console_output_without_paths(capsys):
    assert format_solutions([]) == ""
    print_solutions([])
    assert capsys.readouterr().out == ""
