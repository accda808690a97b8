import os

import matplotlib
matplotlib.use("Agg")
import pytest

from experiments.run_tracer import main

BOARDS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "boards")


def board_path(name):
    return os.path.join(BOARDS_DIR, name)


@pytest.mark.parametrize("flag", ["-s", "-q"])
def test_console_run(flag, capsys):
    assert main([flag, "-c", board_path("open3x3.dat")]) == 0
    out = capsys.readouterr().out
    # 只输出解，6 条并列最短路径
    assert out.startswith("1 ")
    assert out.count("2\n\n") == 6
    assert "1 T T\nO O T\nO O 2" in out


def test_console_run_without_paths(capsys):
    assert main(["-q", "-c", board_path("walled.dat")]) == 0
    out = capsys.readouterr().out
    assert out == ""


@pytest.mark.parametrize("argv", [
    [],
    ["-s", "-c"],
    ["-x", "-c", "board.dat"],
    ["-s", "-q", "-c", "board.dat"],
    ["-s", "-c", "-g", "board.dat"],
])
def test_bad_arguments_exit_with_usage(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: run_tracer.py [-s|-q] [-c|-g] [filename]\n")


def test_invalid_board_reports_error(capsys):
    assert main(["-s", "-c", board_path("invalid_two_starts.dat")]) == 1
    assert "OccupiedPositionError" in capsys.readouterr().out

    assert main(["-s", "-c", board_path("invalid_dims.dat")]) == 1
    assert "InvalidFileFormatError" in capsys.readouterr().out


def test_missing_file(capsys):
    assert main(["-s", "-c", "no/such/board.dat"]) == 1
    assert "FileNotFoundError" in capsys.readouterr().out


def test_gui_run_saves_figure(tmp_path):
    outfile = tmp_path / "gui.png"
    assert main(["-q", "-g", board_path("valid2.dat"), "--save", str(outfile)]) == 0
    assert outfile.exists()


def test_debug_run_writes_log(tmp_path, capsys):
    log_dir = tmp_path / "debug"
    assert main(["-s", "-c", board_path("valid1.dat"), "--debug", "--log-dir", str(log_dir)]) == 0
    assert "Debug log written to" in capsys.readouterr().out
    log_files = list(log_dir.glob("*.log"))
    assert len(log_files) == 1
    assert "Loaded valid1.dat: 5x6" in log_files[0].read_text(encoding="utf-8")
